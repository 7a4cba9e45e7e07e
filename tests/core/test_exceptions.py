"""Tests for the exception hierarchy."""

from ledger_datastore.core.exceptions import (
    ConnectionFailure,
    DatastoreError,
    FileNotFound,
    NetworkFailure,
    PermissionDenied,
    ReadFailure,
    StorageFailure,
    StorageNotFound,
    StorageUnavailable,
    WriteFailure,
    create_error_response,
)


def test_default_error_code_is_class_name():
    error = StorageUnavailable("node down")
    
    assert error.error_code == "StorageUnavailable"
    assert error.details == {}
    assert str(error) == "node down"


def test_hierarchy():
    for cls in (StorageUnavailable, WriteFailure, ReadFailure, StorageNotFound):
        assert issubclass(cls, StorageFailure)
    assert issubclass(ConnectionFailure, NetworkFailure)
    assert issubclass(NetworkFailure, DatastoreError)


def test_file_not_found_details():
    error = FileNotFound("File not found: 999", file_id=999)
    
    assert error.error_code == "FILE_NOT_FOUND"
    assert error.details == {"file_id": 999}


def test_permission_denied_details():
    error = PermissionDenied("nope", file_id=1, entity="0xbb", operation="set_filename")
    
    assert error.details == {"file_id": 1, "entity": "0xbb", "operation": "set_filename"}


def test_create_error_response():
    response = create_error_response(FileNotFound("File not found: 3", file_id=3))
    
    assert response == {
        "error": {
            "code": "FILE_NOT_FOUND",
            "message": "File not found: 3",
            "details": {"file_id": 3},
            "type": "FileNotFound",
        }
    }
