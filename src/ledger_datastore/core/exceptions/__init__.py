"""Core exceptions for ledger-datastore.

Base, domain and provider exceptions plus the file-specific errors raised by
ledger backends.
"""

from .base import DatastoreError, create_error_response
from .domain import ConfigurationError, ValidationError, InitializationFailed
from .provider import (
    StorageFailure,
    StorageUnavailable,
    WriteFailure,
    ReadFailure,
    StorageNotFound,
    EncryptionFailure,
    NetworkFailure,
    ConnectionFailure,
)
from .file_not_found import FileNotFound
from .permission_denied import PermissionDenied
from .invalid_file_record import InvalidFileRecord

__all__ = [
    "DatastoreError",
    "create_error_response",
    "ConfigurationError",
    "ValidationError",
    "InitializationFailed",
    "StorageFailure",
    "StorageUnavailable",
    "WriteFailure",
    "ReadFailure",
    "StorageNotFound",
    "EncryptionFailure",
    "NetworkFailure",
    "ConnectionFailure",
    "FileNotFound",
    "PermissionDenied",
    "InvalidFileRecord",
]
