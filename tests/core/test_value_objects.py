"""Tests for value objects."""

import pytest

from ledger_datastore.core.exceptions import ValidationError
from ledger_datastore.core.value_objects import FileId


class TestFileId:
    
    def test_valid_id(self):
        file_id = FileId(5)
        
        assert file_id.value == 5
        assert int(file_id) == 5
        assert str(file_id) == "5"
        assert repr(file_id) == "FileId(5)"
    
    @pytest.mark.parametrize("value", [0, -1])
    def test_rejects_non_positive(self, value):
        with pytest.raises(ValidationError):
            FileId(value)
    
    @pytest.mark.parametrize("value", ["1", 1.0, None, True])
    def test_rejects_non_int(self, value):
        with pytest.raises(ValidationError):
            FileId(value)
    
    def test_of_accepts_existing_instance(self):
        file_id = FileId(3)
        
        assert FileId.of(file_id) is file_id
        assert FileId.of(3) == file_id
    
    def test_hashable(self):
        assert len({FileId(1), FileId(1), FileId(2)}) == 2
