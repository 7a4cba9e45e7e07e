"""Invalid file record exception.

ONLY malformed ledger records - raised when a raw file tuple returned by the
ledger cannot be mapped into a FileRecord.
"""

from typing import Any, Dict, Optional

from .base import DatastoreError


class InvalidFileRecord(DatastoreError):
    """Raised when a ledger file tuple is too short or mistyped."""
    
    def __init__(
        self,
        message: str,
        file_id: Optional[int] = None,
        field_count: Optional[int] = None,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        enhanced_details = details or {}
        if file_id is not None:
            enhanced_details["file_id"] = file_id
        if field_count is not None:
            enhanced_details["field_count"] = field_count
            
        super().__init__(
            message=message,
            error_code=error_code or "INVALID_FILE_RECORD",
            details=enhanced_details
        )
        
        self.file_id = file_id
        self.field_count = field_count
