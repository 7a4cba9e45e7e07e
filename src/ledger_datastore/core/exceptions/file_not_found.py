"""File not found exception.

ONLY file not found - represents when the ledger holds no record for a
requested file id.
"""

from typing import Any, Dict, Optional

from .base import DatastoreError


class FileNotFound(DatastoreError):
    """Raised when a requested file id is not registered on the ledger."""
    
    def __init__(
        self,
        message: str,
        file_id: Optional[int] = None,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        """Initialize file not found exception.
        
        Args:
            message: Human-readable error message
            file_id: ID of the file that was not found
            error_code: Specific error code for the failure
            details: Additional details about the failure
        """
        enhanced_details = details or {}
        if file_id is not None:
            enhanced_details["file_id"] = file_id
            
        super().__init__(
            message=message,
            error_code=error_code or "FILE_NOT_FOUND",
            details=enhanced_details
        )
        
        self.file_id = file_id
