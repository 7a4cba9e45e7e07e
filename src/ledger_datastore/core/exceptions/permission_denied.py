"""Permission denied exception.

ONLY permission denied - represents a write or permission change rejected
by the ledger for the calling account.
"""

from typing import Any, Dict, Optional

from .base import DatastoreError


class PermissionDenied(DatastoreError):
    """Raised when the ledger rejects an operation for the caller.
    
    The datastore performs no authorization of its own; this exception is
    raised by ledger backends and passed through unchanged.
    """
    
    def __init__(
        self,
        message: str,
        file_id: Optional[int] = None,
        entity: Optional[str] = None,
        operation: Optional[str] = None,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        """Initialize permission denied exception.
        
        Args:
            message: Human-readable error message
            file_id: ID of the file access was denied to
            entity: Account that was denied
            operation: Operation that was denied (set_filename, set_file_content, etc.)
            error_code: Specific error code for the failure
            details: Additional details about the failure
        """
        enhanced_details = details or {}
        if file_id is not None:
            enhanced_details["file_id"] = file_id
        if entity:
            enhanced_details["entity"] = entity
        if operation:
            enhanced_details["operation"] = operation
            
        super().__init__(
            message=message,
            error_code=error_code or "PERMISSION_DENIED",
            details=enhanced_details
        )
        
        self.file_id = file_id
        self.entity = entity
        self.operation = operation
