"""Base exceptions for ledger-datastore.

This module defines the root of the exception hierarchy. Every error raised
by the datastore, its providers, or its value objects carries an error code
and a details dictionary so callers can log or render them uniformly.
"""

from typing import Any, Dict, Optional


class DatastoreError(Exception):
    """Base exception for all ledger-datastore errors.
    
    All exceptions in the library inherit from this base class and include
    structured error information for better debugging and API responses.
    """
    
    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        *args,
        **kwargs
    ):
        super().__init__(message, *args, **kwargs)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}


def create_error_response(exception: DatastoreError) -> Dict[str, Any]:
    """Create standardized error response from exception.
    
    Args:
        exception: The datastore exception
        
    Returns:
        Error response dictionary
    """
    return {
        "error": {
            "code": exception.error_code,
            "message": exception.message,
            "details": exception.details,
            "type": exception.__class__.__name__,
        }
    }
