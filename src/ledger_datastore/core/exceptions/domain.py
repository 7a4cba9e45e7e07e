"""Domain-level exceptions for ledger-datastore.

Errors raised by the datastore itself rather than by one of its providers:
bad construction options, invalid caller input and a ledger handle that could
not be acquired.
"""

from .base import DatastoreError


class ConfigurationError(DatastoreError):
    """Raised when datastore options or settings are invalid."""
    pass


class ValidationError(DatastoreError):
    """Raised when input validation fails."""
    pass


class InitializationFailed(DatastoreError):
    """Raised when the ledger handle cannot be obtained."""
    pass
