"""Core module for ledger-datastore.

Exceptions, value objects, entities and the provider protocols. Nothing in
core performs I/O.
"""

from .exceptions import *
from .value_objects import *
from .entities import *
from .protocols import *

__all__ = [
    # Exceptions
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
    
    # Value Objects
    "FileId",
    
    # Entities
    "FileRecord",
    "create_file_from_tuple",
    "LedgerEvent",
    "LedgerEventName",
    "EventFilter",
    
    # Protocols
    "StorageProvider",
    "EncryptionProvider",
    "RpcProvider",
    "LedgerContract",
]
