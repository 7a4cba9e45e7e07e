"""Ledger-Datastore - decentralized file registry.

File content is encrypted and pushed to a content-addressable store while
its metadata (name, size, storage reference, permissions) is recorded on a
ledger reached over RPC. Storage, encryption and RPC are pluggable
providers composed by ``Datastore``.
"""

from .__version__ import __version__

from .application import (
    Datastore,
    DatastoreOptions,
    InitializationLatch,
    InitializationState,
)

from .core.exceptions import (
    # Base Exception
    DatastoreError,
    
    # Domain Exceptions
    ConfigurationError,
    ValidationError,
    InitializationFailed,
    FileNotFound,
    PermissionDenied,
    InvalidFileRecord,
    
    # Provider Exceptions
    StorageFailure,
    StorageUnavailable,
    WriteFailure,
    ReadFailure,
    StorageNotFound,
    EncryptionFailure,
    NetworkFailure,
    ConnectionFailure,
    
    # Utility Functions
    create_error_response,
)

from .core.entities import FileRecord, create_file_from_tuple, LedgerEvent, LedgerEventName, EventFilter
from .core.value_objects import FileId
from .core.protocols import StorageProvider, EncryptionProvider, RpcProvider, LedgerContract

from . import providers

from .config import DatastoreSettings, get_settings, setup_logging

__all__ = [
    "__version__",
    
    # Datastore
    "Datastore",
    "DatastoreOptions",
    "InitializationLatch",
    "InitializationState",
    
    # Exceptions
    "DatastoreError",
    "ConfigurationError",
    "ValidationError",
    "InitializationFailed",
    "FileNotFound",
    "PermissionDenied",
    "InvalidFileRecord",
    "StorageFailure",
    "StorageUnavailable",
    "WriteFailure",
    "ReadFailure",
    "StorageNotFound",
    "EncryptionFailure",
    "NetworkFailure",
    "ConnectionFailure",
    "create_error_response",
    
    # Model
    "FileRecord",
    "create_file_from_tuple",
    "LedgerEvent",
    "LedgerEventName",
    "EventFilter",
    "FileId",
    
    # Protocols
    "StorageProvider",
    "EncryptionProvider",
    "RpcProvider",
    "LedgerContract",
    
    # Providers
    "providers",
    
    # Configuration
    "DatastoreSettings",
    "get_settings",
    "setup_logging",
]
