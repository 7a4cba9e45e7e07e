"""Provider-level exceptions for ledger-datastore.

This module defines exceptions raised by storage, encryption and RPC
provider implementations. The datastore never translates them; they reach
the caller exactly as the provider raised them.
"""

from .base import DatastoreError


# Storage Errors
class StorageFailure(DatastoreError):
    """Base class for content storage errors."""
    pass


class StorageUnavailable(StorageFailure):
    """Raised when the storage backend cannot be reached."""
    pass


class WriteFailure(StorageFailure):
    """Raised when the storage backend rejects a write."""
    pass


class ReadFailure(StorageFailure):
    """Raised when the storage backend fails to return content."""
    pass


class StorageNotFound(StorageFailure):
    """Raised when no content exists for a storage reference."""
    pass


# Encryption Errors
class EncryptionFailure(DatastoreError):
    """Raised on malformed ciphertext or key errors."""
    pass


# Network Errors
class NetworkFailure(DatastoreError):
    """Raised on transport-level failures talking to the ledger."""
    pass


class ConnectionFailure(NetworkFailure):
    """Raised when a ledger connection cannot be established."""
    pass
