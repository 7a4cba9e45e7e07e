"""Provider protocols for ledger-datastore.

The three capability interfaces the datastore composes. Concrete backends
only need to match these signatures; no inheritance is required.
"""

from .storage_provider import StorageProvider
from .encryption_provider import EncryptionProvider
from .rpc_provider import RpcProvider, LedgerContract

__all__ = [
    "StorageProvider",
    "EncryptionProvider",
    "RpcProvider",
    "LedgerContract",
]
