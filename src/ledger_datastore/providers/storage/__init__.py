"""Storage providers.

- IpfsStorage: IPFS HTTP API client (default)
- InMemoryStorage: content-addressed dict store
"""

from .ipfs import IpfsStorage
from .memory import InMemoryStorage

__all__ = [
    "IpfsStorage",
    "InMemoryStorage",
]
