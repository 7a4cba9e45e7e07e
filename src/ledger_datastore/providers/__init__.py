"""Bundled provider implementations.

Grouped by capability so callers can pick one explicitly, e.g.
``providers.storage.IpfsStorage`` or ``providers.rpc.InMemoryRpc``.
"""

from . import storage, encryption, rpc

__all__ = ["storage", "encryption", "rpc"]
