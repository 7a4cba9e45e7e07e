"""RPC providers.

- InMemoryRpc: reference ledger kept in process memory

Network-backed providers (Web3, Aragon) only need to satisfy the
``RpcProvider`` and ``LedgerContract`` protocols.
"""

from .memory import InMemoryRpc, InMemoryLedger, InMemoryLedgerContract, LedgerFileEntry

__all__ = [
    "InMemoryRpc",
    "InMemoryLedger",
    "InMemoryLedgerContract",
    "LedgerFileEntry",
]
