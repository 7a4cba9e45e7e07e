"""RPC provider protocol.

ONLY ledger access contract - defines the RPC provider that yields a ledger
handle and the file registry contract reachable through that handle.
"""

from typing import Any, AsyncIterator, Optional, Protocol, Sequence, runtime_checkable

from ..entities.ledger_event import EventFilter, LedgerEvent


@runtime_checkable
class LedgerContract(Protocol):
    """File registry contract on the ledger.
    
    Permission checks are enforced here, not by the datastore. Failures are
    backend-defined (``PermissionDenied``, ``FileNotFound``, ``NetworkFailure``)
    and are surfaced verbatim.
    """
    
    async def add_file(self, storage_ref: str, name: str, size: int, flag: bool) -> int:
        """Register a file and return its new id.
        
        ``flag`` is a backend-defined boolean; see the backend's documentation
        for its meaning.
        """
        ...
    
    async def get_file(self, file_id: int) -> Sequence[Any]:
        """Return the raw file tuple ``(storage_ref, name, size, flag, ...)``."""
        ...
    
    async def set_file_content(self, file_id: int, storage_ref: str, size: int) -> None:
        """Point a file at new content, updating reference and size together."""
        ...
    
    async def set_filename(self, file_id: int, name: str) -> None:
        ...
    
    async def set_write_permission(self, file_id: int, entity: str, has_permission: bool) -> None:
        ...
    
    async def last_file_id(self) -> int:
        """Return the highest assigned file id, 0 for an empty ledger."""
        ...
    
    def events(self, event_filter: Optional[EventFilter] = None) -> AsyncIterator[LedgerEvent]:
        """Open a new event stream.
        
        Every call returns an independent stream; closing one does not affect
        others.
        """
        ...


@runtime_checkable
class RpcProvider(Protocol):
    """RPC provider protocol (Web3, Aragon, in-memory)."""
    
    async def get_contract(self) -> LedgerContract:
        """Acquire the ledger handle.
        
        Raises:
            ConnectionFailure: If the ledger cannot be reached
        """
        ...
