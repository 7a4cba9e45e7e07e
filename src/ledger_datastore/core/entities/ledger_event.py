"""Ledger event entity.

ONLY ledger events - represents one event emitted by the ledger backend and
the filter used to subscribe to a subset of them.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, FrozenSet, Iterable, Optional


class LedgerEventName:
    """Event names emitted by the reference ledger."""
    NEW_FILE = "NewFile"
    FILE_RENAME = "FileRename"
    FILE_CONTENT_UPDATE = "FileContentUpdate"
    NEW_WRITE_PERMISSION = "NewWritePermission"


@dataclass(frozen=True)
class LedgerEvent:
    """An event observed on the ledger.
    
    ``block_number`` increases monotonically per ledger and orders events
    relative to each other. ``args`` holds backend-specific event arguments.
    """
    
    name: str
    file_id: int
    block_number: int
    args: Dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class EventFilter:
    """Subscription filter for ledger events.
    
    Every field is optional; an empty filter matches every event. When
    ``from_block`` is set, backends that keep history replay matching past
    events from that block before streaming live ones.
    """
    
    event_names: Optional[FrozenSet[str]] = None
    file_id: Optional[int] = None
    from_block: Optional[int] = None
    
    @classmethod
    def create(
        cls,
        event_names: Optional[Iterable[str]] = None,
        file_id: Optional[int] = None,
        from_block: Optional[int] = None
    ) -> 'EventFilter':
        """Build a filter, accepting a single event name or any iterable."""
        if isinstance(event_names, str):
            event_names = [event_names]
        names = frozenset(event_names) if event_names is not None else None
        return cls(event_names=names, file_id=file_id, from_block=from_block)
    
    def matches(self, event: LedgerEvent) -> bool:
        if self.event_names is not None and event.name not in self.event_names:
            return False
        if self.file_id is not None and event.file_id != self.file_id:
            return False
        if self.from_block is not None and event.block_number < self.from_block:
            return False
        return True
