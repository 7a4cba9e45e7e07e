"""In-memory RPC provider.

ONLY in-memory ledger - a reference file registry contract kept in process
memory, for development, testing and single-process deployments.
"""

import asyncio
import logging
from dataclasses import dataclass, field
from typing import AsyncIterator, List, Optional, Set, Tuple

from ...core.entities.ledger_event import EventFilter, LedgerEvent, LedgerEventName
from ...core.exceptions import ConnectionFailure, FileNotFound, PermissionDenied

logger = logging.getLogger(__name__)


@dataclass
class LedgerFileEntry:
    """Mutable ledger-side state for one registered file."""

    storage_ref: str
    name: str
    size: int
    flag: bool
    owner: str
    last_modified_block: int
    writers: Set[str] = field(default_factory=set)

    def can_write(self, account: str) -> bool:
        return account == self.owner or account in self.writers

    def to_tuple(self) -> Tuple:
        """Raw tuple as returned by ``get_file``."""
        return (
            self.storage_ref,
            self.name,
            self.size,
            self.flag,
            self.owner,
            self.last_modified_block,
        )


class InMemoryLedger:
    """Shared ledger state.

    Holds the registered files, the event log and the live subscriber
    queues. Several contract views (one per account) may share one ledger.
    Every mutation advances the block number by one.
    """

    def __init__(self):
        self._files: List[LedgerFileEntry] = []
        self._events: List[LedgerEvent] = []
        self._subscribers: Set[asyncio.Queue] = set()
        self._block_number = 0
        self._lock = asyncio.Lock()

    @property
    def block_number(self) -> int:
        return self._block_number

    @property
    def file_count(self) -> int:
        return len(self._files)

    def entry(self, file_id: int) -> LedgerFileEntry:
        """Return the entry for ``file_id`` or raise FileNotFound."""
        if isinstance(file_id, bool) or not isinstance(file_id, int) or not 1 <= file_id <= len(self._files):
            raise FileNotFound(f"File not found: {file_id}", file_id=file_id)
        return self._files[file_id - 1]

    def next_block(self) -> int:
        self._block_number += 1
        return self._block_number

    def append(self, entry: LedgerFileEntry) -> int:
        self._files.append(entry)
        return len(self._files)

    def emit(self, name: str, file_id: int, **args) -> LedgerEvent:
        """Record an event and fan it out to live subscribers."""
        event = LedgerEvent(
            name=name,
            file_id=file_id,
            block_number=self._block_number,
            args=args
        )
        self._events.append(event)
        for queue in self._subscribers:
            queue.put_nowait(event)
        return event

    def subscribe(self) -> Tuple[asyncio.Queue, List[LedgerEvent]]:
        """Register a live queue and snapshot history at the same instant."""
        queue: asyncio.Queue = asyncio.Queue()
        self._subscribers.add(queue)
        return queue, list(self._events)

    def unsubscribe(self, queue: asyncio.Queue) -> None:
        self._subscribers.discard(queue)

    @property
    def subscriber_count(self) -> int:
        return len(self._subscribers)

    @property
    def lock(self) -> asyncio.Lock:
        return self._lock


class InMemoryLedgerContract:
    """File registry contract bound to one calling account.

    Permission model:
    - the account that adds a file owns it
    - the owner and accounts granted write permission may change content
      and name
    - only the owner may grant or revoke write permission
    """

    def __init__(self, ledger: InMemoryLedger, account: str):
        if not account:
            raise ValueError("account must not be empty")
        self._ledger = ledger
        self.account = account

    def as_account(self, account: str) -> 'InMemoryLedgerContract':
        """Return a view of the same ledger acting as ``account``."""
        return InMemoryLedgerContract(self._ledger, account)

    @property
    def ledger(self) -> InMemoryLedger:
        return self._ledger

    async def add_file(self, storage_ref: str, name: str, size: int, flag: bool) -> int:
        """Register a file owned by the calling account.

        ``flag`` marks the file as publicly readable; it is stored and
        returned in the file tuple but not otherwise interpreted here.
        """
        async with self._ledger.lock:
            block = self._ledger.next_block()
            file_id = self._ledger.append(LedgerFileEntry(
                storage_ref=storage_ref,
                name=name,
                size=size,
                flag=flag,
                owner=self.account,
                last_modified_block=block
            ))
            self._ledger.emit(LedgerEventName.NEW_FILE, file_id, entity=self.account)
        logger.debug(f"Registered file {file_id} ({name!r}) for {self.account}")
        return file_id

    async def get_file(self, file_id: int) -> Tuple:
        async with self._ledger.lock:
            return self._ledger.entry(file_id).to_tuple()

    async def set_file_content(self, file_id: int, storage_ref: str, size: int) -> None:
        async with self._ledger.lock:
            entry = self._writable_entry(file_id, "set_file_content")
            entry.storage_ref = storage_ref
            entry.size = size
            entry.last_modified_block = self._ledger.next_block()
            self._ledger.emit(LedgerEventName.FILE_CONTENT_UPDATE, file_id, entity=self.account)

    async def set_filename(self, file_id: int, name: str) -> None:
        async with self._ledger.lock:
            entry = self._writable_entry(file_id, "set_filename")
            entry.name = name
            entry.last_modified_block = self._ledger.next_block()
            self._ledger.emit(LedgerEventName.FILE_RENAME, file_id, entity=self.account)

    async def set_write_permission(self, file_id: int, entity: str, has_permission: bool) -> None:
        async with self._ledger.lock:
            entry = self._ledger.entry(file_id)
            if entry.owner != self.account:
                raise PermissionDenied(
                    f"Only the owner of file {file_id} may change write permissions",
                    file_id=file_id,
                    entity=self.account,
                    operation="set_write_permission"
                )
            if has_permission:
                entry.writers.add(entity)
            else:
                entry.writers.discard(entity)
            entry.last_modified_block = self._ledger.next_block()
            self._ledger.emit(
                LedgerEventName.NEW_WRITE_PERMISSION,
                file_id,
                entity=entity,
                has_permission=has_permission
            )

    async def last_file_id(self) -> int:
        async with self._ledger.lock:
            return self._ledger.file_count

    async def events(self, event_filter: Optional[EventFilter] = None) -> AsyncIterator[LedgerEvent]:
        """Stream ledger events matching ``event_filter``.

        The subscription starts on first iteration. Past events are replayed
        only when the filter sets ``from_block``. The stream never ends on
        its own; close it (or break out of the loop) to unsubscribe.
        """
        event_filter = event_filter or EventFilter()
        queue, history = self._ledger.subscribe()
        try:
            if event_filter.from_block is not None:
                for event in history:
                    if event_filter.matches(event):
                        yield event
            while True:
                event = await queue.get()
                if event_filter.matches(event):
                    yield event
        finally:
            self._ledger.unsubscribe(queue)

    def _writable_entry(self, file_id: int, operation: str) -> LedgerFileEntry:
        entry = self._ledger.entry(file_id)
        if not entry.can_write(self.account):
            raise PermissionDenied(
                f"Account {self.account} has no write permission on file {file_id}",
                file_id=file_id,
                entity=self.account,
                operation=operation
            )
        return entry


class InMemoryRpc:
    """RPC provider handing out an in-memory ledger contract.

    ``connection_count`` records how many times ``get_contract`` was called.
    Setting ``available`` to False makes acquisition fail with
    ConnectionFailure, which is how tests simulate an unreachable node.
    """

    def __init__(
        self,
        account: str = "0x0000000000000000000000000000000000000001",
        ledger: Optional[InMemoryLedger] = None
    ):
        self.account = account
        self.ledger = ledger or InMemoryLedger()
        self.available = True
        self.connection_count = 0

    async def get_contract(self) -> InMemoryLedgerContract:
        self.connection_count += 1
        if not self.available:
            raise ConnectionFailure(
                "In-memory ledger is unavailable",
                details={"account": self.account}
            )
        logger.debug(f"Connected to in-memory ledger as {self.account}")
        return InMemoryLedgerContract(self.ledger, self.account)
