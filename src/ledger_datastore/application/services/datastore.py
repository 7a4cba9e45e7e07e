"""Datastore service.

ONLY file lifecycle orchestration - composes one storage, one encryption and
one RPC provider behind a single async API for registering, reading,
updating and enumerating files.
"""

import asyncio
import logging
from dataclasses import dataclass, fields, replace
from typing import Any, AsyncIterator, Iterable, List, Optional

from ...config.settings import DatastoreSettings, get_settings
from ...core.entities import EventFilter, FileRecord, LedgerEvent
from ...core.exceptions import ConfigurationError, ValidationError
from ...core.protocols import EncryptionProvider, LedgerContract, RpcProvider, StorageProvider
from ...core.value_objects import FileId
from ...providers.encryption import AesEncryption
from ...providers.storage import IpfsStorage
from ..initialization import InitializationLatch, InitializationState

logger = logging.getLogger(__name__)


@dataclass
class DatastoreOptions:
    """Construction options for the datastore.

    Unset providers fall back to IPFS storage and AES encryption built from
    settings. ``rpc_provider`` has no default and must be supplied.
    ``add_file_flag`` is passed verbatim to the ledger's ``add_file``; its
    meaning is defined by the RPC backend.
    """

    rpc_provider: Optional[RpcProvider] = None
    storage_provider: Optional[StorageProvider] = None
    encryption_provider: Optional[EncryptionProvider] = None
    encrypt_content: Optional[bool] = None
    list_concurrency: Optional[int] = None
    add_file_flag: bool = True


class Datastore:
    """Decentralized file registry.

    File content goes to the storage provider, metadata and permissions to
    the ledger reached through the RPC provider. Every public operation
    first makes sure the ledger handle has been acquired; acquisition
    happens at most once at a time and is retried on the next call if it
    fails.

    Provider errors are never caught or translated here.
    """

    def __init__(
        self,
        options: Optional[DatastoreOptions] = None,
        settings: Optional[DatastoreSettings] = None,
        **overrides: Any
    ):
        """Initialize datastore.

        Args:
            options: Provider and behaviour options
            settings: Settings used for defaults (environment if omitted)
            **overrides: Individual ``DatastoreOptions`` fields, applied on top of ``options``

        Raises:
            ConfigurationError: If the RPC provider is missing or an option is invalid
        """
        options = self._merge_options(options, overrides)
        settings = settings or get_settings()

        if options.rpc_provider is None:
            raise ConfigurationError("rpc_provider is required")
        if not isinstance(options.rpc_provider, RpcProvider):
            raise ConfigurationError(
                f"rpc_provider does not implement RpcProvider: {type(options.rpc_provider).__name__}"
            )
        if options.storage_provider is not None and not isinstance(options.storage_provider, StorageProvider):
            raise ConfigurationError(
                f"storage_provider does not implement StorageProvider: {type(options.storage_provider).__name__}"
            )
        if options.encryption_provider is not None and not isinstance(options.encryption_provider, EncryptionProvider):
            raise ConfigurationError(
                f"encryption_provider does not implement EncryptionProvider: {type(options.encryption_provider).__name__}"
            )

        list_concurrency = options.list_concurrency
        if list_concurrency is None:
            list_concurrency = settings.list_concurrency
        if isinstance(list_concurrency, bool) or not isinstance(list_concurrency, int) or list_concurrency < 1:
            raise ConfigurationError(f"list_concurrency must be a positive integer, got {list_concurrency!r}")

        self._rpc = options.rpc_provider
        self._storage = (
            IpfsStorage.from_settings(settings) if options.storage_provider is None else options.storage_provider
        )
        self._encryption = (
            AesEncryption.from_settings(settings) if options.encryption_provider is None else options.encryption_provider
        )
        self._encrypt_content = (
            settings.encrypt_content if options.encrypt_content is None else options.encrypt_content
        )
        self._list_concurrency = list_concurrency
        self._add_file_flag = options.add_file_flag
        self._contract_latch: InitializationLatch[LedgerContract] = InitializationLatch(
            self._rpc.get_contract, name="ledger contract"
        )

    @staticmethod
    def _merge_options(options: Optional[DatastoreOptions], overrides: dict) -> DatastoreOptions:
        options = options or DatastoreOptions()
        if not overrides:
            return options
        known = {f.name for f in fields(DatastoreOptions)}
        unknown = set(overrides) - known
        if unknown:
            raise ConfigurationError(f"Unknown datastore options: {', '.join(sorted(unknown))}")
        return replace(options, **overrides)

    # Initialization

    @property
    def initialization_state(self) -> InitializationState:
        return self._contract_latch.state

    @property
    def encrypts_content(self) -> bool:
        return self._encrypt_content

    async def initialize(self) -> LedgerContract:
        """Acquire the ledger handle if not done yet and return it."""
        return await self._contract_latch.acquire()

    # File operations

    async def add_file(self, name: str, content: bytes) -> int:
        """Add a new file to the datastore.

        Content is written to storage before the ledger registration so the
        ledger never references missing content. If the registration fails
        the stored blob is left behind.

        Args:
            name: File name, non-empty
            content: File content

        Returns:
            Id assigned by the ledger
        """
        contract = await self.initialize()
        self._require_text(name, "name")
        content = self._coerce_content(content)

        storage_ref = await self._store(content)
        try:
            file_id = await contract.add_file(storage_ref, name, len(content), self._add_file_flag)
        except Exception:
            logger.warning(f"Ledger registration failed; stored content {storage_ref} is unreferenced")
            raise

        logger.info(f"Added file {file_id} ({name!r}, {len(content)} bytes)")
        return file_id

    async def get_file(self, file_id: int) -> FileRecord:
        """Return a file and its content.

        Content is read from storage on every call.
        """
        await self.initialize()
        file_info = await self.get_file_info(file_id)
        content = await self._load(file_info.storage_ref)
        return file_info.with_content(content)

    async def get_file_info(self, file_id: int) -> FileRecord:
        """Return the file information without the content."""
        contract = await self.initialize()
        file_id = FileId.of(file_id).value
        raw = await contract.get_file(file_id)
        return FileRecord.from_tuple(file_id, raw)

    async def list_files(self) -> List[FileRecord]:
        """Return every registered file, without content, ordered by id.

        Ids ``1..last_file_id`` are fetched; the first failed lookup aborts
        the listing and its error is raised.
        """
        contract = await self.initialize()
        last_file_id = int(await contract.last_file_id())
        file_ids = range(1, last_file_id + 1)

        if self._list_concurrency == 1 or last_file_id <= 1:
            files = []
            for file_id in file_ids:
                files.append(await self.get_file_info(file_id))
            return files

        return await self._list_files_concurrently(file_ids)

    async def _list_files_concurrently(self, file_ids: Iterable[int]) -> List[FileRecord]:
        semaphore = asyncio.Semaphore(self._list_concurrency)

        async def fetch(file_id: int) -> FileRecord:
            async with semaphore:
                return await self.get_file_info(file_id)

        tasks = [asyncio.ensure_future(fetch(file_id)) for file_id in file_ids]
        try:
            # gather keeps input order
            return list(await asyncio.gather(*tasks))
        except BaseException:
            for task in tasks:
                task.cancel()
            # Reap siblings so their errors are not reported as unretrieved
            await asyncio.gather(*tasks, return_exceptions=True)
            raise

    async def set_file_content(self, file_id: int, content: bytes) -> None:
        """Replace the content of a file.

        Storage reference and size are updated on the ledger in one call.
        """
        contract = await self.initialize()
        file_id = FileId.of(file_id).value
        content = self._coerce_content(content)

        storage_ref = await self._store(content)
        await contract.set_file_content(file_id, storage_ref, len(content))
        logger.info(f"Updated content of file {file_id} ({len(content)} bytes)")

    async def set_write_permission(self, file_id: int, entity: str, has_permission: bool) -> None:
        """Grant or revoke write permission on a file for ``entity``."""
        contract = await self.initialize()
        file_id = FileId.of(file_id).value
        self._require_text(entity, "entity")

        await contract.set_write_permission(file_id, entity, bool(has_permission))
        logger.info(f"Set write permission on file {file_id} for {entity} to {bool(has_permission)}")

    async def set_filename(self, file_id: int, new_name: str) -> None:
        """Rename a file."""
        contract = await self.initialize()
        file_id = FileId.of(file_id).value
        self._require_text(new_name, "new_name")

        await contract.set_filename(file_id, new_name)
        logger.info(f"Renamed file {file_id} to {new_name!r}")

    async def events(
        self,
        event_filter: Optional[EventFilter] = None,
        **filter_args: Any
    ) -> AsyncIterator[LedgerEvent]:
        """Subscribe to ledger events.

        Args:
            event_filter: Filter passed to the ledger
            **filter_args: ``EventFilter.create`` arguments, used when ``event_filter`` is omitted

        Returns:
            A fresh event stream from the ledger; the stream is not
            reinterpreted by the datastore
        """
        contract = await self.initialize()
        if event_filter is None:
            event_filter = EventFilter.create(**filter_args)
        elif filter_args:
            raise ValidationError("Pass either event_filter or filter arguments, not both")
        return contract.events(event_filter)

    # Content helpers

    async def _store(self, content: bytes) -> str:
        if self._encrypt_content:
            content = await self._encryption.encrypt(content)
        return await self._storage.add_file(content)

    async def _load(self, storage_ref: str) -> bytes:
        content = await self._storage.get_file(storage_ref)
        if self._encrypt_content:
            content = await self._encryption.decrypt(content)
        return content

    @staticmethod
    def _coerce_content(content: Any) -> bytes:
        # bytes(n) would silently allocate n zero bytes
        if isinstance(content, (int, str)):
            raise ValidationError(
                f"content must be bytes-like, got {type(content).__name__}",
                details={"field": "content"}
            )
        try:
            return bytes(content)
        except (TypeError, ValueError) as e:
            raise ValidationError(
                f"content must be bytes-like: {e}",
                details={"field": "content"}
            ) from e

    @staticmethod
    def _require_text(value: Any, field_name: str) -> None:
        if not isinstance(value, str) or not value:
            raise ValidationError(
                f"{field_name} must be a non-empty string",
                details={"field": field_name}
            )
