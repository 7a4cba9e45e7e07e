"""File record entity.

ONLY file metadata - represents one registered file as recorded on the
ledger, optionally paired with its content.
"""

import operator
from dataclasses import dataclass, replace
from typing import Any, Dict, Optional, Sequence

from ..exceptions import InvalidFileRecord


# (storage_ref, name, size, flag, ...)
FILE_TUPLE_MIN_LENGTH = 4


@dataclass(frozen=True)
class FileRecord:
    """File record entity.
    
    Holds the ledger metadata for a file. ``storage_ref`` and ``size`` are
    always written together, so ``size`` is the byte length of the content
    that ``storage_ref`` points to. ``content`` is only present on records
    returned by ``Datastore.get_file`` and is never cached.
    """
    
    id: int
    name: str
    storage_ref: str
    size: int
    content: Optional[bytes] = None
    
    @classmethod
    def from_tuple(cls, file_id: int, raw: Sequence[Any]) -> 'FileRecord':
        """Map a raw ledger file tuple into a FileRecord.
        
        Args:
            file_id: Ledger id the tuple was read for
            raw: Ordered ledger tuple ``(storage_ref, name, size, flag, ...)``
            
        Returns:
            File record without content
            
        Raises:
            InvalidFileRecord: If the tuple is too short or mistyped
        """
        try:
            field_count = len(raw)
        except TypeError as e:
            raise InvalidFileRecord(
                f"Ledger record for file {file_id} is not a sequence: {type(raw).__name__}",
                file_id=file_id
            ) from e
        
        if field_count < FILE_TUPLE_MIN_LENGTH:
            raise InvalidFileRecord(
                f"Ledger record for file {file_id} has {field_count} fields, "
                f"expected at least {FILE_TUPLE_MIN_LENGTH}",
                file_id=file_id,
                field_count=field_count
            )
        
        storage_ref, name, size = raw[0], raw[1], raw[2]
        if not isinstance(storage_ref, str) or not isinstance(name, str):
            raise InvalidFileRecord(
                f"Ledger record for file {file_id} has non-string storage_ref or name",
                file_id=file_id,
                field_count=field_count
            )
        
        # Ledger backends may return big-number wrappers; accept anything with __index__
        if isinstance(size, bool) or not hasattr(size, "__index__"):
            raise InvalidFileRecord(
                f"Ledger record for file {file_id} has invalid size: {size!r}",
                file_id=file_id,
                field_count=field_count
            )
        size = operator.index(size)
        if size < 0:
            raise InvalidFileRecord(
                f"Ledger record for file {file_id} has negative size: {size}",
                file_id=file_id,
                field_count=field_count
            )
        
        return cls(id=file_id, name=name, storage_ref=storage_ref, size=size)
    
    @property
    def has_content(self) -> bool:
        return self.content is not None
    
    def with_content(self, content: bytes) -> 'FileRecord':
        """Return a copy of this record carrying ``content``."""
        return replace(self, content=content)
    
    def without_content(self) -> 'FileRecord':
        return replace(self, content=None)
    
    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary representation (content omitted)."""
        return {
            "id": self.id,
            "name": self.name,
            "storage_ref": self.storage_ref,
            "size": self.size,
        }
    
    def __repr__(self) -> str:
        content = f", content=<{len(self.content)} bytes>" if self.content is not None else ""
        return (
            f"FileRecord(id={self.id}, name={self.name!r}, "
            f"storage_ref={self.storage_ref!r}, size={self.size}{content})"
        )


def create_file_from_tuple(file_id: int, raw: Sequence[Any]) -> FileRecord:
    """Convenience wrapper around ``FileRecord.from_tuple``."""
    return FileRecord.from_tuple(file_id, raw)
