"""File identifier value object.

ONLY file identifier - represents the positive integer id assigned to a file
by the ledger backend.
"""

from dataclasses import dataclass
from typing import Any

from ..exceptions import ValidationError


@dataclass(frozen=True)
class FileId:
    """File identifier value object.
    
    Ledger ids are assigned sequentially starting at 1 and never change once
    assigned. Immutable and hashable for use as dictionary keys and in sets.
    """
    
    value: int
    
    def __post_init__(self):
        """Validate file ID range."""
        # bool is an int subclass but never a valid id
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise ValidationError(
                f"FileId must be an integer, got {type(self.value).__name__}",
                details={"file_id": repr(self.value)}
            )
        if self.value < 1:
            raise ValidationError(
                f"FileId must be >= 1, got {self.value}",
                details={"file_id": self.value}
            )
    
    @classmethod
    def of(cls, value: Any) -> 'FileId':
        """Coerce an int or an existing FileId into a FileId."""
        if isinstance(value, FileId):
            return value
        return cls(value)
    
    def __int__(self) -> int:
        return self.value
    
    def __str__(self) -> str:
        """String representation for logging and display."""
        return str(self.value)
    
    def __repr__(self) -> str:
        """Developer representation."""
        return f"FileId({self.value})"
