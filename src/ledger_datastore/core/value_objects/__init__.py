"""Value objects for ledger-datastore."""

from .file_id import FileId

__all__ = ["FileId"]
