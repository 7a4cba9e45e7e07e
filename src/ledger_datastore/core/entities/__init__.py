"""Entities for ledger-datastore."""

from .file_record import FileRecord, create_file_from_tuple, FILE_TUPLE_MIN_LENGTH
from .ledger_event import LedgerEvent, LedgerEventName, EventFilter

__all__ = [
    "FileRecord",
    "create_file_from_tuple",
    "FILE_TUPLE_MIN_LENGTH",
    "LedgerEvent",
    "LedgerEventName",
    "EventFilter",
]
