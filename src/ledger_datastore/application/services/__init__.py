"""Application services for ledger-datastore."""

from .datastore import Datastore, DatastoreOptions

__all__ = ["Datastore", "DatastoreOptions"]
