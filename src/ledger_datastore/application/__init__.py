"""Application layer: the datastore orchestrator and its initialization latch."""

from .initialization import InitializationLatch, InitializationState
from .services import Datastore, DatastoreOptions

__all__ = [
    "InitializationLatch",
    "InitializationState",
    "Datastore",
    "DatastoreOptions",
]
