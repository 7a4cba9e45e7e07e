"""Single-shot initialization latch.

ONLY lazy initialization - acquires a resource at most once at a time,
caches it on success and allows a retry after failure.
"""

import asyncio
import logging
from enum import Enum
from typing import Awaitable, Callable, Generic, Optional, TypeVar

from ..core.exceptions import DatastoreError, InitializationFailed

logger = logging.getLogger(__name__)

T = TypeVar("T")


class InitializationState(Enum):
    """Latch states."""
    UNINITIALIZED = "uninitialized"
    IN_PROGRESS = "in_progress"
    READY = "ready"


class InitializationLatch(Generic[T]):
    """Latch guarding a lazily acquired resource.

    The first ``acquire`` starts the factory; callers arriving while it runs
    await the same attempt instead of starting another. A successful result
    is cached and the latch stays READY for good. A failed attempt puts the
    latch back to UNINITIALIZED so the next ``acquire`` tries again.
    """

    def __init__(self, factory: Callable[[], Awaitable[T]], name: str = "resource"):
        self._factory = factory
        self._name = name
        self._state = InitializationState.UNINITIALIZED
        self._task: Optional[asyncio.Task] = None
        self._value: Optional[T] = None
        self._attempts = 0

    @property
    def state(self) -> InitializationState:
        return self._state

    @property
    def is_ready(self) -> bool:
        return self._state is InitializationState.READY

    @property
    def attempts(self) -> int:
        """Number of factory invocations so far."""
        return self._attempts

    async def acquire(self) -> T:
        """Return the resource, acquiring it first if needed."""
        if self._state is InitializationState.READY:
            return self._value

        if self._task is None:
            self._state = InitializationState.IN_PROGRESS
            self._attempts += 1
            self._task = asyncio.ensure_future(self._run())

        # Shielded so a cancelled caller does not cancel the shared attempt
        return await asyncio.shield(self._task)

    async def _run(self) -> T:
        logger.debug(f"Acquiring {self._name} (attempt {self._attempts})")
        try:
            value = await self._factory()
        except asyncio.CancelledError:
            self._reset()
            raise
        except DatastoreError:
            self._reset()
            logger.warning(f"Failed to acquire {self._name}")
            raise
        except Exception as e:
            self._reset()
            logger.warning(f"Failed to acquire {self._name}: {e}")
            raise InitializationFailed(
                f"Failed to acquire {self._name}: {e}",
                details={"resource": self._name, "error_type": type(e).__name__}
            ) from e

        self._value = value
        self._state = InitializationState.READY
        self._task = None
        logger.info(f"Acquired {self._name}")
        return value

    def _reset(self) -> None:
        self._state = InitializationState.UNINITIALIZED
        self._task = None
