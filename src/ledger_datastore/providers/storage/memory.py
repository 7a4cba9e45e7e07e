"""In-memory storage provider.

ONLY in-memory implementation - content-addressed blob store kept in a dict,
for development, testing and single-process deployments.
"""

import asyncio
import hashlib
import logging
from typing import Dict

from ...core.exceptions import StorageNotFound

logger = logging.getLogger(__name__)


class InMemoryStorage:
    """Content-addressed in-memory storage.
    
    References are the sha256 hex digest of the content, so storing the same
    bytes twice yields the same reference. Blobs are never removed.
    """
    
    def __init__(self):
        self._blobs: Dict[str, bytes] = {}
        self._lock = asyncio.Lock()
    
    @staticmethod
    def compute_ref(content: bytes) -> str:
        return hashlib.sha256(content).hexdigest()
    
    async def add_file(self, content: bytes) -> str:
        """Store content and return its sha256 reference."""
        content = bytes(content)
        storage_ref = self.compute_ref(content)
        async with self._lock:
            self._blobs[storage_ref] = content
        logger.debug(f"Stored {len(content)} bytes as {storage_ref}")
        return storage_ref
    
    async def get_file(self, storage_ref: str) -> bytes:
        """Return content stored under ``storage_ref``."""
        async with self._lock:
            content = self._blobs.get(storage_ref)
        if content is None:
            raise StorageNotFound(
                f"No content stored under reference: {storage_ref}",
                details={"storage_ref": storage_ref}
            )
        return content
    
    def __contains__(self, storage_ref: str) -> bool:
        return storage_ref in self._blobs
    
    def __len__(self) -> int:
        return len(self._blobs)
