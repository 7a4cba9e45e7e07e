"""Storage provider protocol.

ONLY content storage contract - defines interface for content-addressable
storage backends (IPFS, Swarm, Filecoin, in-memory).
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class StorageProvider(Protocol):
    """Storage provider protocol.
    
    Backends accept raw bytes and hand back an opaque reference which later
    returns the same bytes. References are content addresses: storing the
    same bytes twice may return the same reference.
    """
    
    async def add_file(self, content: bytes) -> str:
        """Store content.
        
        Args:
            content: Raw bytes to store
        
        Returns:
            Opaque storage reference for the content
        
        Raises:
            StorageUnavailable: If the backend cannot be reached
            WriteFailure: If the backend rejects the write
        """
        ...
    
    async def get_file(self, storage_ref: str) -> bytes:
        """Fetch content by storage reference.
        
        Args:
            storage_ref: Reference previously returned by ``add_file``
        
        Returns:
            The stored bytes
        
        Raises:
            StorageNotFound: If nothing is stored under the reference
            ReadFailure: If the backend fails to return the content
        """
        ...
