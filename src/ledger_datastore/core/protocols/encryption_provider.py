"""Encryption provider protocol.

ONLY content encryption contract - defines interface for the cipher applied
to file content around storage reads and writes.
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class EncryptionProvider(Protocol):
    """Encryption provider protocol.
    
    ``decrypt(encrypt(data)) == data`` for every provider. Both methods
    raise ``EncryptionFailure`` on malformed input or key errors.
    """
    
    async def encrypt(self, content: bytes) -> bytes:
        """Encrypt plaintext bytes."""
        ...
    
    async def decrypt(self, content: bytes) -> bytes:
        """Decrypt ciphertext produced by ``encrypt``."""
        ...
