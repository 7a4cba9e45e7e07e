"""AES encryption provider.

ONLY symmetric content encryption - Fernet (AES-128-CBC with HMAC-SHA256)
keyed from a passphrase through PBKDF2.
"""

import base64
import logging
from typing import Optional

from cryptography.fernet import Fernet, InvalidToken
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.kdf.pbkdf2 import PBKDF2HMAC

from ...config.settings import DatastoreSettings, get_settings
from ...core.exceptions import EncryptionFailure

logger = logging.getLogger(__name__)


class AesEncryption:
    """Handle encryption and decryption of file content."""

    def __init__(
        self,
        passphrase: str,
        salt: str = "ledger-datastore",
        iterations: int = 100000
    ):
        """
        Initialize encryption with a passphrase.

        Args:
            passphrase: Secret the Fernet key is derived from.
            salt: KDF salt; both sides must use the same value.
            iterations: PBKDF2 iteration count.
        """
        if not passphrase:
            raise ValueError("Encryption passphrase must not be empty")
        if iterations < 1:
            raise ValueError("iterations must be positive")

        self._cipher = self._get_cipher(passphrase, salt.encode("utf-8"), iterations)

    @classmethod
    def from_settings(cls, settings: Optional[DatastoreSettings] = None) -> 'AesEncryption':
        """Create provider from datastore settings."""
        settings = settings or get_settings()
        return cls(
            passphrase=settings.encryption_key.get_secret_value(),
            salt=settings.encryption_salt,
            iterations=settings.encryption_iterations
        )

    @staticmethod
    def _get_cipher(passphrase: str, salt: bytes, iterations: int) -> Fernet:
        """
        Create a Fernet cipher from the passphrase.
        Uses PBKDF2 to derive a 32-byte key.
        """
        kdf = PBKDF2HMAC(
            algorithm=hashes.SHA256(),
            length=32,
            salt=salt,
            iterations=iterations,
        )
        derived_key = base64.urlsafe_b64encode(kdf.derive(passphrase.encode("utf-8")))
        return Fernet(derived_key)

    async def encrypt(self, content: bytes) -> bytes:
        """
        Encrypt content.

        Args:
            content: The plaintext bytes.

        Returns:
            The Fernet token as bytes.
        """
        try:
            return self._cipher.encrypt(bytes(content))
        except TypeError as e:
            raise EncryptionFailure(f"Failed to encrypt content: {e}") from e

    async def decrypt(self, content: bytes) -> bytes:
        """
        Decrypt a Fernet token.

        Args:
            content: Token produced by ``encrypt``.

        Returns:
            The plaintext bytes.
        """
        try:
            return self._cipher.decrypt(bytes(content))
        except (InvalidToken, TypeError) as e:
            logger.warning(f"Decryption failed: {type(e).__name__}")
            raise EncryptionFailure(
                "Failed to decrypt content: invalid token or wrong key",
                details={"error_type": type(e).__name__}
            ) from e
