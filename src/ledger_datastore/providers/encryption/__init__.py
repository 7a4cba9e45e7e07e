"""Encryption providers.

- AesEncryption: Fernet symmetric cipher keyed by passphrase (default)
"""

from .aes import AesEncryption

__all__ = ["AesEncryption"]
