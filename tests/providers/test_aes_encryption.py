"""Tests for AesEncryption."""

import pytest

from ledger_datastore.core.exceptions import EncryptionFailure
from ledger_datastore.core.protocols import EncryptionProvider
from ledger_datastore.providers.encryption import AesEncryption


def test_implements_protocol(encryption):
    assert isinstance(encryption, EncryptionProvider)


def test_rejects_empty_passphrase():
    with pytest.raises(ValueError):
        AesEncryption("")


def test_from_settings(settings):
    assert isinstance(AesEncryption.from_settings(settings), AesEncryption)


@pytest.mark.asyncio
async def test_encrypt_then_decrypt(encryption):
    plaintext = b"\x00binary\xffcontent"
    
    ciphertext = await encryption.encrypt(plaintext)
    
    assert ciphertext != plaintext
    assert await encryption.decrypt(ciphertext) == plaintext


@pytest.mark.asyncio
async def test_ciphertext_is_not_deterministic(encryption):
    assert await encryption.encrypt(b"same") != await encryption.encrypt(b"same")


@pytest.mark.asyncio
async def test_wrong_key_fails(encryption):
    other = AesEncryption("another-passphrase", iterations=1000)
    ciphertext = await other.encrypt(b"secret")
    
    with pytest.raises(EncryptionFailure):
        await encryption.decrypt(ciphertext)


@pytest.mark.asyncio
async def test_malformed_input_fails(encryption):
    with pytest.raises(EncryptionFailure):
        await encryption.decrypt(b"not a fernet token")
