"""Pytest configuration and fixtures for ledger-datastore tests."""

import pytest

from ledger_datastore.application import Datastore, DatastoreOptions
from ledger_datastore.config.settings import DatastoreSettings
from ledger_datastore.providers.encryption import AesEncryption
from ledger_datastore.providers.rpc import InMemoryRpc
from ledger_datastore.providers.storage import InMemoryStorage


OWNER = "0x00000000000000000000000000000000000000aa"
OTHER = "0x00000000000000000000000000000000000000bb"


@pytest.fixture
def settings():
    """Settings isolated from the environment and any .env file."""
    return DatastoreSettings(
        _env_file=None,
        ipfs_api_url="http://ipfs.test:5001",
        encryption_key="test-passphrase",
        encryption_iterations=1000,
        encrypt_content=False,
        list_concurrency=1,
    )


@pytest.fixture
def storage():
    return InMemoryStorage()


@pytest.fixture
def encryption():
    return AesEncryption("test-passphrase", iterations=1000)


@pytest.fixture
def rpc():
    return InMemoryRpc(account=OWNER)


@pytest.fixture
def datastore(rpc, storage, encryption, settings):
    """Datastore wired to in-memory storage and ledger."""
    return Datastore(
        DatastoreOptions(
            rpc_provider=rpc,
            storage_provider=storage,
            encryption_provider=encryption,
        ),
        settings=settings,
    )


@pytest.fixture
def encrypted_datastore(rpc, storage, encryption, settings):
    """Datastore that encrypts content before it reaches storage."""
    return Datastore(
        DatastoreOptions(
            rpc_provider=rpc,
            storage_provider=storage,
            encryption_provider=encryption,
            encrypt_content=True,
        ),
        settings=settings,
    )
