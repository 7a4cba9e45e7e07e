"""Tests for settings and logging configuration."""

import logging

import pytest
from pydantic import ValidationError as PydanticValidationError

from ledger_datastore.config import LoggingConfig
from ledger_datastore.config.logging_config import FORMAT_STRINGS, LogFormat, get_log_level_from_verbosity
from ledger_datastore.config.settings import DatastoreSettings, get_settings, reset_settings


@pytest.fixture
def clean_settings_cache():
    reset_settings()
    yield
    reset_settings()


class TestDatastoreSettings:

    def test_defaults(self):
        settings = DatastoreSettings(_env_file=None)

        assert settings.ipfs_api_url == "http://127.0.0.1:5001"
        assert settings.encrypt_content is False
        assert settings.list_concurrency == 1

    def test_reads_prefixed_environment(self, monkeypatch):
        monkeypatch.setenv("DATASTORE_IPFS_API_URL", "https://ipfs.example.com/")
        monkeypatch.setenv("DATASTORE_LIST_CONCURRENCY", "8")
        monkeypatch.setenv("DATASTORE_ENCRYPT_CONTENT", "true")

        settings = DatastoreSettings(_env_file=None)

        assert settings.ipfs_api_url == "https://ipfs.example.com"
        assert settings.list_concurrency == 8
        assert settings.encrypt_content is True

    def test_rejects_non_http_ipfs_url(self):
        with pytest.raises(PydanticValidationError):
            DatastoreSettings(_env_file=None, ipfs_api_url="ftp://ipfs.test")

    def test_rejects_zero_list_concurrency(self):
        with pytest.raises(PydanticValidationError):
            DatastoreSettings(_env_file=None, list_concurrency=0)

    def test_encryption_key_is_secret(self):
        settings = DatastoreSettings(_env_file=None, encryption_key="hunter2")

        assert "hunter2" not in repr(settings)
        assert settings.encryption_key.get_secret_value() == "hunter2"

    def test_get_settings_is_cached(self, clean_settings_cache, monkeypatch):
        monkeypatch.setenv("DATASTORE_LIST_CONCURRENCY", "3")
        first = get_settings()
        monkeypatch.setenv("DATASTORE_LIST_CONCURRENCY", "5")

        assert get_settings() is first
        assert get_settings().list_concurrency == 3

        reset_settings()
        assert get_settings().list_concurrency == 5


class TestLoggingConfig:

    @pytest.fixture(autouse=True)
    def clear_logging_env(self, monkeypatch):
        for name in ("LOG_LEVEL", "LOG_VERBOSITY", "LOG_FORMAT", "ENABLE_PROVIDER_LOGGING"):
            monkeypatch.delenv(name, raising=False)

    @pytest.mark.parametrize("verbosity,expected", [
        ("quiet", "ERROR"),
        ("NORMAL", "WARNING"),
        ("verbose", "INFO"),
        ("debug", "DEBUG"),
        ("chatty", "WARNING"),
    ])
    def test_verbosity_mapping(self, verbosity, expected):
        assert get_log_level_from_verbosity(verbosity) == expected

    def test_defaults_to_warning_simple(self):
        config = LoggingConfig.build_config()

        assert config["root"]["level"] == "WARNING"
        assert config["formatters"]["default"]["format"] == FORMAT_STRINGS[LogFormat.SIMPLE]
        assert config["loggers"]["httpx"]["level"] == "ERROR"
        assert config["loggers"]["ledger_datastore.providers"]["level"] == "WARNING"

    def test_log_level_overrides_verbosity(self, monkeypatch):
        monkeypatch.setenv("LOG_VERBOSITY", "QUIET")
        monkeypatch.setenv("LOG_LEVEL", "debug")

        config = LoggingConfig.build_config()

        assert config["root"]["level"] == "DEBUG"
        assert config["loggers"]["ledger_datastore.providers"]["level"] == "DEBUG"

    def test_invalid_level_falls_back_to_verbosity(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "LOUD")
        monkeypatch.setenv("LOG_VERBOSITY", "VERBOSE")

        assert LoggingConfig.build_config()["root"]["level"] == "INFO"

    def test_format_selection(self, monkeypatch):
        monkeypatch.setenv("LOG_FORMAT", "DETAILED")
        config = LoggingConfig.build_config()
        assert config["formatters"]["default"]["format"] == FORMAT_STRINGS[LogFormat.DETAILED]

        monkeypatch.setenv("LOG_FORMAT", "xml")
        config = LoggingConfig.build_config()
        assert config["formatters"]["default"]["format"] == FORMAT_STRINGS[LogFormat.SIMPLE]

    def test_provider_logging_can_be_enabled(self, monkeypatch):
        monkeypatch.setenv("ENABLE_PROVIDER_LOGGING", "true")

        assert "ledger_datastore.providers" not in LoggingConfig.build_config()["loggers"]

    def test_set_module_level(self):
        logger = logging.getLogger("ledger_datastore.tests.sample")
        original = logger.level
        try:
            LoggingConfig.set_module_level("ledger_datastore.tests.sample", "info")
            assert logger.level == logging.INFO

            LoggingConfig.silence_module("ledger_datastore.tests.sample")
            assert logger.level == logging.CRITICAL
        finally:
            logger.setLevel(original)
