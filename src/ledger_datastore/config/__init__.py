"""Configuration module for ledger-datastore.

Environment-driven settings and logging setup.
"""

from .settings import DatastoreSettings, get_settings, reset_settings
from .logging_config import (
    setup_logging,
    get_logger,
    LogLevel,
    LogVerbosity,
    LogFormat,
    LoggingConfig,
)

__all__ = [
    "DatastoreSettings",
    "get_settings",
    "reset_settings",
    "setup_logging",
    "get_logger",
    "LogLevel",
    "LogVerbosity",
    "LogFormat",
    "LoggingConfig",
]
