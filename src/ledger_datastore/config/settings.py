"""
Settings for ledger-datastore.

Environment-driven defaults for the bundled providers and the datastore
itself. Every value can be overridden with a ``DATASTORE_`` prefixed
environment variable or a ``.env`` file.
"""
from functools import lru_cache

from pydantic import Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class DatastoreSettings(BaseSettings):
    """Datastore settings loaded from the environment."""
    
    model_config = SettingsConfigDict(
        env_prefix="DATASTORE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )
    
    # IPFS Storage Configuration
    ipfs_api_url: str = Field(default="http://127.0.0.1:5001")
    ipfs_timeout_seconds: float = Field(default=30.0, gt=0)
    ipfs_pin: bool = Field(default=True)
    
    # Encryption Configuration
    encryption_key: SecretStr = Field(default="default-dev-key-change-in-production")
    encryption_salt: str = Field(default="ledger-datastore")
    encryption_iterations: int = Field(default=100000, ge=1)
    
    # Datastore Behaviour
    encrypt_content: bool = Field(default=False)
    list_concurrency: int = Field(default=1, ge=1)
    
    @field_validator("ipfs_api_url")
    @classmethod
    def validate_ipfs_api_url(cls, v: str) -> str:
        """Require an http(s) URL and strip the trailing slash."""
        if not v.startswith(("http://", "https://")):
            raise ValueError(f"Invalid ipfs_api_url format: {v}")
        return v.rstrip("/")


@lru_cache()
def get_settings() -> DatastoreSettings:
    """Get cached settings instance."""
    return DatastoreSettings()


def reset_settings() -> None:
    """
    Drop the cached settings instance.
    
    This function is primarily useful for testing scenarios.
    """
    get_settings.cache_clear()
