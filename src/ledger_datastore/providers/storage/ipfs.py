"""IPFS storage provider.

ONLY IPFS HTTP API client - stores and fetches file content through a
Kubo-compatible ``/api/v0`` endpoint.
"""

import logging
from typing import Any, Dict, Optional

import httpx

from ...config.settings import DatastoreSettings, get_settings
from ...core.exceptions import (
    StorageUnavailable,
    WriteFailure,
    ReadFailure,
    StorageNotFound,
)

logger = logging.getLogger(__name__)

# Kubo reports missing blocks with these fragments in its error message
NOT_FOUND_MARKERS = ("not found", "no link named", "invalid path", "invalid cid")


class IpfsStorage:
    """IPFS storage provider.
    
    Configuration:
    - api_url: Base URL of the IPFS HTTP API (default: http://127.0.0.1:5001)
    - timeout_seconds: Request timeout (default: 30)
    - pin: Whether added content is pinned on the node (default: True)
    - transport: Optional httpx transport, mainly for tests
    """
    
    API_PREFIX = "/api/v0"
    
    def __init__(
        self,
        api_url: str = "http://127.0.0.1:5001",
        timeout_seconds: float = 30.0,
        pin: bool = True,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        if not api_url.startswith(("http://", "https://")):
            raise ValueError(f"Invalid IPFS api_url format: {api_url}")
        if timeout_seconds <= 0:
            raise ValueError("timeout_seconds must be positive")
        
        self.api_url = api_url.rstrip("/")
        self.timeout_seconds = timeout_seconds
        self.pin = pin
        self._transport = transport
    
    @classmethod
    def from_settings(cls, settings: Optional[DatastoreSettings] = None) -> 'IpfsStorage':
        """Create provider from datastore settings."""
        settings = settings or get_settings()
        return cls(
            api_url=settings.ipfs_api_url,
            timeout_seconds=settings.ipfs_timeout_seconds,
            pin=settings.ipfs_pin
        )
    
    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url=self.api_url + self.API_PREFIX,
            timeout=self.timeout_seconds,
            transport=self._transport
        )
    
    async def add_file(self, content: bytes) -> str:
        """Add content to IPFS and return its CID."""
        params = {"pin": "true" if self.pin else "false", "cid-version": "1"}
        files = {"file": ("file", bytes(content), "application/octet-stream")}
        
        try:
            async with self._client() as client:
                response = await client.post("/add", params=params, files=files)
                response.raise_for_status()
                payload = response.json()
        except httpx.TransportError as e:
            raise StorageUnavailable(
                f"IPFS node unreachable at {self.api_url}: {e}",
                details={"api_url": self.api_url, "error_type": type(e).__name__}
            ) from e
        except httpx.HTTPStatusError as e:
            raise WriteFailure(
                f"IPFS add failed with status {e.response.status_code}: {self._error_message(e.response)}",
                details={"api_url": self.api_url, "status_code": e.response.status_code}
            ) from e
        except ValueError as e:
            raise WriteFailure(
                f"IPFS add returned invalid JSON: {e}",
                details={"api_url": self.api_url}
            ) from e
        
        cid = payload.get("Hash") if isinstance(payload, dict) else None
        if not cid:
            raise WriteFailure(
                "IPFS add response did not contain a Hash",
                details={"api_url": self.api_url, "response": payload}
            )
        
        logger.debug(f"Added {len(content)} bytes to IPFS as {cid}")
        return cid
    
    async def get_file(self, storage_ref: str) -> bytes:
        """Fetch content for a CID."""
        try:
            async with self._client() as client:
                response = await client.post("/cat", params={"arg": storage_ref})
                response.raise_for_status()
                return response.content
        except httpx.TransportError as e:
            raise ReadFailure(
                f"IPFS cat failed for {storage_ref}: {e}",
                details={"storage_ref": storage_ref, "error_type": type(e).__name__}
            ) from e
        except httpx.HTTPStatusError as e:
            message = self._error_message(e.response)
            details = {"storage_ref": storage_ref, "status_code": e.response.status_code}
            if e.response.status_code == 404 or any(m in message.lower() for m in NOT_FOUND_MARKERS):
                raise StorageNotFound(
                    f"IPFS has no content for {storage_ref}: {message}",
                    details=details
                ) from e
            raise ReadFailure(
                f"IPFS cat failed with status {e.response.status_code}: {message}",
                details=details
            ) from e
    
    @staticmethod
    def _error_message(response: httpx.Response) -> str:
        """Extract the error message from an IPFS API error response."""
        try:
            payload: Dict[str, Any] = response.json()
        except ValueError:
            return response.text
        if isinstance(payload, dict) and payload.get("Message"):
            return str(payload["Message"])
        return response.text
    
    def __repr__(self) -> str:
        return f"IpfsStorage(api_url='{self.api_url}')"
