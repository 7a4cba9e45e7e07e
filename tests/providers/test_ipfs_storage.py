"""Tests for IpfsStorage using httpx.MockTransport."""

import httpx
import pytest

from ledger_datastore.core.exceptions import (
    ReadFailure,
    StorageNotFound,
    StorageUnavailable,
    WriteFailure,
)
from ledger_datastore.providers.storage import IpfsStorage


CID = "bafkreigh2akiscaildcqabsyg3dfr6chu3fgpregiymsck7e7aqa4s52zy"


def make_storage(handler, **kwargs):
    return IpfsStorage(
        api_url="http://ipfs.test:5001/",
        transport=httpx.MockTransport(handler),
        **kwargs
    )


class TestIpfsStorageConfig:
    
    def test_rejects_invalid_url(self):
        with pytest.raises(ValueError):
            IpfsStorage(api_url="ipfs.test:5001")
    
    def test_rejects_non_positive_timeout(self):
        with pytest.raises(ValueError):
            IpfsStorage(timeout_seconds=0)
    
    def test_from_settings(self, settings):
        storage = IpfsStorage.from_settings(settings)
        
        assert storage.api_url == "http://ipfs.test:5001"
        assert storage.timeout_seconds == settings.ipfs_timeout_seconds
        assert storage.pin is True


class TestIpfsStorageAdd:
    
    @pytest.mark.asyncio
    async def test_add_posts_multipart_and_returns_hash(self):
        seen = {}
        
        def handler(request: httpx.Request) -> httpx.Response:
            seen["path"] = request.url.path
            seen["pin"] = request.url.params.get("pin")
            seen["body"] = request.read()
            return httpx.Response(200, json={"Name": "file", "Hash": CID, "Size": "11"})
        
        storage = make_storage(handler)
        
        ref = await storage.add_file(b"hello world")
        
        assert ref == CID
        assert seen["path"] == "/api/v0/add"
        assert seen["pin"] == "true"
        assert b"hello world" in seen["body"]
    
    @pytest.mark.asyncio
    async def test_add_without_pin(self):
        seen = {}
        
        def handler(request: httpx.Request) -> httpx.Response:
            seen["pin"] = request.url.params.get("pin")
            return httpx.Response(200, json={"Hash": CID})
        
        await make_storage(handler, pin=False).add_file(b"x")
        
        assert seen["pin"] == "false"
    
    @pytest.mark.asyncio
    async def test_add_connection_error_is_unavailable(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)
        
        with pytest.raises(StorageUnavailable):
            await make_storage(handler).add_file(b"x")
    
    @pytest.mark.asyncio
    async def test_add_http_error_is_write_failure(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(500, json={"Message": "repo full", "Code": 0, "Type": "error"})
        
        with pytest.raises(WriteFailure) as exc_info:
            await make_storage(handler).add_file(b"x")
        
        assert "repo full" in exc_info.value.message
        assert exc_info.value.details["status_code"] == 500
    
    @pytest.mark.asyncio
    async def test_add_without_hash_is_write_failure(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json={"Name": "file"})
        
        with pytest.raises(WriteFailure):
            await make_storage(handler).add_file(b"x")


class TestIpfsStorageGet:
    
    @pytest.mark.asyncio
    async def test_cat_returns_bytes(self):
        seen = {}
        
        def handler(request: httpx.Request) -> httpx.Response:
            seen["path"] = request.url.path
            seen["arg"] = request.url.params.get("arg")
            return httpx.Response(200, content=b"\x00\x01\x02")
        
        content = await make_storage(handler).get_file(CID)
        
        assert content == b"\x00\x01\x02"
        assert seen == {"path": "/api/v0/cat", "arg": CID}
    
    @pytest.mark.asyncio
    async def test_cat_missing_block_is_not_found(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(500, json={"Message": "block was not found locally (offline)", "Code": 0})
        
        with pytest.raises(StorageNotFound):
            await make_storage(handler).get_file(CID)
    
    @pytest.mark.asyncio
    async def test_cat_other_error_is_read_failure(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(500, text="internal error")
        
        with pytest.raises(ReadFailure):
            await make_storage(handler).get_file(CID)
    
    @pytest.mark.asyncio
    async def test_cat_timeout_is_read_failure(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ReadTimeout("timed out", request=request)
        
        with pytest.raises(ReadFailure):
            await make_storage(handler).get_file(CID)
