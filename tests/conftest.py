"""
Shared fixtures: an in-memory Redis hash client, a mocked outbound HTTP
client and an app wired to both through dependency overrides.
"""

import httpx
import pytest
from fastapi.testclient import TestClient

from relay_gateway.main import create_app
from relay_gateway.routes.upload import get_upload_dir
from relay_gateway.utils.http_client import get_http_client
from relay_gateway.utils.redis_util import CacheStore, get_cache_store


class FakeHashClient:
    """Implements the handful of redis.asyncio hash commands CacheStore uses."""

    def __init__(self):
        self.hashes = {}

    async def ping(self):
        return True

    async def hset(self, name, key, value):
        if isinstance(value, bytes):
            value = value.decode("utf-8", errors="replace")
        fields = self.hashes.setdefault(name, {})
        created = key not in fields
        fields[key] = value
        return int(created)

    async def hget(self, name, key):
        return self.hashes.get(name, {}).get(key)

    async def hkeys(self, name):
        return list(self.hashes.get(name, {}))

    async def aclose(self):
        pass


class DroppedBody(httpx.AsyncByteStream):
    """Body stream whose connection resets after the first chunk."""

    async def __aiter__(self):
        yield b"partial"
        raise httpx.ReadError("connection reset by peer")


def remote_handler(request: httpx.Request) -> httpx.Response:
    """Stand-in for the outside world reached by /parse."""
    path = request.url.path
    if path == "/hello":
        return httpx.Response(200, text="hello")
    if path == "/empty":
        return httpx.Response(200, content=b"")
    if path == "/moved":
        return httpx.Response(301, headers={"Location": "http://remote.test/hello"})
    if path == "/boom":
        raise httpx.ConnectError("connection refused", request=request)
    if path == "/reset":
        return httpx.Response(200, stream=DroppedBody())
    if path == "/teapot":
        return httpx.Response(418, text="short and stout")
    return httpx.Response(404, text="nothing here")


@pytest.fixture
def redis_client():
    return FakeHashClient()


@pytest.fixture
def cache_store(redis_client):
    return CacheStore(redis_client)


@pytest.fixture
def http_client():
    return httpx.AsyncClient(transport=httpx.MockTransport(remote_handler), follow_redirects=True)


@pytest.fixture
def upload_dir(tmp_path):
    return tmp_path / "upload"


@pytest.fixture
def app(cache_store, http_client, upload_dir):
    app = create_app()
    app.dependency_overrides[get_cache_store] = lambda: cache_store
    app.dependency_overrides[get_http_client] = lambda: http_client
    app.dependency_overrides[get_upload_dir] = lambda: str(upload_dir)
    return app


@pytest.fixture
def client(app):
    """Test client without lifespan; every collaborator comes from the overrides."""
    return TestClient(app)
