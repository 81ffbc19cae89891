"""
Unit tests for the Redis hash backed CacheStore.
"""

import pytest
from unittest.mock import AsyncMock, MagicMock
from redis.exceptions import ConnectionError as RedisConnectionError

from relay_gateway.utils.errors import StoreError, StoreNotFoundError
from relay_gateway.utils.redis_util import CacheStore


@pytest.fixture
def broken_store():
    """CacheStore whose every command fails as if Redis were down."""
    client = MagicMock()
    failure = RedisConnectionError("Error 111 connecting to localhost:6379. Connection refused.")
    for command in ("ping", "hset", "hget", "hkeys"):
        setattr(client, command, AsyncMock(side_effect=failure))
    return CacheStore(client)


class TestCacheStore:
    """Test cases for CacheStore."""

    @pytest.mark.asyncio
    async def test_put_then_get_returns_value(self, cache_store):
        await cache_store.put("default", "greeting", "hello world")
        assert await cache_store.get("default", "greeting") == "hello world"

    @pytest.mark.asyncio
    async def test_put_overwrites_previous_value(self, cache_store):
        await cache_store.put("default", "k", "first")
        await cache_store.put("default", "k", "second")
        assert await cache_store.get("default", "k") == "second"

    @pytest.mark.asyncio
    async def test_groups_are_separate(self, cache_store):
        await cache_store.put("alpha", "k", "a")
        await cache_store.put("beta", "k", "b")
        assert await cache_store.get("alpha", "k") == "a"
        assert await cache_store.get("beta", "k") == "b"

    @pytest.mark.asyncio
    async def test_get_missing_key_is_not_found(self, cache_store):
        with pytest.raises(StoreNotFoundError) as exc_info:
            await cache_store.get("default", "never-written")
        assert not isinstance(exc_info.value, StoreError)
        assert exc_info.value.status_code == 404

    @pytest.mark.asyncio
    async def test_empty_value_is_found(self, cache_store):
        await cache_store.put("default", "blank", "")
        assert await cache_store.get("default", "blank") == ""

    @pytest.mark.asyncio
    async def test_bytes_value_is_stored_as_text(self, cache_store):
        await cache_store.put("default", "raw", b'{"a": 1}')
        assert await cache_store.get("default", "raw") == '{"a": 1}'

    @pytest.mark.asyncio
    async def test_list_keys(self, cache_store):
        for key in ("a", "b", "c"):
            await cache_store.put("letters", key, key.upper())
        assert set(await cache_store.list_keys("letters")) == {"a", "b", "c"}

    @pytest.mark.asyncio
    async def test_list_keys_of_unknown_group_is_empty(self, cache_store):
        assert await cache_store.list_keys("nobody-home") == []

    @pytest.mark.asyncio
    async def test_commands_map_to_hash_primitives(self):
        client = MagicMock()
        client.hset = AsyncMock(return_value=1)
        client.hget = AsyncMock(return_value="v")
        client.hkeys = AsyncMock(return_value=["k"])
        store = CacheStore(client)

        await store.put("g", "k", "v")
        await store.get("g", "k")
        await store.list_keys("g")

        client.hset.assert_awaited_once_with("g", "k", "v")
        client.hget.assert_awaited_once_with("g", "k")
        client.hkeys.assert_awaited_once_with("g")


class TestCacheStoreFailures:
    """Connection failures surface as StoreError at call time."""

    @pytest.mark.asyncio
    async def test_put_failure(self, broken_store):
        with pytest.raises(StoreError, match="Failed to store data in Redis"):
            await broken_store.put("default", "k", "v")

    @pytest.mark.asyncio
    async def test_get_failure_is_not_not_found(self, broken_store):
        with pytest.raises(StoreError, match="Failed to get data from Redis"):
            await broken_store.get("default", "k")

    @pytest.mark.asyncio
    async def test_list_keys_failure(self, broken_store):
        with pytest.raises(StoreError, match="Failed to get keys from Redis"):
            await broken_store.list_keys("default")

    @pytest.mark.asyncio
    async def test_ping_failure(self, broken_store):
        with pytest.raises(StoreError, match="Connection refused"):
            await broken_store.ping()
