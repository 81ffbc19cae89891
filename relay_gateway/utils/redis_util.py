import logging
from typing import List, Union

import redis.asyncio as aioredis
from fastapi import Request
from redis.exceptions import RedisError

from relay_gateway.config import settings
from relay_gateway.utils.errors import StoreError, StoreNotFoundError

logger = logging.getLogger(__name__)

DEFAULT_GROUP = "default"


def create_redis() -> aioredis.Redis:
    # Values go in as raw bytes; bytes that are not valid UTF-8 come back replaced
    return aioredis.Redis(
        host=settings.REDIS_HOST,
        port=settings.REDIS_PORT,
        db=settings.REDIS_DB,
        password=settings.REDIS_PASSWORD,
        decode_responses=True,
        encoding_errors="replace",
    )


class CacheStore:
    """
    Group/key/value access on top of Redis hashes.

    A group is one hash and a key is one field inside it. The client is shared
    by every request; redis-py pools connections so no extra locking is done here.
    """

    def __init__(self, client: aioredis.Redis):
        self.client = client

    async def ping(self) -> bool:
        try:
            return bool(await self.client.ping())
        except RedisError as e:
            raise StoreError(f"Failed to ping Redis: {e}") from e

    async def put(self, group: str, key: str, value: Union[str, bytes]) -> None:
        try:
            await self.client.hset(group, key, value)
        except RedisError as e:
            logger.warning(f"⚠️ HSET {group}/{key} failed: {e}")
            raise StoreError(f"Failed to store data in Redis: {e}") from e

    async def get(self, group: str, key: str) -> str:
        try:
            value = await self.client.hget(group, key)
        except RedisError as e:
            logger.warning(f"⚠️ HGET {group}/{key} failed: {e}")
            raise StoreError(f"Failed to get data from Redis: {e}") from e
        # An empty string is a stored value; only a missing field is None
        if value is None:
            raise StoreNotFoundError()
        return value

    async def list_keys(self, group: str) -> List[str]:
        try:
            return list(await self.client.hkeys(group))
        except RedisError as e:
            logger.warning(f"⚠️ HKEYS {group} failed: {e}")
            raise StoreError(f"Failed to get keys from Redis: {e}") from e

    async def close(self) -> None:
        await self.client.aclose()


def get_cache_store(request: Request) -> CacheStore:
    return request.app.state.cache_store
