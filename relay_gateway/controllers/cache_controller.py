from relay_gateway.utils.errors import ClientInputError
from relay_gateway.utils.redis_util import CacheStore, DEFAULT_GROUP

def _group_or_default(group: str) -> str:
    return group or DEFAULT_GROUP

async def cache_set(store: CacheStore, key: str, group: str, body: bytes):
    """
    Store the raw request body under `key` in the group's hash (HSET group key body).
    """
    if not key:
        raise ClientInputError("key parameter is required")
    await store.put(_group_or_default(group), key, body)
    return {"status": "success"}

async def cache_get(store: CacheStore, key: str, group: str):
    if not key:
        raise ClientInputError("key parameter is required")
    data = await store.get(_group_or_default(group), key)
    return {"data": data}

async def cache_keys(store: CacheStore, group: str):
    """
    List every field of the group's hash. HKEYS walks the whole hash, which is
    fine for the group sizes this service sees.
    """
    keys = await store.list_keys(_group_or_default(group))
    return {"keys": keys}
