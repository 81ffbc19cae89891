from relay_gateway.utils.errors import StoreError
from relay_gateway.utils.redis_util import CacheStore

async def health_check(store: CacheStore):
    try:
        await store.ping()
        redis_status = "connected"
    except StoreError:
        redis_status = "disconnected"
    return {"status": "ok", "redis": redis_status}
