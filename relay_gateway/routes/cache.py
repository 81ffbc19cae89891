from fastapi import APIRouter, Depends, Request
from relay_gateway.schemas.cache_schema import SetResponse, GetResponse, KeysResponse
from relay_gateway.controllers.cache_controller import cache_set, cache_get, cache_keys
from relay_gateway.utils.redis_util import CacheStore, get_cache_store

router = APIRouter(tags=["Cache"])

@router.post("/set", response_model=SetResponse, summary="Store the raw request body under a key")
async def set_cache(request: Request, key: str = "", group: str = "", store: CacheStore = Depends(get_cache_store)):
    body = await request.body()
    return await cache_set(store, key, group, body)

@router.get("/get", response_model=GetResponse, summary="Read a key from a group")
async def get_cache(key: str = "", group: str = "", store: CacheStore = Depends(get_cache_store)):
    return await cache_get(store, key, group)

@router.get("/hkeys", response_model=KeysResponse, summary="List the keys stored in a group")
async def list_cache_keys(group: str = "", store: CacheStore = Depends(get_cache_store)):
    return await cache_keys(store, group)
