from fastapi import APIRouter, Depends
from relay_gateway.schemas.health_schema import HealthResponse
from relay_gateway.controllers.health_controller import health_check
from relay_gateway.utils.redis_util import CacheStore, get_cache_store

router = APIRouter(tags=["Health"])

@router.get("/health", response_model=HealthResponse, summary="Check the Redis connection")
async def health(store: CacheStore = Depends(get_cache_store)):
    return await health_check(store)
