import logging
import logging.config
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from relay_gateway.config import settings
from relay_gateway.logging_config import LOGGING_CONFIG
from relay_gateway.routes import health_router, parse_router, upload_router, cache_router
from relay_gateway.utils.cors import CORS_HEADERS, CORSMiddleware
from relay_gateway.utils.errors import GatewayError, StoreError
from relay_gateway.utils.http_client import create_http_client
from relay_gateway.utils.redis_util import CacheStore, create_redis

logging.config.dictConfig(LOGGING_CONFIG)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Open the shared Redis and HTTP clients; a dead Redis is logged, not fatal."""
    store = CacheStore(create_redis())
    redis_addr = f"{settings.REDIS_HOST}:{settings.REDIS_PORT}"
    try:
        await store.ping()
        logger.info(f"✅ Connected to Redis at {redis_addr} (db {settings.REDIS_DB})")
    except StoreError as e:
        logger.warning(f"⚠️ Could not connect to Redis: {e}")
        logger.warning(f"⚠️ Redis operations will fail. Please ensure Redis is running on {redis_addr}")

    app.state.cache_store = store
    app.state.http_client = create_http_client()
    yield

    await app.state.http_client.aclose()
    await store.close()
    logger.info("🔌 Closed Redis and HTTP clients")


async def gateway_error_handler(request: Request, exc: GatewayError):
    return JSONResponse(exc.to_response(), status_code=exc.status_code)


async def http_error_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse({"error": str(exc.detail)}, status_code=exc.status_code, headers=exc.headers)


async def validation_error_handler(request: Request, exc: RequestValidationError):
    problems = "; ".join(
        f"{'.'.join(str(part) for part in err.get('loc', ()))}: {err.get('msg', '')}"
        for err in exc.errors()
    )
    return JSONResponse({"error": f"Invalid request: {problems}"}, status_code=400)


async def unhandled_error_handler(request: Request, exc: Exception):
    # Runs outside the CORS middleware, so the headers are set here
    logger.exception(f"❌ Unhandled error on {request.method} {request.url.path}")
    return JSONResponse({"error": str(exc) or exc.__class__.__name__}, status_code=500, headers=CORS_HEADERS)


def create_app() -> FastAPI:
    app = FastAPI(
        title="Relay Gateway API",
        description="""
        **Relay Gateway**, a small HTTP gateway offering:
        - URL fetch (`/parse`)
        - File uploads to local storage (`/upload`)
        - Redis hash key/value proxy (`/set`, `/get`, `/hkeys`)
        """,
        version="1.0.0",
        lifespan=lifespan,
        openapi_tags=[
            {"name": "Health", "description": "Check the Redis connection"},
            {"name": "Cache", "description": "Key/value access grouped by Redis hash"},
        ],
    )

    app.add_middleware(CORSMiddleware)

    app.add_exception_handler(GatewayError, gateway_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)

    for router in (health_router, parse_router, upload_router, cache_router):
        app.include_router(router, prefix=settings.API_PREFIX)

    return app


app = create_app()


def run():
    # uvicorn logs the cause and exits non-zero when the port cannot be bound
    logger.info(f"Starting server on {settings.HOST}:{settings.PORT}...")
    uvicorn.run(app, host=settings.HOST, port=settings.PORT, log_config=LOGGING_CONFIG)
