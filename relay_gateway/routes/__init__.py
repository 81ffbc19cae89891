from .health import router as health_router
from .parse import router as parse_router
from .upload import router as upload_router
from .cache import router as cache_router

__all__ = ["health_router", "parse_router", "upload_router", "cache_router"]
