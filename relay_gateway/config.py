import os
from typing import Optional
from dotenv import load_dotenv
load_dotenv()


def _optional_float(name: str) -> Optional[float]:
    raw = os.getenv(name, "").strip()
    return float(raw) if raw else None


class Settings:
    REDIS_HOST: str = os.getenv("REDIS_HOST", "localhost")
    REDIS_PORT: int = int(os.getenv("REDIS_PORT", 6379))
    REDIS_DB: int = int(os.getenv("REDIS_DB", 11))
    REDIS_PASSWORD: Optional[str] = os.getenv("REDIS_PASSWORD") or None

    # HTTP server
    HOST: str = os.getenv("HOST", "0.0.0.0")
    PORT: int = int(os.getenv("PORT", 6161))
    API_PREFIX: str = os.getenv("API_PREFIX", "/api")

    # Uploads
    UPLOAD_DIR: str = os.getenv("UPLOAD_DIR", "upload")
    UPLOAD_RESTRICT_FILENAMES: bool = os.getenv("UPLOAD_RESTRICT_FILENAMES", "false").lower() == "true"

    # Outbound fetches; unset means wait as long as the remote takes
    FETCH_TIMEOUT: Optional[float] = _optional_float("FETCH_TIMEOUT")

settings = Settings()
