import os
import json
import logging
from datetime import datetime, timezone

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
LOG_FORMAT = os.getenv("LOG_FORMAT", "text").lower()

class JsonFormatter(logging.Formatter):
    """One JSON object per line, timestamps in UTC ISO-8601."""

    def format(self, record):
        entry = {
            "ts": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(timespec="milliseconds"),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        # Set by logger.exception in the unhandled error handler
        if record.exc_info:
            entry["exc"] = self.formatException(record.exc_info)
        return json.dumps(entry, ensure_ascii=False)

TEXT_FORMATTER = {
    "format": "%(asctime)s %(levelname)-7s %(name)s: %(message)s",
}

JSON_FORMATTER = {
    "()": JsonFormatter,
}

LOGGING_CONFIG = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "default": TEXT_FORMATTER if LOG_FORMAT == "text" else JSON_FORMATTER,
    },
    "loggers": {
        "uvicorn": {"handlers": ["default"], "level": "INFO", "propagate": False},
        "uvicorn.error": {"handlers": ["default"], "level": "INFO", "propagate": False},
        # Access lines duplicate what the controllers already log
        "uvicorn.access": {"handlers": ["default"], "level": "WARNING", "propagate": False},
        "httpx": {"handlers": ["default"], "level": "WARNING", "propagate": False},
        "relay_gateway": {"handlers": ["default"], "level": LOG_LEVEL, "propagate": False},
    },
    "handlers": {
        "default": {
            "formatter": "default",
            "class": "logging.StreamHandler",
        },
    }
}
