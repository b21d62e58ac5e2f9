"""Logging setup for the SDK."""

import json
import logging
from datetime import datetime, timezone

from paybybank.core.config import settings

LOGGER_NAME = "paybybank"
STANDARD_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_configured = False


class JsonFormatter(logging.Formatter):
    """One JSON object per record."""

    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False)


def setup_logging(level: str | None = None, log_format: str | None = None) -> None:
    """Attach a handler to the SDK root logger.

    Safe to call more than once; only the first call installs a handler.
    """
    global _configured
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel((level or settings.log_level).upper())

    if _configured:
        return

    handler = logging.StreamHandler()
    if (log_format or settings.log_format) == "json":
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(logging.Formatter(STANDARD_FORMAT))
    logger.addHandler(handler)
    _configured = True


def is_configured() -> bool:
    return _configured


def get_logger(name: str) -> logging.Logger:
    """Get a logger under the SDK namespace."""
    if name == LOGGER_NAME or name.startswith(f"{LOGGER_NAME}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{LOGGER_NAME}.{name}")
