"""
Structured logging for the finance API.

Records are emitted as one JSON object per line; ``user_id``, ``action`` and
``resource`` are picked up from the ``extra`` mapping when present.
"""

import json
import logging
from datetime import datetime, timezone
from typing import Optional

LOGGER_NAME = "nexora"


class JSONFormatter(logging.Formatter):
    def format(self, record):
        log_entry = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "user_id": getattr(record, "user_id", None),
            "action": getattr(record, "action", None),
            "resource": getattr(record, "resource", None),
        }
        log_entry = {k: v for k, v in log_entry.items() if v is not None}

        if record.exc_info:
            log_entry["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_entry, default=str)


def setup_logging(level: str = "INFO") -> logging.Logger:
    """Attach a single JSON stream handler to the ``nexora`` logger tree."""
    logger = logging.getLogger(LOGGER_NAME)

    for handler in logger.handlers[:]:
        logger.removeHandler(handler)

    handler = logging.StreamHandler()
    handler.setFormatter(JSONFormatter())
    logger.addHandler(handler)
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    logger.propagate = False

    return logger


def get_logger(name: str) -> logging.Logger:
    """Child logger under ``nexora``, e.g. ``get_logger("routes.auth")``."""
    return logging.getLogger(f"{LOGGER_NAME}.{name}")


def log_action(logger: logging.Logger, level: str, message: str,
               user_id: Optional[str] = None, action: Optional[str] = None,
               resource: Optional[str] = None):
    extra = {"user_id": user_id, "action": action, "resource": resource}
    getattr(logger, level.lower())(message, extra=extra)
