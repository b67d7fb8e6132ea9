# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Structured JSON logging on stdout.

A single handler lives on the service logger; module loggers are its
children and propagate to it.
"""

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any

from app.core.config import settings


class JSONFormatter(logging.Formatter):
    """One JSON object per record, with the traceback when one is attached."""

    def format(self, record: logging.LogRecord) -> str:
        log_data: dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        request_id = getattr(record, "request_id", None)
        if request_id:
            log_data["request_id"] = request_id
        if record.exc_info:
            log_data["traceback"] = self.formatException(record.exc_info)
        return json.dumps(log_data)


def _service_logger() -> logging.Logger:
    root = logging.getLogger(settings.SERVICE_NAME)
    if not root.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(JSONFormatter())
        root.addHandler(handler)
        root.setLevel(getattr(logging, settings.LOG_LEVEL, logging.INFO))
        root.propagate = False
    return root


def get_logger(name: str | None = None) -> logging.Logger:
    """Return the service logger, or a named child of it."""
    root = _service_logger()
    return root.getChild(name) if name else root
