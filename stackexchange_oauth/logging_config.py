"""
Logging configuration for applications using the login providers.

Library modules only log through ``logging.getLogger(__name__)``; this
module is for the host process that wants structured JSON output.
"""

import json
import logging
import os
from datetime import UTC, datetime


class JsonFormatter(logging.Formatter):
    """
    Render each record as one JSON object.

    Fields passed through ``extra={"extra_fields": {...}}`` are merged into
    the object; exception tracebacks go under ``exception``.
    """

    def format(self, record: logging.LogRecord) -> str:
        log_object = {
            "timestamp": datetime.fromtimestamp(record.created, UTC).isoformat(),
            "severity": record.levelname,
            "name": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            log_object["exception"] = self.formatException(record.exc_info)

        extra_fields = getattr(record, "extra_fields", None)
        if isinstance(extra_fields, dict):
            log_object.update(extra_fields)

        return json.dumps(log_object, default=str)


def setup_global_logging() -> None:
    """
    Configure the root logger with JSON output on stdout.

    The level is read from LOG_LEVEL (default INFO).
    """
    handler = logging.StreamHandler()
    handler.setFormatter(JsonFormatter())

    root_logger = logging.getLogger()
    root_logger.addHandler(handler)
    root_logger.setLevel(os.getenv("LOG_LEVEL", "INFO").upper())

    # Remove default handlers to avoid duplicate logs
    for h in root_logger.handlers[:]:
        if h is not handler:
            root_logger.removeHandler(h)
