"""Logging setup for applications embedding mxfinfo.

The library itself only creates module loggers; nothing is configured
until :func:`setup_logging` is called.
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import datetime, timezone
from typing import TextIO

from mxfinfo.config import get_config

LOG_FORMATS = ("simple", "detailed", "json")


class StructuredFormatter(logging.Formatter):
    """JSON formatter, one object per line."""

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        if record.exc_info and record.exc_info[0] is not None:
            log_data["exception"] = {
                "type": record.exc_info[0].__name__,
                "message": str(record.exc_info[1]),
                "traceback": self.formatException(record.exc_info),
            }

        # Context attached to MXFInfoError instances
        context = getattr(record, "context", None)
        if isinstance(context, dict):
            log_data["context"] = {k: str(v) for k, v in context.items()}

        return json.dumps(log_data)


class DetailedFormatter(logging.Formatter):
    """Human-readable detailed formatter."""

    def __init__(self) -> None:
        fmt = "%(asctime)s | %(levelname)-8s | %(name)s:%(funcName)s:%(lineno)d | %(message)s"
        super().__init__(fmt=fmt, datefmt="%Y-%m-%d %H:%M:%S")


class SimpleFormatter(logging.Formatter):
    """Simple formatter for console output."""

    def __init__(self) -> None:
        super().__init__(fmt="%(levelname)-8s | %(name)s | %(message)s")


def setup_logging(
    level: str | None = None,
    format: str | None = None,
    stream: TextIO | None = None,
) -> logging.Handler:
    """Configure the root logger.

    Unset arguments are taken from the ``logging`` section of the config.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format: Format type (simple, detailed, json)
        stream: Output stream (default: stderr)

    Returns:
        The installed handler

    Raises:
        ValueError: If the level or format is unknown
    """
    config = get_config().logging
    level = (level or config.level).upper()
    format = format or config.format

    numeric_level = logging.getLevelName(level)
    if not isinstance(numeric_level, int):
        raise ValueError(f"Unknown log level: {level}")
    if format not in LOG_FORMATS:
        raise ValueError(f"Unknown log format: {format}")

    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)
    root_logger.handlers.clear()

    handler = logging.StreamHandler(stream or sys.stderr)
    if format == "json":
        handler.setFormatter(StructuredFormatter())
    elif format == "detailed":
        handler.setFormatter(DetailedFormatter())
    else:
        handler.setFormatter(SimpleFormatter())

    root_logger.addHandler(handler)
    return handler
