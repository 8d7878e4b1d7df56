"""Loguru configuration shared by the service and its tests.

Every record carries ``extra["correlation_id"]``, taken from a ContextVar that
the request middleware sets per request. Outside a request it is ``"-"``.
"""

from __future__ import annotations

import logging
import os
import sys
import uuid
from contextvars import ContextVar
from typing import Any

from loguru import logger as _root_logger

from .sensitive_filter import sanitize_record

_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
    "<lvl>{level:<8}</lvl> | "
    "<magenta>{extra[correlation_id]}</magenta> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
    "<lvl>{message}</lvl>"
)
_DEFAULT_LOG_FILE = os.path.join("instance", "userauth.log")

_correlation_id: ContextVar[str] = ContextVar("correlation_id", default="-")


def _stamp_correlation_id(record: dict[str, Any]) -> None:
    record["extra"]["correlation_id"] = _correlation_id.get()


logger = _root_logger.patch(_stamp_correlation_id)


def new_correlation_id() -> str:
    return uuid.uuid4().hex[:16]


def set_correlation_id(value: str | None) -> None:
    _correlation_id.set(value or "-")


def get_correlation_id() -> str:
    return _correlation_id.get()


def clear_correlation_id() -> None:
    _correlation_id.set("-")


class _StdlibBridge(logging.Handler):
    """Forwards stdlib records (werkzeug, sqlalchemy) into loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level: str | int = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        # Skip the logging module's own frames so loguru reports the caller.
        frame, depth = logging.currentframe(), 2
        while frame is not None and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(level, record.getMessage())


def _resolve_log_file(log_file: str | None) -> str:
    path = os.path.abspath(log_file or os.getenv("LOG_FILE") or _DEFAULT_LOG_FILE)
    os.makedirs(os.path.dirname(path), exist_ok=True)
    return path


def setup_logging(
    level: str | None = None,
    *,
    log_file: str | None = None,
    debug_mode: bool = False,
) -> None:
    """Replace all loguru sinks with stderr plus a file, both sanitized."""
    resolved = "DEBUG" if debug_mode else (level or os.getenv("LOG_LEVEL") or "INFO").upper()
    common: dict[str, Any] = {
        "level": resolved,
        "format": _FORMAT,
        "filter": sanitize_record,
        "backtrace": False,
        "diagnose": False,
    }

    _root_logger.remove()
    _root_logger.configure(extra={"correlation_id": "-"})
    _root_logger.add(sys.stderr, colorize=True, **common)
    _root_logger.add(
        _resolve_log_file(log_file), colorize=False, enqueue=True, encoding="utf-8", **common
    )

    logging.basicConfig(handlers=[_StdlibBridge()], level=0, force=True)
    logging.getLogger("werkzeug").setLevel(logging.INFO)
    logging.getLogger("sqlalchemy.engine").setLevel(
        logging.INFO if debug_mode else logging.WARNING
    )


__all__ = [
    "clear_correlation_id",
    "get_correlation_id",
    "logger",
    "new_correlation_id",
    "set_correlation_id",
    "setup_logging",
]
