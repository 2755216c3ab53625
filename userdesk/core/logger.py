"""Structured logging configuration with request correlation."""

from __future__ import annotations

import json
import logging
import sys
from contextlib import contextmanager
from contextvars import ContextVar
from datetime import datetime, timezone
from typing import IO, Any, Iterator
from uuid import uuid4

REQUEST_ID_HEADER = "X-Request-ID"

_request_id: ContextVar[str | None] = ContextVar("userdesk_request_id", default=None)


class JSONFormatter(logging.Formatter):
    """Render log records as JSON objects."""

    extra_keys = ("method", "path", "status", "elapsed_ms", "user_id", "count")

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "time": datetime.now(timezone.utc).isoformat(timespec="milliseconds"),
            "level": record.levelname,
            "name": record.name,
            "message": record.getMessage(),
            "request_id": getattr(record, "request_id", None),
        }
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        for key in self.extra_keys:
            if hasattr(record, key):
                payload[key] = getattr(record, key)
        return json.dumps(payload, default=str)


class RequestIdFilter(logging.Filter):
    """Ensure a ``request_id`` attribute is always present on log records."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.request_id = _request_id.get()
        return True


def current_request_id() -> str | None:
    """Return the correlation id bound to the current context, if any."""

    return _request_id.get()


def ensure_request_id() -> str:
    """Return the current correlation identifier, generating one when necessary."""

    value = _request_id.get()
    if value:
        return value
    return str(uuid4())


@contextmanager
def request_scope(request_id: str | None = None) -> Iterator[str]:
    """Bind a correlation id to the current context for one outgoing request.

    Parameters
    ----------
    request_id:
        Identifier to bind. A fresh UUID4 is generated when omitted.

    Yields
    ------
    str
        The bound identifier, suitable for the ``X-Request-ID`` header.
    """

    value = request_id or str(uuid4())
    token = _request_id.set(value)
    try:
        yield value
    finally:
        _request_id.reset(token)


def configure_logging(level: str | int = "INFO", stream: IO[str] | None = None) -> None:
    """Configure the root logger with JSON-formatted output on ``stream`` (stdout by default)."""

    handler = logging.StreamHandler(stream or sys.stdout)
    handler.setFormatter(JSONFormatter())
    handler.addFilter(RequestIdFilter())
    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    level_value: int | str = level
    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        level_value = resolved if isinstance(resolved, int) else level.upper()
    root.setLevel(level_value)


__all__ = [
    "REQUEST_ID_HEADER",
    "configure_logging",
    "current_request_id",
    "ensure_request_id",
    "request_scope",
]
