"""Context-local fields injected into log records."""

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Any

_log_fields: ContextVar[dict[str, Any] | None] = ContextVar("log_fields", default=None)


def current_log_fields() -> dict[str, Any]:
    """Fields active in the current context (empty dict when none)."""
    return dict(_log_fields.get() or {})


class ContextFilter(logging.Filter):
    """Copies the active context fields onto each log record.

    Fields already present on the record (e.g. passed via ``extra=``) win.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        for key, value in current_log_fields().items():
            if not hasattr(record, key):
                setattr(record, key, value)
        return True


@contextmanager
def log_context(**fields: Any) -> Iterator[None]:
    """Add fields to every record logged inside the block.

    Nested blocks stack; leaving a block restores the outer fields.
    """
    merged = current_log_fields()
    merged.update(fields)
    token = _log_fields.set(merged)
    try:
        yield
    finally:
        _log_fields.reset(token)


@contextmanager
def log_trip_context(trip_id: str, **fields: Any) -> Iterator[None]:
    """Shorthand for trip operations; the trip id doubles as correlation id."""
    correlation_id = fields.pop("correlation_id", trip_id)
    with log_context(trip_id=trip_id, correlation_id=correlation_id, **fields):
        yield
