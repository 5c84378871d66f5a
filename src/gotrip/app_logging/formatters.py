"""Log formatters for JSON and human-readable output."""

import json
import logging
from datetime import UTC, datetime
from typing import Any

# Attributes every LogRecord carries; anything else came from context or extra=.
_RECORD_ATTRS = frozenset(vars(logging.LogRecord("", 0, "", 0, "", (), None))) | {
    "message",
    "asctime",
}


def record_fields(record: logging.LogRecord) -> dict[str, Any]:
    """Context and ``extra=`` fields attached to a record, in attachment order."""
    return {
        key: value
        for key, value in vars(record).items()
        if key not in _RECORD_ATTRS and not key.startswith("_")
    }


class JSONFormatter(logging.Formatter):
    """One JSON object per line, for log shippers.

    Every context field on the record (trip, rider, correlation id, ...) is
    emitted at the top level next to the fixed keys.
    """

    def __init__(self, environment: str = "development", service: str = "gotrip"):
        super().__init__()
        self.environment = environment
        self.service = service

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "service": self.service,
            "env": self.environment,
            "location": f"{record.module}:{record.lineno}",
        }
        for key, value in record_fields(record).items():
            payload.setdefault(key, value)

        if record.exc_info and record.exc_info[0] is not None:
            exc_type, exc_value, _ = record.exc_info
            payload["exception"] = {
                "type": exc_type.__name__,
                "message": str(exc_value),
                "traceback": self.formatException(record.exc_info),
            }

        return json.dumps(payload, default=str)


class DevFormatter(logging.Formatter):
    """Single-line console output with the trip context appended.

    Trip ids are shortened to their first 8 characters; the correlation id is
    dropped when it just repeats the trip id.
    """

    def __init__(self) -> None:
        super().__init__(
            fmt="%(asctime)s %(levelname)-7s %(name)s: %(message)s",
            datefmt="%H:%M:%S",
        )

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        fields = record_fields(record)
        trip_id = fields.pop("trip_id", None)
        if "correlation_id" in fields and fields["correlation_id"] in (trip_id, "-"):
            del fields["correlation_id"]

        tags = [f"trip={str(trip_id)[:8]}"] if trip_id is not None else []
        tags += [f"{key}={value}" for key, value in fields.items()]
        if not tags:
            return line

        first, newline, rest = line.partition("\n")
        return f"{first} [{' '.join(tags)}]{newline}{rest}"
