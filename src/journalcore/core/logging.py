"""
src/journalcore/core/logging.py

One JSON object per line on stdout. Every line carries the current request id
when one is bound; structured fields passed with ``extra=`` are copied into
the object, so call sites log counts and timings as real fields:

    _log.info("parsed check-in", extra={"chars": 42, "symptoms": 3})

Transcripts are health data. Log their length and extraction counts only.
"""
from __future__ import annotations

import json
import logging
import sys
from contextvars import ContextVar
from datetime import datetime, timezone
from typing import Any

__all__ = [
    "JournalJsonFormatter",
    "bind_request_id",
    "configure_logging",
    "current_request_id",
    "request_id_ctx",
]

request_id_ctx: ContextVar[str] = ContextVar("journal_request_id", default="")

# Attributes every LogRecord has; anything else on a record came from ``extra=``.
_STANDARD_ATTRS = frozenset(
    vars(logging.LogRecord("", logging.INFO, "", 0, "", (), None))
) | {"message", "asctime", "taskName"}


def current_request_id() -> str:
    return request_id_ctx.get()


def bind_request_id(request_id: str):
    """Bind ``request_id`` for the current context; returns the reset token."""
    return request_id_ctx.set(request_id)


class JournalJsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {
            "ts": datetime.fromtimestamp(record.created, tz=timezone.utc)
            .isoformat(timespec="milliseconds")
            .replace("+00:00", "Z"),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }

        rid = request_id_ctx.get()
        if rid:
            entry["request_id"] = rid

        for key, value in record.__dict__.items():
            if key not in _STANDARD_ATTRS and not key.startswith("_"):
                entry.setdefault(key, value)

        # Exception class and message only; tracebacks stay out of the stream.
        if record.exc_info and record.exc_info[0] is not None:
            exc_type, exc_val, _ = record.exc_info
            entry["error"] = f"{exc_type.__name__}: {exc_val}"

        return json.dumps(entry, ensure_ascii=False, default=str)


def configure_logging(level: str = "INFO") -> logging.Handler:
    """Attach the JSON handler to the root logger, once.

    Repeated calls only adjust the level and return the existing handler.
    """
    root = logging.getLogger()
    root.setLevel(level.upper())

    for handler in root.handlers:
        if isinstance(handler.formatter, JournalJsonFormatter):
            return handler

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(JournalJsonFormatter())
    root.addHandler(handler)
    return handler
