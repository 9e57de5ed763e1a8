"""
tests/test_config_logging.py

Settings validation (env driven), the JSON log formatter and the access log.
"""
from __future__ import annotations

import json
import logging
import sys

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient
from pydantic import ValidationError
from starlette.requests import Request

from journalcore.config import Settings
from journalcore.core.logging import (
    JournalJsonFormatter,
    bind_request_id,
    configure_logging,
    current_request_id,
    request_id_ctx,
)
from journalcore.core.middleware import RequestIDMiddleware, resolve_request_id


# ═══════════════════════════════════════════════════════════════════
# 1. SETTINGS
# ═══════════════════════════════════════════════════════════════════

def test_settings_defaults(monkeypatch):
    for var in ("NUMERIC_WINDOW_BEFORE", "NUMERIC_WINDOW_AFTER", "MAX_TRANSCRIPT_LENGTH", "ENV", "LOG_LEVEL"):
        monkeypatch.delenv(var, raising=False)
    s = Settings(_env_file=None)
    assert s.NUMERIC_WINDOW_BEFORE == 30
    assert s.NUMERIC_WINDOW_AFTER == 40
    assert s.MAX_TRANSCRIPT_LENGTH == 5000
    assert s.is_production is False


def test_settings_from_env(monkeypatch):
    monkeypatch.setenv("NUMERIC_WINDOW_BEFORE", "10")
    monkeypatch.setenv("NUMERIC_WINDOW_AFTER", "20")
    monkeypatch.setenv("ENV", "production")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    s = Settings(_env_file=None)
    assert (s.NUMERIC_WINDOW_BEFORE, s.NUMERIC_WINDOW_AFTER) == (10, 20)
    assert s.is_production is True
    assert s.LOG_LEVEL == "DEBUG"


def test_negative_window_rejected(monkeypatch):
    monkeypatch.setenv("NUMERIC_WINDOW_BEFORE", "-1")
    with pytest.raises(ValidationError):
        Settings(_env_file=None)


def test_non_positive_max_length_rejected(monkeypatch):
    monkeypatch.setenv("MAX_TRANSCRIPT_LENGTH", "0")
    with pytest.raises(ValidationError):
        Settings(_env_file=None)


def test_unknown_log_level_rejected(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "chatty")
    with pytest.raises(ValidationError):
        Settings(_env_file=None)


# ═══════════════════════════════════════════════════════════════════
# 2. JSON FORMATTER
# ═══════════════════════════════════════════════════════════════════

def _record(msg: str, exc_info=None, **fields) -> logging.LogRecord:
    record = logging.LogRecord(
        name="journalcore.test",
        level=logging.INFO,
        pathname=__file__,
        lineno=1,
        msg=msg,
        args=(),
        exc_info=exc_info,
    )
    record.__dict__.update(fields)
    return record


def test_formatter_emits_json_with_request_id():
    token = bind_request_id("rid-123")
    try:
        assert current_request_id() == "rid-123"
        line = JournalJsonFormatter().format(_record("parsed check-in"))
    finally:
        request_id_ctx.reset(token)

    payload = json.loads(line)
    assert payload["msg"] == "parsed check-in"
    assert payload["logger"] == "journalcore.test"
    assert payload["level"] == "INFO"
    assert payload["request_id"] == "rid-123"
    assert payload["ts"].endswith("Z")


def test_formatter_omits_request_id_outside_a_request():
    payload = json.loads(JournalJsonFormatter().format(_record("startup")))
    assert "request_id" not in payload


def test_formatter_copies_extra_fields():
    line = JournalJsonFormatter().format(_record("parsed check-in", chars=42, symptoms=3))
    payload = json.loads(line)
    assert payload["chars"] == 42
    assert payload["symptoms"] == 3
    assert "args" not in payload
    assert "pathname" not in payload


def test_formatter_exception_without_traceback():
    try:
        raise ValueError("bad taxonomy")
    except ValueError:
        line = JournalJsonFormatter().format(_record("failed", exc_info=sys.exc_info()))

    payload = json.loads(line)
    assert payload["error"] == "ValueError: bad taxonomy"
    assert "Traceback" not in line


def test_configure_logging_installs_one_handler():
    root = logging.getLogger()
    saved_handlers, saved_level = list(root.handlers), root.level
    try:
        first = configure_logging("warning")
        second = configure_logging("debug")
        assert first is second
        assert root.level == logging.DEBUG
        assert sum(isinstance(h.formatter, JournalJsonFormatter) for h in root.handlers) == 1
    finally:
        root.handlers[:] = saved_handlers
        root.setLevel(saved_level)


# ═══════════════════════════════════════════════════════════════════
# 3. ACCESS LOG / REQUEST ID
# ═══════════════════════════════════════════════════════════════════

def _request(headers: dict[str, str] | None = None) -> Request:
    raw = [(k.lower().encode(), v.encode()) for k, v in (headers or {}).items()]
    return Request({"type": "http", "method": "GET", "path": "/", "headers": raw})


def test_resolve_request_id_prefers_client_value():
    assert resolve_request_id(_request({"X-Request-ID": " rid-7 "})) == "rid-7"


def test_resolve_request_id_replaces_blank_or_oversized_value():
    for supplied in ("   ", "x" * 500):
        rid = resolve_request_id(_request({"X-Request-ID": supplied}))
        assert len(rid) == 36, rid


@pytest.mark.asyncio
async def test_access_log_carries_request_fields(caplog):
    app = FastAPI()
    app.add_middleware(RequestIDMiddleware)

    @app.get("/ping")
    async def ping():
        return {"ok": True}

    transport = ASGITransport(app=app)
    with caplog.at_level(logging.INFO, logger="journalcore.access"):
        async with AsyncClient(transport=transport, base_url="http://testserver") as client:
            await client.get("/ping", headers={"X-Request-ID": "rid-access"})

    records = [r for r in caplog.records if r.name == "journalcore.access"]
    assert len(records) == 1
    rec = records[0]
    assert (rec.method, rec.path, rec.status) == ("GET", "/ping", 200)
    assert rec.duration_ms >= 0
    assert current_request_id() == ""
