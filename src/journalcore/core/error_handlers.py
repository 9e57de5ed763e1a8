"""
src/journalcore/core/error_handlers.py

Maps failures to one JSON body:

    {"error": <message>, "error_code": <STABLE_CODE>, "code": <status>, "request_id": <id | null>}

    JournalError            its own status + error_code (e.g. TRANSCRIPT_TOO_LONG)
    HTTPException           HTTP_<status>
    RequestValidationError  422 VALIDATION_ERROR, field details outside production
    anything else           500 INTERNAL_ERROR, logged with traceback server-side
"""
from __future__ import annotations

import logging
from typing import Any

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from journalcore.config import get_settings
from journalcore.errors import JournalError

_log = logging.getLogger("journalcore.errors")


def _respond(
    request: Request,
    status: int,
    message: str,
    error_code: str,
    detail: Any = None,
) -> JSONResponse:
    body: dict[str, Any] = {
        "error": message,
        "error_code": error_code,
        "code": status,
        "request_id": getattr(request.state, "request_id", None),
    }
    if detail is not None:
        body["detail"] = detail
    return JSONResponse(status_code=status, content=body)


async def _journal_error(request: Request, exc: JournalError) -> JSONResponse:
    _log.info("%s on %s", exc.error_code, request.url.path)
    return _respond(request, exc.status_code, exc.message, exc.error_code)


async def _http_error(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    message = str(exc.detail) if exc.detail else "Request error"
    if exc.status_code >= 500:
        _log.error("HTTP %d on %s: %s", exc.status_code, request.url.path, message)
    return _respond(request, exc.status_code, message, f"HTTP_{exc.status_code}")


async def _validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    _log.warning("invalid request on %s", request.url.path)
    detail = None if get_settings().is_production else jsonable_encoder(exc.errors())
    return _respond(request, 422, "Invalid request body or parameters", "VALIDATION_ERROR", detail)


async def _unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    _log.exception("unhandled error on %s", request.url.path)
    return _respond(request, 500, "Unexpected server error", "INTERNAL_ERROR")


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(JournalError, _journal_error)
    app.add_exception_handler(StarletteHTTPException, _http_error)
    app.add_exception_handler(RequestValidationError, _validation_error)
    app.add_exception_handler(Exception, _unexpected_error)
