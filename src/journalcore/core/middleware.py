"""
src/journalcore/core/middleware.py

Binds a request id to every check-in request and writes one access line per
request with method, path, status and duration as structured fields.
"""
from __future__ import annotations

import logging
import time
import uuid
from typing import Callable

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from journalcore.core.logging import bind_request_id, request_id_ctx

REQUEST_ID_HEADER = "X-Request-ID"
_MAX_CLIENT_ID_LENGTH = 128

_access = logging.getLogger("journalcore.access")


def resolve_request_id(request: Request) -> str:
    """Client-supplied id when usable, otherwise a fresh UUID4."""
    supplied = request.headers.get(REQUEST_ID_HEADER, "").strip()
    if supplied and len(supplied) <= _MAX_CLIENT_ID_LENGTH:
        return supplied
    return str(uuid.uuid4())


def _elapsed_ms(started: float) -> float:
    return round((time.perf_counter() - started) * 1000.0, 2)


class RequestIDMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        request_id = resolve_request_id(request)
        request.state.request_id = request_id
        fields = {"method": request.method, "path": request.url.path}

        token = bind_request_id(request_id)
        started = time.perf_counter()
        try:
            response: Response = await call_next(request)
            fields.update(status=response.status_code, duration_ms=_elapsed_ms(started))
            _access.info("request served", extra=fields)
        except Exception:
            fields.update(status=500, duration_ms=_elapsed_ms(started))
            _access.error("request failed", extra=fields)
            raise
        finally:
            request_id_ctx.reset(token)

        response.headers[REQUEST_ID_HEADER] = request_id
        return response
