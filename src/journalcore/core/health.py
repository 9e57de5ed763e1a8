"""
src/journalcore/core/health.py

Health and readiness endpoints.

GET /health/live   liveness: always 200 (process is alive)
GET /health/ready  readiness: 200 once the symptom taxonomy is loaded,
                   503 otherwise
"""
from __future__ import annotations

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from journalcore.api.deps import get_extractor
from journalcore.extraction.engine import SymptomExtractor

_log = logging.getLogger("journalcore.health")

router = APIRouter(tags=["health"])


@router.get("/health/live")
async def health_live() -> JSONResponse:
    """Liveness: always returns 200 if the process is running."""
    return JSONResponse(status_code=200, content={"status": "ok", "check": "live"})


@router.get("/health/ready")
async def health_ready(extractor: SymptomExtractor = Depends(get_extractor)) -> JSONResponse:
    """Readiness: the extractor must carry a non-empty taxonomy."""
    entries = len(extractor.taxonomy.symptoms)
    if entries == 0:
        _log.error("health_ready: taxonomy has no symptom entries")
        return JSONResponse(
            status_code=503,
            content={"status": "error", "check": "ready", "taxonomy": "empty"},
        )
    return JSONResponse(
        status_code=200,
        content={"status": "ok", "check": "ready", "taxonomy_entries": entries},
    )
