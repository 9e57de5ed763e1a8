"""
src/journalcore/api/parsing.py

Check-in parsing routes.

POST /checkins/parse  transcript -> structured symptoms + confidence
GET  /taxonomy        the symptom / activity / trigger catalogue

The caller owns persistence: it attaches user id and timestamp to
``structured`` before storing the check-in.
"""
from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Request

from journalcore.api.deps import get_extractor
from journalcore.api.schemas import (
    CategoryItem,
    ParseRequest,
    ParseResponse,
    StructuredCheckin,
    TaxonomyEntry,
    TaxonomyResponse,
)
from journalcore.config import get_settings
from journalcore.errors import TranscriptTooLong
from journalcore.extraction.confidence import score
from journalcore.extraction.engine import SymptomExtractor

router = APIRouter(tags=["checkins"])
_log = logging.getLogger("journalcore.api.parsing")


@router.post("/checkins/parse", response_model=ParseResponse)
async def parse_checkin(
    payload: ParseRequest,
    request: Request,
    extractor: SymptomExtractor = Depends(get_extractor),
):
    max_length = get_settings().MAX_TRANSCRIPT_LENGTH
    if len(payload.transcript) > max_length:
        raise TranscriptTooLong(len(payload.transcript), max_length)

    result = extractor.extract(payload.transcript)
    confidence = score(result)

    _log.info(
        "parsed check-in",
        extra={
            "chars": len(payload.transcript),
            "symptoms": len(result.symptoms),
            "activities": len(result.activities),
            "triggers": len(result.triggers),
            "confidence": confidence,
        },
    )

    return ParseResponse(
        structured=StructuredCheckin(**result.as_dict()),
        severities=result.severities(),
        confidence=confidence,
        request_id=getattr(request.state, "request_id", None),
    )


@router.get("/taxonomy", response_model=TaxonomyResponse)
async def get_taxonomy(extractor: SymptomExtractor = Depends(get_extractor)):
    taxonomy = extractor.taxonomy
    return TaxonomyResponse(
        symptoms=[
            TaxonomyEntry(
                name=p.name,
                mode=p.mode.value,
                keywords=list(p.keywords),
                categories=[CategoryItem(name=c, keywords=list(kws)) for c, kws in p.categories],
            )
            for p in taxonomy.symptoms
        ],
        activities=list(taxonomy.activities),
        triggers=list(taxonomy.triggers),
    )
