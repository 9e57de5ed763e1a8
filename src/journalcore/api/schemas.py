# src/journalcore/api/schemas.py
from __future__ import annotations

from typing import Dict, List, Optional, Union

from pydantic import BaseModel, Field


class ParseRequest(BaseModel):
    transcript: str = Field("", description="Raw check-in narrative (already transcribed)")


class StructuredCheckin(BaseModel):
    symptoms: Dict[str, Union[bool, int, str]]
    activities: List[str]
    triggers: List[str]
    notes: str


class ParseResponse(BaseModel):
    structured: StructuredCheckin
    severities: Dict[str, int]
    confidence: int = Field(..., ge=0, le=100)
    request_id: Optional[str] = None


class CategoryItem(BaseModel):
    name: str
    keywords: List[str]


class TaxonomyEntry(BaseModel):
    name: str
    mode: str
    keywords: List[str]
    categories: List[CategoryItem] = []


class TaxonomyResponse(BaseModel):
    symptoms: List[TaxonomyEntry]
    activities: List[str]
    triggers: List[str]
