"""Case-insensitive substring keyword matching.

Matching is deliberately not word-boundary aware: "walk" matches inside
"walking" and "low" matches inside "slow".
"""
from __future__ import annotations

from typing import Iterable

__all__ = ["contains", "find_first"]


def contains(text: str, keywords: Iterable[str]) -> bool:
    if not text:
        return False
    low = text.lower()
    return any(kw and kw.lower() in low for kw in keywords)


def find_first(text: str, keyword: str) -> int:
    """Index of the first case-insensitive occurrence of ``keyword``, or -1."""
    if not text or not keyword:
        return -1
    return text.lower().find(keyword.lower())
