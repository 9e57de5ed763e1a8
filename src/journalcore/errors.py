"""Service-level errors raised by the check-in routes.

Each error carries the HTTP status it maps to and a stable ``error_code``
that clients can branch on.
"""
from __future__ import annotations


class JournalError(Exception):
    status_code: int = 400
    error_code: str = "JOURNAL_ERROR"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class TranscriptTooLong(JournalError):
    status_code = 422
    error_code = "TRANSCRIPT_TOO_LONG"

    def __init__(self, length: int, limit: int) -> None:
        super().__init__(f"Transcript must not exceed {limit} characters (got {length})")
        self.length = length
        self.limit = limit
