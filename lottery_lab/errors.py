"""Failure taxonomy for parsing and history normalization.

Nothing in the core raises these. Parsers and the history boundary return
a ``ParseFailure`` value instead, and callers aggregate them.
"""

from enum import Enum

from pydantic import BaseModel


class FailureKind(str, Enum):
    INVALID_DATE = "invalid_date"
    INSUFFICIENT_NUMBERS = "insufficient_numbers"
    RANGE_VALIDATION_FAILED = "range_validation_failed"
    PAIRING_MISMATCH = "pairing_mismatch"
    MALFORMED_HISTORY_RECORD = "malformed_history_record"


class ParseFailure(BaseModel):
    """A block (or whole input) that could not become a Drawing."""

    kind: FailureKind
    detail: str = ""
    block: str | None = None


class DuplicateDrawingError(Exception):
    """A drawing for that lottery and date is already stored."""
