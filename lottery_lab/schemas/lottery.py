"""Pydantic schemas for lottery profiles and drawings."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, computed_field, field_validator

from lottery_lab.errors import ParseFailure

MAIN_COUNT = 5


class NumberRange(BaseModel):
    model_config = ConfigDict(frozen=True)

    min: int
    max: int

    def contains(self, number: int) -> bool:
        return self.min <= number <= self.max


class LotteryProfile(BaseModel):
    """Static numeric ranges for one lottery type."""

    model_config = ConfigDict(frozen=True)

    game_type: str
    main: NumberRange
    special: NumberRange

    @property
    def ranges_disjoint(self) -> bool:
        """True when every special number sits strictly below the main range."""
        return self.special.max < self.main.min


# --- Drawing ---

class Drawing(BaseModel):
    """One validated lottery result. Immutable; corrections are delete+reinsert."""

    model_config = ConfigDict(frozen=True)

    date: str | None
    main_numbers: list[int]
    special: int
    created_at: datetime = Field(default_factory=datetime.now)
    source_id: str | None = None
    record_id: str | None = None

    @field_validator("main_numbers")
    @classmethod
    def _five_distinct_sorted(cls, value: list[int]) -> list[int]:
        if len(value) != MAIN_COUNT or len(set(value)) != MAIN_COUNT:
            raise ValueError(f"expected {MAIN_COUNT} distinct main numbers, got {value}")
        return sorted(value)


class DrawingSchema(BaseModel):
    """Stored drawing as returned by the API."""

    model_config = {"from_attributes": True}

    id: int
    game_type: str
    date: str
    main_numbers: list[int]
    special: int
    source_id: str | None
    created_at: datetime


# --- Requests / responses ---

class PasteRequest(BaseModel):
    text: str


class DrawingCreate(BaseModel):
    date: str
    main_numbers: list[int]
    special: int


class ParseReport(BaseModel):
    game_type: str
    drawings: list[Drawing] = []
    failures: list[ParseFailure] = []

    @computed_field
    @property
    def found(self) -> int:
        return len(self.drawings)


class ImportResult(BaseModel):
    game_type: str
    drawings_found: int
    inserted: int
    skipped_existing: int
    failures: int
