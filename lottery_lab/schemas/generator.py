"""Pydantic schemas for suggested combinations and accuracy metrics."""

from datetime import date as date_type
from enum import Enum

from pydantic import BaseModel, Field, field_validator


class GenerationMethod(str, Enum):
    HOT = "hot"
    COLD = "cold"
    MIXED = "mixed"
    REPEAT_PATTERN = "repeat-pattern"
    ADVANCED = "advanced"
    RANDOM_OPTIMIZED = "random-optimized"
    HYBRID = "hybrid"
    RANDOM = "random"


class PatternTargets(BaseModel):
    """Historical targets a pattern-constrained combination aimed for."""

    odd_even: str
    consecutive: str
    sum_range: int


class GeneratedCombination(BaseModel):
    main_numbers: list[int]
    special: int
    method: GenerationMethod
    date: str = Field(default_factory=lambda: date_type.today().isoformat())
    patterns: PatternTargets | None = None
    repeat_numbers: list[int] | None = None

    @field_validator("main_numbers")
    @classmethod
    def _five_distinct_sorted(cls, value: list[int]) -> list[int]:
        if len(value) != 5 or len(set(value)) != 5:
            raise ValueError(f"expected 5 distinct main numbers, got {value}")
        return sorted(value)


class AccuracyMetrics(BaseModel):
    total_predictions: int
    exact_matches: int
    main_number_matches: list[int]
    special_number_matches: int
    average_main_matches: float
    average_special_matches: float


class AccuracyRequest(BaseModel):
    predictions: list[GeneratedCombination]
