"""Pydantic schemas for statistics."""

from pydantic import BaseModel


class NumberFrequency(BaseModel):
    number: int
    count: int
    percentage: float


class HotColdAnalysis(BaseModel):
    hot_numbers: list[int]
    cold_numbers: list[int]
    hot_special: int | None
    total_draws: int


class PairFrequency(BaseModel):
    pair: list[int]
    count: int
    percentage: float


class PatternReport(BaseModel):
    total_draws: int
    decades: dict[int, int]
    odd_even: dict[str, int]
    consecutive: dict[str, int]
    sum_ranges: dict[int, int]
    repeat_with_previous: dict[str, int]
