"""Statistics service — frequency, hot/cold, pairs and pattern histograms.

Every function works on a normalized history (see ``history_service``),
most recent drawing first.
"""

from collections import Counter
from collections.abc import Iterable
from itertools import combinations

from lottery_lab.schemas.lottery import Drawing, LotteryProfile
from lottery_lab.schemas.statistics import (
    HotColdAnalysis,
    NumberFrequency,
    PairFrequency,
    PatternReport,
)

ODD_EVEN_KEYS = ["0-5", "1-4", "2-3", "3-2", "4-1", "5-0"]
RUN_KEYS = ["0", "1", "2", "3+"]
SUM_BIN_WIDTH = 50


# --- Building blocks ---

def frequency(numbers: Iterable[int], max_num: int) -> dict[int, int]:
    """Count occurrences of 1..max_num; out-of-range numbers are ignored."""
    freq = {n: 0 for n in range(1, max_num + 1)}
    for n in numbers:
        if n in freq:
            freq[n] += 1
    return freq


def main_frequency(history: list[Drawing], profile: LotteryProfile) -> dict[int, int]:
    return frequency((n for d in history for n in d.main_numbers), profile.main.max)


def special_frequency(history: list[Drawing], profile: LotteryProfile) -> dict[int, int]:
    return frequency((d.special for d in history), profile.special.max)


def rank_numbers(freq: dict[int, int], order: str = "desc", limit: int | None = None) -> list[int]:
    """Numbers sorted by count ("desc" = hot, "asc" = cold), ties by ascending number."""
    if order == "desc":
        ranked = sorted(freq, key=lambda n: (-freq[n], n))
    else:
        ranked = sorted(freq, key=lambda n: (freq[n], n))
    return ranked if limit is None else ranked[:limit]


def pair_frequency(history: list[Drawing]) -> dict[str, int]:
    """Co-occurrence count for every unordered pair "a-b" (a < b)."""
    pair_counter = Counter()
    for drawing in history:
        for a, b in combinations(sorted(drawing.main_numbers), 2):
            pair_counter[f"{a}-{b}"] += 1
    return dict(pair_counter)


def top_pairs(pair_freq: dict[str, int], limit: int) -> list[list[int]]:
    pairs = [[int(n) for n in key.split("-")] for key in pair_freq]
    pairs.sort(key=lambda p: (-pair_freq[f"{p[0]}-{p[1]}"], p))
    return pairs[:limit]


def odd_count(numbers: Iterable[int]) -> int:
    return sum(1 for n in numbers if n % 2 == 1)


def consecutive_count(numbers: Iterable[int]) -> int:
    """Adjacent pairs with a gap of exactly 1 once sorted."""
    nums = sorted(numbers)
    return sum(1 for a, b in zip(nums, nums[1:]) if b - a == 1)


def run_bucket(count: int) -> str:
    return str(count) if count < 3 else "3+"


def sum_bin(numbers: Iterable[int]) -> int:
    return sum(numbers) // SUM_BIN_WIDTH * SUM_BIN_WIDTH


# --- Pattern histograms ---

def decade_distribution(history: list[Drawing], profile: LotteryProfile) -> dict[int, int]:
    dist = {decade: 0 for decade in range(profile.main.max // 10 + 1)}
    for drawing in history:
        for n in drawing.main_numbers:
            decade = n // 10
            if decade in dist:
                dist[decade] += 1
    return dist


def odd_even_distribution(history: list[Drawing]) -> dict[str, int]:
    dist = {key: 0 for key in ODD_EVEN_KEYS}
    for drawing in history:
        odds = odd_count(drawing.main_numbers)
        dist[f"{odds}-{len(drawing.main_numbers) - odds}"] += 1
    return dist


def consecutive_run_distribution(history: list[Drawing]) -> dict[str, int]:
    dist = {key: 0 for key in RUN_KEYS}
    for drawing in history:
        dist[run_bucket(consecutive_count(drawing.main_numbers))] += 1
    return dist


def sum_range_distribution(history: list[Drawing]) -> dict[int, int]:
    """Histogram of main-number sums in bins of 50, keyed by bin floor."""
    counter = Counter(sum_bin(d.main_numbers) for d in history)
    return dict(sorted(counter.items()))


def repeat_with_previous_distribution(history: list[Drawing]) -> dict[str, int]:
    """How many main numbers each drawing shares with the entry before it in history."""
    dist = {key: 0 for key in RUN_KEYS}
    for previous, current in zip(history, history[1:]):
        shared = len(set(current.main_numbers) & set(previous.main_numbers))
        dist[run_bucket(shared)] += 1
    return dist


def most_common_key(distribution: dict) -> str | int | None:
    """Most frequent bucket; the last key in order wins a tie."""
    if not distribution:
        return None
    return max(reversed(list(distribution)), key=distribution.get)


# --- Reports ---

def get_frequency(history: list[Drawing], profile: LotteryProfile) -> list[NumberFrequency]:
    """Main-number frequency with percentage of drawings, hottest first."""
    freq = main_frequency(history, profile)
    total_draws = len(history)
    return [
        NumberFrequency(
            number=num,
            count=freq[num],
            percentage=round(freq[num] / total_draws * 100, 2) if total_draws > 0 else 0,
        )
        for num in rank_numbers(freq, "desc")
    ]


def get_hot_cold(
    history: list[Drawing], profile: LotteryProfile, limit: int = 10
) -> HotColdAnalysis:
    freq = main_frequency(history, profile)
    hot_special = rank_numbers(special_frequency(history, profile), "desc", 1)
    return HotColdAnalysis(
        hot_numbers=rank_numbers(freq, "desc", limit),
        cold_numbers=rank_numbers(freq, "asc", limit),
        hot_special=hot_special[0] if history and hot_special else None,
        total_draws=len(history),
    )


def get_pairs(history: list[Drawing], top_n: int = 10) -> list[PairFrequency]:
    """Most common number pairs."""
    pair_freq = pair_frequency(history)
    total_draws = len(history)
    return [
        PairFrequency(
            pair=pair,
            count=pair_freq[f"{pair[0]}-{pair[1]}"],
            percentage=round(pair_freq[f"{pair[0]}-{pair[1]}"] / total_draws * 100, 2),
        )
        for pair in top_pairs(pair_freq, top_n)
    ]


def get_patterns(history: list[Drawing], profile: LotteryProfile) -> PatternReport:
    return PatternReport(
        total_draws=len(history),
        decades=decade_distribution(history, profile),
        odd_even=odd_even_distribution(history),
        consecutive=consecutive_run_distribution(history),
        sum_ranges=sum_range_distribution(history),
        repeat_with_previous=repeat_with_previous_distribution(history),
    )
