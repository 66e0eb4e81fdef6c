"""Suggested-combination generator.

Each strategy turns a normalized history into one ``GeneratedCombination``.
Suggestions are advisory: a strategy that fails or produces an invalid
combination is replaced by a uniformly random valid one.

Pass a seeded ``numpy.random.Generator`` for reproducible output.
"""

import math

import numpy as np
from loguru import logger

from lottery_lab.config import settings
from lottery_lab.schemas.generator import GeneratedCombination, GenerationMethod, PatternTargets
from lottery_lab.schemas.lottery import MAIN_COUNT, Drawing, LotteryProfile
from lottery_lab.services.statistics_service import (
    consecutive_run_distribution,
    consecutive_count,
    main_frequency,
    most_common_key,
    odd_even_distribution,
    rank_numbers,
    special_frequency,
    sum_range_distribution,
    SUM_BIN_WIDTH,
)

SUM_TOLERANCE = 20


# --- Helpers ---

def _main_pool(profile: LotteryProfile) -> list[int]:
    return list(range(profile.main.min, profile.main.max + 1))


def _random_special(profile: LotteryProfile, rng: np.random.Generator) -> int:
    return int(rng.integers(profile.special.min, profile.special.max + 1))


def _fill_random(numbers: list[int], profile: LotteryProfile, rng: np.random.Generator) -> list[int]:
    """Top up to 5 numbers with random, non-repeating main numbers."""
    needed = MAIN_COUNT - len(numbers)
    if needed <= 0:
        return numbers[:MAIN_COUNT]
    pool = [n for n in _main_pool(profile) if n not in numbers]
    return numbers + [int(n) for n in rng.choice(pool, size=needed, replace=False)]


def _hot_special(history: list[Drawing], profile: LotteryProfile) -> int:
    return rank_numbers(special_frequency(history, profile), "desc", 1)[0]


def _require_history(history: list[Drawing]) -> None:
    if not history:
        raise ValueError("no history available")


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def _pattern_targets(history: list[Drawing]) -> PatternTargets:
    _require_history(history)
    return PatternTargets(
        odd_even=most_common_key(odd_even_distribution(history)),
        consecutive=most_common_key(consecutive_run_distribution(history)),
        sum_range=most_common_key(sum_range_distribution(history)),
    )


def _pick_by_parity(candidates: list[int], odd_target: int, even_target: int) -> list[int]:
    """Take candidates in order while the odd/even quota allows."""
    picked: list[int] = []
    odds = evens = 0
    for n in candidates:
        if len(picked) >= MAIN_COUNT:
            break
        if n in picked:
            continue
        if n % 2 == 1 and odds < odd_target:
            picked.append(n)
            odds += 1
        elif n % 2 == 0 and evens < even_target:
            picked.append(n)
            evens += 1
    return picked


def repair_consecutive(numbers: list[int], target: int, profile: LotteryProfile) -> list[int]:
    """Single pass: turn a gap into a run by swapping in ``previous + 1``.

    The swapped-out number has the same parity, so the odd/even split holds.
    May leave the target unmet.
    """
    nums = sorted(numbers)
    current = consecutive_count(nums)
    if current >= target:
        return nums

    for i in range(len(nums) - 1):
        if nums[i + 1] - nums[i] <= 1:
            continue
        replacement = nums[i] + 1
        if replacement in nums or replacement > profile.main.max:
            continue
        for j in range(len(nums)):
            if j in (i, i + 1):
                continue
            if replacement % 2 == nums[j] % 2:
                nums[j] = replacement
                nums.sort()
                current += 1
                break
        if current >= target:
            break
    return nums


def repair_sum(numbers: list[int], target_sum: int, profile: LotteryProfile) -> list[int]:
    """Single pass: nudge one number toward the target sum, keeping its parity.

    May leave the sum off target.
    """
    nums = sorted(numbers)
    diff = target_sum - sum(nums)
    if abs(diff) <= SUM_TOLERANCE:
        return nums

    for i, current in enumerate(nums):
        candidate = current + _round_half_up(diff / (MAIN_COUNT - i))
        if (
            profile.main.contains(candidate)
            and candidate not in nums
            and candidate % 2 == current % 2
        ):
            nums[i] = candidate
            nums.sort()
            break
    return nums


def _apply_pattern_repairs(
    numbers: list[int], targets: PatternTargets, profile: LotteryProfile
) -> list[int]:
    target_runs = 3 if targets.consecutive == "3+" else int(targets.consecutive)
    numbers = repair_consecutive(numbers, target_runs, profile)
    return repair_sum(numbers, targets.sum_range + SUM_BIN_WIDTH // 2, profile)


def _check_ranges(combination: GeneratedCombination, profile: LotteryProfile) -> None:
    if not all(profile.main.contains(n) for n in combination.main_numbers):
        raise ValueError(f"main numbers out of range: {combination.main_numbers}")
    if not profile.special.contains(combination.special):
        raise ValueError(f"special out of range: {combination.special}")


# --- Strategies ---

def generate_random(
    profile: LotteryProfile, rng: np.random.Generator | None = None
) -> GeneratedCombination:
    """Uniformly random valid combination."""
    rng = rng if rng is not None else np.random.default_rng()
    return GeneratedCombination(
        main_numbers=_fill_random([], profile, rng),
        special=_random_special(profile, rng),
        method=GenerationMethod.RANDOM,
    )


def _hot(history, profile, rng) -> GeneratedCombination:
    _require_history(history)
    return GeneratedCombination(
        main_numbers=rank_numbers(main_frequency(history, profile), "desc", MAIN_COUNT),
        special=_hot_special(history, profile),
        method=GenerationMethod.HOT,
    )


def _hybrid(history, profile, rng) -> GeneratedCombination:
    _require_history(history)
    return GeneratedCombination(
        main_numbers=rank_numbers(main_frequency(history, profile), "desc", MAIN_COUNT),
        special=_random_special(profile, rng),
        method=GenerationMethod.HYBRID,
    )


def _cold(history, profile, rng) -> GeneratedCombination:
    _require_history(history)
    return GeneratedCombination(
        main_numbers=rank_numbers(main_frequency(history, profile), "asc", MAIN_COUNT),
        special=rank_numbers(special_frequency(history, profile), "asc", 1)[0],
        method=GenerationMethod.COLD,
    )


def _mixed(history, profile, rng) -> GeneratedCombination:
    _require_history(history)
    freq = main_frequency(history, profile)
    numbers = list(dict.fromkeys(rank_numbers(freq, "desc", 3) + rank_numbers(freq, "asc", 2)))
    return GeneratedCombination(
        main_numbers=_fill_random(numbers, profile, rng),
        special=_hot_special(history, profile),
        method=GenerationMethod.MIXED,
    )


def _repeat_pattern(history, profile, rng) -> GeneratedCombination:
    if len(history) < 2:
        return _hot(history, profile, rng)

    latest, previous = history[0], history[1]
    shared = [n for n in latest.main_numbers if n in previous.main_numbers]
    numbers = shared[:2]
    for n in rank_numbers(main_frequency(history, profile), "desc"):
        if len(numbers) >= MAIN_COUNT:
            break
        if n not in numbers:
            numbers.append(n)

    return GeneratedCombination(
        main_numbers=_fill_random(numbers, profile, rng),
        special=_hot_special(history, profile),
        method=GenerationMethod.REPEAT_PATTERN,
        repeat_numbers=shared,
    )


def _advanced(history, profile, rng) -> GeneratedCombination:
    if len(history) < settings.ADVANCED_MIN_HISTORY:
        return _hot(history, profile, rng)

    targets = _pattern_targets(history)
    odd_target, even_target = (int(n) for n in targets.odd_even.split("-"))
    freq = main_frequency(history, profile)
    hot = rank_numbers(freq, "desc", 15)
    cold = rank_numbers(freq, "asc", 10)

    numbers = _pick_by_parity(hot + cold, odd_target, even_target)
    for n in hot:
        if len(numbers) >= MAIN_COUNT:
            break
        if n not in numbers:
            numbers.append(n)
    numbers = _fill_random(numbers, profile, rng)

    return GeneratedCombination(
        main_numbers=_apply_pattern_repairs(numbers, targets, profile),
        special=_hot_special(history, profile),
        method=GenerationMethod.ADVANCED,
        patterns=targets,
    )


def _random_optimized(history, profile, rng) -> GeneratedCombination:
    targets = _pattern_targets(history)
    odd_target, even_target = (int(n) for n in targets.odd_even.split("-"))
    pool = _main_pool(profile)
    odds = [n for n in pool if n % 2 == 1]
    evens = [n for n in pool if n % 2 == 0]
    numbers = [int(n) for n in rng.choice(odds, size=odd_target, replace=False)]
    numbers += [int(n) for n in rng.choice(evens, size=even_target, replace=False)]

    return GeneratedCombination(
        main_numbers=_apply_pattern_repairs(numbers, targets, profile),
        special=_random_special(profile, rng),
        method=GenerationMethod.RANDOM_OPTIMIZED,
        patterns=targets,
    )


STRATEGIES = {
    GenerationMethod.HOT: _hot,
    GenerationMethod.HYBRID: _hybrid,
    GenerationMethod.COLD: _cold,
    GenerationMethod.MIXED: _mixed,
    GenerationMethod.REPEAT_PATTERN: _repeat_pattern,
    GenerationMethod.ADVANCED: _advanced,
    GenerationMethod.RANDOM_OPTIMIZED: _random_optimized,
}


def generate(
    method: GenerationMethod,
    history: list[Drawing],
    profile: LotteryProfile,
    rng: np.random.Generator | None = None,
) -> GeneratedCombination:
    """Run one strategy; any failure degrades to a random combination."""
    rng = rng if rng is not None else np.random.default_rng()
    if method == GenerationMethod.RANDOM:
        return generate_random(profile, rng)
    try:
        combination = STRATEGIES[method](history, profile, rng)
        _check_ranges(combination, profile)
        return combination
    except Exception as e:
        logger.warning(
            "[{}] {} generation failed, using random combination: {}",
            profile.game_type, method.value, e,
        )
        return generate_random(profile, rng)


def generate_multiple_combinations(
    history: list[Drawing],
    profile: LotteryProfile,
    rng: np.random.Generator | None = None,
) -> list[GeneratedCombination]:
    """Advanced, cold, mixed, repeat-pattern and random-optimized suggestions."""
    rng = rng if rng is not None else np.random.default_rng()
    methods = [
        GenerationMethod.ADVANCED,
        GenerationMethod.COLD,
        GenerationMethod.MIXED,
        GenerationMethod.REPEAT_PATTERN,
        GenerationMethod.RANDOM_OPTIMIZED,
    ]
    return [generate(method, history, profile, rng) for method in methods]


def generate_all(
    history: list[Drawing],
    profile: LotteryProfile,
    rng: np.random.Generator | None = None,
) -> list[GeneratedCombination]:
    """Hot and hybrid suggestions followed by the multi-strategy set."""
    rng = rng if rng is not None else np.random.default_rng()
    return [
        generate(GenerationMethod.HOT, history, profile, rng),
        generate(GenerationMethod.HYBRID, history, profile, rng),
    ] + generate_multiple_combinations(history, profile, rng)
