"""Turn a date plus a pool of candidate numbers into a validated Drawing."""

from datetime import datetime

from pydantic import ValidationError

from lottery_lab.errors import FailureKind, ParseFailure
from lottery_lab.parser.extraction import normalize_date
from lottery_lab.schemas.lottery import MAIN_COUNT, Drawing, LotteryProfile

POOL_SIZE = MAIN_COUNT + 1


def _split_disjoint(pool: list[int], profile: LotteryProfile) -> tuple[list[int], int | None]:
    """First value inside the special range is the special number."""
    for i, number in enumerate(pool):
        if profile.special.contains(number):
            return pool[:i] + pool[i + 1:], number
    return pool, None


def _split_positional(pool: list[int]) -> tuple[list[int], int]:
    """Ranges overlap: the last listed value is taken as the special number."""
    return pool[:-1], pool[-1]


def finalize(
    date: str,
    candidates: list[int],
    profile: LotteryProfile,
    source_id: str | None = None,
) -> Drawing | ParseFailure:
    """Pick 5 main numbers and 1 special number out of ``candidates``."""
    in_range = [
        n for n in candidates
        if profile.main.contains(n) or profile.special.contains(n)
    ]
    pool = list(dict.fromkeys(in_range))[:POOL_SIZE]
    if len(pool) < POOL_SIZE:
        return ParseFailure(
            kind=FailureKind.INSUFFICIENT_NUMBERS,
            detail=f"{len(pool)} usable numbers, need {POOL_SIZE}",
        )

    if profile.ranges_disjoint:
        main_numbers, special = _split_disjoint(pool, profile)
    else:
        main_numbers, special = _split_positional(pool)

    if (
        special is None
        or not profile.special.contains(special)
        or len(main_numbers) != MAIN_COUNT
        or not all(profile.main.contains(n) for n in main_numbers)
    ):
        return ParseFailure(
            kind=FailureKind.RANGE_VALIDATION_FAILED,
            detail=f"main={main_numbers} special={special} outside {profile.game_type} ranges",
        )

    return Drawing(
        date=date,
        main_numbers=sorted(main_numbers),
        special=special,
        created_at=datetime.now(),
        source_id=source_id,
    )


def finalize_split(
    date: str,
    main_candidates: list[int],
    special: int | None,
    profile: LotteryProfile,
    source_id: str | None = None,
) -> Drawing | ParseFailure:
    """Validate numbers whose main/special roles are already known.

    The special may repeat one of the main numbers.
    """
    main_numbers = list(dict.fromkeys(main_candidates))
    if len(main_numbers) < MAIN_COUNT or special is None:
        return ParseFailure(
            kind=FailureKind.INSUFFICIENT_NUMBERS,
            detail=f"{len(main_numbers)} distinct main numbers, special={special}",
        )

    if (
        not profile.special.contains(special)
        or not all(profile.main.contains(n) for n in main_numbers)
    ):
        return ParseFailure(
            kind=FailureKind.RANGE_VALIDATION_FAILED,
            detail=f"main={main_numbers} special={special} outside {profile.game_type} ranges",
        )

    return Drawing(
        date=date,
        main_numbers=main_numbers,
        special=special,
        created_at=datetime.now(),
        source_id=source_id,
    )


def build_drawing(
    date: str,
    main_numbers: list[int],
    special: int,
    profile: LotteryProfile,
    source_id: str | None = None,
) -> Drawing | ParseFailure:
    """Validate a hand-entered drawing against the lottery profile."""
    normalized = normalize_date(date)
    if normalized is None:
        return ParseFailure(kind=FailureKind.INVALID_DATE, detail=f"unparseable date {date!r}")

    if (
        not profile.special.contains(special)
        or not all(profile.main.contains(n) for n in main_numbers)
    ):
        return ParseFailure(
            kind=FailureKind.RANGE_VALIDATION_FAILED,
            detail=f"main={main_numbers} special={special} outside {profile.game_type} ranges",
        )

    try:
        return Drawing(
            date=normalized,
            main_numbers=main_numbers,
            special=special,
            source_id=source_id,
        )
    except ValidationError as e:
        return ParseFailure(kind=FailureKind.RANGE_VALIDATION_FAILED, detail=str(e))
