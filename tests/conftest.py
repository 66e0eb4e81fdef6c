import os

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///./lottery_lab_test.db")
os.environ.setdefault("DEBUG", "false")
os.environ.setdefault("LOG_FILE", "")

import pytest  # noqa: E402

from lottery_lab.games import get_profile  # noqa: E402
from lottery_lab.schemas.lottery import Drawing  # noqa: E402


@pytest.fixture
def powerball():
    return get_profile("powerball")


@pytest.fixture
def cash4life():
    return get_profile("cash4life")


@pytest.fixture
def mega_millions():
    return get_profile("mega_millions")


def make_drawing(main_numbers, special, date=None):
    return Drawing(date=date, main_numbers=main_numbers, special=special)


@pytest.fixture
def steady_history():
    """Ten identical drawings: 1-5 hot, special 7 hot."""
    return [make_drawing([1, 2, 3, 4, 5], 7, date=f"2024-01-{d:02d}") for d in range(10, 0, -1)]
