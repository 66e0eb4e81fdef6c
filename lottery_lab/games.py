"""Lottery profiles: the valid number ranges per game type."""

from lottery_lab.config import settings
from lottery_lab.schemas.lottery import LotteryProfile, NumberRange

PROFILES = {
    "powerball": LotteryProfile(
        game_type="powerball",
        main=NumberRange(min=1, max=69),
        special=NumberRange(min=1, max=26),
    ),
    "cash4life": LotteryProfile(
        game_type="cash4life",
        main=NumberRange(min=1, max=60),
        special=NumberRange(min=1, max=4),
    ),
    "mega_millions": LotteryProfile(
        game_type="mega_millions",
        main=NumberRange(min=1, max=70),
        special=NumberRange(min=1, max=settings.MEGA_MILLIONS_SPECIAL_MAX),
    ),
}

VALID_GAMES = set(PROFILES.keys())


def get_profile(game_type: str) -> LotteryProfile:
    """Get the profile for a game type."""
    if game_type not in PROFILES:
        raise ValueError(f"Unknown game type: {game_type}. Valid: {VALID_GAMES}")
    return PROFILES[game_type]
