"""Statistics API endpoints."""

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from lottery_lab.api.deps import get_db, validate_game
from lottery_lab.games import get_profile
from lottery_lab.services import statistics_service as stats
from lottery_lab.services.lottery_service import get_history
from lottery_lab.schemas.statistics import (
    HotColdAnalysis,
    NumberFrequency,
    PairFrequency,
    PatternReport,
)

router = APIRouter()


@router.get("/{game}/frequency", response_model=list[NumberFrequency])
async def frequency(
    game: str = Depends(validate_game),
    db: AsyncSession = Depends(get_db),
):
    """Main-number frequency, hottest first."""
    history = await get_history(db, game)
    return stats.get_frequency(history, get_profile(game))


@router.get("/{game}/hot-cold", response_model=HotColdAnalysis)
async def hot_cold(
    game: str = Depends(validate_game),
    limit: int = Query(10, ge=1, le=70),
    db: AsyncSession = Depends(get_db),
):
    """Hot and cold numbers plus the hottest special number."""
    history = await get_history(db, game)
    return stats.get_hot_cold(history, get_profile(game), limit=limit)


@router.get("/{game}/pairs", response_model=list[PairFrequency])
async def pairs(
    game: str = Depends(validate_game),
    top_n: int = Query(10, ge=1, le=100),
    db: AsyncSession = Depends(get_db),
):
    """Most common number pairs."""
    history = await get_history(db, game)
    return stats.get_pairs(history, top_n=top_n)


@router.get("/{game}/patterns", response_model=PatternReport)
async def patterns(
    game: str = Depends(validate_game),
    db: AsyncSession = Depends(get_db),
):
    """Decade, odd/even, consecutive, sum-range and repeat histograms."""
    history = await get_history(db, game)
    return stats.get_patterns(history, get_profile(game))
