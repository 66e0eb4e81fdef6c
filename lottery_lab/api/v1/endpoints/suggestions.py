"""Suggested combinations and accuracy endpoints."""

import numpy as np
from fastapi import APIRouter, Depends, Query
from loguru import logger
from sqlalchemy.ext.asyncio import AsyncSession

from lottery_lab.api.deps import get_db, get_rng, validate_game
from lottery_lab.db.crud.drawing import as_record
from lottery_lab.games import get_profile
from lottery_lab.schemas.generator import (
    AccuracyMetrics,
    AccuracyRequest,
    GeneratedCombination,
    GenerationMethod,
)
from lottery_lab.services import generator_service
from lottery_lab.services.accuracy_service import evaluate_prediction_accuracy
from lottery_lab.services.lottery_service import get_history, get_history_rows

router = APIRouter()


@router.get("/{game}", response_model=list[GeneratedCombination])
async def suggestions(
    game: str = Depends(validate_game),
    strategy: GenerationMethod | None = Query(None, description="Single strategy; all when omitted"),
    db: AsyncSession = Depends(get_db),
    rng: np.random.Generator = Depends(get_rng),
):
    """Suggested combinations derived from the stored history."""
    history = await get_history(db, game)
    if not history:
        logger.info("[{}] no history available, suggestions will be random", game)
    profile = get_profile(game)
    if strategy is not None:
        return [generator_service.generate(strategy, history, profile, rng)]
    return generator_service.generate_all(history, profile, rng)


@router.post("/{game}/accuracy", response_model=AccuracyMetrics)
async def accuracy(
    request: AccuracyRequest,
    game: str = Depends(validate_game),
    db: AsyncSession = Depends(get_db),
):
    """Compare predictions with the stored drawings of the same dates."""
    rows = await get_history_rows(db, game)
    return evaluate_prediction_accuracy(request.predictions, [as_record(row) for row in rows])
