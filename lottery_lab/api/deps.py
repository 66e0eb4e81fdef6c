"""Dependency injection for FastAPI."""

from collections.abc import AsyncGenerator

import numpy as np
from fastapi import Header, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession

from lottery_lab.config import settings
from lottery_lab.db.engine import async_session_factory
from lottery_lab.games import VALID_GAMES


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """Yield an async database session for request scope."""
    async with async_session_factory() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise


def get_rng() -> np.random.Generator:
    """Random source for suggestions; seeded when GENERATOR_SEED is set."""
    return np.random.default_rng(settings.GENERATOR_SEED)


def get_source_id(x_source_id: str | None = Header(None)) -> str | None:
    """Identity of the calling client, used to tag and authorize deletes."""
    return x_source_id


def validate_game(game: str) -> str:
    if game not in VALID_GAMES:
        raise HTTPException(status_code=400, detail=f"Invalid game. Valid: {sorted(VALID_GAMES)}")
    return game
