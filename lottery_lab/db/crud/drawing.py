"""CRUD operations for stored drawings."""

import json

from sqlalchemy import desc, select
from sqlalchemy.ext.asyncio import AsyncSession

from lottery_lab.db.models.drawing import DrawingRecord
from lottery_lab.schemas.lottery import Drawing


def as_record(row: DrawingRecord) -> dict:
    """Storage-shaped record, as read by the history normalizer."""
    return {
        "id": str(row.id),
        "date": row.draw_date,
        "mainNumbers": row.main_numbers,
        "special": row.special,
        "sourceId": row.source_id,
        "createdAt": row.created_at,
    }


async def get_history(
    session: AsyncSession, game_type: str, limit: int | None = None
) -> list[DrawingRecord]:
    """Stored drawings, most recent first."""
    query = (
        select(DrawingRecord)
        .where(DrawingRecord.game_type == game_type)
        .order_by(desc(DrawingRecord.draw_date), desc(DrawingRecord.id))
    )
    if limit:
        query = query.limit(limit)
    result = await session.execute(query)
    return list(result.scalars().all())


async def get_by_id(
    session: AsyncSession, game_type: str, record_id: int
) -> DrawingRecord | None:
    result = await session.execute(
        select(DrawingRecord).where(
            DrawingRecord.id == record_id,
            DrawingRecord.game_type == game_type,
        )
    )
    return result.scalar_one_or_none()


async def get_existing_dates(session: AsyncSession, game_type: str) -> set[str]:
    result = await session.execute(
        select(DrawingRecord.draw_date).where(DrawingRecord.game_type == game_type)
    )
    return set(result.scalars().all())


async def insert_drawings(
    session: AsyncSession, game_type: str, drawings: list[Drawing]
) -> int:
    """Insert drawings whose date is not stored yet. Returns number inserted."""
    if not drawings:
        return 0
    existing = await get_existing_dates(session, game_type)
    inserted = 0
    for drawing in drawings:
        if drawing.date in existing:
            continue
        session.add(DrawingRecord(
            game_type=game_type,
            draw_date=drawing.date,
            main_numbers=json.dumps(drawing.main_numbers),
            special=drawing.special,
            source_id=drawing.source_id,
            created_at=drawing.created_at,
        ))
        existing.add(drawing.date)
        inserted += 1
    await session.flush()
    return inserted


async def delete(session: AsyncSession, row: DrawingRecord) -> None:
    await session.delete(row)
    await session.flush()
