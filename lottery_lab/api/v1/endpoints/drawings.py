"""Drawing import, entry and history endpoints."""

import json

from fastapi import APIRouter, Depends, HTTPException, Query, Response
from sqlalchemy.ext.asyncio import AsyncSession

from lottery_lab.api.deps import get_db, get_source_id, validate_game
from lottery_lab.db.models.drawing import DrawingRecord
from lottery_lab.errors import DuplicateDrawingError, ParseFailure
from lottery_lab.schemas.lottery import (
    Drawing,
    DrawingCreate,
    DrawingSchema,
    ImportResult,
    ParseReport,
    PasteRequest,
)
from lottery_lab.services import lottery_service

router = APIRouter()


def _to_schema(row: DrawingRecord) -> DrawingSchema:
    return DrawingSchema(
        id=row.id,
        game_type=row.game_type,
        date=row.draw_date,
        main_numbers=json.loads(row.main_numbers),
        special=row.special,
        source_id=row.source_id,
        created_at=row.created_at,
    )


@router.post("/{game}/parse", response_model=ParseReport)
async def parse_preview(
    request: PasteRequest,
    game: str = Depends(validate_game),
    source_id: str | None = Depends(get_source_id),
):
    """Parse pasted results without storing them."""
    return lottery_service.parse_text(game, request.text, source_id=source_id)


@router.post("/{game}/import", response_model=ImportResult)
async def import_pasted(
    request: PasteRequest,
    game: str = Depends(validate_game),
    source_id: str | None = Depends(get_source_id),
    db: AsyncSession = Depends(get_db),
):
    """Parse pasted results and store drawings for dates not on file."""
    if not request.text.strip():
        raise HTTPException(status_code=400, detail="Pasted text is empty")
    return await lottery_service.import_drawings(db, game, request.text, source_id=source_id)


@router.post("/{game}/drawings", response_model=Drawing, status_code=201)
async def add_drawing(
    request: DrawingCreate,
    game: str = Depends(validate_game),
    source_id: str | None = Depends(get_source_id),
    db: AsyncSession = Depends(get_db),
):
    """Store one hand-entered drawing."""
    try:
        result = await lottery_service.add_drawing(
            db, game, request.date, request.main_numbers, request.special, source_id=source_id,
        )
    except DuplicateDrawingError as e:
        raise HTTPException(status_code=409, detail=str(e))
    if isinstance(result, ParseFailure):
        raise HTTPException(status_code=422, detail=result.model_dump(mode="json"))
    return result


@router.get("/{game}/drawings", response_model=list[DrawingSchema])
async def list_drawings(
    game: str = Depends(validate_game),
    limit: int | None = Query(None, ge=1, description="Only the N most recent"),
    db: AsyncSession = Depends(get_db),
):
    """Stored drawings, most recent first."""
    rows = await lottery_service.get_history_rows(db, game, limit=limit)
    return [_to_schema(row) for row in rows]


@router.delete("/{game}/drawings/{record_id}", status_code=204)
async def delete_drawing(
    record_id: int,
    game: str = Depends(validate_game),
    source_id: str | None = Depends(get_source_id),
    db: AsyncSession = Depends(get_db),
):
    """Delete a drawing created by the calling source."""
    try:
        await lottery_service.delete_drawing(db, game, record_id, source_id)
    except LookupError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except PermissionError as e:
        raise HTTPException(status_code=403, detail=str(e))
    return Response(status_code=204)
