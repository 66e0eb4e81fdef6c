"""Lottery service — orchestrates parsing, storage and history retrieval."""

from loguru import logger
from sqlalchemy.ext.asyncio import AsyncSession

from lottery_lab.db.crud import drawing as crud
from lottery_lab.db.models.drawing import DrawingRecord
from lottery_lab.errors import DuplicateDrawingError, ParseFailure
from lottery_lab.games import VALID_GAMES, get_profile
from lottery_lab.parser.base import BaseParser
from lottery_lab.parser.finalizer import build_drawing
from lottery_lab.parser.parsers.cash4life_parser import Cash4LifeParser
from lottery_lab.parser.parsers.mega_millions_parser import MegaMillionsParser
from lottery_lab.parser.parsers.powerball_parser import PowerballParser
from lottery_lab.schemas.lottery import Drawing, ImportResult, ParseReport
from lottery_lab.services.history_service import normalize_history

GAME_PARSERS = {
    "powerball": PowerballParser,
    "cash4life": Cash4LifeParser,
    "mega_millions": MegaMillionsParser,
}


def get_parser(game_type: str) -> BaseParser:
    """Get a parser instance for a game type."""
    if game_type not in GAME_PARSERS:
        raise ValueError(f"Unknown game type: {game_type}. Valid: {VALID_GAMES}")
    return GAME_PARSERS[game_type]()


def parse_text(game_type: str, text: str, source_id: str | None = None) -> ParseReport:
    return get_parser(game_type).parse(text, source_id=source_id)


async def import_drawings(
    session: AsyncSession, game_type: str, text: str, source_id: str | None = None
) -> ImportResult:
    """Parse pasted text and store the drawings not already on file."""
    report = parse_text(game_type, text, source_id=source_id)
    inserted = await crud.insert_drawings(session, game_type, report.drawings)
    skipped = report.found - inserted
    logger.info(
        "[{}] import: {} found, {} inserted, {} already stored",
        game_type, report.found, inserted, skipped,
    )
    return ImportResult(
        game_type=game_type,
        drawings_found=report.found,
        inserted=inserted,
        skipped_existing=skipped,
        failures=len(report.failures),
    )


async def add_drawing(
    session: AsyncSession,
    game_type: str,
    date: str,
    main_numbers: list[int],
    special: int,
    source_id: str | None = None,
) -> Drawing | ParseFailure:
    """Store one hand-entered drawing.

    Raises DuplicateDrawingError when a drawing is already stored for that date.
    """
    result = build_drawing(date, main_numbers, special, get_profile(game_type), source_id)
    if isinstance(result, ParseFailure):
        return result
    if not await crud.insert_drawings(session, game_type, [result]):
        raise DuplicateDrawingError(f"A {game_type} drawing for {result.date} is already stored")
    return result


async def get_history_rows(
    session: AsyncSession, game_type: str, limit: int | None = None
) -> list[DrawingRecord]:
    get_profile(game_type)
    return await crud.get_history(session, game_type, limit=limit)


async def get_history(session: AsyncSession, game_type: str) -> list[Drawing]:
    """Full normalized history, most recent first."""
    rows = await get_history_rows(session, game_type)
    return normalize_history(crud.as_record(row) for row in rows)


async def delete_drawing(
    session: AsyncSession, game_type: str, record_id: int, source_id: str | None
) -> None:
    """Delete a stored drawing; only its creator may do so."""
    row = await crud.get_by_id(session, game_type, record_id)
    if row is None:
        raise LookupError(f"Drawing {record_id} not found")
    if not source_id or row.source_id != source_id:
        raise PermissionError(f"Drawing {record_id} belongs to another source")
    await crud.delete(session, row)
    logger.info("[{}] drawing {} ({}) deleted", game_type, record_id, row.draw_date)
