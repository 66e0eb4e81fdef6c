"""History boundary: normalize stored records into canonical Drawings.

Stored records come in two shapes, flat::

    {"id": "a1", "date": "2024-01-06", "mainNumbers": "[11, 19, 29, 63, 68]", "special": 25}

or wrapped under ``data``::

    {"id": "a1", "data": {"date": ..., "mainNumbers": [11, 19, 29, 63, 68], "special": 25}}

``mainNumbers`` may be a list or a JSON-encoded list. Anything that cannot be
interpreted is skipped, never raised.
"""

import json
from collections.abc import Iterable, Mapping
from typing import Any

from loguru import logger
from pydantic import ValidationError

from lottery_lab.errors import FailureKind
from lottery_lab.schemas.lottery import Drawing


def _first(record: Mapping, *keys: str) -> Any:
    for key in keys:
        if record.get(key) is not None:
            return record[key]
    return None


def _as_int_list(value: Any) -> list[int] | None:
    if isinstance(value, str):
        try:
            value = json.loads(value)
        except json.JSONDecodeError:
            return None
    if not isinstance(value, (list, tuple)):
        return None
    if not all(isinstance(n, int) and not isinstance(n, bool) for n in value):
        return None
    return list(value)


def normalize_record(record: Any) -> Drawing | None:
    """Convert one stored record into a Drawing, or None if it is malformed."""
    if isinstance(record, Drawing):
        return record
    if not isinstance(record, Mapping):
        return None

    fields = record
    if _first(record, "mainNumbers", "main_numbers") is None and isinstance(record.get("data"), Mapping):
        fields = record["data"]

    main_numbers = _as_int_list(_first(fields, "mainNumbers", "main_numbers"))
    special = _first(fields, "special")
    if main_numbers is None or not isinstance(special, int) or isinstance(special, bool):
        return None

    record_id = _first(record, "id", "record_id")
    created_at = _first(fields, "createdAt", "created_at")
    try:
        return Drawing(
            date=_first(fields, "date"),
            main_numbers=main_numbers,
            special=special,
            source_id=_first(fields, "sourceId", "source_id", "userId"),
            record_id=str(record_id) if record_id is not None else None,
            **({"created_at": created_at} if created_at is not None else {}),
        )
    except ValidationError:
        return None


def normalize_history(records: Iterable[Any]) -> list[Drawing]:
    """Normalize a history (most-recent-first), dropping records it cannot read."""
    drawings = []
    skipped = 0
    for record in records:
        drawing = normalize_record(record)
        if drawing is None:
            skipped += 1
            logger.warning("{}: skipping record {!r}", FailureKind.MALFORMED_HISTORY_RECORD.value, record)
            continue
        drawings.append(drawing)

    if skipped:
        logger.info("History normalized: {} usable, {} skipped", len(drawings), skipped)
    return drawings
