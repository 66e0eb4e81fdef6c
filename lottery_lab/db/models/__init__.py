"""ORM models package."""

from lottery_lab.db.models.drawing import DrawingRecord

__all__ = [
    "DrawingRecord",
]
