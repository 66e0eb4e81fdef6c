"""Stored drawing ORM model, one table for all lottery types."""

from datetime import datetime

from sqlalchemy import DateTime, Integer, String, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.sql import func

from lottery_lab.db.base import Base


class DrawingRecord(Base):
    """One stored drawing; ``main_numbers`` holds a JSON-encoded list."""

    __tablename__ = "drawings"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    game_type: Mapped[str] = mapped_column(String(20), nullable=False, index=True)
    draw_date: Mapped[str] = mapped_column(String(10), nullable=False, index=True)  # YYYY-MM-DD

    main_numbers: Mapped[str] = mapped_column(Text, nullable=False)
    special: Mapped[int] = mapped_column(Integer, nullable=False)

    # Creator identity, only used to authorize deletion
    source_id: Mapped[str | None] = mapped_column(String(64), nullable=True)
    created_at: Mapped[datetime] = mapped_column(DateTime, server_default=func.now())

    __table_args__ = (
        UniqueConstraint("game_type", "draw_date", name="uq_drawings_game_date"),
    )

    def __repr__(self) -> str:
        return f"<DrawingRecord {self.game_type} date={self.draw_date} numbers={self.main_numbers}>"
