"""Database tables / schema"""

from datetime import datetime, timezone
from typing import Any
from uuid import UUID

from sqlalchemy import JSON
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class Base(DeclarativeBase):
    pass


class DBGameResult(Base):
    """One row per finished round. Rows are only ever added (or removed), never updated."""

    __tablename__ = "game_results"
    id: Mapped[UUID] = mapped_column(primary_key=True)
    player_name: Mapped[str] = mapped_column(index=True)
    game_type: Mapped[str]
    difficulty: Mapped[str]
    score: Mapped[int]
    points_earned: Mapped[int]
    status: Mapped[str]
    duration: Mapped[int]
    meta: Mapped[dict[str, Any]] = mapped_column(JSON, default=dict)
    created_at: Mapped[datetime] = mapped_column(default=utc_now)
