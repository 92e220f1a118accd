"""
SQLAlchemy ORM models.

Tables:
- game_results: one row per finished game, oldest first by id.
  The record marker ("3", "L", ...) is derived from won/attempts_used.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlalchemy import String, Integer, DateTime, Boolean
from sqlalchemy.orm import Mapped, mapped_column
from .db import Base

class GameResult(Base):
    __tablename__ = "game_results"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    # Session id from the in-memory store; one result per game
    game_id: Mapped[str] = mapped_column(String(36), nullable=False, unique=True)

    target_word: Mapped[str] = mapped_column(String(32), nullable=False)
    won: Mapped[bool] = mapped_column(Boolean, nullable=False)

    # Only set for wins
    attempts_used: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    max_attempts: Mapped[int] = mapped_column(Integer, nullable=False, default=6)

    finished_at: Mapped[datetime] = mapped_column(DateTime, nullable=False, default=datetime.utcnow)
