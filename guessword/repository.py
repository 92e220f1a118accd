"""
DB-backed results record.

Public methods:
- record(game_id, session) -> Marker | None
- get_record() -> list of markers, oldest first
- get_stats(max_attempts) -> GameStatistics
- reset() -> None

The engine never writes results itself; the routes call record() once a
session reaches won or lost.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlalchemy import select, delete
from sqlalchemy.orm import Session

from .models import GameResult
from .session import GameSession
from .stats import GameStatistics, LOSS, result_marker
from .types import Marker, Record


def _to_marker(row: GameResult) -> Marker:
    if row.won and row.attempts_used is not None:
        return str(row.attempts_used)
    return LOSS


class DBResultLog:
    def __init__(self, db: Session):
        self.db = db

    def record(self, game_id: str, session: GameSession) -> Optional[Marker]:
        marker = result_marker(session)
        if marker is None:
            # Nothing to record for a game still in play
            return None

        # One row per game, even if asked twice
        existing = self.db.execute(
            select(GameResult).where(GameResult.game_id == game_id)
        ).scalars().first()
        if existing:
            return _to_marker(existing)

        won = session.status == "won"
        row = GameResult(
            game_id=game_id,
            target_word=session.target,
            won=won,
            attempts_used=session.attempts_used() if won else None,
            max_attempts=session.max_attempts,
            finished_at=datetime.utcnow(),
        )
        self.db.add(row)
        self.db.commit()
        return marker

    def get_record(self) -> Record:
        rows = self.db.execute(select(GameResult).order_by(GameResult.id.asc())).scalars().all()
        return [_to_marker(r) for r in rows]

    def get_stats(self, max_attempts: int = 6) -> GameStatistics:
        return GameStatistics(record=self.get_record(), max_attempts=max_attempts)

    def reset(self) -> None:
        self.db.execute(delete(GameResult))
        self.db.commit()
