"""
In-memory store
Holds live game sessions in memory, keyed by id.

A session is not safe to drive from two requests at once, so every operation on
a session goes through the store while holding its lock.

Sessions do not live forever: every add() first drops
- finished games untouched for `finished_ttl` seconds (their result is already recorded)
- any game untouched for `idle_ttl` seconds (abandoned mid-play)
"""

from dataclasses import dataclass
from threading import RLock
from time import time
from typing import Callable, Dict, Optional, Tuple, TypeVar
from uuid import uuid4

from .session import GameSession

T = TypeVar("T")


@dataclass
class _Entry:
    session: GameSession
    updated_at: float


class SessionStore:
    def __init__(
        self,
        finished_ttl: float = 600.0,
        idle_ttl: float = 86400.0,
        clock: Callable[[], float] = time,
    ) -> None:
        self._sessions: Dict[str, _Entry] = {}
        self._lock = RLock()
        self.finished_ttl = finished_ttl
        self.idle_ttl = idle_ttl
        self._clock = clock

    def add(self, session: GameSession) -> str:
        new_id = str(uuid4())
        with self._lock:
            self.prune()
            self._sessions[new_id] = _Entry(session=session, updated_at=self._clock())
        return new_id

    def get(self, game_id: str) -> Optional[GameSession]:
        with self._lock:
            entry = self._sessions.get(game_id)
            return entry.session if entry else None

    def apply(self, game_id: str, operation: Callable[[GameSession], T]) -> Optional[Tuple[GameSession, T]]:
        """
        Run `operation` on one session under the lock.
        Returns (session, result), or None if there is no such game.
        """
        with self._lock:
            entry = self._sessions.get(game_id)
            if entry is None:
                return None
            entry.updated_at = self._clock()
            return entry.session, operation(entry.session)

    def prune(self) -> int:
        """Drop expired sessions; returns how many were removed."""
        now = self._clock()
        with self._lock:
            expired = []
            for game_id, entry in self._sessions.items():
                idle = now - entry.updated_at
                if idle >= self.idle_ttl:
                    expired.append(game_id)
                elif entry.session.is_over and idle >= self.finished_ttl:
                    expired.append(game_id)

            for game_id in expired:
                del self._sessions[game_id]
            return len(expired)

    def remove(self, game_id: str) -> None:
        with self._lock:
            self._sessions.pop(game_id, None)

    def clear(self) -> None:
        with self._lock:
            self._sessions.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._sessions)
