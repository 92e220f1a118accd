"""
Statistics over the record of finished games.

A record is a list of markers, oldest first:
- "1".."N" -> won in that many attempts
- "L"      -> lost
"""

from dataclasses import dataclass, field
from typing import List, Optional

from .session import GameSession
from .types import Marker, Record

LOSS: Marker = "L"


def result_marker(session: GameSession) -> Optional[Marker]:
    """Marker for a finished session; None while it is still being played."""
    if session.status == "won":
        return str(session.attempts_used())
    if session.status == "lost":
        return LOSS
    return None


@dataclass
class GameStatistics:
    record: Record = field(default_factory=list)
    max_attempts: int = 6

    @property
    def games_played(self) -> int:
        return len(self.record)

    @property
    def games_won(self) -> int:
        return len([m for m in self.record if m != LOSS])

    @property
    def percentage_won(self) -> int:
        if self.games_played == 0:
            return 0
        return round(self.games_won / self.games_played * 100)

    @property
    def current_win_streak(self) -> int:
        streak = 0
        for marker in reversed(self.record):
            if marker == LOSS:
                break
            streak += 1
        return streak

    @property
    def max_win_streak(self) -> int:
        best = 0
        current = 0
        for marker in self.record:
            if marker == LOSS:
                current = 0
            else:
                current += 1
                if current > best:
                    best = current
        return best

    @property
    def win_distribution(self) -> List[int]:
        """Wins per attempt count; index 0 holds wins on the first attempt."""
        counts = [0] * self.max_attempts
        for marker in self.record:
            if marker == LOSS:
                continue
            attempts = int(marker)
            if 1 <= attempts <= self.max_attempts:
                counts[attempts - 1] += 1
        return counts
