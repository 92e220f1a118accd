"""
Labels for clarity.
"""

from typing import Dict, List, Literal

Feedback = Literal["unknown", "in_position", "not_in_position", "not_in_word"]
RowStatus = Literal["editing", "invalid_word", "complete"]
GameStatus = Literal["new", "in_progress", "won", "lost"]
Marker = str  # "1".."N" for a win in N attempts, "L" for a loss
Record = List[Marker]

# Higher wins when the same letter shows up in several rows
FEEDBACK_PRIORITY: Dict[str, int] = {
    "unknown": 0,
    "not_in_word": 1,
    "not_in_position": 2,
    "in_position": 3,
}
