"""
Explicit validation & Pydantic models
- Defines the structure of API requests and responses.
- The target word is never part of a response while the game is being played.
"""

from typing import Dict, List, Literal, Optional
from pydantic import BaseModel, Field, field_validator

FeedbackOut = Literal["unknown", "in_position", "not_in_position", "not_in_word"]
StatusOut = Literal["new", "in_progress", "won", "lost"]

# 1. Represents response when a new game is started
class NewGameResponse(BaseModel):
    game_id: str = Field(..., description="Unique ID for the game; the target is never returned")
    word_length: int = Field(..., description="Letters per word")
    max_attempts: int = Field(..., description="How many guesses the player gets")
    status: StatusOut = Field(..., description="Current state of the game")

# 2. One key event from the player's keyboard
class KeyRequest(BaseModel):
    key: str = Field(
        ..., description="A single letter, or 'delete' / 'submit' (also '<' / '>')."
    )

    @field_validator("key")
    @classmethod
    def validate_key(cls, key: str) -> str:
        """
        We only reject empty keys here. Unknown keys are still sent to the game,
        which ignores them the same way it ignores a letter typed into a full row.
        """
        key = key.strip()
        if key == "":
            raise ValueError("Key must not be empty.")
        return key

    model_config = {
        "json_schema_extra": {
            "examples": [
                {"key": "S"},
                {"key": "delete"},
                {"key": "submit"},
            ]
        }
    }

# 3. One letter of a row with its result
class LetterOut(BaseModel):
    letter: str = Field(..., description="The guessed letter")
    feedback: FeedbackOut = Field(..., description="Result for this letter")

# 4. One attempt row
class RowOut(BaseModel):
    letters: List[LetterOut] = Field(..., description="Letters typed so far")
    status: Literal["editing", "invalid_word", "complete"] = Field(..., description="Row state")

# 5. Represents the overall state of the game
class GameState(BaseModel):
    game_id: str = Field(..., description="Unique ID for the game")
    status: StatusOut = Field(..., description="Current state of the game")
    word_length: int = Field(..., description="Letters per word")
    max_attempts: int = Field(..., description="How many guesses the player gets")
    current_attempt: int = Field(..., description="Index of the row being edited")
    rows: List[RowOut] = Field(..., description="Every row so far")
    keyboard: Dict[str, FeedbackOut] = Field(..., description="Best known result per letter A-Z")
    target: Optional[str] = Field(None, description="The target word (only revealed if game is over)")
    share: Optional[str] = Field(None, description="Shareable result grid (only when game is over)")

# 6. Shareable result grid
class ShareOut(BaseModel):
    game_id: str = Field(..., description="Unique ID for the game")
    text: str = Field(..., description="Header line plus one symbol row per guess")

# 7. Scoreboard over all recorded games
class StatsOut(BaseModel):
    games_played: int = Field(..., description="Finished games on record")
    games_won: int = Field(..., description="Games won")
    percentage_won: int = Field(..., description="Win rate, rounded to a whole percent")
    current_win_streak: int = Field(..., description="Wins since the last loss")
    max_win_streak: int = Field(..., description="Longest run of wins")
    win_distribution: List[int] = Field(
        ..., description="Wins per attempt count; first entry is wins on the first guess"
    )
