"""
One game in progress.

A session owns its rows and status and nothing else; the word store is shared
and only read. Every operation runs to completion and the caller re-reads the
state afterwards. Keystrokes that make no sense right now are ignored, the way
a keyboard ignores keys it has no room for.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from .engine import score_guess, is_win, best_feedback, share_row, share_header
from .types import Feedback, GameStatus, RowStatus
from .words import WordStore

logger = logging.getLogger(__name__)

ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"

DELETE_KEYS = ("<", "delete", "backspace")
SUBMIT_KEYS = (">", "submit", "enter")


@dataclass
class GuessedLetter:
    letter: str
    feedback: Feedback = "unknown"


@dataclass
class Guess:
    letters: List[GuessedLetter] = field(default_factory=list)
    status: RowStatus = "editing"

    @property
    def word(self) -> str:
        return "".join(g.letter for g in self.letters)


class GameSession:
    def __init__(
        self,
        words: WordStore,
        word_length: int = 5,
        max_attempts: int = 6,
        target: Optional[str] = None,
    ) -> None:
        if word_length != words.word_length:
            raise ValueError(
                f"Word store holds {words.word_length}-letter words, not {word_length}."
            )
        if max_attempts <= 0:
            raise ValueError("A game needs at least one attempt.")

        if target is None:
            # EmptyCandidateList propagates: a session cannot exist without a target
            target = words.pick_random_target()

        # Checked for picked targets too: a target the keyboard cannot spell is unwinnable
        target = target.upper()
        if len(target) != word_length or any(c not in ALPHABET for c in target):
            raise ValueError(f"Target must be exactly {word_length} letters A-Z.")

        self.words = words
        self.word_length = word_length
        self.max_attempts = max_attempts
        self.target = target
        self.attempts: List[Guess] = [Guess()]
        self.current_attempt = 0
        self.status: GameStatus = "new"
        logger.debug("selected word: %s", self.target)

    # --- State helpers ---

    @property
    def is_over(self) -> bool:
        return self.status in ("won", "lost")

    @property
    def current_row(self) -> Guess:
        return self.attempts[self.current_attempt]

    def _accepting_input(self) -> bool:
        # First keystroke of a fresh game starts it
        if self.status == "new":
            self.status = "in_progress"
        return self.status == "in_progress"

    # --- Key events ---

    def press(self, key: str) -> None:
        """Route one key event: a letter, a delete key, or a submit key. Anything else is ignored."""
        name = key.lower()
        if name in DELETE_KEYS:
            self.delete_last_letter()
        elif name in SUBMIT_KEYS:
            self.submit_guess()
        elif len(key) == 1:
            self.append_letter(key)

    def append_letter(self, letter: str) -> None:
        if len(letter) != 1 or letter.upper() not in ALPHABET:
            return
        if not self._accepting_input():
            return

        row = self.current_row
        if row.status != "editing" or len(row.letters) >= self.word_length:
            return
        row.letters.append(GuessedLetter(letter=letter.upper()))

    def delete_last_letter(self) -> None:
        if not self._accepting_input():
            return

        row = self.current_row
        if not row.letters:
            return
        row.letters.pop()
        # A rejected word becomes editable again once it changes
        row.status = "editing"

    def submit_guess(self) -> None:
        if self.is_over:
            return

        row = self.current_row
        if row.status == "complete" or len(row.letters) != self.word_length:
            return

        # 1. Unknown word: flag the row and let the player fix it
        if not self.words.is_acceptable(row.word):
            row.status = "invalid_word"
            return

        # 2. Score every letter
        row.status = "complete"
        results = score_guess(self.target, row.word)
        i = 0
        while i < len(results):
            row.letters[i].feedback = results[i]
            i += 1

        # 3. Win ends the game on this row
        if is_win(self.target, row.word):
            self.status = "won"
            return

        # 4. That was the last row we are allowed
        if self.current_attempt >= self.max_attempts - 1:
            self.status = "lost"
            return

        # 5. Next row
        self.attempts.append(Guess())
        self.current_attempt += 1

    # --- Derived state ---

    def completed_rows(self) -> List[Guess]:
        return [row for row in self.attempts if row.status == "complete"]

    def feedback_for_key(self, letter: str) -> Feedback:
        """Best result this letter has earned in any scored row."""
        letter = letter.upper()
        seen = []
        for row in self.completed_rows():
            for guessed in row.letters:
                if guessed.letter == letter:
                    seen.append(guessed.feedback)
        return best_feedback(seen)

    def keyboard(self) -> Dict[str, Feedback]:
        return {letter: self.feedback_for_key(letter) for letter in ALPHABET}

    def attempts_used(self) -> int:
        return len(self.completed_rows())

    def revealed_target(self) -> Optional[str]:
        """The target, but only once the game is over."""
        return self.target if self.is_over else None

    def share_text(self) -> Optional[str]:
        if not self.is_over:
            return None

        lines = [share_header(self.attempts_used(), self.max_attempts, self.status == "won"), ""]
        for row in self.completed_rows():
            lines.append(share_row(g.feedback for g in row.letters))
        return "\n".join(lines)
