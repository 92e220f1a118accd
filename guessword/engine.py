"""
Pure game logic (no HTTP, no storage).
Each letter of a guess gets one of three results:
- in_position: same letter at the same index in the target
- not_in_position: letter is in the target somewhere else
- not_in_word: letter is not in the target, or every copy of it is already credited

Duplicates are the tricky part. A letter only earns as many credits as the target
has copies of it, and exact matches claim their copy first.
"""

from typing import Iterable, List

from .types import Feedback, FEEDBACK_PRIORITY

SHARE_TITLE = "Guess The Word"

SHARE_SYMBOLS = {
    "in_position": "\U0001F7E9",      # green square
    "not_in_position": "\U0001F7E8",  # yellow square
}
SHARE_OTHER = "\u2B1B"  # black square


def score_guess(target: str, guess: str) -> List[Feedback]:
    """
    Example:
      target = "SPEED"
      guess  = "ERASE"
      no letter is in the right place, so nothing is claimed in pass 1
      E -> not_in_position (first of the two E's in SPEED)
      R -> not_in_word
      A -> not_in_word
      S -> not_in_position
      E -> not_in_position (second E; a third E would get not_in_word)
    """

    # 0. Validate lengths match
    n = len(target)
    if n == 0 or len(guess) != n:
        raise ValueError("Target and guess must be the same non-zero length.")

    target = target.upper()
    guess = guess.upper()
    result: List[Feedback] = ["unknown"] * n

    # Letters of the target not yet credited to any guess letter
    remaining = list(target)

    # 1. Exact positions claim their copy first
    i = 0
    while i < n:
        if guess[i] == target[i]:
            result[i] = "in_position"
            remaining.remove(guess[i])
        i += 1

    # 2. Everything else competes for what is left, left to right
    i = 0
    while i < n:
        if result[i] == "unknown":
            if guess[i] in remaining:
                result[i] = "not_in_position"
                remaining.remove(guess[i])
            else:
                result[i] = "not_in_word"
        i += 1

    return result


def is_win(target: str, guess: str) -> bool:
    """Win = same word, ignoring case. Words of different length never win."""
    if len(target) == 0 or len(guess) != len(target):
        return False
    return target.upper() == guess.upper()


def best_feedback(feedbacks: Iterable[Feedback]) -> Feedback:
    best: Feedback = "unknown"
    for feedback in feedbacks:
        if FEEDBACK_PRIORITY[feedback] > FEEDBACK_PRIORITY[best]:
            best = feedback
    return best


def share_row(feedbacks: Iterable[Feedback]) -> str:
    return "".join(SHARE_SYMBOLS.get(f, SHARE_OTHER) for f in feedbacks)


def share_header(attempts_used: int, max_attempts: int, won: bool) -> str:
    # "X" stands in for the count on a loss
    count = str(attempts_used) if won else "X"
    return f"{SHARE_TITLE} {count}/{max_attempts}"
