"""
Word lists for the game.

Two collections, both filtered to one word length and upper-cased:
- acceptance: every word the game accepts as a guess (a set, so lookups are O(1))
- candidates: the common words a secret target can be picked from

The store never changes after it is built, so one instance can be shared by
any number of sessions.
"""

import logging
from secrets import randbelow
from typing import Callable, FrozenSet, Iterable, Tuple

logger = logging.getLogger(__name__)

# Takes an exclusive upper bound, returns an index in [0, upper)
RandomIndex = Callable[[int], int]

PLAYABLE_LETTERS = frozenset("ABCDEFGHIJKLMNOPQRSTUVWXYZ")


class EmptyCandidateList(RuntimeError):
    """Raised when a target is requested from a store with no candidate words."""


def _is_playable(word: str) -> bool:
    # Only words the keyboard can type
    return all(c in PLAYABLE_LETTERS for c in word)


def _filter_words(lines: Iterable[str], word_length: int) -> Tuple[str, ...]:
    kept = []
    for line in lines:
        # Upper-case before measuring: some letters grow ("ß" -> "SS")
        word = line.strip().upper()
        if len(word) == word_length and _is_playable(word):
            kept.append(word)
    return tuple(kept)


def _read_lines(path: str) -> Tuple[str, ...]:
    try:
        with open(path, "r", encoding="utf-8") as f:
            return tuple(f.read().splitlines())
    except OSError as exc:
        # The app decides whether an empty store is fatal, not us
        logger.warning("Could not read word list %s: %s", path, exc)
        return ()


class WordStore:
    def __init__(
        self,
        word_length: int,
        words: Iterable[str],
        common_words: Iterable[str],
        random_index: RandomIndex = randbelow,
    ) -> None:
        if word_length <= 0:
            raise ValueError("Word length must be positive.")
        self.word_length = word_length
        self.acceptance: FrozenSet[str] = frozenset(_filter_words(words, word_length))

        # A target the player is not allowed to guess could never be won
        candidates = _filter_words(common_words, word_length)
        unguessable = [w for w in candidates if w not in self.acceptance]
        if unguessable:
            logger.warning(
                "Dropping %d candidate(s) missing from the word list: %s",
                len(unguessable), ", ".join(unguessable[:10]),
            )
        self.candidates: Tuple[str, ...] = tuple(w for w in candidates if w in self.acceptance)
        self._random_index = random_index

    @classmethod
    def from_files(
        cls,
        word_length: int,
        words_path: str,
        common_words_path: str,
        random_index: RandomIndex = randbelow,
    ) -> "WordStore":
        store = cls(
            word_length,
            _read_lines(words_path),
            _read_lines(common_words_path),
            random_index=random_index,
        )
        logger.info(
            "Loaded %d words (%d candidates) of length %d",
            len(store.acceptance), len(store.candidates), word_length,
        )
        return store

    def is_acceptable(self, word: str) -> bool:
        return word.upper() in self.acceptance

    def pick_random_target(self) -> str:
        total = len(self.candidates)
        if total == 0:
            raise EmptyCandidateList("No candidate words to pick a target from.")

        index = self._random_index(total)
        if index < 0 or index >= total:
            raise ValueError(f"Random index {index} out of range 0..{total - 1}.")
        return self.candidates[index]
