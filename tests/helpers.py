"""
Canned games, built only through key events (never by setting fields).
Target for most of them is SMILE, like the previews in the UI.
"""

from guessword.session import GameSession
from guessword.words import WordStore

WORDS = [
    "SMILE", "STOLE", "MILES", "PIANO", "SPOIL", "STARE", "SMELL",
    "THEME", "EERIE", "STEEL", "SPEED", "ERASE", "ALLOW", "LLAMA",
    "CRANE", "BUMPY",
]


def make_words(common=("SMILE",)) -> WordStore:
    # Always picks the first candidate so tests know the target
    return WordStore(5, WORDS, list(common), random_index=lambda upper: 0)


def play(session: GameSession, *guesses: str) -> GameSession:
    """Type each word and submit it."""
    for word in guesses:
        for letter in word:
            session.press(letter)
        session.press(">")
    return session


def fresh_game(target: str = "SMILE") -> GameSession:
    return GameSession(make_words(), target=target)


def in_progress_game() -> GameSession:
    game = play(fresh_game(), "STOLE", "MILES")
    game.press("S")
    game.press("A")
    return game


def won_game() -> GameSession:
    return play(fresh_game(), "STOLE", "MILES", "SMILE")


def lost_game() -> GameSession:
    return play(fresh_game(), "PIANO", "STOLE", "SPOIL", "STARE", "MILES", "SMELL")


def complex_game() -> GameSession:
    # Repeated E's against a target with two E's
    return play(fresh_game("THEME"), "EERIE", "STEEL", "THEME")
