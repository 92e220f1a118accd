'''
Guess The Word API

Endpoints:
POST /games                -> start a game
GET  /games/{id}           -> read rows, keyboard & status
POST /games/{id}/keys      -> send one key (letter, delete, submit)
GET  /games/{id}/share     -> shareable result grid (finished games only)

Extras:
GET  /stats                -> scoreboard over recorded games
POST /stats/reset          -> reset scoreboard

Live sessions are kept in memory (SessionStore); finished games are recorded in
the database (DBResultLog).
'''

import logging
from functools import lru_cache

from fastapi import FastAPI, HTTPException, Depends
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.exc import SQLAlchemyError

from . import config
from .db import get_db                  # SQLAlchemy Session dependency
from .repository import DBResultLog     # DB-backed results record
from .bootstrap_db import create_all    # dev-only: create tables
from .random_client import get_random_index
from .session import GameSession
from .store import SessionStore
from .words import WordStore, EmptyCandidateList

from .schemas import (
    NewGameResponse,
    KeyRequest,
    GameState,
    RowOut,
    LetterOut,
    ShareOut,
    StatsOut,
)

logging.basicConfig(level=config.LOG_LEVEL)
logger = logging.getLogger(__name__)

app = FastAPI(title="Guess The Word API", version="1.0.0")

# Allow everything in dev so the docs and front-end work easily
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"]
)

# --- Dev convenience: auto-create tables locally ---
if config.APP_ENV == "local":
    @app.on_event("startup")
    def _dev_create_tables():
        create_all()

_sessions = SessionStore(
    finished_ttl=config.SESSION_FINISHED_TTL,
    idle_ttl=config.SESSION_IDLE_TTL,
)

# --- Dependencies ---

@lru_cache(maxsize=1)
def get_words() -> WordStore:
    # Loaded once and shared by every session
    return WordStore.from_files(
        config.WORD_LENGTH,
        config.WORDS_FILE,
        config.COMMON_WORDS_FILE,
        random_index=get_random_index(config.RANDOM_SOURCE),
    )

def get_sessions() -> SessionStore:
    return _sessions

def get_results(db = Depends(get_db)) -> DBResultLog:
    return DBResultLog(db)

# --- Response builders ---

def _to_game_state(game_id: str, session: GameSession) -> GameState:
    rows = [
        RowOut(
            letters=[LetterOut(letter=g.letter, feedback=g.feedback) for g in row.letters],
            status=row.status,
        )
        for row in session.attempts
    ]
    return GameState(
        game_id=game_id,
        status=session.status,
        word_length=session.word_length,
        max_attempts=session.max_attempts,
        current_attempt=session.current_attempt,
        rows=rows,
        keyboard=session.keyboard(),
        target=session.revealed_target(),
        share=session.share_text(),
    )

# --- Results ---

def _record_if_finished(game_id: str, session: GameSession, results: DBResultLog) -> None:
    """
    Record a finished game. Safe to call repeatedly: the log keeps one row per game.
    A failed write is logged, not raised; the next request for this game tries again.
    """
    if not session.is_over:
        return
    try:
        marker = results.record(game_id, session)
    except SQLAlchemyError:
        results.db.rollback()
        logger.exception("Could not record result for game %s; will retry", game_id)
        return
    logger.debug("Game %s on record as %s", game_id, marker)

# ---------------- Routes ----------------

@app.post("/games", response_model=NewGameResponse, summary="Start a new game")
def start_game(
    words: WordStore = Depends(get_words),
    sessions: SessionStore = Depends(get_sessions),
) -> NewGameResponse:
    try:
        session = GameSession(words, word_length=words.word_length, max_attempts=config.MAX_ATTEMPTS)
    except EmptyCandidateList as exc:
        logger.error("Cannot start a game: %s", exc)
        raise HTTPException(status_code=503, detail="No words available to play with.")

    game_id = sessions.add(session)
    logger.info("Started game %s", game_id)
    return NewGameResponse(
        game_id=game_id,
        word_length=session.word_length,
        max_attempts=session.max_attempts,
        status=session.status,
    )

@app.get("/games/{game_id}", response_model=GameState, summary="Get current game state")
def get_game(
    game_id: str,
    sessions: SessionStore = Depends(get_sessions),
    results: DBResultLog = Depends(get_results),
) -> GameState:
    result = sessions.apply(game_id, lambda s: _to_game_state(game_id, s))
    if result is None:
        raise HTTPException(status_code=404, detail="Game not found")

    session, state = result
    # Picks up a result whose earlier write failed
    _record_if_finished(game_id, session, results)
    return state

@app.post("/games/{game_id}/keys", response_model=GameState, summary="Send one key")
def press_key(
    game_id: str,
    payload: KeyRequest,
    sessions: SessionStore = Depends(get_sessions),
    results: DBResultLog = Depends(get_results),
) -> GameState:
    def _press(session: GameSession) -> GameState:
        session.press(payload.key)
        return _to_game_state(game_id, session)

    outcome = sessions.apply(game_id, _press)
    if outcome is None:
        raise HTTPException(status_code=404, detail="Game not found")

    session, state = outcome
    _record_if_finished(game_id, session, results)
    return state

@app.get("/games/{game_id}/share", response_model=ShareOut, summary="Get the shareable result grid")
def get_share(
    game_id: str,
    sessions: SessionStore = Depends(get_sessions),
) -> ShareOut:
    result = sessions.apply(game_id, lambda s: s.share_text())
    if result is None:
        raise HTTPException(status_code=404, detail="Game not found")
    text = result[1]
    if text is None:
        raise HTTPException(status_code=409, detail="Game still in play. Nothing to share yet.")
    return ShareOut(game_id=game_id, text=text)

@app.get("/stats", response_model=StatsOut, summary="Get scoreboard")
def get_stats(results: DBResultLog = Depends(get_results)) -> StatsOut:
    stats = results.get_stats(max_attempts=config.MAX_ATTEMPTS)
    return StatsOut(
        games_played=stats.games_played,
        games_won=stats.games_won,
        percentage_won=stats.percentage_won,
        current_win_streak=stats.current_win_streak,
        max_win_streak=stats.max_win_streak,
        win_distribution=stats.win_distribution,
    )

@app.post("/stats/reset", summary="Reset the scoreboard")
def reset_stats(results: DBResultLog = Depends(get_results)) -> dict:
    results.reset()
    return {"message": "Stats reset."}
