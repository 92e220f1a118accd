"""
Single place to:
- Read DATABASE_URL from env
- Create a SQLAlchemy Engine
- Create a Session factory (SessionLocal) for per-request DB sessions
- Provide get_db() dependency for FastAPI routes
"""

import os
from typing import Generator

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, DeclarativeBase
from dotenv import load_dotenv

# 1) Load env vars from .env if present
load_dotenv()

# 2) Pull the connection string; a local SQLite file keeps the game playable with no setup
DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./guessword.db")

# SQLite connections are used from FastAPI's worker threads
connect_args = {"check_same_thread": False} if DATABASE_URL.startswith("sqlite") else {}

# 3) Create the SQLAlchemy Engine.
engine = create_engine(
    DATABASE_URL,
    pool_pre_ping=True,
    echo=False,
    future=True,
    connect_args=connect_args,
)

# 4) Session factory. Each request gets its own session.
SessionLocal = sessionmaker(bind=engine, autoflush=False, autocommit=False, future=True)

# 5) Base class for ORM models.
class Base(DeclarativeBase):
    pass

# 6) FastAPI dependency that yields a DB session for the duration of a request.
def get_db() -> Generator:
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
