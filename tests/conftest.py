"""
- Spins up temp test DB
- Create tables before tests run
- Provide a db_session fixture and override FastAPI's get_db so routes use the test session.
- Swap the word store for a tiny one whose only candidate is SMILE.
- Provide a client fixture (TestClient(app)) that already has the overrides applied.
"""
import os
import pytest
from typing import Generator

from fastapi.testclient import TestClient
from sqlalchemy import create_engine, text
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

# Ensure the app does NOT run dev-only startup hooks (e.g., auto-create tables against real DB)
os.environ.setdefault("APP_ENV", "test")

from guessword.db import Base, get_db
from guessword.main import app, get_words, get_sessions
from guessword import models  # noqa: F401

from helpers import make_words

# Use SQLite in-memory for tests (fast, isolated)
TEST_DATABASE_URL = "sqlite+pysqlite:///:memory:"

@pytest.fixture(scope="session")
def engine():
    # StaticPool + check_same_thread=False lets Starlette's TestClient and SQLAlchemy
    # share ONE in-memory SQLite database across threads.
    engine = create_engine(
        TEST_DATABASE_URL,
        future=True,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)

@pytest.fixture
def db_session(engine) -> Generator:
    """Provide a clean session per test with rollback."""
    TestingSessionLocal = sessionmaker(bind=engine, autoflush=False, autocommit=False, future=True)
    db = TestingSessionLocal()
    try:
        yield db
        db.rollback()
    finally:
        db.close()

@pytest.fixture(autouse=True)
def _clean_state(engine):
    """
    Keep tests independent:
    results are committed inside requests and sessions live in a module-level store,
    so both are wiped before each test.
    """
    with engine.begin() as conn:
        conn.execute(text("DELETE FROM game_results"))
    get_sessions().clear()
    yield

@pytest.fixture(autouse=True)
def override_dep(db_session):
    """Force the app to use our test session and word store for every request."""
    def _get_db_for_tests():
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = _get_db_for_tests
    app.dependency_overrides[get_words] = lambda: make_words()
    yield
    app.dependency_overrides.clear()

@pytest.fixture
def client():
    return TestClient(app)
