"""
Game settings, read once from the environment.

- Loads a local .env if present (dev convenience)
- Every value has a default so the game runs with no setup
"""

import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

DATA_DIR = Path(__file__).resolve().parent / "data"

APP_ENV = os.getenv("APP_ENV", "local")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

# Core game settings
WORD_LENGTH = int(os.getenv("WORD_LENGTH", "5"))
MAX_ATTEMPTS = int(os.getenv("MAX_ATTEMPTS", "6"))

# Word sources: full dictionary and the common words a target is picked from
WORDS_FILE = os.getenv("WORDS_FILE", str(DATA_DIR / f"words-{WORD_LENGTH}.txt"))
COMMON_WORDS_FILE = os.getenv("COMMON_WORDS_FILE", str(DATA_DIR / f"common-words-{WORD_LENGTH}.txt"))

# "remote" asks random.org for the index (with local fallback), "local" never leaves the process
RANDOM_SOURCE = os.getenv("RANDOM_SOURCE", "remote")

# Seconds before a live session is dropped from memory: finished ones soon, abandoned ones after a day
SESSION_FINISHED_TTL = float(os.getenv("SESSION_FINISHED_TTL", "600"))
SESSION_IDLE_TTL = float(os.getenv("SESSION_IDLE_TTL", "86400"))
