"""
- HTTP call with clear fallback
Ask random.org for one index in [0, upper). If anything goes wrong (no internet,
timeout, bad response), we fall back to a local secure random generator so a
game can still start.
"""

import logging
import requests
from secrets import randbelow

from .words import RandomIndex

logger = logging.getLogger(__name__)

RANDOM_URL = "https://www.random.org/integers/"


def fetch_index(upper: int) -> int:
    if upper <= 0:
        raise ValueError("Upper bound must be positive.")

    # Parameters to send to random.org
    params = {
        "num": 1,           # one index is all we need
        "min": 0,           # smallest allowed index
        "max": upper - 1,   # largest allowed index
        "col": 1,           # one number per line
        "base": 10,         # normal decimal numbers
        "format": "plain",  # plain text response
        "rnd": "new",       # always generate new numbers
    }

    # keep network quick; if it takes too long, we will just fallback
    timeout_seconds = 3.0

    try:
        response = requests.get(RANDOM_URL, params=params, timeout=timeout_seconds)
        response.raise_for_status()

        # The body looks like: "1234\n"
        value = int(response.text.strip())
        if value < 0 or value >= upper:
            raise ValueError(f"random.org index {value} out of range 0..{upper - 1}.")
        return value

    except Exception as exc:
        # Fallback: Python's secure random, randbelow(upper) is in [0, upper)
        logger.info("random.org unavailable (%s); using local randomness", exc)
        return randbelow(upper)


def get_random_index(source: str) -> RandomIndex:
    """Pick the index source named in config: "remote" or "local"."""
    if source == "local":
        return randbelow
    return fetch_index
