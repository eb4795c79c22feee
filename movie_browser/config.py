"""Environment-driven settings."""

import logging
import os

from dotenv import load_dotenv

load_dotenv()

# TMDB
TMDB_API_KEY = os.getenv("TMDB_API_KEY", "")
TMDB_API_URL = os.getenv("TMDB_API_URL", "https://api.themoviedb.org/3/")
TMDB_IMAGE_URL = os.getenv("TMDB_IMAGE_URL", "https://image.tmdb.org/t/p").rstrip("/")
FALLBACK_IMAGE_URL = "https://static.platzi.com/static/images/error/img404.png"


def _env_float(name, default=None):
    v = os.getenv(name)
    if v is None or not v.strip():
        return default
    try:
        return float(v)
    except ValueError:
        return default


def _env_int(name, default):
    try:
        return int(os.getenv(name, default))
    except (TypeError, ValueError):
        return default


# No timeout unless one is configured
TMDB_TIMEOUT = _env_float("TMDB_TIMEOUT")

# Distance in pixels from the document bottom that counts as "at the bottom"
SCROLL_THRESHOLD = _env_int("SCROLL_THRESHOLD", 15)

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level=None):
    """Configure root logging once for the app process."""
    logging.basicConfig(
        level=getattr(logging, (level or LOG_LEVEL).upper(), logging.INFO),
        format=LOG_FORMAT,
    )
