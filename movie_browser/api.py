"""TMDB API client."""

import logging
import threading
from typing import Any, Dict, List, Optional

import requests

from . import config
from .errors import ApiError
from .models import Category, Movie, MoviePage

logger = logging.getLogger(__name__)


class TmdbClient:
    """Client for the TMDB v3 endpoints the browser needs."""

    HEADERS = {"Content-Type": "application/json;charset=utf-8"}

    def __init__(self, api_key=None, base_url=None, timeout=None, session=None):
        self.api_key = config.TMDB_API_KEY if api_key is None else api_key
        self.base_url = (base_url or config.TMDB_API_URL).rstrip("/")
        self.timeout = config.TMDB_TIMEOUT if timeout is None else timeout
        self._session = session
        self._local = threading.local()
        if not self.api_key:
            logger.warning("TMDB_API_KEY not set")

    @property
    def session(self) -> requests.Session:
        """The injected session, otherwise one session per calling thread.

        Home fetches its previews from worker threads and ``requests.Session``
        is not safe to share between them.
        """
        if self._session is not None:
            return self._session
        session = getattr(self._local, "session", None)
        if session is None:
            session = self._local.session = requests.Session()
        return session

    def fetch(self, endpoint: str, params: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """GET ``endpoint`` and return the decoded JSON body.

        Failures are logged with the endpoint and re-raised as ``ApiError``.
        """
        url = f"{self.base_url}/{endpoint.lstrip('/')}"
        query = {"api_key": self.api_key}
        query.update({k: v for k, v in (params or {}).items() if v is not None})

        try:
            response = self.session.get(url, params=query, headers=self.HEADERS, timeout=self.timeout)
            response.raise_for_status()
            return response.json()
        except requests.exceptions.HTTPError as e:
            logger.error(f"Error fetching {endpoint}: {e}")
            status = e.response.status_code if e.response is not None else None
            raise ApiError(endpoint, str(e), status_code=status) from e
        except (requests.exceptions.RequestException, ValueError) as e:
            logger.error(f"Error fetching {endpoint}: {e}")
            raise ApiError(endpoint, str(e)) from e

    def trending(self, page: Optional[int] = None) -> MoviePage:
        """Movies trending today."""
        return MoviePage.from_dict(self.fetch("trending/movie/day", {"page": page}))

    def genres(self) -> List[Category]:
        data = self.fetch("genre/movie/list")
        return [Category.from_dict(g) for g in data.get("genres", [])]

    def discover(self, genre_id: int, page: Optional[int] = None) -> MoviePage:
        """Movies filtered by genre."""
        return MoviePage.from_dict(self.fetch("discover/movie", {"with_genres": genre_id, "page": page}))

    def search(self, query: str, page: Optional[int] = None) -> MoviePage:
        return MoviePage.from_dict(self.fetch("search/movie", {"query": query, "page": page}))

    def movie(self, movie_id: int) -> Movie:
        """Full movie details, genres included."""
        return Movie.from_dict(self.fetch(f"movie/{movie_id}"))

    def recommendations(self, movie_id: int) -> MoviePage:
        return MoviePage.from_dict(self.fetch(f"movie/{movie_id}/recommendations"))
