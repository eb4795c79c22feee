"""Navigation hash parsing and building.

Five hash shapes are recognized, checked as prefixes in this order:
``#trends``, ``#category=<id>-<name>``, ``#movie=<id>``, ``#search=<query>``.
Anything else is the home page.
"""

from dataclasses import dataclass
from urllib.parse import quote, unquote

from .errors import RouteError


@dataclass(frozen=True)
class HomeRoute:
    pass


@dataclass(frozen=True)
class TrendingRoute:
    pass


@dataclass(frozen=True)
class CategoryRoute:
    category_id: int
    name: str


@dataclass(frozen=True)
class MovieRoute:
    movie_id: int


@dataclass(frozen=True)
class SearchRoute:
    query: str


TRENDS = "#trends"
CATEGORY = "#category="
MOVIE = "#movie="
SEARCH = "#search="


def _payload(hash, prefix):
    return hash[len(prefix):]


def _to_id(value, hash):
    try:
        return int(value)
    except ValueError:
        raise RouteError(f"bad id {value!r} in {hash!r}") from None


def parse_route(hash):
    """Map a location hash to its route. Unknown hashes are ``HomeRoute``."""
    hash = hash or ""
    if hash.startswith(TRENDS):
        return TrendingRoute()
    if hash.startswith(CATEGORY):
        category_id, sep, name = _payload(hash, CATEGORY).partition("-")
        if not sep:
            raise RouteError(f"missing '-' separator in {hash!r}")
        return CategoryRoute(_to_id(category_id, hash), unquote(name))
    if hash.startswith(MOVIE):
        return MovieRoute(_to_id(_payload(hash, MOVIE), hash))
    if hash.startswith(SEARCH):
        return SearchRoute(unquote(_payload(hash, SEARCH)))
    return HomeRoute()


def category_hash(category_id, name):
    return f"{CATEGORY}{category_id}-{quote(name)}"


def movie_hash(movie_id):
    return f"{MOVIE}{movie_id}"


def search_hash(query):
    return f"{SEARCH}{quote(query)}"
