"""Records decoded from TMDB payloads."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Union


@dataclass
class Category:
    id: int
    name: str

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Category":
        return cls(id=int(data["id"]), name=data.get("name", ""))


@dataclass
class Movie:
    id: int
    title: str
    overview: str = ""
    poster_path: Optional[str] = None
    vote_average: float = 0.0
    # Only populated by the detail endpoint
    genres: List[Category] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Movie":
        return cls(
            id=int(data["id"]),
            title=data.get("title", ""),
            overview=data.get("overview") or "",
            poster_path=data.get("poster_path"),
            vote_average=data.get("vote_average") or 0.0,
            genres=[Category.from_dict(g) for g in data.get("genres", [])],
        )


@dataclass
class MoviePage:
    """One page of a paginated movie listing."""

    results: List[Movie]
    page: int = 1
    total_pages: int = 0

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "MoviePage":
        return cls(
            results=[Movie.from_dict(m) for m in data.get("results", [])],
            page=data.get("page", 1),
            total_pages=data.get("total_pages", 0),
        )


class ListingKind(str, Enum):
    NONE = "none"
    TRENDING = "trending"
    CATEGORY = "category"
    SEARCH = "search"


@dataclass
class ListingState:
    """Page counters for the listing currently on screen.

    ``kind`` says which listing it is; pages without one keep ``NONE``.
    ``query`` is the category id for category listings, the search text for
    searches and ``None`` otherwise.
    """

    current_page: int = 1
    max_page: int = 0
    kind: ListingKind = ListingKind.NONE
    query: Union[None, int, str] = None

    @property
    def has_more(self) -> bool:
        return self.current_page < self.max_page
