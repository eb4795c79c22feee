"""Shared fixtures: a TMDB client that answers from canned payloads."""

from unittest.mock import MagicMock

import pytest

from movie_browser import MovieBrowser
from movie_browser.api import TmdbClient
from movie_browser.document import Document


def add_cards(document, count):
    """Lay out ``count`` movie cards on the page, 150 px each."""
    for _ in range(count):
        document.body.append(document.create_element("div", classes=["movie-container"]))


def movies_payload(page=1, total_pages=5, count=2, prefix="Movie"):
    start = (page - 1) * count
    return {
        "page": page,
        "total_pages": total_pages,
        "results": [
            {
                "id": start + i + 1,
                "title": f"{prefix} {start + i + 1}",
                "overview": "",
                "poster_path": f"/poster{start + i + 1}.jpg",
                "vote_average": 6.5,
            }
            for i in range(count)
        ],
    }


class FakeClient(TmdbClient):
    """Answers ``fetch`` from a dict of endpoint -> payload, callable or exception."""

    def __init__(self, responses):
        super().__init__(api_key="test-key", session=MagicMock())
        self.responses = responses
        self.calls = []

    def fetch(self, endpoint, params=None):
        params = {k: v for k, v in (params or {}).items() if v is not None}
        self.calls.append((endpoint, params))
        response = self.responses[endpoint]
        if isinstance(response, Exception):
            raise response
        if callable(response):
            return response(params)
        return response

    def calls_to(self, endpoint):
        return [params for called, params in self.calls if called == endpoint]


@pytest.fixture
def responses():
    return {
        "trending/movie/day": lambda params: movies_payload(params.get("page", 1), total_pages=4, prefix="Trend"),
        "genre/movie/list": {"genres": [{"id": 28, "name": "Action"}, {"id": 878, "name": "Science Fiction"}]},
        "discover/movie": {
            "page": 1,
            "total_pages": 3,
            "results": [{"id": 1, "title": "A", "poster_path": "/a.jpg", "vote_average": 7.2}],
        },
        "search/movie": lambda params: movies_payload(params.get("page", 1), total_pages=2, prefix="Found"),
        "movie/42": {
            "id": 42,
            "title": "The Answer",
            "overview": "Deep Thought computes.",
            "poster_path": "/answer.jpg",
            "vote_average": 8.4,
            "genres": [{"id": 878, "name": "Science Fiction"}, {"id": 35, "name": "Comedy"}],
        },
        "movie/42/recommendations": movies_payload(1, total_pages=1, count=3, prefix="Related"),
    }


@pytest.fixture
def client(responses):
    return FakeClient(responses)


@pytest.fixture
def document():
    return Document(client_height=800)


@pytest.fixture
def browser(client, document):
    return MovieBrowser(client=client, document=document)


def alts(container):
    return [img.get_attribute("alt") for img in container.query_all(".movie-img")]
