import logging
import threading
from unittest.mock import MagicMock, patch

import pytest
import requests

from movie_browser.api import TmdbClient
from movie_browser.errors import ApiError
from movie_browser.models import Movie, MoviePage


def make_client(payload=None, **response_attrs):
    session = MagicMock()
    response = MagicMock(**response_attrs)
    response.json.return_value = payload if payload is not None else {}
    session.get.return_value = response
    return TmdbClient(api_key="secret", base_url="https://api.example.test/3/", session=session), session


def test_fetch_attaches_key_header_and_params():
    client, session = make_client({"ok": True})

    assert client.fetch("discover/movie", {"with_genres": 28, "page": 2}) == {"ok": True}

    args, kwargs = session.get.call_args
    assert args[0] == "https://api.example.test/3/discover/movie"
    assert kwargs["params"] == {"api_key": "secret", "with_genres": 28, "page": 2}
    assert kwargs["headers"]["Content-Type"] == "application/json;charset=utf-8"
    assert kwargs["timeout"] is None


def test_fetch_drops_unset_params():
    client, session = make_client({"results": []})

    client.trending()

    assert session.get.call_args.kwargs["params"] == {"api_key": "secret"}


def test_http_error_is_logged_and_raised(caplog):
    response = MagicMock(status_code=404)
    client, session = make_client()
    session.get.return_value.raise_for_status.side_effect = requests.HTTPError("404 Not Found", response=response)

    with caplog.at_level(logging.ERROR, logger="movie_browser.api"):
        with pytest.raises(ApiError) as excinfo:
            client.fetch("movie/1")

    assert excinfo.value.endpoint == "movie/1"
    assert excinfo.value.status_code == 404
    assert "Error fetching movie/1" in caplog.text


def test_transport_error_is_raised_as_api_error():
    client, session = make_client()
    session.get.side_effect = requests.ConnectionError("down")

    with pytest.raises(ApiError) as excinfo:
        client.search("alien")

    assert isinstance(excinfo.value.__cause__, requests.ConnectionError)
    assert session.get.call_count == 1


def test_helpers_decode_payloads():
    client, session = make_client(
        {"page": 1, "total_pages": 7, "results": [{"id": 3, "title": "C", "poster_path": None}]}
    )

    page = client.discover(28)

    assert isinstance(page, MoviePage)
    assert page.total_pages == 7
    assert page.results == [Movie(id=3, title="C")]
    assert session.get.call_args.kwargs["params"]["with_genres"] == 28


def test_movie_detail_includes_genres():
    client, session = make_client({"id": 5, "title": "E", "genres": [{"id": 18, "name": "Drama"}]})

    movie = client.movie(5)

    assert session.get.call_args.args[0].endswith("/movie/5")
    assert [g.name for g in movie.genres] == ["Drama"]


def test_each_thread_gets_its_own_session():
    with patch("movie_browser.api.requests.Session", side_effect=lambda: MagicMock()):
        client = TmdbClient(api_key="secret")
        sessions = []
        worker = threading.Thread(target=lambda: sessions.append(client.session))
        worker.start()
        worker.join()

        assert client.session is client.session
        assert sessions[0] is not client.session


def test_injected_session_is_shared():
    session = MagicMock()
    client = TmdbClient(api_key="secret", session=session)
    seen = []
    worker = threading.Thread(target=lambda: seen.append(client.session))
    worker.start()
    worker.join()

    assert seen == [session]
    assert client.session is session
