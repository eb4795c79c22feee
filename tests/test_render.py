import pytest

from movie_browser.document import Document
from movie_browser.images import FALLBACK_IMAGE_URL
from movie_browser.lazy import LazyImageLoader
from movie_browser.models import Category, Movie
from movie_browser.render import ListRenderer, fail_image
from movie_browser.routes import parse_route


@pytest.fixture
def doc():
    return Document()


@pytest.fixture
def loader():
    return LazyImageLoader()


@pytest.fixture
def renderer(doc, loader):
    return ListRenderer(doc, loader)


@pytest.fixture
def target(doc):
    section = doc.create_element("section", id="list")
    doc.body.append(section)
    return section


MOVIES = [
    Movie(id=1, title="A", poster_path="/a.jpg"),
    Movie(id=2, title="B", poster_path="/b.jpg"),
    Movie(id=3, title="C", poster_path=None),
]


def test_clean_render_of_nothing_empties_target(renderer, target, doc):
    target.append(doc.create_element("div"))

    renderer.render_movies([], target, clean=True)

    assert target.children == []


def test_render_appends_when_not_clean(renderer, target):
    renderer.render_movies(MOVIES[:1], target)
    renderer.render_movies(MOVIES[1:], target, clean=False)

    assert [img.get_attribute("alt") for img in target.query_all(".movie-img")] == ["A", "B", "C"]


def test_one_insertion_per_render(renderer, target, doc):
    before = doc.reflows

    renderer.render_movies(MOVIES, target)

    assert doc.reflows == before + 1
    assert len(target.children) == 3


def test_eager_images_get_src(renderer, target, loader):
    renderer.render_movies(MOVIES[:1], target)

    img = target.query(".movie-img")
    assert img.get_attribute("src") == "https://image.tmdb.org/t/p/w300/a.jpg"
    assert not img.has_attribute("data-img")
    assert len(loader) == 0


def test_lazy_images_wait_for_visibility(renderer, target, loader):
    renderer.render_movies(MOVIES[:2], target, lazy_load=True)

    first, second = target.query_all(".movie-img")
    assert not first.has_attribute("src")
    assert first in loader

    loader.reveal([first])

    assert first.get_attribute("src") == first.get_attribute("data-img")
    assert not second.has_attribute("src")
    assert first not in loader and second in loader


def test_clean_render_forgets_replaced_images(renderer, target, loader):
    renderer.render_movies(MOVIES[:2], target, lazy_load=True)
    replaced = target.query_all(".movie-img")

    renderer.render_movies(MOVIES[2:], target, lazy_load=True)

    assert len(loader) == 1
    assert all(img not in loader for img in replaced)


def test_image_click_navigates_to_movie(renderer, target, doc):
    renderer.render_movies(MOVIES, target)

    target.query_all(".movie-img")[1].click()

    assert doc.location.hash == "#movie=2"


def test_image_error_swaps_in_fallback(renderer, target):
    renderer.render_movies(MOVIES[2:], target)
    img = target.query(".movie-img")

    event = fail_image(img)

    assert img.get_attribute("src") == FALLBACK_IMAGE_URL
    assert event.detail.src.endswith("/w300")


def test_like_button_toggles(renderer, target, doc):
    renderer.render_movies(MOVIES[:1], target)
    btn = target.query(".movie-btn")

    btn.click()
    assert "movie-btn--liked" in btn.class_list
    btn.click()
    assert "movie-btn--liked" not in btn.class_list
    assert doc.location.hash == ""


def test_categories_always_replace_and_navigate(renderer, target, doc):
    renderer.render_categories([Category(1, "Old")], target)
    renderer.render_categories([Category(28, "Action"), Category(878, "Science Fiction")], target)

    titles = target.query_all(".category-title")
    assert [t.text_content for t in titles] == ["Action", "Science Fiction"]
    assert titles[1].id == "id878"

    titles[1].click()

    route = parse_route(doc.location.hash)
    assert route.category_id == 878
    assert route.name == "Science Fiction"
