"""A browsing session: page markup, global listeners and the router."""

import logging

from .api import TmdbClient
from .document import Document, Event
from .lazy import LazyImageLoader
from .pages import Pages
from .render import ListRenderer
from .router import Router
from .routes import TRENDS, search_hash

logger = logging.getLogger(__name__)


class Layout:
    """Mount points and header chrome of the single page."""

    def __init__(self, document):
        el = document.create_element

        self.header = el("header", id="header", classes=["header-container"])
        self.header_arrow = el("span", classes=["header-arrow", "inactive"])
        self.header_title = el("h1", classes=["header-title"])
        self.header_title.text_content = "Movies"
        self.header_category_title = el("h1", classes=["header-title", "header-title--categoryView", "inactive"])
        self.header_home = el("span", classes=["header-home"])
        self.search_form = el("form", id="searchForm", classes=["header-searchForm"])
        self.search_input = el("input")
        self.search_input.set_attribute("placeholder", "Search")
        self.search_form.append(self.search_input, el("button"))
        self.header.append(
            self.header_arrow, self.header_title, self.header_category_title, self.header_home, self.search_form
        )

        self.trending_preview = el("section", id="trendingPreview", classes=["trendingPreview-container"])
        self.trending_button = el("button", classes=["trendingPreview-btn"])
        self.trending_button.text_content = "See more"
        self.trending_list = el("article", classes=["trendingPreview-movieList"])
        self.trending_preview.append(self.trending_button, self.trending_list)

        self.categories_preview = el("section", id="categoriesPreview", classes=["categoriesPreview-container"])
        self.categories_list = el("article", classes=["categoriesPreview-list"])
        self.categories_preview.append(self.categories_list)

        self.generic_list = el("section", id="genericList", classes=["genericList-container", "inactive"])

        self.movie_detail = el("section", id="movieDetail", classes=["movieDetail-container", "inactive"])
        self.detail_title = el("h1", classes=["movieDetail-title"])
        self.detail_score = el("span", classes=["movieDetail-score"])
        self.detail_description = el("p", classes=["movieDetail-description"])
        self.detail_categories = el("article", classes=["categories-list"])
        self.related_movies = el("article", classes=["relatedMovies-scrollContainer"])
        self.movie_detail.append(
            self.detail_title, self.detail_score, self.detail_description, self.detail_categories, self.related_movies
        )

        document.body.append(
            self.header, self.trending_preview, self.categories_preview, self.generic_list, self.movie_detail
        )


class MovieBrowser:
    """One page lifetime of the movie browser."""

    def __init__(self, client=None, document=None, threshold=None):
        self.document = document or Document()
        self.client = client or TmdbClient()
        self.lazy_loader = LazyImageLoader()
        self.layout = Layout(self.document)
        self.renderer = ListRenderer(self.document, self.lazy_loader)
        self.pages = Pages(self.layout, self.client, self.renderer)
        self.router = Router(self.document, self.pages.handlers(), threshold=threshold)
        self._wire()

    def _wire(self):
        ui = self.layout
        location = self.document.location
        self.document.add_event_listener("hashchange", self.router.navigate)
        ui.header_arrow.add_event_listener("click", lambda event: location.back())
        ui.header_home.add_event_listener("click", self._go_home)
        ui.trending_button.add_event_listener("click", self._go_trending)
        ui.search_form.add_event_listener("submit", self._on_search)

    def _go_home(self, event):
        self.document.location.hash = ""

    def _go_trending(self, event):
        self.document.location.hash = TRENDS

    def _on_search(self, event):
        event.prevent_default()
        query = self.layout.search_input.get_attribute("value")
        if query:
            self.document.location.hash = search_hash(query)

    @property
    def route(self):
        return self.router.route

    @property
    def listing(self):
        context = self.router.context
        return context.listing if context else None

    @property
    def hash(self):
        return self.document.location.hash

    def start(self, hash=None):
        """Initial load: render whatever the hash points at."""
        if hash:
            self.document.location.reset(hash)
        logger.info("Movie browser started")
        self.router.navigate()

    def go(self, hash):
        self.document.location.hash = hash

    def submit_search(self, text):
        self.layout.search_input.set_attribute("value", text)
        return self.layout.search_form.dispatch(Event("submit"))

    def load_more(self):
        """Scroll to the end of the page, which pages in more results."""
        self.document.scroll_to_bottom()
