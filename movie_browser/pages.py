"""Page handlers: chrome toggles plus the fetches each page needs."""

import logging
from collections import namedtuple
from concurrent.futures import ThreadPoolExecutor

from .errors import ApiError
from .images import ImageSize, image_url
from .models import ListingKind
from .routes import CategoryRoute, HomeRoute, MovieRoute, SearchRoute, TrendingRoute

logger = logging.getLogger(__name__)

INACTIVE = "inactive"
TRENDING_TITLE = "Trending Movies"

HEADER_GRADIENT = "linear-gradient(180deg, rgba(0, 0, 0, 0.35) 19.27%, rgba(0, 0, 0, 0) 29.17%)"

# section is one of "previews", "generic", "detail"
Chrome = namedtuple(
    "Chrome", ["long_header", "title", "arrow", "white_icons", "category_title", "search_form", "section"]
)

HOME_CHROME = Chrome(False, True, False, False, False, True, "previews")
TRENDING_CHROME = Chrome(False, False, True, False, True, False, "generic")
CATEGORY_CHROME = Chrome(False, False, True, False, True, False, "generic")
MOVIE_CHROME = Chrome(True, False, True, True, False, False, "detail")
SEARCH_CHROME = Chrome(False, False, True, False, True, True, "generic")


def _show(element, visible):
    element.class_list.toggle(INACTIVE, not visible)


class Pages:
    def __init__(self, layout, client, renderer):
        self.layout = layout
        self.client = client
        self.renderer = renderer

    def handlers(self):
        return {
            HomeRoute: self.home,
            TrendingRoute: self.trending,
            CategoryRoute: self.category,
            MovieRoute: self.movie_detail,
            SearchRoute: self.search,
        }

    def apply_chrome(self, chrome):
        ui = self.layout
        ui.header.class_list.toggle("header-container--long", chrome.long_header)
        if not chrome.long_header:
            ui.header.style.pop("background", None)
        _show(ui.header_title, chrome.title)
        _show(ui.header_arrow, chrome.arrow)
        ui.header_arrow.class_list.toggle("header-arrow--white", chrome.white_icons)
        ui.header_home.class_list.toggle("header-home--white", chrome.white_icons)
        _show(ui.header_category_title, chrome.category_title)
        _show(ui.search_form, chrome.search_form)

        _show(ui.trending_preview, chrome.section == "previews")
        _show(ui.categories_preview, chrome.section == "previews")
        _show(ui.generic_list, chrome.section == "generic")
        _show(ui.movie_detail, chrome.section == "detail")

    # Listings

    def _show_first_page(self, ctx, page):
        if not ctx.active:
            logger.debug(f"Discarding stale first page for {ctx.route}")
            return
        ctx.listing.max_page = page.total_pages
        self.renderer.render_movies(page.results, self.layout.generic_list, lazy_load=True)

    def _page_loader(self, ctx, fetch):
        def fetch_page(page_number):
            page = fetch(page_number)
            if not ctx.active:
                logger.debug(f"Discarding stale page {page_number} for {ctx.route}")
                return
            self.renderer.render_movies(page.results, self.layout.generic_list, lazy_load=True, clean=False)

        return fetch_page

    # Handlers

    def home(self, ctx):
        self.apply_chrome(HOME_CHROME)

        with ThreadPoolExecutor(max_workers=2) as pool:
            trending = pool.submit(self.client.trending)
            genres = pool.submit(self.client.genres)

            try:
                page = trending.result()
            except ApiError as e:
                logger.error(f"Error getting trending movies: {e}")
            else:
                if ctx.active:
                    self.renderer.render_movies(page.results, self.layout.trending_list, lazy_load=True)

            categories = genres.result()
            if ctx.active:
                self.renderer.render_categories(categories, self.layout.categories_list)

    def trending(self, ctx):
        self.apply_chrome(TRENDING_CHROME)
        self.layout.header_category_title.text_content = TRENDING_TITLE
        ctx.listing.kind = ListingKind.TRENDING

        self._show_first_page(ctx, self.client.trending())
        ctx.arm(self._page_loader(ctx, lambda n: self.client.trending(page=n)))

    def category(self, ctx):
        self.apply_chrome(CATEGORY_CHROME)
        category_id, name = ctx.route.category_id, ctx.route.name
        self.layout.header_category_title.text_content = name
        ctx.listing.kind = ListingKind.CATEGORY
        ctx.listing.query = category_id

        self._show_first_page(ctx, self.client.discover(category_id))
        ctx.arm(self._page_loader(ctx, lambda n: self.client.discover(category_id, page=n)))

    def movie_detail(self, ctx):
        self.apply_chrome(MOVIE_CHROME)
        movie_id = ctx.route.movie_id
        ui = self.layout

        movie = self.client.movie(movie_id)
        if not ctx.active:
            return

        poster = image_url(movie.poster_path, ImageSize.LARGE)
        ui.header.style["background"] = f"{HEADER_GRADIENT}, url({poster})"
        ui.detail_title.text_content = movie.title
        ui.detail_description.text_content = movie.overview
        ui.detail_score.text_content = movie.vote_average
        self.renderer.render_categories(movie.genres, ui.detail_categories)

        related = self.client.recommendations(movie_id)
        if ctx.active:
            self.renderer.render_movies(related.results, ui.related_movies)

    def search(self, ctx):
        self.apply_chrome(SEARCH_CHROME)
        query = ctx.route.query
        self.layout.header_category_title.text_content = query
        ctx.listing.kind = ListingKind.SEARCH
        ctx.listing.query = query

        self._show_first_page(ctx, self.client.search(query))
        ctx.arm(self._page_loader(ctx, lambda n: self.client.search(query, page=n)))
