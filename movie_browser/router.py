"""Hash router: one active page, its listing state and its scroll listener."""

import logging

from .models import ListingState
from .pagination import make_paginated
from .routes import parse_route

logger = logging.getLogger(__name__)


class PageContext:
    """What a page handler gets for one navigation."""

    def __init__(self, router, route, generation):
        self.router = router
        self.route = route
        self.generation = generation
        self.listing = ListingState()

    @property
    def active(self):
        """False once the user has navigated elsewhere."""
        return self.router.generation == self.generation

    def arm(self, fetch_page):
        """Load further pages of this listing while the user scrolls."""
        if self.active:
            self.router.arm_pagination(self.listing, fetch_page)


class Router:
    def __init__(self, document, handlers, threshold=None):
        self.document = document
        self.handlers = handlers
        self.threshold = threshold
        self.generation = 0
        self.context = None
        self.scroll_listener = None

    @property
    def route(self):
        return self.context.route if self.context else None

    def navigate(self, event=None):
        """Tear down the current page and run the handler for the current hash."""
        self.teardown()
        self.generation += 1

        route = parse_route(self.document.location.hash)
        logger.info(f"Navigating to {type(route).__name__} ({self.document.location.hash or '#'})")
        self.context = PageContext(self, route, self.generation)
        self.handlers[type(route)](self.context)

        self.document.scroll_top = 0

    def teardown(self):
        if self.scroll_listener is not None:
            self.document.remove_event_listener("scroll", self.scroll_listener)
            self.scroll_listener = None
        self.context = None

    def arm_pagination(self, listing, fetch_page):
        self.scroll_listener = make_paginated(self.document, listing, fetch_page, self.threshold)
        self.document.add_event_listener("scroll", self.scroll_listener)
