"""Infinite-scroll pagination for the active listing."""

import logging

from . import config

logger = logging.getLogger(__name__)


def is_near_bottom(document, threshold=None):
    """Whether the viewport's bottom edge is within ``threshold`` px of the document end."""
    threshold = config.SCROLL_THRESHOLD if threshold is None else threshold
    return document.scroll_top + document.client_height >= document.scroll_height - threshold


def make_paginated(document, listing, fetch_page, threshold=None):
    """Build the scroll handler that loads the next page of ``listing``.

    Every scroll event near the bottom with pages left bumps
    ``listing.current_page`` and calls ``fetch_page`` with it. There is no
    debounce and no in-flight guard: a burst of scroll events asks for
    consecutive pages back to back.
    """

    def on_scroll(event=None):
        if is_near_bottom(document, threshold) and listing.current_page < listing.max_page:
            listing.current_page += 1
            logger.debug(f"Loading page {listing.current_page}/{listing.max_page}")
            fetch_page(listing.current_page)

    return on_scroll
