"""Visibility-triggered image loading."""

import logging
from collections import namedtuple

logger = logging.getLogger(__name__)

IntersectionEntry = namedtuple("IntersectionEntry", ["target", "is_intersecting"])

SOURCE_ATTR = "data-img"


class LazyImageLoader:
    """Copies an image's stashed ``data-img`` into ``src`` once it is visible.

    One loader serves a whole browser session. Observation is one-shot: an
    image is dropped as soon as its source is copied in, and ``prune`` drops
    images that were removed from the page before they were ever seen.
    """

    def __init__(self):
        # id(element) -> element; elements compare by identity
        self._observed = {}

    def __len__(self):
        return len(self._observed)

    def __contains__(self, element):
        return id(element) in self._observed

    def observe(self, element):
        self._observed[id(element)] = element

    def unobserve(self, element):
        self._observed.pop(id(element), None)

    def disconnect(self):
        self._observed = {}

    def prune(self):
        """Stop watching images no longer attached to the document."""
        detached = [key for key, element in self._observed.items() if not element.is_connected]
        for key in detached:
            del self._observed[key]
        if detached:
            logger.debug(f"Dropped {len(detached)} detached images")

    def intersect(self, entries):
        """Visibility callback: load every observed image that became visible."""
        for entry in entries:
            if not entry.is_intersecting or entry.target not in self:
                continue
            source = entry.target.get_attribute(SOURCE_ATTR)
            if source is not None:
                entry.target.set_attribute("src", source)
            self.unobserve(entry.target)

    def reveal(self, elements):
        """Report ``elements`` as on screen."""
        self.intersect(IntersectionEntry(el, True) for el in elements)
