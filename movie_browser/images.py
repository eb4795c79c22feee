"""Poster URL helpers."""

from enum import Enum

from . import config


class ImageSize(str, Enum):
    SMALL = "w300"
    LARGE = "w500"


FALLBACK_IMAGE_URL = config.FALLBACK_IMAGE_URL


def image_url(path, size=ImageSize.SMALL):
    """Build the full image URL for a TMDB image path.

    The path is not validated; a missing one yields a URL that will fail to
    load, and the image's error handler swaps in ``FALLBACK_IMAGE_URL``.
    """
    size = size.value if isinstance(size, ImageSize) else size
    return f"{config.TMDB_IMAGE_URL}/{size}{path or ''}"


def has_image_path(url):
    """Whether ``url`` carries an image path after the size segment."""
    tail = url.rsplit("/", 1)[-1]
    return tail not in (ImageSize.SMALL.value, ImageSize.LARGE.value)
