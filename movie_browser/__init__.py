"""Single-page TMDB movie browser: API client, document tree, router and pages."""

from .browser import MovieBrowser
from .errors import ApiError, ImageLoadError, RouteError

__all__ = ["MovieBrowser", "ApiError", "ImageLoadError", "RouteError"]
