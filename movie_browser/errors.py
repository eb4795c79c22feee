"""Exception types raised by the browser."""


class ApiError(Exception):
    """A TMDB call failed: transport error, non-2xx status or undecodable body."""

    def __init__(self, endpoint, message, status_code=None):
        super().__init__(f"{endpoint}: {message}")
        self.endpoint = endpoint
        self.status_code = status_code


class ImageLoadError(Exception):
    """An image source could not be loaded.

    Never raised; it travels as the detail of an image's ``error`` event and
    is handled by swapping in the fallback image.
    """

    def __init__(self, src):
        super().__init__(f"could not load image {src}")
        self.src = src


class RouteError(ValueError):
    """The navigation hash looks like a known route but cannot be parsed."""
