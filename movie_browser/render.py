"""Builds movie and category nodes into the document."""

from .errors import ImageLoadError
from .images import FALLBACK_IMAGE_URL, image_url
from .lazy import SOURCE_ATTR
from .routes import category_hash, movie_hash


class ListRenderer:
    def __init__(self, document, lazy_loader):
        self.document = document
        self.lazy_loader = lazy_loader

    def _navigate(self, hash):
        self.document.location.hash = hash

    def movie_element(self, movie, lazy_load=False):
        """Poster card: clickable image plus a like toggle."""
        doc = self.document
        container = doc.create_element("div", classes=["movie-container"])

        img = doc.create_element("img", classes=["movie-img"])
        img.set_attribute("alt", movie.title)
        img.set_attribute(SOURCE_ATTR if lazy_load else "src", image_url(movie.poster_path))
        img.add_event_listener("click", lambda event: self._navigate(movie_hash(movie.id)))
        img.add_event_listener("error", lambda event: img.set_attribute("src", FALLBACK_IMAGE_URL))

        btn = doc.create_element("button", classes=["movie-btn"])
        btn.add_event_listener("click", lambda event: btn.class_list.toggle("movie-btn--liked"))

        if lazy_load:
            self.lazy_loader.observe(img)

        container.append(img, btn)
        return container

    def render_movies(self, movies, target, lazy_load=False, clean=True):
        """Render movie cards into ``target`` with a single insertion."""
        if clean:
            target.clear()

        fragment = self.document.create_fragment()
        for movie in movies:
            fragment.append(self.movie_element(movie, lazy_load))
        target.append(fragment)
        if clean:
            self.lazy_loader.prune()

    def render_categories(self, categories, target):
        target.clear()

        fragment = self.document.create_fragment()
        for category in categories:
            container = self.document.create_element("div", classes=["category-container"])
            title = self.document.create_element("h3", id=f"id{category.id}", classes=["category-title"])
            title.text_content = category.name
            title.add_event_listener(
                "click", lambda event, c=category: self._navigate(category_hash(c.id, c.name))
            )
            container.append(title)
            fragment.append(container)
        target.append(fragment)


def fail_image(img):
    """Report that ``img`` could not load its current source."""
    return img.dispatch("error", detail=ImageLoadError(img.get_attribute("src")))
