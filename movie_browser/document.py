"""In-memory document tree the pages render into.

A small subset of the browser DOM: elements with a class list, attributes,
inline style, text and event listeners; fragments for batched inserts; and
a ``Document`` holding the location hash, the history stack, scroll metrics
and window-level listeners (``scroll``, ``hashchange``).
"""

import logging
from collections import defaultdict

logger = logging.getLogger(__name__)

# Rendered height in px of fixed-size blocks, keyed by class
BLOCK_HEIGHTS = {"movie-container": 150, "category-container": 40}

HIDDEN_CLASS = "inactive"


class Event:
    def __init__(self, type, target=None, detail=None):
        self.type = type
        self.target = target
        self.detail = detail
        self.default_prevented = False

    def prevent_default(self):
        self.default_prevented = True


class EventTarget:
    def __init__(self):
        self._listeners = defaultdict(list)

    def add_event_listener(self, type, listener):
        if listener not in self._listeners[type]:
            self._listeners[type].append(listener)

    def remove_event_listener(self, type, listener):
        if listener in self._listeners[type]:
            self._listeners[type].remove(listener)

    def listeners(self, type):
        return list(self._listeners[type])

    def dispatch(self, event, detail=None):
        """Call every listener for ``event`` (an ``Event`` or a type name)."""
        if isinstance(event, str):
            event = Event(event, target=self, detail=detail)
        elif event.target is None:
            event.target = self
        for listener in self.listeners(event.type):
            listener(event)
        return event


class ClassList:
    def __init__(self, names=()):
        self._names = list(dict.fromkeys(names))

    def add(self, *names):
        for name in names:
            if name not in self._names:
                self._names.append(name)

    def remove(self, *names):
        for name in names:
            if name in self._names:
                self._names.remove(name)

    def toggle(self, name, force=None):
        present = name in self._names if force is None else not force
        if present:
            self.remove(name)
            return False
        self.add(name)
        return True

    def __contains__(self, name):
        return name in self._names

    def __iter__(self):
        return iter(self._names)

    def __len__(self):
        return len(self._names)

    def __repr__(self):
        return " ".join(self._names)


class Element(EventTarget):
    def __init__(self, tag, document=None, id=None, classes=()):
        super().__init__()
        self.tag = tag
        self.document = document
        self.id = id
        self.class_list = ClassList(classes)
        self.attributes = {}
        self.style = {}
        self.children = []
        self.parent = None
        self._text = ""

    def __repr__(self):
        label = f"#{self.id}" if self.id else ""
        if len(self.class_list):
            label += "." + ".".join(self.class_list)
        return f"<{self.tag}{label}>"

    @property
    def text_content(self):
        return self._text + "".join(child.text_content for child in self.children)

    @text_content.setter
    def text_content(self, value):
        self.clear()
        self._text = "" if value is None else str(value)

    def set_attribute(self, name, value):
        self.attributes[name] = str(value)

    def get_attribute(self, name):
        return self.attributes.get(name)

    def has_attribute(self, name):
        return name in self.attributes

    def remove_attribute(self, name):
        self.attributes.pop(name, None)

    def append(self, *nodes):
        """Insert nodes as the last children; fragments hand over their children.

        One call is one layout pass on the owning document, however many
        nodes it inserts.
        """
        for node in nodes:
            batch = list(node.children) if isinstance(node, Fragment) else [node]
            if isinstance(node, Fragment):
                node.children = []
            for child in batch:
                if child.parent is not None and child in child.parent.children:
                    child.parent.children.remove(child)
                child.parent = self
                self.children.append(child)
        if self.is_connected:
            self.document.reflows += 1

    @property
    def is_connected(self):
        """Whether this element hangs off the document body."""
        node = self
        while node.parent is not None:
            node = node.parent
        return self.document is not None and node is self.document.body

    def layout_height(self):
        """Height this subtree takes on screen; hidden subtrees take none."""
        if HIDDEN_CLASS in self.class_list:
            return 0
        fixed = max((BLOCK_HEIGHTS.get(name, 0) for name in self.class_list), default=0)
        return fixed or sum(child.layout_height() for child in self.children)

    def clear(self):
        """Drop every child, like assigning an empty ``innerHTML``."""
        for child in self.children:
            child.parent = None
        self.children = []
        self._text = ""

    def click(self):
        return self.dispatch("click")

    def iter(self):
        yield self
        for child in self.children:
            yield from child.iter()

    def matches(self, selector):
        if selector.startswith("#"):
            return self.id == selector[1:]
        if selector.startswith("."):
            return selector[1:] in self.class_list
        return self.tag == selector

    def query(self, selector):
        """First element in this subtree matching a ``#id``, ``.class`` or tag selector."""
        return next((el for el in self.iter() if el.matches(selector)), None)

    def query_all(self, selector):
        return [el for el in self.iter() if el.matches(selector)]


class Fragment(Element):
    def __init__(self, document=None):
        super().__init__("#fragment", document=document)


class Location:
    """The address-bar hash; assigning a new value fires ``hashchange``."""

    def __init__(self, document):
        self._document = document
        self._hash = ""
        self.history = []

    @property
    def hash(self):
        return self._hash

    @hash.setter
    def hash(self, value):
        self._assign(value, push=True)

    def back(self):
        if self.history:
            self._assign(self.history.pop(), push=False)

    def reset(self, value):
        """Set the hash without history or ``hashchange``, as on a fresh page load."""
        self._hash = self._normalize(value)

    @staticmethod
    def _normalize(value):
        value = value or ""
        if value and not value.startswith("#"):
            value = "#" + value
        return "" if value == "#" else value

    def _assign(self, value, push):
        value = self._normalize(value)
        if value == self._hash:
            return
        if push:
            self.history.append(self._hash)
        old, self._hash = self._hash, value
        logger.debug(f"hashchange {old!r} -> {value!r}")
        self._document.dispatch(Event("hashchange", target=self._document, detail=old))


class Document(EventTarget):
    def __init__(self, client_height=800):
        super().__init__()
        self.body = Element("body", document=self)
        self.location = Location(self)
        self.scroll_top = 0
        self.client_height = client_height
        self.reflows = 0

    def create_element(self, tag, id=None, classes=()):
        return Element(tag, document=self, id=id, classes=classes)

    def create_fragment(self):
        return Fragment(document=self)

    def query(self, selector):
        return self.body.query(selector)

    def query_all(self, selector):
        return self.body.query_all(selector)

    @property
    def scroll_height(self):
        """Height of the laid-out content, never less than the viewport."""
        return max(self.client_height, self.body.layout_height())

    def scroll_to(self, top):
        """Move the viewport and fire ``scroll``."""
        self.scroll_top = max(0, min(top, max(self.scroll_height - self.client_height, 0)))
        self.dispatch("scroll")

    def scroll_to_bottom(self):
        self.scroll_to(self.scroll_height - self.client_height)
