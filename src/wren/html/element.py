"""Base fluent element.

An ``Element`` accumulates a tag, attributes, and CSS classes, and
renders them to an HTML string on demand. Every configuration method
returns the element itself so calls chain::

    Element(HtmlTag.DIV).id("main").add_class("panel", "panel-default").render()
    # -> <div id="main" class="panel panel-default"></div>

Rendering never mutates the element: calling ``render()`` twice yields
the same string.
"""

import html
import re
from typing import Any, Self

from kida.utils.html import Markup

from wren.errors import InvalidArgumentError, InvalidAttributeError
from wren.html.tags import VOID_TAGS, HtmlAttribute, HtmlTag

# Per the HTML attribute-name grammar: no whitespace, quotes, '>', '/', '='
# or control characters.
_ATTRIBUTE_NAME_RE = re.compile(r"^[^\s\"'>/=\x00-\x1f\x7f]+$")

# Placeholder stored under "class" so the class list renders where it
# was first written.
_CLASS_SLOT = object()


def validate_attribute_name(name: str) -> str:
    """Return *name* unchanged, or raise ``InvalidAttributeError``."""
    if not isinstance(name, str) or not _ATTRIBUTE_NAME_RE.match(name):
        raise InvalidAttributeError(str(name))
    return name


def keyword_attribute_name(key: str) -> str:
    """Map a Python keyword argument to an attribute name.

    ``class_`` -> ``class``, ``for_`` -> ``for``, ``data_id`` -> ``data-id``.
    """
    return key.rstrip("_").replace("_", "-")


def _token(value: Any) -> Any:
    # data-* and aria-* values are enumerated strings, not boolean attributes.
    if isinstance(value, bool):
        return "true" if value else "false"
    return value


def render_children(children: list[Any]) -> str:
    """Render child nodes; anything without ``__html__`` is escaped text."""
    parts: list[str] = []
    for child in children:
        if hasattr(child, "__html__"):
            parts.append(child.__html__())
        else:
            parts.append(html.escape(str(child), quote=False))
    return "".join(parts)


class Element:
    """A single HTML tag with attributes and CSS classes.

    Attribute values are stored as given and escaped at render time.
    ``True`` renders a boolean attribute (``checked="checked"``);
    ``None`` and ``False`` remove the attribute.
    """

    __slots__ = ("_attributes", "_classes", "tag")

    def __init__(self, tag: HtmlTag | str) -> None:
        try:
            self.tag = HtmlTag(tag)
        except ValueError:
            msg = f"Unsupported HTML tag: {tag!r}"
            raise InvalidArgumentError(msg) from None
        self._attributes: dict[str, Any] = {}
        self._classes: list[str] = []

    # -- Attributes -------------------------------------------------------

    def attr(self, name: str, value: Any) -> Self:
        """Set attribute *name* to *value*, replacing any previous value."""
        validate_attribute_name(name)
        if name == HtmlAttribute.CLASS:
            self._classes.clear()
            if value is None or value is False:
                self._attributes.pop(name, None)
                return self
            return self.add_class(str(value))

        if value is None or value is False:
            self._attributes.pop(name, None)
        else:
            self._attributes[name] = value
        return self

    def attrs(self, **attributes: Any) -> Self:
        """Set several attributes from keyword arguments.

        Keys go through ``keyword_attribute_name``, so
        ``attrs(for_="email", data_toggle="modal")`` sets ``for`` and
        ``data-toggle``.
        """
        for key, value in attributes.items():
            self.attr(keyword_attribute_name(key), value)
        return self

    def get_attr(self, name: str) -> Any:
        """Return the stored value of *name*, or None if it is not set."""
        if name == HtmlAttribute.CLASS:
            return " ".join(self._classes) or None
        return self._attributes.get(name)

    def has_attr(self, name: str) -> bool:
        if name == HtmlAttribute.CLASS:
            return bool(self._classes)
        return name in self._attributes

    def remove_attr(self, name: str) -> Self:
        return self.attr(name, None)

    def id(self, value: str | None) -> Self:
        return self.attr(HtmlAttribute.ID, value)

    def name(self, value: str | None) -> Self:
        return self.attr(HtmlAttribute.NAME, value)

    def title(self, value: str | None) -> Self:
        return self.attr(HtmlAttribute.TITLE, value)

    def style(self, value: str | None) -> Self:
        return self.attr(HtmlAttribute.STYLE, value)

    def data(self, key: str, value: Any) -> Self:
        """Set ``data-<key>``. Booleans render as ``"true"``/``"false"``."""
        return self.attr(f"data-{key}", _token(value))

    def aria(self, key: str, value: Any) -> Self:
        """Set ``aria-<key>``. Booleans render as ``"true"``/``"false"``."""
        return self.attr(f"aria-{key}", _token(value))

    # -- Classes ----------------------------------------------------------

    def add_class(self, *names: str) -> Self:
        """Add CSS classes, skipping duplicates and keeping first-seen order.

        Each argument may hold several whitespace-separated class names.
        """
        for value in names:
            for class_name in value.split():
                if class_name not in self._classes:
                    self._classes.append(class_name)
        if self._classes:
            self._attributes.setdefault(HtmlAttribute.CLASS, _CLASS_SLOT)
        else:
            self._attributes.pop(HtmlAttribute.CLASS, None)
        return self

    def remove_class(self, name: str) -> Self:
        if name in self._classes:
            self._classes.remove(name)
        if not self._classes:
            self._attributes.pop(HtmlAttribute.CLASS, None)
        return self

    def has_class(self, name: str) -> bool:
        return name in self._classes

    @property
    def classes(self) -> tuple[str, ...]:
        return tuple(self._classes)

    # -- Rendering --------------------------------------------------------

    def render_attributes(self) -> str:
        """Render ``name="value"`` pairs in insertion order, each with a leading space."""
        parts: list[str] = []
        for name, value in self._attributes.items():
            if value is _CLASS_SLOT:
                value = " ".join(self._classes)
            elif value is True:
                value = name
            parts.append(f' {name}="{html.escape(str(value), quote=True)}"')
        return "".join(parts)

    def render_content(self) -> str:
        """Inner HTML between the opening and closing tags."""
        return ""

    def render(self) -> Markup:
        """Serialize the element to an HTML string."""
        attributes = self.render_attributes()
        if self.tag in VOID_TAGS:
            return Markup(f"<{self.tag}{attributes} />")
        return Markup(f"<{self.tag}{attributes}>{self.render_content()}</{self.tag}>")

    def __html__(self) -> str:
        return str(self.render())

    def __str__(self) -> str:
        return str(self.render())

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.render()!s}>"
