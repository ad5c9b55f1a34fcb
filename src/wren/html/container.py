"""Container elements — tags that hold child elements or text.

Children are rendered in order. Elements and ``Markup`` are inserted
as-is; any other value is converted to text and escaped::

    Div().add_class("alert").append(Span().text("Saved"), " <ok>").render()
    # -> <div class="alert"><span>Saved</span> &lt;ok&gt;</div>
"""

from typing import Any, Self

from kida.utils.html import Markup

from wren.errors import InvalidArgumentError
from wren.html.element import Element, render_children
from wren.html.tags import HtmlTag


class ContainerElement(Element):
    """An element with a closing tag and ordered child content."""

    __slots__ = ("_children",)

    def __init__(self, tag: HtmlTag | str) -> None:
        super().__init__(tag)
        self._children: list[Any] = []

    def append(self, *children: Any) -> Self:
        """Append children; ``None`` is skipped."""
        self._children.extend(child for child in children if child is not None)
        return self

    def text(self, value: Any) -> Self:
        """Replace all children with escaped text."""
        self._children = [] if value is None else [str(value)]
        return self

    def html(self, markup: str) -> Self:
        """Replace all children with trusted, pre-rendered HTML."""
        self._children = [Markup(markup)]
        return self

    @property
    def children(self) -> tuple[Any, ...]:
        return tuple(self._children)

    def render_content(self) -> str:
        return render_children(self._children)


class Div(ContainerElement):
    __slots__ = ()

    def __init__(self) -> None:
        super().__init__(HtmlTag.DIV)


class Span(ContainerElement):
    __slots__ = ()

    def __init__(self) -> None:
        super().__init__(HtmlTag.SPAN)


class Paragraph(ContainerElement):
    __slots__ = ()

    def __init__(self) -> None:
        super().__init__(HtmlTag.P)


class Heading(ContainerElement):
    """``<h1>`` through ``<h6>``."""

    __slots__ = ()

    def __init__(self, level: int = 1) -> None:
        if not 1 <= level <= 6:
            msg = f"Heading level must be between 1 and 6, got {level}"
            raise InvalidArgumentError(msg)
        super().__init__(HtmlTag(f"h{level}"))


class UnorderedList(ContainerElement):
    __slots__ = ()

    def __init__(self) -> None:
        super().__init__(HtmlTag.UL)

    def item(self, content: Any) -> Self:
        """Append ``content`` wrapped in an ``<li>``."""
        return self.append(ListItem().append(content))


class ListItem(ContainerElement):
    __slots__ = ()

    def __init__(self) -> None:
        super().__init__(HtmlTag.LI)
