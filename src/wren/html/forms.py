"""Form-related elements — labels, forms, links, buttons, selects, textareas.

``Form`` and ``Anchor`` accept an ``ActionResult`` from the action
resolver and turn it into a URL::

    result = resolver.resolve(WidgetsController, ActionCall.of(WidgetsController, "edit", 42))
    Form().action_for(result).render()
    # -> <form method="post" action="/Widgets/edit/42"></form>
"""

from collections.abc import Iterable
from typing import Any, Self

from kida.utils.html import safe_url

from wren.actions.resolver import ActionResult
from wren.actions.urls import ActionUrlBuilder
from wren.html.binding import DataclassMetadataProvider, MetadataProvider
from wren.html.container import ContainerElement
from wren.html.inputs import format_value
from wren.html.tags import HtmlAttribute, HtmlTag


def _bind_common(element: ContainerElement, binding: Any) -> None:
    element.name(binding.name).id(binding.id)
    for attribute, text in binding.validation_attributes.items():
        element.attr(attribute, text)


class Label(ContainerElement):
    __slots__ = ()

    def __init__(self, text: str | None = None) -> None:
        super().__init__(HtmlTag.LABEL)
        if text is not None:
            self.text(text)

    def for_(self, element_id: str | None) -> Self:
        return self.attr(HtmlAttribute.FOR, element_id)

    def bind(self, model: Any, accessor: str, provider: MetadataProvider | None = None) -> Self:
        """Point ``for`` at the bound input's id and show the display name."""
        binding = (provider or DataclassMetadataProvider()).bind(model, accessor)
        return self.for_(binding.id).text(binding.display_name)


class Form(ContainerElement):
    """``<form>``; defaults to ``method="post"``."""

    __slots__ = ()

    def __init__(self, method: str = "post") -> None:
        super().__init__(HtmlTag.FORM)
        self.method(method)

    def method(self, value: str) -> Self:
        return self.attr(HtmlAttribute.METHOD, value.lower())

    def action(self, url: str | None) -> Self:
        return self.attr(HtmlAttribute.ACTION, url)

    def action_for(self, result: ActionResult, url_builder: ActionUrlBuilder | None = None) -> Self:
        """Set ``action`` to the URL of a resolved controller action."""
        return self.action((url_builder or ActionUrlBuilder()).build(result))


class Anchor(ContainerElement):
    """``<a>``. URLs pass through kida's ``safe_url`` safelist."""

    __slots__ = ()

    def __init__(self, text: str | None = None) -> None:
        super().__init__(HtmlTag.A)
        if text is not None:
            self.text(text)

    def href(self, url: str | None, fallback: str = "#") -> Self:
        if url is None:
            return self.attr(HtmlAttribute.HREF, None)
        return self.attr(HtmlAttribute.HREF, safe_url(str(url), fallback=fallback))

    def href_for(self, result: ActionResult, url_builder: ActionUrlBuilder | None = None) -> Self:
        return self.href((url_builder or ActionUrlBuilder()).build(result))

    def target(self, value: str | None) -> Self:
        return self.attr(HtmlAttribute.TARGET, value)


class Button(ContainerElement):
    """``<button>``; defaults to ``type="button"`` so it never submits by accident."""

    __slots__ = ()

    def __init__(self, text: str | None = None, button_type: str = "button") -> None:
        super().__init__(HtmlTag.BUTTON)
        self.attr(HtmlAttribute.TYPE, button_type)
        if text is not None:
            self.text(text)

    def submit(self) -> Self:
        return self.attr(HtmlAttribute.TYPE, "submit")

    def disabled(self, flag: bool = True) -> Self:
        return self.attr(HtmlAttribute.DISABLED, flag)


class Option(ContainerElement):
    __slots__ = ()

    def __init__(self, value: Any, text: Any = None) -> None:
        super().__init__(HtmlTag.OPTION)
        self.attr(HtmlAttribute.VALUE, format_value(value) or "")
        self.text(value if text is None else text)

    def selected(self, flag: bool = True) -> Self:
        return self.attr(HtmlAttribute.SELECTED, bool(flag))


class Select(ContainerElement):
    """``<select>`` with ``<option>`` children."""

    __slots__ = ()

    def __init__(self) -> None:
        super().__init__(HtmlTag.SELECT)

    def option(self, value: Any, text: Any = None, selected: bool = False) -> Self:
        return self.append(Option(value, text).selected(selected))

    def options(self, choices: Iterable[Any] | None) -> Self:
        """Append options from ``(value, text)`` pairs or bare values."""
        for choice in choices or ():
            if isinstance(choice, tuple):
                self.option(*choice)
            else:
                self.option(choice)
        return self

    def multiple(self, flag: bool = True) -> Self:
        return self.attr(HtmlAttribute.MULTIPLE, flag)

    def selected(self, value: Any) -> Self:
        """Select the options whose value matches; deselect the rest.

        *value* may be a single value or a list/tuple/set for multi-selects.
        """
        values = value if isinstance(value, (list, tuple, set, frozenset)) else (value,)
        wanted = {format_value(v) for v in values if v is not None}
        for child in self._children:
            if isinstance(child, Option):
                child.selected(child.get_attr(HtmlAttribute.VALUE) in wanted)
        return self

    def bind(self, model: Any, accessor: str, provider: MetadataProvider | None = None) -> Self:
        binding = (provider or DataclassMetadataProvider()).bind(model, accessor)
        _bind_common(self, binding)
        return self.selected(binding.value)


class TextArea(ContainerElement):
    __slots__ = ()

    def __init__(self) -> None:
        super().__init__(HtmlTag.TEXTAREA)

    def rows(self, count: int | None) -> Self:
        return self.attr(HtmlAttribute.ROWS, count)

    def cols(self, count: int | None) -> Self:
        return self.attr(HtmlAttribute.COLS, count)

    def placeholder(self, text: str | None) -> Self:
        return self.attr(HtmlAttribute.PLACEHOLDER, text)

    def bind(self, model: Any, accessor: str, provider: MetadataProvider | None = None) -> Self:
        binding = (provider or DataclassMetadataProvider()).bind(model, accessor)
        _bind_common(self, binding)
        return self.text(format_value(binding.value))
