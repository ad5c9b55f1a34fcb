"""Input elements — one class per ``<input type="...">``.

Each class fixes its input type at construction, so the simplest use
renders just the type::

    InputCheckbox().render()   # -> <input type="checkbox" />

Inputs can be bound to a model property with ``bind()``; see
``wren.html.binding`` for how name, id, value, and validation
attributes are derived.
"""

from datetime import date, datetime, time
from enum import Enum
from typing import Any, Self

from wren.html.binding import DataclassMetadataProvider, MetadataProvider, ModelBinding
from wren.html.element import Element
from wren.html.tags import HtmlAttribute, HtmlInputType, HtmlTag


def format_value(value: Any) -> str | None:
    """Format a Python value for a ``value=""`` attribute."""
    if value is None:
        return None
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, (date, datetime, time)):
        return value.isoformat()
    return str(value)


class InputElement(Element):
    """Base class for ``<input>`` elements.

    The ``type`` attribute is written first so it always renders first.
    """

    __slots__ = ()

    input_type: HtmlInputType = HtmlInputType.TEXT

    def __init__(self, input_type: HtmlInputType | str | None = None) -> None:
        super().__init__(HtmlTag.INPUT)
        self.attr(HtmlAttribute.TYPE, HtmlInputType(input_type or self.input_type))

    def value(self, value: Any) -> Self:
        return self.attr(HtmlAttribute.VALUE, format_value(value))

    def placeholder(self, text: str | None) -> Self:
        return self.attr(HtmlAttribute.PLACEHOLDER, text)

    def autocomplete(self, value: str | None) -> Self:
        return self.attr(HtmlAttribute.AUTOCOMPLETE, value)

    def required(self, flag: bool = True) -> Self:
        return self.attr(HtmlAttribute.REQUIRED, flag)

    def disabled(self, flag: bool = True) -> Self:
        return self.attr(HtmlAttribute.DISABLED, flag)

    def readonly(self, flag: bool = True) -> Self:
        return self.attr(HtmlAttribute.READONLY, flag)

    def autofocus(self, flag: bool = True) -> Self:
        return self.attr(HtmlAttribute.AUTOFOCUS, flag)

    def bind(self, model: Any, accessor: str, provider: MetadataProvider | None = None) -> Self:
        """Set name, id, value, and validation attributes from ``model.<accessor>``."""
        binding = (provider or DataclassMetadataProvider()).bind(model, accessor)
        self.name(binding.name).id(binding.id)
        self.bind_value(binding)
        for attribute, text in binding.validation_attributes.items():
            self.attr(attribute, text)
        return self

    def bind_value(self, binding: ModelBinding) -> None:
        """Copy the bound value into the element. Overridden per input type."""
        self.value(binding.value)


class InputText(InputElement):
    __slots__ = ()
    input_type = HtmlInputType.TEXT


class InputEmail(InputElement):
    __slots__ = ()
    input_type = HtmlInputType.EMAIL


class InputPassword(InputElement):
    """Password input. Bound values are never echoed back into the page."""

    __slots__ = ()
    input_type = HtmlInputType.PASSWORD

    def bind_value(self, binding: ModelBinding) -> None:
        pass


class InputHidden(InputElement):
    __slots__ = ()
    input_type = HtmlInputType.HIDDEN


class InputNumber(InputElement):
    __slots__ = ()
    input_type = HtmlInputType.NUMBER

    def min(self, value: float | None) -> Self:
        return self.attr(HtmlAttribute.MIN, value)

    def max(self, value: float | None) -> Self:
        return self.attr(HtmlAttribute.MAX, value)

    def step(self, value: float | str | None) -> Self:
        return self.attr(HtmlAttribute.STEP, value)


class InputDate(InputElement):
    __slots__ = ()
    input_type = HtmlInputType.DATE


class InputCheckbox(InputElement):
    """Checkbox input.

    When bound, the model value's truthiness decides ``checked`` and the
    submitted value is ``true``.
    """

    __slots__ = ()
    input_type = HtmlInputType.CHECKBOX

    def checked(self, flag: bool = True) -> Self:
        return self.attr(HtmlAttribute.CHECKED, bool(flag))

    def bind_value(self, binding: ModelBinding) -> None:
        self.value(True).checked(bool(binding.value))


class InputRadio(InputElement):
    __slots__ = ()
    input_type = HtmlInputType.RADIO

    def checked(self, flag: bool = True) -> Self:
        return self.attr(HtmlAttribute.CHECKED, bool(flag))

    def bind_value(self, binding: ModelBinding) -> None:
        # The radio's own value is fixed by the caller; the model value
        # only decides which radio in the group is checked.
        own = self.get_attr(HtmlAttribute.VALUE)
        self.checked(own is not None and own == format_value(binding.value))


class InputFile(InputElement):
    """File input. Browsers ignore ``value``, so bound values are dropped."""

    __slots__ = ()
    input_type = HtmlInputType.FILE

    def bind_value(self, binding: ModelBinding) -> None:
        pass


class InputSubmit(InputElement):
    __slots__ = ()
    input_type = HtmlInputType.SUBMIT


class InputSearch(InputElement):
    __slots__ = ()
    input_type = HtmlInputType.SEARCH


class InputTel(InputElement):
    __slots__ = ()
    input_type = HtmlInputType.TEL


class InputUrl(InputElement):
    __slots__ = ()
    input_type = HtmlInputType.URL
