"""Fluent HTML element builders.

Every builder method returns the element, and ``render()`` (or
``str()``) produces the HTML::

    from wren.html import Div, InputCheckbox, Label

    InputCheckbox().render()  # <input type="checkbox" />
    Div().add_class("form-group").append(Label("Remember me")).render()
"""

from wren.html.binding import DataclassMetadataProvider, MetadataProvider, ModelBinding
from wren.html.container import (
    ContainerElement,
    Div,
    Heading,
    ListItem,
    Paragraph,
    Span,
    UnorderedList,
)
from wren.html.element import Element
from wren.html.forms import Anchor, Button, Form, Label, Option, Select, TextArea
from wren.html.inputs import (
    InputCheckbox,
    InputDate,
    InputElement,
    InputEmail,
    InputFile,
    InputHidden,
    InputNumber,
    InputPassword,
    InputRadio,
    InputSearch,
    InputSubmit,
    InputTel,
    InputText,
    InputUrl,
)
from wren.html.tags import HtmlAttribute, HtmlInputType, HtmlTag

__all__ = [
    "Anchor",
    "Button",
    "ContainerElement",
    "DataclassMetadataProvider",
    "Div",
    "Element",
    "Form",
    "Heading",
    "HtmlAttribute",
    "HtmlInputType",
    "HtmlTag",
    "InputCheckbox",
    "InputDate",
    "InputElement",
    "InputEmail",
    "InputFile",
    "InputHidden",
    "InputNumber",
    "InputPassword",
    "InputRadio",
    "InputSearch",
    "InputSubmit",
    "InputTel",
    "InputText",
    "InputUrl",
    "Label",
    "ListItem",
    "MetadataProvider",
    "ModelBinding",
    "Option",
    "Paragraph",
    "Select",
    "Span",
    "TextArea",
    "UnorderedList",
]
