"""Tag names, input types, and attribute names used by the element builders."""

from enum import StrEnum


class HtmlTag(StrEnum):
    """Tags the element builders know how to render."""

    A = "a"
    BUTTON = "button"
    DIV = "div"
    FORM = "form"
    H1 = "h1"
    H2 = "h2"
    H3 = "h3"
    H4 = "h4"
    H5 = "h5"
    H6 = "h6"
    INPUT = "input"
    LABEL = "label"
    LI = "li"
    OPTION = "option"
    P = "p"
    SELECT = "select"
    SPAN = "span"
    TEXTAREA = "textarea"
    UL = "ul"


class HtmlInputType(StrEnum):
    """Values of ``<input type="...">``."""

    CHECKBOX = "checkbox"
    DATE = "date"
    EMAIL = "email"
    FILE = "file"
    HIDDEN = "hidden"
    NUMBER = "number"
    PASSWORD = "password"
    RADIO = "radio"
    SEARCH = "search"
    SUBMIT = "submit"
    TEL = "tel"
    TEXT = "text"
    URL = "url"


class HtmlAttribute(StrEnum):
    """Attribute names the builders set directly."""

    ACTION = "action"
    AUTOCOMPLETE = "autocomplete"
    AUTOFOCUS = "autofocus"
    CHECKED = "checked"
    CLASS = "class"
    COLS = "cols"
    DISABLED = "disabled"
    FOR = "for"
    HREF = "href"
    ID = "id"
    MAX = "max"
    METHOD = "method"
    MIN = "min"
    MULTIPLE = "multiple"
    NAME = "name"
    PLACEHOLDER = "placeholder"
    READONLY = "readonly"
    REQUIRED = "required"
    ROWS = "rows"
    SELECTED = "selected"
    STEP = "step"
    STYLE = "style"
    TARGET = "target"
    TITLE = "title"
    TYPE = "type"
    VALUE = "value"


# Elements with no closing tag, rendered as ``<input ... />``
VOID_TAGS: frozenset[HtmlTag] = frozenset({HtmlTag.INPUT})
