"""Bootstrap presets — elements with their Bootstrap classes applied.

Each preset is an ordinary element subclass, so it keeps the full
fluent API::

    ModalBody().append(Paragraph().text("Delete this widget?")).render()
    # -> <div class="modal-body"><p>Delete this widget?</p></div>
"""

from wren.errors import InvalidArgumentError
from wren.html.container import Div, Heading, Span
from wren.html.forms import Button, Label
from wren.html.inputs import InputEmail, InputPassword, InputText


class ModalHeader(Div):
    __slots__ = ()

    def __init__(self) -> None:
        super().__init__()
        self.add_class("modal-header")


class ModalBody(Div):
    __slots__ = ()

    def __init__(self) -> None:
        super().__init__()
        self.add_class("modal-body")


class ModalFooter(Div):
    __slots__ = ()

    def __init__(self) -> None:
        super().__init__()
        self.add_class("modal-footer")


class ModalTitle(Heading):
    __slots__ = ()

    def __init__(self, text: str | None = None) -> None:
        super().__init__(4)
        self.add_class("modal-title")
        if text is not None:
            self.text(text)


class FormGroup(Div):
    __slots__ = ()

    def __init__(self) -> None:
        super().__init__()
        self.add_class("form-group")


class ControlLabel(Label):
    __slots__ = ()

    def __init__(self, text: str | None = None) -> None:
        super().__init__(text)
        self.add_class("control-label")


class FormControl(InputText):
    __slots__ = ()

    def __init__(self) -> None:
        super().__init__()
        self.add_class("form-control")


class FormEmail(InputEmail):
    __slots__ = ()

    def __init__(self) -> None:
        super().__init__()
        self.add_class("form-control")


class FormPassword(InputPassword):
    __slots__ = ()

    def __init__(self) -> None:
        super().__init__()
        self.add_class("form-control")


class HelpBlock(Span):
    __slots__ = ()

    def __init__(self, text: str | None = None) -> None:
        super().__init__()
        self.add_class("help-block")
        if text is not None:
            self.text(text)


_BUTTON_KINDS = frozenset({"default", "primary", "success", "info", "warning", "danger", "link"})
_ALERT_KINDS = frozenset({"success", "info", "warning", "danger"})


class BootstrapButton(Button):
    """``<button class="btn btn-<kind>">``."""

    __slots__ = ()

    def __init__(self, text: str | None = None, kind: str = "default", button_type: str = "button") -> None:
        if kind not in _BUTTON_KINDS:
            msg = f"Unknown button kind {kind!r}; expected one of {', '.join(sorted(_BUTTON_KINDS))}"
            raise InvalidArgumentError(msg)
        super().__init__(text, button_type)
        self.add_class("btn", f"btn-{kind}")


class PrimaryButton(BootstrapButton):
    __slots__ = ()

    def __init__(self, text: str | None = None, button_type: str = "button") -> None:
        super().__init__(text, "primary", button_type)


class DefaultButton(BootstrapButton):
    __slots__ = ()

    def __init__(self, text: str | None = None, button_type: str = "button") -> None:
        super().__init__(text, "default", button_type)


class DangerButton(BootstrapButton):
    __slots__ = ()

    def __init__(self, text: str | None = None, button_type: str = "button") -> None:
        super().__init__(text, "danger", button_type)


class Alert(Div):
    """``<div class="alert alert-<kind>" role="alert">``."""

    __slots__ = ()

    def __init__(self, kind: str = "info") -> None:
        if kind not in _ALERT_KINDS:
            msg = f"Unknown alert kind {kind!r}; expected one of {', '.join(sorted(_ALERT_KINDS))}"
            raise InvalidArgumentError(msg)
        super().__init__()
        self.add_class("alert", f"alert-{kind}").attr("role", "alert")
