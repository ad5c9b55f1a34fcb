"""wren exception hierarchy.

Shared across the element builders, model binding, and the action
resolver so every module raises and catches the same types.
"""


class WrenError(Exception):
    """Base for all wren-specific errors."""


class ConfigurationError(WrenError):
    """Raised when a ``WrenConfig`` or URL pattern is invalid.

    Typically raised at construction time, before any element is rendered
    or any action is resolved.
    """


class InvalidArgumentError(WrenError, ValueError):
    """A caller passed an argument the operation cannot accept.

    Treated as a programming error: raised synchronously at the call
    site and never recovered internally.
    """


class InvalidAttributeError(InvalidArgumentError):
    """An HTML attribute name is empty or contains forbidden characters."""

    def __init__(self, name: str) -> None:
        self.attribute = name
        super().__init__(f"Invalid HTML attribute name: {name!r}")


class ActionCallError(InvalidArgumentError):
    """An action call does not describe a method of the expected controller.

    Carries the expected controller's name so the message always tells
    the caller which type the call should have targeted.
    """

    def __init__(self, controller: type, detail: str = "") -> None:
        self.controller = controller
        message = f"You must call a method of {controller.__name__}"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)
