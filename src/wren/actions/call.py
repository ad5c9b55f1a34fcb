"""Action call descriptions.

An ``ActionCall`` says "call this controller's action with these
arguments" without calling anything. Two shapes exist:

- **Named** — positional and keyword arguments, matched against the
  action's declared parameters at resolution time::

      ActionCall.of(WidgetsController, "edit", 42)
      ActionCall.of(WidgetsController, "search", q="blue", page=2)

- **Explicit** — the caller names every parameter::

      ActionCall.explicit(WidgetsController, "edit", [("id", 42)])

Argument values are literals unless wrapped in ``Computed``, which
defers evaluation to resolution time::

    ActionCall.of(WidgetsController, "edit", Computed(lambda: current_widget().id))
"""

from __future__ import annotations

import inspect
import sys
from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass
from enum import StrEnum
from typing import Any

from wren.errors import InvalidArgumentError


class CallKind(StrEnum):
    NAMED = "named"
    EXPLICIT = "explicit"


@dataclass(frozen=True, slots=True)
class Computed:
    """An argument evaluated when the call is resolved, not when it is built."""

    func: Callable[[], Any]

    def evaluate(self) -> Any:
        return self.func()


@dataclass(frozen=True, slots=True)
class ActionCall:
    """A controller action plus the arguments it would be called with.

    ``positional`` holds arguments matched by position; ``named`` holds
    ``(parameter_name, value)`` pairs. Explicit calls only use ``named``.
    """

    controller: type
    action: str
    positional: tuple[Any, ...] = ()
    named: tuple[tuple[str, Any], ...] = ()
    kind: CallKind = CallKind.NAMED

    @classmethod
    def of(cls, controller: type, action: str, *args: Any, **kwargs: Any) -> ActionCall:
        """Describe ``controller().action(*args, **kwargs)``."""
        _check_target(controller, action)
        return cls(
            controller=controller,
            action=action,
            positional=args,
            named=tuple(kwargs.items()),
        )

    @classmethod
    def explicit(
        cls,
        controller: type,
        action: str,
        parameters: Iterable[tuple[str, Any]] | Mapping[str, Any] = (),
    ) -> ActionCall:
        """Describe a call from an explicit ``(name, value)`` parameter list."""
        _check_target(controller, action)
        pairs = tuple(parameters.items()) if isinstance(parameters, Mapping) else tuple(parameters)
        for pair in pairs:
            if not (isinstance(pair, tuple) and len(pair) == 2 and isinstance(pair[0], str)):
                msg = f"Explicit parameters must be (name, value) pairs, got {pair!r}"
                raise InvalidArgumentError(msg)
        return cls(controller=controller, action=action, named=pairs, kind=CallKind.EXPLICIT)


def action_call(method: Callable[..., Any], *args: Any, **kwargs: Any) -> ActionCall:
    """Describe a call from a method reference.

    ``action_call(WidgetsController.edit, 42)`` is shorthand for
    ``ActionCall.of(WidgetsController, "edit", 42)``. The controller is
    the class named by the function's qualified name, so the method must
    be defined on a module-level class; for inherited actions or classes
    defined inside functions, use ``ActionCall.of``.
    """
    if inspect.ismethod(method):
        owner = method.__self__
        controller = owner if isinstance(owner, type) else type(owner)
        return ActionCall.of(controller, method.__name__, *args, **kwargs)

    qualname = getattr(method, "__qualname__", "")
    module = sys.modules.get(getattr(method, "__module__", "") or "")
    parts = qualname.split(".")
    if module is None or len(parts) < 2 or "<locals>" in parts:
        msg = f"action_call() needs a method of a module-level controller class, got {method!r}"
        raise InvalidArgumentError(msg)

    target: Any = module
    for part in parts[:-1]:
        target = getattr(target, part, None)
    if not isinstance(target, type):
        msg = f"Cannot find the controller class for {qualname!r}"
        raise InvalidArgumentError(msg)
    return ActionCall.of(target, parts[-1], *args, **kwargs)


def _check_target(controller: Any, action: Any) -> None:
    if not isinstance(controller, type):
        msg = f"Controller must be a class, got {controller!r}"
        raise InvalidArgumentError(msg)
    if not isinstance(action, str) or not action:
        msg = f"Action name must be a non-empty string, got {action!r}"
        raise InvalidArgumentError(msg)
