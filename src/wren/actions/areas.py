"""Declarative area annotation for controller classes.

An area is an extra routing dimension that groups controllers::

    @route_area("Admin")
    class UsersController:
        def index(self): ...

    area_of(UsersController)  # "Admin"

Subclasses inherit their base class's area unless they declare their own.
"""

from collections.abc import Callable

from wren.errors import InvalidArgumentError

AREA_ATTRIBUTE = "__route_area__"


def route_area[C: type](name: str) -> Callable[[C], C]:
    """Class decorator that records the controller's area name."""
    if not isinstance(name, str):
        msg = f"route_area() expects a string area name, got {type(name).__name__}"
        raise InvalidArgumentError(msg)

    def decorator(controller: C) -> C:
        setattr(controller, AREA_ATTRIBUTE, name)
        return controller

    return decorator


def area_of(controller: type) -> str:
    """The controller's declared area, or ``""`` when it has none."""
    return getattr(controller, AREA_ATTRIBUTE, "")
