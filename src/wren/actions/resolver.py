"""Action resolver — turn an ``ActionCall`` into route values.

Resolution never calls the action. It reads the controller's route name
and area, the action's declared parameter names, and the call's
arguments, and produces an ``ActionResult`` for URL generation.

Rules:

- Controller name: the class name without its ``Controller`` suffix.
- Area: from ``@route_area``, defaulting to ``""``; written under the
  area key only if the caller did not supply one.
- Arguments are visited in declaration order. ``Computed`` arguments
  are evaluated; ``None`` results are omitted. Scalars (strings,
  numbers, dates, UUIDs, enums, plain sequences) are stored under the
  parameter name. Any other object is flattened: each public property
  becomes its own route value.
- Caller-supplied route values are never overwritten, and neither is a
  key written by an earlier argument (first write wins).
"""

from __future__ import annotations

import dataclasses
import inspect
import logging
from collections.abc import Mapping
from dataclasses import dataclass
from datetime import date, time, timedelta
from decimal import Decimal
from enum import Enum
from fractions import Fraction
from types import MappingProxyType
from typing import Any
from uuid import UUID

from wren.actions.areas import area_of
from wren.actions.cache import ControllerRouteInfo, RouteMetadataCache
from wren.actions.call import ActionCall, CallKind, Computed
from wren.config import DEFAULT_CONFIG, WrenConfig
from wren.errors import ActionCallError

logger = logging.getLogger("wren.actions")

# Inserted under their parameter name as-is; everything else is flattened.
SCALAR_TYPES: tuple[type, ...] = (
    str,
    bytes,
    bool,
    int,
    float,
    complex,
    Decimal,
    Fraction,
    date,
    time,
    timedelta,
    UUID,
    Enum,
    list,
    tuple,
    set,
    frozenset,
)


@dataclass(frozen=True, slots=True)
class ActionResult:
    """Controller name, action name, and route values for one action call.

    ``route_values`` is a read-only view; build a new result instead of
    editing one.
    """

    controller_name: str
    action_name: str
    route_values: Mapping[str, Any]


def controller_route_name(controller_name: str, suffix: str = "Controller") -> str:
    """Strip *suffix* from the end of *controller_name* for use in routes.

    Returns the name unchanged when it does not end with the suffix.
    """
    if suffix and controller_name.endswith(suffix):
        return controller_name[: -len(suffix)]
    return controller_name


def object_route_values(value: Any) -> dict[str, Any]:
    """Flatten an object's public readable properties into a dict.

    Mappings contribute their items, dataclasses their fields, named
    tuples their fields, and other objects their public instance
    attributes and properties. ``None`` yields an empty dict.
    """
    if value is None:
        return {}
    if isinstance(value, Mapping):
        return {str(key): item for key, item in value.items()}
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return {
            f.name: getattr(value, f.name)
            for f in dataclasses.fields(value)
            if not f.name.startswith("_")
        }
    if isinstance(value, tuple) and hasattr(value, "_asdict"):
        return dict(value._asdict())

    values: dict[str, Any] = {}
    for name, item in getattr(value, "__dict__", {}).items():
        if not name.startswith("_"):
            values[name] = item
    for name in _slot_names(type(value)):
        if not name.startswith("_") and hasattr(value, name):
            values.setdefault(name, getattr(value, name))
    for name, member in inspect.getmembers(type(value)):
        if isinstance(member, property) and not name.startswith("_"):
            values.setdefault(name, getattr(value, name))
    return values


def is_scalar(value: Any) -> bool:
    """True for values stored whole; named tuples are flattened like objects."""
    if isinstance(value, tuple) and hasattr(value, "_asdict"):
        return False
    return isinstance(value, SCALAR_TYPES)


def _slot_names(cls: type) -> list[str]:
    names: list[str] = []
    for klass in cls.__mro__:
        slots = klass.__dict__.get("__slots__", ())
        if isinstance(slots, str):
            slots = (slots,)
        names.extend(slots)
    return names


class ActionResolver:
    """Resolves ``ActionCall`` descriptions into ``ActionResult`` objects.

    Usage::

        resolver = ActionResolver(cache=RouteMetadataCache())
        result = resolver.resolve(WidgetsController, ActionCall.of(WidgetsController, "edit", 42))

    The cache is injected so its lifetime is explicit; resolvers sharing
    a cache and a controller suffix share its entries.
    """

    __slots__ = ("_cache", "_config")

    def __init__(
        self,
        cache: RouteMetadataCache | None = None,
        config: WrenConfig | None = None,
    ) -> None:
        self._cache = cache if cache is not None else RouteMetadataCache()
        self._config = config or DEFAULT_CONFIG

    @property
    def cache(self) -> RouteMetadataCache:
        return self._cache

    @property
    def config(self) -> WrenConfig:
        return self._config

    def resolve(
        self,
        controller_type: type,
        call: ActionCall,
        route_values: Mapping[str, Any] | object | None = None,
    ) -> ActionResult:
        """Resolve *call*, which must target a method of *controller_type*.

        *route_values* seeds the result: a mapping, or any object whose
        public properties become route values. Seeded keys win over
        everything derived from the call.

        Raises ``ActionCallError`` if the call targets another class or
        does not name a method, or if its arguments do not match the
        action's parameters.
        """
        if not isinstance(call, ActionCall):
            raise ActionCallError(controller_type, f"expected an ActionCall, got {type(call).__name__}")
        if call.controller is not controller_type:
            raise ActionCallError(controller_type, f"the call targets {call.controller.__name__}")
        if not callable(getattr(controller_type, call.action, None)):
            raise ActionCallError(controller_type, f"{call.action!r} is not a method")

        suffix = self._config.controller_suffix
        info = self._cache.controller(controller_type, self._controller_info, suffix)
        values = object_route_values(route_values)
        values.setdefault(self._config.area_key, info.area_name)

        parameter_names = self._cache.action_parameters(
            controller_type, call.action, action_parameter_names, suffix
        )
        for name, argument in _bind_arguments(controller_type, call, parameter_names):
            if name in values:
                continue
            value = argument.evaluate() if isinstance(argument, Computed) else argument
            if value is None:
                continue
            if is_scalar(value):
                values[name] = value
            else:
                for key, item in object_route_values(value).items():
                    values.setdefault(key, item)

        return ActionResult(
            controller_name=info.controller_name,
            action_name=call.action,
            route_values=MappingProxyType(values),
        )

    def resolve_call(
        self,
        call: ActionCall,
        route_values: Mapping[str, Any] | object | None = None,
    ) -> ActionResult:
        """Resolve *call* against its own controller class."""
        return self.resolve(call.controller, call, route_values)

    def _controller_info(self, controller_type: type) -> ControllerRouteInfo:
        info = ControllerRouteInfo(
            controller_name=controller_route_name(
                controller_type.__name__, self._config.controller_suffix
            ),
            area_name=area_of(controller_type),
        )
        logger.debug(
            "Cached route metadata for %s (controller=%r, area=%r)",
            controller_type.__qualname__,
            info.controller_name,
            info.area_name,
        )
        return info


def action_parameter_names(controller_type: type, action: str) -> tuple[str, ...]:
    """Declared parameter names of *action*, without ``self``/``cls`` or ``*args``/``**kwargs``."""
    raw = inspect.getattr_static(controller_type, action)
    bound_first = True
    if isinstance(raw, staticmethod):
        func = raw.__func__
        bound_first = False
    elif isinstance(raw, classmethod):
        func = raw.__func__
    else:
        func = raw

    parameters = list(inspect.signature(func).parameters.values())
    if bound_first and parameters:
        parameters = parameters[1:]

    names = tuple(
        p.name
        for p in parameters
        if p.kind not in (inspect.Parameter.VAR_POSITIONAL, inspect.Parameter.VAR_KEYWORD)
    )
    logger.debug("Cached parameters for %s.%s: %s", controller_type.__qualname__, action, names)
    return names


def _bind_arguments(
    controller_type: type,
    call: ActionCall,
    parameter_names: tuple[str, ...],
) -> list[tuple[str, Any]]:
    """Pair each argument with its parameter name, in declaration order."""
    if call.kind is CallKind.NAMED and len(call.positional) > len(parameter_names):
        raise ActionCallError(
            controller_type,
            f"{call.action}() takes {len(parameter_names)} argument(s) "
            f"but {len(call.positional)} were given",
        )

    bound: dict[str, Any] = dict(zip(parameter_names, call.positional, strict=False))
    for name, value in call.named:
        if name not in parameter_names:
            raise ActionCallError(
                controller_type, f"{call.action}() has no parameter named {name!r}"
            )
        if name in bound:
            raise ActionCallError(
                controller_type, f"{call.action}() got multiple values for {name!r}"
            )
        bound[name] = value

    return [(name, bound[name]) for name in parameter_names if name in bound]


# Shared cache for callers that do not manage their own.
default_cache = RouteMetadataCache()
_default_resolver = ActionResolver(default_cache)


def get_route_values(
    controller_type: type,
    call: ActionCall,
    route_values: Mapping[str, Any] | object | None = None,
) -> ActionResult:
    """Resolve *call* with the shared ``default_cache``."""
    return _default_resolver.resolve(controller_type, call, route_values)
