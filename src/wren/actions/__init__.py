"""Action helpers — resolve controller actions into route values.

Describe a call explicitly, resolve it, and hand the result to URL
generation::

    from wren.actions import ActionCall, ActionResolver, ActionUrlBuilder

    resolver = ActionResolver()
    result = resolver.resolve(WidgetsController, ActionCall.of(WidgetsController, "edit", 42))
    result.controller_name     # "Widgets"
    dict(result.route_values)  # {"area": "", "id": 42}
    ActionUrlBuilder().build(result)  # "/Widgets/edit/42"
"""

from wren.actions.areas import area_of, route_area
from wren.actions.cache import ControllerRouteInfo, RouteMetadataCache
from wren.actions.call import ActionCall, CallKind, Computed, action_call
from wren.actions.resolver import (
    ActionResolver,
    ActionResult,
    controller_route_name,
    default_cache,
    get_route_values,
    object_route_values,
)
from wren.actions.urls import ActionUrlBuilder

__all__ = [
    "ActionCall",
    "ActionResolver",
    "ActionResult",
    "ActionUrlBuilder",
    "CallKind",
    "Computed",
    "ControllerRouteInfo",
    "RouteMetadataCache",
    "action_call",
    "area_of",
    "controller_route_name",
    "default_cache",
    "get_route_values",
    "object_route_values",
    "route_area",
]
