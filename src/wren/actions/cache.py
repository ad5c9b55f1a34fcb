"""Route-metadata cache.

Resolving an action needs the controller's route name, its area, and
the action's declared parameter names. All three are fixed for the
lifetime of a class, so they are computed once and cached.

The route name depends on the controller suffix being stripped, so
entries are keyed by ``(controller_type, suffix)``; resolvers with
different ``WrenConfig.controller_suffix`` values can share one cache
without seeing each other's names.

The cache is an explicit object owned by whoever builds the resolver;
tests create their own for isolation. Entries are append-only and never
evicted, so its size is bounded by the number of controller classes.

Thread safety:
    Reads are plain dict lookups. Inserts take a Lock and re-check
    before computing (double-checked locking), so concurrent first
    resolutions of the same controller or action compute it once.
"""

import threading
from collections.abc import Callable
from dataclasses import dataclass, field

DEFAULT_SUFFIX = "Controller"


@dataclass(frozen=True, slots=True)
class ControllerRouteInfo:
    """Cached routing facts for one controller class.

    ``actions`` maps an action name to its ordered parameter names and
    is only ever added to by ``RouteMetadataCache``.
    """

    controller_name: str
    area_name: str
    actions: dict[str, tuple[str, ...]] = field(default_factory=dict)


class RouteMetadataCache:
    """Process- or test-scoped store of ``ControllerRouteInfo`` by controller class."""

    __slots__ = ("_controllers", "_lock")

    def __init__(self) -> None:
        self._controllers: dict[tuple[type, str], ControllerRouteInfo] = {}
        self._lock = threading.Lock()

    def controller(
        self,
        controller_type: type,
        factory: Callable[[type], ControllerRouteInfo],
        suffix: str = DEFAULT_SUFFIX,
    ) -> ControllerRouteInfo:
        """Return the cached info for *controller_type*, computing it if absent."""
        key = (controller_type, suffix)
        info = self._controllers.get(key)
        if info is not None:
            return info

        with self._lock:
            info = self._controllers.get(key)
            if info is None:
                info = factory(controller_type)
                self._controllers[key] = info
            return info

    def action_parameters(
        self,
        controller_type: type,
        action: str,
        factory: Callable[[type, str], tuple[str, ...]],
        suffix: str = DEFAULT_SUFFIX,
    ) -> tuple[str, ...]:
        """Return the cached parameter names of *action*, computing them if absent.

        Raises ``LookupError`` if *controller_type* has no cached info yet;
        call ``controller()`` first.
        """
        info = self._controllers.get((controller_type, suffix))
        if info is None:
            msg = f"No route metadata cached for {controller_type.__name__}; call controller() first."
            raise LookupError(msg)

        names = info.actions.get(action)
        if names is not None:
            return names

        with self._lock:
            names = info.actions.get(action)
            if names is None:
                names = tuple(factory(controller_type, action))
                info.actions[action] = names
            return names

    def get(self, controller_type: type, suffix: str = DEFAULT_SUFFIX) -> ControllerRouteInfo | None:
        return self._controllers.get((controller_type, suffix))

    def clear(self) -> None:
        """Drop every entry. Intended for tests."""
        with self._lock:
            self._controllers.clear()

    def __contains__(self, controller_type: object) -> bool:
        return any(cached is controller_type for cached, _ in tuple(self._controllers))

    def __len__(self) -> int:
        return len(self._controllers)
