"""URL generation from resolved actions.

Fills a conventional route pattern from an ``ActionResult``; route
values the pattern does not consume go to the query string::

    builder = ActionUrlBuilder()   # "/{area?}/{controller}/{action}/{id?}"
    builder.build(result)          # "/Admin/Widgets/edit/42?tab=history"

Pattern syntax: ``/``-separated segments, each either literal text or a
``{name}`` placeholder. ``{name?}`` marks the placeholder optional —
the segment is dropped when the value is missing or empty.
``{controller}`` and ``{action}`` come from the result itself.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any
from urllib.parse import quote, urlencode

from wren.actions.resolver import ActionResult
from wren.config import DEFAULT_CONFIG, WrenConfig
from wren.errors import ConfigurationError, InvalidArgumentError


@dataclass(frozen=True, slots=True)
class PatternSegment:
    """One ``/``-separated piece of a URL pattern."""

    value: str
    is_param: bool = False
    optional: bool = False


def parse_pattern(pattern: str) -> list[PatternSegment]:
    """Parse a URL pattern into segments.

    Examples::

        "/{controller}/{action}"  -> [PatternSegment("controller", is_param=True), ...]
        "/admin/{id?}"            -> [PatternSegment("admin"), PatternSegment("id", True, True)]
    """
    segments: list[PatternSegment] = []
    for part in pattern.strip("/").split("/"):
        if not part:
            continue
        if part.startswith("{") and part.endswith("}"):
            inner = part[1:-1]
            optional = inner.endswith("?")
            name = inner.rstrip("?")
            if not name or "{" in name or "}" in name:
                msg = f"Invalid placeholder {part!r} in URL pattern {pattern!r}."
                raise ConfigurationError(msg)
            segments.append(PatternSegment(value=name, is_param=True, optional=optional))
        elif "{" in part or "}" in part:
            msg = f"Placeholders must fill a whole segment: {part!r} in {pattern!r}."
            raise ConfigurationError(msg)
        else:
            segments.append(PatternSegment(value=part))
    return segments


class ActionUrlBuilder:
    """Builds URLs from ``ActionResult`` objects using one route pattern."""

    __slots__ = ("_config", "_segments")

    def __init__(self, config: WrenConfig | None = None) -> None:
        self._config = config or DEFAULT_CONFIG
        self._segments = parse_pattern(self._config.url_pattern)

    def build(self, result: ActionResult) -> str:
        """Return the path and query string for *result*.

        Raises ``InvalidArgumentError`` if a required placeholder has no
        route value.
        """
        values = dict(result.route_values)
        parts: list[str | None] = []

        for segment in self._segments:
            if not segment.is_param:
                parts.append(segment.value)
                continue
            if segment.value == "controller":
                value: Any = result.controller_name
            elif segment.value == "action":
                value = result.action_name
            else:
                value = values.pop(segment.value, None)

            if value is None or value == "":
                if not segment.optional:
                    msg = f"No route value for {{{segment.value}}} in {self._config.url_pattern!r}."
                    raise InvalidArgumentError(msg)
                parts.append(None)
                continue
            parts.append(quote(_route_text(value), safe=""))

        path_parts = self._elide_default_action(result, parts)
        path = "/" + "/".join(path_parts)

        # An empty area belongs to no segment; do not leak it into the query.
        if values.get(self._config.area_key) == "":
            del values[self._config.area_key]

        query = {key: value for key, value in sorted(values.items()) if value is not None}
        if not query:
            return path
        encoded = urlencode(
            {key: _query_value(value) for key, value in query.items()},
            doseq=True,
            quote_via=quote,
        )
        return f"{path}?{encoded}"

    def _elide_default_action(self, result: ActionResult, parts: list[str | None]) -> list[str]:
        """Drop the default action when nothing follows it in the path."""
        action_index = next(
            (i for i, s in enumerate(self._segments) if s.is_param and s.value == "action"),
            None,
        )
        if (
            action_index is not None
            and result.action_name == self._config.default_action
            and all(p is None for p in parts[action_index + 1 :])
        ):
            parts = parts[:action_index]
        return [p for p in parts if p is not None]


def _route_text(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return str(value.value)
    if hasattr(value, "isoformat"):
        return value.isoformat()
    return str(value)


def _query_value(value: Any) -> Any:
    if isinstance(value, (list, tuple, set, frozenset)):
        return [_route_text(v) for v in value if v is not None]
    return _route_text(value)