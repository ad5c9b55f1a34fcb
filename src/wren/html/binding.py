"""Model binding — derive name, id, value, and validation attributes.

Inputs and labels can be bound to a property of a model instance. The
element asks a ``MetadataProvider`` for a ``ModelBinding`` and copies
the result into its attributes. Hosts with their own metadata system
(an ORM, pydantic, a form library) plug in a provider; the default
reads dataclass field metadata::

    @dataclass
    class Signup:
        email: str = field(default="", metadata={"display": "Email", "required": True})

    InputEmail().bind(Signup(email="a@b.c"), "email").render()
    # -> <input type="email" name="email" id="email" value="a@b.c"
    #           data-val="true" data-val-required="The Email field is required." />

Supported metadata keys: ``display``, ``required``, ``max_length``,
``min_length``, ``pattern``, ``range`` (a ``(min, max)`` pair).
"""

import dataclasses
import logging
import typing
from collections.abc import Mapping
from dataclasses import dataclass, field
from types import NoneType, UnionType
from typing import Any, Protocol, runtime_checkable

from wren.config import DEFAULT_CONFIG, WrenConfig
from wren.errors import InvalidArgumentError

logger = logging.getLogger("wren.html")


@dataclass(frozen=True, slots=True)
class ModelBinding:
    """Everything an element needs to render a bound model property."""

    name: str
    id: str
    value: Any
    display_name: str
    validation_attributes: dict[str, str] = field(default_factory=dict)


@runtime_checkable
class MetadataProvider(Protocol):
    """Produces a ``ModelBinding`` for a property path on a model."""

    def bind(self, model: Any, accessor: str) -> ModelBinding: ...


def html_id(name: str) -> str:
    """Turn a field name into an id: ``address.city`` -> ``address_city``."""
    return name.replace(".", "_").replace("[", "_").replace("]", "_")


class DataclassMetadataProvider:
    """Default provider backed by ``dataclasses.fields()`` metadata.

    Non-dataclass models still bind: the value comes from attribute
    access and the display name falls back to the attribute name.
    """

    __slots__ = ("_config",)

    def __init__(self, config: WrenConfig | None = None) -> None:
        self._config = config or DEFAULT_CONFIG

    def bind(self, model: Any, accessor: str) -> ModelBinding:
        if not accessor or not isinstance(accessor, str):
            msg = f"Property accessor must be a non-empty dotted path, got {accessor!r}"
            raise InvalidArgumentError(msg)

        value, owner, leaf = _walk(model, accessor)
        meta_field = _dataclass_field(owner, leaf)
        if meta_field is None:
            logger.debug("No dataclass metadata for %s.%s", getattr(owner, "__name__", owner), leaf)
            metadata: Mapping[str, Any] = {}
        else:
            metadata = meta_field.metadata

        display = str(metadata.get("display", leaf))
        validation: dict[str, str] = {}
        if self._config.validation_attributes:
            annotation = _field_annotation(owner, leaf)
            validation = validation_attributes(display, metadata, annotation)

        return ModelBinding(
            name=accessor,
            id=html_id(accessor),
            value=value,
            display_name=display,
            validation_attributes=validation,
        )


def validation_attributes(
    display: str,
    metadata: Mapping[str, Any],
    annotation: Any = None,
) -> dict[str, str]:
    """Build unobtrusive-validation ``data-val-*`` attributes.

    Returns an empty dict when the field carries no rules.
    """
    attributes: dict[str, str] = {}

    if metadata.get("required"):
        attributes["data-val-required"] = f"The {display} field is required."

    max_length = metadata.get("max_length")
    min_length = metadata.get("min_length")
    if max_length is not None or min_length is not None:
        if max_length is not None and min_length is not None:
            message = (
                f"The field {display} must be a string with a minimum length of "
                f"{min_length} and a maximum length of {max_length}."
            )
        elif max_length is not None:
            message = f"The field {display} must be a string with a maximum length of {max_length}."
        else:
            message = f"The field {display} must be a string with a minimum length of {min_length}."
        attributes["data-val-length"] = message
        if max_length is not None:
            attributes["data-val-length-max"] = str(max_length)
        if min_length is not None:
            attributes["data-val-length-min"] = str(min_length)

    pattern = metadata.get("pattern")
    if pattern is not None:
        attributes["data-val-regex"] = (
            f"The field {display} must match the regular expression '{pattern}'."
        )
        attributes["data-val-regex-pattern"] = str(pattern)

    bounds = metadata.get("range")
    if bounds is not None:
        low, high = bounds
        attributes["data-val-range"] = f"The field {display} must be between {low} and {high}."
        attributes["data-val-range-min"] = str(low)
        attributes["data-val-range-max"] = str(high)

    if _is_numeric(annotation):
        attributes["data-val-number"] = f"The field {display} must be a number."

    if attributes:
        return {"data-val": "true", **attributes}
    return attributes


def _walk(model: Any, accessor: str) -> tuple[Any, type | None, str]:
    """Follow *accessor* through *model*.

    Returns ``(value, owner_type, leaf_name)``. A ``None`` along the path
    makes the value ``None``; the owner type is then taken from the
    annotations of the enclosing dataclass where available.
    """
    segments = accessor.split(".")
    value: Any = model
    owner: type | None = type(model)

    for index, segment in enumerate(segments):
        if index:
            owner = type(value) if value is not None else _unwrap_optional(_field_annotation(owner, segments[index - 1]))
        if value is None:
            continue
        if not hasattr(value, segment):
            msg = f"{type(value).__name__} has no property {segment!r} (accessor {accessor!r})"
            raise InvalidArgumentError(msg)
        value = getattr(value, segment)

    return value, owner, segments[-1]


def _dataclass_field(owner: Any, name: str) -> dataclasses.Field[Any] | None:
    if not isinstance(owner, type) or not dataclasses.is_dataclass(owner):
        return None
    for f in dataclasses.fields(owner):
        if f.name == name:
            return f
    return None


def _field_annotation(owner: Any, name: str) -> Any:
    if not isinstance(owner, type):
        return None
    try:
        hints = typing.get_type_hints(owner)
    except (NameError, TypeError):
        return None
    return hints.get(name)


def _unwrap_optional(annotation: Any) -> type | None:
    """``Address | None`` -> ``Address``; anything unresolvable -> None."""
    if isinstance(annotation, type):
        return annotation
    if isinstance(annotation, UnionType) or typing.get_origin(annotation) is typing.Union:
        members = [a for a in typing.get_args(annotation) if a is not NoneType]
        if len(members) == 1 and isinstance(members[0], type):
            return members[0]
    return None


def _is_numeric(annotation: Any) -> bool:
    target = _unwrap_optional(annotation)
    return target in (int, float)
