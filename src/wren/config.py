"""Library configuration.

WrenConfig is a frozen dataclass — immutable after creation, passed
explicitly to the resolver, URL builder, and binding provider.
"""

from dataclasses import dataclass

from wren.errors import ConfigurationError


@dataclass(frozen=True, slots=True)
class WrenConfig:
    """Configuration for route resolution, URL generation, and binding.

    All fields have sensible defaults. Override what you need::

        config = WrenConfig(area_key="section", url_pattern="/{controller}/{action}")
    """

    # Routing
    controller_suffix: str = "Controller"
    area_key: str = "area"
    default_action: str = "index"
    url_pattern: str = "/{area?}/{controller}/{action}/{id?}"

    # Model binding: emit data-val-* attributes from field metadata
    validation_attributes: bool = True

    def __post_init__(self) -> None:
        if not self.area_key:
            msg = "WrenConfig.area_key must be a non-empty string."
            raise ConfigurationError(msg)
        for placeholder in ("{controller}", "{action}"):
            if placeholder not in self.url_pattern:
                msg = f"WrenConfig.url_pattern {self.url_pattern!r} must contain {placeholder}."
                raise ConfigurationError(msg)


DEFAULT_CONFIG = WrenConfig()
