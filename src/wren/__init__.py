"""wren — fluent HTML builders and action route helpers.

Builds HTML elements with a chainable API and turns controller action
calls into route values and URLs, plus a few null-safe sequence helpers.

Basic usage::

    from wren import ActionCall, ActionResolver, InputCheckbox

    InputCheckbox().render()   # <input type="checkbox" />

    resolver = ActionResolver()
    result = resolver.resolve(WidgetsController, ActionCall.of(WidgetsController, "edit", 42))
    result.controller_name     # "Widgets"
"""

from importlib import import_module

__version__ = "0.1.0-dev"

# Public name -> defining module, resolved on first access.
_LAZY_IMPORTS: dict[str, str] = {
    # Actions
    "ActionCall": "wren.actions.call",
    "ActionResolver": "wren.actions.resolver",
    "ActionResult": "wren.actions.resolver",
    "ActionUrlBuilder": "wren.actions.urls",
    "Computed": "wren.actions.call",
    "RouteMetadataCache": "wren.actions.cache",
    "action_call": "wren.actions.call",
    "get_route_values": "wren.actions.resolver",
    "route_area": "wren.actions.areas",
    # Elements
    "Anchor": "wren.html.forms",
    "Button": "wren.html.forms",
    "Div": "wren.html.container",
    "Element": "wren.html.element",
    "Form": "wren.html.forms",
    "InputCheckbox": "wren.html.inputs",
    "InputEmail": "wren.html.inputs",
    "InputHidden": "wren.html.inputs",
    "InputPassword": "wren.html.inputs",
    "InputText": "wren.html.inputs",
    "Label": "wren.html.forms",
    "Select": "wren.html.forms",
    "Span": "wren.html.container",
    "TextArea": "wren.html.forms",
    # Configuration and errors
    "ActionCallError": "wren.errors",
    "ConfigurationError": "wren.errors",
    "InvalidArgumentError": "wren.errors",
    "InvalidAttributeError": "wren.errors",
    "WrenConfig": "wren.config",
    "WrenError": "wren.errors",
}

__all__ = sorted(_LAZY_IMPORTS)


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import wren`` fast while providing a clean top-level API.
    """
    module = _LAZY_IMPORTS.get(name)
    if module is not None:
        return getattr(import_module(module), name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
