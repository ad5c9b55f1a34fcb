"""kida integration — expose the builders and action URLs to templates.

Registers helpers on a kida ``Environment`` the same way filters and
globals are added to any environment::

    from kida import Environment
    from wren.templating import register_helpers

    env = Environment()
    register_helpers(env)

Then in a template::

    <a href="{{ url_action(WidgetsController, 'edit', widget.id) }}">Edit</a>
    {{ wren.InputCheckbox().bind(form, "remember") }}
    <div class="{{ ['card', active and 'card-active'] | css_classes }}"></div>
"""

from collections.abc import Iterable
from types import SimpleNamespace
from typing import Any

from kida import Environment

from wren import bootstrap, html
from wren.actions.call import ActionCall
from wren.actions.resolver import ActionResolver, default_cache
from wren.actions.urls import ActionUrlBuilder


def css_classes(names: Iterable[Any] | None) -> str:
    """Join truthy class names, dropping duplicates but keeping order.

    Example:
        {{ ["btn", primary and "btn-primary", "btn"] | css_classes }}
        → "btn btn-primary"   (when primary is truthy)
    """
    seen: list[str] = []
    for value in names or ():
        if not value:
            continue
        for name in str(value).split():
            if name not in seen:
                seen.append(name)
    return " ".join(seen)


def builder_namespace() -> SimpleNamespace:
    """All element and preset classes, keyed by class name."""
    members: dict[str, Any] = {name: getattr(html, name) for name in html.__all__}
    members.update(
        {
            name: value
            for name, value in vars(bootstrap).items()
            if isinstance(value, type) and value.__module__ == bootstrap.__name__
        }
    )
    return SimpleNamespace(**members)


BUILTIN_FILTERS: dict[str, Any] = {
    "css_classes": css_classes,
}


def register_helpers(
    env: Environment,
    resolver: ActionResolver | None = None,
    url_builder: ActionUrlBuilder | None = None,
) -> Environment:
    """Add wren's filters and globals to *env* and return it.

    Globals: ``url_action`` (resolve an action and build its URL) and
    ``wren`` (namespace of element classes). Filters: ``css_classes``.
    """
    resolver = resolver or ActionResolver(default_cache)
    url_builder = url_builder or ActionUrlBuilder(resolver.config)

    def url_action(controller: type, action: str, *args: Any, **kwargs: Any) -> str:
        call = ActionCall.of(controller, action, *args, **kwargs)
        return url_builder.build(resolver.resolve(controller, call))

    env.update_filters(BUILTIN_FILTERS)
    env.add_global("url_action", url_action)
    env.add_global("wren", builder_namespace())
    return env
