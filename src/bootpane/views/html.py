from typing import Any, Mapping

import htpy
from markupsafe import Markup

Attributes = Mapping[str, Any]


def add_css_class(options: Attributes, css_class: str) -> dict[str, Any]:
    """Return a copy of ``options`` whose ``class`` attribute includes ``css_class``."""
    result = dict(options)
    existing = result.get("class")
    if not existing:
        result["class"] = css_class
        return result

    classes = str(existing).split()
    if css_class not in classes:
        result["class"] = f"{existing} {css_class}"
    return result


def _attributes(options: Attributes) -> dict[str, str | bool]:
    attrs: dict[str, str | bool] = {}
    for name, value in options.items():
        if value is None or value is False:
            continue
        attrs[name] = value if value is True else str(value)
    return attrs


def tag(name: str, content: str = "", options: Attributes | None = None) -> Markup:
    """Render an element with trusted inner HTML and escaped attributes."""
    element = getattr(htpy, name)(_attributes(options or {}))
    if content:
        element = element[Markup(content)]
    return Markup(str(element))


def anchor(text: str, href: str, options: Attributes | None = None) -> Markup:
    return tag("a", text, {"href": href, **(options or {})})
