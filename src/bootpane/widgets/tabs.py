"""Bootstrap tabs widget.

Renders a ``<ul>`` header strip and the matching ``tab-content`` panes:

    rendered = render_tabs(
        TabsConfig(
            items=[
                TabItem(header="One", content="Anim pariatur cliche..."),
                TabItem(header="Two", content="...", options={"id": "myveryownID"}),
                TabItem(
                    header="Dropdown",
                    items=(TabItem(header="@Dropdown1", content="..."),),
                ),
            ],
            options={"class": "nav-tabs"},
        ),
        view=view,
    )

Header links and pane ids are generated from the root id in traversal
order, so both fragments always agree on which pane a link opens.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Mapping, NamedTuple, Sequence

from markupsafe import Markup

from bootpane.exceptions import MissingContentError, MissingHeaderError
from bootpane.views.assets import View
from bootpane.views.html import add_css_class, anchor, tag

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TabItem:
    header: str | None = None
    content: str | None = None
    header_options: Mapping[str, Any] = field(default_factory=dict)
    options: Mapping[str, Any] = field(default_factory=dict)
    items: tuple["TabItem", ...] | None = None

    def __post_init__(self) -> None:
        if self.items is not None:
            object.__setattr__(self, "items", tuple(_coerce(item) for item in self.items))

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "TabItem":
        items = data.get("items")
        return cls(
            header=data.get("header"),
            content=data.get("content"),
            header_options=data.get("headerOptions") or data.get("header_options") or {},
            options=data.get("options") or {},
            items=None if items is None else tuple(items),
        )


def _coerce(item: "TabItem | Mapping[str, Any]") -> TabItem:
    if isinstance(item, TabItem):
        return item
    return TabItem.from_mapping(item)


@dataclass
class RenderContext:
    id_prefix: str
    index: int = 0

    @property
    def first(self) -> bool:
        return self.index == 0

    def take_id(self, explicit: str | None = None) -> str:
        tab_id = explicit if explicit is not None else f"{self.id_prefix}{self.index}"
        self.index += 1
        return tab_id


class RenderedTabs(NamedTuple):
    headers: Markup
    contents: Markup

    def __html__(self) -> str:
        return self.headers + Markup("\n") + self.contents

    def __str__(self) -> str:
        return self.__html__()


def _check_headers(items: Sequence[TabItem]) -> None:
    for item in items:
        if item.header is None:
            raise MissingHeaderError()
        if item.items is not None:
            _check_headers(item.items)


def _check_contents(items: Sequence[TabItem]) -> None:
    for item in items:
        if item.items is not None:
            _check_contents(item.items)
        elif item.content is None:
            raise MissingContentError()


def render_headers(
    items: Sequence[TabItem],
    options: Mapping[str, Any],
    context: RenderContext,
    *,
    view: View,
) -> Markup:
    headers: list[Markup] = []

    for item in items:
        if item.header is None:
            raise MissingHeaderError()
        header_options = dict(item.header_options)
        if context.first:
            header_options = add_css_class(header_options, "active")

        if item.items is not None:
            view.register_asset_bundle("bootstrap/dropdown")
            header_options = add_css_class(header_options, "dropdown")
            toggle = anchor(
                Markup(item.header) + Markup(' <b class="caret"></b>'),
                "#",
                {"class": "dropdown-toggle", "data-toggle": "dropdown"},
            )
            submenu = render_headers(item.items, {"class": "dropdown-menu"}, context, view=view)
            headers.append(tag("li", toggle + submenu, header_options))
        else:
            tab_id = context.take_id(item.options.get("id"))
            headers.append(tag("li", anchor(item.header, f"#{tab_id}", {"data-toggle": "tab"}), header_options))

    return tag("ul", Markup("\n").join(headers), options)


def render_contents(items: Sequence[TabItem], context: RenderContext) -> Markup:
    contents: list[Markup] = []

    for item in items:
        if item.content is None and item.items is None:
            raise MissingContentError()

        if item.items is not None:
            contents.append(render_contents(item.items, context))
        else:
            options = add_css_class(item.options, "tab-pane")
            if context.first:
                options = add_css_class(options, "active")
            options["id"] = context.take_id(options.pop("id", None))
            contents.append(tag("div", item.content, options))

    return Markup("\n").join(contents)


@dataclass
class TabsConfig:
    items: Sequence[TabItem | Mapping[str, Any]] = ()
    options: Mapping[str, Any] = field(default_factory=dict)
    # None skips the plugin init call, {} calls it without arguments.
    client_options: dict[str, Any] | None = field(default_factory=dict)
    client_events: dict[str, str] = field(default_factory=dict)


def render_tabs(config: TabsConfig, *, view: View) -> RenderedTabs:
    items = [_coerce(item) for item in config.items]
    # Both checks run before anything touches the view.
    _check_headers(items)
    _check_contents(items)

    options = add_css_class(config.options, "nav")
    if not options.get("id"):
        options["id"] = view.next_widget_id()
    widget_id = str(options["id"])
    logger.debug(f"Rendering tabs {widget_id} with {len(items)} items")

    id_prefix = f"{widget_id}-tab"
    headers = render_headers(items, options, RenderContext(id_prefix), view=view)
    panes = render_contents(items, RenderContext(id_prefix))
    contents = tag("div", Markup("\n") + panes + Markup("\n"), {"class": "tab-content"})

    view.register_plugin(
        "tab",
        widget_id,
        client_options=config.client_options,
        client_events=config.client_events,
    )
    return RenderedTabs(headers=headers, contents=contents)
