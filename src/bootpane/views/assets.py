"""Per-page registry of asset bundles and widget init scripts."""

import json
import logging
from dataclasses import dataclass, field
from typing import Any

from htpy import Node, link, script
from markupsafe import Markup

from bootpane.config.settings import Settings
from bootpane.exceptions import UnknownAssetBundleError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AssetBundle:
    name: str
    css: tuple[str, ...] = ()
    js: tuple[str, ...] = ()
    depends: tuple[str, ...] = ()


def default_bundles(settings: Settings) -> dict[str, AssetBundle]:
    bundles = [
        AssetBundle(name="jquery", js=(settings.jquery_url,)),
        AssetBundle(name="bootstrap", css=(settings.bootstrap_css_url,)),
        AssetBundle(
            name="bootstrap/responsive",
            css=(settings.bootstrap_responsive_css_url,),
            depends=("bootstrap",),
        ),
        AssetBundle(name="bootstrap/plugin", js=(settings.bootstrap_js_url,), depends=("jquery", "bootstrap")),
        AssetBundle(name="bootstrap/tab", depends=("bootstrap/plugin",)),
        AssetBundle(name="bootstrap/dropdown", depends=("bootstrap/plugin",)),
    ]
    return {bundle.name: bundle for bundle in bundles}


@dataclass
class View:
    settings: Settings
    bundles: dict[str, AssetBundle] = field(default_factory=dict)
    registered: list[str] = field(default_factory=list)
    scripts: list[str] = field(default_factory=list)
    widget_counter: int = 0

    def __post_init__(self) -> None:
        if not self.bundles:
            self.bundles = default_bundles(self.settings)

    def next_widget_id(self) -> str:
        widget_id = f"{self.settings.widget_id_prefix}{self.widget_counter}"
        self.widget_counter += 1
        return widget_id

    def register_asset_bundle(self, name: str) -> AssetBundle:
        bundle = self.bundles.get(name)
        if bundle is None:
            raise UnknownAssetBundleError(name)
        if name in self.registered:
            return bundle

        for dependency in bundle.depends:
            self.register_asset_bundle(dependency)
        self.registered.append(name)
        logger.debug(f"Registered asset bundle {name}")
        return bundle

    def register_js(self, js: str) -> None:
        if js not in self.scripts:
            self.scripts.append(js)

    def register_plugin(
        self,
        name: str,
        widget_id: str,
        *,
        client_options: dict[str, Any] | None = None,
        client_events: dict[str, str] | None = None,
    ) -> None:
        """Register the Bootstrap plugin ``name`` and its init script for ``widget_id``.

        ``client_options=None`` skips the init call; an empty dict calls the
        plugin without arguments.
        """
        self.register_asset_bundle("bootstrap/responsive" if self.settings.responsive else "bootstrap")
        self.register_asset_bundle(f"bootstrap/{name}")

        if client_options is not None:
            arguments = json.dumps(client_options) if client_options else ""
            self.register_js(f"jQuery('#{widget_id}').{name}({arguments});")

        for event, handler in (client_events or {}).items():
            self.register_js(f"jQuery('#{widget_id}').on('{event}', {handler});")

    @property
    def css_files(self) -> list[str]:
        return [url for name in self.registered for url in self.bundles[name].css]

    @property
    def js_files(self) -> list[str]:
        return [url for name in self.registered for url in self.bundles[name].js]

    def render_head(self) -> list[Node]:
        return [link(rel="stylesheet", href=url) for url in self.css_files]

    def render_body_end(self) -> list[Node]:
        nodes: list[Node] = [script(src=url) for url in self.js_files]
        if self.scripts:
            body = "\n".join(self.scripts)
            nodes.append(script[Markup(f"jQuery(document).ready(function () {{\n{body}\n}});")])
        return nodes
