import logging
from typing import Any

from fastapi import APIRouter, Depends
from htpy.starlette import HtpyResponse
from pydantic import BaseModel, ConfigDict, Field

from bootpane.dependencies import get_view
from bootpane.views.assets import View
from bootpane.views.pages.demo import render_demo_page
from bootpane.widgets.tabs import TabItem, TabsConfig, render_tabs

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/v1", tags=["tabs"])


class TabItemRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    header: str | None = None
    header_options: dict[str, Any] = Field(default_factory=dict, alias="headerOptions")
    content: str | None = None
    options: dict[str, Any] = Field(default_factory=dict)
    items: list["TabItemRequest"] | None = None

    def to_item(self) -> TabItem:
        return TabItem(
            header=self.header,
            content=self.content,
            header_options=self.header_options,
            options=self.options,
            items=None if self.items is None else tuple(item.to_item() for item in self.items),
        )


class RenderTabsRequest(BaseModel):
    model_config = ConfigDict(extra="ignore")

    items: list[TabItemRequest] = Field(default_factory=list)
    options: dict[str, Any] = Field(default_factory=dict)
    client_options: dict[str, Any] | None = Field(default_factory=dict)
    client_events: dict[str, str] = Field(default_factory=dict)


class RenderTabsResponse(BaseModel):
    headers: str
    contents: str
    css: list[str]
    js: list[str]
    scripts: list[str]


@router.get("/tabs")
async def tabs_page(view: View = Depends(get_view)) -> Any:
    return HtpyResponse(render_demo_page(view=view))


@router.post("/tabs/render", response_model=RenderTabsResponse)
async def render_tabs_fragment(body: RenderTabsRequest, view: View = Depends(get_view)) -> RenderTabsResponse:
    config = TabsConfig(
        items=[item.to_item() for item in body.items],
        options=body.options,
        client_options=body.client_options,
        client_events=body.client_events,
    )
    rendered = render_tabs(config, view=view)
    logger.info(f"Rendered {len(body.items)} tabs, {len(view.registered)} asset bundles")
    return RenderTabsResponse(
        headers=str(rendered.headers),
        contents=str(rendered.contents),
        css=view.css_files,
        js=view.js_files,
        scripts=view.scripts,
    )
