from htpy import Node, div, h2, p

from bootpane.views.assets import View
from bootpane.views.layout import render_page
from bootpane.widgets.tabs import TabItem, TabsConfig, render_tabs

DEMO_ITEMS = [
    TabItem(header="Home", content="<p>Raw denim you probably haven't heard of them jean shorts.</p>"),
    TabItem(
        header="Profile",
        content="<p>Food truck fixie locavore, accusamus mcsweeney's marfa.</p>",
        options={"id": "profile"},
    ),
    TabItem(
        header="Dropdown",
        items=(
            TabItem(header="@fat", content="<p>Etsy mixtape wayfarers, ethical wes anderson tofu.</p>"),
            TabItem(header="@mdo", content="<p>Trust fund seitan letterpress, keytar raw denim.</p>"),
        ),
    ),
]


def render_demo_page(*, view: View) -> Node:
    tabs = render_tabs(TabsConfig(items=DEMO_ITEMS, options={"class": "nav-tabs"}), view=view)
    return render_page(
        title_text="Tabs - bootpane",
        content=div(class_="demo")[
            h2["Tabs"],
            p["Click a tab header to switch panes."],
            tabs.headers,
            tabs.contents,
        ],
        view=view,
    )
