from htpy import Node, a, body, div, h1, head, header, html, main, meta, title

from bootpane.views.assets import View


def render_page(*, title_text: str, content: Node, view: View) -> Node:
    return html(lang="en")[
        head[
            meta(charset="utf-8"),
            title[title_text],
            meta(name="viewport", content="width=device-width, initial-scale=1"),
            *view.render_head(),
        ],
        body[
            header(class_="navbar")[h1[a(href="/v1/tabs")["bootpane"]]],
            div(class_="container")[main(class_="main-content")[content]],
            *view.render_body_end(),
        ],
    ]
