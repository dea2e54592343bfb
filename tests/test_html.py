from bootpane.views.html import add_css_class, anchor, tag


def test_add_css_class_sets_missing_class() -> None:
    assert add_css_class({}, "nav") == {"class": "nav"}


def test_add_css_class_appends_once() -> None:
    options = {"class": "nav-tabs"}

    assert add_css_class(options, "nav") == {"class": "nav-tabs nav"}
    assert add_css_class({"class": "nav nav-tabs"}, "nav") == {"class": "nav nav-tabs"}
    assert options == {"class": "nav-tabs"}


def test_tag_keeps_inner_html_and_escapes_attributes() -> None:
    html = tag("div", "<b>bold</b>", {"title": "a<b"})

    assert "<b>bold</b>" in html
    assert 'title="a<b"' not in html
    assert html.startswith("<div ")
    assert html.endswith("</div>")


def test_tag_drops_none_and_false_attributes() -> None:
    html = tag("div", "x", {"hidden": True, "id": None, "data-open": False})

    assert html == "<div hidden>x</div>"


def test_anchor_puts_href_first() -> None:
    assert anchor("Go", "#pane", {"data-toggle": "tab"}) == '<a href="#pane" data-toggle="tab">Go</a>'
