from fastapi.testclient import TestClient


def test_health(client: TestClient) -> None:
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_tabs_demo_page(client: TestClient) -> None:
    response = client.get("/v1/tabs")

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/html")
    assert 'class="nav-tabs nav"' in response.text
    assert 'href="#profile"' in response.text
    assert 'id="profile"' in response.text
    assert 'class="tab-content"' in response.text
    assert "jQuery('#w0').tab();" in response.text
    assert "bootstrap.min.js" in response.text


def test_render_endpoint_returns_fragments(client: TestClient) -> None:
    response = client.post(
        "/v1/tabs/render",
        json={
            "items": [
                {"header": "One", "content": "A"},
                {"header": "Menu", "headerOptions": {"class": "menu"}, "items": [{"header": "X", "content": "Y"}]},
            ],
            "options": {"id": "t"},
        },
    )

    assert response.status_code == 200, response.text
    data = response.json()
    assert 'href="#t-tab0"' in data["headers"]
    assert 'href="#t-tab1"' in data["headers"]
    assert '<li class="menu dropdown">' in data["headers"]
    assert 'id="t-tab1"' in data["contents"]
    assert data["scripts"] == ["jQuery('#t').tab();"]
    assert data["js"][-1].endswith("bootstrap.min.js")


def test_render_endpoint_missing_header(client: TestClient) -> None:
    response = client.post("/v1/tabs/render", json={"items": [{"content": "A"}], "options": {"id": "t"}})

    assert response.status_code == 422
    assert response.json() == {"detail": "The 'header' option is required."}


def test_render_endpoint_missing_content(client: TestClient) -> None:
    response = client.post("/v1/tabs/render", json={"items": [{"header": "A"}]})

    assert response.status_code == 422
    assert response.json() == {"detail": "The 'content' option is required."}


def test_render_endpoint_empty_items(client: TestClient) -> None:
    response = client.post("/v1/tabs/render", json={"items": []})

    assert response.status_code == 200
    data = response.json()
    assert "<li" not in data["headers"]
    assert data["contents"] == '<div class="tab-content">\n\n</div>'
