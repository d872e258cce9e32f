"""
HTTP tests for the item endpoints.

An application is created per test over a temporary data file and
driven through FastAPI's TestClient.  The tests check status codes,
image URL projection in responses and that error bodies never expose
server-side details.
"""

from pathlib import Path

from fastapi.testclient import TestClient

from catalog_api.app.main import create_app

from conftest import SAMPLE_ITEMS, make_settings, read_items, write_items


def test_list_items_projects_image_urls(client: TestClient) -> None:
    response = client.get("/api/items")

    assert response.status_code == 200
    data = response.json()
    assert [item["id"] for item in data] == [1, 2, 5]
    assert data[0]["imgUrl"] == "http://testserver/images/classic.jpg"
    assert data[1]["imgUrl"] == "http://testserver/images/urban.jpg"
    assert data[0]["inStock"] is True


def test_projection_is_not_persisted(client: TestClient, data_file: Path) -> None:
    client.get("/api/items")
    client.put("/api/items/1", json={"color": "Cream"})
    assert read_items(data_file)[0]["imgUrl"] == "/images/classic.jpg"


def test_configured_base_url_is_used(data_file: Path) -> None:
    app = create_app(make_settings(data_file, base_url="https://cdn.example.com/"))
    with TestClient(app) as client:
        data = client.get("/api/items/1").json()
    assert data["imgUrl"] == "https://cdn.example.com/images/classic.jpg"


def test_get_item(client: TestClient) -> None:
    response = client.get("/api/items/2")
    assert response.status_code == 200
    assert response.json()["name"] == "Urban Street Graphic"


def test_get_missing_item_returns_404(client: TestClient) -> None:
    response = client.get("/api/items/99")
    assert response.status_code == 404
    assert response.json() == {"detail": "Item not found"}


def test_non_integer_id_returns_400(client: TestClient) -> None:
    assert client.get("/api/items/abc").status_code == 400


def test_create_item(client: TestClient, data_file: Path) -> None:
    response = client.post(
        "/api/items",
        json={"name": "Tee", "brand": "X", "description": "desc", "price": 10, "category": "Basic"},
    )

    assert response.status_code == 201
    body = response.json()
    assert body["id"] == 6
    assert body["inStock"] is True
    assert body["sizes"] == ["M", "L"]
    assert body["imgUrl"] == "http://testserver/images/default.jpg"
    assert read_items(data_file)[-1]["imgUrl"] == "/images/default.jpg"


def test_create_item_ignores_client_id_and_stock(client: TestClient) -> None:
    response = client.post(
        "/api/items",
        json={"id": 1, "inStock": False, "name": "Tee", "brand": "X", "description": "d", "price": 5},
    )
    assert response.status_code == 201
    assert response.json()["id"] == 6
    assert response.json()["inStock"] is True


def test_create_item_missing_field_returns_400(client: TestClient, data_file: Path) -> None:
    before = data_file.read_text(encoding="utf-8")
    response = client.post("/api/items", json={"name": "Tee", "brand": "X", "price": 10})
    assert response.status_code == 400
    assert "description" in response.json()["detail"]
    assert data_file.read_text(encoding="utf-8") == before


def test_create_item_bad_type_returns_400(client: TestClient) -> None:
    response = client.post(
        "/api/items",
        json={"name": "Tee", "brand": "X", "description": "d", "price": "ten"},
    )
    assert response.status_code == 400
    assert response.json() == {"detail": "Invalid request data"}


def test_create_item_overflowing_price_returns_400(client: TestClient, data_file: Path) -> None:
    before = data_file.read_text(encoding="utf-8")
    response = client.post(
        "/api/items",
        content=b'{"name": "Tee", "brand": "X", "description": "d", "price": 1e400}',
        headers={"Content-Type": "application/json"},
    )
    assert response.status_code == 400
    assert data_file.read_text(encoding="utf-8") == before
    assert "Infinity" not in data_file.read_text(encoding="utf-8")


def test_update_item_overflowing_price_returns_400(client: TestClient, data_file: Path) -> None:
    before = data_file.read_text(encoding="utf-8")
    response = client.put(
        "/api/items/1",
        content=b'{"price": 1e400}',
        headers={"Content-Type": "application/json"},
    )
    assert response.status_code == 400
    assert data_file.read_text(encoding="utf-8") == before


def test_create_item_keeps_empty_sizes(client: TestClient, data_file: Path) -> None:
    response = client.post(
        "/api/items",
        json={"name": "Tee", "brand": "X", "description": "d", "price": 10, "sizes": []},
    )
    assert response.status_code == 201
    assert response.json()["sizes"] == []
    assert read_items(data_file)[-1]["sizes"] == []


def test_update_item(client: TestClient) -> None:
    response = client.put("/api/items/1", json={"price": 9.99, "id": 7})

    assert response.status_code == 200
    body = response.json()
    assert body["id"] == 1
    assert body["price"] == 9.99
    assert body["name"] == SAMPLE_ITEMS[0]["name"]
    assert body["sizes"] == SAMPLE_ITEMS[0]["sizes"]
    assert client.get("/api/items/1").json()["price"] == 9.99


def test_update_missing_item_returns_404(client: TestClient) -> None:
    assert client.put("/api/items/99", json={"price": 1}).status_code == 404


def test_update_with_blank_image_keeps_stored_path(client: TestClient, data_file: Path) -> None:
    response = client.put("/api/items/1", json={"imgUrl": ""})
    assert response.status_code == 200
    assert response.json()["imgUrl"] == "http://testserver/images/classic.jpg"
    assert read_items(data_file)[0]["imgUrl"] == "/images/classic.jpg"


def test_delete_item(client: TestClient) -> None:
    response = client.delete("/api/items/2")

    assert response.status_code == 204
    assert response.content == b""
    assert client.get("/api/items/2").status_code == 404


def test_delete_missing_item_returns_404(client: TestClient) -> None:
    assert client.delete("/api/items/99").status_code == 404


def test_filter_by_category(client: TestClient) -> None:
    response = client.get("/api/items/category/GRAPHIC")
    assert response.status_code == 200
    assert [item["id"] for item in response.json()] == [2]


def test_filter_by_unknown_category_is_empty(client: TestClient) -> None:
    response = client.get("/api/items/category/Hoodies")
    assert response.status_code == 200
    assert response.json() == []


def test_search(client: TestClient) -> None:
    response = client.get("/api/items/search", params={"q": "SHIRT"})
    assert response.status_code == 200
    assert [item["id"] for item in response.json()] == [1, 5]


def test_search_without_query_returns_400(client: TestClient) -> None:
    assert client.get("/api/items/search").status_code == 400
    assert client.get("/api/items/search", params={"q": ""}).status_code == 400


def test_corrupt_data_file_returns_generic_500(client: TestClient, data_file: Path) -> None:
    data_file.write_text("[{broken", encoding="utf-8")

    response = client.get("/api/items")

    assert response.status_code == 500
    assert response.json() == {"detail": "Internal server error"}
    assert str(data_file) not in response.text


def test_unreadable_store_on_create_returns_500(client: TestClient, data_file: Path) -> None:
    # A directory in place of the data file makes every read fail.
    data_file.unlink()
    data_file.mkdir()
    response = client.post(
        "/api/items", json={"name": "Tee", "brand": "X", "description": "d", "price": 1}
    )
    assert response.status_code == 500
    assert response.json() == {"detail": "Internal server error"}


def test_unexpected_error_returns_generic_500(data_file: Path, monkeypatch) -> None:
    app = create_app(make_settings(data_file))

    def explode():
        raise RuntimeError("secret internals")

    monkeypatch.setattr(app.state.item_service, "list_all", explode)
    with TestClient(app, raise_server_exceptions=False) as client:
        response = client.get("/api/items")
    assert response.status_code == 500
    assert "secret" not in response.text


def test_missing_data_file_is_seeded_on_startup(tmp_path: Path) -> None:
    data_file = tmp_path / "fresh" / "items.json"
    app = create_app(make_settings(data_file))
    with TestClient(app) as client:
        names = [item["name"] for item in client.get("/api/items").json()]
    assert names == ["Classic Cotton Crew", "Urban Street Graphic"]
    assert data_file.exists()


def test_existing_data_file_is_not_reseeded(tmp_path: Path) -> None:
    data_file = tmp_path / "items.json"
    write_items(data_file, [])
    app = create_app(make_settings(data_file))
    with TestClient(app) as client:
        assert client.get("/api/items").json() == []


def test_images_are_served(client: TestClient, data_file: Path) -> None:
    (data_file.parent / "images" / "classic.jpg").write_bytes(b"jpeg-bytes")

    response = client.get("/images/classic.jpg")

    assert response.status_code == 200
    assert response.content == b"jpeg-bytes"
    assert client.get("/images/nope.jpg").status_code == 404


def test_cors_allows_configured_origin(client: TestClient) -> None:
    response = client.get("/api/items", headers={"Origin": "http://shop.example.com"})
    assert response.headers["access-control-allow-origin"] == "http://shop.example.com"


def test_health(client: TestClient) -> None:
    assert client.get("/health").json() == {"status": "ok"}
