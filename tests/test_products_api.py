import httpx
import pytest
from fastapi.testclient import TestClient

from product_feed.api.dependencies import get_product_source, get_product_state
from product_feed.api.main import app
from product_feed.catalogue.state_manager import ProductListState
from product_feed.integrations.clients.mocks.local_products import LocalProductFeedClient
from product_feed.integrations.clients.real_http.product_feed import ProductFeedClient


@pytest.fixture
def state():
    return ProductListState()


@pytest.fixture
def client(state, feed_file):
    app.dependency_overrides[get_product_state] = lambda: state
    app.dependency_overrides[get_product_source] = lambda: LocalProductFeedClient(path=feed_file)
    yield TestClient(app)
    app.dependency_overrides.clear()


def test_health():
    response = TestClient(app).get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_list_products_loads_on_first_request(client):
    response = client.get("/api/v1/products")

    assert response.status_code == 200
    body = response.json()
    assert body["kind"] == "list"
    assert body["message"] == "Products fetched successfully"
    assert [c["name"] for c in body["cards"]] == ["Wireless Headphones", "Smart Watch"]
    assert body["cards"][0]["price"] == "$129.99"


def test_get_single_product(client):
    response = client.get("/api/v1/products/2")

    assert response.status_code == 200
    assert response.json()["stock_label"] == "Out of stock"


def test_unknown_product_is_404(client):
    response = client.get("/api/v1/products/404")
    assert response.status_code == 404


def test_refresh_reports_error_view(state, feed_file):
    def handler(request):
        return httpx.Response(500, text="down")

    app.dependency_overrides[get_product_state] = lambda: state
    app.dependency_overrides[get_product_source] = lambda: ProductFeedClient(
        url="https://feed.example.com/products.json", transport=httpx.MockTransport(handler)
    )
    try:
        client = TestClient(app)
        response = client.post("/api/v1/products/refresh")
        assert response.status_code == 200
        assert response.json() == {"kind": "error", "message": "Failed to load products (HTTP 500).", "cards": []}

        not_loaded = client.get("/api/v1/products/1")
        assert not_loaded.status_code == 404
        assert not_loaded.json()["detail"] == "Failed to load products (HTTP 500)."
    finally:
        app.dependency_overrides.clear()


def test_refresh_with_empty_feed_renders_empty(state, tmp_path):
    path = tmp_path / "empty.json"
    path.write_text('{"statusCode": 200, "message": "none", "products": []}', encoding="utf-8")
    app.dependency_overrides[get_product_state] = lambda: state
    app.dependency_overrides[get_product_source] = lambda: LocalProductFeedClient(path=path)
    try:
        response = TestClient(app).post("/api/v1/products/refresh")
        assert response.json()["kind"] == "empty"
    finally:
        app.dependency_overrides.clear()


def test_single_product_when_feed_unreadable_is_404(state, tmp_path):
    app.dependency_overrides[get_product_state] = lambda: state
    app.dependency_overrides[get_product_source] = lambda: LocalProductFeedClient(path=tmp_path / "missing.json")
    try:
        response = TestClient(app).get("/api/v1/products/1")
        assert response.status_code == 404
        assert "connection" in response.json()["detail"].lower()
    finally:
        app.dependency_overrides.clear()
