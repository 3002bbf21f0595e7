"""Pytest fixtures for product feed tests."""

import json

import pytest


@pytest.fixture
def feed_payload():
    return {
        "statusCode": 200,
        "message": "Products fetched successfully",
        "products": [
            {
                "id": 1,
                "name": "Wireless Headphones",
                "description": "Noise cancelling",
                "price": 129.99,
                "currency": "USD",
                "inStock": True,
                "rating": 4.6,
                "imageUrl": "https://images.example.com/headphones.jpg",
            },
            {
                "id": 2,
                "name": "Smart Watch",
                "description": "Tracks steps",
                "price": 199,
                "currency": "EUR",
                "inStock": False,
                "rating": 4,
                "imageUrl": "https://images.example.com/watch.jpg",
            },
        ],
    }


@pytest.fixture
def feed_bytes(feed_payload):
    return json.dumps(feed_payload).encode("utf-8")


@pytest.fixture
def feed_file(tmp_path, feed_bytes):
    path = tmp_path / "products.json"
    path.write_bytes(feed_bytes)
    return path


@pytest.fixture(autouse=True)
def clear_feed_env(monkeypatch):
    for name in ("PRODUCT_FEED_URL", "PRODUCT_FEED_TIMEOUT", "PRODUCT_FEED_MODE", "PRODUCT_FEED_LOCAL_PATH"):
        monkeypatch.delenv(name, raising=False)
