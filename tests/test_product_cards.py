import pytest

from product_feed.catalogue.product_cards import (
    EMPTY,
    ERROR,
    LIST,
    SPINNER,
    ProductCardGenerator,
    render_product_list,
    render_text,
)
from product_feed.catalogue.state_manager import LoadStatus, ProductListState
from product_feed.integrations.response_wrappers import decode_product_response


@pytest.fixture
def loaded_state(feed_bytes):
    state = ProductListState()
    state.products = list(decode_product_response(feed_bytes).products)
    state.status_message = "Products fetched successfully"
    state.status = LoadStatus.LOADED
    return state


@pytest.mark.parametrize("status", [LoadStatus.IDLE, LoadStatus.LOADING])
def test_idle_and_loading_render_spinner(status):
    state = ProductListState()
    state.status = status

    view = render_product_list(state)

    assert view.kind == SPINNER
    assert view.cards == []


def test_error_renders_error_message():
    state = ProductListState()
    state.status = LoadStatus.ERROR
    state.error_message = "Failed to load products (HTTP 500)."

    view = render_product_list(state)

    assert view.kind == ERROR
    assert view.message == "Failed to load products (HTTP 500)."
    assert render_text(view) == "Error: Failed to load products (HTTP 500)."


def test_loaded_without_products_renders_empty():
    state = ProductListState()
    state.status = LoadStatus.LOADED

    view = render_product_list(state)

    assert view.kind == EMPTY
    assert render_text(view) == "No products available."


def test_loaded_renders_one_card_per_product(loaded_state):
    view = render_product_list(loaded_state, ProductCardGenerator({"USD": "$", "EUR": "€"}))

    assert view.kind == LIST
    assert [c.name for c in view.cards] == ["Wireless Headphones", "Smart Watch"]

    headphones, watch = view.cards
    assert headphones.product_id == "1"
    assert headphones.price == "$129.99"
    assert headphones.stock_label == "In stock"
    assert headphones.rating == "★ 4.6"
    assert watch.price == "€199.00"
    assert watch.stock_label == "Out of stock"

    data = view.to_dict()
    assert data["kind"] == "list"
    assert data["cards"][0]["image_url"] == "https://images.example.com/headphones.jpg"


def test_unknown_currency_uses_code_prefix():
    generator = ProductCardGenerator({"usd": "$"})

    assert generator.format_price(1234.5, "CHF") == "CHF 1,234.50"
    assert generator.format_price(3, "usd") == "$3.00"


def test_render_text_lists_products(loaded_state):
    text = render_text(render_product_list(loaded_state))

    lines = text.splitlines()
    assert lines[0].startswith("Wireless Headphones  $129.99")
    assert "[Out of stock]" in text
    assert "    Tracks steps" in lines
