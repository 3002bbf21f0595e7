from .product_cards import ProductCard, ProductCardGenerator, ProductListView, render_product_list, render_text
from .state_manager import LoadStatus, ProductListState

__all__ = [
    "LoadStatus", "ProductListState",
    "ProductCard", "ProductCardGenerator", "ProductListView", "render_product_list", "render_text",
]
