"""
Render product list state into view models (spinner / error / empty / list)
"""
from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List, Optional

from product_feed.catalogue.state_manager import LoadStatus, ProductListState
from product_feed.integrations.contracts.products import Product

SPINNER = "spinner"
ERROR = "error"
EMPTY = "empty"
LIST = "list"

LOADING_MESSAGE = "Loading products..."
EMPTY_MESSAGE = "No products available."


@dataclass(frozen=True)
class ProductCard:
    product_id: str
    name: str
    description: str
    price: str
    stock_label: str
    in_stock: bool
    rating: str
    image_url: str


@dataclass(frozen=True)
class ProductListView:
    kind: str
    message: Optional[str] = None
    cards: List[ProductCard] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


class ProductCardGenerator:
    def __init__(self, currency_symbols: Optional[Dict[str, str]] = None):
        self.currency_symbols = {k.upper(): v for k, v in (currency_symbols or {"USD": "$"}).items()}

    def generate_card(self, product: Product) -> ProductCard:
        """Generate product card"""
        return ProductCard(
            product_id=str(product.product_id),
            name=product.name,
            description=product.description,
            price=self.format_price(product.price, product.currency),
            stock_label="In stock" if product.in_stock else "Out of stock",
            in_stock=product.in_stock,
            rating=f"★ {product.rating:.1f}",
            image_url=product.image_url,
        )

    def format_price(self, amount: float, currency: str) -> str:
        code = (currency or "").strip().upper()
        symbol = self.currency_symbols.get(code)
        if symbol:
            return f"{symbol}{amount:,.2f}"
        return f"{code} {amount:,.2f}".strip()


def render_product_list(
    state: ProductListState, generator: Optional[ProductCardGenerator] = None
) -> ProductListView:
    """Map the current state to what the list screen shows."""
    if state.status in (LoadStatus.IDLE, LoadStatus.LOADING):
        return ProductListView(kind=SPINNER, message=LOADING_MESSAGE)

    if state.status == LoadStatus.ERROR:
        return ProductListView(kind=ERROR, message=state.error_message)

    if not state.products:
        return ProductListView(kind=EMPTY, message=EMPTY_MESSAGE)

    generator = generator or ProductCardGenerator()
    return ProductListView(
        kind=LIST,
        message=state.status_message,
        cards=[generator.generate_card(p) for p in state.products],
    )


def render_text(view: ProductListView) -> str:
    """Plain text rendering for terminals."""
    if view.kind == SPINNER:
        return view.message or LOADING_MESSAGE
    if view.kind == ERROR:
        return f"Error: {view.message}"
    if view.kind == EMPTY:
        return view.message or EMPTY_MESSAGE

    lines: List[str] = []
    for card in view.cards:
        lines.append(f"{card.name}  {card.price}  {card.rating}  [{card.stock_label}]")
        if card.description:
            lines.append(f"    {card.description}")
    return "\n".join(lines)
