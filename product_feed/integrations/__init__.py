"""
Integrations layer.
This package contains all code used to read the product feed:
- contracts/: the decoded document shape and the ProductSource interface
- clients/: the real HTTP client and the local file client
- response_wrappers: feed errors and the JSON decoder

Key rule:
- The state holder MUST NOT talk to httpx directly; it goes through a ProductSource.
"""

from .contracts.interfaces import ProductSource
from .contracts.products import Product, ProductResponse
from .response_wrappers import (
    FeedHTTPError,
    FeedRequestError,
    IntegrationResponseError,
    ProductFeedError,
    decode_product_response,
)

__all__ = [
    "Product", "ProductResponse", "ProductSource",
    "FeedHTTPError", "FeedRequestError", "IntegrationResponseError", "ProductFeedError",
    "decode_product_response",
]
