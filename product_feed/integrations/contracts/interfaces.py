from abc import ABC, abstractmethod

from product_feed.integrations.contracts.products import ProductResponse
from product_feed.integrations.response_wrappers import decode_product_response


# ---------------------------------------------------------------------------
# Abstract product source interface
# ---------------------------------------------------------------------------

class ProductSource(ABC):
    """Every product feed client (real HTTP or local mock) must implement this interface."""

    @property
    @abstractmethod
    def location(self) -> str:
        """Return the URL or path the feed is read from."""

    @abstractmethod
    async def fetch_raw(self) -> bytes:
        """Return the raw feed document."""

    async def fetch_products(self) -> ProductResponse:
        """Fetch the feed document and decode it into the envelope contract."""
        raw = await self.fetch_raw()
        return decode_product_response(raw)
