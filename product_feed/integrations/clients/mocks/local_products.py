"""
Local Product Feed Client (Mock/Local).

Purpose:
- Acts as a development-time product feed when the remote URL is not reachable.
- Reads the same JSON document from a local file and decodes it with the same contracts.

Swap:
Selected by product_feed.integrations.clients.select_product_source when
PRODUCT_FEED_MODE is "mock" (or no feed URL is configured).
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Union

from product_feed.integrations.contracts.interfaces import ProductSource
from product_feed.integrations.response_wrappers import FeedRequestError

logger = logging.getLogger(__name__)

DEFAULT_PRODUCTS_PATH = Path(__file__).resolve().parents[4] / "data" / "products.json"


class LocalProductFeedClient(ProductSource):
    def __init__(self, path: Optional[Union[str, Path]] = None) -> None:
        self.path = Path(path) if path else DEFAULT_PRODUCTS_PATH

    @property
    def location(self) -> str:
        return str(self.path)

    async def fetch_raw(self) -> bytes:
        logger.info("Reading local product feed from %s", self.path)
        try:
            return self.path.read_bytes()
        except OSError as e:
            logger.error("Could not read local product feed %s: %s", self.path, e)
            raise FeedRequestError(f"Could not read local product feed: {e}", url=str(self.path)) from e
