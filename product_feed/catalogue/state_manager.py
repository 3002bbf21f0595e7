"""
Observable state for the product list
"""

from __future__ import annotations

import asyncio
import logging
from enum import Enum
from typing import Callable, List, Optional

from product_feed.error_handler import ErrorHandler
from product_feed.integrations.contracts.interfaces import ProductSource
from product_feed.integrations.contracts.products import Product

logger = logging.getLogger(__name__)

Listener = Callable[["ProductListState"], None]


class LoadStatus(str, Enum):
    IDLE = "IDLE"
    LOADING = "LOADING"
    LOADED = "LOADED"
    ERROR = "ERROR"


class ProductListState:
    def __init__(self, error_handler: Optional[ErrorHandler] = None):
        self.error_handler = error_handler or ErrorHandler()
        self.status = LoadStatus.IDLE
        self.products: List[Product] = []
        self.status_message: Optional[str] = None
        self.error_message: Optional[str] = None
        self._listeners: List[Listener] = []

    @property
    def is_loading(self) -> bool:
        return self.status == LoadStatus.LOADING

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a listener called on every state transition. Returns an unsubscribe callable."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def get_product(self, product_id) -> Optional[Product]:
        wanted = str(product_id)
        for product in self.products:
            if str(product.product_id) == wanted:
                return product
        return None

    async def load(self, source: ProductSource) -> None:
        """Fetch the feed through `source` and move through loading -> loaded / error.

        A cancelled load restores the status it started from and re-raises.
        """
        previous_status = self.status
        previous_error = self.error_message
        self.status = LoadStatus.LOADING
        self.error_message = None
        self._notify()

        try:
            response = await source.fetch_products()
        except asyncio.CancelledError:
            self.status = LoadStatus.IDLE if previous_status == LoadStatus.LOADING else previous_status
            self.error_message = previous_error
            logger.info("Product load from %s was cancelled", source.location)
            self._notify()
            raise
        except Exception as exc:
            self.products = []
            self.status_message = None
            self.error_message = self.error_handler.describe(exc)
            self.status = LoadStatus.ERROR
            logger.info("Product load failed from %s", source.location)
        else:
            self.products = list(response.products)
            self.status_message = response.message
            self.status = LoadStatus.LOADED
            logger.info("Loaded %d products from %s", len(self.products), source.location)

        self._notify()

    def _notify(self) -> None:
        for listener in list(self._listeners):
            try:
                listener(self)
            except Exception:
                logger.exception("Product list listener failed")
