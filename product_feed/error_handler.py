"""Error handling helpers for the product feed load flow."""

import logging

from product_feed.integrations.response_wrappers import (
    FeedHTTPError,
    FeedRequestError,
    IntegrationResponseError,
)

logger = logging.getLogger(__name__)

GENERIC_ERROR_MESSAGE = "Something went wrong while loading products. Please try again later."


class ErrorHandler:
    def describe(self, exc: Exception) -> str:
        """Map an exception raised during a load to the message shown to the user."""
        if isinstance(exc, FeedHTTPError):
            logger.warning("Product feed request failed: HTTP %s", exc.status_code)
            return f"Failed to load products (HTTP {exc.status_code})."
        if isinstance(exc, FeedRequestError):
            logger.warning("Product feed unreachable: %s", exc)
            return "Could not reach the product server. Check your connection and try again."
        if isinstance(exc, IntegrationResponseError):
            logger.warning("Product feed could not be decoded: %s", exc)
            return "The product data could not be read."
        logger.error("Unhandled exception while loading products: %s", exc, exc_info=True)
        return GENERIC_ERROR_MESSAGE
