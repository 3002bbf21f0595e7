"""
Product Feed HTTP Client.

Purpose:
- Issues one HTTPS GET to the configured feed URL
- Returns the raw document, or fails on any non-200 status / transport error

Usage:
- Selected by product_feed.integrations.clients.select_product_source
- Called by ProductListState.load via the ProductSource interface

Important:
- No retries and no caching; one call, one request.
"""

from __future__ import annotations

import logging
import os
from typing import Dict, Optional

import httpx

from product_feed.integrations.contracts.interfaces import ProductSource
from product_feed.integrations.response_wrappers import FeedHTTPError, FeedRequestError
from product_feed.utils.config_loader import DEFAULT_TIMEOUT_SECONDS, validate_feed_url

logger = logging.getLogger(__name__)

DEFAULT_USER_AGENT = "product-feed/1.0"


class ProductFeedClient(ProductSource):
    def __init__(
        self,
        url: Optional[str] = None,
        timeout_seconds: Optional[float] = None,
        user_agent: Optional[str] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.url = validate_feed_url(url or os.getenv("PRODUCT_FEED_URL", ""))
        self.timeout_seconds = timeout_seconds or _timeout_from_env()
        self.user_agent = user_agent or DEFAULT_USER_AGENT
        self._transport = transport
        if not self.url:
            logger.warning("Product feed URL is not set.")

    @property
    def location(self) -> str:
        return self.url

    async def fetch_raw(self) -> bytes:
        if not self.url:
            raise ValueError("PRODUCT_FEED_URL is not configured.")

        headers: Dict[str, str] = {"Accept": "application/json", "User-Agent": self.user_agent}

        logger.info("Fetching product feed from %s", self.url)
        try:
            async with httpx.AsyncClient(timeout=self.timeout_seconds, transport=self._transport) as client:
                response = await client.get(self.url, headers=headers)
        except httpx.RequestError as e:
            logger.error("Request error fetching product feed from %s: %s", self.url, e)
            raise FeedRequestError(f"Could not reach the product feed: {e}", url=self.url) from e

        if response.status_code != 200:
            logger.error("HTTP error from product feed: %s %s", response.status_code, response.text[:200])
            raise FeedHTTPError(response.status_code, self.url, body=response.text)

        logger.info("Received product feed: status=%s bytes=%d", response.status_code, len(response.content))
        return response.content


def _timeout_from_env() -> float:
    raw = os.getenv("PRODUCT_FEED_TIMEOUT", "").strip()
    if not raw:
        return DEFAULT_TIMEOUT_SECONDS
    try:
        value = float(raw)
    except ValueError:
        value = 0.0
    if value <= 0:
        logger.warning("Ignoring invalid PRODUCT_FEED_TIMEOUT=%r; using %s seconds", raw, DEFAULT_TIMEOUT_SECONDS)
        return DEFAULT_TIMEOUT_SECONDS
    return value
