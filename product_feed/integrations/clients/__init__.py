"""
Product feed clients.

- real_http/: talks to the remote feed URL over HTTPS
- mocks/: reads the same document from a local file

The selection of mock vs real clients happens here only.
"""

from __future__ import annotations

import logging
from typing import Optional

from product_feed.integrations.clients.mocks.local_products import LocalProductFeedClient
from product_feed.integrations.clients.real_http.product_feed import ProductFeedClient
from product_feed.integrations.contracts.interfaces import ProductSource
from product_feed.utils.config_loader import FeedConfig

logger = logging.getLogger(__name__)


def select_product_source(config: FeedConfig, mode: Optional[str] = None) -> ProductSource:
    """Return the client matching the configured (or overridden) mode."""
    feed = config.feed
    selected = (mode or feed.mode).strip().lower()

    if selected == "real" and not feed.url:
        logger.warning("No product feed URL configured; falling back to the local feed.")
        selected = "mock"

    if selected == "mock":
        return LocalProductFeedClient(path=feed.local_path)

    return ProductFeedClient(url=feed.url, timeout_seconds=feed.timeout_seconds, user_agent=feed.user_agent)
