#!/usr/bin/env python3
"""
Fetch the product feed once and print the rendered list.

Uses config/product_feed.yml (and PRODUCT_FEED_* env vars) unless --url or
--local is given.
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from dotenv import load_dotenv

load_dotenv()

from product_feed.catalogue import LoadStatus, ProductCardGenerator, ProductListState, render_product_list, render_text
from product_feed.integrations.clients import select_product_source
from product_feed.integrations.clients.mocks.local_products import LocalProductFeedClient
from product_feed.integrations.clients.real_http.product_feed import ProductFeedClient
from product_feed.utils.config_loader import load_feed_config

logger = logging.getLogger("show_products")


def setup_logging(verbose: bool = False) -> None:
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(level=level, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")


def build_source(args, cfg):
    if args.local:
        return LocalProductFeedClient(path=args.local)
    if args.url:
        return ProductFeedClient(url=args.url, timeout_seconds=cfg.feed.timeout_seconds, user_agent=cfg.feed.user_agent)
    return select_product_source(cfg)


async def run(args) -> int:
    cfg = load_feed_config(Path(args.config) if args.config else None)
    try:
        source = build_source(args, cfg)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    state = ProductListState()
    if args.verbose:
        state.subscribe(lambda s: logger.debug("State -> %s", s.status.value))

    await state.load(source)
    view = render_product_list(state, ProductCardGenerator(cfg.display.currency_symbols))

    if args.json:
        print(json.dumps(view.to_dict(), indent=2, ensure_ascii=False))
    else:
        print(render_text(view))

    return 1 if state.status == LoadStatus.ERROR else 0


def main() -> int:
    parser = argparse.ArgumentParser(description="Fetch and print the product feed")
    parser.add_argument("--url", help="Feed URL (overrides config)")
    parser.add_argument("--local", help="Read the feed from a local JSON file instead")
    parser.add_argument("--config", help="Path to product_feed.yml")
    parser.add_argument("--json", action="store_true", help="Print the rendered view as JSON")
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging")
    args = parser.parse_args()

    setup_logging(args.verbose)
    return asyncio.run(run(args))


if __name__ == "__main__":
    sys.exit(main())
