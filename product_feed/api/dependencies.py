import logging
from functools import lru_cache

from dotenv import load_dotenv

from product_feed.catalogue.product_cards import ProductCardGenerator
from product_feed.catalogue.state_manager import ProductListState
from product_feed.integrations.clients import select_product_source
from product_feed.integrations.contracts.interfaces import ProductSource
from product_feed.utils.config_loader import FeedConfig, load_feed_config

load_dotenv()

logger = logging.getLogger(__name__)

_product_state = ProductListState()


@lru_cache(maxsize=1)
def get_feed_config() -> FeedConfig:
    return load_feed_config()


def get_product_source() -> ProductSource:
    return select_product_source(get_feed_config())


def get_product_state() -> ProductListState:
    return _product_state


def get_card_generator() -> ProductCardGenerator:
    return ProductCardGenerator(get_feed_config().display.currency_symbols)
