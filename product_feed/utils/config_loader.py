"""
Configuration loader for the product feed
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Dict, Literal, Optional
from urllib.parse import urlparse

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path(__file__).parent.parent.parent / "config" / "product_feed.yml"
DEFAULT_TIMEOUT_SECONDS = 15.0


def validate_feed_url(url: Optional[str]) -> str:
    """Strip the feed URL and require https. An empty URL means "not configured"."""
    value = (url or "").strip()
    if value and urlparse(value).scheme.lower() != "https":
        raise ValueError(f"Product feed URL must use https: {value}")
    return value


class FeedSettings(BaseModel):
    """Where and how the feed document is fetched"""

    url: str = ""
    timeout_seconds: float = Field(default=DEFAULT_TIMEOUT_SECONDS, gt=0.0, le=120.0)
    user_agent: str = "product-feed/1.0"
    mode: Literal["real", "mock"] = "real"
    local_path: Optional[str] = None

    @field_validator("url")
    @classmethod
    def _require_https(cls, value: str) -> str:
        return validate_feed_url(value)


class DisplaySettings(BaseModel):
    """Rendering options"""

    currency_symbols: Dict[str, str] = Field(
        default_factory=lambda: {"USD": "$", "EUR": "€", "GBP": "£", "JPY": "¥", "INR": "₹"}
    )


class FeedConfig(BaseModel):
    feed: FeedSettings = Field(default_factory=FeedSettings)
    display: DisplaySettings = Field(default_factory=DisplaySettings)


def load_feed_config(config_path: Optional[Path] = None, apply_env: bool = True) -> FeedConfig:
    """
    Load and validate the feed configuration from a YAML file

    Args:
        config_path: Path to config file. Defaults to config/product_feed.yml
        apply_env: Apply PRODUCT_FEED_* environment overrides on top of the file

    Returns:
        Validated FeedConfig object

    Raises:
        FileNotFoundError: If config file doesn't exist
        ValidationError: If config doesn't match schema
    """
    if config_path is None:
        config_path = DEFAULT_CONFIG_PATH

    if not config_path.exists():
        raise FileNotFoundError(f"Feed config file not found: {config_path}")

    with open(config_path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    if apply_env:
        data = _apply_env_overrides(data)

    try:
        cfg = FeedConfig(**data)
        logger.info("Successfully loaded feed config from %s", config_path)
        return cfg
    except ValidationError as e:
        logger.error("Feed config validation failed: %s", e)
        raise


def _apply_env_overrides(data: dict) -> dict:
    feed = dict(data.get("feed") or {})
    overrides = {
        "url": os.getenv("PRODUCT_FEED_URL"),
        "timeout_seconds": os.getenv("PRODUCT_FEED_TIMEOUT"),
        "mode": os.getenv("PRODUCT_FEED_MODE"),
        "local_path": os.getenv("PRODUCT_FEED_LOCAL_PATH"),
    }
    for key, value in overrides.items():
        if value is not None and value.strip():
            feed[key] = value.strip().lower() if key == "mode" else value.strip()
    return {**data, "feed": feed}
