from __future__ import annotations

import logging
from typing import Any, Dict, Optional, Union

from pydantic import ValidationError

from product_feed.integrations.contracts.products import ProductResponse

logger = logging.getLogger(__name__)


class ProductFeedError(Exception):
    """Base class for failures talking to the product feed."""


class FeedHTTPError(ProductFeedError):
    def __init__(self, status_code: int, url: str, body: str = "") -> None:
        super().__init__(f"Product feed returned HTTP {status_code} for {url}")
        self.status_code = status_code
        self.url = url
        self.body = body


class FeedRequestError(ProductFeedError):
    def __init__(self, message: str, url: str) -> None:
        super().__init__(message)
        self.url = url


class IntegrationResponseError(ValueError):
    def __init__(self, message: str, *, payload: Optional[Union[Dict[str, Any], str]] = None) -> None:
        super().__init__(message)
        self.payload = payload or {}


def decode_product_response(raw: Union[bytes, str]) -> ProductResponse:
    """Decode the feed document into a ProductResponse.

    Raises IntegrationResponseError when the document is not JSON or when a
    required field is absent or mistyped.
    """
    if isinstance(raw, bytes):
        try:
            text = raw.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise IntegrationResponseError("Product feed is not valid UTF-8.", payload=_preview(raw)) from exc
    else:
        text = raw

    if not text.strip():
        raise IntegrationResponseError("Product feed document is empty.")

    try:
        response = ProductResponse.model_validate_json(text)
    except ValidationError as exc:
        raise IntegrationResponseError(
            f"Product feed validation failed: {_summarize(exc)}",
            payload=_preview(text),
        ) from exc

    logger.debug("Decoded product feed: status_code=%s products=%d", response.status_code, len(response.products))
    return response


def _summarize(exc: ValidationError) -> str:
    parts = []
    for error in exc.errors():
        location = ".".join(str(item) for item in error.get("loc", ())) or "<document>"
        parts.append(f"{location}: {error.get('msg')}")
    return "; ".join(parts)


def _preview(raw: Union[bytes, str], limit: int = 500) -> str:
    if isinstance(raw, bytes):
        raw = raw.decode("utf-8", errors="replace")
    return raw[:limit]
