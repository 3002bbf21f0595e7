"""
Product feed contracts.

Defines the shape of the product feed document:
- ProductResponse: the envelope (statusCode, message, products)
- Product: one catalogue entry (id, name, description, price, currency,
  inStock, rating, imageUrl)

Both the real HTTP client and the local mock client return these models, so
the state holder and the renderer never deal with raw dicts.

Typing is strict: "19.99" is not a price and "true" is not a stock flag.
Integers are accepted wherever a number is expected.
"""

from __future__ import annotations

from typing import List, Union

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class Product(BaseModel):
    model_config = ConfigDict(strict=True, populate_by_name=True, extra="ignore", frozen=True)

    product_id: Union[int, str] = Field(validation_alias=AliasChoices("id", "product_id", "productId"))
    name: str
    description: str
    price: float
    currency: str
    in_stock: bool = Field(validation_alias=AliasChoices("inStock", "in_stock"))
    rating: float
    image_url: str = Field(validation_alias=AliasChoices("imageUrl", "image_url"))


class ProductResponse(BaseModel):
    model_config = ConfigDict(strict=True, populate_by_name=True, extra="ignore", frozen=True)

    status_code: int = Field(validation_alias=AliasChoices("statusCode", "status_code"))
    message: str
    products: List[Product]
