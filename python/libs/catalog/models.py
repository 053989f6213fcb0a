"""Pydantic models shared by the catalog library and the product service."""

from __future__ import annotations

import math
from typing import Any

from pydantic import BaseModel, field_serializer, field_validator

# JSON has no NaN/Infinity literals, so non-finite prices travel as strings.
_PRICE_SENTINELS = {
    "NaN": math.nan,
    "Infinity": math.inf,
    "-Infinity": -math.inf,
}


def encode_price(price: float) -> float | str:
    if math.isnan(price):
        return "NaN"
    if math.isinf(price):
        return "Infinity" if price > 0 else "-Infinity"
    return price


def decode_price(value: Any) -> Any:
    """Map a price sentinel string back to its float value.

    Anything that is not a sentinel is returned untouched for pydantic's
    regular float validation.
    """
    if isinstance(value, str) and value in _PRICE_SENTINELS:
        return _PRICE_SENTINELS[value]
    return value


class ProductBase(BaseModel):
    name: str | None = None
    price: float = 0.0

    @field_validator("price", mode="before")
    @classmethod
    def parse_price(cls, value: Any) -> Any:
        return decode_price(value)

    @field_serializer("price", when_used="json")
    def serialize_price(self, price: float) -> float | str:
        return encode_price(price)


class Product(ProductBase):
    id: int | None = None


class HealthResponse(BaseModel):
    status: str
    service: str
