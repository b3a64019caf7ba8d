from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, field_validator


class LineProduct(BaseModel):
    """The cart line's own copy of the product data.

    The host copies the catalog product into each line, so writing ``price``
    here changes what this cart charges and nothing else.
    """

    product_id: str
    price: float

    @field_validator("price")
    @classmethod
    def non_negative_price(cls, value: float) -> float:
        if not 0 <= value < float("inf"):
            raise ValueError("price must be a finite number >= 0")
        return value


class CartLine(BaseModel):
    line_key: str
    product_id: str
    quantity: int
    product: LineProduct
    original_unit_price: Optional[float] = None

    @field_validator("line_key", "product_id")
    @classmethod
    def required_stripped(cls, value: str) -> str:
        if not value or not value.strip():
            raise ValueError("value is required")
        return value.strip()

    @field_validator("quantity")
    @classmethod
    def positive_quantity(cls, value: int) -> int:
        if value < 1:
            raise ValueError("quantity must be >= 1")
        return value

    @property
    def final_unit_price(self) -> float:
        return self.product.price
