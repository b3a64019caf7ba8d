"""Contracts for the host platform collaborators the pricing core consumes."""
from __future__ import annotations

from typing import Any, Optional, Protocol, Sequence

from dynamic_pricing.engine.cart.models import CartLine


class CatalogService(Protocol):
    def get_price(self, product_id: str) -> Optional[float]:
        """Return the product's current price, or ``None`` when it is not found."""
        ...


class Cart(Protocol):
    def is_empty(self) -> bool:
        ...

    def supports_enumeration(self) -> bool:
        ...

    def get_lines(self) -> Sequence[CartLine]:
        """Return the live line objects; callers may mutate them in place."""
        ...


class Eligibility(Protocol):
    def check(self, actor: Any) -> bool:
        ...


class ExecutionContext(Protocol):
    def is_back_office_context(self) -> bool:
        ...

    def is_async_data_request(self) -> bool:
        ...
