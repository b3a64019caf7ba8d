from __future__ import annotations

from collections import defaultdict
from typing import Any, Callable, Dict, List, Optional, Tuple

from dynamic_pricing.app.hooks import BEFORE_TOTALS_EVENT, LINE_ADDED_EVENT
from dynamic_pricing.engine.cart.models import CartLine, LineProduct
from dynamic_pricing.engine.cart.protocols import CatalogService


class InMemoryCatalog:
    def __init__(self, prices: Optional[Dict[str, float]] = None) -> None:
        self._prices: Dict[str, float] = dict(prices or {})

    def put(self, product_id: str, price: float) -> None:
        self._prices[product_id] = price

    def get_price(self, product_id: str) -> Optional[float]:
        return self._prices.get(product_id)


class StaticExecutionContext:
    def __init__(self, *, back_office: bool = False, async_request: bool = False) -> None:
        self.back_office = back_office
        self.async_request = async_request

    def is_back_office_context(self) -> bool:
        return self.back_office

    def is_async_data_request(self) -> bool:
        return self.async_request


class HookDispatcher:
    """Priority-ordered callbacks per event; ties keep registration order.

    Filter callbacks receive the extra arguments followed by the value.
    """

    def __init__(self) -> None:
        self._callbacks: Dict[str, List[Tuple[int, int, Callable[..., Any]]]] = defaultdict(list)
        self._sequence = 0

    def add(self, event: str, callback: Callable[..., Any], priority: int) -> None:
        self._callbacks[event].append((priority, self._sequence, callback))
        self._sequence += 1

    def _ordered(self, event: str) -> List[Callable[..., Any]]:
        return [callback for _, _, callback in sorted(self._callbacks.get(event, []), key=lambda item: item[:2])]

    def apply_filters(self, event: str, value: Any, *args: Any) -> Any:
        for callback in self._ordered(event):
            value = callback(*args, value)
        return value

    def do_action(self, event: str, *args: Any) -> None:
        for callback in self._ordered(event):
            callback(*args)


class InMemoryCart:
    def __init__(self, products: CatalogService, dispatcher: HookDispatcher) -> None:
        self.products = products
        self.dispatcher = dispatcher
        self._lines: Dict[str, CartLine] = {}

    def _line_key(self, product_id: str) -> str:
        return f"line-{product_id}"

    def add(self, product_id: str, quantity: int = 1, *, price: Optional[float] = None) -> CartLine:
        line_key = self._line_key(product_id)
        existing = self._lines.get(line_key)
        if existing is not None:
            existing.quantity += quantity
            return existing
        live_price = price if price is not None else self.products.get_price(product_id)
        if live_price is None:
            raise ValueError(f"unknown product {product_id}")
        line = CartLine(
            line_key=line_key,
            product_id=product_id,
            quantity=quantity,
            product=LineProduct(product_id=product_id, price=live_price),
        )
        line = self.dispatcher.apply_filters(LINE_ADDED_EVENT, line, product_id)
        self._lines[line_key] = line
        return line

    def set_quantity(self, line_key: str, quantity: int) -> None:
        if quantity < 1:
            self.remove(line_key)
            return
        self._lines[line_key].quantity = quantity

    def remove(self, line_key: str) -> None:
        self._lines.pop(line_key, None)

    def is_empty(self) -> bool:
        return not self._lines

    def supports_enumeration(self) -> bool:
        return True

    def get_lines(self) -> List[CartLine]:
        return list(self._lines.values())

    def calculate_totals(self) -> float:
        self.dispatcher.do_action(BEFORE_TOTALS_EVENT, self)
        return round(sum(line.final_unit_price * line.quantity for line in self._lines.values()), 2)
