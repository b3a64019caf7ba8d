from __future__ import annotations

from dynamic_pricing.engine.cart.models import CartLine
from dynamic_pricing.engine.cart.protocols import CatalogService
from dynamic_pricing.util.logging import get_logger, log_event


class OriginalPriceRecorder:
    """Captures a line's undiscounted unit price when the line is created.

    Discounts are always computed from this recorded price, so repeated
    recalculation never compounds a discount that was already applied.
    """

    def __init__(self, catalog: CatalogService) -> None:
        self.catalog = catalog
        self.logger = get_logger(self.__class__.__name__)

    def capture_original_price(self, product_id: str, line: CartLine) -> CartLine:
        price = self.catalog.get_price(product_id)
        if price is None:
            log_event(
                self.logger,
                "original_price_missing",
                product_id=product_id,
                line_key=line.line_key,
            )
            return line
        line.original_unit_price = float(price)
        return line
