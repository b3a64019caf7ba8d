from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional

from dynamic_pricing.app.models.config import PricingConfig
from dynamic_pricing.engine.cart.models import CartLine
from dynamic_pricing.engine.cart.protocols import Cart, Eligibility, ExecutionContext
from dynamic_pricing.engine.pricing.rules import AppliedRule, DiscountRules, compute_price
from dynamic_pricing.util.logging import get_logger, log_event


class SkipReason(str, Enum):
    DISALLOWED_CONTEXT = "disallowed_context"
    INCOMPATIBLE_CART = "incompatible_cart"
    EMPTY_CART = "empty_cart"


class PriceSource(str, Enum):
    RECORDED = "recorded"
    LIVE_FALLBACK = "live_fallback"


@dataclass
class RecalculationResult:
    skipped: Optional[SkipReason] = None
    lines_priced: int = 0
    fallback_lines: int = 0
    applied: Dict[str, AppliedRule] = field(default_factory=dict)


def resolve_base_price(line: CartLine) -> tuple[float, PriceSource]:
    if line.original_unit_price is not None:
        return line.original_unit_price, PriceSource.RECORDED
    # The live snapshot may already carry a price written by an earlier pass
    # or by another price writer.
    return line.product.price, PriceSource.LIVE_FALLBACK


def _enumerate_lines(cart: Any) -> Optional[List[CartLine]]:
    if not callable(getattr(cart, "is_empty", None)) or not callable(getattr(cart, "get_lines", None)):
        return None
    supports_enumeration = getattr(cart, "supports_enumeration", None)
    if callable(supports_enumeration) and not supports_enumeration():
        return None
    return list(cart.get_lines())


class PricingEngine:
    def __init__(self, rules: DiscountRules, context: ExecutionContext) -> None:
        self.rules = rules
        self.context = context
        self.logger = get_logger(self.__class__.__name__)

    @classmethod
    def from_config(cls, config: PricingConfig, context: ExecutionContext) -> "PricingEngine":
        return cls(DiscountRules.from_config(config), context)

    def _skip(self, reason: SkipReason) -> RecalculationResult:
        log_event(self.logger, "pricing_recalculation_skipped", reason=reason.value)
        return RecalculationResult(skipped=reason)

    def _context_allowed(self) -> bool:
        if not self.context.is_back_office_context():
            return True
        return self.context.is_async_data_request()

    def recalculate(self, cart: Cart, eligibility: Eligibility, actor: Any = None) -> RecalculationResult:
        """Write the final unit price of every line in ``cart``.

        At most one rule applies per line: the eligibility discount first,
        otherwise the quantity discount, otherwise the base price. Lines are
        mutated in place and nothing is raised for the anticipated failure
        modes; the returned result says what happened.
        """
        if not self._context_allowed():
            return self._skip(SkipReason.DISALLOWED_CONTEXT)
        lines = _enumerate_lines(cart)
        if lines is None:
            return self._skip(SkipReason.INCOMPATIBLE_CART)
        if cart.is_empty():
            return self._skip(SkipReason.EMPTY_CART)

        eligible = bool(eligibility.check(actor))
        result = RecalculationResult()
        for line in lines:
            base_price, source = resolve_base_price(line)
            if source is PriceSource.LIVE_FALLBACK:
                result.fallback_lines += 1
            final_price, rule = compute_price(base_price, line.quantity, eligible, self.rules)
            line.product.price = final_price
            result.applied[line.line_key] = rule
            result.lines_priced += 1

        log_event(
            self.logger,
            "pricing_recalculated",
            lines_priced=result.lines_priced,
            fallback_lines=result.fallback_lines,
            eligible=eligible,
        )
        return result
