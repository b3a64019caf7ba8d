from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from dynamic_pricing.app.models.config import PricingConfig


class AppliedRule(str, Enum):
    ELIGIBILITY = "eligibility"
    QUANTITY = "quantity"
    NONE = "none"


@dataclass(frozen=True)
class DiscountRules:
    eligibility_discount_rate: float
    quantity_threshold: int
    quantity_discount_rate: float

    @classmethod
    def from_config(cls, config: PricingConfig) -> "DiscountRules":
        return cls(
            eligibility_discount_rate=config.eligibility_discount_rate,
            quantity_threshold=config.quantity_threshold,
            quantity_discount_rate=config.quantity_discount_rate,
        )


def select_rule(quantity: int, eligible: bool, rules: DiscountRules) -> AppliedRule:
    # First match wins; rules never stack.
    if eligible:
        return AppliedRule.ELIGIBILITY
    if quantity >= rules.quantity_threshold:
        return AppliedRule.QUANTITY
    return AppliedRule.NONE


def compute_price(
    base_price: float,
    quantity: int,
    eligible: bool,
    rules: DiscountRules,
) -> tuple[float, AppliedRule]:
    rule = select_rule(quantity, eligible, rules)
    if rule is AppliedRule.ELIGIBILITY:
        return base_price * (1 - rules.eligibility_discount_rate), rule
    if rule is AppliedRule.QUANTITY:
        return base_price * (1 - rules.quantity_discount_rate), rule
    return base_price, rule
