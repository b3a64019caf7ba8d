from __future__ import annotations

from typing import Any, Callable, Optional, Protocol

from dynamic_pricing.app.models.config import PricingConfig
from dynamic_pricing.engine.cart.models import CartLine
from dynamic_pricing.engine.cart.protocols import Cart, CatalogService, Eligibility, ExecutionContext
from dynamic_pricing.engine.eligibility import CapabilityEligibility
from dynamic_pricing.engine.recalculate import PricingEngine
from dynamic_pricing.engine.recorder import OriginalPriceRecorder

LINE_ADDED_EVENT = "cart.line_added"
BEFORE_TOTALS_EVENT = "cart.before_totals"
LINE_ADDED_PRIORITY = 10
# Runs after the host's other price writers so this is the last one before totals.
BEFORE_TOTALS_PRIORITY = 99


class HookRegistry(Protocol):
    def add(self, event: str, callback: Callable[..., Any], priority: int) -> None:
        ...


class PricingHooks:
    def __init__(
        self,
        *,
        recorder: OriginalPriceRecorder,
        engine: PricingEngine,
        eligibility: Eligibility,
        actor_provider: Callable[[], Any],
    ) -> None:
        self.recorder = recorder
        self.engine = engine
        self.eligibility = eligibility
        self.actor_provider = actor_provider

    def on_line_added(self, product_id: str, line: CartLine) -> CartLine:
        return self.recorder.capture_original_price(product_id, line)

    def on_before_totals_computed(self, cart: Cart) -> None:
        self.engine.recalculate(cart, self.eligibility, self.actor_provider())

    def register(self, registry: HookRegistry) -> None:
        registry.add(LINE_ADDED_EVENT, self.on_line_added, LINE_ADDED_PRIORITY)
        registry.add(BEFORE_TOTALS_EVENT, self.on_before_totals_computed, BEFORE_TOTALS_PRIORITY)


def build_pricing_hooks(
    config: PricingConfig,
    *,
    catalog: CatalogService,
    context: ExecutionContext,
    actor_provider: Callable[[], Any],
    eligibility: Optional[Eligibility] = None,
) -> PricingHooks:
    return PricingHooks(
        recorder=OriginalPriceRecorder(catalog),
        engine=PricingEngine.from_config(config, context),
        eligibility=eligibility or CapabilityEligibility(config.eligibility_capability),
        actor_provider=actor_provider,
    )
