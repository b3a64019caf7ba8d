from __future__ import annotations


class PricingConfigError(ValueError):
    """Indicates a pricing configuration that cannot be loaded."""
