from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from dynamic_pricing.app.models.config import PricingConfig, PricingSettings
from dynamic_pricing.util.errors import PricingConfigError

SUPPORTED_SCHEMA_VERSIONS = {1}


def load_pricing_settings(path: str | Path) -> PricingSettings:
    data: Any
    with open(path, "r", encoding="utf-8") as handle:
        data = yaml.safe_load(handle) or {}
    if not isinstance(data, dict):
        raise PricingConfigError(f"Pricing config must be a mapping: {path}")
    settings = PricingSettings.model_validate(data)
    if settings.schema_version not in SUPPORTED_SCHEMA_VERSIONS:
        raise PricingConfigError(f"Unsupported schema_version {settings.schema_version}")
    return settings


def load_pricing_config(path: str | Path) -> PricingConfig:
    return load_pricing_settings(path).pricing
