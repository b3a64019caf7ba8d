#!/usr/bin/env python
from __future__ import annotations

import argparse
import json
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List

import yaml

from dynamic_pricing.adapters.memory import HookDispatcher, InMemoryCart, InMemoryCatalog, StaticExecutionContext
from dynamic_pricing.app.config.loader import load_pricing_config
from dynamic_pricing.app.hooks import build_pricing_hooks


@dataclass
class LocalActor:
    capabilities: List[str] = field(default_factory=list)


def load_cart_fixture(path: Path) -> Dict[str, Any]:
    with path.open("r", encoding="utf-8") as handle:
        data = yaml.safe_load(handle) or {}
    if not isinstance(data, dict):
        raise ValueError("cart fixture must be a mapping")
    return data


def main() -> None:
    parser = argparse.ArgumentParser()
    parser.add_argument("--config", help="Path to pricing config YAML")
    parser.add_argument("--cart", required=True, help="Path to cart fixture YAML")
    parser.add_argument(
        "--capability",
        action="append",
        default=[],
        help="Capability held by the shopper (repeatable)",
    )
    parser.add_argument("--back-office", action="store_true")
    parser.add_argument("--async-request", action="store_true")
    args = parser.parse_args()

    config_path = args.config or os.getenv("PRICING_CONFIG_PATH")
    if not config_path:
        raise ValueError("Provide --config or set PRICING_CONFIG_PATH")
    config = load_pricing_config(config_path)
    fixture = load_cart_fixture(Path(args.cart))

    # catalog: prices recorded at add time; lines may carry a different live price.
    catalog = InMemoryCatalog({str(key): float(value) for key, value in (fixture.get("catalog") or {}).items()})
    actor = LocalActor(capabilities=args.capability)
    hooks = build_pricing_hooks(
        config,
        catalog=catalog,
        context=StaticExecutionContext(back_office=args.back_office, async_request=args.async_request),
        actor_provider=lambda: actor,
    )
    dispatcher = HookDispatcher()
    hooks.register(dispatcher)

    cart = InMemoryCart(catalog, dispatcher)
    for entry in fixture.get("lines") or []:
        cart.add(str(entry["product_id"]), int(entry.get("quantity", 1)), price=entry.get("price"))

    total = cart.calculate_totals()
    output = {
        "total": total,
        "lines": [
            {
                "product_id": line.product_id,
                "quantity": line.quantity,
                "original_unit_price": line.original_unit_price,
                "final_unit_price": line.final_unit_price,
            }
            for line in cart.get_lines()
        ],
    }
    print(json.dumps(output, indent=2))


if __name__ == "__main__":
    main()
