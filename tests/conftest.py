import sys
from pathlib import Path
from typing import List

import pytest
from freezegun import freeze_time

PROJECT_ROOT = Path(__file__).resolve().parents[1]
SRC_ROOT = PROJECT_ROOT / "src"
if str(SRC_ROOT) not in sys.path:
    sys.path.insert(0, str(SRC_ROOT))

from dynamic_pricing.adapters.memory import HookDispatcher, InMemoryCart, InMemoryCatalog, StaticExecutionContext  # noqa: E402
from dynamic_pricing.app.models.config import PricingConfig  # noqa: E402

DEFAULT_ENV = {
    "AWS_ACCESS_KEY_ID": "test-access-key",
    "AWS_SECRET_ACCESS_KEY": "test-secret-key",
    "AWS_SESSION_TOKEN": "test-session",
    "AWS_DEFAULT_REGION": "us-east-1",
}


class Actor:
    def __init__(self, *capabilities: str) -> None:
        self.capabilities: List[str] = list(capabilities)


@pytest.fixture(autouse=True)
def _test_env(monkeypatch):
    for key, value in DEFAULT_ENV.items():
        monkeypatch.setenv(key, value)
    yield


@pytest.fixture
def pricing_config() -> PricingConfig:
    return PricingConfig(
        eligibility_capability="vip_customer",
        eligibility_discount_rate=0.20,
        quantity_threshold=3,
        quantity_discount_rate=0.10,
    )


@pytest.fixture
def storefront_context() -> StaticExecutionContext:
    return StaticExecutionContext()


@pytest.fixture
def catalog() -> InMemoryCatalog:
    return InMemoryCatalog({"mug": 100.0, "poster": 50.0})


@pytest.fixture
def dispatcher() -> HookDispatcher:
    return HookDispatcher()


@pytest.fixture
def cart(catalog: InMemoryCatalog, dispatcher: HookDispatcher) -> InMemoryCart:
    return InMemoryCart(catalog, dispatcher)


@pytest.fixture
def vip_actor() -> Actor:
    return Actor("vip_customer")


@pytest.fixture
def regular_actor() -> Actor:
    return Actor()


@pytest.fixture
def freezer():
    with freeze_time("2020-01-01T00:00:00Z") as frozen_datetime:
        yield frozen_datetime
