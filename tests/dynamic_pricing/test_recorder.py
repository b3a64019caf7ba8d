import pytest
from pydantic import ValidationError

from dynamic_pricing.adapters.memory import InMemoryCatalog
from dynamic_pricing.engine.cart.models import CartLine, LineProduct
from dynamic_pricing.engine.recorder import OriginalPriceRecorder


def _line(price: float) -> CartLine:
    return CartLine(
        line_key="line-mug",
        product_id="mug",
        quantity=1,
        product=LineProduct(product_id="mug", price=price),
    )


def test_records_catalog_price() -> None:
    recorder = OriginalPriceRecorder(InMemoryCatalog({"mug": 100}))
    line = recorder.capture_original_price("mug", _line(100.0))
    assert line.original_unit_price == 100.0
    assert isinstance(line.original_unit_price, float)


def test_missing_product_leaves_price_unset() -> None:
    recorder = OriginalPriceRecorder(InMemoryCatalog())
    line = recorder.capture_original_price("mug", _line(75.0))
    assert line.original_unit_price is None
    assert line.final_unit_price == 75.0


def test_does_not_touch_line_price() -> None:
    recorder = OriginalPriceRecorder(InMemoryCatalog({"mug": 100.0}))
    line = recorder.capture_original_price("mug", _line(64.0))
    assert line.original_unit_price == 100.0
    assert line.product.price == 64.0


@pytest.mark.parametrize("price", [float("nan"), float("inf"), -1.0])
def test_line_price_must_be_finite_and_non_negative(price) -> None:
    with pytest.raises(ValidationError):
        LineProduct(product_id="mug", price=price)
