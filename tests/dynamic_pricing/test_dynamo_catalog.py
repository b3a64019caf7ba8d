from decimal import Decimal

import boto3
import pytest
from moto import mock_aws

from dynamic_pricing.adapters.catalog.dynamo import DynamoCatalog
from dynamic_pricing.engine.cart.models import CartLine, LineProduct
from dynamic_pricing.engine.recorder import OriginalPriceRecorder


@pytest.fixture()
def catalog_table_name() -> str:
    return "product-catalog"


@pytest.fixture()
def catalog_table(catalog_table_name: str, monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("AWS_DEFAULT_REGION", "us-east-1")
    with mock_aws():
        resource = boto3.resource("dynamodb", region_name="us-east-1")
        table = resource.create_table(
            TableName=catalog_table_name,
            KeySchema=[{"AttributeName": "product_id", "KeyType": "HASH"}],
            AttributeDefinitions=[{"AttributeName": "product_id", "AttributeType": "S"}],
            ProvisionedThroughput={"ReadCapacityUnits": 5, "WriteCapacityUnits": 5},
        )
        table.meta.client.get_waiter("table_exists").wait(TableName=catalog_table_name)
        yield table


def test_get_price_reads_item(catalog_table_name: str, catalog_table) -> None:
    catalog_table.put_item(Item={"product_id": "mug", "price": Decimal("12.50")})
    catalog = DynamoCatalog(catalog_table_name)
    assert catalog.get_price("mug") == 12.5


def test_get_price_missing_item_or_price(catalog_table_name: str, catalog_table) -> None:
    catalog_table.put_item(Item={"product_id": "draft"})
    catalog = DynamoCatalog(catalog_table_name)
    assert catalog.get_price("unknown") is None
    assert catalog.get_price("draft") is None


def test_get_price_client_error_degrades(catalog_table) -> None:
    catalog = DynamoCatalog("missing-table")
    assert catalog.get_price("mug") is None


def test_recorder_with_dynamo_catalog(catalog_table_name: str, catalog_table) -> None:
    catalog_table.put_item(Item={"product_id": "mug", "price": Decimal("100")})
    recorder = OriginalPriceRecorder(DynamoCatalog(catalog_table_name))
    line = CartLine(
        line_key="line-mug",
        product_id="mug",
        quantity=1,
        product=LineProduct(product_id="mug", price=100.0),
    )
    assert recorder.capture_original_price("mug", line).original_unit_price == 100.0


def test_get_price_non_numeric_price_degrades(catalog_table_name: str, catalog_table) -> None:
    catalog_table.put_item(Item={"product_id": "mug", "price": "call for price"})
    catalog = DynamoCatalog(catalog_table_name)
    assert catalog.get_price("mug") is None
