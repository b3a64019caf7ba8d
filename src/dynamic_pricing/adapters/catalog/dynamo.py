from __future__ import annotations

from typing import Optional

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from dynamic_pricing.util.logging import get_logger, log_event


class DynamoCatalog:
    def __init__(self, table_name: str, *, price_attribute: str = "price") -> None:
        self.table = boto3.resource("dynamodb").Table(table_name)
        self.price_attribute = price_attribute
        self.logger = get_logger(self.__class__.__name__)

    def get_price(self, product_id: str) -> Optional[float]:
        try:
            response = self.table.get_item(Key={"product_id": product_id})
        except (BotoCoreError, ClientError) as exc:
            log_event(self.logger, "catalog_lookup_failed", product_id=product_id, error=str(exc))
            return None
        item = response.get("Item")
        if not item or item.get(self.price_attribute) is None:
            return None
        try:
            return float(item[self.price_attribute])
        except (TypeError, ValueError) as exc:
            log_event(self.logger, "catalog_lookup_failed", product_id=product_id, error=str(exc))
            return None
