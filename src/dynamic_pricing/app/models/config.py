from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator


class PricingConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    eligibility_capability: str = "vip_customer"
    eligibility_discount_rate: float = 0.20
    quantity_threshold: int = 3
    quantity_discount_rate: float = 0.10

    @field_validator("eligibility_capability")
    @classmethod
    def required_stripped(cls, value: str) -> str:
        if not value or not value.strip():
            raise ValueError("eligibility_capability is required")
        return value.strip()

    @field_validator("eligibility_discount_rate", "quantity_discount_rate")
    @classmethod
    def rate_in_range(cls, value: float) -> float:
        # Also rejects NaN; a rate of 1 or more would price a line at zero or below.
        if not 0 <= value < 1:
            raise ValueError("discount rate must be >= 0 and < 1")
        return value

    @field_validator("quantity_threshold")
    @classmethod
    def positive_threshold(cls, value: int) -> int:
        if value < 1:
            raise ValueError("quantity_threshold must be >= 1")
        return value


class PricingSettings(BaseModel):
    model_config = ConfigDict(frozen=True)

    schema_version: int = 1
    pricing: PricingConfig = Field(default_factory=PricingConfig)
