from __future__ import annotations

import os
from decimal import Decimal
from typing import Any, Literal, Mapping

from pydantic import BaseModel, ConfigDict, Field, field_validator

from order_patterns.adapters.outbound.providers import ProviderFamily
from order_patterns.adapters.outbound.shipping_rates import ShippingMethod

ENV_PREFIX = "ORDER_PATTERNS_"

LogLevel = Literal["TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"]


class CheckoutSettings(BaseModel):
    """Application-level settings used during checkout.

    Built once at startup and handed to whatever needs it; instances are
    frozen.
    """

    model_config = ConfigDict(frozen=True)

    environment_name: str = Field(default="UAT", min_length=1)
    default_tax_rate: Decimal = Field(default=Decimal("0.0825"), ge=0, le=1)
    flat_shipping_fee: Decimal = Field(
        default=Decimal("7.99"), ge=0, decimal_places=2
    )
    ground_shipping_fee: Decimal = Field(
        default=Decimal("6.49"), ge=0, decimal_places=2
    )
    express_shipping_fee: Decimal = Field(
        default=Decimal("18.99"), ge=0, decimal_places=2
    )
    free_shipping_threshold: Decimal = Field(
        default=Decimal("100.00"), ge=0, decimal_places=2
    )
    provider: ProviderFamily = ProviderFamily.SANDBOX
    shipping_method: ShippingMethod = ShippingMethod.FLAT
    log_level: LogLevel = "INFO"

    @field_validator("log_level", mode="before")
    @classmethod
    def upper_log_level(cls, value: Any) -> Any:
        return value.upper() if isinstance(value, str) else value


def load_settings(environ: Mapping[str, str] | None = None) -> CheckoutSettings:
    """Read ``ORDER_PATTERNS_*`` variables, e.g. ``ORDER_PATTERNS_PROVIDER``."""
    env = os.environ if environ is None else environ
    values = {
        name: env[ENV_PREFIX + name.upper()]
        for name in CheckoutSettings.model_fields
        if ENV_PREFIX + name.upper() in env
    }
    return CheckoutSettings.model_validate(values)
