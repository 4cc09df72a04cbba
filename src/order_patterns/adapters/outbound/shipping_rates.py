from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import TYPE_CHECKING

from order_patterns.core.domain.model.order import Order, to_money
from order_patterns.core.ports.outbound.rates import ShippingRateCalculator

if TYPE_CHECKING:
    from order_patterns.settings import CheckoutSettings


class ShippingMethod(str, Enum):
    FLAT = "flat"
    GROUND = "ground"
    EXPRESS = "express"


@dataclass(frozen=True)
class FixedRateShipping(ShippingRateCalculator):
    name: str
    fee: Decimal

    def calculate_shipping(self, order: Order) -> Decimal:
        return to_money(self.fee)


@dataclass(frozen=True)
class FreeShippingAboveThreshold(ShippingRateCalculator):
    inner: ShippingRateCalculator
    threshold: Decimal = Decimal("100.00")

    @property
    def name(self) -> str:  # type: ignore[override]
        return f"{self.inner.name} (Free)"

    def calculate_shipping(self, order: Order) -> Decimal:
        if order.subtotal >= self.threshold:
            return Decimal("0.00")
        return self.inner.calculate_shipping(order)


def shipping_for(method: ShippingMethod, settings: CheckoutSettings) -> FixedRateShipping:
    fees = {
        ShippingMethod.FLAT: ("Flat", settings.flat_shipping_fee),
        ShippingMethod.GROUND: ("Ground", settings.ground_shipping_fee),
        ShippingMethod.EXPRESS: ("Express", settings.express_shipping_fee),
    }
    name, fee = fees[method]
    return FixedRateShipping(name=name, fee=fee)


def choose_shipping_strategy(
    order: Order, settings: CheckoutSettings, wants_express: bool = False
) -> ShippingRateCalculator:
    # express on request; otherwise ground, free above the threshold
    if wants_express:
        return shipping_for(ShippingMethod.EXPRESS, settings)
    ground = shipping_for(ShippingMethod.GROUND, settings)
    if order.subtotal >= settings.free_shipping_threshold:
        return FreeShippingAboveThreshold(ground, settings.free_shipping_threshold)
    return ground
