from __future__ import annotations

from decimal import Decimal
from typing import Protocol

from order_patterns.core.domain.model.order import Address, Order


class ShippingRateCalculator(Protocol):
    name: str

    def calculate_shipping(self, order: Order) -> Decimal: ...


class TaxCalculator(Protocol):
    name: str

    def calculate_tax(self, taxable_amount: Decimal, ship_to: Address) -> Decimal:
        """``ship_to`` is reserved for jurisdiction-based rates."""
        ...
