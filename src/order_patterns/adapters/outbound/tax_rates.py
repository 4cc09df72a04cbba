from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from order_patterns.core.domain.model.order import Address, to_money
from order_patterns.core.ports.outbound.rates import TaxCalculator


@dataclass(frozen=True)
class PercentageTax(TaxCalculator):
    rate: Decimal = Decimal("0.0825")
    name: str = "SimplePercent"

    def calculate_tax(self, taxable_amount: Decimal, ship_to: Address) -> Decimal:
        return to_money(taxable_amount * self.rate)
