from __future__ import annotations

from decimal import Decimal
from typing import Protocol

from returns.result import Result

from order_patterns.core.domain.model.errors import CheckoutError


class PaymentProcessor(Protocol):
    name: str

    def charge(self, order_id: str, amount: Decimal) -> Result[None, CheckoutError]: ...
