"""Recording collaborators for checkout tests."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from decimal import Decimal

from returns.result import Result, Success

from order_patterns.core.domain.model.errors import CheckoutError
from order_patterns.core.domain.model.order import Customer, Receipt

FIXED_NOW = datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc)


@dataclass
class RecordingPayment:
    calls: list = field(default_factory=list)
    name: str = "RecordingPay"

    def charge(self, order_id: str, amount: Decimal) -> Result[None, CheckoutError]:
        self.calls.append(("charge", order_id, amount))
        return Success(None)


@dataclass
class RecordingNotify:
    calls: list = field(default_factory=list)
    name: str = "RecordingNotify"

    def send_order_confirmation(
        self, customer: Customer, receipt: Receipt
    ) -> Result[None, CheckoutError]:
        self.calls.append(("notify", customer.email, receipt.total))
        return Success(None)
