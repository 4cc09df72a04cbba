from __future__ import annotations

from typing import Protocol

from returns.result import Result

from order_patterns.core.domain.model.errors import CheckoutError
from order_patterns.core.domain.model.order import Customer, Receipt


class NotificationSender(Protocol):
    name: str

    def send_order_confirmation(
        self, customer: Customer, receipt: Receipt
    ) -> Result[None, CheckoutError]: ...
