from __future__ import annotations

from dataclasses import dataclass

from returns.result import Failure, Result, Success

from order_patterns.core.domain.model.errors import CheckoutError, DeliveryFailed
from order_patterns.core.domain.model.order import Customer, Receipt, format_money
from order_patterns.core.ports.outbound.notification import NotificationSender


@dataclass
class ConsoleNotify(NotificationSender):
    name: str = "ConsoleNotify"

    def send_order_confirmation(
        self, customer: Customer, receipt: Receipt
    ) -> Result[None, CheckoutError]:
        print(
            f"[{self.name}] Email to {customer.email}: total {format_money(receipt.total)}"
        )
        return Success(None)


@dataclass
class SandboxNotify(NotificationSender):
    name: str = "SandboxNotify"
    fail: bool = False

    def send_order_confirmation(
        self, customer: Customer, receipt: Receipt
    ) -> Result[None, CheckoutError]:
        if self.fail:
            return Failure(
                DeliveryFailed(message="mail relay is down", reason="relay_unavailable")
            )
        print(
            f"[{self.name}] (NO-OP) Would email {customer.email}"
            f" total {format_money(receipt.total)}"
        )
        return Success(None)


@dataclass
class ProdNotify(NotificationSender):
    name: str = "ProdNotify"

    def send_order_confirmation(
        self, customer: Customer, receipt: Receipt
    ) -> Result[None, CheckoutError]:
        print(
            f"[{self.name}] Email sent to {customer.email}"
            f" total {format_money(receipt.total)}"
        )
        return Success(None)
