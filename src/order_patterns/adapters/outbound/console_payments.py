from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from returns.result import Failure, Result, Success

from order_patterns.core.domain.model.errors import CheckoutError, PaymentDeclined
from order_patterns.core.domain.model.order import format_money
from order_patterns.core.ports.outbound.payment import PaymentProcessor


@dataclass
class ConsolePayment(PaymentProcessor):
    name: str = "ConsolePay"

    def charge(self, order_id: str, amount: Decimal) -> Result[None, CheckoutError]:
        print(f"[{self.name}] Charged {format_money(amount)} for order {order_id}")
        return Success(None)


@dataclass
class CardPayment(PaymentProcessor):
    name: str = "CardPayment"

    def charge(self, order_id: str, amount: Decimal) -> Result[None, CheckoutError]:
        print(f"[{self.name}] Charged card for {order_id}: {format_money(amount)}")
        return Success(None)


@dataclass
class InvoicePayment(PaymentProcessor):
    name: str = "InvoicePayment"

    def charge(self, order_id: str, amount: Decimal) -> Result[None, CheckoutError]:
        print(f"[{self.name}] Created invoice for {order_id}: {format_money(amount)}")
        return Success(None)


@dataclass
class SandboxPayment(PaymentProcessor):
    """Never moves money. Can be told to decline, to exercise failure paths."""

    name: str = "SandboxPay"
    decline_order_ids: set[str] | None = None
    max_amount: Decimal | None = None

    def charge(self, order_id: str, amount: Decimal) -> Result[None, CheckoutError]:
        if order_id in (self.decline_order_ids or set()):
            return Failure(
                PaymentDeclined(message="order declined", reason="order_blacklisted")
            )
        if self.max_amount is not None and amount > self.max_amount:
            return Failure(
                PaymentDeclined(message="amount too large", reason="limit_exceeded")
            )
        print(f"[{self.name}] (NO-OP) Would charge {format_money(amount)} for {order_id}")
        return Success(None)


@dataclass
class ProdPayment(PaymentProcessor):
    name: str = "ProdPay"

    def charge(self, order_id: str, amount: Decimal) -> Result[None, CheckoutError]:
        print(f"[{self.name}] Charged {format_money(amount)} for {order_id}")
        return Success(None)
