from __future__ import annotations

from abc import ABC, abstractmethod
from decimal import Decimal

from returns.result import Result

from order_patterns.adapters.outbound.console_payments import CardPayment, InvoicePayment
from order_patterns.core.domain.model.errors import CheckoutError
from order_patterns.core.domain.model.order import Customer, Order
from order_patterns.core.ports.outbound.payment import PaymentProcessor


class PaymentCreator(ABC):
    """Decides when payment happens; subclasses decide which processor runs it."""

    def collect_payment(self, order: Order, total: Decimal) -> Result[None, CheckoutError]:
        processor = self.create_payment_processor(order)
        return processor.charge(order.order_id, total)

    @abstractmethod
    def create_payment_processor(self, order: Order) -> PaymentProcessor: ...


class CardPaymentCreator(PaymentCreator):
    def create_payment_processor(self, order: Order) -> PaymentProcessor:
        return CardPayment()


class InvoicePaymentCreator(PaymentCreator):
    def create_payment_processor(self, order: Order) -> PaymentProcessor:
        return InvoicePayment()


def payment_creator_for(customer: Customer) -> PaymentCreator:
    # B2B customers are invoiced, everyone else pays by card
    if customer.customer_id.casefold().startswith("b2b"):
        return InvoicePaymentCreator()
    return CardPaymentCreator()
