from __future__ import annotations

from enum import Enum
from typing import Protocol

from order_patterns.adapters.outbound.console_notify import ProdNotify, SandboxNotify
from order_patterns.adapters.outbound.console_payments import ProdPayment, SandboxPayment
from order_patterns.core.ports.outbound.notification import NotificationSender
from order_patterns.core.ports.outbound.payment import PaymentProcessor


class ProviderFamily(str, Enum):
    SANDBOX = "sandbox"
    PRODUCTION = "production"


class CommerceProviderFactory(Protocol):
    """Creates a payment processor and a notifier from the same family."""

    def create_payment(self) -> PaymentProcessor: ...

    def create_notification(self) -> NotificationSender: ...


class SandboxProviderFactory(CommerceProviderFactory):
    def create_payment(self) -> PaymentProcessor:
        return SandboxPayment()

    def create_notification(self) -> NotificationSender:
        return SandboxNotify()


class ProductionProviderFactory(CommerceProviderFactory):
    def create_payment(self) -> PaymentProcessor:
        return ProdPayment()

    def create_notification(self) -> NotificationSender:
        return ProdNotify()


_FACTORIES: dict[ProviderFamily, type[CommerceProviderFactory]] = {
    ProviderFamily.SANDBOX: SandboxProviderFactory,
    ProviderFamily.PRODUCTION: ProductionProviderFactory,
}


def provider_factory_for(family: ProviderFamily) -> CommerceProviderFactory:
    return _FACTORIES[ProviderFamily(family)]()
