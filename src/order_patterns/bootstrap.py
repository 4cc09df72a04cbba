from __future__ import annotations

from order_patterns.adapters.outbound.providers import provider_factory_for
from order_patterns.adapters.outbound.shipping_rates import shipping_for
from order_patterns.adapters.outbound.tax_rates import PercentageTax
from order_patterns.core.domain.service.checkout_service import (
    CheckoutDeps,
    CheckoutService,
)
from order_patterns.core.ports.outbound.events import EventPublisher
from order_patterns.core.ports.outbound.notification import NotificationSender
from order_patterns.core.ports.outbound.payment import PaymentProcessor
from order_patterns.core.ports.outbound.rates import ShippingRateCalculator
from order_patterns.settings import CheckoutSettings


def build_tax(settings: CheckoutSettings) -> PercentageTax:
    return PercentageTax(rate=settings.default_tax_rate)


def build_checkout(
    settings: CheckoutSettings,
    *,
    shipping: ShippingRateCalculator | None = None,
    payment: PaymentProcessor | None = None,
    notify: NotificationSender | None = None,
    events: EventPublisher | None = None,
) -> CheckoutService:
    """Wire a ``CheckoutService`` from settings.

    Anything passed explicitly wins over what the settings select; payment
    and notification otherwise come from the configured provider family.
    """
    providers = provider_factory_for(settings.provider)
    deps = CheckoutDeps(
        shipping=shipping or shipping_for(settings.shipping_method, settings),
        tax=build_tax(settings),
        payment=payment or providers.create_payment(),
        notify=notify or providers.create_notification(),
        events=events,
    )
    return CheckoutService(deps)
