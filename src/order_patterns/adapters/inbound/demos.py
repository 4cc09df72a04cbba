"""One console walkthrough per design pattern.

Every demo places one of the sample orders and returns the checkout result;
what it prints along the way is its own.
"""

from __future__ import annotations

import sys
from typing import Callable, Dict

from loguru import logger
from returns.result import Result, Success

from order_patterns.adapters.inbound import sample_orders
from order_patterns.adapters.outbound.console_notify import ConsoleNotify
from order_patterns.adapters.outbound.console_payments import ConsolePayment
from order_patterns.adapters.outbound.in_memory_orders import InMemoryOrderRepository
from order_patterns.adapters.outbound.in_process_events import InProcessEventPublisher
from order_patterns.adapters.outbound.legacy_payment import LegacyPaymentAdapter
from order_patterns.adapters.outbound.payment_creators import payment_creator_for
from order_patterns.adapters.outbound.shipping_rates import (
    ShippingMethod,
    choose_shipping_strategy,
    shipping_for,
)
from order_patterns.adapters.outbound.stdout_events import (
    audit_subscriber,
    email_subscriber,
)
from order_patterns.bootstrap import build_checkout, build_tax
from order_patterns.core.domain.model.errors import CheckoutError
from order_patterns.core.domain.model.order import Order, Receipt, format_money
from order_patterns.core.domain.model.order_builder import OrderBuilder
from order_patterns.core.domain.service.checkout_service import CheckoutService
from order_patterns.core.domain.service.checkout_wrappers import (
    LoggingCheckout,
    PersistingCheckout,
    TimingCheckout,
    decorate,
)
from order_patterns.core.domain.service.pricing import price_order
from order_patterns.core.ports.outbound.events import EventPublisher
from order_patterns.core.ports.outbound.payment import PaymentProcessor
from order_patterns.settings import CheckoutSettings

Demo = Callable[[CheckoutSettings], Result[Receipt, CheckoutError]]


def _console_checkout(
    settings: CheckoutSettings, events: EventPublisher | None = None
) -> CheckoutService:
    return build_checkout(
        settings,
        shipping=shipping_for(ShippingMethod.FLAT, settings),
        payment=ConsolePayment(),
        notify=ConsoleNotify(),
        events=events,
    )


def _quote(order: Order, settings: CheckoutSettings) -> Receipt:
    return price_order(
        order, shipping_for(ShippingMethod.FLAT, settings), build_tax(settings)
    )


def _pay_and_notify(
    order: Order, receipt: Receipt, payment: PaymentProcessor
) -> Result[Receipt, CheckoutError]:
    return (
        payment.charge(order.order_id, receipt.total)
        .bind(lambda _: ConsoleNotify().send_order_confirmation(order.customer, receipt))
        .map(lambda _: receipt)
    )


# ---- demos -----------------------------------------------------------------


def run_singleton(settings: CheckoutSettings) -> Result[Receipt, CheckoutError]:
    # one settings object for the whole process, passed in rather than global
    print(f"Env: {settings.environment_name} (tax rate {settings.default_tax_rate})")
    return _console_checkout(settings).place_order(sample_orders.singleton_order())


def run_factory_method(settings: CheckoutSettings) -> Result[Receipt, CheckoutError]:
    order = sample_orders.factory_method_order()
    receipt = _quote(order, settings)
    creator = payment_creator_for(order.customer)
    result = creator.collect_payment(order, receipt.total).map(lambda _: receipt)
    if isinstance(result, Success):
        print(f"Receipt Total: {format_money(receipt.total)}")
    return result


def run_abstract_factory(settings: CheckoutSettings) -> Result[Receipt, CheckoutError]:
    print(f"Provider family: {settings.provider.value}")
    checkout = build_checkout(
        settings, shipping=shipping_for(ShippingMethod.FLAT, settings)
    )
    return checkout.place_order(sample_orders.abstract_factory_order())


def run_builder(settings: CheckoutSettings) -> Result[Receipt, CheckoutError]:
    order = (
        OrderBuilder()
        .with_order_id("ORD-4001")
        .for_customer("CUST-4", "Ashar", "ashar@example.com")
        .ship_to("123 Main St", "Wichita", "KS", "67202")
        .add_item("SKU-ROUTER", "Wi-Fi Router", 1, "119.99")
        .add_item("SKU-CABLE", "Ethernet Cable", 3, "6.99")
        .build()
    )
    print(order)
    return _pay_and_notify(order, _quote(order, settings), ConsolePayment())


def run_strategy(
    settings: CheckoutSettings, wants_express: bool = False
) -> Result[Receipt, CheckoutError]:
    order = sample_orders.strategy_order()
    strategy = choose_shipping_strategy(order, settings, wants_express=wants_express)
    receipt = price_order(order, strategy, build_tax(settings))
    print(f"Shipping strategy: {strategy.name}")
    print(f"Receipt total: {format_money(receipt.total)}")
    return Success(receipt)


def run_observer(settings: CheckoutSettings) -> Result[Receipt, CheckoutError]:
    events = InProcessEventPublisher()
    events.subscribe(email_subscriber)
    events.subscribe(audit_subscriber)
    checkout = _console_checkout(settings, events=events)
    return checkout.place_order(sample_orders.observer_order())


def run_decorator(settings: CheckoutSettings) -> Result[Receipt, CheckoutError]:
    # echo the wrappers' own log lines next to the demo output
    sink = logger.add(
        sys.stdout, format="{message}", level="INFO", filter=LoggingCheckout.__module__
    )
    try:
        checkout = decorate(_console_checkout(settings), LoggingCheckout, TimingCheckout)
        return checkout.place_order(sample_orders.decorator_order())
    finally:
        logger.remove(sink)


def run_adapter(settings: CheckoutSettings) -> Result[Receipt, CheckoutError]:
    order = sample_orders.adapter_order()
    return _pay_and_notify(order, _quote(order, settings), LegacyPaymentAdapter())


def run_facade(settings: CheckoutSettings) -> Result[Receipt, CheckoutError]:
    result = _console_checkout(settings).place_order(sample_orders.facade_order())
    if isinstance(result, Success):
        print(f"Facade result: {format_money(result.unwrap().total)}")
    return result


def run_repository(settings: CheckoutSettings) -> Result[Receipt, CheckoutError]:
    service = PersistingCheckout(_console_checkout(settings), InMemoryOrderRepository())
    order = sample_orders.repository_order()
    result = service.place_order(order)
    if isinstance(result, Success):
        loaded = service.find_order(order.order_id.lower())
        if isinstance(loaded, Success):
            print(f"Loaded from repo: {loaded.unwrap()}")
        else:
            print(f"Lookup failed: {loaded.failure()}")
    return result


DEMOS: Dict[str, Demo] = {
    "singleton": run_singleton,
    "factory-method": run_factory_method,
    "abstract-factory": run_abstract_factory,
    "builder": run_builder,
    "strategy": run_strategy,
    "observer": run_observer,
    "decorator": run_decorator,
    "adapter": run_adapter,
    "facade": run_facade,
    "repository": run_repository,
}
