from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import datetime
from decimal import Decimal
from typing import Callable

from loguru import logger
from returns.pipeline import flow
from returns.pointfree import bind, map_
from returns.result import Result, Success

from order_patterns.core.domain.model.errors import CheckoutError
from order_patterns.core.domain.model.order import (
    Order,
    OrderEvent,
    OrderEventType,
    Receipt,
    format_money,
    now_utc,
    to_money,
)
from order_patterns.core.domain.service.pricing import build_receipt
from order_patterns.core.ports.inbound.place_order import PlaceOrderUseCase
from order_patterns.core.ports.outbound.events import EventPublisher
from order_patterns.core.ports.outbound.notification import NotificationSender
from order_patterns.core.ports.outbound.payment import PaymentProcessor
from order_patterns.core.ports.outbound.rates import ShippingRateCalculator, TaxCalculator


@dataclass(frozen=True)
class CheckoutDeps:
    shipping: ShippingRateCalculator
    tax: TaxCalculator
    payment: PaymentProcessor
    notify: NotificationSender
    events: EventPublisher | None = None
    clock: Callable[[], datetime] = now_utc


@dataclass(frozen=True)
class CheckoutContext:
    order: Order
    shipping: Decimal = Decimal("0")
    receipt: Receipt | None = None


@dataclass(frozen=True)
class CheckoutService(PlaceOrderUseCase):
    """Turns an ``Order`` into a ``Receipt`` and triggers its side effects.

    Steps run in a fixed order: shipping, tax, payment, confirmation. The
    first failing collaborator stops the pipeline and its error is returned;
    nothing is retried or rolled back. When ``deps.events`` is set, every
    milestone is published as an ``OrderEvent``.
    """

    deps: CheckoutDeps

    def place_order(self, order: Order) -> Result[Receipt, CheckoutError]:
        return flow(
            CheckoutContext(order=order),
            self._start,
            bind(self._calculate_shipping),
            bind(self._calculate_tax),
            bind(self._charge_payment),
            bind(self._send_confirmation),
            bind(self._finish),
            map_(_to_receipt),
        )

    # ---- steps -------------------------------------------------------------

    def _start(self, ctx: CheckoutContext) -> Result[CheckoutContext, CheckoutError]:
        logger.bind(order_id=ctx.order.order_id).debug("checkout started: {}", ctx.order)
        return self._emit(ctx, OrderEventType.ORDER_PLACED, "Checkout started")

    def _calculate_shipping(
        self, ctx: CheckoutContext
    ) -> Result[CheckoutContext, CheckoutError]:
        shipping = to_money(self.deps.shipping.calculate_shipping(ctx.order))
        logger.bind(order_id=ctx.order.order_id).debug(
            "shipping {} via {}", shipping, self.deps.shipping.name
        )
        return self._emit(
            replace(ctx, shipping=shipping),
            OrderEventType.SHIPPING_CALCULATED,
            format_money(shipping),
        )

    def _calculate_tax(
        self, ctx: CheckoutContext
    ) -> Result[CheckoutContext, CheckoutError]:
        order = ctx.order
        tax = self.deps.tax.calculate_tax(order.subtotal + ctx.shipping, order.ship_to)
        logger.bind(order_id=order.order_id).debug(
            "tax {} via {}", tax, self.deps.tax.name
        )
        receipt = build_receipt(order, ctx.shipping, tax)
        return self._emit(
            replace(ctx, receipt=receipt),
            OrderEventType.TAX_CALCULATED,
            format_money(tax),
        )

    def _charge_payment(
        self, ctx: CheckoutContext
    ) -> Result[CheckoutContext, CheckoutError]:
        total = _to_receipt(ctx).total
        return self.deps.payment.charge(ctx.order.order_id, total).bind(
            lambda _: self._emit(
                ctx, OrderEventType.PAYMENT_CAPTURED, format_money(total)
            )
        )

    def _send_confirmation(
        self, ctx: CheckoutContext
    ) -> Result[CheckoutContext, CheckoutError]:
        customer = ctx.order.customer
        return self.deps.notify.send_order_confirmation(
            customer, _to_receipt(ctx)
        ).bind(
            lambda _: self._emit(
                ctx, OrderEventType.CONFIRMATION_SENT, f"Sent to {customer.email}"
            )
        )

    def _finish(self, ctx: CheckoutContext) -> Result[CheckoutContext, CheckoutError]:
        logger.bind(order_id=ctx.order.order_id).debug("checkout finished")
        return self._emit(ctx, OrderEventType.ORDER_COMPLETE, "Checkout finished")

    def _emit(
        self, ctx: CheckoutContext, event_type: OrderEventType, message: str
    ) -> Result[CheckoutContext, CheckoutError]:
        if self.deps.events is None:
            return Success(ctx)
        event = OrderEvent(ctx.order.order_id, event_type, self.deps.clock(), message)
        return self.deps.events.publish(event).map(lambda _: ctx)


def _to_receipt(ctx: CheckoutContext) -> Receipt:
    if ctx.receipt is None:
        raise RuntimeError("receipt requested before tax was calculated")
    return ctx.receipt
