from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Callable

from loguru import logger
from returns.result import Failure, Result, Success

from order_patterns.core.domain.model.errors import CheckoutError
from order_patterns.core.domain.model.order import Order, Receipt, format_money
from order_patterns.core.ports.inbound.place_order import PlaceOrderUseCase
from order_patterns.core.ports.outbound.orders import OrderRepository

Wrapper = Callable[[PlaceOrderUseCase], PlaceOrderUseCase]


@dataclass(frozen=True)
class LoggingCheckout(PlaceOrderUseCase):
    inner: PlaceOrderUseCase

    def place_order(self, order: Order) -> Result[Receipt, CheckoutError]:
        log = logger.bind(order_id=order.order_id)
        log.info("[LOG] Starting order {}...", order.order_id)
        result = self.inner.place_order(order)
        if isinstance(result, Success):
            log.info(
                "[LOG] Completed order {}. Total={}",
                order.order_id,
                format_money(result.unwrap().total),
            )
        else:
            log.warning("[LOG] Order {} failed: {}", order.order_id, result.failure())
        return result


@dataclass(frozen=True)
class TimingCheckout(PlaceOrderUseCase):
    inner: PlaceOrderUseCase
    clock: Callable[[], float] = time.perf_counter

    def place_order(self, order: Order) -> Result[Receipt, CheckoutError]:
        started = self.clock()
        result = self.inner.place_order(order)
        elapsed_ms = (self.clock() - started) * 1000
        logger.bind(order_id=order.order_id, elapsed_ms=elapsed_ms).info(
            "[METRIC] place_order took {:.0f}ms", elapsed_ms
        )
        return result


@dataclass(frozen=True)
class PersistingCheckout(PlaceOrderUseCase):
    """Stores the order once checkout succeeded."""

    inner: PlaceOrderUseCase
    orders: OrderRepository

    def place_order(self, order: Order) -> Result[Receipt, CheckoutError]:
        result = self.inner.place_order(order)
        if isinstance(result, Failure):
            return result
        receipt = result.unwrap()
        return self.orders.save(order).map(lambda _: receipt)

    def find_order(self, order_id: str) -> Result[Order, CheckoutError]:
        return self.orders.get(order_id)


def decorate(core: PlaceOrderUseCase, *wrappers: Wrapper) -> PlaceOrderUseCase:
    """Wrap ``core``; the first wrapper given ends up innermost."""
    service = core
    for wrap in wrappers:
        service = wrap(service)
    return service
