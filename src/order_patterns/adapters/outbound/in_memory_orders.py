from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict

from returns.result import Failure, Result, Success

from order_patterns.core.domain.model.errors import CheckoutError, OrderNotFound
from order_patterns.core.domain.model.order import Order
from order_patterns.core.ports.outbound.orders import OrderRepository


@dataclass
class InMemoryOrderRepository(OrderRepository):
    """Orders keyed by id, ignoring case. Saving an existing id replaces it."""

    _store: Dict[str, Order] = field(default_factory=dict)

    def save(self, order: Order) -> Result[str, CheckoutError]:
        self._store[_key(order.order_id)] = order
        return Success(order.order_id)

    def get(self, order_id: str | None) -> Result[Order, CheckoutError]:
        order = None if order_id is None else self._store.get(_key(order_id))
        if order is None:
            return Failure(OrderNotFound(message="order not found", order_id=order_id))
        return Success(order)


def _key(order_id: str) -> str:
    return order_id.casefold()
