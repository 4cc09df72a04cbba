from __future__ import annotations

from typing import Protocol

from returns.result import Result

from order_patterns.core.domain.model.errors import CheckoutError
from order_patterns.core.domain.model.order import Order


class OrderRepository(Protocol):
    def save(self, order: Order) -> Result[str, CheckoutError]: ...

    def get(self, order_id: str) -> Result[Order, CheckoutError]:
        """Unknown ids come back as ``Failure(OrderNotFound)``."""
        ...
