from __future__ import annotations

from typing import Protocol

from returns.result import Result

from order_patterns.core.domain.model.errors import CheckoutError
from order_patterns.core.domain.model.order import Order, Receipt


class PlaceOrderUseCase(Protocol):
    def place_order(self, order: Order) -> Result[Receipt, CheckoutError]: ...
