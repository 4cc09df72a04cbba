from __future__ import annotations

from typing import Callable, Protocol

from returns.result import Result

from order_patterns.core.domain.model.errors import CheckoutError
from order_patterns.core.domain.model.order import OrderEvent

OrderSubscriber = Callable[[OrderEvent], None]


class EventPublisher(Protocol):
    def publish(self, event: OrderEvent) -> Result[None, CheckoutError]: ...
