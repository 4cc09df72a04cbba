from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from returns.result import Result, Success

from order_patterns.core.domain.model.errors import CheckoutError
from order_patterns.core.domain.model.order import OrderEvent
from order_patterns.core.ports.outbound.events import EventPublisher, OrderSubscriber


@dataclass
class InProcessEventPublisher(EventPublisher):
    """Calls subscribers synchronously, in the order they subscribed."""

    _subscribers: List[OrderSubscriber] = field(default_factory=list)

    def subscribe(self, subscriber: OrderSubscriber) -> None:
        self._subscribers.append(subscriber)

    def unsubscribe(self, subscriber: OrderSubscriber) -> None:
        # identity, not equality; only the first registration goes
        for i, existing in enumerate(self._subscribers):
            if existing is subscriber:
                del self._subscribers[i]
                return

    def publish(self, event: OrderEvent) -> Result[None, CheckoutError]:
        for subscriber in tuple(self._subscribers):
            subscriber(event)
        return Success(None)
