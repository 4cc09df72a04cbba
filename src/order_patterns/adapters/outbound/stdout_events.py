from __future__ import annotations

from order_patterns.core.domain.model.order import OrderEvent


def email_subscriber(event: OrderEvent) -> None:
    print(f"[Email] {event.event_type.value} for {event.order_id}: {event.message}")


def audit_subscriber(event: OrderEvent) -> None:
    print(
        f"[Audit] {event.timestamp:%Y-%m-%d %H:%M:%SZ} {event.event_type.value}"
        f" {event.order_id} :: {event.message}"
    )
