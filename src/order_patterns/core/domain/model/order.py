from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from enum import Enum
from typing import Tuple

from order_patterns.core.domain.model.errors import ValidationError

CENTS = Decimal("0.01")


def to_money(value: Decimal | int | str) -> Decimal:
    return Decimal(str(value)).quantize(CENTS, rounding=ROUND_HALF_UP)


def format_money(amount: Decimal) -> str:
    return f"${to_money(amount):,.2f}"


def now_utc() -> datetime:
    return datetime.now(timezone.utc)


def _require(value: str | None, field_name: str) -> None:
    if value is None or not str(value).strip():
        raise ValidationError(f"{field_name} is required")


@dataclass(frozen=True)
class Customer:
    customer_id: str
    name: str
    email: str

    def __post_init__(self) -> None:
        _require(self.customer_id, "customer_id")
        _require(self.email, "email")


@dataclass(frozen=True)
class Address:
    line1: str
    city: str
    state: str
    postal_code: str
    country: str = "US"

    def __post_init__(self) -> None:
        for name in ("line1", "city", "state", "postal_code", "country"):
            _require(getattr(self, name), name)


@dataclass(frozen=True)
class OrderItem:
    sku: str
    name: str
    quantity: int
    unit_price: Decimal

    def __post_init__(self) -> None:
        _require(self.sku, "sku")
        if self.quantity is None:
            raise ValidationError(f"{self.sku}: quantity is required")
        if self.quantity <= 0:
            raise ValidationError(f"{self.sku}: quantity must be > 0")
        if self.unit_price is None:
            raise ValidationError(f"{self.sku}: unit_price is required")
        try:
            price = Decimal(str(self.unit_price))
        except InvalidOperation as e:
            raise ValidationError(f"{self.sku}: unit_price is not a number") from e
        if not price.is_finite():
            raise ValidationError(f"{self.sku}: unit_price is not a number")
        if price < 0:
            raise ValidationError(f"{self.sku}: unit_price must be >= 0")
        object.__setattr__(self, "unit_price", price)

    @property
    def line_total(self) -> Decimal:
        return self.unit_price * self.quantity


@dataclass(frozen=True)
class Order:
    """An order to be checked out.

    ``items`` is copied into a tuple, so mutating the sequence the order was
    built from has no effect on it.
    """

    order_id: str
    customer: Customer
    items: Tuple[OrderItem, ...]
    ship_to: Address
    created_at: datetime = field(default_factory=now_utc)

    def __post_init__(self) -> None:
        _require(self.order_id, "order_id")
        if self.customer is None:
            raise ValidationError("customer is required")
        if self.ship_to is None:
            raise ValidationError("ship_to is required")
        if self.items is None:
            raise ValidationError("items is required")
        items = tuple(self.items)
        if not items:
            raise ValidationError("order must contain at least one item")
        object.__setattr__(self, "items", items)

    @property
    def subtotal(self) -> Decimal:
        return sum((it.line_total for it in self.items), Decimal("0"))

    def __str__(self) -> str:
        return (
            f"{self.order_id} for {self.customer.name} | {len(self.items)} items"
            f" | Subtotal {format_money(self.subtotal)}"
        )


@dataclass(frozen=True)
class Receipt:
    order_id: str
    subtotal: Decimal
    shipping: Decimal
    tax: Decimal
    total: Decimal

    def __post_init__(self) -> None:
        _require(self.order_id, "order_id")
        if self.total != self.subtotal + self.shipping + self.tax:
            raise ValidationError(
                f"{self.order_id}: total must equal subtotal + shipping + tax"
            )


class OrderEventType(str, Enum):
    ORDER_PLACED = "OrderPlaced"
    SHIPPING_CALCULATED = "ShippingCalculated"
    TAX_CALCULATED = "TaxCalculated"
    PAYMENT_CAPTURED = "PaymentCaptured"
    CONFIRMATION_SENT = "ConfirmationSent"
    ORDER_COMPLETE = "OrderComplete"


@dataclass(frozen=True)
class OrderEvent:
    order_id: str
    event_type: OrderEventType
    timestamp: datetime
    message: str
