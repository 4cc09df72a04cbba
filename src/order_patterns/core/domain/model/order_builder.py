from __future__ import annotations

from decimal import Decimal

from order_patterns.core.domain.model.errors import ValidationError
from order_patterns.core.domain.model.order import Address, Customer, Order, OrderItem


class OrderBuilder:
    """Fluent, step-by-step construction of an ``Order``.

    Customer, address and items are validated as they are added; ``build``
    only checks that the required parts were supplied.
    """

    def __init__(self) -> None:
        self._order_id = "ORD-NEW"
        self._customer: Customer | None = None
        self._ship_to: Address | None = None
        self._items: list[OrderItem] = []

    def with_order_id(self, order_id: str) -> OrderBuilder:
        self._order_id = order_id
        return self

    def for_customer(self, customer_id: str, name: str, email: str) -> OrderBuilder:
        self._customer = Customer(customer_id, name, email)
        return self

    def ship_to(
        self, line1: str, city: str, state: str, postal_code: str, country: str = "US"
    ) -> OrderBuilder:
        self._ship_to = Address(line1, city, state, postal_code, country)
        return self

    def add_item(
        self, sku: str, name: str, quantity: int, unit_price: Decimal | str
    ) -> OrderBuilder:
        self._items.append(OrderItem(sku, name, quantity, Decimal(str(unit_price))))
        return self

    def build(self) -> Order:
        if self._customer is None:
            raise ValidationError("customer must be set")
        if self._ship_to is None:
            raise ValidationError("shipping address must be set")
        return Order(self._order_id, self._customer, tuple(self._items), self._ship_to)
