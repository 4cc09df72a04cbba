from __future__ import annotations

from decimal import Decimal

from order_patterns.core.domain.model.order import Address, Customer, Order, OrderItem

SHIP_TO = Address("123 Main St", "Wichita", "KS", "67202")


def _order(order_id: str, customer_id: str, *items: tuple[str, str, int, str]) -> Order:
    return Order(
        order_id=order_id,
        customer=Customer(customer_id, "Ashar", "ashar@example.com"),
        items=tuple(
            OrderItem(sku, name, qty, Decimal(price)) for sku, name, qty, price in items
        ),
        ship_to=SHIP_TO,
    )


def singleton_order() -> Order:
    return _order(
        "ORD-1001",
        "CUST-1",
        ("SKU-KEYBOARD", "Keyboard", 1, "49.99"),
        ("SKU-MOUSE", "Mouse", 2, "19.99"),
    )


def factory_method_order() -> Order:
    return _order(
        "ORD-2001",
        "CUST-2",
        ("SKU-SSD", "SSD", 1, "89.99"),
        ("SKU-CABLE", "USB-C Cable", 2, "9.99"),
    )


def abstract_factory_order() -> Order:
    return _order("ORD-3001", "CUST-3", ("SKU-BOOK", "Book", 1, "29.99"))


def strategy_order() -> Order:
    return _order(
        "ORD-5001",
        "CUST-5",
        ("SKU-HEADSET", "Headset", 1, "79.99"),
        ("SKU-WEBCAM", "Webcam", 1, "49.99"),
    )


def observer_order() -> Order:
    return _order("ORD-6001", "CUST-6", ("SKU-MONITOR", "Monitor", 1, "159.99"))


def decorator_order() -> Order:
    return _order("ORD-7001", "CUST-7", ("SKU-LAPTOPSTAND", "Laptop Stand", 1, "34.99"))


def adapter_order() -> Order:
    return _order("ORD-8001", "CUST-8", ("SKU-USBHUB", "USB Hub", 1, "24.99"))


def facade_order() -> Order:
    return _order("ORD-9001", "CUST-9", ("SKU-MIC", "Microphone", 1, "59.99"))


def repository_order() -> Order:
    return _order(
        "ORD-10001",
        "CUST-10",
        ("SKU-BOOK", "Book", 2, "29.99"),
        ("SKU-PEN", "Pen", 5, "1.99"),
    )
