"""Shared test fixtures."""

from __future__ import annotations

from decimal import Decimal

import pytest
from fakes import FIXED_NOW, RecordingNotify, RecordingPayment
from loguru import logger

from order_patterns.adapters.outbound.shipping_rates import FixedRateShipping
from order_patterns.adapters.outbound.tax_rates import PercentageTax
from order_patterns.core.domain.model.order import Address, Customer, Order, OrderItem
from order_patterns.core.domain.service.checkout_service import (
    CheckoutDeps,
    CheckoutService,
)
from order_patterns.settings import CheckoutSettings


@pytest.fixture
def customer() -> Customer:
    return Customer("CUST-1", "Ashar", "ashar@example.com")


@pytest.fixture
def address() -> Address:
    return Address("123 Main St", "Wichita", "KS", "67202")


@pytest.fixture
def order(customer: Customer, address: Address) -> Order:
    return Order(
        order_id="ORD-1001",
        customer=customer,
        items=(
            OrderItem("SKU-KEYBOARD", "Keyboard", 1, Decimal("49.99")),
            OrderItem("SKU-MOUSE", "Mouse", 2, Decimal("19.99")),
        ),
        ship_to=address,
    )


@pytest.fixture
def big_order(customer: Customer, address: Address) -> Order:
    return Order(
        order_id="ORD-5001",
        customer=customer,
        items=(
            OrderItem("SKU-HEADSET", "Headset", 1, Decimal("79.99")),
            OrderItem("SKU-WEBCAM", "Webcam", 1, Decimal("49.99")),
        ),
        ship_to=address,
    )


@pytest.fixture
def settings() -> CheckoutSettings:
    return CheckoutSettings()


@pytest.fixture
def calls() -> list:
    return []


@pytest.fixture
def checkout(calls: list) -> CheckoutService:
    return CheckoutService(
        CheckoutDeps(
            shipping=FixedRateShipping("Flat", Decimal("7.99")),
            tax=PercentageTax(),
            payment=RecordingPayment(calls),
            notify=RecordingNotify(calls),
            clock=lambda: FIXED_NOW,
        )
    )


@pytest.fixture
def log_records():
    """Collect loguru records emitted during the test."""
    records: list = []
    handler_id = logger.add(lambda msg: records.append(msg.record), level="DEBUG")
    yield records
    logger.remove(handler_id)
