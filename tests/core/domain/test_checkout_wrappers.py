from __future__ import annotations

from decimal import Decimal

from returns.result import Failure, Success

from order_patterns.adapters.outbound.console_notify import SandboxNotify
from order_patterns.adapters.outbound.console_payments import SandboxPayment
from order_patterns.adapters.outbound.in_memory_orders import InMemoryOrderRepository
from order_patterns.adapters.outbound.shipping_rates import FixedRateShipping
from order_patterns.adapters.outbound.tax_rates import PercentageTax
from order_patterns.core.domain.model.errors import OrderNotFound
from order_patterns.core.domain.service.checkout_service import (
    CheckoutDeps,
    CheckoutService,
)
from order_patterns.core.domain.service.checkout_wrappers import (
    LoggingCheckout,
    PersistingCheckout,
    TimingCheckout,
    decorate,
)


def _declining_checkout() -> CheckoutService:
    return CheckoutService(
        CheckoutDeps(
            shipping=FixedRateShipping("Flat", Decimal("7.99")),
            tax=PercentageTax(),
            payment=SandboxPayment(max_amount=Decimal("1.00")),
            notify=SandboxNotify(),
        )
    )


def test_logging_wrapper_logs_around_checkout(checkout, order, log_records):
    result = LoggingCheckout(checkout).place_order(order)

    assert result == checkout.place_order(order)
    info = [r["message"] for r in log_records if r["level"].name == "INFO"]
    assert info == [
        "[LOG] Starting order ORD-1001...",
        "[LOG] Completed order ORD-1001. Total=$106.04",
    ]


def test_logging_wrapper_warns_on_failure(order, log_records):
    result = LoggingCheckout(_declining_checkout()).place_order(order)

    assert isinstance(result, Failure)
    warnings = [r["message"] for r in log_records if r["level"].name == "WARNING"]
    assert len(warnings) == 1
    assert warnings[0].startswith("[LOG] Order ORD-1001 failed: payment_declined")


def test_timing_wrapper_reports_elapsed(checkout, order, log_records):
    ticks = iter([1.0, 1.25])

    result = TimingCheckout(checkout, clock=lambda: next(ticks)).place_order(order)

    assert result.unwrap().total == Decimal("106.04")
    metric = [r for r in log_records if r["message"].startswith("[METRIC]")]
    assert len(metric) == 1
    assert metric[0]["message"] == "[METRIC] place_order took 250ms"
    assert metric[0]["extra"]["elapsed_ms"] == 250.0


def test_persisting_wrapper_saves_successful_orders(checkout, order):
    repo = InMemoryOrderRepository()
    service = PersistingCheckout(checkout, repo)

    receipt = service.place_order(order).unwrap()

    assert receipt.total == Decimal("106.04")
    assert service.find_order("ord-1001").unwrap() == order


def test_persisting_wrapper_skips_failed_orders(order):
    repo = InMemoryOrderRepository()
    service = PersistingCheckout(_declining_checkout(), repo)

    service.place_order(order)

    assert isinstance(repo.get(order.order_id).failure(), OrderNotFound)


def test_decorate_applies_wrappers_innermost_first(checkout, order, calls):
    service = decorate(checkout, LoggingCheckout, TimingCheckout)

    assert isinstance(service, TimingCheckout)
    assert isinstance(service.inner, LoggingCheckout)
    assert service.inner.inner is checkout

    result = service.place_order(order)

    assert isinstance(result, Success)
    assert result.unwrap().total == Decimal("106.04")
    assert [c[0] for c in calls] == ["charge", "notify"]


def test_decorate_without_wrappers_returns_core(checkout):
    assert decorate(checkout) is checkout
