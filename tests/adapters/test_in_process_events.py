from __future__ import annotations

from fakes import FIXED_NOW
from returns.result import Success

from order_patterns.adapters.outbound.in_process_events import InProcessEventPublisher
from order_patterns.adapters.outbound.stdout_events import (
    audit_subscriber,
    email_subscriber,
)
from order_patterns.core.domain.model.order import OrderEvent, OrderEventType

EVENT = OrderEvent("ORD-6001", OrderEventType.ORDER_PLACED, FIXED_NOW, "Checkout started")


def test_subscribers_called_in_subscription_order():
    publisher = InProcessEventPublisher()
    seen = []
    publisher.subscribe(lambda e: seen.append(("first", e)))
    publisher.subscribe(lambda e: seen.append(("second", e)))

    assert publisher.publish(EVENT) == Success(None)
    assert seen == [("first", EVENT), ("second", EVENT)]


def test_unsubscribe_by_identity():
    publisher = InProcessEventPublisher()
    seen = []

    def first(e):
        seen.append("first")

    def second(e):
        seen.append("second")

    publisher.subscribe(first)
    publisher.subscribe(second)
    publisher.unsubscribe(first)
    publisher.publish(EVENT)

    assert seen == ["second"]


def test_unsubscribe_removes_one_registration():
    publisher = InProcessEventPublisher()
    seen = []
    subscriber = seen.append
    publisher.subscribe(subscriber)
    publisher.subscribe(subscriber)

    publisher.unsubscribe(subscriber)
    publisher.publish(EVENT)

    assert seen == [EVENT]


def test_unsubscribe_ignores_equal_but_distinct_callables():
    publisher = InProcessEventPublisher()
    seen = []
    publisher.subscribe(seen.append)

    # a fresh bound method compares equal but is a different object
    publisher.unsubscribe(seen.append)
    publisher.publish(EVENT)

    assert seen == [EVENT]


def test_unsubscribe_unknown_is_noop():
    publisher = InProcessEventPublisher()
    publisher.unsubscribe(print)
    assert publisher.publish(EVENT) == Success(None)


def test_subscriber_added_during_publish_waits_for_next_event():
    publisher = InProcessEventPublisher()
    seen = []

    def late(e):
        seen.append("late")

    def adder(e):
        seen.append("adder")
        publisher.subscribe(late)

    publisher.subscribe(adder)
    publisher.publish(EVENT)

    assert seen == ["adder"]


def test_stdout_subscribers(capsys):
    email_subscriber(EVENT)
    audit_subscriber(EVENT)

    assert capsys.readouterr().out.splitlines() == [
        "[Email] OrderPlaced for ORD-6001: Checkout started",
        "[Audit] 2024-01-02 03:04:05Z OrderPlaced ORD-6001 :: Checkout started",
    ]
