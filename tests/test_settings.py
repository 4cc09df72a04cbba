from __future__ import annotations

from decimal import Decimal

import pytest
from fakes import RecordingPayment
from pydantic import ValidationError

from order_patterns.adapters.outbound.providers import ProviderFamily
from order_patterns.adapters.outbound.shipping_rates import ShippingMethod
from order_patterns.bootstrap import build_checkout
from order_patterns.settings import CheckoutSettings, load_settings


def test_defaults():
    settings = load_settings({})

    assert settings.environment_name == "UAT"
    assert settings.default_tax_rate == Decimal("0.0825")
    assert settings.provider is ProviderFamily.SANDBOX
    assert settings.shipping_method is ShippingMethod.FLAT
    assert settings.free_shipping_threshold == Decimal("100.00")


def test_reads_prefixed_variables():
    settings = load_settings(
        {
            "ORDER_PATTERNS_ENVIRONMENT_NAME": "PROD",
            "ORDER_PATTERNS_DEFAULT_TAX_RATE": "0.07",
            "ORDER_PATTERNS_PROVIDER": "production",
            "ORDER_PATTERNS_SHIPPING_METHOD": "express",
            "UNRELATED": "x",
        }
    )

    assert settings.environment_name == "PROD"
    assert settings.default_tax_rate == Decimal("0.07")
    assert settings.provider is ProviderFamily.PRODUCTION
    assert settings.shipping_method is ShippingMethod.EXPRESS


def test_reads_process_environment(monkeypatch):
    monkeypatch.setenv("ORDER_PATTERNS_LOG_LEVEL", "DEBUG")
    assert load_settings().log_level == "DEBUG"


@pytest.mark.parametrize("rate", ["-0.01", "1.5", "abc"])
def test_rejects_bad_tax_rate(rate):
    with pytest.raises(ValidationError):
        load_settings({"ORDER_PATTERNS_DEFAULT_TAX_RATE": rate})


def test_rejects_unknown_provider():
    with pytest.raises(ValidationError):
        load_settings({"ORDER_PATTERNS_PROVIDER": "staging"})


def test_settings_are_frozen():
    settings = CheckoutSettings()
    with pytest.raises(ValidationError):
        settings.default_tax_rate = Decimal("0.5")


def test_build_checkout_follows_settings():
    settings = CheckoutSettings(
        provider=ProviderFamily.PRODUCTION,
        shipping_method=ShippingMethod.GROUND,
        default_tax_rate=Decimal("0.10"),
    )

    deps = build_checkout(settings).deps

    assert deps.shipping.name == "Ground"
    assert deps.tax.rate == Decimal("0.10")
    assert deps.payment.name == "ProdPay"
    assert deps.notify.name == "ProdNotify"
    assert deps.events is None


def test_build_checkout_explicit_collaborators_win(settings):
    payment = RecordingPayment()
    deps = build_checkout(settings, payment=payment).deps

    assert deps.payment is payment
    assert deps.notify.name == "SandboxNotify"


@pytest.mark.parametrize(
    "name", ["FLAT_SHIPPING_FEE", "GROUND_SHIPPING_FEE", "FREE_SHIPPING_THRESHOLD"]
)
def test_rejects_sub_cent_amounts(name):
    with pytest.raises(ValidationError):
        load_settings({f"ORDER_PATTERNS_{name}": "7.999"})


def test_log_level_is_case_insensitive():
    assert load_settings({"ORDER_PATTERNS_LOG_LEVEL": "debug"}).log_level == "DEBUG"


def test_rejects_unknown_log_level():
    with pytest.raises(ValidationError):
        load_settings({"ORDER_PATTERNS_LOG_LEVEL": "verbose"})
