from __future__ import annotations

from dataclasses import dataclass, field
from decimal import ROUND_HALF_UP, Decimal

from returns.result import Result, Success

from order_patterns.core.domain.model.errors import CheckoutError
from order_patterns.core.ports.outbound.payment import PaymentProcessor


class LegacyPaymentApi:
    """Third-party style API we cannot change: charges whole cents."""

    def make_payment_in_cents(self, legacy_order_ref: str, cents: int) -> None:
        print(f"[LegacyPay] Charged {cents} cents for legacyRef={legacy_order_ref}")


def to_cents(amount: Decimal) -> int:
    return int((amount * 100).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


@dataclass
class LegacyPaymentAdapter(PaymentProcessor):
    legacy: LegacyPaymentApi = field(default_factory=LegacyPaymentApi)
    name: str = "LegacyPaymentAdapter"

    def charge(self, order_id: str, amount: Decimal) -> Result[None, CheckoutError]:
        self.legacy.make_payment_in_cents(order_id, to_cents(amount))
        return Success(None)
