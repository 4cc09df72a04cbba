from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CheckoutError(Exception):
    message: str

    def __str__(self) -> str:
        return self.message


@dataclass(frozen=True)
class ValidationError(CheckoutError):
    pass


@dataclass(frozen=True)
class PaymentDeclined(CheckoutError):
    reason: str

    def __str__(self) -> str:
        return f"payment_declined: {self.reason} ({self.message})"


@dataclass(frozen=True)
class DeliveryFailed(CheckoutError):
    reason: str

    def __str__(self) -> str:
        return f"delivery_failed: {self.reason} ({self.message})"


@dataclass(frozen=True)
class PersistenceError(CheckoutError):
    pass


@dataclass(frozen=True)
class OrderNotFound(PersistenceError):
    order_id: str

    def __str__(self) -> str:
        return f"order_not_found: {self.order_id} ({self.message})"


@dataclass(frozen=True)
class PublishError(CheckoutError):
    pass
