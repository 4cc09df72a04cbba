from __future__ import annotations

from decimal import Decimal

from order_patterns.core.domain.model.order import Order, Receipt, to_money
from order_patterns.core.ports.outbound.rates import ShippingRateCalculator, TaxCalculator


def build_receipt(order: Order, shipping: Decimal, tax: Decimal) -> Receipt:
    """Shipping and tax are rounded to cents; the subtotal is kept exact."""
    subtotal = order.subtotal
    shipping = to_money(shipping)
    tax = to_money(tax)
    return Receipt(
        order_id=order.order_id,
        subtotal=subtotal,
        shipping=shipping,
        tax=tax,
        total=subtotal + shipping + tax,
    )


def price_order(
    order: Order, shipping: ShippingRateCalculator, tax: TaxCalculator
) -> Receipt:
    """Shipping first, then tax on subtotal + shipping."""
    shipping_amount = to_money(shipping.calculate_shipping(order))
    tax_amount = tax.calculate_tax(order.subtotal + shipping_amount, order.ship_to)
    return build_receipt(order, shipping_amount, tax_amount)
