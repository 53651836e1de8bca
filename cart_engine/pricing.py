"""
Cart Pricing

Rentals are billed per day; everything else is a flat unit price.
All arithmetic stays in Decimal.
"""

from decimal import Decimal, ROUND_HALF_EVEN
from typing import Iterable

from .models import CartItem, ItemKind

CENTS = Decimal("0.01")


def round_money(amount: Decimal) -> Decimal:
    """Round to cents using banker's rounding"""
    return amount.quantize(CENTS, rounding=ROUND_HALF_EVEN)


def format_money(amount: Decimal, symbol: str = "$") -> str:
    """Render an amount with two decimal places, e.g. $190.00"""
    return f"{symbol}{round_money(Decimal(amount)):,.2f}"


def item_cost(item: CartItem) -> Decimal:
    """
    Cost of a single cart line.

    A rental with a known duration costs unit_price x days x quantity.
    A purchase, or a rental missing its duration, costs unit_price x quantity.
    """
    if item.kind == ItemKind.TIMED_RENTAL and item.rental_days:
        return item.unit_price * item.rental_days * item.quantity
    return item.unit_price * item.quantity


def cart_total(items: Iterable[CartItem]) -> Decimal:
    """Sum of item_cost over all items"""
    return sum((item_cost(item) for item in items), Decimal("0"))


def total_item_count(items: Iterable[CartItem]) -> int:
    """Sum of quantities over all items"""
    return sum(item.quantity for item in items)
