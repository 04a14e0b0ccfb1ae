"""
Splits a sale into the platform's commission and the seller's share.
Rounding matches the storefront: half up to a whole currency unit.
"""

from collections import namedtuple
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP

COMMISSION_RATE = Decimal("0.05")

Settlement = namedtuple("Settlement", ["amount", "platform_fee", "seller_amount"])


def to_decimal(value):
    if value is None or isinstance(value, bool):
        raise ValueError(f"Selling price must be numeric, got {value!r}")
    try:
        amount = Decimal(str(value))
    except InvalidOperation:
        raise ValueError(f"Selling price must be numeric, got {value!r}")
    if not amount.is_finite():
        raise ValueError(f"Selling price must be finite, got {value!r}")
    return amount


def calculate_settlement(selling_price):
    amount = to_decimal(selling_price)
    if amount < 0:
        raise ValueError(f"Selling price cannot be negative, got {amount}")

    platform_fee = (amount * COMMISSION_RATE).quantize(Decimal("1"), rounding=ROUND_HALF_UP)
    return Settlement(
        amount=amount,
        platform_fee=platform_fee,
        seller_amount=amount - platform_fee,
    )
