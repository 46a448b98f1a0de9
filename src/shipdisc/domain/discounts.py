"""Discount computation and application for a single shipping rate."""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import Any

from shipdisc.domain.contracts import ShippingRateLike
from shipdisc.domain.types import DiscountType

CENT = Decimal("0.01")


def to_decimal(value: Any) -> Decimal:
    """Convert a config or platform number to ``Decimal`` without float artifacts."""
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def quantize_money(amount: Decimal) -> Decimal:
    """Round *amount* to the cent, half-up."""
    return amount.quantize(CENT, rounding=ROUND_HALF_UP)


class DiscountApplicator:
    """Applies a fixed or percentage discount with a display message.

    Percent amounts are stored as a fraction (``10`` becomes ``0.10``) and
    multiplied by the rate's *current* price, so a rate discounted by an
    earlier campaign receives a smaller percentage discount.
    """

    def __init__(
        self,
        discount_type: DiscountType | str,
        discount_amount: Any,
        discount_message: str,
    ) -> None:
        self.discount_type = DiscountType(discount_type)
        self.discount_message = discount_message
        amount = to_decimal(discount_amount)
        if self.discount_type is DiscountType.PERCENT:
            self.discount_amount = amount / 100
        else:
            self.discount_amount = amount

    def compute(self, shipping_rate: ShippingRateLike) -> Decimal:
        """Return the discount *shipping_rate* would receive right now."""
        if self.discount_type is DiscountType.PERCENT:
            return quantize_money(to_decimal(shipping_rate.price) * self.discount_amount)
        return self.discount_amount

    def apply(self, shipping_rate: ShippingRateLike) -> None:
        """Apply the discount to *shipping_rate* in place.

        The message is attached even when the computed discount is zero.
        """
        rate_discount = self.compute(shipping_rate)
        shipping_rate.apply_discount(rate_discount, message=self.discount_message)
