"""Cart, address, and shipping-rate contracts.

The core depends only on the narrow Protocols below. The hosting platform
passes its own objects; the dataclasses are concrete implementations for
callers that have none (and for tests).

INVARIANT: The core mutates rates only through ``apply_discount``. It never
creates, removes, or reorders them.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Protocol, runtime_checkable


@runtime_checkable
class AddressLike(Protocol):
    """Shipping address fields read by the geographic predicate."""

    country_code: str | None
    province_code: str | None
    zip: str | None


@runtime_checkable
class CartLike(Protocol):
    """A cart with zero or one shipping address."""

    @property
    def shipping_address(self) -> AddressLike | None: ...


@runtime_checkable
class ShippingRateLike(Protocol):
    """A shipping rate that can receive a discount."""

    name: str
    price: Decimal
    source: str

    def apply_discount(self, amount: Decimal, *, message: str) -> None: ...


# --- Concrete models ---


@dataclass(frozen=True)
class Address:
    """A cart's shipping address."""

    country_code: str | None = None
    province_code: str | None = None
    zip: str | None = None


@dataclass(frozen=True)
class Cart:
    """A cart as seen by the campaign runner."""

    shipping_address: Address | None = None


@dataclass(frozen=True)
class AppliedDiscount:
    """One discount recorded against a rate."""

    amount: Decimal
    message: str


@dataclass
class ShippingRate:
    """A mutable shipping rate.

    ``price`` is reduced by every applied discount and never drops below
    zero. Each call is recorded in ``discounts`` in application order.
    """

    name: str
    price: Decimal
    source: str = "shopify"
    discounts: list[AppliedDiscount] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.price = Decimal(str(self.price))

    @property
    def original_price(self) -> Decimal:
        return self.price + self.total_discount

    @property
    def total_discount(self) -> Decimal:
        return sum((d.amount for d in self.discounts), Decimal("0"))

    @property
    def message(self) -> str | None:
        """Message of the most recent discount, if any."""
        if not self.discounts:
            return None
        return self.discounts[-1].message

    def apply_discount(self, amount: Decimal, *, message: str) -> None:
        """Subtract *amount* from the price and record *message*."""
        applied = min(Decimal(str(amount)), self.price)
        self.price -= applied
        self.discounts.append(AppliedDiscount(amount=applied, message=message))
