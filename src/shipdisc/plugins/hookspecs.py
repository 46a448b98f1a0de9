"""Pluggy hook specifications for shipdisc.

The hosting platform calls ``discount_shipping_rates`` once per checkout
with its cart and the rate list it will display.
"""

from __future__ import annotations

from collections.abc import MutableSequence
from typing import TYPE_CHECKING

import pluggy

if TYPE_CHECKING:
    from shipdisc.domain.contracts import CartLike, ShippingRateLike

hookspec = pluggy.HookspecMarker("shipdisc")
hookimpl = pluggy.HookimplMarker("shipdisc")


class ShipdiscHookSpec:
    """Hook specifications for the shipdisc plugin system."""

    @hookspec
    def discount_shipping_rates(
        self,
        cart: CartLike,
        shipping_rates: MutableSequence[ShippingRateLike],
    ) -> None:
        """Mutate *shipping_rates* in place.

        Implementations are called last-registered first.
        """
