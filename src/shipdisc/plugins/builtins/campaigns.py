"""Built-in plugin that runs the configured discount campaigns."""

from __future__ import annotations

from collections.abc import MutableSequence
from typing import TYPE_CHECKING

from shipdisc.plugins.hookspecs import hookimpl

if TYPE_CHECKING:
    from shipdisc.domain.contracts import CartLike, ShippingRateLike
    from shipdisc.domain.runner import CampaignRunner


class CampaignDiscountPlugin:
    """Delegates the rate hook to a CampaignRunner."""

    def __init__(self, runner: CampaignRunner) -> None:
        self._runner = runner

    @property
    def runner(self) -> CampaignRunner:
        return self._runner

    @hookimpl
    def discount_shipping_rates(
        self,
        cart: CartLike,
        shipping_rates: MutableSequence[ShippingRateLike],
    ) -> None:
        self._runner.run(cart, shipping_rates)
