"""CampaignRunner — the three-stage matching and discount pipeline.

For each campaign, in configured order:

1. Geographic predicate: country code and zip selector against the cart's
   shipping address, evaluated once per campaign.
2. Rate predicate: rate name selector against each shipping rate.
3. Discount: applied to every rate passing both predicates whose source is
   the eligible marker.

Each campaign logs one ``campaign.address_check`` debug event, plus one
``campaign.rate_discounted`` event per discounted rate. The campaign index
is bound as logging context for the duration of the campaign.

INVARIANT: Rates are mutated in place and never deduplicated across
campaigns. A rate matched by two campaigns is discounted twice, in order.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, MutableSequence
from typing import TYPE_CHECKING

import structlog

from shipdisc.domain.discounts import DiscountApplicator
from shipdisc.domain.selectors import RateNameSelector, ZipSelector, normalize_upper
from shipdisc.domain.types import ELIGIBLE_SOURCE

if TYPE_CHECKING:
    from shipdisc.domain.campaign import Campaign
    from shipdisc.domain.contracts import AddressLike, CartLike, ShippingRateLike

logger = logging.getLogger(__name__)


def country_matches(address: AddressLike, campaign: Campaign) -> bool:
    """Compare country codes after normalization. A missing code never matches."""
    country = getattr(address, "country_code", None)
    if country is None:
        return False
    return normalize_upper(country) == normalize_upper(campaign.country_code)


def province_matches(address: AddressLike, campaign: Campaign) -> bool:
    """Compare province codes after normalization.

    Reported in debug logs only; it does not take part in the match.
    """
    province = normalize_upper(getattr(address, "province_code", None))
    return bool(province) and province == normalize_upper(campaign.province_code)


class CampaignRunner:
    """Runs an ordered tuple of campaigns against a cart and its shipping rates."""

    def __init__(
        self,
        campaigns: Iterable[Campaign],
        *,
        eligible_source: str = ELIGIBLE_SOURCE,
    ) -> None:
        self.campaigns: tuple[Campaign, ...] = tuple(campaigns)
        self.eligible_source = eligible_source

    def run(self, cart: CartLike, shipping_rates: MutableSequence[ShippingRateLike]) -> None:
        address = getattr(cart, "shipping_address", None)

        for index, campaign in enumerate(self.campaigns):
            with structlog.contextvars.bound_contextvars(campaign=index):
                self._run_campaign(campaign, address, shipping_rates)

    def _run_campaign(
        self,
        campaign: Campaign,
        address: AddressLike | None,
        shipping_rates: MutableSequence[ShippingRateLike],
    ) -> None:
        zip_code_selector = ZipSelector(campaign.zip_code_match_type, campaign.zip_codes)
        rate_name_selector = RateNameSelector(campaign.rate_match_type, campaign.rate_names)

        if address is None:
            logger.debug("campaign.address_check", extra={"has_address": False})
            return

        country_match = country_matches(address, campaign)
        zip_match = zip_code_selector.matches(getattr(address, "zip", None))
        logger.debug(
            "campaign.address_check",
            extra={
                "has_address": True,
                "country_match": country_match,
                "province_match": province_matches(address, campaign),
                "zip_match": zip_match,
            },
        )
        if not (country_match and zip_match):
            return

        discount_applicator = DiscountApplicator(
            campaign.discount_type,
            campaign.discount_amount,
            campaign.discount_message,
        )

        for shipping_rate in shipping_rates:
            if not rate_name_selector.matches(shipping_rate):
                continue
            if getattr(shipping_rate, "source", None) != self.eligible_source:
                continue
            before = shipping_rate.price
            discount_applicator.apply(shipping_rate)
            logger.debug(
                "campaign.rate_discounted",
                extra={
                    "rate": shipping_rate.name,
                    "discount": str(before - shipping_rate.price),
                    "price": str(shipping_rate.price),
                },
            )
