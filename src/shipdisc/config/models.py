"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, shipdisc.toml only contains
overrides. With no config file at all, the runner uses DEFAULT_CAMPAIGNS.
"""

from __future__ import annotations

from decimal import Decimal

from pydantic import BaseModel

from shipdisc.domain.campaign import Campaign
from shipdisc.domain.types import ELIGIBLE_SOURCE, DiscountType, MatchMode


class RunnerConfig(BaseModel):
    """[runner] section."""

    model_config = {"frozen": True}

    eligible_source: str = ELIGIBLE_SOURCE


DEFAULT_CAMPAIGNS: tuple[Campaign, ...] = (
    Campaign(
        country_code="CA",
        province_code="BC",
        zip_code_match_type=MatchMode.PARTIAL,
        zip_codes=("M1R", "A0B"),
        rate_match_type=MatchMode.EXACT,
        rate_names=("Canada Post Expedited (3 to 7 business days - exclude weekends)",),
        discount_type=DiscountType.FIXED,
        discount_amount=Decimal("18.75"),
        discount_message=(
            "FedEx has a mandatory Out-of-Delivery Area surcharge for your shipping zip code."
        ),
    ),
)
