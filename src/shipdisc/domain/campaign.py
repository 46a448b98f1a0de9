"""Campaign model — one zip/country-targeted shipping discount rule.

Field names mirror the keys of a campaign table in ``shipdisc.toml``::

    [[campaigns]]
    country_code = "CA"
    province_code = "BC"
    zip_code_match_type = "partial"
    zip_codes = ["M1R", "A0B"]
    rate_match_type = "exact"
    rate_names = ["Canada Post Expedited (3 to 7 business days - exclude weekends)"]
    discount_type = "fixed"
    discount_amount = 18.75
    discount_message = "..."

The model coerces types only. Whether a campaign can ever match is reported
by ``CampaignService.check``, never enforced here.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Any

from pydantic import BaseModel, field_validator

from shipdisc.domain.types import DiscountType, MatchMode


class Campaign(BaseModel):
    """Immutable campaign configuration."""

    model_config = {"frozen": True}

    country_code: str
    province_code: str = ""
    zip_code_match_type: MatchMode = MatchMode.EXACT
    zip_codes: tuple[str, ...] = ()
    rate_match_type: MatchMode = MatchMode.ALL
    rate_names: tuple[str, ...] | None = None
    discount_type: DiscountType
    discount_amount: Decimal
    discount_message: str = ""

    @field_validator("zip_code_match_type")
    @classmethod
    def _zip_mode_is_comparison(cls, value: MatchMode) -> MatchMode:
        if value is MatchMode.ALL:
            msg = "zip_code_match_type must be 'exact' or 'partial'"
            raise ValueError(msg)
        return value

    @field_validator("discount_amount", mode="before")
    @classmethod
    def _amount_from_text(cls, value: Any) -> Any:
        # Floats go through str() so 18.75 stays 18.75.
        if isinstance(value, float):
            return str(value)
        return value

    def summary(self) -> dict[str, Any]:
        """Flat, JSON-friendly view used by listing output."""
        return {
            "country_code": self.country_code,
            "province_code": self.province_code,
            "zip_code_match_type": str(self.zip_code_match_type),
            "zip_codes": list(self.zip_codes),
            "rate_match_type": str(self.rate_match_type),
            "rate_names": list(self.rate_names) if self.rate_names is not None else None,
            "discount_type": str(self.discount_type),
            "discount_amount": str(self.discount_amount),
            "discount_message": self.discount_message,
        }
