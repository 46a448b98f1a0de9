"""Typed payload contracts for service results.

Payloads are validated before they leave the service layer so a renamed
key fails in tests rather than in CLI output.
"""

from __future__ import annotations

from typing import Any, Literal, TypeVar

from pydantic import BaseModel, ConfigDict

T = TypeVar("T", bound=BaseModel)


def dump_validated(model_cls: type[T], data: dict[str, Any]) -> dict[str, Any]:
    """Validate *data* against *model_cls* and return a normalized payload dict."""
    model = model_cls.model_validate(data)
    return model.model_dump(mode="python")


class CampaignItem(BaseModel):
    """One configured campaign, flattened."""

    model_config = ConfigDict(extra="forbid")

    index: int
    country_code: str
    province_code: str
    zip_code_match_type: str
    zip_codes: list[str]
    rate_match_type: str
    rate_names: list[str] | None
    discount_type: str
    discount_amount: str
    discount_message: str


class ListCampaignsResultData(BaseModel):
    """Payload contract for ``CampaignService.list_campaigns``."""

    count: int
    eligible_source: str
    items: list[CampaignItem]


class CheckIssue(BaseModel):
    """One configuration problem found by ``CampaignService.check``."""

    campaign: int
    severity: Literal["error", "warning"]
    code: str
    message: str


class CheckResultData(BaseModel):
    """Payload contract for ``CampaignService.check``."""

    count: int
    error_count: int
    warning_count: int
    healthy: bool
    issues: list[CheckIssue]
