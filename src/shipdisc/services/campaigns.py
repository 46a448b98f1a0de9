"""CampaignService — inspection and linting of the configured campaigns.

The runner never validates campaigns: a campaign that can never match is
simply inert. ``check`` is where those campaigns get reported.
"""

from __future__ import annotations

import logging
from decimal import Decimal
from typing import TYPE_CHECKING, Any

from shipdisc.domain.selectors import normalize_lower, normalize_upper
from shipdisc.domain.types import DiscountType, MatchMode
from shipdisc.services.contracts import CheckResultData, ListCampaignsResultData, dump_validated
from shipdisc.services.result import ServiceError, ServiceResult

if TYPE_CHECKING:
    from shipdisc.config.settings import ShipdiscSettings
    from shipdisc.domain.campaign import Campaign

logger = logging.getLogger(__name__)

SEVERITY_ERROR = "error"
SEVERITY_WARNING = "warning"

_SEVERITY_RANK = {SEVERITY_WARNING: 0, SEVERITY_ERROR: 1}


def _issue(index: int, severity: str, code: str, message: str) -> dict[str, Any]:
    return {"campaign": index, "severity": severity, "code": code, "message": message}


def lint_campaign(index: int, campaign: Campaign) -> list[dict[str, Any]]:
    """Return every issue found in one campaign."""
    issues: list[dict[str, Any]] = []

    if not normalize_upper(campaign.country_code):
        issues.append(
            _issue(
                index,
                SEVERITY_WARNING,
                "BLANK_COUNTRY",
                "Country code is blank; only addresses without a country match",
            )
        )

    zips = [normalize_upper(z) for z in campaign.zip_codes]
    if not zips:
        issues.append(
            _issue(index, SEVERITY_ERROR, "EMPTY_ZIP_CODES", "No zip codes; no address can match")
        )
    elif campaign.zip_code_match_type is MatchMode.PARTIAL and "" in zips:
        issues.append(
            _issue(index, SEVERITY_WARNING, "BLANK_ZIP_CODE", "Blank partial zip matches anything")
        )

    names = [normalize_lower(n) for n in campaign.rate_names or ()]
    if campaign.rate_match_type is MatchMode.ALL:
        if names:
            issues.append(
                _issue(
                    index,
                    SEVERITY_WARNING,
                    "IGNORED_RATE_NAMES",
                    "Rate names are ignored when rate_match_type is 'all'",
                )
            )
    elif not names:
        issues.append(
            _issue(index, SEVERITY_ERROR, "EMPTY_RATE_NAMES", "No rate names; no rate can match")
        )

    if campaign.discount_amount <= 0:
        issues.append(
            _issue(index, SEVERITY_WARNING, "NON_POSITIVE_AMOUNT", "Amount is zero or negative")
        )
    if campaign.discount_type is DiscountType.PERCENT and campaign.discount_amount > Decimal(100):
        issues.append(
            _issue(
                index,
                SEVERITY_WARNING,
                "PERCENT_OVER_100",
                "Percent discount above 100 is capped at the rate price",
            )
        )

    if not campaign.discount_message.strip():
        issues.append(_issue(index, SEVERITY_WARNING, "BLANK_MESSAGE", "Discount message is blank"))
    return issues


class CampaignService:
    """Read-only operations over the campaigns in a ShipdiscSettings."""

    def __init__(self, settings: ShipdiscSettings) -> None:
        self._settings = settings

    def list_campaigns(self) -> ServiceResult:
        """List campaigns in evaluation order."""
        campaigns = self._settings.campaigns
        items = [{"index": i, **c.summary()} for i, c in enumerate(campaigns)]
        data = dump_validated(
            ListCampaignsResultData,
            {
                "count": len(items),
                "eligible_source": self._settings.runner.eligible_source,
                "items": items,
            },
        )
        return ServiceResult(ok=True, op="list_campaigns", data=data)

    def check(self, *, min_severity: str = SEVERITY_WARNING) -> ServiceResult:
        """Report campaigns that can never match or will behave surprisingly.

        The result is not ok when any error-severity issue exists, whatever
        *min_severity* hides from the listing.
        """
        issues: list[dict[str, Any]] = []
        for index, campaign in enumerate(self._settings.campaigns):
            issues.extend(lint_campaign(index, campaign))

        error_count = sum(1 for i in issues if i["severity"] == SEVERITY_ERROR)
        warning_count = len(issues) - error_count
        threshold = _SEVERITY_RANK[min_severity]
        shown = [i for i in issues if _SEVERITY_RANK[i["severity"]] >= threshold]
        logger.debug("Campaign check found %d errors, %d warnings", error_count, warning_count)

        data = dump_validated(
            CheckResultData,
            {
                "count": len(shown),
                "error_count": error_count,
                "warning_count": warning_count,
                "healthy": error_count == 0,
                "issues": shown,
            },
        )
        if error_count:
            return ServiceResult(
                ok=False,
                op="check",
                data=data,
                error=ServiceError(
                    code="INVALID_CAMPAIGNS",
                    message=f"{error_count} campaign error(s) found",
                    detail={"error_count": error_count},
                ),
            )
        return ServiceResult(ok=True, op="check", data=data)
