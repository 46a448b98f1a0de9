"""Tests for CampaignService — listing and configuration checks."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest

from shipdisc.config.settings import ShipdiscSettings
from shipdisc.services.campaigns import CampaignService, lint_campaign
from tests.conftest import make_campaign


def _service(tmp_path: Path, *campaigns: Any) -> CampaignService:
    settings = ShipdiscSettings.from_cli(cwd=tmp_path)
    if campaigns:
        settings = settings.model_copy(update={"campaigns": tuple(campaigns)})
    return CampaignService(settings)


def _codes(issues: list[dict[str, Any]]) -> set[str]:
    return {i["code"] for i in issues}


class TestListCampaigns:
    def test_lists_defaults(self, tmp_path: Path) -> None:
        result = _service(tmp_path).list_campaigns()
        assert result.ok
        assert result.op == "list_campaigns"
        assert result.data["count"] == 1
        assert result.data["eligible_source"] == "shopify"
        item = result.data["items"][0]
        assert item["index"] == 0
        assert item["country_code"] == "CA"
        assert item["discount_amount"] == "18.75"

    def test_preserves_order(self, tmp_path: Path) -> None:
        result = _service(
            tmp_path, make_campaign(country_code="US"), make_campaign(country_code="CA")
        ).list_campaigns()
        assert [i["country_code"] for i in result.data["items"]] == ["US", "CA"]
        assert [i["index"] for i in result.data["items"]] == [0, 1]


class TestLintCampaign:
    def test_default_campaign_is_clean(self) -> None:
        assert lint_campaign(0, make_campaign()) == []

    def test_empty_zip_codes(self) -> None:
        issues = lint_campaign(3, make_campaign(zip_codes=[]))
        assert _codes(issues) == {"EMPTY_ZIP_CODES"}
        assert issues[0]["campaign"] == 3
        assert issues[0]["severity"] == "error"

    def test_blank_partial_zip(self) -> None:
        assert "BLANK_ZIP_CODE" in _codes(lint_campaign(0, make_campaign(zip_codes=["M1R", " "])))

    def test_blank_exact_zip_is_not_flagged(self) -> None:
        campaign = make_campaign(zip_code_match_type="exact", zip_codes=["M1R", ""])
        assert lint_campaign(0, campaign) == []

    @pytest.mark.parametrize("names", [None, []])
    def test_missing_rate_names(self, names: list[str] | None) -> None:
        assert _codes(lint_campaign(0, make_campaign(rate_names=names))) == {"EMPTY_RATE_NAMES"}

    def test_ignored_rate_names(self) -> None:
        issues = lint_campaign(0, make_campaign(rate_match_type="all"))
        assert _codes(issues) == {"IGNORED_RATE_NAMES"}
        assert issues[0]["severity"] == "warning"

    def test_all_mode_without_names_is_clean(self) -> None:
        assert lint_campaign(0, make_campaign(rate_match_type="all", rate_names=None)) == []

    def test_blank_country(self) -> None:
        issues = lint_campaign(0, make_campaign(country_code="  "))
        assert _codes(issues) == {"BLANK_COUNTRY"}
        assert issues[0]["severity"] == "warning"

    def test_amount_warnings(self) -> None:
        assert _codes(lint_campaign(0, make_campaign(discount_amount=0))) == {"NON_POSITIVE_AMOUNT"}
        over = make_campaign(discount_type="percent", discount_amount=150)
        assert _codes(lint_campaign(0, over)) == {"PERCENT_OVER_100"}

    def test_blank_message(self) -> None:
        assert _codes(lint_campaign(0, make_campaign(discount_message=""))) == {"BLANK_MESSAGE"}


class TestCheck:
    def test_healthy_defaults(self, tmp_path: Path) -> None:
        result = _service(tmp_path).check()
        assert result.ok
        assert result.op == "check"
        assert result.data["healthy"] is True
        assert result.data["count"] == 0

    def test_errors_make_result_fail(self, tmp_path: Path) -> None:
        result = _service(tmp_path, make_campaign(), make_campaign(zip_codes=[])).check()
        assert result.ok is False
        assert result.error is not None
        assert result.error.code == "INVALID_CAMPAIGNS"
        assert result.data["healthy"] is False
        assert result.data["error_count"] == 1
        assert result.data["issues"][0]["campaign"] == 1

    def test_warnings_keep_result_ok(self, tmp_path: Path) -> None:
        result = _service(tmp_path, make_campaign(discount_message="")).check()
        assert result.ok
        assert result.data["warning_count"] == 1
        assert result.data["healthy"] is True

    def test_min_severity_filters_listing_only(self, tmp_path: Path) -> None:
        svc = _service(tmp_path, make_campaign(zip_codes=[], discount_message=""))
        result = svc.check(min_severity="error")
        assert result.data["count"] == 1
        assert result.data["warning_count"] == 1
        assert _codes(result.data["issues"]) == {"EMPTY_ZIP_CODES"}
