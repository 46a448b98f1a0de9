"""Tests for ShipdiscSettings — unified settings with TOML source."""

from decimal import Decimal
from pathlib import Path

import pytest

from shipdisc.config.models import DEFAULT_CAMPAIGNS
from shipdisc.config.settings import ShipdiscSettings
from shipdisc.domain.runner import CampaignRunner

CAMPAIGN_TOML = """\
[[campaigns]]
country_code = "US"
zip_code_match_type = "exact"
zip_codes = ["90210"]
rate_match_type = "partial"
rate_names = ["ground"]
discount_type = "percent"
discount_amount = 20
discount_message = "Local delivery"
"""


class TestShipdiscSettingsDefaults:
    def test_all_defaults(self, tmp_path: Path) -> None:
        settings = ShipdiscSettings.from_cli(cwd=tmp_path)
        assert settings.config_path is None
        assert settings.json_output is False
        assert settings.verbose is False
        assert settings.log_json is False
        assert settings.runner.eligible_source == "shopify"
        assert settings.campaigns == DEFAULT_CAMPAIGNS

    def test_frozen(self, tmp_path: Path) -> None:
        settings = ShipdiscSettings.from_cli(cwd=tmp_path)
        with pytest.raises(Exception):
            settings.verbose = True  # type: ignore[misc]


class TestTomlSource:
    def test_loads_campaigns_from_toml(self, tmp_path: Path) -> None:
        toml = tmp_path / "shipdisc.toml"
        toml.write_text(CAMPAIGN_TOML)
        settings = ShipdiscSettings.from_cli(cwd=tmp_path)
        assert settings.config_path == toml
        (campaign,) = settings.campaigns
        assert campaign.country_code == "US"
        assert campaign.discount_amount == Decimal("20")
        assert settings.runner.eligible_source == "shopify"  # default preserved

    def test_explicit_config_path(self, tmp_path: Path) -> None:
        custom = tmp_path / "custom" / "my.toml"
        custom.parent.mkdir(parents=True)
        custom.write_text('[runner]\neligible_source = "internal"\n')
        settings = ShipdiscSettings.from_cli(config_path=str(custom))
        assert settings.runner.eligible_source == "internal"
        assert settings.config_path == custom

    def test_missing_explicit_path_uses_defaults(self, tmp_path: Path) -> None:
        settings = ShipdiscSettings.from_cli(config_path=str(tmp_path / "nope.toml"))
        assert settings.config_path is None
        assert settings.campaigns == DEFAULT_CAMPAIGNS


class TestEnvAndFlags:
    def test_env_overrides_toml(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / "shipdisc.toml").write_text('[runner]\neligible_source = "toml"\n')
        monkeypatch.setenv("SHIPDISC_RUNNER__ELIGIBLE_SOURCE", "env")
        settings = ShipdiscSettings.from_cli(cwd=tmp_path)
        assert settings.runner.eligible_source == "env"

    def test_cli_flags_override(self, tmp_path: Path) -> None:
        settings = ShipdiscSettings.from_cli(cwd=tmp_path, json_output=True, verbose=True)
        assert settings.json_output is True
        assert settings.verbose is True

    def test_cli_flags_override_toml(self, tmp_path: Path) -> None:
        (tmp_path / "shipdisc.toml").write_text("verbose = true\n")
        settings = ShipdiscSettings.from_cli(cwd=tmp_path, verbose=False)
        assert settings.verbose is False


class TestBuildRunner:
    def test_runner_receives_campaigns_and_source(self, tmp_path: Path) -> None:
        (tmp_path / "shipdisc.toml").write_text(
            '[runner]\neligible_source = "internal"\n\n' + CAMPAIGN_TOML
        )
        settings = ShipdiscSettings.from_cli(cwd=tmp_path)
        runner = settings.build_runner()
        assert isinstance(runner, CampaignRunner)
        assert runner.campaigns == settings.campaigns
        assert runner.eligible_source == "internal"
