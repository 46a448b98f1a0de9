"""Unified settings — CLI flags, env vars, and TOML config in one object.

Priority chain (highest to lowest):
  1. Init kwargs  — CLI flags passed by Click
  2. Env vars     — ``SHIPDISC_*`` prefix, ``__`` for nested fields
  3. TOML file    — ``shipdisc.toml`` discovered via walk-up
  4. Code defaults — RunnerConfig and DEFAULT_CAMPAIGNS

The campaign tuple is built here, once, and handed to the runner through
:meth:`ShipdiscSettings.build_runner`.
"""

from __future__ import annotations

import threading
from pathlib import Path
from typing import TYPE_CHECKING, Any

from pydantic import Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from shipdisc.config.discovery import find_config, read_toml
from shipdisc.config.models import DEFAULT_CAMPAIGNS, RunnerConfig
from shipdisc.domain.campaign import Campaign

if TYPE_CHECKING:
    from shipdisc.domain.runner import CampaignRunner


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Read settings from a discovered ``shipdisc.toml``."""

    def __init__(self, settings_cls: type[BaseSettings], toml_path: Path | None) -> None:
        super().__init__(settings_cls)
        self._data: dict[str, Any] = {}
        if toml_path and toml_path.is_file():
            self._data = read_toml(toml_path)

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        """Return ``(value, field_name, value_is_complex)``."""
        val = self._data.get(field_name)
        return val, field_name, field_name in self._data

    def __call__(self) -> dict[str, Any]:
        return self._data


# The TOML path has to reach settings_customise_sources, which is a classmethod.
_tls = threading.local()


class ShipdiscSettings(BaseSettings):
    """Frozen settings for one process.

    Attributes:
        config_path: The TOML file the settings were read from, if any.
        campaigns: Ordered campaigns; order decides how discounts compound.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "SHIPDISC_",
        "env_nested_delimiter": "__",
    }

    config_path: Path | None = None

    # --- CLI flags ---
    json_output: bool = False
    verbose: bool = False
    log_json: bool = False

    # --- TOML sections ---
    runner: RunnerConfig = Field(default_factory=RunnerConfig)
    campaigns: tuple[Campaign, ...] = DEFAULT_CAMPAIGNS

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Insert TOML source between env vars and defaults."""
        toml_path = getattr(_tls, "toml_path", None)
        return (
            init_settings,
            env_settings,
            TomlSettingsSource(settings_cls, toml_path),
        )

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        cwd: Path | None = None,
        **cli_flags: Any,
    ) -> ShipdiscSettings:
        """Construct settings from a CLI invocation.

        An explicit *config_path* that does not exist is ignored, leaving
        env vars and defaults in place.
        """
        toml_path: Path | None
        if config_path:
            p = Path(config_path)
            toml_path = p if p.is_file() else None
        else:
            toml_path = find_config(cwd)

        _tls.toml_path = toml_path
        try:
            return cls(config_path=toml_path, **cli_flags)
        finally:
            _tls.toml_path = None

    def build_runner(self) -> CampaignRunner:
        """Create a CampaignRunner over this process's campaigns."""
        from shipdisc.domain.runner import CampaignRunner

        return CampaignRunner(self.campaigns, eligible_source=self.runner.eligible_source)
