"""Shared pytest fixtures and test helpers for shipdisc tests."""

from __future__ import annotations

import logging
from collections.abc import Generator
from decimal import Decimal
from pathlib import Path
from typing import Any

import pytest
from click.testing import CliRunner

from shipdisc.domain.campaign import Campaign
from shipdisc.domain.contracts import Address, Cart, ShippingRate

EXPEDITED = "Canada Post Expedited (3 to 7 business days - exclude weekends)"
SURCHARGE_MESSAGE = (
    "FedEx has a mandatory Out-of-Delivery Area surcharge for your shipping zip code."
)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep a developer's SHIPDISC_* environment out of the tests."""
    for name in ("SHIPDISC_CONFIG", "SHIPDISC_CAMPAIGNS", "SHIPDISC_RUNNER__ELIGIBLE_SOURCE"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Undo configure_logging() side effects after each test."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    pkg = logging.getLogger("shipdisc")
    pkg_level = pkg.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    pkg.setLevel(pkg_level)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def isolated_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Change CWD to an empty temp directory so no shipdisc.toml is discovered."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def expedited_campaign() -> Campaign:
    """The zip-surcharge campaign: CA, partial M1R/A0B, fixed 18.75."""
    return make_campaign()


# ---------------------------------------------------------------------------
# Shared test helpers
# ---------------------------------------------------------------------------


def make_campaign(**overrides: Any) -> Campaign:
    """Build a Campaign from the expedited-surcharge defaults plus *overrides*."""
    fields: dict[str, Any] = {
        "country_code": "CA",
        "province_code": "BC",
        "zip_code_match_type": "partial",
        "zip_codes": ["M1R", "A0B"],
        "rate_match_type": "exact",
        "rate_names": [EXPEDITED],
        "discount_type": "fixed",
        "discount_amount": 18.75,
        "discount_message": SURCHARGE_MESSAGE,
    }
    fields.update(overrides)
    return Campaign.model_validate(fields)


def make_cart(
    country_code: str | None = "CA",
    zip_code: str | None = "M1R 1A1",
    province_code: str | None = "ON",
) -> Cart:
    return Cart(
        shipping_address=Address(
            country_code=country_code,
            province_code=province_code,
            zip=zip_code,
        )
    )


def make_rate(name: str = EXPEDITED, price: str = "40.00", source: str = "shopify") -> ShippingRate:
    return ShippingRate(name=name, price=Decimal(price), source=source)
