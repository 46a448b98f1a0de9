"""Tests for domain enums — parametrized."""

import pytest

from shipdisc.domain.types import ELIGIBLE_SOURCE, DiscountType, MatchMode

ENUM_CASES = [
    (MatchMode, {"exact", "partial", "all"}),
    (DiscountType, {"fixed", "percent"}),
]


@pytest.mark.parametrize(
    "enum_cls,expected_values",
    ENUM_CASES,
    ids=[cls.__name__ for cls, _ in ENUM_CASES],
)
def test_enum_members_and_values(enum_cls: type, expected_values: set[str]) -> None:
    """Each StrEnum has the expected members with matching string values."""
    actual_values = {e.value for e in enum_cls}
    assert actual_values == expected_values
    for member in enum_cls:
        assert member == member.value
        assert isinstance(member, str)


def test_eligible_source_is_platform_marker() -> None:
    assert ELIGIBLE_SOURCE == "shopify"
