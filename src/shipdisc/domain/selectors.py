"""Zip code and rate name selectors.

Both selectors normalize their configured strings once at construction and
the candidate on every call, then defer to :func:`match_any`.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from shipdisc.domain.contracts import ShippingRateLike
from shipdisc.domain.types import MatchMode


def as_text(value: Any) -> str:
    """Coerce *value* to text. ``None`` becomes the empty string."""
    if value is None:
        return ""
    return str(value)


def normalize_upper(value: Any) -> str:
    """Uppercase and strip surrounding whitespace.

    Examples:
        >>> normalize_upper(" m1r 1a1 ")
        'M1R 1A1'
        >>> normalize_upper(None)
        ''
    """
    return as_text(value).upper().strip()


def normalize_lower(value: Any) -> str:
    """Lowercase and strip surrounding whitespace."""
    return as_text(value).lower().strip()


def match_any(mode: MatchMode, candidate: str, needles: Iterable[str]) -> bool:
    """Compare *candidate* against every needle according to *mode*.

    ``ALL`` matches unconditionally. ``EXACT`` and ``PARTIAL`` over an empty
    list never match.
    """
    if mode is MatchMode.ALL:
        return True
    if mode is MatchMode.EXACT:
        return any(candidate == needle for needle in needles)
    return any(needle in candidate for needle in needles)


class ZipSelector:
    """Decides whether a postal code satisfies a campaign's zip predicate."""

    def __init__(self, match_type: MatchMode | str, zip_codes: Iterable[Any] | None) -> None:
        self.match_type = MatchMode(match_type)
        self.zip_codes: tuple[str, ...] = tuple(normalize_upper(z) for z in zip_codes or ())

    def matches(self, zip_code: Any) -> bool:
        return match_any(self.match_type, normalize_upper(zip_code), self.zip_codes)


class RateNameSelector:
    """Decides whether a shipping rate's name satisfies a campaign's name predicate.

    The rate name is lowercased but, unlike the configured names, not
    stripped before comparison.
    """

    def __init__(self, match_type: MatchMode | str, rate_names: Iterable[Any] | None) -> None:
        self.match_type = MatchMode(match_type)
        self.rate_names: tuple[str, ...] = tuple(normalize_lower(n) for n in rate_names or ())

    def matches(self, shipping_rate: ShippingRateLike) -> bool:
        if self.match_type is MatchMode.ALL:
            return True
        name = as_text(getattr(shipping_rate, "name", None)).lower()
        return match_any(self.match_type, name, self.rate_names)
