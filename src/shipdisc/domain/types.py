"""Match modes and discount kinds.

Both are closed sets: every comparison in the domain branches on one of
these tags rather than dispatching through stored callables.
"""

from __future__ import annotations

from enum import StrEnum

ELIGIBLE_SOURCE = "shopify"


class MatchMode(StrEnum):
    """How a candidate string is compared against a configured list."""

    EXACT = "exact"
    PARTIAL = "partial"
    ALL = "all"


class DiscountType(StrEnum):
    """Kind of discount a campaign applies."""

    FIXED = "fixed"
    PERCENT = "percent"
