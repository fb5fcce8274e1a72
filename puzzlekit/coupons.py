"""Filtering and ordering coupon codes by business line."""

from collections.abc import Sequence

_CATEGORIES = ("electronics", "grocery", "pharmacy", "restaurant")


def is_valid(s: str) -> bool:
    """Return whether ``s`` is non-empty and made of letters, digits and
    underscores only."""
    return bool(s) and all(c == "_" or c.isalpha() or c.isdecimal() for c in s)


def validate_coupons(
    code: Sequence[str],
    business_line: Sequence[str],
    is_active: Sequence[bool],
) -> list[str]:
    """Return the valid, active coupon codes, grouped by business line in a
    fixed order and sorted within each group."""
    if len(business_line) < len(code) or len(is_active) < len(code):
        raise ValueError("business_line and is_active must cover every code")

    groups: dict[str, list[str]] = {category: [] for category in _CATEGORIES}
    for coupon, line, active in zip(code, business_line, is_active):
        if line in groups and active and is_valid(coupon):
            groups[line].append(coupon)

    return [coupon for category in _CATEGORIES for coupon in sorted(groups[category])]