"""Helpers for UUIDs written as 32 hex digits without dashes."""

from __future__ import annotations

import string

_HEX_DIGITS = frozenset(string.hexdigits)
_DASH_POSITIONS = (8, 12, 16, 20)


def valid_undashed_uuid(value: str) -> bool:
    """True if ``value`` is exactly 32 hexadecimal digits."""
    return len(value) == 32 and all(char in _HEX_DIGITS for char in value)


def canonicalize_uuid(value: str) -> str:
    """Insert the dashes of the 8-4-4-4-12 form into an undashed UUID."""
    if not valid_undashed_uuid(value):
        raise ValueError("Invalid undashed UUID provided")
    bounds = (0, *_DASH_POSITIONS, len(value))
    return "-".join(value[start:end] for start, end in zip(bounds, bounds[1:]))