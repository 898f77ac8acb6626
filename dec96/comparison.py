"""Ordering and equality of 96-bit decimals by numeric value."""

from __future__ import annotations

from .bits import MAX_SCALE, Decimal96, check_operands


def _key(value: Decimal96) -> int:
    magnitude = value.mantissa * 10 ** (MAX_SCALE - value.scale)
    return -magnitude if value.negative else magnitude


def _keys(first: Decimal96, second: Decimal96):
    check_operands(first, second)
    return _key(first), _key(second)


def is_less(first: Decimal96, second: Decimal96) -> bool:
    """True when ``first < second``."""
    left, right = _keys(first, second)
    return left < right


def is_less_or_equal(first: Decimal96, second: Decimal96) -> bool:
    """True when ``first <= second``."""
    left, right = _keys(first, second)
    return left <= right


def is_greater(first: Decimal96, second: Decimal96) -> bool:
    """True when ``first > second``."""
    left, right = _keys(first, second)
    return left > right


def is_greater_or_equal(first: Decimal96, second: Decimal96) -> bool:
    """True when ``first >= second``."""
    left, right = _keys(first, second)
    return left >= right


def is_equal(first: Decimal96, second: Decimal96) -> bool:
    """True when both have the same value; zeros of either sign are equal."""
    left, right = _keys(first, second)
    return left == right


def is_not_equal(first: Decimal96, second: Decimal96) -> bool:
    """True when the values differ."""
    return not is_equal(first, second)