"""Floor, round, truncate and negate for 96-bit and wide decimal values."""

from __future__ import annotations

from .bits import (
    SIGN_MASK,
    WIDE_MANTISSA_BITS,
    Decimal96,
    DecimalOverflowError,
    InvalidDecimalError,
    WideDecimal,
    check_operands,
)


def _wide_mantissa(value: WideDecimal) -> int:
    return sum(word << (32 * position) for position, word in enumerate(value.bits[:7]))


def _wide_integer(mantissa: int, negative: bool) -> WideDecimal:
    if mantissa >> WIDE_MANTISSA_BITS:
        raise DecimalOverflowError("mantissa does not fit in 224 bits")
    words = tuple((mantissa >> (32 * position)) & 0xFFFFFFFF for position in range(7))
    return WideDecimal(words + (SIGN_MASK if negative else 0,))


def _round_half_even(quotient: int, remainder: int, unit: int) -> int:
    twice = remainder * 2
    if twice > unit or (twice == unit and quotient % 2):
        return quotient + 1
    return quotient


def floor_decimal(value: Decimal96) -> Decimal96:
    """Round towards negative infinity to an integer."""
    check_operands(value)
    if value.scale == 0:
        return value
    quotient, remainder = divmod(value.mantissa, 10 ** value.scale)
    if value.negative and remainder:
        quotient += 1
    return Decimal96.from_parts(quotient, 0, value.negative)


def round_decimal(value: Decimal96) -> Decimal96:
    """Round to the nearest integer, ties to even."""
    check_operands(value)
    if value.scale == 0:
        return value
    unit = 10 ** value.scale
    quotient, remainder = divmod(value.mantissa, unit)
    return Decimal96.from_parts(
        _round_half_even(quotient, remainder, unit), 0, value.negative
    )


def truncate_decimal(value: Decimal96) -> Decimal96:
    """Drop every fractional digit, keeping the sign."""
    check_operands(value)
    if value.scale == 0:
        return value
    return Decimal96.from_parts(value.mantissa // 10 ** value.scale, 0, value.negative)


def negate(value: Decimal96) -> Decimal96:
    """Multiply by -1."""
    check_operands(value)
    return Decimal96.from_parts(value.mantissa, value.scale, not value.negative)


def wide_floor(value: WideDecimal) -> WideDecimal:
    """Round a wide value towards negative infinity to an integer."""
    if value.scale == 0:
        return value
    quotient, remainder = divmod(_wide_mantissa(value), 10 ** value.scale)
    if value.negative and remainder:
        quotient += 1
    return _wide_integer(quotient, value.negative)


def wide_truncate(value: WideDecimal) -> WideDecimal:
    """Drop the fractional digits of a wide value, keeping the sign."""
    if value.scale == 0:
        return value
    return _wide_integer(_wide_mantissa(value) // 10 ** value.scale, value.negative)


def wide_round(value: WideDecimal) -> WideDecimal:
    """Round a wide value to the nearest integer, ties to even."""
    if not value.is_valid():
        raise InvalidDecimalError(f"malformed decimal operand: {value!r}")
    if value.scale == 0:
        return value
    unit = 10 ** value.scale
    quotient, remainder = divmod(_wide_mantissa(value), unit)
    rounded = _round_half_even(quotient, remainder, unit) & ((1 << WIDE_MANTISSA_BITS) - 1)
    return _wide_integer(rounded, value.negative)