"""Addition, subtraction, multiplication and division of 96-bit decimals."""

from __future__ import annotations

from typing import Tuple

from .bits import (
    MANTISSA_BITS,
    MAX_SCALE,
    WIDE_MANTISSA_BITS,
    WORD_MASK,
    Decimal96,
    DecimalDivisionByZeroError,
    DecimalOverflowError,
    DecimalUnderflowError,
    WideDecimal,
    check_operands,
)

_WIDE_MASK = (1 << WIDE_MANTISSA_BITS) - 1
_DIV_DIGITS = 28


def _wide_mantissa(value: WideDecimal) -> int:
    return sum(word << (32 * position) for position, word in enumerate(value.bits[:7]))


def _rescale_wide(value: WideDecimal, scale: int) -> WideDecimal:
    mantissa = (_wide_mantissa(value) * 10 ** (scale - value.scale)) & _WIDE_MASK
    words = tuple((mantissa >> (32 * position)) & WORD_MASK for position in range(7))
    return WideDecimal(words + (value.bits[7],)).with_scale(scale)


def normalize(first: WideDecimal, second: WideDecimal) -> Tuple[WideDecimal, WideDecimal]:
    """Bring two wide values to the larger of their scales, keeping their signs.

    Mantissa bits beyond 224 are dropped.
    """
    target = max(first.scale, second.scale)
    return _rescale_wide(first, target), _rescale_wide(second, target)


def _signed(value: Decimal96, scale: int) -> int:
    magnitude = value.mantissa * 10 ** (scale - value.scale)
    return -magnitude if value.negative else magnitude


def _fit(mantissa: int, scale: int, negative: bool, signed_overflow: bool = True) -> Decimal96:
    """Round an exact result (ties to even) until it fits 96 bits and scale 28."""
    if mantissa == 0:
        return Decimal96()
    for drop in range(max(0, scale - MAX_SCALE), scale + 1):
        unit = 10 ** drop
        quotient, remainder = divmod(mantissa, unit)
        twice = remainder * 2
        if twice > unit or (twice == unit and quotient % 2):
            quotient += 1
        if not quotient >> MANTISSA_BITS:
            break
    else:
        if negative and signed_overflow:
            raise DecimalUnderflowError("result is too small to be represented")
        raise DecimalOverflowError("result is too large to be represented")
    if quotient == 0:
        raise DecimalUnderflowError("result is too close to zero to be represented")
    return Decimal96.from_parts(quotient, scale - drop, negative)


def add(first: Decimal96, second: Decimal96) -> Decimal96:
    """Return ``first + second``."""
    check_operands(first, second)
    scale = max(first.scale, second.scale)
    total = _signed(first, scale) + _signed(second, scale)
    return _fit(abs(total), scale, total < 0)


def sub(first: Decimal96, second: Decimal96) -> Decimal96:
    """Return ``first - second``."""
    check_operands(first, second)
    scale = max(first.scale, second.scale)
    difference = _signed(first, scale) - _signed(second, scale)
    return _fit(abs(difference), scale, difference < 0)


def mul(first: Decimal96, second: Decimal96) -> Decimal96:
    """Return ``first * second``; a zero operand gives a plain positive zero."""
    check_operands(first, second)
    if first.is_zero() or second.is_zero():
        return Decimal96()
    negative = first.negative != second.negative
    return _fit(first.mantissa * second.mantissa, first.scale + second.scale, negative)


def div(first: Decimal96, second: Decimal96) -> Decimal96:
    """Return ``first / second``.

    The quotient keeps its whole integer part and further digits up to 28
    significant ones (29 when the divisor's scale exceeds the dividend's by
    more than one); the digits beyond are cut off.  Overflow is always
    reported as DecimalOverflowError, whatever the sign.
    """
    check_operands(first, second)
    if second.is_zero():
        raise DecimalDivisionByZeroError("division by zero")
    negative = first.negative != second.negative
    if first.is_zero():
        return Decimal96.from_parts(0, 0, negative)
    limit = _DIV_DIGITS + (1 if second.scale - first.scale > 1 else 0)
    divisor = second.mantissa
    quotient, remainder = divmod(first.mantissa, divisor)
    significant = len(str(quotient)) if quotient else 0
    fraction_digits = 0
    while remainder and significant < limit:
        digit, remainder = divmod(remainder * 10, divisor)
        quotient = quotient * 10 + digit
        fraction_digits += 1
        if quotient:
            significant += 1
    scale = first.scale - second.scale + fraction_digits
    if scale < 0:
        quotient *= 10 ** -scale
        scale = 0
    return _fit(quotient, scale, negative, signed_overflow=False)