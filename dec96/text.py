"""Decimal text form: digits with a comma as the decimal separator."""

from __future__ import annotations

from .bits import (
    MANTISSA_BITS,
    MAX_SCALE,
    ConversionError,
    Decimal96,
    DecimalOverflowError,
    WideDecimal,
)

_DIGITS = frozenset("0123456789")
_MAX_FORMAT_SCALE = 127


def _wide_mantissa(value: WideDecimal) -> int:
    return sum(word << (32 * position) for position, word in enumerate(value.bits[:7]))


def format_wide(value: WideDecimal) -> str:
    """Render a wide value, e.g. ``-12,345``; scales above 127 render as an empty string."""
    digits = str(_wide_mantissa(value))
    scale = value.scale
    sign = "-" if value.negative else ""
    if scale == 0:
        return sign + digits
    point = len(digits) - scale
    if point > 0:
        return f"{sign}{digits[:point]},{digits[point:]}"
    if scale <= _MAX_FORMAT_SCALE:
        return f"{sign}0,{'0' * -point}{digits}"
    return ""


def format_decimal(value: Decimal96) -> str:
    """Render a 96-bit value in the same form as format_wide."""
    return format_wide(WideDecimal.from_decimal(value))


def parse_decimal(text: str) -> Decimal96:
    """Parse an optional ``-``, integer digits and an optional ``,`` with fraction digits."""
    negative = text.startswith("-")
    body = text[1:] if negative else text
    integer, _, fraction = body.partition(",")
    digits = integer + fraction
    if not _DIGITS.issuperset(digits):
        raise ConversionError(f"not a decimal number: {text!r}")
    mantissa = int(digits) if digits else 0
    if mantissa >> MANTISSA_BITS:
        raise DecimalOverflowError(f"{text!r} does not fit in 96 bits")
    if len(fraction) > MAX_SCALE:
        raise ConversionError(f"{text!r} has more than {MAX_SCALE} fraction digits")
    return Decimal96.from_parts(mantissa, len(fraction), negative)