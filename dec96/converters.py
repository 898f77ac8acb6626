"""Conversions between 96-bit decimals, Python ints and single-precision floats."""

from __future__ import annotations

import math
import operator
import random
import struct

from .bits import ConversionError, Decimal96, check_operands
from .rounding import truncate_decimal

_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1
_MAX_MAGNITUDE = 7.9228162514264337593543950335e28
_MIN_MAGNITUDE = 1e-28
_SIGNIFICANT_DIGITS = 7
# Below 1e-22 fewer digits are kept so that the scale stays within 28.
_LAST_FULL_EXPONENT = 22
_MAX_SCALE = 28


def _to_single(value: float) -> float:
    """Round a Python float to the nearest single-precision value."""
    try:
        return struct.unpack("<f", struct.pack("<f", value))[0]
    except OverflowError as exc:
        raise ConversionError(f"{value!r} does not fit in a single-precision float") from exc


def _scientific(magnitude: float, precision: int) -> tuple[str, int]:
    """Return the significant digits and the exponent of ``magnitude`` in E notation."""
    mantissa_text, exponent_text = f"{magnitude:.{precision}E}".split("E")
    return mantissa_text.replace(".", ""), int(exponent_text)


def from_int(value: int) -> Decimal96:
    """Convert a 32-bit signed integer to a decimal with scale 0."""
    number = operator.index(value)
    if not _INT_MIN <= number <= _INT_MAX:
        raise ConversionError(f"{number} is outside the 32-bit integer range")
    return Decimal96.from_parts(abs(number), 0, number < 0)


def from_float(value: float) -> Decimal96:
    """Convert a float, taken at single precision, keeping 7 significant digits.

    Zero gives a plain positive zero.  NaN, infinities and magnitudes above
    the decimal range or below 1e-28 raise ConversionError.
    """
    number = float(value)
    if math.isnan(number) or math.isinf(number):
        raise ConversionError(f"{number!r} cannot be represented as a decimal")
    single = _to_single(number)
    if single == 0.0:
        return Decimal96()
    magnitude = abs(single)
    if magnitude > _MAX_MAGNITUDE or magnitude < _MIN_MAGNITUDE:
        raise ConversionError(f"{number!r} is outside the decimal range")
    negative = single < 0.0

    digits, exponent = _scientific(magnitude, _SIGNIFICANT_DIGITS - 1)
    if exponent < -_LAST_FULL_EXPONENT:
        original = -exponent
        digits, exponent = _scientific(magnitude, _MAX_SCALE - original)
        power = -(_MAX_SCALE - 1) if original == _MAX_SCALE and -exponent < _MAX_SCALE else -_MAX_SCALE
    else:
        power = exponent - (_SIGNIFICANT_DIGITS - 1)

    mantissa = int(digits)
    if power >= 0:
        return Decimal96.from_parts(mantissa * 10**power, 0, negative)
    scale = -power
    while scale and mantissa % 10 == 0:
        mantissa //= 10
        scale -= 1
    return Decimal96.from_parts(mantissa, scale, negative)


def to_int(value: Decimal96) -> int:
    """Drop the fractional digits and return the value as a 32-bit signed integer."""
    whole = truncate_decimal(value)
    limit = -_INT_MIN if whole.negative else _INT_MAX
    if whole.mantissa > limit:
        raise ConversionError("decimal does not fit in a 32-bit integer")
    return -whole.mantissa if whole.negative else whole.mantissa


def to_float(value: Decimal96) -> float:
    """Return the nearest single-precision float to the decimal."""
    check_operands(value)
    result = float(value.mantissa)
    if value.scale:
        result /= float(10**value.scale)
    if value.negative:
        result = -result
    return _to_single(result)


def random_float(left: float, right: float) -> float:
    """Return a random single-precision float between the two bounds, in either order."""
    if left > right:
        left, right = right, left
    return _to_single(left + (right - left) * random.random())