"""Packed 96-bit decimal values, their 224-bit working form and the errors they raise."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Tuple

WORD_MASK = 0xFFFFFFFF
SIGN_MASK = 0x80000000
MAX_SCALE = 28
MANTISSA_BITS = 96
WIDE_MANTISSA_BITS = 224

# Bits 0-15 and 24-30 of the flags word must be zero.
_RESERVED_MASK = 0x7F00FFFF


class DecimalError(Exception):
    """Base class for every error raised by the decimal operations."""


class DecimalOverflowError(DecimalError, OverflowError):
    """The result is too large or is positive infinity."""


class DecimalUnderflowError(DecimalError, OverflowError):
    """The result is too small or is negative infinity."""


class DecimalDivisionByZeroError(DecimalError, ZeroDivisionError):
    """Division by zero was attempted."""


class InvalidDecimalError(DecimalError, ValueError):
    """An operand has reserved flag bits set or a scale above 28."""


class ConversionError(DecimalError, ValueError):
    """A value cannot be converted to or from a decimal."""


def _normalise_words(words: Iterable[int], count: int) -> Tuple[int, ...]:
    result = tuple(int(word) & WORD_MASK for word in words)
    if len(result) != count:
        raise ValueError(f"expected {count} words, got {len(result)}")
    return result


def _words_to_int(words: Iterable[int]) -> int:
    return sum(word << (32 * position) for position, word in enumerate(words))


def _int_to_words(value: int, count: int) -> Tuple[int, ...]:
    return tuple((value >> (32 * position)) & WORD_MASK for position in range(count))


def _scale_of(flags: int) -> int:
    return (flags & ~SIGN_MASK & WORD_MASK) >> 16


def _flags_valid(flags: int) -> bool:
    return not (flags & _RESERVED_MASK) and _scale_of(flags) <= MAX_SCALE


def _set_scale(flags: int, scale: int) -> int:
    return (flags & SIGN_MASK) | ((scale << 16) & WORD_MASK)


def _set_sign(flags: int, negative: bool) -> int:
    return flags | SIGN_MASK if negative else flags & ~SIGN_MASK & WORD_MASK


@dataclass(frozen=True)
class Decimal96:
    """A 96-bit mantissa with sign and power-of-ten scale, packed in four 32-bit words."""

    bits: Tuple[int, int, int, int] = (0, 0, 0, 0)

    def __post_init__(self) -> None:
        object.__setattr__(self, "bits", _normalise_words(self.bits, 4))

    @classmethod
    def from_parts(cls, mantissa: int, scale: int = 0, negative: bool = False) -> "Decimal96":
        """Build a value from an unsigned mantissa, a scale of 0..28 and a sign."""
        if mantissa < 0:
            raise ValueError("mantissa must not be negative")
        if mantissa >> MANTISSA_BITS:
            raise DecimalOverflowError("mantissa does not fit in 96 bits")
        if not 0 <= scale <= MAX_SCALE:
            raise InvalidDecimalError(f"scale {scale} is outside 0..{MAX_SCALE}")
        flags = (SIGN_MASK if negative else 0) | (scale << 16)
        return cls(_int_to_words(mantissa, 3) + (flags,))

    @property
    def negative(self) -> bool:
        return bool(self.bits[3] & SIGN_MASK)

    @property
    def scale(self) -> int:
        return _scale_of(self.bits[3])

    @property
    def mantissa(self) -> int:
        return _words_to_int(self.bits[:3])

    def is_zero(self) -> bool:
        """True when the mantissa is zero, whatever the sign and scale."""
        return not any(self.bits[:3])

    def is_valid(self) -> bool:
        """True when no reserved flag bit is set and the scale is at most 28."""
        return _flags_valid(self.bits[3])

    def get_bit(self, index: int) -> int:
        """Return mantissa bit ``index`` (0..95)."""
        if not 0 <= index < MANTISSA_BITS:
            raise IndexError(f"bit index {index} is outside 0..95")
        return (self.bits[index // 32] >> (index % 32)) & 1

    def with_bit(self, index: int, value: int) -> "Decimal96":
        """Return a copy with mantissa bit ``index`` set to ``value`` (0 or 1)."""
        if not 0 <= index < MANTISSA_BITS:
            raise IndexError(f"bit index {index} is outside 0..95")
        if value not in (0, 1):
            raise ValueError("bit value must be 0 or 1")
        words = list(self.bits)
        mask = 1 << (index % 32)
        words[index // 32] = words[index // 32] | mask if value else words[index // 32] & ~mask
        return Decimal96(tuple(words))

    def with_sign(self, negative: bool) -> "Decimal96":
        return Decimal96(self.bits[:3] + (_set_sign(self.bits[3], negative),))

    def with_scale(self, scale: int) -> "Decimal96":
        """Return a copy with the given scale; scales outside 0..28 leave the value unchanged."""
        if not 0 <= scale <= MAX_SCALE:
            return self
        return Decimal96(self.bits[:3] + (_set_scale(self.bits[3], scale),))


@dataclass(frozen=True)
class WideDecimal:
    """Working form: a 224-bit mantissa in seven words plus the flags word."""

    bits: Tuple[int, int, int, int, int, int, int, int] = (0,) * 8

    def __post_init__(self) -> None:
        object.__setattr__(self, "bits", _normalise_words(self.bits, 8))

    @classmethod
    def from_decimal(cls, value: Decimal96) -> "WideDecimal":
        return cls(value.bits[:3] + (0, 0, 0, 0) + (value.bits[3],))

    def to_decimal(self) -> Decimal96:
        """Keep the low 96 mantissa bits and the flags word."""
        return Decimal96(self.bits[:3] + (self.bits[7],))

    @property
    def negative(self) -> bool:
        return bool(self.bits[7] & SIGN_MASK)

    @property
    def scale(self) -> int:
        return _scale_of(self.bits[7])

    def is_zero(self) -> bool:
        return not any(self.bits[:7])

    def is_valid(self) -> bool:
        return _flags_valid(self.bits[7])

    def with_sign(self, negative: bool) -> "WideDecimal":
        return WideDecimal(self.bits[:7] + (_set_sign(self.bits[7], negative),))

    def with_scale(self, scale: int) -> "WideDecimal":
        """Return a copy with the given scale; a negative scale leaves the value unchanged."""
        if scale < 0:
            return self
        return WideDecimal(self.bits[:7] + (_set_scale(self.bits[7], scale),))

    def shift_left(self, count: int) -> "WideDecimal":
        """Shift the mantissa left, dropping bits beyond 224; the flags are kept."""
        if count < 0:
            raise ValueError("shift count must not be negative")
        shifted = (_words_to_int(self.bits[:7]) << count) & ((1 << WIDE_MANTISSA_BITS) - 1)
        return WideDecimal(_int_to_words(shifted, 7) + (self.bits[7],))

    def overflow_state(self) -> int:
        """0 when the value fits; 1 or 2 when the mantissa exceeds 96 bits
        (positive or negative); 3 when the scale exceeds 28."""
        state = 0
        if any(self.bits[3:7]):
            state = 2 if self.negative else 1
        if self.scale > MAX_SCALE:
            state = 3
        return state


def check_operands(*args) -> None:
    """Raise InvalidDecimalError if any operand is malformed."""
    for operand in args:
        if not operand.is_valid():
            raise InvalidDecimalError(f"malformed decimal operand: {operand!r}")