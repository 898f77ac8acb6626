# dec96

`dec96` is a decimal number type that uses the layout of a 128-bit decimal
record. It holds a 96-bit unsigned mantissa, a sign bit and a power-of-ten
scale from 0 to 28. The value is `(-1)**sign * mantissa / 10**scale`. This
gives about 28 to 29 significant digits, and decimal fractions carry no binary
rounding error.

## Installing

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Values

`dec96.bits.Decimal96` is an immutable dataclass that wraps four 32-bit words,
`bits`. Words 0 to 2 hold the mantissa and word 3 holds the flags.

- `Decimal96.from_parts(mantissa, scale, negative)` builds a value.
- The properties `mantissa`, `scale` and `negative` return the parts.
- `with_sign`, `with_scale` and `with_bit` return modified copies.
- `get_bit(index)` reads one mantissa bit.
- `is_zero()` is true when the mantissa is zero.
- `is_valid()` is true when no reserved flag bit is set and the scale is at most 28.

`WideDecimal` is a working form with a 224-bit mantissa. `WideDecimal.from_decimal`
converts a value into it and `to_decimal()` converts it back.
`check_operands(*values)` raises `InvalidDecimalError` for any malformed value.

All operations are plain functions. `Decimal96` does not overload `+`, `<` or
the other operators.

```python
from dec96.bits import Decimal96
from dec96.arithmetic import add, div
from dec96.text import format_decimal, parse_decimal

a = Decimal96.from_parts(12345, 3, False)   # 12.345
b = parse_decimal("-1,5")                   # a comma separates the fraction
print(format_decimal(add(a, b)))            # 10,845
print(format_decimal(div(Decimal96.from_parts(1, 0, False),
                         Decimal96.from_parts(3, 0, False))))
# 0,3333333333333333333333333333
```

## Operations

### `dec96.arithmetic`

- `add`, `sub` and `mul`: when an exact result has too many digits, or a scale
  above 28, it is rounded half to even until it fits.
- `mul` returns a plain positive zero when either operand is zero.
- `div` keeps the whole integer part of the quotient and then further digits,
  up to 28 significant digits in total. If the divisor's scale exceeds the
  dividend's scale by more than one, the limit is 29 digits. Digits beyond the
  limit are cut off.
- `normalize(first, second)` brings two `WideDecimal` values to a common scale.

### `dec96.comparison`

`is_less`, `is_less_or_equal`, `is_greater`, `is_greater_or_equal`, `is_equal`
and `is_not_equal` compare by numeric value. For example, `1,0` equals `1`,
and zeros of either sign are equal.

### `dec96.rounding`

- `floor_decimal` rounds towards negative infinity.
- `round_decimal` rounds half to even.
- `truncate_decimal` drops the fraction.
- `negate` flips the sign.
- `wide_floor`, `wide_round` and `wide_truncate` do the same for `WideDecimal`.

### `dec96.converters`

- `from_int` accepts 32-bit signed integers only.
- `from_float` takes the float at single precision and keeps 7 significant
  digits.
- `to_int` truncates and requires the result to fit 32 bits.
- `to_float` returns the nearest single-precision value.
- `random_float(left, right)` returns a random single-precision float between
  the two bounds.

### `dec96.text`

- `parse_decimal` accepts an optional `-`, digits, and optionally `,` followed
  by at most 28 fraction digits.
- `format_decimal` and `format_wide` write the same form.

## Errors

The operations report failures with these exceptions from `dec96.bits`. All of
them derive from `DecimalError`:

- `DecimalOverflowError`: the result is too large. `div` uses this error for
  overflow of either sign.
- `DecimalUnderflowError`: for `add`, `sub` and `mul`, the result is negative
  and too large in magnitude, or it is non-zero but too close to zero.
- `DecimalDivisionByZeroError`: the divisor is zero.
- `InvalidDecimalError`: an operand has reserved flag bits set, or a scale
  above 28.
- `ConversionError`: the value cannot be represented in the target type, or
  the text is not a decimal number.

Building a value directly can also raise the built-in errors:

- `from_parts` raises `ValueError` for a negative mantissa.
- `get_bit` and `with_bit` raise `IndexError` for a bit index outside 0 to 95.

## Demo

```
dec96-demo
```

This runs one fixed subtraction. It prints the status code on the first line:
0 for success, 1 for overflow, 2 for underflow. It prints the difference on
the second line.

## Limits

`dec96` is a library of value operations only. It has no interactive
calculator and no command that reads numbers from the user. The demo command
runs a single built-in example.