"""Small command that subtracts two fixed decimals and prints the outcome."""

from __future__ import annotations

from typing import Optional, Sequence

from .arithmetic import sub
from .bits import Decimal96, DecimalOverflowError, DecimalUnderflowError
from .text import format_decimal

# 12345677.987654345678987654346
FIRST = Decimal96(
    (
        0b10010001000010101111010011001010,
        0b11000000010001011101010111110010,
        0b00100111111001000001101100000000,
        0b00000000000101010000000000000000,
    )
)

# 87654323456.9876545678987653
SECOND = Decimal96(
    (
        0b00010001110011011101000110000101,
        0b11110101101111000110111111000000,
        0b00000010110101010000111100111111,
        0b00000000000100000000000000000000,
    )
)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Print the status code of ``FIRST - SECOND`` and then the difference."""
    result = Decimal96()
    try:
        result = sub(FIRST, SECOND)
        status = 0
    except DecimalUnderflowError:
        status = 2
    except DecimalOverflowError:
        status = 1
    print(status)
    print(format_decimal(result))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())