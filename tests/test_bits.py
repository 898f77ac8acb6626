import pytest

from dec96.bits import (
    Decimal96,
    DecimalOverflowError,
    InvalidDecimalError,
    WideDecimal,
    check_operands,
)


def test_from_parts_round_trip():
    value = Decimal96.from_parts(12345, 3, True)
    assert value.mantissa == 12345
    assert value.scale == 3
    assert value.negative is True


def test_from_parts_layout_matches_packed_words():
    assert Decimal96.from_parts(11, 1, False) == Decimal96((11, 0, 0, 65536))
    assert Decimal96.from_parts(111, 3, False) == Decimal96((111, 0, 0, 196608))
    assert Decimal96.from_parts(1, 0, True) == Decimal96((1, 0, 0, 0x80000000))


def test_words_are_masked_to_32_bits():
    value = Decimal96((-1, 0, 0, 0))
    assert value.bits[0] == 0xFFFFFFFF


def test_maximum_mantissa():
    value = Decimal96((0xFFFFFFFF, 0xFFFFFFFF, 0xFFFFFFFF, 0))
    assert value.mantissa == 79228162514264337593543950335


def test_wrong_word_count_rejected():
    with pytest.raises(ValueError):
        Decimal96((1, 2, 3))
    with pytest.raises(ValueError):
        WideDecimal((1, 2, 3, 4))


def test_from_parts_errors():
    with pytest.raises(DecimalOverflowError):
        Decimal96.from_parts(79228162514264337593543950335 + 1)
    with pytest.raises(InvalidDecimalError):
        Decimal96.from_parts(1, 29)
    with pytest.raises(ValueError):
        Decimal96.from_parts(-1)


@pytest.mark.parametrize(
    "flags",
    [1000000000, 0x1D0000, 0x1C0001, 0x1C8000, 0x11C0000, 0x401C0000, 0xFFFFFFFF],
)
def test_invalid_flags(flags):
    assert Decimal96((1, 0, 0, flags)).is_valid() is False


@pytest.mark.parametrize("flags", [0, 0x1C0000, 0x140000, 0x80000000, 0x80030000])
def test_valid_flags(flags):
    assert Decimal96((1, 0, 0, flags)).is_valid() is True


def test_is_zero_ignores_flags():
    assert Decimal96((0, 0, 0, 0x80030000)).is_zero() is True
    assert Decimal96((0, 0, 1, 0)).is_zero() is False


def test_with_scale_out_of_range_is_ignored():
    value = Decimal96.from_parts(5, 2, True)
    assert value.with_scale(29) == value
    assert value.with_scale(-1) == value


def test_with_scale_keeps_sign():
    value = Decimal96.from_parts(5, 2, True).with_scale(7)
    assert value.scale == 7
    assert value.negative is True
    assert value.mantissa == 5


def test_with_sign_keeps_scale():
    value = Decimal96.from_parts(5, 4, False)
    negated = value.with_sign(True)
    assert negated.negative is True
    assert negated.scale == 4
    assert negated.with_sign(False) == value


def test_bits_round_trip():
    base = Decimal96()
    changed = base.with_bit(40, 1)
    assert changed.get_bit(40) == 1
    assert changed.get_bit(39) == 0
    assert changed.with_bit(40, 0) == base


def test_bit_errors():
    with pytest.raises(IndexError):
        Decimal96().get_bit(96)
    with pytest.raises(IndexError):
        Decimal96().with_bit(-1, 1)
    with pytest.raises(ValueError):
        Decimal96().with_bit(3, 2)


def test_wide_round_trip():
    value = Decimal96((7, 8, 9, 0x80030000))
    wide = WideDecimal.from_decimal(value)
    assert wide.bits[7] == value.bits[3]
    assert wide.to_decimal() == value
    assert wide.scale == value.scale
    assert wide.negative is True


def test_wide_to_decimal_drops_high_words():
    wide = WideDecimal((7, 8, 9, 1, 1, 1, 1, 65536))
    assert wide.to_decimal() == Decimal96((7, 8, 9, 65536))


def test_wide_is_zero_and_valid():
    assert WideDecimal((0, 0, 0, 0, 0, 0, 0, 0x80000000)).is_zero() is True
    assert WideDecimal((0, 0, 0, 0, 0, 1, 0, 0)).is_zero() is False
    assert WideDecimal((1, 0, 0, 0, 0, 0, 0, 0x1D0000)).is_valid() is False


def test_wide_with_scale_and_sign():
    wide = WideDecimal.from_decimal(Decimal96.from_parts(3, 0))
    changed = wide.with_scale(40).with_sign(True)
    assert changed.scale == 40
    assert changed.negative is True
    assert wide.with_scale(-2) == wide


def test_shift_left_composes():
    wide = WideDecimal.from_decimal(Decimal96.from_parts(12345, 2, True))
    assert wide.shift_left(1).shift_left(2) == wide.shift_left(3)
    assert wide.shift_left(3).bits[7] == wide.bits[7]
    assert wide.shift_left(0) == wide


def test_shift_left_carries_and_drops():
    low = WideDecimal((0x80000000, 0, 0, 0, 0, 0, 0, 0))
    assert low.shift_left(1).bits[1] == 1
    top = WideDecimal((0, 0, 0, 0, 0, 0, 0x80000000, 0))
    assert top.shift_left(1).is_zero() is True
    with pytest.raises(ValueError):
        top.shift_left(-1)


def test_overflow_state():
    assert WideDecimal.from_decimal(Decimal96.from_parts(5)).overflow_state() == 0
    assert WideDecimal((0, 0, 0, 1, 0, 0, 0, 0)).overflow_state() == 1
    assert WideDecimal((0, 0, 0, 1, 0, 0, 0, 0x80000000)).overflow_state() == 2
    assert WideDecimal((1, 0, 0, 0, 0, 0, 0, 0x1D0000)).overflow_state() == 3
    assert WideDecimal((0, 0, 0, 1, 0, 0, 0, 0x1D0000)).overflow_state() == 3


def test_check_operands_rejects_malformed():
    good = Decimal96.from_parts(1)
    with pytest.raises(InvalidDecimalError):
        check_operands(good, Decimal96((1, 0, 0, 0x1C0001)))
    with pytest.raises(InvalidDecimalError):
        check_operands(WideDecimal((1, 0, 0, 0, 0, 0, 0, 0x1D0000)))