"""Tests for exact unit conversion (vottun.web3.units)."""

from __future__ import annotations

import pytest

from vottun.web3.errors import InvalidFormatError, PrecisionOverflowError, UnknownUnitError
from vottun.web3.units import (
    UNITS,
    Fractional,
    Integer,
    format_units,
    from_wei,
    is_decimal,
    to_bigint,
    to_ether,
    to_wei,
    unit_exponent,
)


class TestToBigint:
    """Tests for decimal/hex disambiguation in to_bigint."""

    def test_native_int(self) -> None:
        assert to_bigint(10**40) == Integer(10**40)

    def test_decimal_string(self) -> None:
        assert to_bigint("42") == Integer(42)
        assert to_bigint("-42") == Integer(-42)

    def test_decimal_digits_are_base_10(self) -> None:
        # "10" also looks like hex; decimal wins
        assert to_bigint("10") == Integer(10)

    def test_hex_strings(self) -> None:
        assert to_bigint("0x2a") == Integer(42)
        assert to_bigint("0X2A") == Integer(42)
        assert to_bigint("ff") == Integer(255)
        assert to_bigint("-0x10") == Integer(-16)

    def test_empty_string_is_zero(self) -> None:
        assert to_bigint("") == Integer(0)
        assert to_bigint("0x") == Integer(0)

    def test_fractional(self) -> None:
        assert to_bigint("12.034") == Fractional(12, 34, 3, False)

    def test_negative_fractional(self) -> None:
        assert to_bigint("-1.5") == Fractional(1, 5, 1, True)
        assert to_bigint("-0.25") == Fractional(0, 25, 2, True)

    def test_leading_or_trailing_point(self) -> None:
        assert to_bigint(".5") == Fractional(0, 5, 1, False)
        assert to_bigint("7.") == Fractional(7, 0, 0, False)

    def test_multiple_points_rejected(self) -> None:
        with pytest.raises(InvalidFormatError, match="decimal point"):
            to_bigint("1.2.3")

    def test_garbage_rejected(self) -> None:
        with pytest.raises(InvalidFormatError):
            to_bigint("12abz")
        with pytest.raises(InvalidFormatError):
            to_bigint("0xzz")

    def test_trailing_newline_rejected(self) -> None:
        for value in ("1.5\n", "1.\n", "ff\n", "12\n"):
            with pytest.raises(InvalidFormatError):
                to_bigint(value)

    def test_non_ascii_digits_rejected(self) -> None:
        with pytest.raises(InvalidFormatError):
            to_bigint("\u0661\u0662")

    def test_is_decimal(self) -> None:
        assert is_decimal("100.001")
        assert is_decimal("-.5")
        assert not is_decimal("1e3")
        assert not is_decimal("0x10")
        assert not is_decimal("1.5\n")

    def test_unsupported_types(self) -> None:
        with pytest.raises(InvalidFormatError):
            to_bigint(True)
        with pytest.raises(InvalidFormatError):
            to_bigint(1.5)  # type: ignore[arg-type]
        with pytest.raises(InvalidFormatError):
            to_bigint(None)  # type: ignore[arg-type]


class TestToWei:
    """Tests for to_wei."""

    def test_kwei(self) -> None:
        assert to_wei("1", "kwei") == 1000
        assert to_wei("1000", "wei") == to_wei("1", "kwei")

    def test_fractional_ether_is_exact(self) -> None:
        assert to_wei("100.001", "ether") == 100001000000000000000

    def test_negative_fractional(self) -> None:
        assert to_wei("-100.001", "ether") == -100001000000000000000

    def test_smallest_ether_fraction(self) -> None:
        assert to_wei("0.000000000000000001", "ether") == 1

    def test_full_precision_accepted(self) -> None:
        assert to_wei("1.123456789012345678", "ether") == 1123456789012345678

    def test_fractional_gwei(self) -> None:
        assert to_wei("1.5", "gwei") == 1_500_000_000

    def test_int_and_hex_input(self) -> None:
        assert to_wei(2, "ether") == 2 * 10**18
        assert to_wei("0x10", "gwei") == 16 * 10**9

    def test_large_units_exceed_64_bits(self) -> None:
        assert to_wei("1", "tether") == 10**30
        assert to_wei("1000000", "ether") == 10**24

    def test_precision_overflow(self) -> None:
        with pytest.raises(PrecisionOverflowError):
            to_wei("1.1234567890123456789", "ether")

    def test_trailing_newline_is_not_a_digit(self) -> None:
        with pytest.raises(InvalidFormatError):
            to_wei("1.5\n", "ether")

    def test_wei_has_no_fraction(self) -> None:
        with pytest.raises(PrecisionOverflowError):
            to_wei("1.5", "wei")

    def test_unknown_unit(self) -> None:
        with pytest.raises(UnknownUnitError):
            to_wei("1", "bogus-unit")

    def test_unit_names_are_case_sensitive(self) -> None:
        assert to_wei("1", "Gwei") == to_wei("1", "gwei")
        with pytest.raises(UnknownUnitError):
            to_wei("1", "ETHER")


class TestFromWei:
    """Tests for from_wei and to_ether."""

    def test_quotient_and_remainder(self) -> None:
        assert from_wei("1500", "kwei") == (1, 500)

    def test_negative_truncates_toward_zero(self) -> None:
        assert from_wei("-1500", "kwei") == (-1, -500)

    def test_fractional_input_rejected(self) -> None:
        with pytest.raises(InvalidFormatError):
            from_wei("1.5", "kwei")

    def test_unknown_unit(self) -> None:
        with pytest.raises(UnknownUnitError):
            from_wei("1", "noether")

    @pytest.mark.parametrize("unit", sorted(UNITS))
    @pytest.mark.parametrize("amount", ["0", "1", "123456789"])
    def test_round_trip(self, amount: str, unit: str) -> None:
        assert from_wei(to_wei(amount, unit), unit) == (int(amount), 0)

    def test_to_ether(self) -> None:
        assert to_ether("1", "kether") == (1000, 0)
        assert to_ether("1500", "finney") == (1, 500_000_000_000_000_000)


class TestFormatUnits:
    """Tests for format_units."""

    def test_ether(self) -> None:
        assert format_units(100001000000000000000) == "100.001"
        assert format_units(10**18) == "1"
        assert format_units(0) == "0"

    def test_negative(self) -> None:
        assert format_units(-5 * 10**17) == "-0.5"

    def test_other_unit(self) -> None:
        assert format_units("1500", "kwei") == "1.5"
        assert format_units("1", "gwei") == "0.000000001"


class TestUnitTable:
    """Tests for the unit table."""

    def test_read_only(self) -> None:
        with pytest.raises(TypeError):
            UNITS["ether"] = 1  # type: ignore[index]

    def test_multipliers_positive_powers_of_ten(self) -> None:
        for unit, multiplier in UNITS.items():
            assert multiplier == 10 ** unit_exponent(unit)

    def test_exponents(self) -> None:
        assert unit_exponent("wei") == 0
        assert unit_exponent("ether") == 18
        assert unit_exponent("tether") == 30
