"""
Ether unit conversion with exact integer arithmetic.

Every amount is handled as a Python ``int`` of wei; nothing goes through
``float`` or ``Decimal``.  Fractional inputs such as ``"100.001"`` are
split into their integer and fractional digits and scaled separately so
no precision is lost.

Example:
    >>> to_wei("100.001", "ether")
    100001000000000000000
    >>> from_wei("1500", "kwei")
    (1, 500)
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Union

from .errors import InvalidFormatError, PrecisionOverflowError, UnknownUnitError


UNITS: Mapping[str, int] = MappingProxyType({
    "wei": 1,
    "kwei": 10**3,
    "Kwei": 10**3,
    "babbage": 10**3,
    "femtoether": 10**3,
    "mwei": 10**6,
    "Mwei": 10**6,
    "lovelace": 10**6,
    "picoether": 10**6,
    "gwei": 10**9,
    "Gwei": 10**9,
    "shannon": 10**9,
    "nanoether": 10**9,
    "nano": 10**9,
    "szabo": 10**12,
    "microether": 10**12,
    "micro": 10**12,
    "finney": 10**15,
    "milliether": 10**15,
    "milli": 10**15,
    "ether": 10**18,
    "kether": 10**21,
    "grand": 10**21,
    "mether": 10**24,
    "gether": 10**27,
    "tether": 10**30,
})

_DECIMAL_RE = re.compile(r"-?([0-9]+\.?[0-9]*|\.[0-9]+)")
_HEX_BODY_RE = re.compile(r"[0-9a-f]*")


@dataclass(frozen=True)
class Integer:
    """A whole number parsed from a decimal or hex string."""

    value: int


@dataclass(frozen=True)
class Fractional:
    """A decimal number with a fractional part, kept as exact digits.

    ``"-12.034"`` becomes ``Fractional(12, 34, 3, True)``: the digit count
    keeps the leading zeros of the fraction that ``int`` would drop.
    """

    integer_part: int
    fractional_part: int
    fractional_digits: int
    negative: bool = False


ParsedNumber = Union[Integer, Fractional]


def unit_multiplier(unit: str) -> int:
    """Return the wei multiplier for ``unit``."""
    try:
        return UNITS[unit]
    except (KeyError, TypeError):
        raise UnknownUnitError(f"Unsupported unit: {unit!r}") from None


def unit_exponent(unit: str) -> int:
    """Number of decimal places a unit carries (18 for ether)."""
    return len(str(unit_multiplier(unit))) - 1


def is_decimal(value: str) -> bool:
    """True when ``to_bigint`` would read ``value`` in base 10."""
    return isinstance(value, str) and _DECIMAL_RE.fullmatch(value) is not None


def to_bigint(value: int | str) -> ParsedNumber:
    """
    Parse an integer, decimal string or hex string.

    Decimal-looking strings (``"42"``, ``"-1.5"``) are read in base 10,
    anything else that looks like hex (``"0x2a"``, ``"ff"``, ``""``) in
    base 16.

    Returns:
        ``Integer`` for whole numbers, ``Fractional`` when the input has a
        decimal point.

    Raises:
        InvalidFormatError: For more than one decimal point, non-numeric
            strings or unsupported types.
    """
    if isinstance(value, bool):
        raise InvalidFormatError("Booleans are not numbers")
    if isinstance(value, int):
        return Integer(value)
    if not isinstance(value, str):
        raise InvalidFormatError(
            f"Expected int or str, got {type(value).__name__}"
        )

    if value.count(".") > 1:
        raise InvalidFormatError(f"At most one decimal point allowed: {value!r}")

    if _DECIMAL_RE.fullmatch(value):
        negative = value.startswith("-")
        digits = value[1:] if negative else value
        if "." in digits:
            whole, fraction = digits.split(".")
            return Fractional(
                integer_part=int(whole or "0"),
                fractional_part=int(fraction or "0"),
                fractional_digits=len(fraction),
                negative=negative,
            )
        number = int(digits, 10)
        return Integer(-number if negative else number)

    lowered = value.lower()
    negative = lowered.startswith("-")
    if negative:
        lowered = lowered[1:]
    body = lowered.removeprefix("0x")
    if not _HEX_BODY_RE.fullmatch(body):
        raise InvalidFormatError(f"Not a decimal or hex number: {value!r}")
    number = int(body, 16) if body else 0
    return Integer(-number if negative else number)


def _divide(dividend: int, divisor: int) -> tuple[int, int]:
    """Integer division truncating toward zero, remainder keeps the dividend's sign."""
    quotient, remainder = divmod(abs(dividend), divisor)
    if dividend < 0:
        return -quotient, -remainder
    return quotient, remainder


def to_wei(number: int | str, unit: str) -> int:
    """
    Convert an amount expressed in ``unit`` to wei.

    Args:
        number: Whole number, decimal string (``"1.5"``) or hex string
        unit: Unit name from ``UNITS`` (e.g. "ether", "gwei")

    Returns:
        Exact amount in wei

    Raises:
        UnknownUnitError: If ``unit`` is not in the table
        PrecisionOverflowError: If ``number`` has more fractional digits
            than the unit has decimal places
    """
    parsed = to_bigint(number)
    multiplier = unit_multiplier(unit)

    if isinstance(parsed, Integer):
        return parsed.value * multiplier

    if parsed.fractional_digits > unit_exponent(unit):
        raise PrecisionOverflowError(
            f"{number!r} has {parsed.fractional_digits} fractional digits, "
            f"{unit} allows at most {unit_exponent(unit)}"
        )

    scaled_int = parsed.integer_part * multiplier
    scale_base = 10**parsed.fractional_digits
    scaled_frac = (parsed.fractional_part * multiplier) // scale_base
    wei = scaled_int + scaled_frac
    return -wei if parsed.negative else wei


def from_wei(number: int | str, unit: str) -> tuple[int, int]:
    """
    Convert a wei amount to ``unit``.

    Returns:
        ``(quotient, remainder)``; the remainder is in wei and is never
        rounded away.
    """
    parsed = to_bigint(number)
    if isinstance(parsed, Fractional):
        raise InvalidFormatError(f"Wei amounts must be whole numbers: {number!r}")
    return _divide(parsed.value, unit_multiplier(unit))


def to_ether(number: int | str, unit: str) -> tuple[int, int]:
    """Convert an amount in ``unit`` to ``(ether, remaining_wei)``."""
    return _divide(to_wei(number, unit), UNITS["ether"])


def format_units(number: int | str, unit: str = "ether") -> str:
    """Render a wei amount as an exact decimal string in ``unit``.

    >>> format_units(100001000000000000000)
    '100.001'
    """
    quotient, remainder = from_wei(number, unit)
    sign = "-" if quotient < 0 or remainder < 0 else ""
    whole = str(abs(quotient))
    if not remainder:
        return f"{sign}{whole}"
    fraction = str(abs(remainder)).rjust(unit_exponent(unit), "0").rstrip("0")
    return f"{sign}{whole}.{fraction}"
