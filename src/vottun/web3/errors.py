from __future__ import annotations


class Web3UtilsError(ValueError):
    pass


class InvalidFormatError(Web3UtilsError):
    """Malformed numeric or hex input."""


class UnknownUnitError(Web3UtilsError):
    """Unit name not present in the unit table."""


class PrecisionOverflowError(Web3UtilsError):
    """More fractional digits than the unit can hold in whole wei."""
