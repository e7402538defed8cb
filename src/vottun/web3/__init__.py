"""
Web3 utilities: unit conversion, hex codec, hashing and address checksums.

Pure functions with no I/O; safe to call from any thread.
"""

from .abi import encode_function_call, function_selector, json_method_to_string
from .address import is_address, is_address_checksum, to_checksum_address
from .codec import (
    hex_to_bin,
    hex_to_number,
    is_hex,
    is_negative,
    is_zero_prefixed,
    strip_zero,
    to_hex,
)
from .errors import (
    InvalidFormatError,
    PrecisionOverflowError,
    UnknownUnitError,
    Web3UtilsError,
)
from .hashing import SHA3_NULL_HASH, keccak256, sha3
from .units import (
    UNITS,
    Fractional,
    Integer,
    ParsedNumber,
    format_units,
    from_wei,
    is_decimal,
    to_bigint,
    to_ether,
    to_wei,
    unit_exponent,
    unit_multiplier,
)

__all__ = [
    # Units
    "UNITS",
    "Integer",
    "Fractional",
    "ParsedNumber",
    "to_bigint",
    "is_decimal",
    "to_wei",
    "from_wei",
    "to_ether",
    "format_units",
    "unit_multiplier",
    "unit_exponent",
    # Codec
    "to_hex",
    "hex_to_bin",
    "hex_to_number",
    "is_hex",
    "is_zero_prefixed",
    "is_negative",
    "strip_zero",
    # Hashing
    "SHA3_NULL_HASH",
    "keccak256",
    "sha3",
    # Addresses
    "is_address",
    "is_address_checksum",
    "to_checksum_address",
    # ABI
    "json_method_to_string",
    "function_selector",
    "encode_function_call",
    # Errors
    "Web3UtilsError",
    "InvalidFormatError",
    "UnknownUnitError",
    "PrecisionOverflowError",
]
