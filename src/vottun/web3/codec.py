from __future__ import annotations

import re

from .errors import InvalidFormatError

_HEX_RE = re.compile(r"(0x)?[0-9a-fA-F]*")
_HEX_BODY_RE = re.compile(r"[0-9a-fA-F]*")


def is_zero_prefixed(value: str) -> bool:
    return isinstance(value, str) and value.startswith("0x")


def strip_zero(value: str) -> str:
    """Remove a single leading ``0x``."""
    if not isinstance(value, str):
        raise InvalidFormatError(f"Expected str, got {type(value).__name__}")
    return value.removeprefix("0x")


def is_negative(value: str) -> bool:
    return isinstance(value, str) and value.startswith("-")


def is_hex(value: str) -> bool:
    return isinstance(value, str) and _HEX_RE.fullmatch(value) is not None


def to_hex(value: int | float | str | bytes, with_prefix: bool = False) -> str:
    """
    Hex-encode a number or raw data.

    Numbers are written big-endian without leading zeros (``255`` -> ``ff``).
    Strings are encoded byte by byte as UTF-8 (``"abc"`` -> ``616263``).

    Args:
        value: int, integral float, str or bytes
        with_prefix: Prepend ``0x``

    Raises:
        InvalidFormatError: For booleans, non-integral floats and other types
    """
    prefix = "0x" if with_prefix else ""

    if isinstance(value, bool):
        raise InvalidFormatError("Cannot hex-encode a boolean")
    if isinstance(value, float):
        if not value.is_integer():
            raise InvalidFormatError(f"Cannot hex-encode non-integral float {value!r}")
        value = int(value)
    if isinstance(value, int):
        sign = "-" if value < 0 else ""
        return f"{sign}{prefix}{abs(value):x}"
    if isinstance(value, str):
        return prefix + value.encode("utf-8").hex()
    if isinstance(value, (bytes, bytearray)):
        return prefix + bytes(value).hex()

    raise InvalidFormatError(f"Unsupported type for to_hex: {type(value).__name__}")


def hex_to_bin(value: str) -> bytes:
    """Decode a hex string (``0x`` optional) to bytes.

    Odd-length input is left-padded with a single ``0`` so ``"0xf"`` decodes
    to ``b"\\x0f"``.
    """
    body = strip_zero(value)
    if not _HEX_BODY_RE.fullmatch(body):
        raise InvalidFormatError(f"Not a hex string: {value!r}")
    if len(body) % 2:
        body = "0" + body
    return bytes.fromhex(body)


def hex_to_number(value: str) -> int:
    body = strip_zero(value)
    if not body or not _HEX_BODY_RE.fullmatch(body):
        raise InvalidFormatError(f"Not a hex number: {value!r}")
    return int(body, 16)
