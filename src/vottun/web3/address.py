"""
EIP-55 mixed-case checksum addresses.

The checksum hashes the lower-cased 40 character hex body (as ASCII text,
not as bytes) and upper-cases every letter whose matching hash nibble is
8 or more.
"""

from __future__ import annotations

import re

from .errors import InvalidFormatError
from .hashing import keccak256

_ADDRESS_RE = re.compile(r"(0x|0X)?[0-9a-fA-F]{40}")


def _address_body(value: str) -> str | None:
    if not isinstance(value, str) or not _ADDRESS_RE.fullmatch(value):
        return None
    return value[2:] if value[:2] in ("0x", "0X") else value


def _checksum_nibbles(body: str) -> str:
    return keccak256(body.lower().encode("ascii")).hex()


def is_address(value: str) -> bool:
    """True for 40 hex characters that are all-lower, all-upper or correctly checksummed."""
    body = _address_body(value)
    if body is None:
        return False
    if body == body.lower() or body == body.upper():
        return True
    return is_address_checksum(value)


def to_checksum_address(value: str) -> str:
    """Return ``value`` in EIP-55 checksum form, ``0x``-prefixed.

    Raises:
        InvalidFormatError: If ``value`` is not a 20-byte hex address
    """
    body = _address_body(value)
    if body is None:
        raise InvalidFormatError(f"Not an address: {value!r}")

    body = body.lower()
    addr_hash = _checksum_nibbles(body)
    result = "0x"
    for i, c in enumerate(body):
        result += c.upper() if int(addr_hash[i], 16) >= 8 else c
    return result


def is_address_checksum(value: str) -> bool:
    body = _address_body(value)
    if body is None:
        return False

    addr_hash = _checksum_nibbles(body)
    for i, c in enumerate(body):
        if int(addr_hash[i], 16) > 7:
            if c.upper() != c:
                return False
        elif c.lower() != c:
            return False
    return True
