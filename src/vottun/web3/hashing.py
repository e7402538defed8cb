"""
Keccak-256 hashing.

Ethereum uses the original Keccak submission, not NIST SHA3-256; the two
differ in padding, so ``hashlib.sha3_256`` must never be used here.
"""

from __future__ import annotations

from typing import Optional

from eth_hash.auto import keccak

from .codec import hex_to_bin, is_zero_prefixed
from .errors import InvalidFormatError

# keccak256(b"")
SHA3_NULL_HASH = "c5d2460186f7233c927e7db2dcc703c0e500b653ca82273b7bfad8045d85a470"


def keccak256(data: bytes) -> bytes:
    """Compute the raw 32-byte Keccak-256 digest."""
    return keccak(data)


def sha3(value: str | bytes) -> Optional[str]:
    """
    Keccak-256 of a string or bytes, as ``0x``-prefixed hex.

    ``0x``-prefixed strings are hex-decoded before hashing; other strings
    are hashed as UTF-8.

    Returns:
        The hex digest, or ``None`` when the digest is ``SHA3_NULL_HASH``
        (the input was empty).
    """
    if isinstance(value, str):
        data = hex_to_bin(value) if is_zero_prefixed(value) else value.encode("utf-8")
    elif isinstance(value, (bytes, bytearray)):
        data = bytes(value)
    else:
        raise InvalidFormatError(f"Cannot hash {type(value).__name__}")

    digest = keccak256(data).hex()
    if digest == SHA3_NULL_HASH:
        return None
    return "0x" + digest
