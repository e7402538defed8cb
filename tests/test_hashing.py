"""Tests for Keccak-256 hashing (vottun.web3.hashing)."""

from __future__ import annotations

import hashlib

import pytest

from vottun.web3.errors import InvalidFormatError
from vottun.web3.hashing import SHA3_NULL_HASH, keccak256, sha3

HELLO_KECCAK = "1c8aff950685c2ed4bc3174f3472287b56d9517b9c948127319a09a7a36deac8"


class TestKeccak256:
    """Tests for the raw keccak256 primitive."""

    def test_empty_input(self) -> None:
        assert keccak256(b"").hex() == SHA3_NULL_HASH

    def test_is_not_nist_sha3(self) -> None:
        assert keccak256(b"").hex() != hashlib.sha3_256(b"").hexdigest()

    def test_digest_length(self) -> None:
        assert len(keccak256(b"anything")) == 32


class TestSha3:
    """Tests for sha3 and its null-hash sentinel."""

    def test_text(self) -> None:
        assert sha3("hello") == "0x" + HELLO_KECCAK

    def test_prefixed_string_is_hashed_as_bytes(self) -> None:
        # 0x68656c6c6f == b"hello"
        assert sha3("0x68656c6c6f") == "0x" + HELLO_KECCAK

    def test_bytes(self) -> None:
        assert sha3(b"hello") == "0x" + HELLO_KECCAK

    def test_empty_input_returns_none(self) -> None:
        assert sha3("") is None
        assert sha3("0x") is None
        assert sha3(b"") is None

    def test_unsupported_type(self) -> None:
        with pytest.raises(InvalidFormatError):
            sha3(42)  # type: ignore[arg-type]

    def test_malformed_hex_rejected(self) -> None:
        with pytest.raises(InvalidFormatError):
            sha3("0x0x12")
