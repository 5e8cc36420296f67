"""
Hashing Unit Tests
Tests for segmerkle/crypto/hashing.py

Tests:
- sha256 known values
- digest_with / hash_concat go through a fresh context
- get_hash_factory name resolution and rejection
- to_hex formatting
"""
import hashlib

import pytest

from segmerkle.crypto.hashing import (
    DEFAULT_HASH_FACTORY,
    digest_size,
    digest_with,
    get_hash_factory,
    hash_concat,
    sha256,
    to_hex,
)
from segmerkle.errors import ErrorCodes, UnsupportedHashAlgorithmException


class TestSha256:
    """Tests for sha256() function."""

    def test_sha256_known_value(self):
        result = sha256(b"hello")

        assert result.hex() == (
            "2cf24dba5fb0a30e26e83b2ac5b9e29e1b161e5c1fa7425e73043362938b9824"
        )
        assert len(result) == 32

    def test_sha256_empty_bytes(self):
        assert sha256(b"") == hashlib.sha256(b"").digest()

    def test_default_factory_is_sha256(self):
        assert DEFAULT_HASH_FACTORY is hashlib.sha256
        assert digest_size(DEFAULT_HASH_FACTORY) == 32


class TestDigestWith:
    """Tests for digest_with() and hash_concat()."""

    def test_matches_hashlib(self):
        assert digest_with(hashlib.sha256, b"abc") == hashlib.sha256(b"abc").digest()

    def test_fresh_context_each_call(self, recording_factory):
        digest_with(recording_factory, b"one")
        digest_with(recording_factory, b"two")

        assert recording_factory.contexts == [[b"one"], [b"two"]]

    def test_hash_concat_single_update(self, recording_factory):
        left = sha256(b"left")
        right = sha256(b"right")

        result = hash_concat(recording_factory, left, right)

        assert recording_factory.contexts == [[left + right]]
        assert result == sha256(left + right)

    def test_hash_concat_order_matters(self):
        a, b = sha256(b"a"), sha256(b"b")
        assert hash_concat(hashlib.sha256, a, b) != hash_concat(hashlib.sha256, b, a)


class TestGetHashFactory:
    """Tests for get_hash_factory()."""

    def test_sha256_returns_default(self):
        assert get_hash_factory("sha256") is DEFAULT_HASH_FACTORY
        assert get_hash_factory(" SHA256 ") is DEFAULT_HASH_FACTORY

    @pytest.mark.parametrize("name,size", [
        ("sha512", 64),
        ("sha3_256", 32),
        ("blake2b", 64),
        ("blake2s", 32),
    ])
    def test_known_algorithms(self, name, size):
        factory = get_hash_factory(name)
        ctx = factory()
        ctx.update(b"data")

        assert ctx.digest() == hashlib.new(name, b"data").digest()
        assert digest_size(factory) == size

    def test_factory_produces_independent_contexts(self):
        factory = get_hash_factory("sha512")
        a = factory()
        b = factory()
        a.update(b"x")

        assert a.digest() != b.digest()

    def test_unknown_algorithm(self):
        with pytest.raises(UnsupportedHashAlgorithmException) as exc_info:
            get_hash_factory("not-a-hash")

        assert exc_info.value.code == ErrorCodes.UNSUPPORTED_HASH_ALGORITHM
        assert exc_info.value.details["algorithm"] == "not-a-hash"

    @pytest.mark.parametrize("name", ["shake_128", "shake_256"])
    def test_variable_length_rejected(self, name):
        with pytest.raises(UnsupportedHashAlgorithmException, match="fixed digest length"):
            get_hash_factory(name)


class TestToHex:
    """Tests for to_hex()."""

    def test_prefix(self):
        assert to_hex(bytes.fromhex("deadbeef")) == "0xdeadbeef"

    def test_empty(self):
        assert to_hex(b"") == "0x"
