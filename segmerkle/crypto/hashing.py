"""
Hashing Utilities
Hash contexts, hash factories and digest helpers for segment trees.

This module provides:
- HashContext: the minimal interface a hashing context must offer
- HashFactory: a zero-argument callable producing a fresh HashContext
- Digest helpers that always hash through a fresh context
- Name-based factory lookup for configuration
- Hex encoding with 0x prefix

Determinism Notes:
- Every digest is computed through its own context, created, fed and
  finalized inside a single call. No context outlives that call.
- Factories must produce fixed-length, deterministic digests.
"""
from __future__ import annotations

import functools
import hashlib
from typing import Callable, Protocol

from segmerkle.errors import UnsupportedHashAlgorithmException


class HashContext(Protocol):
    """Incremental hashing context (hashlib objects satisfy this)."""

    def update(self, data: bytes, /) -> None: ...

    def digest(self) -> bytes: ...


HashFactory = Callable[[], HashContext]

# 256-bit default
DEFAULT_HASH_FACTORY: HashFactory = hashlib.sha256


def sha256(data: bytes) -> bytes:
    """
    Compute SHA-256 hash of raw bytes.

    Args:
        data: Raw bytes to hash

    Returns:
        32-byte SHA-256 digest

    Example:
        >>> sha256(b"hello").hex()
        '2cf24dba5fb0a30e26e83b2ac5b9e29e1b161e5c1fa7425e73043362938b9824'
    """
    return hashlib.sha256(data).digest()


def digest_with(hash_factory: HashFactory, data: bytes) -> bytes:
    """
    Hash data through a fresh context from hash_factory.

    Exactly one update call over data, then finalize.

    Args:
        hash_factory: Zero-argument callable returning a new hashing context
        data: Bytes to hash

    Returns:
        Finalized digest bytes
    """
    ctx = hash_factory()
    ctx.update(data)
    return ctx.digest()


def hash_concat(hash_factory: HashFactory, left: bytes, right: bytes) -> bytes:
    """
    Hash the concatenation of two digests.

    This is the internal-node rule: parent = H(left || right)

    Args:
        hash_factory: Zero-argument callable returning a new hashing context
        left: Left child digest
        right: Right child digest

    Returns:
        Digest of left + right
    """
    return digest_with(hash_factory, left + right)


def get_hash_factory(name: str) -> HashFactory:
    """
    Resolve a hashlib algorithm name to a hash factory.

    Variable-length algorithms (shake_128, shake_256) are rejected because
    their digest() needs a length argument.

    Args:
        name: Algorithm name as understood by hashlib.new (case-insensitive)

    Returns:
        Zero-argument callable producing fresh contexts for the algorithm

    Raises:
        UnsupportedHashAlgorithmException: If the algorithm is unknown or
            does not produce a fixed-length digest
    """
    normalized = name.strip().lower()
    if normalized == "sha256":
        return DEFAULT_HASH_FACTORY

    if normalized not in hashlib.algorithms_available:
        raise UnsupportedHashAlgorithmException(
            f"Unknown hash algorithm: {name}",
            algorithm=name,
        )
    if normalized.startswith("shake"):
        raise UnsupportedHashAlgorithmException(
            f"Hash algorithm {name} has no fixed digest length",
            algorithm=name,
        )

    return functools.partial(hashlib.new, normalized)


def digest_size(hash_factory: HashFactory) -> int:
    """Length in bytes of the digests produced by hash_factory."""
    return len(hash_factory().digest())


def to_hex(data: bytes) -> str:
    """
    Convert bytes to hexadecimal string with 0x prefix.

    Example:
        >>> to_hex(bytes.fromhex("deadbeef"))
        '0xdeadbeef'
    """
    return "0x" + data.hex()


__all__ = [
    "HashContext",
    "HashFactory",
    "DEFAULT_HASH_FACTORY",
    "sha256",
    "digest_with",
    "hash_concat",
    "get_hash_factory",
    "digest_size",
    "to_hex",
]
