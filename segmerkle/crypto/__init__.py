"""
Cryptographic utilities.

Hash contexts, pluggable hash factories and digest helpers.
"""
from .hashing import (
    HashContext,
    HashFactory,
    DEFAULT_HASH_FACTORY,
    sha256,
    digest_with,
    hash_concat,
    get_hash_factory,
    digest_size,
    to_hex,
)

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
