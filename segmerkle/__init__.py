"""
segmerkle - Merkle trees over segmented byte buffers.

Build a binary hash tree over a buffer, read its root digest, and
re-derive the tree later to confirm the buffer is unchanged.
"""
from segmerkle.errors import (
    ErrorCodes,
    SegMerkleError,
    SegMerkleException,
    InvalidSegmentSizeException,
    EmptyTreeException,
    UnsupportedHashAlgorithmException,
    ConfigException,
)
from segmerkle.crypto.hashing import (
    DEFAULT_HASH_FACTORY,
    HashContext,
    HashFactory,
    get_hash_factory,
)
from segmerkle.merkle import MerkleTree, Node, chop

__version__ = "0.1.0"

__all__ = [
    "MerkleTree",
    "Node",
    "chop",
    "HashContext",
    "HashFactory",
    "DEFAULT_HASH_FACTORY",
    "get_hash_factory",
    "ErrorCodes",
    "SegMerkleError",
    "SegMerkleException",
    "InvalidSegmentSizeException",
    "EmptyTreeException",
    "UnsupportedHashAlgorithmException",
    "ConfigException",
]
