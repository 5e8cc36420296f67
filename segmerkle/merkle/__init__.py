"""
Segment Merkle Tree and Segmenter
Deterministic Merkle tree construction over raw byte buffers.

This module provides:
- chop: Split a buffer into fixed-size segments
- segment_count: Number of segments for a given buffer length
- Node: Immutable tree node with a finalized digest
- MerkleTree: Tree construction, root digest, validation, equality, dump

Usage:
    from segmerkle.merkle import MerkleTree

    tree = MerkleTree(b"abcdefghi", segment_size=4)
    root = tree.get_root_hash()
    assert tree.validate()
"""
from .segmenter import (
    check_segment_size,
    segment_count,
    chop,
)

from .merkle_tree import (
    Node,
    MerkleTree,
)


__all__ = [
    # Segmenter
    "check_segment_size",
    "segment_count",
    "chop",
    # Tree
    "Node",
    "MerkleTree",
]
