"""
Segment Merkle Tree
Binary hash tree over a byte buffer split into fixed-size segments.

This module provides:
- Node: immutable tree element holding a finalized digest
- MerkleTree: builds the tree, exposes the root digest, rebuild-based
  validation, structural equality and a diagnostic dump

Construction Rules (Hard Contracts):
1. Leaf: digest = H(segment), one update over exactly that segment
2. Internal node: digest = H(left.digest || right.digest)
3. A byte range [start, end) is a leaf when end - start <= segment_size
4. Otherwise it splits at the first segment boundary at or after
   start + (end - start) // 2, left subtree first
5. Empty buffer: no root
6. Leaf count always equals ceil(len(data) / segment_size)

Determinism Notes:
- Each node is built from its own segment index range, no shared cursor
- Every digest goes through a fresh context from the hash factory
- Trees are never mutated after construction
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional, Sequence

from segmerkle.crypto.hashing import (
    DEFAULT_HASH_FACTORY,
    HashFactory,
    digest_with,
    hash_concat,
    to_hex,
)
from segmerkle.errors import EmptyTreeException
from segmerkle.merkle.segmenter import check_segment_size, chop

if TYPE_CHECKING:
    from segmerkle.config.runtime import RuntimeConfig

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Node:
    """
    A single node of a segment Merkle tree.

    Leaves have neither child; internal nodes always have both.

    Attributes:
        digest: Finalized hash of the segment (leaf) or of the
            concatenated child digests (internal node)
        left: Left child, None for leaves
        right: Right child, None for leaves
    """
    digest: bytes
    left: Optional["Node"] = None
    right: Optional["Node"] = None

    @property
    def is_leaf(self) -> bool:
        return self.left is None and self.right is None

    def subtree_equals(self, other: Optional["Node"]) -> bool:
        """Compare this subtree with other position by position."""
        return _subtree_equals(self, other)


def _subtree_equals(n: Optional[Node], o: Optional[Node]) -> bool:
    if n is None and o is None:
        return True
    if n is None or o is None:
        return False

    digest_matches = n.digest == o.digest
    left_matches = _subtree_equals(n.left, o.left)
    right_matches = _subtree_equals(n.right, o.right)
    return digest_matches and left_matches and right_matches


class MerkleTree:
    """
    Merkle tree over a byte buffer.

    The buffer object is kept as given (not copied) so that validate()
    can detect in-place changes made to a mutable buffer after
    construction.

    Example:
        >>> tree = MerkleTree(b"abcdefgh", 4)
        >>> len(tree.get_root_hash())
        32
        >>> tree.validate()
        True
    """

    def __init__(
        self,
        data: bytes | bytearray | memoryview,
        segment_size: int,
        hash_factory: HashFactory | None = None,
    ) -> None:
        self._segment_size = check_segment_size(segment_size)
        self._data = data
        self._hash_factory = hash_factory or DEFAULT_HASH_FACTORY

        segments = chop(data, self._segment_size)
        self._root = self._build(segments, 0, len(segments), 0, memoryview(data).nbytes)

        logger.debug(
            f"Built merkle tree: {len(segments)} leaves, "
            f"segment_size={self._segment_size}"
        )

    @classmethod
    def from_config(
        cls,
        data: bytes | bytearray | memoryview,
        config: "RuntimeConfig | None" = None,
    ) -> "MerkleTree":
        """
        Build a tree using the configured segment size and hash algorithm.

        Args:
            data: Buffer to commit to
            config: Runtime configuration, defaults to get_default_config()
        """
        from segmerkle.config.runtime import get_default_config

        config = config or get_default_config()
        return cls(data, config.tree.segment_size, config.hash_factory())

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    def _build(
        self,
        segments: Sequence[bytes],
        lo: int,
        hi: int,
        start: int,
        end: int,
    ) -> Node | None:
        """
        Build the subtree covering segments[lo:hi], i.e. bytes [start, end).
        """
        if lo >= hi:
            return None

        if end - start <= self._segment_size:
            return Node(digest=digest_with(self._hash_factory, segments[lo]))

        mid = start + (end - start) // 2
        mid_index = -(-mid // self._segment_size)
        split = mid_index * self._segment_size

        left = self._build(segments, lo, mid_index, start, split)
        right = self._build(segments, mid_index, hi, split, end)
        return Node(
            digest=hash_concat(self._hash_factory, left.digest, right.digest),
            left=left,
            right=right,
        )

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    @property
    def root(self) -> Node | None:
        return self._root

    @property
    def data(self) -> bytes | bytearray | memoryview:
        return self._data

    @property
    def segment_size(self) -> int:
        return self._segment_size

    @property
    def hash_factory(self) -> HashFactory:
        return self._hash_factory

    def is_empty(self) -> bool:
        return self._root is None

    def get_root_hash(self) -> bytes:
        """
        Return the root digest.

        Raises:
            EmptyTreeException: If the tree was built from an empty buffer
        """
        if self._root is None:
            raise EmptyTreeException()
        return self._root.digest

    def root_hex(self) -> str:
        """Root digest as a 0x-prefixed hex string."""
        return to_hex(self.get_root_hash())

    def leaves(self) -> list[Node]:
        """Leaf nodes in left-to-right order."""
        result: list[Node] = []
        stack = [self._root] if self._root is not None else []
        while stack:
            node = stack.pop()
            if node.is_leaf:
                result.append(node)
            else:
                stack.append(node.right)
                stack.append(node.left)
        return result

    @property
    def leaf_count(self) -> int:
        return len(self.leaves())

    def depth(self) -> int:
        """
        Number of levels from the root to the deepest leaf, inclusive.

        A single leaf has depth 1; an empty tree has depth 0.
        """
        def _depth(node: Node | None) -> int:
            if node is None:
                return 0
            return 1 + max(_depth(node.left), _depth(node.right))

        return _depth(self._root)

    # ------------------------------------------------------------------
    # Integrity
    # ------------------------------------------------------------------

    def validate(self) -> bool:
        """
        Rebuild the tree from the stored buffer and compare it with self.

        Uses the same segment size and hash factory. Returns False if the
        buffer no longer matches the tree; never raises for a mismatch.
        """
        rebuilt = MerkleTree(self._data, self._segment_size, self._hash_factory)
        ok = self.equals(rebuilt)
        if not ok:
            logger.warning(
                f"Merkle tree validation failed: "
                f"stored root does not match tree rebuilt from "
                f"{memoryview(self._data).nbytes} bytes"
            )
        return ok

    def equals(self, other: "MerkleTree") -> bool:
        """
        Structural equality: same digest at every corresponding position.
        """
        return _subtree_equals(self._root, other._root)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MerkleTree):
            return NotImplemented
        return self.equals(other)

    __hash__ = None  # type: ignore[assignment]

    # ------------------------------------------------------------------
    # Diagnostics
    # ------------------------------------------------------------------

    def describe(self) -> str:
        """
        Human-readable dump: buffer, segment size, then every node digest
        depth-first (root, left, right), one tab of indent per level.
        """
        lines = [
            "MerkleTree:",
            f"data:{bytes(self._data)!r}",
            f"segment_size:{self._segment_size}",
            "tree:",
        ]

        def _walk(node: Node | None, indent: str) -> None:
            if node is None:
                return
            lines.append(f"{indent}hash:{to_hex(node.digest)}")
            _walk(node.left, indent + "\t")
            _walk(node.right, indent + "\t")

        _walk(self._root, "")
        return "\n".join(lines)

    def __str__(self) -> str:
        return self.describe()

    def __repr__(self) -> str:
        root = to_hex(self._root.digest) if self._root is not None else None
        return f"MerkleTree(segment_size={self._segment_size}, root={root})"


__all__ = [
    "Node",
    "MerkleTree",
]
