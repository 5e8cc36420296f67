"""
Common test fixtures shared by all test modules.

Provides factory functions for:
- Buffers of known content
- MerkleTree instances
- Hash factories that record how they are used
"""

import hashlib
from typing import Optional

from segmerkle.crypto.hashing import HashFactory
from segmerkle.merkle import MerkleTree


DEFAULT_DATA = b"The quick brown fox jumps over the lazy dog"
DEFAULT_SEGMENT_SIZE = 4


def make_buffer(length: int, seed: int = 0) -> bytes:
    """Deterministic pseudo-random buffer of the given length."""
    out = bytearray()
    counter = 0
    while len(out) < length:
        out += hashlib.sha256(f"{seed}:{counter}".encode()).digest()
        counter += 1
    return bytes(out[:length])


def make_tree(
    data: bytes = DEFAULT_DATA,
    segment_size: int = DEFAULT_SEGMENT_SIZE,
    hash_factory: Optional[HashFactory] = None,
) -> MerkleTree:
    """Build a MerkleTree with test defaults."""
    return MerkleTree(data, segment_size, hash_factory)


class RecordingHashContext:
    """sha256 context that records every update call."""

    def __init__(self, log: list):
        self._inner = hashlib.sha256()
        self._updates: list[bytes] = []
        log.append(self._updates)

    def update(self, data: bytes) -> None:
        self._updates.append(bytes(data))
        self._inner.update(data)

    def digest(self) -> bytes:
        return self._inner.digest()


class RecordingHashFactory:
    """
    Hash factory producing RecordingHashContext instances.

    contexts holds one list of update payloads per context created.
    """

    def __init__(self):
        self.contexts: list[list[bytes]] = []

    def __call__(self) -> RecordingHashContext:
        return RecordingHashContext(self.contexts)
