"""
Test fixtures package for segmerkle tests.

Usage:
    from fixtures import make_tree, make_buffer

    def test_something():
        tree = make_tree(b"abcdefgh", segment_size=4)
"""

from .common import (
    DEFAULT_DATA,
    DEFAULT_SEGMENT_SIZE,
    make_buffer,
    make_tree,
    RecordingHashContext,
    RecordingHashFactory,
)

__all__ = [
    "DEFAULT_DATA",
    "DEFAULT_SEGMENT_SIZE",
    "make_buffer",
    "make_tree",
    "RecordingHashContext",
    "RecordingHashFactory",
]
