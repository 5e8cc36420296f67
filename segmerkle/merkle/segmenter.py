"""
Segmenter
Splits a byte buffer into fixed-size segments for tree leaves.

Rules:
1. Windows are non-overlapping and scanned left to right
2. Every segment is segment_size bytes except possibly the last one
3. No padding; a short tail is kept as its own segment
4. Empty input produces no segments
"""
from __future__ import annotations

from segmerkle.errors import InvalidSegmentSizeException


def check_segment_size(segment_size: int) -> int:
    """
    Validate a segment size.

    Raises:
        InvalidSegmentSizeException: If segment_size is not an int >= 1
    """
    # bool is an int subclass but never a meaningful size
    if isinstance(segment_size, bool) or not isinstance(segment_size, int):
        raise InvalidSegmentSizeException(
            f"Segment size must be an integer, got {type(segment_size).__name__}",
            segment_size=segment_size,
        )
    if segment_size < 1:
        raise InvalidSegmentSizeException(
            f"Segment size must be at least 1, got {segment_size}",
            segment_size=segment_size,
        )
    return segment_size


def segment_count(length: int, segment_size: int) -> int:
    """Number of segments a buffer of the given length splits into."""
    check_segment_size(segment_size)
    return -(-length // segment_size)


def chop(data: bytes | bytearray | memoryview, segment_size: int) -> list[bytes]:
    """
    Split data into consecutive segments of at most segment_size bytes.

    Args:
        data: Bytes-like buffer to split
        segment_size: Maximum bytes per segment (>= 1)

    Returns:
        Ordered list of independent bytes copies, one per segment.
        Length is ceil(len(data) / segment_size); [] for empty data.

    Raises:
        InvalidSegmentSizeException: If segment_size is not a positive integer

    Example:
        >>> chop(b"abcdefghi", 4)
        [b'abcd', b'efgh', b'i']
    """
    check_segment_size(segment_size)
    view = memoryview(data).cast("B")
    return [
        bytes(view[i:i + segment_size])
        for i in range(0, len(view), segment_size)
    ]


__all__ = [
    "check_segment_size",
    "segment_count",
    "chop",
]
