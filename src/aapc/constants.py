"""
Various constants for aapc.

The escape protocol constants below are part of the compressed format.
Changing any of them breaks compatibility with previously compressed data.
"""

from enum import IntEnum

#: Reserved sentinel that starts an escape triple.
MARKER = 0xFE

#: Largest run length a single triple can carry.
MAX_COUNT = 0xFF

#: Size of ``(marker, value, count)`` in bytes.
TRIPLE_SIZE = 3


class Compression(IntEnum):
    """
    Compression method.
    """

    RAW = 0
    RLE = 1
