"""
Compression codecs for raw byte buffers.

Supported compression methods:

- **RAW** (``Compression.RAW``): Uncompressed data
- **RLE** (``Compression.RLE``): Escape-marker run-length encoding

Key functions:

- :py:func:`compress`: Compress raw data using specified method
- :py:func:`decompress`: Decompress data back to raw bytes
- :py:func:`get_codec`: Build a codec object for a method

Example usage::

    from aapc.compression import compress, decompress
    from aapc.constants import Compression

    compressed = compress(raw_pixels, Compression.RLE)
    raw_pixels = decompress(compressed, Compression.RLE)

Every codec satisfies the :py:class:`~aapc.compression.base.Codec` protocol,
so callers that need a configured escape convention can hold a codec object
instead::

    codec = get_codec(Compression.RLE, marker=0xFF)
    raw_pixels = codec.decode(codec.encode(raw_pixels))

Performance notes:

- RLE is most effective for images with large uniform areas
- Random data without marker bytes is stored at its original size
- Worst case output is 3 times the input, for isolated marker bytes
"""

import logging
from typing import Any

from aapc.compression.base import CODECS, BytesLike, Codec
from aapc.compression.raw import RawCodec
from aapc.compression.rle import RLECodec
from aapc.constants import Compression
from aapc.exceptions import DecodeError

logger = logging.getLogger(__name__)

__all__ = [
    "CODECS",
    "Codec",
    "RawCodec",
    "RLECodec",
    "compress",
    "decompress",
    "get_codec",
]


def get_codec(compression: Compression, **kwargs: Any) -> Codec:
    """Build a codec for the given compression method.

    :param compression: compression type, see :py:class:`.Compression`.
    :param kwargs: codec options, e.g. ``marker`` for RLE.
    :return: codec object.
    """
    try:
        kls = CODECS[Compression(compression)]
    except (KeyError, ValueError):
        raise ValueError("Unsupported compression %r" % (compression,))
    return kls(**kwargs)


def compress(data: BytesLike, compression: Compression = Compression.RLE) -> bytes:
    """Compress raw data.

    :param data: raw data bytes to write.
    :param compression: compression type, see :py:class:`.Compression`.
    :return: compressed data bytes.
    """
    result = get_codec(compression).encode(data)
    logger.debug(
        "Compressed %d bytes to %d bytes (%s)",
        len(data),
        len(result),
        Compression(compression).name,
    )
    return result


def decompress(data: BytesLike, compression: Compression = Compression.RLE) -> bytes:
    """Decompress raw data.

    :param data: compressed data bytes.
    :param compression: compression type, see :py:class:`.Compression`.
    :return: decompressed data bytes.
    :raise DecodeError: when ``data`` is malformed.
    """
    try:
        return get_codec(compression).decode(data)
    except DecodeError as e:
        logger.error(f"An error occurred during decoding: {e}")
        logger.debug(
            f"Decompression failed: compression={Compression(compression).name} "
            f"offset={e.offset} size={len(data)}",
            exc_info=True,
        )
        raise
