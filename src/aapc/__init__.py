"""
aapc: run-length byte codec with escape-marker disambiguation.

The codec is tuned for data with long runs of identical bytes, such as raw
bitmap images. The compressed stream carries no header; decoding needs
nothing but the bytes themselves.

Basic usage::

    from aapc import compress, decompress

    compressed = compress(b"\\x00" * 1000)
    assert decompress(compressed) == b"\\x00" * 1000

Architecture:

- :py:mod:`aapc.compression`: Codec interface, registry and codecs (RAW, RLE)
- :py:mod:`aapc.image`: Pillow helpers for raw bitmap data
- :py:mod:`aapc.constants`: Format constants and the ``Compression`` enum
"""

from aapc.compression import compress, decompress, get_codec
from aapc.constants import Compression
from aapc.exceptions import DecodeError, InvalidCountError, TruncatedEscapeError
from aapc.version import __version__

__all__ = [
    "Compression",
    "DecodeError",
    "InvalidCountError",
    "TruncatedEscapeError",
    "compress",
    "decompress",
    "get_codec",
    "__version__",
]
