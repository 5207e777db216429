"""
PIL IO module.

Raw bitmaps are the workload the RLE codec is tuned for. These helpers
compress the pixel buffer of a PIL image and rebuild an image from it. Mode
and size are not stored in the compressed data; callers keep track of them.
"""

import logging
from typing import Tuple

from PIL import Image

from aapc.compression import compress, decompress
from aapc.constants import Compression

logger = logging.getLogger(__name__)


def encode_image(image: Image.Image, compression: Compression = Compression.RLE) -> bytes:
    """Compress the raw pixel data of ``image``."""
    return compress(image.tobytes(), compression)


def decode_image(
    data: bytes,
    mode: str,
    size: Tuple[int, int],
    compression: Compression = Compression.RLE,
) -> Image.Image:
    """Rebuild a PIL image from compressed pixel data.

    :param data: compressed pixel data.
    :param mode: PIL mode of the original image, e.g. ``"L"`` or ``"RGB"``.
    :param size: ``(width, height)`` of the original image.
    :return: :py:class:`PIL.Image.Image`
    :raise ValueError: when the pixel data does not fit ``mode`` and ``size``.
    """
    raw = decompress(data, compression)
    expected = len(Image.new(mode, (1, 1)).tobytes()) * size[0] * size[1]
    if mode != "1" and len(raw) != expected:
        raise ValueError("Expected %d bytes but decoded %d bytes" % (expected, len(raw)))
    logger.debug("Decoded %s image of size %r", mode, size)
    return Image.frombytes(mode, size, raw)
