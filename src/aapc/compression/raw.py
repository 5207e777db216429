"""
Identity codec.
"""

from attrs import define

from aapc.compression.base import BytesLike, register
from aapc.constants import Compression


@register(Compression.RAW)
@define(frozen=True)
class RawCodec:
    """Pass-through codec storing data uncompressed."""

    def encode(self, data: BytesLike) -> bytes:
        return memoryview(data).tobytes()

    def decode(self, data: BytesLike) -> bytes:
        return memoryview(data).tobytes()
