"""
Escape-marker RLE (Run-Length Encoding) codec.

Runs of identical bytes are collapsed into 3-byte escape triples, and every
other byte is copied through as is. The format has no header: the compressed
stream describes itself byte by byte.

Format overview:

- ``marker, value, count``: repeat ``value`` ``count`` times (1 <= count <= 255)
- any other byte: literal copy of itself

A literal occurrence of the marker value can not be copied through, so it is
always written as a triple, ``marker, marker, 1`` for a lone marker byte.

Encoding example (marker ``0xFE``)::

    Input:  [A, A, A, A, A, B, 0xFE, C]
    Output: [0xFE, A, 5, B, 0xFE, 0xFE, 1, C]
            (repeat A 5x, copy B, escaped 0xFE, copy C)

A run becomes a triple once it reaches the break-even length of 4 bytes,
where the 3-byte triple is strictly shorter than the literal run. Shorter
runs stay literal, and a short run of the marker value is escaped one byte
at a time. Runs longer than ``max_count`` are split into several triples of
the same value.

Example usage::

    from aapc.compression.rle import encode, decode

    raw_data = b'\\x00' * 1000 + b'\\xfe\\x01\\x02'
    compressed = encode(raw_data)
    assert decode(compressed) == raw_data

Worst case: input made of isolated marker bytes grows 3 times. Input without
marker bytes never grows.
"""

from attrs import define, field

from aapc.compression.base import BytesLike, register
from aapc.constants import MARKER, MAX_COUNT, TRIPLE_SIZE, Compression
from aapc.exceptions import InvalidCountError, TruncatedEscapeError
from aapc.validators import range_


@register(Compression.RLE)
@define(frozen=True)
class RLECodec:
    """
    RLE codec with a configurable escape convention.

    Example::

        from aapc.compression.rle import RLECodec

        codec = RLECodec(marker=0xFF, max_count=127)
        assert codec.decode(codec.encode(b"\\xff\\xff\\x00")) == b"\\xff\\xff\\x00"

    .. py:attribute:: marker

        Byte value that starts an escape triple.

    .. py:attribute:: max_count

        Largest count a single triple may carry. The decoder rejects larger
        counts.
    """

    marker: int = field(default=MARKER, validator=range_(0, 0xFF))
    max_count: int = field(default=MAX_COUNT, validator=range_(1, 0xFF))

    @property
    def break_even_length(self) -> int:
        """Shortest run that is emitted as a single triple."""
        return TRIPLE_SIZE + 1

    def encode(self, data: BytesLike) -> bytes:
        """encode(data) -> bytes

        Escape-marker RLE encoder. Accepts any bytes-like object and never
        fails on one.
        """
        data = memoryview(data).tobytes()
        marker = self.marker
        max_count = self.max_count
        break_even = self.break_even_length
        length = len(data)
        result = bytearray()

        i = 0
        while i < length:
            value = data[i]
            j = i + 1
            while j < length and j - i < max_count and data[j] == value:
                j += 1
            count = j - i

            if count >= break_even:
                result.extend((marker, value, count))
            elif value == marker:
                result.extend((marker, marker, 1) * count)
            else:
                result.extend(data[i:j])
            i = j

        return bytes(result)

    def decode(self, data: BytesLike) -> bytes:
        """decode(data) -> bytes

        Escape-marker RLE decoder.

        :raise TruncatedEscapeError: when a marker byte is missing its value
            or count byte.
        :raise InvalidCountError: when a triple has a zero count or a count
            above ``max_count``.
        """
        data = memoryview(data).tobytes()
        marker = self.marker
        length = len(data)
        result = bytearray()

        i = 0
        while i < length:
            pos = data.find(marker, i)
            if pos < 0:
                result.extend(data[i:])
                break
            result.extend(data[i:pos])

            if pos + TRIPLE_SIZE > length:
                raise TruncatedEscapeError(
                    "Truncated escape sequence at offset %d" % pos, pos
                )
            value, count = data[pos + 1], data[pos + 2]
            if not 1 <= count <= self.max_count:
                raise InvalidCountError(
                    "Invalid run length %d at offset %d" % (count, pos), pos
                )
            result.extend(bytes((value,)) * count)
            i = pos + TRIPLE_SIZE

        return bytes(result)


_default_codec = RLECodec()


def encode(data: BytesLike) -> bytes:
    """Encode ``data`` with the default escape convention."""
    return _default_codec.encode(data)


def decode(data: BytesLike) -> bytes:
    """Decode ``data`` with the default escape convention."""
    return _default_codec.decode(data)
