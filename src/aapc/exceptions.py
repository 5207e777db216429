"""
Exceptions raised by aapc codecs.
"""


class DecodeError(ValueError):
    """
    Base class for malformed compressed input.

    .. py:attribute:: offset

        Position of the offending byte in the compressed stream.
    """

    def __init__(self, message: str, offset: int) -> None:
        super().__init__(message)
        self.offset = offset


class TruncatedEscapeError(DecodeError):
    """Marker byte without the two trailing bytes of its triple."""


class InvalidCountError(DecodeError):
    """Escape triple carrying a count the format does not allow."""
