"""
Codec interface and registry.

Callers should depend on :py:class:`Codec` rather than on a concrete codec
class. Concrete codecs register themselves in :py:data:`CODECS` under their
:py:class:`~aapc.constants.Compression` key.
"""

from typing import Protocol, Union, runtime_checkable

from aapc.registry import new_registry

BytesLike = Union[bytes, bytearray, memoryview]

CODECS, register = new_registry(attribute="compression")


@runtime_checkable
class Codec(Protocol):
    """
    Protocol defining the whole-buffer codec interface.
    """

    def encode(self, data: BytesLike) -> bytes:
        """Return the compressed form of ``data``."""
        ...

    def decode(self, data: BytesLike) -> bytes:
        """Return the raw bytes for compressed ``data``."""
        ...
