"""Codec: protocol for compression backends."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class Codec(Protocol):
    """Compression codec protocol.

    Implementations compress a whole input into one self-terminated stream and
    decode such a stream back, failing with a ``DecodeError`` on bad input.
    They must hold no per-call state so one instance can serve every thread.
    """

    name: str

    def validate_level(self, level: int) -> int:
        """Return ``level`` if accepted, otherwise raise ``CompressionLevelError``."""
        ...

    def compress(self, data: bytes, *, level: int) -> bytes:
        """Compress ``data`` into one complete stream."""
        ...

    def decompress(self, data: bytes) -> bytes:
        """Decode one complete stream back to the original bytes."""
        ...
