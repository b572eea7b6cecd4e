"""ZstdCodec: Zstandard codec backed by the ``zstandard`` bindings."""

from __future__ import annotations

import io

import zstandard

from zstdembed.errors import (
    CompressionError,
    CompressionLevelError,
    DecodeError,
    MalformedFrameError,
    TruncatedStreamError,
    UnsupportedFrameError,
)

MIN_COMPRESSION_LEVEL = -(1 << 17)
MAX_COMPRESSION_LEVEL = zstandard.MAX_COMPRESSION_LEVEL

_MAGIC_SIZE = len(zstandard.FRAME_HEADER)
_SKIPPABLE_MAGIC = 0x184D2A50
_SKIPPABLE_MAGIC_MASK = 0xFFFFFFF0

# Substrings of libzstd error messages for frames that are valid but not decodable here.
_UNSUPPORTED_MARKERS = ("too much memory", "dictionary", "unsupported", "not supported")


def _decode_error(exc: zstandard.ZstdError) -> DecodeError:
    """Map a libzstd decoding error onto the DecodeError hierarchy."""
    message = str(exc)
    lowered = message.lower()
    if any(marker in lowered for marker in _UNSUPPORTED_MARKERS):
        return UnsupportedFrameError(message)
    return MalformedFrameError(message)


class ZstdCodec:
    """Stateless Zstandard codec.

    ``compress`` writes exactly one frame through a streaming writer and
    finalizes it, without a content-size pledge or checksum. ``decompress``
    accepts exactly one complete frame and nothing else.
    """

    name = "zstd"

    def validate_level(self, level: int) -> int:
        """Return ``level`` when it is an int within the libzstd range."""
        if isinstance(level, bool) or not isinstance(level, int):
            raise CompressionLevelError(level, MIN_COMPRESSION_LEVEL, MAX_COMPRESSION_LEVEL)
        if not MIN_COMPRESSION_LEVEL <= level <= MAX_COMPRESSION_LEVEL:
            raise CompressionLevelError(level, MIN_COMPRESSION_LEVEL, MAX_COMPRESSION_LEVEL)
        return level

    def compress(self, data: bytes, *, level: int) -> bytes:
        """Compress ``data`` into one finalized Zstandard frame."""
        level = self.validate_level(level)
        buffer = io.BytesIO()
        try:
            compressor = zstandard.ZstdCompressor(level=level)
            with compressor.stream_writer(buffer, closefd=False) as writer:
                writer.write(data)
        except zstandard.ZstdError as exc:
            msg = f"zstd compression failed at level {level}: {exc}"
            raise CompressionError(msg) from exc
        return buffer.getvalue()

    def decompress(self, data: bytes) -> bytes:
        """Decode one complete Zstandard frame.

        Raise ``TruncatedStreamError``, ``MalformedFrameError`` or
        ``UnsupportedFrameError`` instead of returning partial output.
        """
        payload = bytes(data)
        self._check_magic(payload)
        parameters = self._frame_parameters(payload)
        if parameters.dict_id:
            msg = f"Frame requires dictionary {parameters.dict_id}"
            raise UnsupportedFrameError(msg)

        decoder = zstandard.ZstdDecompressor().decompressobj()
        try:
            output = decoder.decompress(payload)
        except zstandard.ZstdError as exc:
            raise _decode_error(exc) from exc

        if not decoder.eof:
            msg = f"Compressed stream ended after {len(payload)} bytes without a complete frame"
            raise TruncatedStreamError(msg)
        if decoder.unused_data:
            msg = f"{len(decoder.unused_data)} trailing bytes after the compressed frame"
            raise MalformedFrameError(msg)
        return output

    def _check_magic(self, payload: bytes) -> None:
        """Reject input that does not open with a Zstandard frame magic number."""
        header = payload[:_MAGIC_SIZE]
        if len(header) < _MAGIC_SIZE:
            if zstandard.FRAME_HEADER.startswith(header):
                msg = f"Compressed stream ended after {len(payload)} bytes, inside the frame magic number"
                raise TruncatedStreamError(msg)
            msg = f"Unknown frame magic {header.hex()}"
            raise MalformedFrameError(msg)

        magic = int.from_bytes(header, "little")
        if magic & _SKIPPABLE_MAGIC_MASK == _SKIPPABLE_MAGIC:
            msg = f"Skippable frame 0x{magic:08x} carries no content"
            raise UnsupportedFrameError(msg)
        if header != zstandard.FRAME_HEADER:
            msg = f"Unknown frame magic 0x{magic:08x}"
            raise MalformedFrameError(msg)

    def _frame_parameters(self, payload: bytes) -> zstandard.FrameParameters:
        """Read the frame header, classifying a short header as truncation."""
        try:
            return zstandard.get_frame_parameters(payload)
        except zstandard.ZstdError as exc:
            if "not enough data" in str(exc):
                raise TruncatedStreamError(str(exc)) from exc
            raise MalformedFrameError(str(exc)) from exc


_DEFAULT_CODEC = ZstdCodec()


def default_codec() -> ZstdCodec:
    """Return the shared codec used by EmbeddedAsset."""
    return _DEFAULT_CODEC
