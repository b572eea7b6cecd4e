"""Typed errors for zstdembed."""

from pathlib import Path


class ZstdEmbedError(Exception):
    """Base exception for all zstdembed errors."""


class BuildError(ZstdEmbedError):
    """Base exception for build-time failures. These abort code generation."""


class SourceFileError(BuildError):
    """Raised when a source file cannot be read at build time."""

    def __init__(self, path: str | Path, reason: str) -> None:
        """Initialize with the offending path and a short reason."""
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"Cannot read source file {self.path}: {reason}")


class CompressionLevelError(BuildError):
    """Raised when the codec rejects a compression level."""

    def __init__(self, level: object, minimum: int, maximum: int) -> None:
        """Initialize with the rejected level and the accepted range."""
        self.level = level
        self.minimum = minimum
        self.maximum = maximum
        super().__init__(f"Compression level {level!r} is not an int in [{minimum}, {maximum}]")


class CompressionError(BuildError):
    """Raised when the codec fails while compressing."""


class ImportNameResolutionError(BuildError):
    """Raised when the runtime library cannot be found in the installed distributions."""

    def __init__(self, distribution: str) -> None:
        """Initialize with the distribution that could not be resolved."""
        self.distribution = distribution
        super().__init__(f"No importable package found for distribution {distribution!r}")


class DecodeError(ZstdEmbedError):
    """Raised when stored bytes are not a valid, complete compressed stream."""


class TruncatedStreamError(DecodeError):
    """Raised when the input ends before the compressed frame does."""


class MalformedFrameError(DecodeError):
    """Raised when the input is not a well-formed compressed frame."""


class UnsupportedFrameError(DecodeError):
    """Raised when the frame is valid but uses a feature the decoder does not handle."""
