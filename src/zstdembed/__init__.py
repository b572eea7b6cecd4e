"""zstdembed: embed Zstandard-compressed assets in generated Python code."""

import importlib.metadata as importlib_metadata

from zstdembed.asset import EmbeddedAsset
from zstdembed.build import CompressedAsset, compress_file, include_zstd, render_expression, render_module
from zstdembed.codec import Codec, ZstdCodec
from zstdembed.config import BuildConfig, load_config
from zstdembed.errors import (
    BuildError,
    CompressionError,
    CompressionLevelError,
    DecodeError,
    ImportNameResolutionError,
    MalformedFrameError,
    SourceFileError,
    TruncatedStreamError,
    UnsupportedFrameError,
    ZstdEmbedError,
)


def _detect_version() -> str:
    """Return installed package version or a local fallback when metadata is unavailable."""
    try:
        return importlib_metadata.version("zstdembed")
    except importlib_metadata.PackageNotFoundError:
        return "0.0.0+unknown"


__version__ = _detect_version()

__all__ = [
    "BuildConfig",
    "BuildError",
    "Codec",
    "CompressedAsset",
    "CompressionError",
    "CompressionLevelError",
    "DecodeError",
    "EmbeddedAsset",
    "ImportNameResolutionError",
    "MalformedFrameError",
    "SourceFileError",
    "TruncatedStreamError",
    "UnsupportedFrameError",
    "ZstdCodec",
    "ZstdEmbedError",
    "compress_file",
    "include_zstd",
    "load_config",
    "render_expression",
    "render_module",
]
