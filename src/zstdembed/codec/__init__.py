"""Codec and ZstdCodec: the compression boundary of zstdembed."""

from zstdembed.codec._protocol import Codec
from zstdembed.codec._zstd import MAX_COMPRESSION_LEVEL, MIN_COMPRESSION_LEVEL, ZstdCodec, default_codec

__all__ = [
    "MAX_COMPRESSION_LEVEL",
    "MIN_COMPRESSION_LEVEL",
    "Codec",
    "ZstdCodec",
    "default_codec",
]
