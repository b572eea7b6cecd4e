"""Tests for ZstdCodec."""

import random

import pytest
import zstandard

from zstdembed.codec import MAX_COMPRESSION_LEVEL, MIN_COMPRESSION_LEVEL, Codec, ZstdCodec, default_codec
from zstdembed.errors import (
    CompressionError,
    CompressionLevelError,
    DecodeError,
    MalformedFrameError,
    TruncatedStreamError,
    UnsupportedFrameError,
)


def _sample_text(lines: int = 400) -> bytes:
    rng = random.Random(1948)
    words = ("right", "dignity", "freedom", "equal", "person", "law", "everyone", "shall", "nation", "assembly")
    return "\n".join(
        f"Article {index}: " + " ".join(rng.choice(words) for _ in range(12)) for index in range(lines)
    ).encode("utf-8")


@pytest.mark.parametrize(
    ("data", "level"),
    [
        pytest.param(b"", 3, id="empty"),
        pytest.param(b"x", 1, id="single-byte"),
        pytest.param(bytes(range(256)) * 8, 19, id="binary"),
        pytest.param(_sample_text(), 22, id="text-max-level"),
        pytest.param(_sample_text(), -5, id="text-negative-level"),
        pytest.param(_sample_text(), 0, id="text-default-level"),
    ],
)
def test_round_trip(data: bytes, level: int) -> None:
    codec = ZstdCodec()
    assert codec.decompress(codec.compress(data, level=level)) == data


def test_compress_is_deterministic() -> None:
    codec = ZstdCodec()
    data = _sample_text()
    assert codec.compress(data, level=19) == codec.compress(data, level=19)


def test_compress_emits_a_zstd_frame() -> None:
    frame = ZstdCodec().compress(_sample_text(), level=3)
    assert frame.startswith(zstandard.FRAME_HEADER)
    assert zstandard.get_frame_parameters(frame).dict_id == 0


def test_output_is_readable_by_reference_decoder() -> None:
    data = _sample_text()
    frame = ZstdCodec().compress(data, level=19)
    assert zstandard.ZstdDecompressor().stream_reader(frame).read() == data


@pytest.mark.parametrize(
    "level",
    [
        pytest.param(MAX_COMPRESSION_LEVEL + 1, id="above-max"),
        pytest.param(MIN_COMPRESSION_LEVEL - 1, id="below-min"),
        pytest.param(True, id="bool"),
        pytest.param("19", id="string"),
        pytest.param(3.0, id="float"),
    ],
)
def test_rejects_invalid_level(level: object) -> None:
    codec = ZstdCodec()
    with pytest.raises(CompressionLevelError) as exc_info:
        codec.compress(b"data", level=level)  # type: ignore[arg-type]
    assert exc_info.value.level == level
    assert exc_info.value.maximum == MAX_COMPRESSION_LEVEL


def test_validate_level_accepts_range_bounds() -> None:
    codec = ZstdCodec()
    assert codec.validate_level(MIN_COMPRESSION_LEVEL) == MIN_COMPRESSION_LEVEL
    assert codec.validate_level(MAX_COMPRESSION_LEVEL) == MAX_COMPRESSION_LEVEL


def test_all_zero_input_is_malformed() -> None:
    with pytest.raises(MalformedFrameError):
        ZstdCodec().decompress(bytes(4538))


def test_empty_input_is_truncated() -> None:
    with pytest.raises(TruncatedStreamError):
        ZstdCodec().decompress(b"")


def test_partial_magic_is_truncated() -> None:
    with pytest.raises(TruncatedStreamError):
        ZstdCodec().decompress(zstandard.FRAME_HEADER[:2])


def test_short_garbage_is_malformed() -> None:
    with pytest.raises(MalformedFrameError):
        ZstdCodec().decompress(b"\x01\x02")


def test_partial_header_fails_with_decode_error() -> None:
    frame = ZstdCodec().compress(_sample_text(), level=3)
    with pytest.raises(DecodeError):
        ZstdCodec().decompress(frame[:5])


def test_missing_tail_is_truncated() -> None:
    frame = ZstdCodec().compress(_sample_text(), level=3)
    with pytest.raises(TruncatedStreamError):
        ZstdCodec().decompress(frame[:-3])


def test_trailing_bytes_are_malformed() -> None:
    codec = ZstdCodec()
    frame = codec.compress(b"hello", level=3)
    with pytest.raises(MalformedFrameError, match="trailing"):
        codec.decompress(frame + frame)


def test_skippable_frame_is_unsupported() -> None:
    skippable = (0x184D2A50).to_bytes(4, "little") + (4).to_bytes(4, "little") + b"meta"
    with pytest.raises(UnsupportedFrameError):
        ZstdCodec().decompress(skippable)


def test_dictionary_frame_is_unsupported() -> None:
    rng = random.Random(217)
    samples = [
        " ".join(rng.choice(("article", "right", "person", "freedom", "equal", "nation")) for _ in range(30)).encode()
        + str(index).encode()
        for index in range(1000)
    ]
    dictionary = zstandard.train_dictionary(4096, samples)
    frame = zstandard.ZstdCompressor(level=3, dict_data=dictionary).compress(_sample_text())
    with pytest.raises(UnsupportedFrameError, match="dictionary"):
        ZstdCodec().decompress(frame)


def test_oversized_window_is_unsupported() -> None:
    # window_log 28 exceeds the decoder's default 2**27 limit.
    params = zstandard.ZstdCompressionParameters.from_level(3, window_log=28)
    compressor = zstandard.ZstdCompressor(compression_params=params).compressobj()
    frame = compressor.compress(_sample_text()) + compressor.flush()
    with pytest.raises(UnsupportedFrameError, match="memory"):
        ZstdCodec().decompress(frame)


def test_compressor_failure_is_wrapped(monkeypatch: pytest.MonkeyPatch) -> None:
    failure = zstandard.ZstdError("cannot allocate compression context")

    def _failing_compressor(**_: object) -> zstandard.ZstdCompressor:
        raise failure

    monkeypatch.setattr(zstandard, "ZstdCompressor", _failing_compressor)
    with pytest.raises(CompressionError, match="level 3") as exc_info:
        ZstdCodec().compress(b"payload", level=3)
    assert exc_info.value.__cause__ is failure


def test_accepts_bytes_like_input() -> None:
    codec = ZstdCodec()
    frame = codec.compress(b"payload", level=3)
    assert codec.decompress(memoryview(frame)) == b"payload"  # type: ignore[arg-type]
    assert codec.decompress(bytearray(frame)) == b"payload"  # type: ignore[arg-type]


def test_satisfies_codec_protocol() -> None:
    assert isinstance(ZstdCodec(), Codec)
    assert ZstdCodec.name == "zstd"


def test_default_codec_is_shared() -> None:
    assert default_codec() is default_codec()
