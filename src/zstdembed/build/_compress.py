"""Build-time compressor: read a source file and compress it into an embeddable stream."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from zstdembed.asset import EmbeddedAsset
from zstdembed.codec import default_codec
from zstdembed.errors import SourceFileError

if TYPE_CHECKING:
    from zstdembed.codec import Codec

logger = logging.getLogger(__name__)

_PROJECT_MARKER = "pyproject.toml"


@dataclass(frozen=True, slots=True)
class CompressedAsset:
    """One compressed source file, ready to be rendered into generated code."""

    source: Path
    level: int
    data: bytes
    size: int

    def __post_init__(self) -> None:
        """Check that the recorded size matches the compressed bytes."""
        if len(self.data) != self.size:
            msg = f"CompressedAsset size {self.size} does not match {len(self.data)} compressed bytes."
            raise ValueError(msg)

    def to_asset(self) -> EmbeddedAsset:
        """Build the runtime container the generated code would build."""
        return EmbeddedAsset[self.size]._new_unchecked(self.data)


def find_project_root(start: str | Path | None = None) -> Path:
    """Return the nearest directory at or above ``start`` holding ``pyproject.toml``.

    Fall back to ``start`` (default: the current directory) when no project
    file exists on the way up.
    """
    origin = Path.cwd() if start is None else Path(start).resolve()
    for candidate in (origin, *origin.parents):
        if (candidate / _PROJECT_MARKER).is_file():
            return candidate
    return origin


def resolve_source(path: str | Path, *, root: str | Path | None = None) -> Path:
    """Resolve a source path, joining relative paths onto the build-unit root."""
    source = Path(path)
    if source.is_absolute():
        return source
    base = Path(root).resolve() if root is not None else find_project_root()
    return base / source


def _read_source(source: Path) -> bytes:
    try:
        return source.read_bytes()
    except FileNotFoundError as exc:
        raise SourceFileError(source, "no such file") from exc
    except IsADirectoryError as exc:
        raise SourceFileError(source, "is a directory") from exc
    except PermissionError as exc:
        raise SourceFileError(source, "permission denied") from exc
    except OSError as exc:
        raise SourceFileError(source, exc.strerror or str(exc)) from exc


def compress_file(
    path: str | Path,
    level: int,
    *,
    root: str | Path | None = None,
    codec: Codec | None = None,
) -> CompressedAsset:
    """Read a whole file and compress it at ``level`` into one complete stream.

    The output is deterministic for a given file content, level and codec, so
    embedding the same file twice yields equal assets.
    """
    codec = codec if codec is not None else default_codec()
    level = codec.validate_level(level)
    source = resolve_source(path, root=root)
    data = _read_source(source)
    compressed = codec.compress(data, level=level)
    logger.debug(
        "Compressed %s with %s level %d: %d -> %d bytes",
        source,
        codec.name,
        level,
        len(data),
        len(compressed),
    )
    return CompressedAsset(source=source, level=level, data=compressed, size=len(compressed))


def include_zstd(path: str | Path, level: int, *, root: str | Path | None = None) -> EmbeddedAsset:
    """Compress a file at ``level`` and return it as an EmbeddedAsset."""
    return compress_file(path, level, root=root).to_asset()
