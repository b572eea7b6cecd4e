"""EmbeddedAsset: immutable, size-tagged handle to one embedded Zstandard stream."""

from __future__ import annotations

from functools import total_ordering
from typing import ClassVar

from zstdembed.codec import default_codec

_SIZED_CLASSES: dict[int, type[EmbeddedAsset]] = {}


def _restore(size: int, data: bytes) -> EmbeddedAsset:
    """Rebuild a pickled asset without decoding it again."""
    return EmbeddedAsset[size]._new_unchecked(data)


@total_ordering
class EmbeddedAsset:
    """Compressed bytes embedded in a program, decompressed on demand.

    ``EmbeddedAsset[N]`` is a distinct class per compressed length ``N``; every
    instance of it holds exactly ``N`` bytes. Values compare, order and hash by
    their compressed bytes, so the same content compressed at two different
    levels gives two unequal assets.

    Generated modules build instances with ``EmbeddedAsset[N]._new_unchecked``,
    which skips validation of the stream. Calling the class itself validates
    eagerly by decompressing once and raises ``DecodeError`` on bad input.
    """

    __slots__ = ("_data",)

    SIZE: ClassVar[int | None] = None

    _data: bytes

    def __class_getitem__(cls, size: int) -> type[EmbeddedAsset]:
        """Return the class of assets holding exactly ``size`` compressed bytes."""
        if cls.SIZE is not None:
            msg = f"{cls.__name__} is already sized."
            raise TypeError(msg)
        if isinstance(size, bool) or not isinstance(size, int):
            msg = "EmbeddedAsset size must be an int."
            raise TypeError(msg)
        if size < 0:
            msg = "EmbeddedAsset size must be >= 0."
            raise ValueError(msg)

        sized = _SIZED_CLASSES.get(size)
        if sized is None:
            name = f"EmbeddedAsset[{size}]"
            namespace = {"__slots__": (), "SIZE": size, "__module__": __name__, "__qualname__": name}
            sized = _SIZED_CLASSES.setdefault(size, type(name, (EmbeddedAsset,), namespace))
        return sized

    def __new__(cls, data: bytes) -> EmbeddedAsset:
        """Build an asset from a compressed stream, checking that it decodes."""
        asset = cls._new_unchecked(data)
        asset.to_bytes()
        return asset

    @classmethod
    def _new_unchecked(cls, data: bytes) -> EmbeddedAsset:
        """Build an asset without decoding it. Reserved for generated code.

        Only the length is checked against ``SIZE``; an unsized call takes
        ``N`` from ``len(data)``. Bytes that are not a complete stream fail
        later, on the first decompression.
        """
        if not isinstance(data, (bytes, bytearray, memoryview)):
            msg = "EmbeddedAsset data must be bytes-like."
            raise TypeError(msg)
        payload = bytes(data)
        sized = cls if cls.SIZE is not None else cls[len(payload)]
        if len(payload) != sized.SIZE:
            msg = f"{sized.__name__} holds exactly {sized.SIZE} bytes, got {len(payload)}."
            raise ValueError(msg)
        asset = object.__new__(sized)
        object.__setattr__(asset, "_data", payload)
        return asset

    def size(self) -> int:
        """Return the size of the compressed data, in bytes."""
        return len(self._data)

    def to_bytes(self) -> bytes:
        """Decompress into an immutable ``bytes`` value."""
        return default_codec().decompress(self._data)

    def to_bytearray(self) -> bytearray:
        """Decompress into a new, growable ``bytearray``."""
        return bytearray(self.to_bytes())

    def __bytes__(self) -> bytes:
        """Decompress, same as ``to_bytes``."""
        return self.to_bytes()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, EmbeddedAsset):
            return NotImplemented
        return self.SIZE == other.SIZE and self._data == other._data

    def __lt__(self, other: object) -> bool:
        # Assets of different sizes are different types and have no order.
        if not isinstance(other, EmbeddedAsset) or other.SIZE != self.SIZE:
            return NotImplemented
        return self._data < other._data

    def __hash__(self) -> int:
        return hash((self.SIZE, self._data))

    def __repr__(self) -> str:
        return f"{type(self).__name__}(<{len(self._data)} compressed bytes>)"

    def __setattr__(self, name: str, value: object) -> None:
        msg = f"{type(self).__name__} is immutable."
        raise AttributeError(msg)

    def __delattr__(self, name: str) -> None:
        msg = f"{type(self).__name__} is immutable."
        raise AttributeError(msg)

    def __copy__(self) -> EmbeddedAsset:
        return self

    def __deepcopy__(self, memo: dict[int, object]) -> EmbeddedAsset:
        return self

    def __reduce__(self) -> tuple[object, tuple[int, bytes]]:
        return _restore, (len(self._data), self._data)
