"""The information needed to locate and open a font: a path, raw bytes, or a native font."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, TypeVar

_MAX_FONT_INDEX = 0xFFFFFFFF

T = TypeVar("T")


def _check_index(font_index: int) -> int:
    if isinstance(font_index, bool) or not isinstance(font_index, int):
        raise TypeError("a font index must be an integer")
    if not 0 <= font_index <= _MAX_FONT_INDEX:
        raise ValueError(f"font index out of range: {font_index}")
    return font_index


class Handle:
    """Where a font lives. Open it with a loader, or with :meth:`load`."""

    @classmethod
    def from_path(cls, path: str | Path, font_index: int = 0) -> PathHandle:
        """A font on disk; ``font_index`` picks a font from a collection, else pass 0."""
        return PathHandle(Path(path), font_index)

    @classmethod
    def from_memory(cls, data: bytes, font_index: int = 0) -> MemoryHandle:
        """Raw TrueType/OpenType data; ``font_index`` picks a font from a collection."""
        return MemoryHandle(bytes(data), font_index)

    @classmethod
    def from_native(cls, font: Any) -> NativeHandle:
        """A handle wrapping the native font object of an already-loaded font."""
        return NativeHandle(font.native_font())

    def native_as(self, kind: type[T]) -> T | None:
        """The wrapped native font if this handle holds one of type ``kind``, else None."""
        return None

    def load(self, loader: Any) -> Any:
        """Open this handle with ``loader``, a loader class."""
        return loader.from_handle(self)


@dataclass(frozen=True)
class PathHandle(Handle):
    """A font on disk. ``font_index`` is 0 unless the file is a collection."""

    path: Path
    font_index: int = 0

    def __post_init__(self) -> None:
        object.__setattr__(self, "path", Path(self.path))
        _check_index(self.font_index)


@dataclass(frozen=True)
class MemoryHandle(Handle):
    """A font in memory. ``font_index`` is 0 unless the data is a collection."""

    data: bytes
    font_index: int = 0

    def __post_init__(self) -> None:
        object.__setattr__(self, "data", bytes(self.data))
        _check_index(self.font_index)


@dataclass(frozen=True)
class NativeHandle(Handle):
    """An already-loaded native font object."""

    inner: Any

    def native_as(self, kind: type[T]) -> T | None:
        return self.inner if isinstance(self.inner, kind) else None