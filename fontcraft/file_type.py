"""The type of a font file: a single font or a TrueType/OpenType collection."""

from __future__ import annotations

from dataclasses import dataclass

_MAX_FONT_COUNT = 0xFFFFFFFF


@dataclass(frozen=True)
class FileType:
    """A single font (``font_count`` is None) or a collection of ``font_count`` fonts."""

    font_count: int | None = None

    def __post_init__(self) -> None:
        count = self.font_count
        if count is None:
            return
        if isinstance(count, bool) or not isinstance(count, int):
            raise TypeError("a collection's font count must be an integer")
        if not 0 <= count <= _MAX_FONT_COUNT:
            raise ValueError(f"font count out of range: {count}")

    @classmethod
    def single(cls) -> FileType:
        """A file holding one font (.ttf, .otf, .woff, ...)."""
        return cls()

    @classmethod
    def collection(cls, count: int) -> FileType:
        """A file holding a collection of ``count`` fonts (.ttc, .otc, ...)."""
        return cls(count)

    def is_collection(self) -> bool:
        return self.font_count is not None