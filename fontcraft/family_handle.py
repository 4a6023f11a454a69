"""The information needed to locate and open the fonts in a family."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from fontcraft.handle import Handle


class FamilyHandle:
    """An ordered set of font handles belonging to one family."""

    def __init__(self) -> None:
        self._fonts: list[Handle] = []

    @classmethod
    def from_font_handles(cls, fonts: Iterable[Handle]) -> FamilyHandle:
        """A family handle holding ``fonts`` in order."""
        family = cls()
        family._fonts.extend(fonts)
        return family

    def push(self, font: Handle) -> None:
        """Add a handle to the set."""
        self._fonts.append(font)

    def is_empty(self) -> bool:
        return not self._fonts

    def fonts(self) -> tuple[Handle, ...]:
        """All the handles in the set."""
        return tuple(self._fonts)

    def __len__(self) -> int:
        return len(self._fonts)

    def __iter__(self) -> Iterator[Handle]:
        return iter(self._fonts)

    def __repr__(self) -> str:
        return f"FamilyHandle(fonts={self._fonts!r})"