"""Values of the CSS ``font-family`` property: named families and generic families."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class GenericFamily(Enum):
    """The generic font families of CSS Fonts Level 3."""

    SERIF = "serif"
    SANS_SERIF = "sans-serif"
    MONOSPACE = "monospace"
    CURSIVE = "cursive"
    FANTASY = "fantasy"


@dataclass(frozen=True)
class FamilyName:
    """Either a specific family, by name, or a generic family."""

    name: str | None = None
    generic: GenericFamily | None = None

    def __post_init__(self) -> None:
        if (self.name is None) == (self.generic is None):
            raise ValueError("a family name is either a title or a generic family")
        if self.generic is not None:
            object.__setattr__(self, "generic", GenericFamily(self.generic))

    @classmethod
    def title(cls, name: str) -> FamilyName:
        """A specific family, such as "Arial"."""
        return cls(name=name)

    @classmethod
    def generic_family(cls, generic: GenericFamily | str) -> FamilyName:
        """A generic family such as serif or monospace."""
        return cls(generic=GenericFamily(generic))

    @classmethod
    def parse(cls, text: str) -> FamilyName:
        """Parse one entry of a family list; single quotes are dropped and the rest trimmed."""
        cleaned = text.replace("'", "").strip()
        try:
            return cls.generic_family(GenericFamily(cleaned))
        except ValueError:
            return cls.title(cleaned)

    @property
    def is_generic(self) -> bool:
        return self.generic is not None

    def __str__(self) -> str:
        return self.generic.value if self.generic is not None else self.name


def parse_family_list(text: str) -> list[FamilyName]:
    """Parse a comma-separated family list such as "Times New Roman, Arial, serif"."""
    return [FamilyName.parse(part) for part in text.split(",")]