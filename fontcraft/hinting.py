"""How hinting (grid fitting) is performed for a glyph, for outlines and rasterization."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class HintingMode(Enum):
    """The kind of grid fitting to perform."""

    NONE = "none"
    VERTICAL = "vertical"
    VERTICAL_SUBPIXEL = "vertical-subpixel"
    FULL = "full"


@dataclass(frozen=True)
class HintingOptions:
    """A hinting mode and, unless the mode is NONE, the point size used for grid fitting."""

    mode: HintingMode = HintingMode.NONE
    size: float | None = None

    def __post_init__(self) -> None:
        mode = HintingMode(self.mode)
        object.__setattr__(self, "mode", mode)
        if mode is HintingMode.NONE:
            if self.size is not None:
                raise ValueError("no size may be given when hinting is off")
        else:
            if self.size is None:
                raise ValueError(f"{mode.value} hinting needs a point size")
            object.__setattr__(self, "size", float(self.size))

    @classmethod
    def none(cls) -> HintingOptions:
        """No hinting unless needed to assemble the glyph."""
        return cls(HintingMode.NONE)

    @classmethod
    def vertical(cls, size: float) -> HintingOptions:
        """Hinting in the vertical direction only."""
        return cls(HintingMode.VERTICAL, size)

    @classmethod
    def vertical_subpixel(cls, size: float) -> HintingOptions:
        """Vertical hinting tuned for subpixel antialiasing."""
        return cls(HintingMode.VERTICAL_SUBPIXEL, size)

    @classmethod
    def full(cls, size: float) -> HintingOptions:
        """Hinting in both directions."""
        return cls(HintingMode.FULL, size)

    def grid_fitting_size(self) -> float | None:
        """The point size used for grid fitting, or None when hinting is off."""
        return self.size