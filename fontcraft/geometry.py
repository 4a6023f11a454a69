"""Two-dimensional vectors, rectangles and affine transforms."""

from __future__ import annotations

import math
from dataclasses import dataclass, field


@dataclass(frozen=True)
class Vector2:
    """A point or displacement."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: object) -> Vector2:
        if not isinstance(other, Vector2):
            return NotImplemented
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: object) -> Vector2:
        if not isinstance(other, Vector2):
            return NotImplemented
        return Vector2(self.x - other.x, self.y - other.y)

    def __neg__(self) -> Vector2:
        return Vector2(-self.x, -self.y)

    def __mul__(self, factor: object) -> Vector2:
        if not isinstance(factor, (int, float)):
            return NotImplemented
        return Vector2(self.x * factor, self.y * factor)

    __rmul__ = __mul__

    def floor(self) -> Vector2:
        """Round each component down, keeping floats."""
        return Vector2(float(math.floor(self.x)), float(math.floor(self.y)))

    def _ceil(self) -> Vector2:
        return Vector2(float(math.ceil(self.x)), float(math.ceil(self.y)))

    def to_int(self) -> Vector2:
        """Convert each component to an integer, truncating toward zero."""
        return Vector2(int(self.x), int(self.y))


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle given by its origin (minimum corner) and size."""

    origin: Vector2 = field(default_factory=Vector2)
    size: Vector2 = field(default_factory=Vector2)

    @classmethod
    def from_origin_size(cls, origin: Vector2, size: Vector2) -> Rect:
        return cls(origin, size)

    @classmethod
    def _from_corners(cls, upper_left: Vector2, lower_right: Vector2) -> Rect:
        return cls(upper_left, lower_right - upper_left)

    @property
    def origin_x(self) -> float:
        return self.origin.x

    @property
    def origin_y(self) -> float:
        return self.origin.y

    @property
    def width(self) -> float:
        return self.size.x

    @property
    def height(self) -> float:
        return self.size.y

    @property
    def max_x(self) -> float:
        return self.origin.x + self.size.x

    @property
    def max_y(self) -> float:
        return self.origin.y + self.size.y

    @property
    def lower_right(self) -> Vector2:
        return self.origin + self.size

    @property
    def upper_right(self) -> Vector2:
        return Vector2(self.max_x, self.origin.y)

    @property
    def lower_left(self) -> Vector2:
        return Vector2(self.origin.x, self.max_y)

    def intersection(self, other: Rect) -> Rect | None:
        """The overlap of two rectangles, or None if they do not overlap."""
        overlaps = (
            self.origin_x < other.max_x
            and other.origin_x < self.max_x
            and self.origin_y < other.max_y
            and other.origin_y < self.max_y
        )
        if not overlaps:
            return None
        upper_left = Vector2(
            max(self.origin_x, other.origin_x), max(self.origin_y, other.origin_y)
        )
        lower_right = Vector2(min(self.max_x, other.max_x), min(self.max_y, other.max_y))
        return Rect._from_corners(upper_left, lower_right)

    def scale(self, factor: float) -> Rect:
        """Multiply both corners by ``factor``."""
        return Rect._from_corners(self.origin * factor, self.lower_right * factor)

    def round_out(self) -> Rect:
        """The smallest rectangle with integral corners that contains this one."""
        return Rect._from_corners(self.origin.floor(), self.lower_right._ceil())

    def to_int(self) -> Rect:
        """Convert both corners to integers, truncating toward zero."""
        return Rect._from_corners(self.origin.to_int(), self.lower_right.to_int())


@dataclass(frozen=True)
class Transform2:
    """An affine transform: (x, y) maps to (a*x + b*y + e, c*x + d*y + f)."""

    a: float = 1.0
    b: float = 0.0
    c: float = 0.0
    d: float = 1.0
    e: float = 0.0
    f: float = 0.0

    @classmethod
    def identity(cls) -> Transform2:
        return cls()

    @classmethod
    def from_translation(cls, vector: Vector2) -> Transform2:
        return cls(e=vector.x, f=vector.y)

    @classmethod
    def from_scale(cls, factor: float | Vector2) -> Transform2:
        if isinstance(factor, Vector2):
            return cls(a=factor.x, d=factor.y)
        return cls(a=factor, d=factor)

    @classmethod
    def row_major(
        cls, a: float, b: float, c: float, d: float, e: float, f: float
    ) -> Transform2:
        return cls(a, b, c, d, e, f)

    @property
    def translation(self) -> Vector2:
        return Vector2(self.e, self.f)

    def apply(self, point: Vector2) -> Vector2:
        """Transform a point."""
        return Vector2(
            self.a * point.x + self.b * point.y + self.e,
            self.c * point.x + self.d * point.y + self.f,
        )

    def apply_rect(self, rect: Rect) -> Rect:
        """The bounding box of the transformed corners of ``rect``."""
        corners = [
            self.apply(corner)
            for corner in (rect.origin, rect.upper_right, rect.lower_left, rect.lower_right)
        ]
        upper_left = Vector2(min(p.x for p in corners), min(p.y for p in corners))
        lower_right = Vector2(max(p.x for p in corners), max(p.y for p in corners))
        return Rect._from_corners(upper_left, lower_right)

    def __matmul__(self, other: object) -> Transform2:
        """Compose: ``(s @ t).apply(p) == s.apply(t.apply(p))``."""
        if not isinstance(other, Transform2):
            return NotImplemented
        moved = self.apply(other.translation)
        return Transform2(
            self.a * other.a + self.b * other.c,
            self.a * other.b + self.b * other.d,
            self.c * other.a + self.d * other.c,
            self.c * other.b + self.d * other.d,
            moved.x,
            moved.y,
        )