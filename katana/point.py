"""Integer points in 2D space."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar


@dataclass
class Point:
    """A point in 2D space with integer coordinates."""

    x: int = 0
    y: int = 0

    ORIGIN: ClassVar[Point]

    def set(self, x: int | Point, y: int | None = None) -> None:
        """Set both coordinates, either from two integers or from another point."""
        if isinstance(x, Point):
            if y is not None:
                raise TypeError("y must not be given when x is a Point")
            self.x, self.y = x.x, x.y
            return
        if y is None:
            raise TypeError("y is required when x is an integer")
        self.x = x
        self.y = y

    def is_origin(self) -> bool:
        """Return True if both coordinates are zero."""
        return self.x == 0 and self.y == 0

    def __add__(self, other: Point) -> Point:
        if not isinstance(other, Point):
            return NotImplemented
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Point) -> Point:
        if not isinstance(other, Point):
            return NotImplemented
        return Point(self.x - other.x, self.y - other.y)

    def __iadd__(self, other: Point) -> Point:
        if not isinstance(other, Point):
            return NotImplemented
        self.x += other.x
        self.y += other.y
        return self

    def __isub__(self, other: Point) -> Point:
        if not isinstance(other, Point):
            return NotImplemented
        self.x -= other.x
        self.y -= other.y
        return self

    def __str__(self) -> str:
        return f"{{ {self.x}, {self.y} }}"


Point.ORIGIN = Point(0, 0)