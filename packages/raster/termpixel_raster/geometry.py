"""Pixel-space geometry primitives."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Iterator, NamedTuple

from termpixel_color import TerminalColor


class Point(NamedTuple):
    x: int
    y: int


class Size(NamedTuple):
    width: int
    height: int


class Pixel(NamedTuple):
    point: Point
    color: TerminalColor


@dataclass(frozen=True)
class Rectangle:
    """Half-open pixel rectangle; ``width``/``height`` of zero means empty."""

    x: int
    y: int
    width: int
    height: int

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise ValueError("Rectangle size must be non-negative")

    @classmethod
    def from_points(cls, top_left: Point, size: Size) -> "Rectangle":
        return cls(x=top_left.x, y=top_left.y, width=size.width, height=size.height)

    @property
    def top_left(self) -> Point:
        return Point(self.x, self.y)

    @property
    def size(self) -> Size:
        return Size(self.width, self.height)

    @property
    def right(self) -> int:
        """Exclusive right edge."""
        return self.x + self.width

    @property
    def bottom(self) -> int:
        """Exclusive bottom edge."""
        return self.y + self.height

    @property
    def bottom_right(self) -> Point | None:
        if self.is_empty:
            return None
        return Point(self.right - 1, self.bottom - 1)

    @property
    def is_empty(self) -> bool:
        return self.width == 0 or self.height == 0

    def contains(self, point: tuple[int, int]) -> bool:
        x, y = point
        return self.x <= x < self.right and self.y <= y < self.bottom

    def intersection(self, other: "Rectangle") -> "Rectangle":
        left = max(self.x, other.x)
        top = max(self.y, other.y)
        right = min(self.right, other.right)
        bottom = min(self.bottom, other.bottom)
        if right <= left or bottom <= top:
            return Rectangle(x=left, y=top, width=0, height=0)
        return Rectangle(x=left, y=top, width=right - left, height=bottom - top)

    def rows(self) -> range:
        return range(self.y, self.bottom)

    def columns(self) -> range:
        return range(self.x, self.right)

    def points(self) -> Iterator[Point]:
        for y in self.rows():
            for x in self.columns():
                yield Point(x, y)


def saturating_count(value: int) -> int:
    """Clamp a skip/length count to what ``itertools.islice`` accepts."""
    if value <= 0:
        return 0
    return min(value, sys.maxsize)
