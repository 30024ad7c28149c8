"""Integer rectangle geometry shared across the layout, rendering and viz modules."""

from __future__ import annotations

from dataclasses import dataclass
from typing import NamedTuple, Tuple

Box = Tuple[int, int, int, int]


class Point(NamedTuple):
    x: int
    y: int


class Size(NamedTuple):
    width: int
    height: int


@dataclass(frozen=True)
class Rectangle:
    """Axis-aligned box given by its top-left corner and its size."""

    x: int
    y: int
    width: int
    height: int

    @classmethod
    def centered_at(cls, point: Point, size: Size) -> Rectangle:
        """Rectangle of *size* whose top-left is ``point - size // 2``."""
        return cls(
            point[0] - size[0] // 2,
            point[1] - size[1] // 2,
            size[0],
            size[1],
        )

    @classmethod
    def from_box(cls, box: Box) -> Rectangle:
        x0, y0, x1, y1 = box
        return cls(x0, y0, x1 - x0, y1 - y0)

    @property
    def left(self) -> int:
        return self.x

    @property
    def top(self) -> int:
        return self.y

    @property
    def right(self) -> int:
        return self.x + self.width

    @property
    def bottom(self) -> int:
        return self.y + self.height

    @property
    def location(self) -> Point:
        return Point(self.x, self.y)

    @property
    def size(self) -> Size:
        return Size(self.width, self.height)

    @property
    def center(self) -> Point:
        return Point(self.x + self.width // 2, self.y + self.height // 2)

    def as_box(self) -> Box:
        return (self.left, self.top, self.right, self.bottom)

    def intersects_with(self, other: Rectangle) -> bool:
        """True if the two rectangles share positive area."""
        return boxes_intersect(self.as_box(), other.as_box())


def boxes_intersect(a: Box, b: Box) -> bool:
    """Return True if axis-aligned boxes *a* and *b* overlap at all."""
    return not (a[2] <= b[0] or a[0] >= b[2] or a[3] <= b[1] or a[1] >= b[3])


def union_box(a: Box, b: Box) -> Box:
    """Smallest box enclosing both *a* and *b*."""
    return (min(a[0], b[0]), min(a[1], b[1]), max(a[2], b[2]), max(a[3], b[3]))


def translate_box(box: Box, dx: int, dy: int) -> Box:
    x0, y0, x1, y1 = box
    return (x0 + dx, y0 + dy, x1 + dx, y1 + dy)


def pad_size(size: Size, padding: int) -> Size:
    """Grow *size* by *padding* pixels on every side."""
    return Size(size[0] + 2 * padding, size[1] + 2 * padding)
