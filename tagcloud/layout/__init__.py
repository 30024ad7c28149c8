"""tagcloud.layout — circular rectangle packing around a shared center.

Quick start
-----------
>>> from tagcloud.layout import create_packer, place, bounds, placed_rectangles
>>> packer = create_packer()
>>> place(packer, (40, 20))
Rectangle(x=-20, y=-10, width=40, height=20)
>>> place(packer, (0, 5))
InvalidSizeError('Rectangle size must be positive integers in both dimensions, got (0, 5)')

The functional ``place`` hands back an :class:`InvalidSizeError` instead of
raising it; ``RectanglePacker.place`` raises.
"""

from __future__ import annotations

from tagcloud._geometry import Point, Rectangle, Size
from tagcloud.layout.bounds import LayoutBoundsTracker
from tagcloud.layout.packer import InvalidSizeError, RectanglePacker
from tagcloud.layout.registry import PlacedRectangle, PlacementRegistry
from tagcloud.layout.spiral import ArchimedeanSpiral


def create_packer(center: Point | tuple[int, int] = Point(0, 0), **options) -> RectanglePacker:
    """Start a new layout run centred on *center*.

    Keyword options (``angle_step``, ``turn_spacing``, ``restart_spiral``) are
    forwarded to :class:`RectanglePacker`.
    """
    return RectanglePacker(Point(*center), **options)


def place(packer: RectanglePacker, size: Size | tuple[int, int]) -> Rectangle | InvalidSizeError:
    try:
        return packer.place(size)
    except InvalidSizeError as exc:
        return exc


def bounds(packer: RectanglePacker) -> Rectangle | None:
    return packer.bounds()


def placed_rectangles(packer: RectanglePacker) -> tuple[Rectangle, ...]:
    return packer.placed_rectangles


__all__ = [
    # Functional surface
    "create_packer",
    "place",
    "bounds",
    "placed_rectangles",
    # Components
    "ArchimedeanSpiral",
    "LayoutBoundsTracker",
    "PlacementRegistry",
    "PlacedRectangle",
    "RectanglePacker",
    # Errors
    "InvalidSizeError",
]
