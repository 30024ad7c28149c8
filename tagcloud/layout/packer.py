"""Circular rectangle packer: walk the spiral until a size fits."""

from __future__ import annotations

import logging
import numbers
from typing import Any

from tagcloud._geometry import Point, Rectangle, Size
from tagcloud.layout.bounds import LayoutBoundsTracker
from tagcloud.layout.registry import PlacedRectangle, PlacementRegistry
from tagcloud.layout.spiral import (
    DEFAULT_ANGLE_STEP,
    DEFAULT_TURN_SPACING,
    ArchimedeanSpiral,
)

logger = logging.getLogger(__name__)


class InvalidSizeError(ValueError):
    """Raised when a rectangle whose width or height is not a positive integer is placed."""

    def __init__(self, size: Size) -> None:
        self.size = size
        super().__init__(
            f"Rectangle size must be positive integers in both dimensions, got {tuple(size)}"
        )


def _is_int(value: Any) -> bool:
    return isinstance(value, numbers.Integral) and not isinstance(value, bool)


class RectanglePacker:
    """Place rectangles one at a time, as close to *center* as the spiral allows.

    Each :meth:`place` call pulls points from the spiral, centres the
    rectangle on each, and commits the first one that overlaps nothing already
    placed. The spiral is shared by all calls of one packer, so a search
    resumes where the previous one stopped. With ``restart_spiral=True`` every
    call walks a fresh spiral from the center instead, which revisits gaps
    near the middle at the cost of longer searches.

    Pass sizes largest first for the tightest clouds; the packer itself does
    not enforce any order. There is no step limit: an enormous rectangle after
    many small ones may need a long walk, so wrap calls in your own timeout if
    latency matters.
    """

    def __init__(
        self,
        center: Point = Point(0, 0),
        *,
        angle_step: float = DEFAULT_ANGLE_STEP,
        turn_spacing: float = DEFAULT_TURN_SPACING,
        restart_spiral: bool = False,
    ) -> None:
        self.center = Point(*center)
        if not all(_is_int(c) for c in self.center):
            raise TypeError(f"center coordinates must be integers, got {tuple(self.center)}")
        self.center = Point(int(self.center.x), int(self.center.y))
        self.angle_step = angle_step
        self.turn_spacing = turn_spacing
        self.restart_spiral = restart_spiral
        self.spiral = self._new_spiral()
        self.registry = PlacementRegistry()
        self._bounds = LayoutBoundsTracker()

    def _new_spiral(self) -> ArchimedeanSpiral:
        return ArchimedeanSpiral(
            self.center, angle_step=self.angle_step, turn_spacing=self.turn_spacing
        )

    def place(self, size: Size | tuple[int, int], payload: Any = None) -> Rectangle:
        size = Size(*size)
        if not all(_is_int(d) and d > 0 for d in size):
            raise InvalidSizeError(size)
        size = Size(int(size.width), int(size.height))

        if self.restart_spiral:
            self.spiral = self._new_spiral()
        start = self.spiral.steps
        for point in self.spiral:
            candidate = Rectangle.centered_at(point, size)
            if not self.registry.overlaps_any(candidate):
                break

        self.registry.append(candidate, payload)
        self._bounds.include(candidate)
        logger.debug(
            "placed %s at %s after %d spiral steps",
            tuple(size),
            tuple(candidate.location),
            self.spiral.steps - start,
        )
        return candidate

    def bounds(self) -> Rectangle | None:
        return self._bounds.bounds()

    @property
    def placed_rectangles(self) -> tuple[Rectangle, ...]:
        return self.registry.rectangles

    @property
    def placements(self) -> tuple[PlacedRectangle, ...]:
        return self.registry.placements

    def __len__(self) -> int:
        return len(self.registry)
