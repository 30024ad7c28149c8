"""Archimedean spiral used as the outward search path for tag placement."""

from __future__ import annotations

import math

from tagcloud._geometry import Point

DEFAULT_ANGLE_STEP = 0.05  # radians advanced per point
DEFAULT_TURN_SPACING = 2.0  # pixels between successive turns


class ArchimedeanSpiral:
    """Infinite, forward-only stream of integer points spiralling out of *center*.

    The radius grows linearly with the angle (``r = turn_spacing * θ / 2π``),
    so consecutive turns are ``turn_spacing`` pixels apart. The first point is
    the center itself. There is no rewind: build a new instance to start over.
    """

    def __init__(
        self,
        center: Point = Point(0, 0),
        angle_step: float = DEFAULT_ANGLE_STEP,
        turn_spacing: float = DEFAULT_TURN_SPACING,
    ) -> None:
        if angle_step <= 0:
            raise ValueError(f"angle_step must be positive, got {angle_step}")
        if turn_spacing <= 0:
            raise ValueError(f"turn_spacing must be positive, got {turn_spacing}")
        self.center = Point(*center)
        self.angle_step = angle_step
        self.turn_spacing = turn_spacing
        self._radius_per_radian = turn_spacing / (2 * math.pi)
        self._angle = 0.0
        self.steps = 0

    @property
    def angle(self) -> float:
        return self._angle

    @property
    def radius(self) -> float:
        return self._radius_per_radian * self._angle

    def next_point(self) -> Point:
        r = self.radius
        point = Point(
            self.center.x + round(r * math.cos(self._angle)),
            self.center.y + round(r * math.sin(self._angle)),
        )
        self._angle += self.angle_step
        self.steps += 1
        return point

    def __iter__(self) -> ArchimedeanSpiral:
        return self

    def __next__(self) -> Point:
        return self.next_point()
