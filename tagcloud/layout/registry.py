"""Append-only store of placed rectangles with a vectorised overlap test."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator

import numpy as np

from tagcloud._geometry import Rectangle

_INITIAL_CAPACITY = 64


@dataclass(frozen=True)
class PlacedRectangle:
    rectangle: Rectangle
    payload: Any = None


class PlacementRegistry:
    """Committed rectangles of one layout run, in placement order.

    Boxes are mirrored into a contiguous ``(n, 4)`` int64 buffer of
    ``(x0, y0, x1, y1)`` rows so that :meth:`overlaps_any` is a single numpy
    expression instead of a Python loop. The buffer doubles when full.
    """

    def __init__(self) -> None:
        self._placements: list[PlacedRectangle] = []
        self._boxes = np.empty((_INITIAL_CAPACITY, 4), dtype=np.int64)

    def __len__(self) -> int:
        return len(self._placements)

    def __iter__(self) -> Iterator[PlacedRectangle]:
        return iter(tuple(self._placements))

    @property
    def placements(self) -> tuple[PlacedRectangle, ...]:
        return tuple(self._placements)

    @property
    def rectangles(self) -> tuple[Rectangle, ...]:
        return tuple(p.rectangle for p in self._placements)

    def overlaps_any(self, candidate: Rectangle) -> bool:
        """True iff *candidate* shares positive area with a stored rectangle.

        Rectangles that only touch along an edge or a corner do not overlap.
        """
        n = len(self._placements)
        if n == 0:
            return False
        b = self._boxes[:n]
        x0, y0, x1, y1 = candidate.as_box()
        hits = (b[:, 0] < x1) & (b[:, 2] > x0) & (b[:, 1] < y1) & (b[:, 3] > y0)
        return bool(hits.any())

    def append(self, rectangle: Rectangle, payload: Any = None) -> PlacedRectangle:
        n = len(self._placements)
        if n == len(self._boxes):
            grown = np.empty((2 * len(self._boxes), 4), dtype=np.int64)
            grown[:n] = self._boxes
            self._boxes = grown
        self._boxes[n] = rectangle.as_box()
        placed = PlacedRectangle(rectangle, payload)
        self._placements.append(placed)
        return placed
