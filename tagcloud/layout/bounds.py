"""Running bounding box of everything placed so far."""

from __future__ import annotations

from tagcloud._geometry import Box, Rectangle, union_box


class LayoutBoundsTracker:
    def __init__(self) -> None:
        self._box: Box | None = None

    def include(self, rectangle: Rectangle) -> None:
        box = rectangle.as_box()
        self._box = box if self._box is None else union_box(self._box, box)

    def bounds(self) -> Rectangle | None:
        """Union bounding box, or None before the first placement."""
        if self._box is None:
            return None
        return Rectangle.from_box(self._box)
