"""Core data structures for the tag-cloud pipeline."""

from __future__ import annotations

from dataclasses import dataclass, field

from tagcloud._geometry import Rectangle, Size


@dataclass
class Tag:
    label: str
    count: int
    font_size: int
    size: Size  # measured text extent, before padding

    def __post_init__(self) -> None:
        if not self.label or not self.label.strip():
            raise ValueError(f"Tag label must contain visible text, got {self.label!r}")


@dataclass
class PlacedTag:
    """A tag together with the rectangle the packer gave it.

    ``rectangle`` includes the layout padding; the text is drawn centred in it.
    """

    tag: Tag
    rectangle: Rectangle

    def to_dict(self) -> dict:
        r = self.rectangle
        return {
            "label": self.tag.label,
            "count": self.tag.count,
            "font_size": self.tag.font_size,
            "x": r.x,
            "y": r.y,
            "width": r.width,
            "height": r.height,
        }


@dataclass
class CloudLayout:
    tags: list[PlacedTag] = field(default_factory=list)
    bounds: Rectangle | None = None

    @property
    def rectangles(self) -> list[Rectangle]:
        return [t.rectangle for t in self.tags]

    def to_dict(self) -> dict:
        b = self.bounds
        return {
            "bounds": None if b is None else [b.x, b.y, b.width, b.height],
            "tags": [t.to_dict() for t in self.tags],
        }
