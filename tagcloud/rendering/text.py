"""Text rendering utilities: font loading and label measurement."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from functools import lru_cache
from pathlib import Path
from typing import Sequence

from PIL import Image, ImageDraw, ImageFont

from tagcloud._geometry import Size

# A 1x1 scratch canvas is enough for textbbox measurements
_SCRATCH = ImageDraw.Draw(Image.new("L", (1, 1)))


def load_font(font_paths: Sequence[Path], size: int) -> ImageFont.ImageFont:
    """Return the first font in *font_paths* that loads at pixel *size*.

    Falls back to DejaVuSans or Pillow's built-in default on failure.
    """
    for path in font_paths:
        try:
            return ImageFont.truetype(str(path), size=size)
        except OSError:
            continue
    try:
        return ImageFont.truetype("DejaVuSans.ttf", size=size)
    except OSError:
        return ImageFont.load_default(size=size)


def text_bbox(label: str, font: ImageFont.ImageFont) -> tuple[int, int, int, int]:
    """(left, top, right, bottom) of *label* drawn at the origin.

    The offsets can be non-zero (e.g. a positive top for lowercase text), so
    drawing code must subtract them to land the ink where it was measured.
    """
    return tuple(int(v) for v in _SCRATCH.textbbox((0, 0), label, font=font))


def measure_text(label: str, font: ImageFont.ImageFont) -> Size:
    left, top, right, bottom = text_bbox(label, font)
    return Size(max(1, math.ceil(right - left)), max(1, math.ceil(bottom - top)))


# ── measurers ───────────────────────────────────────────────────────────────


class BaseMeasurer(ABC):
    """Abstract interface for turning a (label, font size) into a pixel extent.

    Swap implementations to change how tags are sized without touching the pipeline.
    """

    @abstractmethod
    def measure(self, label: str, font_size: int) -> Size:
        ...


class PillowMeasurer(BaseMeasurer):
    """Measure with real fonts through Pillow's ``textbbox``."""

    def __init__(self, font_paths: Sequence[Path] = ()) -> None:
        self.font_paths = tuple(Path(p) for p in font_paths)
        self._font = lru_cache(maxsize=None)(self._load)

    def _load(self, size: int) -> ImageFont.ImageFont:
        return load_font(self.font_paths, size)

    def font(self, size: int) -> ImageFont.ImageFont:
        return self._font(size)

    def measure(self, label: str, font_size: int) -> Size:
        return measure_text(label, self.font(font_size))


class FixedAspectMeasurer(BaseMeasurer):
    """Font-free estimate: every character is ``char_aspect * font_size`` wide.

    Fully deterministic across machines, which makes it the measurer of
    choice for tests and for layouts that are consumed without rendering.
    """

    def __init__(self, char_aspect: float = 0.6) -> None:
        if char_aspect <= 0:
            raise ValueError(f"char_aspect must be positive, got {char_aspect}")
        self.char_aspect = char_aspect

    def measure(self, label: str, font_size: int) -> Size:
        width = math.ceil(max(1, len(label)) * font_size * self.char_aspect)
        return Size(max(1, width), max(1, font_size))
