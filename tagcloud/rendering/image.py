"""Rasterise a CloudLayout into a Pillow image."""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path
from typing import TYPE_CHECKING, Sequence, Tuple

from PIL import Image, ImageDraw

from tagcloud._geometry import Rectangle, translate_box
from tagcloud.rendering.text import load_font, text_bbox

if TYPE_CHECKING:
    from tagcloud.pipeline.models import CloudLayout

logger = logging.getLogger(__name__)

Color = Tuple[int, int, int]
BOX_COLOR: Color = (255, 140, 0)


def canvas_size(bounds: Rectangle | None, margin: int) -> tuple[int, int]:
    """Image size needed to show *bounds* with *margin* pixels on every side."""
    if bounds is None:
        return (max(1, 2 * margin), max(1, 2 * margin))
    return (bounds.width + 2 * margin, bounds.height + 2 * margin)


def render_cloud(
    layout: CloudLayout,
    *,
    font_paths: Sequence[Path] = (),
    margin: int = 20,
    background: Color = (255, 255, 255),
    text_color: Color = (20, 20, 20),
    draw_boxes: bool = False,
) -> Image.Image:
    """Draw every tag centred in its rectangle.

    The layout is shifted so that its bounds start at ``(margin, margin)``.
    With *draw_boxes* the packed rectangles are outlined as well, which is
    handy when inspecting a layout by eye.
    """
    if layout is None:
        raise TypeError("render_cloud() needs a CloudLayout, got None")
    img = Image.new("RGB", canvas_size(layout.bounds, margin), background)
    if layout.bounds is None:
        return img

    draw = ImageDraw.Draw(img)
    dx = margin - layout.bounds.x
    dy = margin - layout.bounds.y
    font_for = lru_cache(maxsize=None)(lambda size: load_font(font_paths, size))

    for placed in layout.tags:
        x0, y0, x1, y1 = translate_box(placed.rectangle.as_box(), dx, dy)
        if draw_boxes:
            draw.rectangle((x0, y0, x1 - 1, y1 - 1), outline=BOX_COLOR)
        font = font_for(placed.tag.font_size)
        left, top, right, bottom = text_bbox(placed.tag.label, font)
        tx = (x0 + x1) // 2 - (right - left) // 2 - left
        ty = (y0 + y1) // 2 - (bottom - top) // 2 - top
        draw.text((tx, ty), placed.tag.label, font=font, fill=text_color)

    logger.debug("rendered %d tags onto a %dx%d canvas", len(layout.tags), *img.size)
    return img


def save_cloud(layout: CloudLayout, path: Path | str, **kwargs) -> Path:
    """Render *layout* and write it to *path*; the format follows the suffix."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    render_cloud(layout, **kwargs).save(path)
    return path
