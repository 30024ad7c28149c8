"""tagcloud.rendering — Pillow-based text measurement and rasterisation."""

from tagcloud.rendering.image import canvas_size, render_cloud, save_cloud
from tagcloud.rendering.text import (
    BaseMeasurer,
    FixedAspectMeasurer,
    PillowMeasurer,
    load_font,
    measure_text,
)

__all__ = [
    "canvas_size",
    "render_cloud",
    "save_cloud",
    "BaseMeasurer",
    "FixedAspectMeasurer",
    "PillowMeasurer",
    "load_font",
    "measure_text",
]
