"""Tag-cloud configuration dataclass and factory functions."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Tuple


@dataclass
class CloudConfig:
    # Font sizing (pixels)
    min_font_size: int = 12
    max_font_size: int = 72

    # Layout
    padding: int = 2            # empty pixels kept around every tag
    angle_step: float = 0.05    # spiral radians per candidate point
    turn_spacing: float = 2.0   # pixels between spiral turns
    restart_spiral: bool = False  # walk a fresh spiral for every tag (denser, slower)

    # Rendering
    margin: int = 20            # border around the cloud bounds in the output image
    background: Tuple[int, int, int] = (255, 255, 255)
    text_color: Tuple[int, int, int] = (20, 20, 20)
    font_paths: List[Path] = field(default_factory=list)

    # Input handling
    lowercase: bool = True

    show_progress: bool = False


def make_cloud_config(scale: float = 1.0) -> CloudConfig:
    """Return a CloudConfig with every pixel dimension multiplied by *scale*.

    The defaults are tuned for a cloud of a few hundred tags viewed on screen.
    Pass scale=2.0 for print-quality output.
    """
    return CloudConfig(
        min_font_size=max(4, int(12 * scale)),
        max_font_size=max(8, int(72 * scale)),
        padding=max(0, int(2 * scale)),
        turn_spacing=max(1.0, 2.0 * scale),
        margin=max(0, int(20 * scale)),
    )


def make_cloud_config_preview() -> CloudConfig:
    """Return a small, fast CloudConfig for thumbnails and quick previews.

    Coarser spiral steps and smaller fonts trade packing density for speed.
    """
    return CloudConfig(
        min_font_size=6,
        max_font_size=32,
        padding=1,
        angle_step=0.1,
        turn_spacing=3.0,
        margin=8,
    )
