"""tagcloud — frequency-sized tag clouds packed around a center."""

import importlib.metadata

from tagcloud._geometry import Point, Rectangle, Size
from tagcloud.layout import (
    InvalidSizeError,
    RectanglePacker,
    bounds,
    create_packer,
    place,
    placed_rectangles,
)

try:
    __version__ = importlib.metadata.version("tagcloud")
except importlib.metadata.PackageNotFoundError:  # source checkout
    __version__ = "0.1.0"

__all__ = [
    "__version__",
    "Point",
    "Rectangle",
    "Size",
    "InvalidSizeError",
    "RectanglePacker",
    "bounds",
    "create_packer",
    "place",
    "placed_rectangles",
]
