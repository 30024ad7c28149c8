"""Matplotlib-based visualisation for packed layouts and the spiral search path.

All public helpers return a ``matplotlib.figure.Figure`` so the caller can
save, show, or embed the result in a notebook.

Typical usage::

    from tagcloud.viz import plot_layout, plot_spiral

    fig = plot_layout(layout)
    fig = plot_layout(packer.placed_rectangles, title="raw packer output")
    fig = plot_spiral(2000)
"""

from __future__ import annotations

from typing import Sequence, Union

import matplotlib.patches as mpatches
import matplotlib.pyplot as plt
import numpy as np
from matplotlib.figure import Figure

from tagcloud._geometry import Point, Rectangle
from tagcloud.layout.spiral import (
    DEFAULT_ANGLE_STEP,
    DEFAULT_TURN_SPACING,
    ArchimedeanSpiral,
)
from tagcloud.pipeline.models import CloudLayout

# ── colour palette ──────────────────────────────────────────────────────────
BOX_COLOR: str = "tab:blue"
BOUNDS_COLOR: str = "orange"
CENTER_COLOR: str = "red"
PATH_COLOR: str = "tab:gray"

LayoutLike = Union[CloudLayout, Sequence[Rectangle]]


# ── internal helpers ────────────────────────────────────────────────────────


def _prepare_axes(
    ax: plt.Axes | None,
    figsize: tuple[float, float],
) -> tuple[Figure, plt.Axes]:
    """Return *(figure, axes)* with image-style (y down) equal-aspect axes."""
    if ax is None:
        fig, ax = plt.subplots(1, 1, figsize=figsize)
    else:
        fig = ax.get_figure()
    ax.set_aspect("equal")
    ax.invert_yaxis()
    return fig, ax


def _draw_rectangle(ax: plt.Axes, rect: Rectangle, label: str | None = None) -> None:
    ax.add_patch(
        mpatches.Rectangle(
            (rect.x, rect.y),
            rect.width,
            rect.height,
            linewidth=1,
            edgecolor=BOX_COLOR,
            facecolor="none",
        )
    )
    if label:
        cx, cy = rect.center
        ax.text(cx, cy, label, ha="center", va="center", fontsize=6)


def _split(layout: LayoutLike) -> tuple[list[Rectangle], list[str | None], Rectangle | None]:
    if isinstance(layout, CloudLayout):
        return layout.rectangles, [t.tag.label for t in layout.tags], layout.bounds
    rects = list(layout)
    if not rects:
        return [], [], None
    boxes = np.array([r.as_box() for r in rects])
    x0, y0 = boxes[:, :2].min(axis=0)
    x1, y1 = boxes[:, 2:].max(axis=0)
    bounds = Rectangle(int(x0), int(y0), int(x1 - x0), int(y1 - y0))
    return rects, [None] * len(rects), bounds


# ── public API ──────────────────────────────────────────────────────────────


def plot_layout(
    layout: LayoutLike,
    *,
    ax: plt.Axes | None = None,
    figsize: tuple[float, float] = (8, 8),
    title: str | None = None,
    show_center: bool = True,
    center: Point = Point(0, 0),
) -> Figure:
    """Draw packed rectangles, their labels and the overall bounds.

    Parameters
    ----------
    layout:
        A ``CloudLayout`` from :pymethod:`TagCloud.layout`, or a plain sequence
        of ``Rectangle`` objects (e.g. ``packer.placed_rectangles``).
    ax:
        Existing matplotlib axes to draw on.  A new figure is created when
        *None* (default).
    figsize:
        Figure size when creating a new figure.
    title:
        Optional title.  Auto-generated when *None*.
    show_center:
        Mark the point the packer spiralled out from.
    center:
        That point, as given to the packer.  Defaults to the origin.

    Returns
    -------
    matplotlib.figure.Figure
    """
    fig, ax = _prepare_axes(ax, figsize)
    rects, labels, bounds = _split(layout)

    for rect, label in zip(rects, labels):
        _draw_rectangle(ax, rect, label)

    if bounds is not None:
        ax.add_patch(
            mpatches.Rectangle(
                (bounds.x, bounds.y),
                bounds.width,
                bounds.height,
                linewidth=1.5,
                linestyle="--",
                edgecolor=BOUNDS_COLOR,
                facecolor="none",
            )
        )
        pad = max(bounds.width, bounds.height) * 0.05 + 1
        ax.set_xlim(bounds.left - pad, bounds.right + pad)
        ax.set_ylim(bounds.bottom + pad, bounds.top - pad)

    if show_center:
        ax.plot([center[0]], [center[1]], marker="+", color=CENTER_COLOR, markersize=10)

    if title is None:
        size = "empty" if bounds is None else f"{bounds.width}×{bounds.height}"
        title = f"{len(rects)} rectangles, bounds {size}"
    ax.set_title(title)
    fig.tight_layout()
    return fig


def plot_spiral(
    n_points: int = 2000,
    *,
    center: Point = Point(0, 0),
    angle_step: float = DEFAULT_ANGLE_STEP,
    turn_spacing: float = DEFAULT_TURN_SPACING,
    ax: plt.Axes | None = None,
    figsize: tuple[float, float] = (6, 6),
    title: str | None = None,
) -> Figure:
    """Plot the first *n_points* candidate positions of the search spiral."""
    fig, ax = _prepare_axes(ax, figsize)
    spiral = ArchimedeanSpiral(center, angle_step=angle_step, turn_spacing=turn_spacing)
    pts = np.array([spiral.next_point() for _ in range(n_points)])
    if len(pts):
        ax.plot(pts[:, 0], pts[:, 1], ".", color=PATH_COLOR, markersize=2)
    ax.plot([center[0]], [center[1]], marker="+", color=CENTER_COLOR, markersize=10)
    ax.set_title(title or f"First {n_points} spiral points")
    fig.tight_layout()
    return fig
