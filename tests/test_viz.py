"""Tests for tagcloud.viz.layout — matplotlib visualisation helpers."""

import matplotlib
import matplotlib.pyplot as plt
import pytest

from tagcloud._geometry import Point, Rectangle, Size
from tagcloud.layout import RectanglePacker
from tagcloud.pipeline.models import CloudLayout, PlacedTag, Tag
from tagcloud.viz.layout import _split, plot_layout, plot_spiral

# Use non-interactive backend for CI
matplotlib.use("Agg")


# ── fixtures ────────────────────────────────────────────────────────────────


@pytest.fixture()
def rectangles() -> list[Rectangle]:
    packer = RectanglePacker()
    for size in [(40, 20), (30, 15), (20, 10), (10, 10)]:
        packer.place(size)
    return list(packer.placed_rectangles)


@pytest.fixture()
def layout(rectangles: list[Rectangle]) -> CloudLayout:
    tags = [
        PlacedTag(Tag(f"t{i}", 4 - i, 20 - i, Size(r.width, r.height)), r)
        for i, r in enumerate(rectangles)
    ]
    packer_bounds = _split(rectangles)[2]
    return CloudLayout(tags=tags, bounds=packer_bounds)


# ── _split ──────────────────────────────────────────────────────────────────


class TestSplit:
    def test_plain_rectangles_get_bounds(self, rectangles: list[Rectangle]) -> None:
        rects, labels, bounds = _split(rectangles)
        assert rects == rectangles
        assert labels == [None] * len(rectangles)
        assert bounds.left == min(r.left for r in rectangles)
        assert bounds.bottom == max(r.bottom for r in rectangles)

    def test_layout_labels(self, layout: CloudLayout) -> None:
        _, labels, bounds = _split(layout)
        assert labels == ["t0", "t1", "t2", "t3"]
        assert bounds == layout.bounds

    def test_empty(self) -> None:
        assert _split([]) == ([], [], None)


# ── plot_layout ─────────────────────────────────────────────────────────────


class TestPlotLayout:
    def test_returns_figure(self, layout: CloudLayout) -> None:
        fig = plot_layout(layout)
        assert isinstance(fig, matplotlib.figure.Figure)
        plt.close(fig)

    def test_accepts_rectangles(self, rectangles: list[Rectangle]) -> None:
        fig = plot_layout(rectangles)
        assert isinstance(fig, matplotlib.figure.Figure)
        plt.close(fig)

    def test_auto_title(self, layout: CloudLayout) -> None:
        fig = plot_layout(layout)
        assert "4 rectangles" in fig.axes[0].get_title()
        plt.close(fig)

    def test_custom_title(self, layout: CloudLayout) -> None:
        fig = plot_layout(layout, title="My Cloud")
        assert fig.axes[0].get_title() == "My Cloud"
        plt.close(fig)

    def test_empty_layout(self) -> None:
        fig = plot_layout(CloudLayout())
        assert "empty" in fig.axes[0].get_title()
        plt.close(fig)

    def test_one_patch_per_rectangle_plus_bounds(self, layout: CloudLayout) -> None:
        fig = plot_layout(layout)
        assert len(fig.axes[0].patches) == 5
        plt.close(fig)

    def test_center_marker_follows_packer_center(self) -> None:
        packer = RectanglePacker(Point(200, -50))
        packer.place((30, 10))
        fig = plot_layout(packer.placed_rectangles, center=packer.center)
        (marker,) = fig.axes[0].lines
        assert list(marker.get_xdata()) == [200]
        assert list(marker.get_ydata()) == [-50]
        plt.close(fig)

    def test_no_center_marker(self, layout: CloudLayout) -> None:
        fig = plot_layout(layout, show_center=False)
        assert fig.axes[0].lines == []
        plt.close(fig)

    def test_with_existing_axes(self, layout: CloudLayout) -> None:
        fig_ext, ax_ext = plt.subplots()
        fig = plot_layout(layout, ax=ax_ext)
        assert fig is fig_ext
        plt.close(fig)


# ── plot_spiral ─────────────────────────────────────────────────────────────


class TestPlotSpiral:
    def test_returns_figure(self) -> None:
        fig = plot_spiral(500)
        assert isinstance(fig, matplotlib.figure.Figure)
        plt.close(fig)

    def test_default_title(self) -> None:
        fig = plot_spiral(300)
        assert fig.axes[0].get_title() == "First 300 spiral points"
        plt.close(fig)

    def test_custom_center(self) -> None:
        fig = plot_spiral(100, center=Point(50, 50), title="offset")
        assert fig.axes[0].get_title() == "offset"
        plt.close(fig)

    def test_zero_points(self) -> None:
        fig = plot_spiral(0)
        assert isinstance(fig, matplotlib.figure.Figure)
        plt.close(fig)


# ── top-level import ────────────────────────────────────────────────────────


class TestVizInit:
    """Ensure the convenience ``from tagcloud.viz import ...`` works."""

    def test_top_level_imports(self) -> None:
        from tagcloud.viz import plot_layout, plot_spiral  # noqa: F401
