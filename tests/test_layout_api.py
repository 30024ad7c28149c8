"""Tests for the functional surface in tagcloud.layout."""

import pytest

from tagcloud._geometry import Point, Rectangle
from tagcloud.layout import (
    InvalidSizeError,
    RectanglePacker,
    bounds,
    create_packer,
    place,
    placed_rectangles,
)


class TestCreatePacker:
    def test_default_center(self):
        packer = create_packer()
        assert isinstance(packer, RectanglePacker)
        assert packer.center == Point(0, 0)

    def test_tuple_center(self):
        packer = create_packer((30, -20))
        assert packer.center == Point(30, -20)
        assert place(packer, (10, 10)).center == (30, -20)

    def test_options_forwarded(self):
        packer = create_packer(angle_step=0.1, turn_spacing=4.0, restart_spiral=True)
        assert packer.spiral.angle_step == 0.1
        assert packer.spiral.turn_spacing == 4.0
        assert packer.restart_spiral is True

    def test_unknown_option_rejected(self):
        with pytest.raises(TypeError):
            create_packer(gravity=9.8)

    def test_fractional_center_rejected(self):
        with pytest.raises(TypeError, match="center"):
            create_packer((10.5, 0))


class TestPlace:
    def test_returns_rectangle(self):
        r = place(create_packer(), (20, 20))
        assert r == Rectangle(-10, -10, 20, 20)

    def test_invalid_size_returned_not_raised(self):
        packer = create_packer()
        place(packer, (10, 10))
        result = place(packer, (0, 5))
        assert isinstance(result, InvalidSizeError)
        assert result.size == (0, 5)
        assert len(placed_rectangles(packer)) == 1

    @pytest.mark.parametrize("size", [(0, 0), (-3, 4), (4, -3), (4.5, 4), (4, 2.0)])
    def test_every_invalid_kind(self, size):
        packer = create_packer()
        assert isinstance(place(packer, size), InvalidSizeError)
        assert placed_rectangles(packer) == ()
        assert bounds(packer) is None


class TestReaders:
    def test_bounds_none_when_empty(self):
        assert bounds(create_packer()) is None

    def test_bounds_after_placements(self):
        packer = create_packer()
        a = place(packer, (20, 20))
        b = place(packer, (20, 20))
        box = bounds(packer)
        assert box.left == min(a.left, b.left)
        assert box.bottom == max(a.bottom, b.bottom)

    def test_placed_rectangles_in_insertion_order(self):
        packer = create_packer()
        placed = [place(packer, (w, 8)) for w in (40, 30, 20, 10)]
        assert placed_rectangles(packer) == tuple(placed)
        assert [r.width for r in placed_rectangles(packer)] == [40, 30, 20, 10]

    def test_snapshot_is_tuple(self):
        packer = create_packer()
        place(packer, (5, 5))
        snap = placed_rectangles(packer)
        place(packer, (5, 5))
        assert isinstance(snap, tuple)
        assert len(snap) == 1


class TestTopLevelExports:
    def test_root_package(self):
        import tagcloud

        packer = tagcloud.create_packer()
        assert isinstance(tagcloud.place(packer, (3, 3)), tagcloud.Rectangle)
        assert isinstance(tagcloud.place(packer, (0, 3)), tagcloud.InvalidSizeError)
        assert len(tagcloud.placed_rectangles(packer)) == 1
        assert tagcloud.bounds(packer) is not None
