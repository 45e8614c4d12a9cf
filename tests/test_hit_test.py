"""Tests for handle hit-testing."""

from svg_color_picker.geometry.hit_test import HandlePosition, hit_test
from svg_color_picker.geometry.params import WidgetGeometryParams


class TestHitTest:

    def test_miss_returns_none(self, params: WidgetGeometryParams) -> None:
        handles = [HandlePosition(50, 50, 0), HandlePosition(100, 100, 1)]
        assert hit_test(params, 200, 200, handles) is None
        assert hit_test(params, 200, 200, []) is None

    def test_hit(self, params: WidgetGeometryParams) -> None:
        handles = [HandlePosition(50, 50, 0), HandlePosition(100, 100, 1)]
        assert hit_test(params, 103, 98, handles) == 1

    def test_stacked_handles_pick_lowest_index(self, params: WidgetGeometryParams) -> None:
        handles = [HandlePosition(80, 80, 0), HandlePosition(80, 80, 1)]
        assert hit_test(params, 80, 80, handles) == 0

    def test_lowest_index_wins_regardless_of_order(self, params: WidgetGeometryParams) -> None:
        handles = [HandlePosition(84, 80, 2), HandlePosition(76, 80, 1)]
        assert hit_test(params, 80, 80, handles) == 1

    def test_uses_euclidean_distance(self, params: WidgetGeometryParams) -> None:
        # Inside the handle's bounding box but outside its circle
        handles = [HandlePosition(50, 50, 0)]
        assert hit_test(params, 56, 56, handles) is None
        assert hit_test(params, 55, 55, handles) == 0

    def test_edge_is_exclusive(self, params: WidgetGeometryParams) -> None:
        handles = [HandlePosition(50, 50, 0)]
        assert hit_test(params, 58, 50, handles) is None
        assert hit_test(params, 57.9, 50, handles) == 0

    def test_radius_comes_from_params(self) -> None:
        handles = [HandlePosition(50, 50, 0)]
        big = WidgetGeometryParams(handle_radius=20)
        assert hit_test(big, 65, 50, handles) == 0
