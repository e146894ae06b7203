import numpy as np
import pytest

from geometry.errors import MalformedVerticesError, RegionError
from geometry.ordering import close_points, count_close_points, sort_points


class TestSortPoints:
    def test_sort_by_x_then_y(self):
        v = np.array([0, 0, .75, 2, 1.5, 2.5, 2.5, 2, 2, .5, 1, 0, 0, 0])
        sort_points(v)
        np.testing.assert_array_equal(v, [0, 0, 0, 0, .75, 2, 1, 0, 1.5, 2.5, 2, .5, 2.5, 2])
        sort_points(v, by_y=True)
        np.testing.assert_array_equal(v, [0, 0, 1, 0, 0, 0, 2, .5, 2.5, 2, .75, 2, 1.5, 2.5])

    def test_region_leaves_padding_alone(self):
        v = np.array([9, 9, 3, 3, 2, 4, 4, 2, 1, 5, 5, 1, 9, 9], dtype=float)
        sort_points(v, 2, len(v) - 4)
        np.testing.assert_array_equal(v, [9, 9, 1, 5, 2, 4, 3, 3, 4, 2, 5, 1, 9, 9])
        sort_points(v, 2, len(v) - 4, by_y=True)
        np.testing.assert_array_equal(v, [9, 9, 5, 1, 4, 2, 3, 3, 2, 4, 1, 5, 9, 9])

    def test_duplicate_points_are_all_kept(self):
        v = np.array([1.0, 0.0, 0.0, 0.0, 1.0, 0.0, 0.0, 0.0])
        sort_points(v)
        assert sorted(map(tuple, v.reshape(-1, 2))) == [(0, 0), (0, 0), (1, 0), (1, 0)]
        np.testing.assert_array_equal(v[::2], [0, 0, 1, 1])

    def test_reuses_scratch_buffer(self):
        v = np.array([2.0, 0.0, 0.0, 1.0, 1.0, 2.0])
        scratch = np.zeros(6)
        sort_points(v, scratch=scratch)
        np.testing.assert_array_equal(v, [0, 1, 1, 2, 2, 0])

    def test_invalid_scratch_raises(self):
        v = np.array([2.0, 0.0, 0.0, 1.0, 1.0, 2.0])
        with pytest.raises(RegionError):
            sort_points(v, scratch=np.zeros(4))
        with pytest.raises(ValueError):
            sort_points(v, scratch=v)

    def test_odd_length_raises(self):
        with pytest.raises(MalformedVerticesError):
            sort_points(np.zeros(5))


class TestClosePoints:
    def test_by_squared_distance(self, unit_square):
        np.testing.assert_array_equal(
            close_points(0.0, 0.0, unit_square, max_distance2=1.0), [0, 0, 1, 0, 0, 1]
        )
        assert count_close_points(0.0, 0.0, unit_square, max_distance2=1.0) == 3
        assert count_close_points(0.0, 0.0, unit_square, max_distance2=2.0) == 4

    def test_by_axis_delta(self, unit_square):
        np.testing.assert_array_equal(
            close_points(0.0, 0.0, unit_square, delta_x=0.5, delta_y=2.0), [0, 0, 0, 1]
        )

    def test_region(self, unit_square):
        assert count_close_points(1.0, 1.0, unit_square, 4, 4, max_distance2=0.0) == 1

    def test_needs_exactly_one_mode(self, unit_square):
        with pytest.raises(ValueError):
            close_points(0.0, 0.0, unit_square)
        with pytest.raises(ValueError):
            close_points(0.0, 0.0, unit_square, max_distance2=1.0, delta_x=1.0, delta_y=1.0)
