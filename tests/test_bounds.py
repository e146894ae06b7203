import math

import numpy as np
import pytest

from geometry.bounds import (
    aabb,
    amplitude,
    bounding_box,
    depth,
    filter_w,
    filter_x,
    filter_x3d,
    filter_y,
    filter_y3d,
    filter_z,
    height,
    max_value,
    max_x,
    max_y,
    min_value,
    min_x,
    min_y,
    size,
    width,
)
from geometry.errors import RegionError
from geometry.transforms import rotate_vertices


class TestScalarExtents:
    def test_min_max_amplitude(self):
        values = [3.0, -1.0, 7.0, 2.0]
        assert min_value(values) == -1.0
        assert max_value(values) == 7.0
        assert amplitude(values) == 8.0
        assert amplitude(values, 2, 2) == 5.0

    def test_empty_region_is_nan(self):
        assert math.isnan(min_value([1.0, 2.0], 2, 0))
        assert math.isnan(amplitude([]))
        assert math.isnan(width(np.zeros(4), 4, 0))

    def test_bounds_violation_raises(self):
        with pytest.raises(RegionError):
            min_value([1.0, 2.0], 1, 2)


class TestFilters:
    def test_2d_filters(self):
        v = [0, 1, 2, 3, 4, 5]
        np.testing.assert_array_equal(filter_x(v), [0, 2, 4])
        np.testing.assert_array_equal(filter_y(v), [1, 3, 5])
        np.testing.assert_array_equal(filter_x(v, 2, 4), [2, 4])

    def test_3d_and_4d_filters(self):
        v = list(range(12))
        np.testing.assert_array_equal(filter_x3d(v), [0, 3, 6, 9])
        np.testing.assert_array_equal(filter_y3d(v), [1, 4, 7, 10])
        np.testing.assert_array_equal(filter_z(v), [2, 5, 8, 11])
        np.testing.assert_array_equal(filter_w(v), [3, 7, 11])


class TestExtents:
    def test_region_ignores_padding(self):
        v = np.array([5, 5, 0, 0, 1, 0, 1, 1, 0, 1, 5, 5], dtype=float)
        assert min_x(v, 2, 8) == 0.0
        assert max_x(v, 2, 8) == 1.0
        assert min_y(v, 2, 8) == 0.0
        assert max_y(v, 2, 8) == 1.0
        assert max_x(v) == 5.0

    def test_size_aabb_bounding_box(self):
        v = np.array([1.0, 2.0, 4.0, -1.0, 3.0, 5.0])
        assert width(v) == 3.0
        assert height(v) == 6.0
        assert size(v) == (3.0, 6.0)
        assert aabb(v) == (1.0, -1.0, 3.0, 6.0)
        assert bounding_box(v) == (1.0, -1.0, 4.0, 5.0)

    def test_depth(self):
        v = [0.0, 0.0, -2.0, 1.0, 1.0, 3.0]
        assert depth(v) == 5.0

    def test_width_height_survive_rotate_then_derotate(self, arrow):
        w, h = size(arrow)
        v = arrow.copy()
        rotate_vertices(v, 0.7, 1.0, 1.0)
        rotate_vertices(v, -0.7, 1.0, 1.0)
        assert width(v) == pytest.approx(w)
        assert height(v) == pytest.approx(h)
