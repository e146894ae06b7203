import numpy as np
import pytest

from geometry.errors import MalformedVerticesError, RegionError
from geometry.regions import (
    as_vertex_array,
    check_region,
    require_buffer,
    resolve_region,
    scratch_buffer,
    select,
    split_polygons,
    to_points,
    to_vertex_array,
    wrap_index,
)


class TestCheckRegion:
    def test_valid_regions_pass(self):
        values = np.zeros(8)
        check_region(values, 0, 8)
        check_region(values, 2, 6)
        check_region(values, 8, 0)

    @pytest.mark.parametrize("offset,length", [(-1, 2), (0, -1), (4, 5), (9, 0)])
    def test_out_of_bounds_raises(self, offset, length):
        with pytest.raises(RegionError) as info:
            check_region(np.zeros(8), offset, length)
        assert info.value.offset == offset
        assert info.value.length == length
        assert info.value.size == 8

    def test_region_error_is_index_error(self):
        with pytest.raises(IndexError):
            check_region([1.0, 2.0], 1, 2)

    def test_resolve_defaults_to_end(self):
        assert resolve_region(np.zeros(10), 4) == (4, 6)
        assert resolve_region(np.zeros(10)) == (0, 10)


class TestWrapIndex:
    def test_wraps_into_region(self):
        assert wrap_index(2, 8, 8) == 8
        assert wrap_index(2, 8, 10) == 2
        assert wrap_index(2, 8, 11) == 3
        assert wrap_index(0, 6, 7) == 1


class TestSelect:
    def test_stride_and_start(self):
        values = np.arange(1.0, 13.0)
        np.testing.assert_array_equal(select(values, 0, 12, 2, 3), [3, 6, 9, 12])
        np.testing.assert_array_equal(select(values, 2, 6, 0, 2), [3, 5, 7])
        np.testing.assert_array_equal(select(values, 0, 12, 3, 4), [4, 8, 12])

    def test_writes_into_out(self):
        out = np.full(5, -1.0)
        result = select(np.arange(6.0), 0, 6, 1, 2, out, 1)
        assert result is out
        np.testing.assert_array_equal(out, [-1, 1, 3, 5, -1])

    def test_out_too_small_raises(self):
        with pytest.raises(RegionError):
            select(np.arange(6.0), 0, 6, 0, 2, np.zeros(2))

    def test_result_is_a_copy(self):
        values = np.arange(4.0)
        selected = select(values, 0, 4, 0, 2)
        selected[0] = 99.0
        assert values[0] == 0.0


class TestBuffers:
    def test_as_vertex_array_keeps_float_arrays(self):
        values = np.arange(4.0)
        assert as_vertex_array(values) is values
        np.testing.assert_array_equal(as_vertex_array([[0, 1], [2, 3]]), [0, 1, 2, 3])

    def test_require_buffer_rejects_lists_and_ints(self):
        with pytest.raises(TypeError):
            require_buffer([0.0, 1.0])
        with pytest.raises(TypeError):
            require_buffer(np.arange(4))

    def test_scratch_buffer(self):
        vertices = np.zeros(6)
        assert len(scratch_buffer(None, 6, vertices)) == 6
        with pytest.raises(RegionError):
            scratch_buffer(np.zeros(4), 6, vertices)
        with pytest.raises(ValueError):
            scratch_buffer(vertices[:], 6, vertices)


class TestConversions:
    def test_to_points_region(self):
        values = np.array([9.0, 9.0, 0.0, 1.0, 2.0, 3.0, 9.0, 9.0])
        np.testing.assert_array_equal(to_points(values, 2, 4), [[0, 1], [2, 3]])

    def test_to_points_odd_raises(self):
        with pytest.raises(MalformedVerticesError):
            to_points(np.zeros(5))

    def test_to_vertex_array(self):
        np.testing.assert_array_equal(to_vertex_array([(0, 1), (2, 3)]), [0, 1, 2, 3])
        assert len(to_vertex_array([])) == 0
        with pytest.raises(MalformedVerticesError):
            to_vertex_array(np.zeros((2, 3)))

    def test_split_polygons_fixed_size(self):
        polygons = split_polygons(np.arange(12.0), 3)
        assert len(polygons) == 2
        np.testing.assert_array_equal(polygons[1], [6, 7, 8, 9, 10, 11])

    def test_split_polygons_by_counts(self):
        polygons = split_polygons(np.arange(14.0), [3, 4])
        assert [len(p) for p in polygons] == [6, 8]

    def test_split_polygons_uneven_raises(self):
        with pytest.raises(MalformedVerticesError):
            split_polygons(np.arange(10.0), 3)
        with pytest.raises(RegionError):
            split_polygons(np.arange(10.0), [3, 3])
