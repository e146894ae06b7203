import numpy as np
import pytest

from geometry.errors import (
    ChainProblem,
    InvalidChainShapeError,
    InvalidPolygonShapeError,
    MalformedVerticesError,
    PolygonProblem,
)
from geometry.validation import (
    check_chain_shape,
    check_polygon_shape,
    is_simple,
    is_valid_chain_shape,
    is_valid_polygon_shape,
)


def regular_polygon(n):
    angles = np.linspace(0.0, 2.0 * np.pi, n, endpoint=False)
    return np.column_stack([np.cos(angles), np.sin(angles)]).reshape(-1)


class TestPolygonShape:
    def test_valid_polygons(self, unit_square, hexagon):
        check_polygon_shape(unit_square)
        check_polygon_shape(hexagon)
        assert is_valid_polygon_shape(unit_square[::-1].copy())

    @pytest.mark.parametrize("vertices,problem", [
        ([0, 0, 1, 0, 1], PolygonProblem.MALFORMED_VERTICES),
        ([0, 0, 1, 0], PolygonProblem.VERTEX_COUNT),
        (regular_polygon(9), PolygonProblem.VERTEX_COUNT),
        ([0, 0, 0.01, 0, 0, 0.01], PolygonProblem.VERTEX_COUNT),
        ([0, 0, 2, 0, 2, 2, 1, 1, 0, 2], PolygonProblem.CONCAVE),
        ([0, 0, 1, 0, 0.5, 1e-6], PolygonProblem.AREA),
    ])
    def test_problems(self, vertices, problem):
        with pytest.raises(InvalidPolygonShapeError) as info:
            check_polygon_shape(vertices)
        assert info.value.problem is problem
        assert not is_valid_polygon_shape(vertices)

    def test_max_vertices_override(self):
        nonagon = regular_polygon(9)
        check_polygon_shape(nonagon, max_vertices=9)

    def test_region_and_error_details(self, arrow):
        v = np.concatenate([[9.0, 9.0], arrow])
        with pytest.raises(InvalidPolygonShapeError) as info:
            check_polygon_shape(v, 2)
        assert info.value.offset == 2
        assert info.value.length == len(arrow)

    def test_does_not_modify_input(self):
        v = np.array([0.0, 0.0, 0.001, 0.0, 1.0, 0.0, 1.0, 1.0, 0.0, 1.0])
        before = v.copy()
        check_polygon_shape(v)
        np.testing.assert_array_equal(v, before)

    def test_is_a_malformed_vertices_error(self):
        with pytest.raises(MalformedVerticesError):
            check_polygon_shape([0, 0, 1, 0])


class TestChainShape:
    def test_valid_chain(self):
        check_chain_shape([0, 0, 1, 0, 1, 1])
        assert is_valid_chain_shape([0, 0, 1, 0])

    @pytest.mark.parametrize("vertices,problem", [
        ([0, 0, 1], ChainProblem.MALFORMED_VERTICES),
        ([0, 0], ChainProblem.VERTEX_COUNT),
        ([0, 0, 1, 1, 1, 1], ChainProblem.CLOSE_VERTICES),
        ([0, 0, 1, 1, 1.001, 1], ChainProblem.CLOSE_VERTICES),
    ])
    def test_problems(self, vertices, problem):
        with pytest.raises(InvalidChainShapeError) as info:
            check_chain_shape(vertices)
        assert info.value.problem is problem
        assert not is_valid_chain_shape(vertices)


class TestSimplicity:
    def test_simple_and_self_intersecting(self, unit_square, comb):
        assert is_simple(unit_square)
        assert is_simple(comb)
        assert not is_simple([0, 0, 1, 1, 1, 0, 0, 1])

    def test_too_few_points(self):
        assert not is_simple([0, 0, 1, 1])

    def test_odd_length_raises(self):
        with pytest.raises(MalformedVerticesError):
            is_simple([0, 0, 1, 1, 2])
