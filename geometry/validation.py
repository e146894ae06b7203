"""
Shape Validation - Preconditions for polygon and chain shapes.

A polygon shape must:
1. Have an even scalar count
2. Have between min_polygon_vertices and max_polygon_vertices points
3. Keep at least 3 points after welding
4. Be convex
5. Enclose at least area_epsilon

A chain shape must have at least two points, none of them closer than
linear_slop to its successor.
"""

import numpy as np
from typing import Optional

from config import CONFIG, get_max_polygon_vertices
from geometry.errors import (
    ChainProblem,
    InvalidChainShapeError,
    InvalidPolygonShapeError,
    MalformedVerticesError,
    PolygonProblem,
)
from geometry.regions import as_vertex_array, resolve_region
from geometry.weld import welded
from geometry.winding import is_convex, polygon_area


def check_polygon_shape(vertices, offset: int = 0, length: Optional[int] = None,
                        max_vertices: Optional[int] = None) -> None:
    """
    Raise if a region cannot be used as a polygon shape.

    Welding is done on a copy; the caller's vertices are never modified.
    Winding does not matter, the area is compared by magnitude.

    Raises:
        InvalidPolygonShapeError: with the failed PolygonProblem
    """
    vertices = as_vertex_array(vertices)
    offset, length = resolve_region(vertices, offset, length)
    max_vertices = get_max_polygon_vertices(max_vertices)
    min_vertices = CONFIG.limits.min_polygon_vertices

    if length % 2 != 0:
        raise InvalidPolygonShapeError(
            f"polygon vertices are malformed, length: {length}",
            PolygonProblem.MALFORMED_VERTICES, offset, length,
        )
    if length < 2 * min_vertices or length > 2 * max_vertices:
        raise InvalidPolygonShapeError(
            f"polygon has an invalid number of vertices (min: {min_vertices}, max: {max_vertices}): {length // 2}",
            PolygonProblem.VERTEX_COUNT, offset, length,
        )

    count = len(welded(vertices, offset, length, closed=True)) // 2
    if count < min_vertices:
        raise InvalidPolygonShapeError(
            f"polygon has too few vertices after welding: {count}",
            PolygonProblem.VERTEX_COUNT, offset, length,
        )
    if not is_convex(vertices, offset, length):
        raise InvalidPolygonShapeError("polygon is concave", PolygonProblem.CONCAVE, offset, length)

    area = abs(polygon_area(vertices, offset, length))
    epsilon = CONFIG.tolerance.area_epsilon
    if area < epsilon:
        raise InvalidPolygonShapeError(
            f"polygon area is too small: {area} (min: {epsilon})",
            PolygonProblem.AREA, offset, length,
        )


def check_chain_shape(vertices, offset: int = 0, length: Optional[int] = None) -> None:
    """
    Raise if a region cannot be used as a chain shape.

    Raises:
        InvalidChainShapeError: with the failed ChainProblem
    """
    vertices = as_vertex_array(vertices)
    offset, length = resolve_region(vertices, offset, length)

    if length % 2 != 0:
        raise InvalidChainShapeError(
            f"chain vertices are malformed, length: {length}",
            ChainProblem.MALFORMED_VERTICES, offset, length,
        )
    min_vertices = CONFIG.limits.min_chain_vertices
    if length < 2 * min_vertices:
        raise InvalidChainShapeError(
            f"chain has less than {min_vertices} vertices: {length // 2}",
            ChainProblem.VERTEX_COUNT, offset, length,
        )

    points = vertices[offset:offset + length].reshape(-1, 2)
    gaps2 = np.sum(np.diff(points, axis=0) ** 2, axis=1)
    slop = CONFIG.tolerance.linear_slop
    if np.any(gaps2 <= slop * slop):
        raise InvalidChainShapeError(
            "chain vertices are too close together", ChainProblem.CLOSE_VERTICES, offset, length,
        )


def is_valid_polygon_shape(vertices, offset: int = 0, length: Optional[int] = None,
                           max_vertices: Optional[int] = None) -> bool:
    try:
        check_polygon_shape(vertices, offset, length, max_vertices)
    except MalformedVerticesError:
        return False
    return True


def is_valid_chain_shape(vertices, offset: int = 0, length: Optional[int] = None) -> bool:
    try:
        check_chain_shape(vertices, offset, length)
    except MalformedVerticesError:
        return False
    return True


def is_simple(vertices, offset: int = 0, length: Optional[int] = None) -> bool:
    """
    Whether a polygon's boundary does not cross or touch itself.

    Uses shapely's ring simplicity test. Fewer than 3 points is never simple.
    """
    vertices = as_vertex_array(vertices)
    offset, length = resolve_region(vertices, offset, length)
    if length % 2 != 0:
        raise MalformedVerticesError(f"malformed vertices, length is odd: {length}")
    if length < 6:
        return False

    from shapely.geometry import LinearRing

    ring = LinearRing(vertices[offset:offset + length].reshape(-1, 2))
    return bool(ring.is_simple)
