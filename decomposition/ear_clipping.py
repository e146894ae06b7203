"""
Ear Clipping - Triangulate simple polygons of either winding with mapbox-earcut.

earcut always emits its triangles in one fixed orientation and drops
duplicate and collinear points it cannot use. This adapter hands it the
region as an (n, 2) point array with a single ring, then turns every
triangle around to the polygon's own winding.

Triangles are returned as point indices, three per triangle.
"""

import numpy as np
import mapbox_earcut as earcut
from typing import Optional
import logging

from geometry.regions import as_vertex_array, check_even, resolve_region
from geometry.errors import MalformedVerticesError
from geometry.winding import polygon_area

logger = logging.getLogger(__name__)


def _match_winding(points: np.ndarray, indices: np.ndarray, ccw: bool) -> np.ndarray:
    """Swap the last two corners of every triangle that turns against the polygon."""
    triangles = indices.reshape(-1, 3)
    a, b, c = (points[triangles[:, k]] for k in range(3))
    turn = (b[:, 0] - a[:, 0]) * (c[:, 1] - a[:, 1]) - (b[:, 1] - a[:, 1]) * (c[:, 0] - a[:, 0])
    flip = turn < 0 if ccw else turn > 0
    triangles[flip] = triangles[flip][:, [0, 2, 1]]
    return triangles.reshape(-1)


class EarClippingTriangulator:
    """
    Triangulator for simple polygons.

    Calling the triangulator with a flat vertex array returns the triangle
    indices, so it can be handed to decomposition.triangulate as is.

    Usage:
        triangulator = EarClippingTriangulator()
        indices = triangulator(np.array([0, 0, 2, 0, 2, 2, 1, 1, 0, 2]))
    """

    def compute_triangles(self, vertices, offset: int = 0, length: Optional[int] = None) -> np.ndarray:
        """
        Triangulate a region of a flat vertex array.

        Returns:
            int32 array of point indices (relative to offset), 3 per triangle
        """
        vertices = as_vertex_array(vertices)
        offset, length = resolve_region(vertices, offset, length)
        check_even(length)
        if length < 6:
            raise MalformedVerticesError(f"a polygon consists of at least 3 points, length: {length}")

        points = np.array(vertices[offset:offset + length], dtype=np.float64).reshape(-1, 2)
        return self.triangulate_points(points)

    def triangulate_points(self, points: np.ndarray) -> np.ndarray:
        """Triangulate an (n, 2) point array."""
        points = np.ascontiguousarray(points, dtype=np.float64)
        rings = np.array([len(points)], dtype=np.uint32)
        indices = np.asarray(earcut.triangulate_float64(points, rings), dtype=np.int32)

        if len(indices) // 3 < len(points) - 2:
            logger.warning(
                "Got %d triangles for %d points; polygon has degenerate points or is not simple",
                len(indices) // 3, len(points),
            )
        return _match_winding(points, indices, polygon_area(points.reshape(-1)) >= 0)

    def __call__(self, vertices) -> np.ndarray:
        return self.compute_triangles(vertices)
