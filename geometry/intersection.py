"""
Segment Intersection - Intersect a segment with polylines and polygons.

A segment is tested edge by edge against a flat vertex array. For a
polygon the closing edge from the last to the first point is included.
Parallel edges, including collinear overlapping ones, never count as an
intersection; a segment passing exactly through a vertex hits both edges
that meet there.

For convex polygons the number of raw hits classifies the contact:
    0, 1   - the segment misses or ends inside
    2      - the segment crosses the polygon
    >= 3   - the segment runs through a vertex or along a side
             (or the polygon is not convex): reported as INFINITE
"""

from enum import Enum
from typing import List, NamedTuple, Optional, Tuple
import logging

import numpy as np
from numba import njit

from geometry.primitives import intersect_segment_pair as _intersect_pair
from geometry.errors import MalformedVerticesError
from geometry.regions import as_vertex_array, check_even, resolve_region, wrap_index

logger = logging.getLogger(__name__)

INFINITE_INTERSECTIONS = -1


class IntersectionKind(Enum):
    """Contact between a segment and a convex polygon."""
    NONE = 0
    SINGLE = 1
    CROSSING = 2
    INFINITE = INFINITE_INTERSECTIONS


class SegmentPolygonIntersection(NamedTuple):
    """Classified segment/convex polygon contact with the raw intersection points."""
    kind: IntersectionKind
    points: np.ndarray


# =============================================================================
# NUMBA KERNELS
# =============================================================================

@njit(cache=True)
def _segment_hits(x1: float, y1: float, x2: float, y2: float,
                  segments: np.ndarray, offset: int, length: int, polygon: bool,
                  out: np.ndarray) -> int:
    """
    Intersect a segment with consecutive edges of a region.

    Args:
        out: (n_edges, 2) buffer receiving the intersection points

    Returns:
        Number of intersections written to `out`
    """
    end = offset + length
    last = end if polygon else end - 2
    count = 0
    for i in range(offset, last, 2):
        j = wrap_index(offset, length, i + 2)
        hit, x, y = _intersect_pair(
            x1, y1, x2, y2, segments[i], segments[i + 1], segments[j], segments[j + 1]
        )
        if hit:
            out[count, 0] = x
            out[count, 1] = y
            count += 1
    return count


# =============================================================================
# PUBLIC API
# =============================================================================

def intersect_segment_pair(x1: float, y1: float, x2: float, y2: float,
                           x3: float, y3: float, x4: float, y4: float) -> Optional[Tuple[float, float]]:
    """
    Intersection point of segments p1-p2 and p3-p4.

    Returns:
        (x, y), or None if the segments do not touch or are parallel
    """
    hit, x, y = _intersect_pair(
        float(x1), float(y1), float(x2), float(y2), float(x3), float(y3), float(x4), float(y4)
    )
    if not hit:
        return None
    return float(x), float(y)


def find_segment_intersections(x1: float, y1: float, x2: float, y2: float, segments,
                               offset: int = 0, length: Optional[int] = None,
                               polygon: bool = False) -> np.ndarray:
    """
    All intersections of segment (x1, y1)-(x2, y2) with the edges of a polyline.

    Args:
        segments: Flat vertex array of the polyline (or polygon)
        offset: Region start
        length: Region length in scalars (default: to the end)
        polygon: Include the closing edge from the last to the first point

    Returns:
        (k, 2) array of intersection points in edge order

    Raises:
        MalformedVerticesError: odd length, polygon with fewer than 3 points
            or polyline with fewer than 2 points
    """
    segments = as_vertex_array(segments)
    offset, length = resolve_region(segments, offset, length)
    if polygon and length < 6:
        raise MalformedVerticesError(f"a polygon consists of at least 3 points, length: {length}")
    if length < 4:
        raise MalformedVerticesError(
            f"segments do not contain enough vertices to represent at least one segment: {length}"
        )
    check_even(length, "segments")

    out = np.empty((length // 2, 2), dtype=np.float64)
    count = _segment_hits(float(x1), float(y1), float(x2), float(y2), segments, offset, length, polygon, out)
    return out[:count].copy()


def intersect_segments(x1: float, y1: float, x2: float, y2: float, segments,
                       offset: int = 0, length: Optional[int] = None, polygon: bool = False,
                       intersections: Optional[List[Tuple[float, float]]] = None) -> bool:
    """
    Whether segment (x1, y1)-(x2, y2) intersects any edge of a polyline.

    Args:
        intersections: Optional list, cleared and filled with the (x, y)
            intersection points

    See find_segment_intersections for the remaining arguments and errors.
    """
    points = find_segment_intersections(x1, y1, x2, y2, segments, offset, length, polygon)
    if intersections is not None:
        intersections.clear()
        intersections.extend((float(x), float(y)) for x, y in points)
    return len(points) > 0


def intersect_segment_convex_polygon(x1: float, y1: float, x2: float, y2: float, polygon,
                                     offset: int = 0, length: Optional[int] = None,
                                     intersections: Optional[List[Tuple[float, float]]] = None) -> int:
    """
    Count the intersections of a segment with a convex polygon.

    Args:
        polygon: Flat vertex array of a convex polygon
        intersections: Optional list, cleared and filled with the raw
            intersection points in edge order

    Returns:
        0, 1, 2, or INFINITE_INTERSECTIONS if the segment lies on a side or
        passes through a vertex

    Example:
        Unit square, segment (-1, .5)-(2, .5) -> 2 with points (1, .5), (0, .5)
    """
    points = find_segment_intersections(x1, y1, x2, y2, polygon, offset, length, True)
    if intersections is not None:
        intersections.clear()
        intersections.extend((float(x), float(y)) for x, y in points)

    count = len(points)
    if count > 3:
        logger.warning(
            "Segment (%g, %g)-(%g, %g) hits a supposedly convex polygon %d times; is it concave?",
            x1, y1, x2, y2, count,
        )
    if count >= 3:
        return INFINITE_INTERSECTIONS
    return count


def classify_segment_convex_polygon(x1: float, y1: float, x2: float, y2: float, polygon,
                                    offset: int = 0, length: Optional[int] = None) -> SegmentPolygonIntersection:
    """
    Classify the contact of a segment with a convex polygon.

    Returns:
        SegmentPolygonIntersection with the contact kind and the raw
        (k, 2) intersection points
    """
    hits: List[Tuple[float, float]] = []
    count = intersect_segment_convex_polygon(x1, y1, x2, y2, polygon, offset, length, hits)
    points = np.array(hits, dtype=np.float64).reshape(-1, 2)
    return SegmentPolygonIntersection(IntersectionKind(count), points)


def warmup():
    """Warm up JIT compilation."""
    square = np.array([0.0, 0.0, 1.0, 0.0, 1.0, 1.0, 0.0, 1.0])
    _ = find_segment_intersections(-1.0, 0.5, 2.0, 0.5, square, polygon=True)
