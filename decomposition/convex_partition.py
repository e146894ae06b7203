"""
Convex Partition - Hertel-Mehlhorn decomposition of simple polygons.

The polygon is triangulated, then neighbouring pieces are merged across
their shared diagonal as long as the merged piece stays convex. The
result has at most four times the optimal number of convex pieces.
"""

import numpy as np
from typing import Callable, List, Optional
import logging

from decomposition.ear_clipping import EarClippingTriangulator
from geometry.primitives import det
from geometry.regions import to_vertex_array

logger = logging.getLogger(__name__)


def _rotate_to(loop: List[int], start: int) -> List[int]:
    return loop[start:] + loop[:start]


def _merge_loops(a: List[int], b: List[int]) -> Optional[List[int]]:
    """
    Join two pieces of the same winding across a shared edge.

    The edge runs u -> v in `a` and v -> u in `b`.

    Returns:
        Merged index loop, or None if the pieces share no edge
    """
    n = len(a)
    edges_b = {(b[k], b[(k + 1) % len(b)]): k for k in range(len(b))}
    for i in range(n):
        u, v = a[i], a[(i + 1) % n]
        k = edges_b.get((v, u))
        if k is None:
            continue
        # a from v around to u, then b strictly between u and v
        a_loop = _rotate_to(a, (i + 1) % n)
        b_loop = _rotate_to(b, (k + 1) % len(b))
        return a_loop + b_loop[1:-1]
    return None


class HertelMehlhornDecomposer:
    """
    Convex decomposer for simple polygons.

    Calling the decomposer with an (n, 2) point array returns a list of
    (k, 2) point arrays, every one of them a convex polygon in the input's
    winding.

    Args:
        triangulator: Callable mapping a flat vertex array to triangle
            indices (default: EarClippingTriangulator)
        max_vertices: Do not grow pieces beyond this many vertices (None = unlimited)
    """

    def __init__(self, triangulator: Optional[Callable] = None, max_vertices: Optional[int] = None):
        self.triangulator = triangulator if triangulator is not None else EarClippingTriangulator()
        self.max_vertices = max_vertices

    def _is_convex_loop(self, points: np.ndarray, loop: List[int], sign: float) -> bool:
        n = len(loop)
        for i in range(n):
            p = points[loop[i - 1]]
            c = points[loop[i]]
            q = points[loop[(i + 1) % n]]
            if sign * det(p[0], p[1], c[0], c[1], q[0], q[1]) < 0:
                return False
        return True

    def decompose(self, points: np.ndarray) -> List[List[int]]:
        """
        Convex pieces as index loops into `points`.
        """
        points = np.asarray(points, dtype=np.float64)
        indices = np.asarray(self.triangulator(to_vertex_array(points)), dtype=np.int64)
        pieces = [list(map(int, indices[t:t + 3])) for t in range(0, len(indices), 3)]

        area = 0.0
        for i in range(len(points)):
            j = (i + 1) % len(points)
            area += points[i, 0] * points[j, 1] - points[j, 0] * points[i, 1]
        sign = 1.0 if area >= 0 else -1.0

        merged = True
        while merged:
            merged = False
            for a in range(len(pieces)):
                for b in range(a + 1, len(pieces)):
                    loop = _merge_loops(pieces[a], pieces[b])
                    if loop is None:
                        continue
                    if self.max_vertices is not None and len(loop) > self.max_vertices:
                        continue
                    if not self._is_convex_loop(points, loop, sign):
                        continue
                    pieces[a] = loop
                    del pieces[b]
                    merged = True
                    break
                if merged:
                    break

        logger.debug("Merged %d triangles into %d convex pieces", len(indices) // 3, len(pieces))
        return pieces

    def __call__(self, points: np.ndarray) -> List[np.ndarray]:
        points = np.asarray(points, dtype=np.float64)
        return [points[loop].copy() for loop in self.decompose(points)]
