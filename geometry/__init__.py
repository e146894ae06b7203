"""
Geometry module - Flat vertex arrays, bounds, winding, welding and intersections.
"""

from .errors import (
    GeometryError,
    RegionError,
    MalformedVerticesError,
    InvalidPolygonShapeError,
    InvalidChainShapeError,
    PolygonProblem,
    ChainProblem,
)

from .regions import (
    check_region,
    resolve_region,
    check_even,
    wrap_index,
    as_vertex_array,
    select,
    to_points,
    to_vertex_array,
    split_polygons,
)

from .primitives import (
    det,
    turn_sign,
    distance,
    distance2,
    between,
)

from .bounds import (
    min_value,
    max_value,
    amplitude,
    filter_x,
    filter_y,
    filter_x3d,
    filter_y3d,
    filter_z,
    filter_w,
    min_x,
    min_y,
    max_x,
    max_y,
    width,
    height,
    depth,
    size,
    aabb,
    bounding_box,
)

from .transforms import (
    translate,
    subtract,
    multiply,
    divide,
    scale_values,
    scale_to_bounds,
    invert_axis,
    invert_axes,
    to_y_down,
    to_y_up,
    rotate_vertices,
    rotate_rectangle,
    keep_within,
)

from .weld import weld, welded

from .ordering import (
    sort_points,
    close_points,
    count_close_points,
)

from .winding import (
    polygon_area,
    are_vertices_clockwise,
    is_convex,
    reverse,
    reverse_3d,
)

from .arrangement import arrange_convex_polygon

from .intersection import (
    INFINITE_INTERSECTIONS,
    IntersectionKind,
    SegmentPolygonIntersection,
    intersect_segment_pair,
    find_segment_intersections,
    intersect_segments,
    intersect_segment_convex_polygon,
    classify_segment_convex_polygon,
)

from .validation import (
    check_polygon_shape,
    check_chain_shape,
    is_valid_polygon_shape,
    is_valid_chain_shape,
    is_simple,
)

__all__ = [
    'GeometryError',
    'RegionError',
    'MalformedVerticesError',
    'InvalidPolygonShapeError',
    'InvalidChainShapeError',
    'PolygonProblem',
    'ChainProblem',
    'check_region',
    'resolve_region',
    'check_even',
    'wrap_index',
    'as_vertex_array',
    'select',
    'to_points',
    'to_vertex_array',
    'split_polygons',
    'det',
    'turn_sign',
    'distance',
    'distance2',
    'between',
    'min_value',
    'max_value',
    'amplitude',
    'filter_x',
    'filter_y',
    'filter_x3d',
    'filter_y3d',
    'filter_z',
    'filter_w',
    'min_x',
    'min_y',
    'max_x',
    'max_y',
    'width',
    'height',
    'depth',
    'size',
    'aabb',
    'bounding_box',
    'translate',
    'subtract',
    'multiply',
    'divide',
    'scale_values',
    'scale_to_bounds',
    'invert_axis',
    'invert_axes',
    'to_y_down',
    'to_y_up',
    'rotate_vertices',
    'rotate_rectangle',
    'keep_within',
    'weld',
    'welded',
    'sort_points',
    'close_points',
    'count_close_points',
    'polygon_area',
    'are_vertices_clockwise',
    'is_convex',
    'reverse',
    'reverse_3d',
    'arrange_convex_polygon',
    'INFINITE_INTERSECTIONS',
    'IntersectionKind',
    'SegmentPolygonIntersection',
    'intersect_segment_pair',
    'find_segment_intersections',
    'intersect_segments',
    'intersect_segment_convex_polygon',
    'classify_segment_convex_polygon',
    'check_polygon_shape',
    'check_chain_shape',
    'is_valid_polygon_shape',
    'is_valid_chain_shape',
    'is_simple',
]
