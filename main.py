#!/usr/bin/env python3
"""
POLYGON KERNEL - COMMAND LINE ENTRY POINT

Runs single kernel operations on a polygon given on the command line or
in a JSON file and prints the result.

Usage:
    python main.py --area --vertices "0,0,1,0,1,1,0,1"
    python main.py --convex --input polygon.json
    python main.py --weld --epsilon 0.01 --vertices "0,0,0.001,0,1,0,1,1"
    python main.py --arrange --clockwise --vertices "0,0,1,1,1,0,0,1,0.5,-0.5"
    python main.py --triangulate --vertices "0,0,2,0,2,2,1,1,0,2" --plot tris.png
    python main.py --decompose --vertices "0,0,2,0,2,2,1,1,0,2"
    python main.py --intersect -1 0.5 2 0.5 --vertices "0,0,1,0,1,1,0,1"
    python main.py --warmup

Input files hold either a flat list [x0, y0, x1, y1, ...], a list of
[x, y] pairs, or an object with a "vertices" key holding one of those.
"""

import argparse
import json
import logging
import sys
import time

import numpy as np

from config import CONFIG

logger = logging.getLogger("main")


# =============================================================================
# WARMUP
# =============================================================================

def warmup_jit():
    """Warm up JIT compilation for all modules."""
    print("\n🔥 Warming up JIT compilation...")
    start = time.time()

    from geometry import primitives, bounds, transforms, weld, ordering, winding, arrangement, intersection
    from decomposition import orchestrator

    for module in (primitives, bounds, transforms, weld, ordering, winding, arrangement, intersection,
                   orchestrator):
        module.warmup()
        logger.debug("Warmed up %s", module.__name__)

    print(f"   ✅ JIT warmup complete! ({time.time() - start:.2f}s)")


# =============================================================================
# INPUT
# =============================================================================

def parse_vertices(text: str) -> np.ndarray:
    """Parse "x0,y0,x1,y1,..." (commas and/or whitespace) into a flat array."""
    tokens = text.replace(',', ' ').split()
    try:
        return np.array([float(t) for t in tokens], dtype=np.float64)
    except ValueError as e:
        raise ValueError(f"cannot parse vertices {text!r}: {e}") from e


def load_vertices(path: str) -> np.ndarray:
    """Load a flat vertex array from a JSON file."""
    with open(path, 'r', encoding='utf-8') as f:
        data = json.load(f)
    if isinstance(data, dict):
        if 'vertices' not in data:
            raise ValueError(f"{path}: expected a 'vertices' key")
        data = data['vertices']
    return np.asarray(data, dtype=np.float64).reshape(-1)


def get_vertices(args) -> np.ndarray:
    if args.vertices is not None:
        return parse_vertices(args.vertices)
    if args.input is not None:
        return load_vertices(args.input)
    raise ValueError("no polygon given, use --vertices or --input")


def format_vertices(vertices) -> str:
    points = np.asarray(vertices, dtype=np.float64).reshape(-1, 2)
    return ' '.join(f"({x:g}, {y:g})" for x, y in points)


def maybe_plot(args, polygons, **kwargs):
    if not args.plot:
        return
    from utils.visualization import plot_result
    plot_result(polygons, save_path=args.plot, show=False, **kwargs)
    print(f"   🖼️  Figure saved: {args.plot}")


# =============================================================================
# COMMANDS
# =============================================================================

def cmd_area(args):
    """Signed area and orientation."""
    from geometry import are_vertices_clockwise, polygon_area

    vertices = get_vertices(args)
    area = polygon_area(vertices)
    winding = "clockwise" if are_vertices_clockwise(vertices) else "counter-clockwise"

    print(f"\n📐 Area: {area:.6g}")
    print(f"   Winding: {winding}")
    maybe_plot(args, [vertices])
    return area


def cmd_convex(args):
    """Convexity and shape checks."""
    from geometry import InvalidPolygonShapeError, check_polygon_shape, is_convex, is_simple

    vertices = get_vertices(args)
    convex = is_convex(vertices)
    simple = is_simple(vertices)

    print(f"\n🔷 Convex: {convex}")
    print(f"   Simple: {simple}")
    try:
        check_polygon_shape(vertices)
        print("   Polygon shape: valid")
    except InvalidPolygonShapeError as e:
        print(f"   Polygon shape: invalid ({e.problem.value}: {e})")
    maybe_plot(args, [vertices])
    return convex


def cmd_weld(args):
    """Weld near-duplicate vertices."""
    from geometry import weld

    vertices = get_vertices(args)
    n_before = len(vertices) // 2
    count = weld(vertices, epsilon=args.epsilon, closed=args.closed)
    result = vertices[:2 * count]

    print(f"\n🔗 Welded {n_before} -> {count} vertices")
    print(f"   {format_vertices(result)}")
    maybe_plot(args, [result])
    return result


def cmd_arrange(args):
    """Arrange a convex point set into a loop."""
    from geometry import arrange_convex_polygon

    vertices = get_vertices(args)
    arrange_convex_polygon(vertices, clockwise=args.clockwise)

    print(f"\n🔄 Arranged {'clockwise' if args.clockwise else 'counter-clockwise'}:")
    print(f"   {format_vertices(vertices)}")
    maybe_plot(args, [vertices])
    return vertices


def cmd_triangulate(args):
    """Triangulate a polygon."""
    from decomposition import triangulate

    vertices = get_vertices(args)
    triangles = triangulate(vertices, triangulator=args.triangulator, validate=args.validate)

    print(f"\n🔺 {len(triangles)} triangles:")
    for i, triangle in enumerate(triangles):
        print(f"   {i:3d}: {format_vertices(triangle)}")
    maybe_plot(args, triangles, outline=vertices, title=f"{len(triangles)} triangles")
    return triangles


def cmd_decompose(args):
    """Decompose a polygon into convex pieces."""
    from decomposition import decompose

    vertices = get_vertices(args)
    pieces = decompose(vertices, decomposer=args.decomposer, validate=args.validate)

    print(f"\n🧩 {len(pieces)} convex pieces:")
    for i, piece in enumerate(pieces):
        print(f"   {i:3d}: {format_vertices(piece)}")
    maybe_plot(args, pieces, outline=vertices, title=f"{len(pieces)} convex pieces")
    return pieces


def cmd_intersect(args):
    """Intersect a segment with the polygon."""
    from geometry import INFINITE_INTERSECTIONS, find_segment_intersections, intersect_segment_convex_polygon

    vertices = get_vertices(args)
    x1, y1, x2, y2 = args.intersect
    points = find_segment_intersections(x1, y1, x2, y2, vertices, polygon=True)

    print(f"\n✂️  Segment ({x1:g}, {y1:g})-({x2:g}, {y2:g}): {len(points)} intersection(s)")
    for x, y in points:
        print(f"   ({x:g}, {y:g})")

    if args.convex_target:
        count = intersect_segment_convex_polygon(x1, y1, x2, y2, vertices)
        label = "infinite" if count == INFINITE_INTERSECTIONS else str(count)
        print(f"   Convex polygon contact: {label}")

    maybe_plot(args, [vertices], segment=(x1, y1, x2, y2), points=points)
    return points


def cmd_warmup(args):
    """Compile all numba kernels."""
    warmup_jit()


# =============================================================================
# MAIN
# =============================================================================

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="2-D polygon geometry kernel",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    python main.py --area --vertices "0,0,1,0,1,1,0,1"
    python main.py --decompose --input polygon.json --plot pieces.png
    python main.py --intersect -1 0.5 2 0.5 --vertices "0,0,1,0,1,1,0,1"
        """
    )

    # Commands
    cmd_group = parser.add_mutually_exclusive_group(required=True)
    cmd_group.add_argument('--area', action='store_true', help='Signed area and winding')
    cmd_group.add_argument('--convex', action='store_true', help='Convexity and shape checks')
    cmd_group.add_argument('--weld', action='store_true', help='Weld near-duplicate vertices')
    cmd_group.add_argument('--arrange', action='store_true', help='Arrange a convex point set')
    cmd_group.add_argument('--triangulate', action='store_true', help='Triangulate the polygon')
    cmd_group.add_argument('--decompose', action='store_true', help='Decompose into convex pieces')
    cmd_group.add_argument('--intersect', nargs=4, type=float, metavar=('X1', 'Y1', 'X2', 'Y2'),
                           help='Intersect a segment with the polygon')
    cmd_group.add_argument('--warmup', action='store_true', help='Compile all JIT kernels')

    # Input
    input_group = parser.add_mutually_exclusive_group()
    input_group.add_argument('--vertices', type=str, metavar='X0,Y0,...', help='Flat vertex list')
    input_group.add_argument('--input', type=str, metavar='PATH', help='JSON file with the vertices')

    # Options
    parser.add_argument('--epsilon', type=float, default=None,
                        help=f'Weld distance (default: {CONFIG.tolerance.weld_epsilon:g})')
    parser.add_argument('--closed', action='store_true', help='Weld across the closing edge too')
    parser.add_argument('--clockwise', action='store_true', help='Arrange clockwise')
    parser.add_argument('--convex-target', action='store_true', help='Classify contact with a convex polygon')
    parser.add_argument('--triangulator', type=str, default=None, help='Registered triangulator name')
    parser.add_argument('--decomposer', type=str, default=None, help='Registered decomposer name')
    parser.add_argument('--validate', action='store_true', default=None, help='Reject self-intersecting input')
    parser.add_argument('--plot', type=str, metavar='PATH', help='Save a figure of the result')

    # Logging
    parser.add_argument('-v', '--verbose', action='store_true', help='Debug logging')
    parser.add_argument('--log-file', type=str, metavar='PATH', default=None, help='Also log to a file')

    return parser


def main(argv=None):
    from logging_config import setup_logging

    parser = build_parser()
    args = parser.parse_args(argv)

    level = logging.DEBUG if args.verbose else CONFIG.logging.level
    setup_logging(level=level, log_file=args.log_file or CONFIG.logging.log_file)

    # Route to command
    try:
        if args.area:
            cmd_area(args)
        elif args.convex:
            cmd_convex(args)
        elif args.weld:
            cmd_weld(args)
        elif args.arrange:
            cmd_arrange(args)
        elif args.triangulate:
            cmd_triangulate(args)
        elif args.decompose:
            cmd_decompose(args)
        elif args.intersect is not None:
            cmd_intersect(args)
        elif args.warmup:
            cmd_warmup(args)

    except KeyboardInterrupt:
        print("\n\n⚠️  Interrupted by user")
        sys.exit(1)

    except Exception as e:
        print(f"\n❌ Error: {e}")
        logger.debug("Command failed", exc_info=True)
        sys.exit(1)

    return 0


if __name__ == "__main__":
    main()
