"""
Visualization - Plotting polygons, decompositions and intersections.

Provides tools for debugging kernel results on flat vertex arrays.
"""

import numpy as np
import matplotlib.pyplot as plt
from matplotlib.patches import Polygon as MplPolygon
from matplotlib.collections import PatchCollection
from typing import Optional, List, Sequence, Tuple
import logging

from geometry.bounds import bounding_box
from geometry.regions import to_points

logger = logging.getLogger(__name__)


def plot_polygon(vertices, ax=None, color='tab:blue', alpha=0.4, show_vertices: bool = True,
                 label_vertices: bool = False, title: str = None):
    """
    Plot a single polygon given as a flat vertex array.

    Args:
        vertices: Flat vertex array [x0, y0, x1, y1, ...]
        ax: Matplotlib axes (creates new if None)
        color: Fill color
        alpha: Transparency
        show_vertices: Mark the vertices
        label_vertices: Write each vertex's index next to it

    Returns:
        ax: Matplotlib axes
    """
    points = to_points(vertices)

    if ax is None:
        fig, ax = plt.subplots(1, 1, figsize=(6, 6))

    closed = np.vstack([points, points[:1]])
    ax.fill(closed[:, 0], closed[:, 1], color=color, alpha=alpha)
    ax.plot(closed[:, 0], closed[:, 1], color='black', linewidth=1)

    if show_vertices:
        ax.scatter(points[:, 0], points[:, 1], color='black', s=12, zorder=3)
    if label_vertices:
        for i, (x, y) in enumerate(points):
            ax.annotate(str(i), (x, y), textcoords='offset points', xytext=(4, 4), fontsize=8)

    ax.set_aspect('equal')
    ax.grid(True, alpha=0.3)
    if title:
        ax.set_title(title)
    ax.set_xlabel('x')
    ax.set_ylabel('y')

    return ax


def plot_polygons(
    polygons: Sequence[np.ndarray],
    ax=None,
    title: str = None,
    show_bounds: bool = False,
    colors: Optional[List] = None,
    outline=None,
    segment: Optional[Tuple[float, float, float, float]] = None,
    points: Optional[np.ndarray] = None,
    figsize: Tuple[int, int] = (8, 8)
):
    """
    Plot several polygons, e.g. the pieces of a decomposition.

    Args:
        polygons: Flat vertex arrays
        ax: Matplotlib axes
        title: Plot title
        show_bounds: Draw the common bounding box
        colors: Custom colors for each polygon
        outline: Optional flat vertex array drawn as a dashed outline (the input polygon)
        segment: Optional (x1, y1, x2, y2) segment to draw
        points: Optional (k, 2) points to mark (e.g. intersections)
        figsize: Figure size if creating new figure

    Returns:
        ax: Matplotlib axes
    """
    if ax is None:
        fig, ax = plt.subplots(1, 1, figsize=figsize)

    patches = []
    face_colors = []
    n = len(polygons)
    cmap = plt.get_cmap('tab20')

    for i, vertices in enumerate(polygons):
        patches.append(MplPolygon(to_points(vertices), closed=True))
        face_colors.append(colors[i] if colors is not None else cmap(i % 20))

    collection = PatchCollection(
        patches,
        facecolors=face_colors,
        edgecolors='black',
        linewidths=0.8,
        alpha=0.6
    )
    ax.add_collection(collection)

    all_vertices = [np.asarray(v, dtype=np.float64).reshape(-1) for v in polygons]
    if outline is not None:
        outline_points = to_points(outline)
        closed = np.vstack([outline_points, outline_points[:1]])
        ax.plot(closed[:, 0], closed[:, 1], color='black', linestyle='--', linewidth=1.5)
        all_vertices.append(np.asarray(outline, dtype=np.float64).reshape(-1))

    if segment is not None:
        x1, y1, x2, y2 = segment
        ax.plot([x1, x2], [y1, y2], color='red', linewidth=1.5)
        all_vertices.append(np.array(segment, dtype=np.float64))

    if points is not None and len(points):
        points = np.asarray(points, dtype=np.float64).reshape(-1, 2)
        ax.scatter(points[:, 0], points[:, 1], color='red', s=30, zorder=4)

    if all_vertices:
        min_x, min_y, max_x, max_y = bounding_box(np.concatenate(all_vertices))
    else:
        min_x, min_y, max_x, max_y = 0.0, 0.0, 1.0, 1.0

    if show_bounds and n:
        rect = plt.Rectangle(
            (min_x, min_y),
            max_x - min_x, max_y - min_y,
            fill=False,
            edgecolor='blue',
            linestyle='--',
            linewidth=1.5
        )
        ax.add_patch(rect)

    # Set axis limits with padding
    padding = 0.1 * max(max_x - min_x, max_y - min_y, 1e-9)
    ax.set_xlim(min_x - padding, max_x + padding)
    ax.set_ylim(min_y - padding, max_y + padding)
    ax.set_aspect('equal')
    ax.grid(True, alpha=0.3)

    if title is None:
        title = f"{n} polygon{'s' if n != 1 else ''}"
    ax.set_title(title)
    ax.set_xlabel('x')
    ax.set_ylabel('y')

    return ax


def plot_result(
    polygons: Sequence[np.ndarray],
    save_path: Optional[str] = None,
    show: bool = True,
    **kwargs
):
    """
    Plot polygons and optionally save to file.

    Args:
        polygons: Flat vertex arrays
        save_path: Path to save figure (None = don't save)
        show: Open a window with the figure
        **kwargs: Passed to plot_polygons
    """
    fig, ax = plt.subplots(1, 1, figsize=kwargs.pop('figsize', (8, 8)))
    plot_polygons(polygons, ax=ax, **kwargs)

    plt.tight_layout()

    if save_path:
        plt.savefig(save_path, dpi=150, bbox_inches='tight')
        logger.info("Saved figure to %s", save_path)

    if show:
        plt.show()
    else:
        plt.close(fig)

    return fig
