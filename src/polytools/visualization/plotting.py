"""
Visualization utilities for edge selection plotting.

Contains plotting functions for:
- Polygon, viewport and ranked label edges
- Orientation overview of several polygons
"""

from typing import Optional, Sequence, Tuple

import numpy as np
import matplotlib
import matplotlib.pyplot as plt
from matplotlib.patches import Rectangle

from ..core.geometry import normalize_polygon
from ..core.viewport import ViewportLike, as_viewport
from ..edges.orientation import polygon_orientation
from ..edges.selection import LongEdgeResult, edge_stats, long_polygon_edges


def plot_long_edges(
    polygon,
    viewport: ViewportLike,
    result: Optional[LongEdgeResult] = None,
    ax: Optional[plt.Axes] = None,
    limit: int = 5,
    max_angle: float = 0.0,
    title: str = "Long edges",
    show_stats: bool = True
) -> plt.Axes:
    """
    Visualize a polygon, the viewport and the selected label edges.

    Parameters
    ----------
    polygon : array-like or shapely geometry
        Polygon vertices of shape (N, 2).
    viewport : Viewport, bounds or shapely geometry
        Visible rectangle.
    result : LongEdgeResult, optional
        Selection to draw. Computed with ``limit`` and ``max_angle`` if None.
    ax : plt.Axes, optional
        Matplotlib axes to plot on. Creates new figure if None.
    limit : int
        Edge limit used when ``result`` is None.
    max_angle : float
        Merge angle used when ``result`` is None.
    title : str
        Plot title.
    show_stats : bool
        Whether to show selection statistics.

    Returns
    -------
    plt.Axes
        The matplotlib axes object.
    """
    if ax is None:
        fig, ax = plt.subplots(1, 1, figsize=(8, 8))

    viewport = as_viewport(viewport)
    poly = normalize_polygon(polygon)
    if result is None:
        result = long_polygon_edges(poly, viewport, limit, max_angle=max_angle, detect_circle=True)

    ax.add_patch(Rectangle(
        (viewport.xmin, viewport.ymin), viewport.width, viewport.height,
        fill=False, edgecolor='gray', linestyle='--', linewidth=1.5, label='Viewport', zorder=1
    ))

    if len(poly):
        closed_poly = np.vstack([poly, poly[0]])
        ax.plot(closed_poly[:, 0], closed_poly[:, 1], 'k-', linewidth=1, zorder=2)
        ax.scatter(poly[:, 0], poly[:, 1], c='black', s=15, zorder=3)

    # Longest edge gets the warmest color
    colors = matplotlib.colormaps['autumn'](np.linspace(0.0, 0.8, max(len(result.edges), 1)))
    for rank, dist in enumerate(result.edges):
        if not dist.is_valid:
            continue
        (x1, y1), (x2, y2) = dist.segment.p1, dist.segment.p2
        ax.plot([x1, x2], [y1, y2], '-', color=colors[rank], linewidth=4, zorder=4,
                label=f"#{rank + 1} {dist.index_from}-{dist.index_to}")

    if show_stats:
        stats = edge_stats(result)
        stats_text = (
            f"Edges: {stats['num_edges']}\n"
            f"Visible: {stats['num_valid']}\n"
            f"Longest: {stats['longest']:.2f}\n"
            f"Circular: {stats['circular']}"
        )
        ax.text(
            0.02, 0.98, stats_text,
            transform=ax.transAxes,
            verticalalignment='top',
            fontfamily='monospace',
            fontsize=9,
            bbox=dict(boxstyle='round', facecolor='white', alpha=0.8)
        )

    ax.set_xlabel('X')
    ax.set_ylabel('Y')
    ax.set_title(title)
    ax.legend(loc='upper right', fontsize=8)
    ax.set_aspect('equal', adjustable='box')
    ax.grid(True, alpha=0.3)

    return ax


def plot_orientations(
    polygons: Sequence,
    figsize: Tuple[int, int] = (10, 5)
) -> plt.Figure:
    """
    Draw several polygons side by side, titled with their orientation.

    Parameters
    ----------
    polygons : sequence
        Polygons as accepted by polygon_orientation().
    figsize : tuple
        Figure size (width, height).

    Returns
    -------
    plt.Figure
        The matplotlib figure object.
    """
    fig, axes = plt.subplots(1, max(len(polygons), 1), figsize=figsize, squeeze=False)

    for ax, polygon in zip(axes[0], polygons):
        poly = normalize_polygon(polygon)
        orientation = polygon_orientation(poly)
        if len(poly):
            closed_poly = np.vstack([poly, poly[0]])
            ax.plot(closed_poly[:, 0], closed_poly[:, 1], 'k-', linewidth=1.5)
            # Mark first vertex and direction of travel
            ax.scatter([poly[0, 0]], [poly[0, 1]], c='red', s=60, zorder=3)
            if len(poly) > 1:
                ax.annotate(
                    '', xy=poly[1], xytext=poly[0],
                    arrowprops=dict(arrowstyle='->', color='red', linewidth=1.5)
                )
        ax.set_title(orientation.value)
        ax.set_aspect('equal', adjustable='box')
        ax.grid(True, alpha=0.3)

    plt.tight_layout()
    return fig
