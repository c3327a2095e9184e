"""
Polytools - Polygon edge metadata for map label placement.

This package analyses 2D polygons drawn on a map or screen:
- Winding direction from a single convex hull vertex
- Edge visibility against a rectangular viewport
- Long visible edges suitable for labels, merged by similar angle
- Cheap detection of circle-like polygons

Main Functions
--------------
long_polygon_edges : Ranked label edges of a polygon in a viewport
polygon_orientation : Clockwise or counter-clockwise winding
edge_distances : Annotate edges with length, angle and visibility
is_segment_inside_rect, is_segment_touching_rect : Edge visibility tests

Example
-------
>>> import numpy as np
>>> from polytools import long_polygon_edges, Viewport

>>> square = np.array([[0, 0], [10, 0], [10, 10], [0, 10]])
>>> result = long_polygon_edges(square, Viewport(-5, -5, 15, 15), limit=2)
>>> [(edge.index_from, edge.index_to) for edge in result.edges]
[(0, 1), (1, 2)]
"""

from .core.geometry import (
    EPS,
    Segment,
    almost_equal,
    angle_abs_diff,
    normalize_angle,
    normalize_polygon,
    polygon_edges,
    wrap_index,
)
from .core.viewport import Viewport, is_segment_inside_rect, is_segment_touching_rect
from .core.config import (
    CIRCLE_VARIANCE_THRESHOLD,
    EdgeConfig,
    get_edge_config,
    set_edge_config,
)
from .edges.orientation import Orientation, polygon_orientation, ensure_ccw, ensure_cw
from .edges.distances import AnnotatedEdge, edge_distances
from .edges.selection import LongEdgeResult, long_polygon_edges, edge_stats
from .visualization.plotting import plot_long_edges, plot_orientations

__all__ = [
    # Core geometry
    'EPS',
    'Segment',
    'almost_equal',
    'angle_abs_diff',
    'normalize_angle',
    'normalize_polygon',
    'polygon_edges',
    'wrap_index',
    # Viewport
    'Viewport',
    'is_segment_inside_rect',
    'is_segment_touching_rect',
    # Configuration
    'CIRCLE_VARIANCE_THRESHOLD',
    'EdgeConfig',
    'get_edge_config',
    'set_edge_config',
    # Orientation
    'Orientation',
    'polygon_orientation',
    'ensure_ccw',
    'ensure_cw',
    # Edge selection
    'AnnotatedEdge',
    'edge_distances',
    'LongEdgeResult',
    'long_polygon_edges',
    'edge_stats',
    # Visualization
    'plot_long_edges',
    'plot_orientations',
]
