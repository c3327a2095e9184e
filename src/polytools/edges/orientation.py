"""
Polygon Orientation Module

Classifies the winding direction of a polygon from a single vertex on its
convex hull and that vertex's two neighbours, without computing the hull or
the full signed area.
"""

import enum
import logging
from typing import Optional

import numpy as np

from ..core.config import EdgeConfig, resolve_config
from ..core.geometry import EPS, almost_equal, as_vertices, count_distinct, normalize_polygon, wrap_index

logger = logging.getLogger(__name__)


class Orientation(enum.Enum):
    """Winding direction of a polygon."""
    CLOCKWISE = "clockwise"
    COUNTERCLOCKWISE = "counterclockwise"
    # Fewer than three distinct vertices
    INVALID_TOO_SMALL = "invalid_too_small"


def find_corner_point(vertices: np.ndarray) -> int:
    """
    Find the index of a vertex that lies on the convex hull.

    Picks the smallest y and, on a tie, the smallest x. Any other tie-break
    can return a vertex in the middle of a horizontal edge.

    Parameters
    ----------
    vertices : np.ndarray
        Normalized polygon vertices of shape (n, 2).

    Returns
    -------
    int
        Vertex index, -1 for an empty array.
    """
    min_index = -1
    min_y = np.inf
    min_x_at_min_y = np.inf

    for i, (x, y) in enumerate(vertices):
        if y > min_y + EPS:
            continue

        if almost_equal(y, min_y, EPS) and x >= min_x_at_min_y:
            continue

        min_index = i
        min_y = y
        min_x_at_min_y = x

    return min_index


def orientation_determinant(a, b, c) -> float:
    """
    Determinant of the orientation matrix of three points.

    .     [ 1 xa ya ]
    . O = [ 1 xb yb ]
    .     [ 1 xc yc ]

    Positive when a, b, c turn counter-clockwise with y pointing up.
    """
    return float(
        (b[0] * c[1] + a[0] * b[1] + a[1] * c[0]) - (a[1] * b[0] + b[1] * c[0] + a[0] * c[1])
    )


def polygon_orientation(polygon, closed: Optional[bool] = None, y_down: Optional[bool] = None,
                        config: Optional[EdgeConfig] = None) -> Orientation:
    """
    Determine the winding direction of a polygon.

    Parameters
    ----------
    polygon : array-like or shapely geometry
        Polygon vertices of shape (N, 2), open or closed.
    closed : bool, optional
        Explicit closure flag, inferred from the vertices if None.
    y_down : bool, optional
        True for screen coordinates with y growing downwards. Defaults to
        the configured axis convention (y up).
    config : EdgeConfig, optional
        Settings to use instead of the module defaults.

    Returns
    -------
    Orientation
        CLOCKWISE or COUNTERCLOCKWISE as seen on screen, INVALID_TOO_SMALL
        for fewer than 3 distinct vertices. Collinear hull neighbours give
        COUNTERCLOCKWISE.
    """
    config = resolve_config(config, y_down)
    vertices = normalize_polygon(polygon, closed=closed)

    if count_distinct(vertices) < 3:
        logger.debug("Polygon with %d vertices is too small for orientation", len(vertices))
        return Orientation.INVALID_TOO_SMALL

    size = len(vertices)
    corner = find_corner_point(vertices)

    a = vertices[wrap_index(corner - 1, size)]
    b = vertices[corner]
    c = vertices[wrap_index(corner + 1, size)]

    det = orientation_determinant(a, b, c)

    # Flipping the y axis mirrors the polygon and its visual winding
    if config.y_down:
        return Orientation.CLOCKWISE if det > 0 else Orientation.COUNTERCLOCKWISE
    return Orientation.CLOCKWISE if det < 0 else Orientation.COUNTERCLOCKWISE


def ensure_ccw(polygon, y_down: Optional[bool] = None) -> np.ndarray:
    """
    Ensure polygon vertices are in counter-clockwise order.

    Parameters
    ----------
    polygon : array-like or shapely geometry
        Polygon vertices of shape (M, 2).
    y_down : bool, optional
        Axis convention, see :func:`polygon_orientation`.

    Returns
    -------
    np.ndarray
        Polygon vertices in CCW order. Degenerate input is returned as is.
    """
    poly = as_vertices(polygon)
    if polygon_orientation(poly, y_down=y_down) == Orientation.CLOCKWISE:
        return poly[::-1].copy()
    return poly


def ensure_cw(polygon, y_down: Optional[bool] = None) -> np.ndarray:
    """Ensure polygon vertices are in clockwise order, see :func:`ensure_ccw`."""
    poly = as_vertices(polygon)
    if polygon_orientation(poly, y_down=y_down) == Orientation.COUNTERCLOCKWISE:
        return poly[::-1].copy()
    return poly
