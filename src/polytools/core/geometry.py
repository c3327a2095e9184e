"""
Core geometry primitives for polygon edge analysis.

Contains utility functions for:
- Approximate float comparison
- Angle normalization and shortest-arc differences
- Modular vertex indexing
- Segments and their screen / true angles
- Vertex array coercion and closure normalization
"""

from dataclasses import dataclass
from typing import List, Optional, Tuple

import numpy as np
from shapely.geometry import LinearRing, LineString, MultiPolygon, Polygon


# Numerical tolerance for floating point comparisons
EPS = 1e-10

Point = Tuple[float, float]


def almost_equal(a: float, b: float, epsilon: float = EPS) -> bool:
    """Return True if ``a`` and ``b`` differ by at most ``epsilon``."""
    return abs(a - b) <= epsilon


def normalize_angle(angle: float) -> float:
    """
    Normalize an angle into the range [0, 360).

    Parameters
    ----------
    angle : float
        Angle in degrees, any range.

    Returns
    -------
    float
        Equivalent angle in [0, 360).
    """
    angle = float(angle) % 360.0
    # -1e-14 % 360 rounds to 360.0
    if angle >= 360.0:
        angle = 0.0
    return angle


def angle_abs_diff(angle1: float, angle2: float) -> float:
    """
    Shortest-arc difference between two angles.

    Returns
    -------
    float
        Non-negative difference in degrees, at most 180.
    """
    diff = abs(normalize_angle(angle1) - normalize_angle(angle2))
    return 360.0 - diff if diff > 180.0 else diff


def wrap_index(index: int, size: int) -> int:
    """Map ``index`` into [0, size) so that -1 is the last and size is the first vertex."""
    return index % size


def angle_from_screen(screen_angle: float) -> float:
    """
    Convert a screen angle into a true angle.

    Screen angles are measured counter-clockwise from the positive x axis as
    displayed. True angles start at "up" (north on a map) and grow clockwise,
    so east is 90 and south is 180.
    """
    return normalize_angle(90.0 - screen_angle)


def screen_angles(dx: np.ndarray, dy: np.ndarray, y_down: bool = False) -> np.ndarray:
    """
    Vectorized screen angles in [0, 360) for direction vectors.

    Parameters
    ----------
    dx, dy : np.ndarray
        Direction components.
    y_down : bool
        True for pixel coordinates where y grows downwards.

    Returns
    -------
    np.ndarray
        Counter-clockwise angles from +x as displayed.
    """
    dx = np.asarray(dx, dtype=np.float64)
    dy = np.asarray(dy, dtype=np.float64)
    if y_down:
        dy = -dy
    # Zero-length edges give atan2(0, 0) == 0
    return np.mod(np.degrees(np.arctan2(dy, dx)), 360.0)


@dataclass(frozen=True)
class Segment:
    """
    Line segment between two points.

    Attributes
    ----------
    p1 : tuple
        Start point (x, y).
    p2 : tuple
        End point (x, y).
    """
    p1: Point
    p2: Point

    @property
    def dx(self) -> float:
        return self.p2[0] - self.p1[0]

    @property
    def dy(self) -> float:
        return self.p2[1] - self.p1[1]

    @property
    def length(self) -> float:
        return float(np.hypot(self.dx, self.dy))

    def screen_angle(self, y_down: bool = False) -> float:
        return float(screen_angles(self.dx, self.dy, y_down=y_down))

    def angle(self, y_down: bool = False) -> float:
        """True angle of the segment, see :func:`angle_from_screen`."""
        return angle_from_screen(self.screen_angle(y_down=y_down))

    def with_p2(self, p2: Point) -> "Segment":
        return Segment(self.p1, (float(p2[0]), float(p2[1])))

    def to_shapely(self) -> LineString:
        return LineString([self.p1, self.p2])


def as_vertices(polygon) -> np.ndarray:
    """
    Coerce polygon input into a float array of vertices.

    Parameters
    ----------
    polygon : array-like or shapely geometry
        Sequence of (x, y) pairs of shape (N, 2), or a shapely Polygon,
        MultiPolygon, LinearRing or LineString.

    Returns
    -------
    np.ndarray
        Vertices of shape (N, 2). Shapely polygons keep their closing vertex.
    """
    if isinstance(polygon, MultiPolygon):
        # Take the largest polygon if we got multiple
        polygon = max(polygon.geoms, key=lambda g: g.area)
    if isinstance(polygon, Polygon):
        polygon = polygon.exterior.coords
    elif isinstance(polygon, (LinearRing, LineString)):
        polygon = polygon.coords

    vertices = np.asarray(polygon, dtype=np.float64)

    if vertices.size == 0:
        return np.empty((0, 2), dtype=np.float64)

    if vertices.ndim != 2 or vertices.shape[1] != 2:
        raise ValueError(f"Expected polygon of shape (N, 2), got {vertices.shape}")

    if not np.all(np.isfinite(vertices)):
        raise ValueError("Polygon coordinates must be finite")

    return vertices


def is_closed(vertices: np.ndarray) -> bool:
    """True if the first vertex is repeated as the last one."""
    return len(vertices) > 1 and bool(np.array_equal(vertices[0], vertices[-1]))


def normalize_polygon(polygon, closed: Optional[bool] = None) -> np.ndarray:
    """
    Return polygon vertices with the duplicate closing vertex removed.

    Parameters
    ----------
    polygon : array-like or shapely geometry
        Polygon vertices.
    closed : bool, optional
        Explicit closure flag. If None, closure is inferred from equality of
        the first and last vertex. An explicit True only drops the tail when
        it actually repeats the first vertex.

    Returns
    -------
    np.ndarray
        Vertices of shape (n, 2) where index n - 1 connects back to 0.
    """
    vertices = as_vertices(polygon)
    if closed is False:
        return vertices
    if is_closed(vertices):
        return vertices[:-1]
    return vertices


def count_distinct(vertices: np.ndarray) -> int:
    """Number of distinct vertices."""
    if len(vertices) == 0:
        return 0
    return len(np.unique(vertices, axis=0))


def polygon_edges(vertices: np.ndarray) -> List[Segment]:
    """
    Build the wrap-around edge list of a normalized polygon.

    Edge i connects vertex i to vertex i + 1; the last edge connects
    vertex n - 1 back to vertex 0.
    """
    size = len(vertices)
    edges = []
    for i in range(size):
        a = vertices[wrap_index(i, size)]
        b = vertices[wrap_index(i + 1, size)]
        edges.append(Segment((float(a[0]), float(a[1])), (float(b[0]), float(b[1]))))
    return edges
