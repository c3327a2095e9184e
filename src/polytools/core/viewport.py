"""
Viewport rectangle and edge visibility predicates.

Two policies classify an edge against the visible rectangle:
- inside: both endpoints lie in the rectangle (boundary included). The
  rectangle is convex, so the whole edge is then visible.
- touching: an endpoint lies in the rectangle or the edge has a bounded
  intersection with one of the four rectangle sides.
"""

from dataclasses import dataclass
from typing import Sequence, Union

import numpy as np
import shapely
from shapely.geometry import MultiPoint, Point, box
from shapely.geometry.base import BaseGeometry

from .geometry import Segment


@dataclass(frozen=True)
class Viewport:
    """
    Axis-aligned visible rectangle in polygon coordinates.

    Attributes
    ----------
    xmin, ymin, xmax, ymax : float
        Rectangle bounds. A zero width or height gives a segment or point
        viewport, inverted bounds are rejected.
    """
    xmin: float
    ymin: float
    xmax: float
    ymax: float

    def __post_init__(self):
        bounds = (self.xmin, self.ymin, self.xmax, self.ymax)
        if not all(np.isfinite(bounds)):
            raise ValueError(f"Viewport bounds must be finite, got {bounds}")
        if self.xmin > self.xmax or self.ymin > self.ymax:
            raise ValueError(
                f"Viewport needs xmin <= xmax and ymin <= ymax, got {bounds}"
            )

    @classmethod
    def from_bounds(cls, bounds: Sequence[float]) -> "Viewport":
        xmin, ymin, xmax, ymax = (float(v) for v in bounds)
        return cls(xmin, ymin, xmax, ymax)

    @property
    def bounds(self):
        return (self.xmin, self.ymin, self.xmax, self.ymax)

    @property
    def width(self) -> float:
        return self.xmax - self.xmin

    @property
    def height(self) -> float:
        return self.ymax - self.ymin

    @property
    def geometry(self) -> BaseGeometry:
        """Shapely rectangle for this viewport, a line or point if degenerate."""
        if self.width > 0.0 and self.height > 0.0:
            return box(self.xmin, self.ymin, self.xmax, self.ymax)
        return MultiPoint([(self.xmin, self.ymin), (self.xmax, self.ymax)]).envelope

    def contains_point(self, point) -> bool:
        """Test if a point is inside or on the rectangle boundary."""
        x, y = float(point[0]), float(point[1])
        return self.geometry.covers(Point(x, y))


ViewportLike = Union[Viewport, Sequence[float], BaseGeometry]


def as_viewport(viewport: ViewportLike) -> Viewport:
    """
    Coerce a viewport argument.

    Parameters
    ----------
    viewport : Viewport, 4-sequence or shapely geometry
        A Viewport, (xmin, ymin, xmax, ymax) bounds, or any shapely geometry
        whose bounds are used.
    """
    if isinstance(viewport, Viewport):
        return viewport
    if isinstance(viewport, BaseGeometry):
        if viewport.is_empty:
            raise ValueError("Viewport geometry is empty")
        return Viewport.from_bounds(viewport.bounds)

    bounds = np.asarray(viewport, dtype=np.float64).ravel()
    if bounds.shape != (4,):
        raise ValueError(f"Expected viewport bounds (xmin, ymin, xmax, ymax), got shape {bounds.shape}")
    return Viewport.from_bounds(bounds)


def is_segment_inside_rect(segment: Segment, viewport: ViewportLike) -> bool:
    """True if both endpoints of ``segment`` are inside the viewport."""
    viewport = as_viewport(viewport)
    return viewport.contains_point(segment.p1) and viewport.contains_point(segment.p2)


def is_segment_touching_rect(segment: Segment, viewport: ViewportLike) -> bool:
    """
    True if ``segment`` is at least partially visible in the viewport.

    Either endpoint inside or any bounded intersection with the rectangle
    sides. For a closed rectangle this is the same as the closed segment
    intersecting the closed rectangle.
    """
    viewport = as_viewport(viewport)
    if viewport.contains_point(segment.p1) or viewport.contains_point(segment.p2):
        return True
    if segment.p1 == segment.p2:
        return False
    return viewport.geometry.intersects(segment.to_shapely())


def _endpoint_masks(starts: np.ndarray, ends: np.ndarray, rect: BaseGeometry):
    start_in = shapely.covers(rect, shapely.points(starts))
    end_in = shapely.covers(rect, shapely.points(ends))
    return np.asarray(start_in, dtype=bool), np.asarray(end_in, dtype=bool)


def inside_mask(starts: np.ndarray, ends: np.ndarray, viewport: ViewportLike) -> np.ndarray:
    """
    Vectorized :func:`is_segment_inside_rect`.

    Parameters
    ----------
    starts, ends : np.ndarray
        Segment endpoints of shape (M, 2).

    Returns
    -------
    np.ndarray
        Boolean array of shape (M,).
    """
    starts = np.atleast_2d(np.asarray(starts, dtype=np.float64))
    ends = np.atleast_2d(np.asarray(ends, dtype=np.float64))
    if len(starts) == 0:
        return np.zeros(0, dtype=bool)

    rect = as_viewport(viewport).geometry
    shapely.prepare(rect)
    start_in, end_in = _endpoint_masks(starts, ends, rect)
    return start_in & end_in


def touching_mask(starts: np.ndarray, ends: np.ndarray, viewport: ViewportLike) -> np.ndarray:
    """
    Vectorized :func:`is_segment_touching_rect`.

    Parameters
    ----------
    starts, ends : np.ndarray
        Segment endpoints of shape (M, 2).

    Returns
    -------
    np.ndarray
        Boolean array of shape (M,).
    """
    starts = np.atleast_2d(np.asarray(starts, dtype=np.float64))
    ends = np.atleast_2d(np.asarray(ends, dtype=np.float64))
    if len(starts) == 0:
        return np.zeros(0, dtype=bool)

    rect = as_viewport(viewport).geometry
    shapely.prepare(rect)
    start_in, end_in = _endpoint_masks(starts, ends, rect)
    touching = start_in | end_in

    # Only proper segments with both endpoints outside need a crossing test
    pending = ~touching & np.any(starts != ends, axis=1)
    if np.any(pending):
        lines = shapely.linestrings(np.stack([starts[pending], ends[pending]], axis=1))
        touching[pending] = np.asarray(shapely.intersects(rect, lines), dtype=bool)

    return touching
