"""
Long Edge Selection Module

Finds the polygon edges best suited to carry a label: long, visible in the
viewport and, optionally, merged with neighbours running in nearly the same
direction. Also flags polygons that are drawn as circles.

Pipeline:
- Normalize closure and reject degenerate input
- Annotate edges fully inside the viewport, falling back to edges touching
  it if none are
- Circularity from the variance of the angle change between edges
- Merge runs of edges with similar angles
- Rank by length, ties by start index, and truncate
"""

from dataclasses import dataclass, field
import logging
from typing import List, Optional, Tuple

import numpy as np

from ..core.config import EdgeConfig, resolve_config
from ..core.geometry import count_distinct, normalize_polygon, polygon_edges
from ..core.viewport import ViewportLike, as_viewport
from .distances import AnnotatedEdge, edge_distances

logger = logging.getLogger(__name__)


@dataclass
class LongEdgeResult:
    """
    Container for long edge selection results.

    Attributes
    ----------
    edges : list of AnnotatedEdge
        Ranked edges, longest first, at most ``limit`` entries.
    circular : bool or None
        Whether the polygon looks like a circle. None unless requested.
    angle_variance : float or None
        Variance of the angle change between consecutive edges in squared
        degrees. None unless circularity was requested.
    """
    edges: List[AnnotatedEdge] = field(default_factory=list)
    circular: Optional[bool] = None
    angle_variance: Optional[float] = None

    def __len__(self) -> int:
        return len(self.edges)

    def __iter__(self):
        return iter(self.edges)

    def __getitem__(self, index):
        return self.edges[index]


def is_circular(variance: float, threshold: float) -> bool:
    """
    Circularity heuristic.

    All edges of a circle-like polygon turn by about the same amount, so the
    variance of the turn is low. Exactly zero variance comes from axis-aligned
    turns, such as a square's, and is not a circle. A regular polygon with
    many vertices keeps a rounding-level variance and is one.
    """
    return variance > 0.0 and variance < threshold


def annotate_visible_edges(
    edges, viewport: ViewportLike, with_variance: bool, config: EdgeConfig
) -> Tuple[List[AnnotatedEdge], Optional[float]]:
    """
    Annotate edges fully inside the viewport, or touching it if none is.

    Returns the annotations and angle variance of the pass that was used.
    """
    distances, variance = edge_distances(
        edges, viewport, check_intersect=False, with_variance=with_variance, config=config
    )
    if any(dist.is_valid for dist in distances):
        return distances, variance

    # Nothing fully visible - collect edges touching the viewport
    logger.debug("No edge inside viewport, retrying with edges touching it")
    return edge_distances(
        edges, viewport, check_intersect=True, with_variance=with_variance, config=config
    )


def merge_similar_edges(distances: List[AnnotatedEdge], max_angle: float) -> List[AnnotatedEdge]:
    """
    Merge consecutive valid edges with similar angles.

    Each valid edge either extends the current run, if its angle differs by
    less than ``max_angle`` from the run's angle, or starts a new run.
    Invalid edges neither start nor extend a run.

    Parameters
    ----------
    distances : list of AnnotatedEdge
        Annotated edges in polygon order.
    max_angle : float
        Angle threshold in degrees.

    Returns
    -------
    list of AnnotatedEdge
        Merged edges in polygon order, only valid ones.
    """
    merged: List[AnnotatedEdge] = []
    for dist in distances:
        if not dist.is_valid:
            continue

        if merged and dist.has_same_angle(merged[-1], max_angle):
            merged[-1] = merged[-1].extended(dist)
        else:
            merged.append(dist)
    return merged


def rank_edges(distances: List[AnnotatedEdge], tolerance: float) -> List[AnnotatedEdge]:
    """
    Sort edges by descending length, near-equal lengths by start index.

    Lengths are grouped by ``tolerance`` from the longest edge downwards so
    the ordering stays a strict weak order.
    """
    ranked = sorted(distances, key=lambda dist: -dist.length)

    result: List[AnnotatedEdge] = []
    group: List[AnnotatedEdge] = []
    for dist in ranked:
        if group and group[0].length - dist.length > tolerance:
            result.extend(sorted(group, key=lambda d: d.index_from))
            group = []
        group.append(dist)
    result.extend(sorted(group, key=lambda d: d.index_from))
    return result


def long_polygon_edges(
    polygon,
    viewport: ViewportLike,
    limit: int,
    max_angle: float = 0.0,
    detect_circle: bool = False,
    closed: Optional[bool] = None,
    y_down: Optional[bool] = None,
    config: Optional[EdgeConfig] = None,
) -> LongEdgeResult:
    """
    Select the longest visible polygon edges for labelling.

    This is the main entry point:
    1. Degenerate polygons and ``limit == 0`` give an empty result
    2. Edges fully inside the viewport are annotated, or edges touching the
       viewport if none is fully inside
    3. Optionally flag circular polygons
    4. Merge runs of edges with similar angles if ``max_angle > 0``
    5. Sort longest first and keep ``limit`` edges

    Parameters
    ----------
    polygon : array-like or shapely geometry
        Polygon vertices of shape (N, 2), open or closed.
    viewport : Viewport, bounds or shapely geometry
        Visible rectangle in polygon coordinates.
    limit : int
        Maximum number of edges to return. 0 gives an empty result.
    max_angle : float
        Edges whose angles differ by less than this many degrees are merged.
        0 or less disables merging.
    detect_circle : bool
        If True fill in ``circular`` and ``angle_variance``.
    closed : bool, optional
        Explicit closure flag, inferred from the vertices if None.
    y_down : bool, optional
        Axis convention for edge angles, defaults to the configured one.
    config : EdgeConfig, optional
        Settings to use instead of the module defaults.

    Returns
    -------
    LongEdgeResult
        Ranked edges plus circularity information.
    """
    if limit < 0:
        raise ValueError(f"limit must be >= 0, got {limit}")

    config = resolve_config(config, y_down)
    viewport = as_viewport(viewport)
    vertices = normalize_polygon(polygon, closed=closed)

    result = LongEdgeResult()
    if detect_circle:
        result.circular = False

    if count_distinct(vertices) < 3 or limit == 0:
        logger.debug("Skipping polygon with %d vertices, limit %d", len(vertices), limit)
        return result

    edges = polygon_edges(vertices)
    distances, variance = annotate_visible_edges(edges, viewport, detect_circle, config)

    if detect_circle:
        result.angle_variance = variance
        result.circular = is_circular(variance, config.circle_variance_threshold)
        logger.debug("Angle variance %.3f, circular %s", variance, result.circular)

    if max_angle > 0.0:
        num_before = len(distances)
        distances = merge_similar_edges(distances, max_angle)
        logger.debug("Merged %d edges into %d", num_before, len(distances))

    distances = rank_edges(distances, config.length_tolerance)

    # Prune if requested
    result.edges = distances[:limit]
    return result


def edge_stats(result: LongEdgeResult) -> dict:
    """
    Compute diagnostic statistics for a selection result.

    Parameters
    ----------
    result : LongEdgeResult
        Result from long_polygon_edges().

    Returns
    -------
    dict
        Statistics including:
        - num_edges: Number of returned edges
        - num_valid: Number of visible edges
        - valid_fraction: Fraction of returned edges that are visible
        - total_length: Sum of edge lengths
        - longest: Length of the first edge
        - circular: Circularity flag or None
        - angle_variance: Angle change variance or None
    """
    lengths = np.array([dist.length for dist in result.edges], dtype=np.float64)
    num_valid = sum(1 for dist in result.edges if dist.is_valid)

    return {
        'num_edges': len(result.edges),
        'num_valid': num_valid,
        'valid_fraction': float(num_valid / len(result.edges)) if result.edges else 0.0,
        'total_length': float(np.sum(lengths)),
        'longest': float(lengths[0]) if len(lengths) else 0.0,
        'circular': result.circular,
        'angle_variance': result.angle_variance,
    }
