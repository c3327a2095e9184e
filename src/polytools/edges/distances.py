"""
Edge Distance Module

Annotates polygon edges with length, true angle and vertex index span
against a viewport. Invisible edges keep their angle so they still count in
the angle-change statistics used to detect circular polygons.
"""

from dataclasses import dataclass, replace
import logging
from typing import List, Optional, Sequence, Tuple

import numpy as np

from ..core.config import EdgeConfig, resolve_config
from ..core.geometry import Segment, angle_abs_diff, angle_from_screen, screen_angles
from ..core.viewport import ViewportLike, inside_mask, touching_mask

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AnnotatedEdge:
    """
    A polygon edge annotated for label placement.

    Attributes
    ----------
    length : float
        Euclidean length, 0 for an invisible edge.
    angle : float
        True angle in [0, 360), kept for invisible edges too.
    index_from : int
        Index of the first vertex spanned, -1 if invisible.
    index_to : int
        Index after the last vertex spanned, -1 if invisible. Can equal the
        vertex count for the closing edge.
    segment : Segment
        Start and end point of the edge or of a merged run of edges.
    """
    length: float
    angle: float
    index_from: int
    index_to: int
    segment: Segment

    @property
    def is_valid(self) -> bool:
        return self.index_from >= 0

    def has_same_angle(self, other: "AnnotatedEdge", max_angle: float) -> bool:
        """True if the shortest-arc angle difference is below ``max_angle``."""
        return angle_abs_diff(self.angle, other.angle) < max_angle

    def extended(self, other: "AnnotatedEdge") -> "AnnotatedEdge":
        """
        Return this edge extended by a following edge.

        The index span grows to ``other.index_to``, lengths add up and the
        end point moves to the far end of ``other``. The angle is kept.
        """
        return replace(
            self,
            index_to=other.index_to,
            length=self.length + other.length,
            segment=self.segment.with_p2(other.segment.p2),
        )


def edge_distances(
    edges: Sequence[Segment],
    viewport: ViewportLike,
    size: Optional[int] = None,
    check_intersect: bool = False,
    with_variance: bool = False,
    y_down: Optional[bool] = None,
    config: Optional[EdgeConfig] = None,
) -> Tuple[List[AnnotatedEdge], Optional[float]]:
    """
    Annotate edges against a viewport.

    Parameters
    ----------
    edges : sequence of Segment
        Polygon edges in order, including the closing edge.
    viewport : Viewport, bounds or shapely geometry
        Visible rectangle.
    size : int, optional
        Number of edges to use. Defaults to all.
    check_intersect : bool
        If False an edge is visible only if it is fully inside the viewport.
        If True touching or crossing the viewport is enough.
    with_variance : bool
        If True also return the population variance of the angle change
        between consecutive edges.
    y_down : bool, optional
        Axis convention for angles, defaults to the configured one.
    config : EdgeConfig, optional
        Settings to use instead of the module defaults.

    Returns
    -------
    tuple
        (annotated edges, variance). One entry per edge in input order.
        Variance is None unless ``with_variance`` is set and 0.0 if fewer
        than two edges were given.
    """
    config = resolve_config(config, y_down)
    if size is None:
        size = len(edges)
    edges = list(edges[:size])

    if not edges:
        return [], (0.0 if with_variance else None)

    starts = np.array([edge.p1 for edge in edges], dtype=np.float64)
    ends = np.array([edge.p2 for edge in edges], dtype=np.float64)
    delta = ends - starts
    lengths = np.hypot(delta[:, 0], delta[:, 1])
    screen = screen_angles(delta[:, 0], delta[:, 1], y_down=config.y_down)

    if check_intersect:
        visible = touching_mask(starts, ends, viewport)
    else:
        visible = inside_mask(starts, ends, viewport)

    # Change in angle between consecutive edges
    angle_changes = []
    distances: List[AnnotatedEdge] = []
    for i, edge in enumerate(edges):
        angle = angle_from_screen(screen[i])

        if with_variance and distances:
            angle_changes.append(angle_abs_diff(angle, distances[-1].angle))

        if visible[i]:
            # Either fully visible or overlapping
            distances.append(AnnotatedEdge(float(lengths[i]), angle, i, i + 1, edge))
        else:
            # Not visible at all, keep the angle
            distances.append(AnnotatedEdge(0.0, angle, -1, -1, edge))

    variance = None
    if with_variance:
        variance = float(np.var(angle_changes)) if angle_changes else 0.0

    logger.debug(
        "Annotated %d edges (%s), %d visible, variance %s",
        len(distances), "touching" if check_intersect else "inside",
        int(np.count_nonzero(visible)), variance,
    )
    return distances, variance
