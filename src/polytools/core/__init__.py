"""
Core geometry operations.
"""

from .geometry import (
    EPS,
    Segment,
    almost_equal,
    normalize_angle,
    angle_abs_diff,
    angle_from_screen,
    screen_angles,
    wrap_index,
    as_vertices,
    is_closed,
    normalize_polygon,
    count_distinct,
    polygon_edges,
)
from .viewport import (
    Viewport,
    as_viewport,
    is_segment_inside_rect,
    is_segment_touching_rect,
    inside_mask,
    touching_mask,
)
from .config import (
    CIRCLE_VARIANCE_THRESHOLD,
    LENGTH_TOLERANCE,
    EdgeConfig,
    get_edge_config,
    set_edge_config,
)

__all__ = [
    'EPS',
    'Segment',
    'almost_equal',
    'normalize_angle',
    'angle_abs_diff',
    'angle_from_screen',
    'screen_angles',
    'wrap_index',
    'as_vertices',
    'is_closed',
    'normalize_polygon',
    'count_distinct',
    'polygon_edges',
    'Viewport',
    'as_viewport',
    'is_segment_inside_rect',
    'is_segment_touching_rect',
    'inside_mask',
    'touching_mask',
    'CIRCLE_VARIANCE_THRESHOLD',
    'LENGTH_TOLERANCE',
    'EdgeConfig',
    'get_edge_config',
    'set_edge_config',
]
