"""
Edge classification and selection algorithms.
"""

from .orientation import Orientation, polygon_orientation, find_corner_point, ensure_ccw, ensure_cw
from .distances import AnnotatedEdge, edge_distances
from .selection import LongEdgeResult, long_polygon_edges, merge_similar_edges, rank_edges, edge_stats

__all__ = [
    'Orientation',
    'polygon_orientation',
    'find_corner_point',
    'ensure_ccw',
    'ensure_cw',
    'AnnotatedEdge',
    'edge_distances',
    'LongEdgeResult',
    'long_polygon_edges',
    'merge_similar_edges',
    'rank_edges',
    'edge_stats',
]
