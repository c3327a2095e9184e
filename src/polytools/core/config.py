"""Default settings shared by the edge classifiers and selector."""

import copy
from dataclasses import dataclass
from typing import Optional


# Variance of the angle change between consecutive edges, in squared degrees.
# Calibrated against real map polygons (airspaces, range rings), there is no
# closed-form derivation. Below it a polygon is drawn as a circle.
CIRCLE_VARIANCE_THRESHOLD = 100.0

# Absolute tolerance below which two edge lengths rank as equal
LENGTH_TOLERANCE = 0.001


@dataclass
class EdgeConfig:
    """
    Settings for edge analysis.

    Attributes
    ----------
    circle_variance_threshold : float
        Upper bound (exclusive) of the angle-change variance for a polygon to
        count as circular.
    length_tolerance : float
        Lengths closer than this are tied and ordered by start index.
    y_down : bool
        True if coordinates are screen pixels with y growing downwards.
        Affects winding direction and edge angles.
    """
    circle_variance_threshold: float = CIRCLE_VARIANCE_THRESHOLD
    length_tolerance: float = LENGTH_TOLERANCE
    y_down: bool = False


_EDGE_CONFIG = EdgeConfig()


def get_edge_config() -> EdgeConfig:
    return copy.deepcopy(_EDGE_CONFIG)


def set_edge_config(config: EdgeConfig) -> None:
    global _EDGE_CONFIG
    _EDGE_CONFIG = copy.deepcopy(config)


def resolve_config(config: Optional[EdgeConfig] = None, y_down: Optional[bool] = None) -> EdgeConfig:
    """Return ``config`` or the module default, with ``y_down`` overridden if given."""
    resolved = copy.copy(config) if config is not None else get_edge_config()
    if y_down is not None:
        resolved.y_down = bool(y_down)
    return resolved
