"""
Visualization utilities.
"""

from .plotting import plot_long_edges, plot_orientations

__all__ = ['plot_long_edges', 'plot_orientations']
