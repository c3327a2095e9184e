"""
Unit tests for viewport and edge visibility predicates.
"""

import numpy as np
import pytest
from shapely.geometry import box

from polytools.core.geometry import Segment
from polytools.core.viewport import (
    Viewport,
    as_viewport,
    inside_mask,
    is_segment_inside_rect,
    is_segment_touching_rect,
    touching_mask,
)


VIEWPORT = Viewport(0.0, 0.0, 10.0, 10.0)


class TestViewport:
    """Tests for the Viewport value type."""

    def test_invalid_bounds_raise(self):
        with pytest.raises(ValueError):
            Viewport(10.0, 0.0, 0.0, 10.0)
        with pytest.raises(ValueError):
            Viewport(0.0, 10.0, 10.0, 0.0)
        with pytest.raises(ValueError):
            Viewport(0.0, 0.0, np.inf, 10.0)

    def test_zero_width_is_segment(self):
        viewport = Viewport(5.0, -5.0, 5.0, 15.0)

        assert viewport.width == 0.0
        assert viewport.geometry.geom_type == "LineString"
        assert viewport.contains_point((5.0, 0.0))
        assert not viewport.contains_point((5.5, 0.0))

    def test_zero_size_is_point(self):
        viewport = Viewport(1.0, 1.0, 1.0, 1.0)

        assert viewport.geometry.geom_type == "Point"
        assert viewport.contains_point((1.0, 1.0))
        assert not viewport.contains_point((1.0, 1.5))

    def test_from_shapely(self):
        viewport = as_viewport(box(1, 2, 3, 4))
        assert viewport.bounds == (1.0, 2.0, 3.0, 4.0)

    def test_from_tuple(self):
        viewport = as_viewport((0, 0, 5, 6))
        assert viewport.width == 5.0
        assert viewport.height == 6.0

    def test_wrong_bounds_shape(self):
        with pytest.raises(ValueError):
            as_viewport((0, 0, 5))

    def test_contains_boundary(self):
        """Points on the boundary count as inside."""
        assert VIEWPORT.contains_point((0.0, 5.0))
        assert VIEWPORT.contains_point((10.0, 10.0))
        assert VIEWPORT.contains_point((5.0, 5.0))
        assert not VIEWPORT.contains_point((10.5, 5.0))


class TestInside:
    """Tests for the strict inside predicate."""

    def test_both_endpoints_inside(self):
        assert is_segment_inside_rect(Segment((1.0, 1.0), (9.0, 9.0)), VIEWPORT)

    def test_one_endpoint_outside(self):
        assert not is_segment_inside_rect(Segment((1.0, 1.0), (11.0, 9.0)), VIEWPORT)

    def test_on_boundary(self):
        assert is_segment_inside_rect(Segment((0.0, 0.0), (10.0, 0.0)), VIEWPORT)


class TestTouching:
    """Tests for the touching-or-crossing predicate."""

    def test_one_endpoint_inside(self):
        assert is_segment_touching_rect(Segment((5.0, 5.0), (20.0, 5.0)), VIEWPORT)

    def test_crossing_without_endpoints_inside(self):
        """Edge passing straight through the viewport."""
        segment = Segment((-5.0, 5.0), (15.0, 5.0))
        assert is_segment_touching_rect(segment, VIEWPORT)
        assert not is_segment_inside_rect(segment, VIEWPORT)

    def test_through_corner(self):
        """Bounded intersection at a corner counts."""
        assert is_segment_touching_rect(Segment((-5.0, 5.0), (5.0, -5.0)), VIEWPORT)

    def test_extension_only(self):
        """Only the infinite extension of the edge would hit the viewport."""
        assert not is_segment_touching_rect(Segment((-10.0, 5.0), (-5.0, 5.0)), VIEWPORT)

    def test_outside(self):
        assert not is_segment_touching_rect(Segment((20.0, 20.0), (30.0, 25.0)), VIEWPORT)

    def test_zero_length_outside(self):
        assert not is_segment_touching_rect(Segment((20.0, 20.0), (20.0, 20.0)), VIEWPORT)

    def test_crossing_zero_width_viewport(self):
        viewport = Viewport(5.0, -5.0, 5.0, 15.0)
        assert is_segment_touching_rect(Segment((0.0, 0.0), (10.0, 0.0)), viewport)
        assert not is_segment_touching_rect(Segment((10.0, 0.0), (10.0, 10.0)), viewport)


class TestMasks:
    """Vectorized predicates agree with the scalar ones."""

    SEGMENTS = [
        Segment((1.0, 1.0), (9.0, 9.0)),
        Segment((5.0, 5.0), (20.0, 5.0)),
        Segment((-5.0, 5.0), (15.0, 5.0)),
        Segment((-5.0, 5.0), (5.0, -5.0)),
        Segment((-10.0, 5.0), (-5.0, 5.0)),
        Segment((20.0, 20.0), (20.0, 20.0)),
        Segment((3.0, 3.0), (3.0, 3.0)),
    ]

    def _arrays(self):
        starts = np.array([s.p1 for s in self.SEGMENTS])
        ends = np.array([s.p2 for s in self.SEGMENTS])
        return starts, ends

    def test_inside_mask(self):
        starts, ends = self._arrays()
        expected = [is_segment_inside_rect(s, VIEWPORT) for s in self.SEGMENTS]
        np.testing.assert_array_equal(inside_mask(starts, ends, VIEWPORT), expected)

    def test_touching_mask(self):
        starts, ends = self._arrays()
        expected = [is_segment_touching_rect(s, VIEWPORT) for s in self.SEGMENTS]
        np.testing.assert_array_equal(touching_mask(starts, ends, VIEWPORT), expected)

    def test_empty(self):
        empty = np.empty((0, 2))
        assert inside_mask(empty, empty, VIEWPORT).shape == (0,)
        assert touching_mask(empty, empty, VIEWPORT).shape == (0,)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
