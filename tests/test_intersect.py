"""Tests for shared/intersect.py: intersection points and their ordering."""
import math
import pytest
from shared.geometry import GeometryError
from shared.intersect import intersect, slope_intersection, line_circle_isects, circle_circle_isects
from shared.types import Line, Arc, Circle

S3 = math.sqrt(3) / 2


# --- line / line ---

def test_crossing_lines():
    assert intersect(Line((0, 0), (10, 10)), Line((0, 10), (10, 0))) == [pytest.approx((5, 5))]


def test_lines_touching_at_endpoint():
    pts = intersect(Line((0, 0), (10, 0)), Line((10, 0), (10, 10)))
    assert len(pts) == 1
    assert pts[0] == pytest.approx((10, 0))


def test_lines_apart():
    assert intersect(Line((0, 0), (1, 0)), Line((5, -1), (5, 1))) == []


def test_parallel_and_collinear_lines():
    assert intersect(Line((0, 0), (10, 0)), Line((0, 1), (10, 1))) == []
    assert intersect(Line((0, 0), (10, 0)), Line((5, 0), (15, 0))) == []


def test_slope_intersection_beyond_segments():
    assert slope_intersection(Line((0, 0), (1, 0)), Line((5, 1), (5, 2))) == pytest.approx((5, 0))


def test_slope_intersection_parallel_is_none():
    assert slope_intersection(Line((0, 0), (1, 0)), Line((0, 1), (1, 1))) is None


# --- line / circle ---

def test_line_circle_ordered_along_line():
    pts = intersect(Line((0, 0), (10, 0)), Circle((5, 0), 2))
    assert pts == [pytest.approx((3, 0)), pytest.approx((7, 0))]


def test_line_circle_order_follows_line_direction():
    pts = intersect(Line((10, 0), (0, 0)), Circle((5, 0), 2))
    assert pts == [pytest.approx((7, 0)), pytest.approx((3, 0))]


def test_circle_first_operand_uses_line_order():
    pts = intersect(Circle((5, 0), 2), Line((0, 0), (10, 0)))
    assert pts == [pytest.approx((3, 0)), pytest.approx((7, 0))]


def test_line_tangent_to_circle():
    pts = intersect(Line((0, 2), (10, 2)), Circle((5, 0), 2))
    assert pts == [pytest.approx((5, 2))]


def test_line_circle_clipped_to_segment():
    assert intersect(Line((0, 0), (5, 0)), Circle((5, 0), 2)) == [pytest.approx((3, 0))]


def test_line_misses_circle():
    assert intersect(Line((0, 0), (10, 0)), Circle((5, 10), 2)) == []


def test_zero_length_line():
    assert line_circle_isects(Line((1, 1), (1, 1)), (0, 0), 5) == []


def test_line_arc_filters_by_extent():
    pts = intersect(Line((-5, 0), (5, 0)), Arc((0, 0), 2, 0, 90))
    assert pts == [pytest.approx((2, 0))]


# --- circle / circle ---

def test_circles_left_point_first():
    pts = circle_circle_isects((0, 0), 1, (1, 0), 1)
    assert pts == [pytest.approx((0.5, S3)), pytest.approx((0.5, -S3))]


def test_circles_order_flips_with_operands():
    pts = intersect(Circle((1, 0), 1), Circle((0, 0), 1))
    assert pts == [pytest.approx((0.5, -S3)), pytest.approx((0.5, S3))]


def test_tangent_circles():
    assert intersect(Circle((0, 0), 1), Circle((2, 0), 1)) == [pytest.approx((1, 0))]


def test_concentric_circles_have_no_points():
    assert intersect(Circle((0, 0), 1), Circle((0, 0), 1)) == []
    assert intersect(Circle((0, 0), 1), Circle((0, 0), 2)) == []


def test_circles_apart():
    assert intersect(Circle((0, 0), 1), Circle((5, 0), 1)) == []


def test_circle_inside_circle():
    assert intersect(Circle((0, 0), 5), Circle((1, 0), 1)) == []


def test_arc_filters_circle_points():
    pts = intersect(Arc((0, 0), 1, 0, 180), Circle((1, 0), 1))
    assert pts == [pytest.approx((0.5, S3))]


# --- unsupported ---

def test_unsupported_operand_raises():
    with pytest.raises(GeometryError, match="Cannot intersect"):
        intersect(Line((0, 0), (1, 0)), "circle")
    with pytest.raises(GeometryError, match="Cannot intersect"):
        intersect((0, 0), Circle((0, 0), 1))
