"""Shared test fixtures for fillet geometry tests."""
import math
import pytest
from shared.types import Line, Arc


@pytest.fixture
def corner_lines():
    """Right-angle corner at (10, 0): east along y=0, then north along x=10."""
    return Line((0, 0), (10, 0)), Line((10, 0), (10, 10))


@pytest.fixture
def collinear_lines():
    """Two lines meeting at (10, 0) in a straight 180° angle."""
    return Line((0, 0), (10, 0)), Line((10, 0), (20, 0))


@pytest.fixture
def line_convex_arc():
    """Line ending at (10, 0) meets an arc that curves away from the corner."""
    return Line((0, 0), (10, 0)), Arc((20, 0), 10, 90, 180)


@pytest.fixture
def line_concave_arc():
    """Line ending at (10, 0) meets an arc whose center lies inside the corner."""
    return Line((0, 0), (10, 0)), Arc((5, 5), math.sqrt(50), 315, 405)


@pytest.fixture
def arc_pair():
    """Two quarter arcs bounding a lens; they meet at (10, 0) and again at (0, 10)."""
    return Arc((0, 0), 10, 0, 90), Arc((10, 10), 10, 180, 270)
