"""Shared curve fixtures."""

import pytest

from maths.point import Point
from maths.point_sequence import ControlPoints, PointSequence


@pytest.fixture
def line_points():
    return PointSequence([Point(0.0, 0.0), Point(50.0, 25.0)])


@pytest.fixture
def quadratic_points():
    return PointSequence([Point(10.0, 10.0), Point(120.0, 200.0), Point(230.0, 10.0)])


@pytest.fixture
def cubic_points():
    return PointSequence([
        Point(0.0, 0.0),
        Point(100.0, 200.0),
        Point(300.0, 200.0),
        Point(400.0, 0.0),
    ])


@pytest.fixture
def cusp_points():
    """Quadratic that runs out to x=500 and back, fast at the ends and slow at the turn."""
    return PointSequence([Point(0.0, 0.0), Point(1000.0, 0.0), Point(0.0, 0.0)])


@pytest.fixture
def live_control_points(cubic_points):
    return ControlPoints(cubic_points)
