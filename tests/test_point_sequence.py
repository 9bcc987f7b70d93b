"""Snapshot and live control point tests."""

import numpy as np
import pytest

from maths.point import Point
from maths.point_sequence import ControlPoints, PointSequence, as_array


class TestPointSequence:
    def test_len_and_index(self, cubic_points):
        assert len(cubic_points) == 4
        assert cubic_points[0] == Point(0.0, 0.0)
        assert cubic_points[-1] == Point(400.0, 0.0)

    def test_accepts_pairs(self):
        seq = PointSequence([(1, 2), (3, 4)])
        assert seq[1] == Point(3.0, 4.0)

    def test_slice_returns_sequence(self, cubic_points):
        head = cubic_points[:2]
        assert isinstance(head, PointSequence)
        assert list(head) == [Point(0.0, 0.0), Point(100.0, 200.0)]

    def test_equality_and_hash(self):
        a = PointSequence([Point(0, 0), Point(1, 1)])
        b = PointSequence([Point(0, 0), Point(1, 1)])
        assert a == b
        assert hash(a) == hash(b)

    def test_from_array(self):
        seq = PointSequence.from_array(np.array([[0.0, 1.0], [2.0, 3.0]]))
        assert list(seq) == [Point(0.0, 1.0), Point(2.0, 3.0)]

    def test_from_array_rejects_bad_shape(self):
        with pytest.raises(ValueError):
            PointSequence.from_array(np.zeros((3, 3)))

    def test_as_array(self, quadratic_points):
        np.testing.assert_array_equal(
            quadratic_points.as_array(),
            [[10.0, 10.0], [120.0, 200.0], [230.0, 10.0]],
        )


class TestControlPoints:
    def test_add_insert_remove(self):
        points = ControlPoints()
        points.add(Point(0, 0))
        points.add(Point(2, 2))
        points.insert(1, Point(1, 1))
        assert list(points) == [Point(0, 0), Point(1, 1), Point(2, 2)]
        assert points.remove(0) == Point(0, 0)
        assert len(points) == 2

    def test_move(self, live_control_points):
        live_control_points.move(1, Point(50.0, 50.0))
        assert live_control_points[1] == Point(50.0, 50.0)

    def test_snapshot_is_isolated_from_later_edits(self, live_control_points):
        snapshot = live_control_points.snapshot()
        live_control_points.move(0, Point(-10.0, -10.0))
        live_control_points.add(Point(500.0, 500.0))
        assert snapshot[0] == Point(0.0, 0.0)
        assert len(snapshot) == 4

    def test_replace(self, live_control_points):
        live_control_points.replace([Point(1, 1), Point(2, 2)])
        assert list(live_control_points) == [Point(1, 1), Point(2, 2)]

    def test_clear(self, live_control_points):
        live_control_points.clear()
        assert len(live_control_points) == 0

    def test_as_array_reads_live_points(self, live_control_points):
        assert as_array(live_control_points).shape == (4, 2)
