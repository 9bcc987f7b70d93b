from typing import Callable
import numpy as np
from ..point import Point
from ..point_sequence import BoundedPointSequence, PointSequence, as_array

Evaluator = Callable[[BoundedPointSequence, float], Point]


def evaluate(points: BoundedPointSequence, t: float) -> Point:
    """Calculate point on Bezier curve at parameter t using de Casteljau's algorithm.

    t is not clamped to [0, 1]; values outside the range extrapolate the
    same polynomial.
    """
    if len(points) == 0:
        raise ValueError("Cannot evaluate a curve without control points")

    work = as_array(points)
    for count in range(len(work) - 1, 0, -1):
        work[:count] = (1.0 - t) * work[:count] + t * work[1:count + 1]

    return Point.from_array(work[0])


def elevate(points: BoundedPointSequence) -> PointSequence:
    """Represent the same curve with one more control point"""
    if len(points) == 0:
        raise ValueError("Cannot elevate a curve without control points")

    src = as_array(points)
    n = len(src) - 1
    out = np.empty((n + 2, 2), dtype=np.float64)
    out[0] = src[0]
    out[n + 1] = src[n]
    for i in range(1, n + 1):
        alpha = i / (n + 1)
        out[i] = alpha * src[i - 1] + (1.0 - alpha) * src[i]

    return PointSequence.from_array(out)
