"""
Degree reduction by inverting degree elevation (Forrest, 1972).

Degree elevation of b'_0..b'_{n-1} into b_0..b_n reads

    b_i = (i * b'_{i-1} + (n - i) * b'_i) / n

Solving it for b'_i from the low end and for b'_{i-1} from the high end
gives two candidate point sets. The forward set loses accuracy as i grows,
the backward one as i shrinks, so the result blends them with weights
alpha_i picked by a policy.
"""
import logging
from typing import Callable, List, Sequence
import numpy as np
from ..point_sequence import BoundedPointSequence, PointSequence, as_array

WeightPolicy = Callable[[int], Sequence[float]]


def linear_weights(n: int) -> List[float]:
    """alpha_i = i / (n - 1): trust the forward set at the start, the backward one at the end"""
    return [i / (n - 1) for i in range(n)]


def forward_weights(n: int) -> List[float]:
    return [0.0] * n


def backward_weights(n: int) -> List[float]:
    return [1.0] * n


def split_weights(n: int) -> List[float]:
    """Forward set for the first half of the points, backward set for the rest"""
    return [0.0 if i < n / 2 else 1.0 for i in range(n)]


WEIGHT_POLICIES = {
    'linear': linear_weights,
    'forward': forward_weights,
    'backward': backward_weights,
    'split': split_weights,
}


class DegreeReducer:
    """Approximates a degree n curve with a degree n - 1 one"""

    def __init__(self, weights: WeightPolicy = linear_weights):
        self.weights = weights

    def __call__(self, points: BoundedPointSequence) -> PointSequence:
        return self.reduce(points)

    def reduce(self, points: BoundedPointSequence) -> PointSequence:
        if len(points) <= 2:
            raise ValueError(f"Degree reduction needs more than 2 control points, got {len(points)}")

        control = as_array(points)
        n = len(control) - 1

        forward = self._forward_points(control, n)
        backward = self._backward_points(control, n)
        alphas = self._alphas(n)

        reduced = (1.0 - alphas)[:, np.newaxis] * forward + alphas[:, np.newaxis] * backward
        logging.debug(f"Reduced curve from degree {n} to {n - 1}")
        return PointSequence.from_array(reduced)

    @staticmethod
    def _forward_points(control: np.ndarray, n: int) -> np.ndarray:
        """b1_i = (n * b_i - i * b1_{i-1}) / (n - i) for i = 1 to n - 1"""
        forward = np.empty((n, 2), dtype=np.float64)
        forward[0] = control[0]
        for i in range(1, n):
            forward[i] = (n * control[i] - i * forward[i - 1]) / (n - i)
        return forward

    @staticmethod
    def _backward_points(control: np.ndarray, n: int) -> np.ndarray:
        """b2_{i-1} = (n * b_i - (n - i) * b2_i) / i for i = n - 1 down to 1"""
        backward = np.empty((n, 2), dtype=np.float64)
        backward[n - 1] = control[n]
        for i in range(n - 1, 0, -1):
            backward[i - 1] = (n * control[i] - (n - i) * backward[i]) / i
        return backward

    def _alphas(self, n: int) -> np.ndarray:
        alphas = np.asarray(self.weights(n), dtype=np.float64)
        if alphas.shape != (n,):
            raise ValueError(f"Weight policy must return {n} weights, got {alphas.shape[0] if alphas.ndim else 0}")
        if np.any(alphas < 0.0) or np.any(alphas > 1.0):
            raise ValueError(f"Weights must lie in [0, 1], got {alphas.tolist()}")
        return alphas
