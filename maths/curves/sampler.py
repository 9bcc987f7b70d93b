import logging
from dataclasses import dataclass
from typing import List, Optional, Tuple
from ..point import Point
from ..point_sequence import BoundedPointSequence
from .bezier import Evaluator, evaluate

# Slack for the accumulated parameter, so a run of 0.01 steps still reaches 0.99
PARAMETER_EPSILON = 1e-9


@dataclass
class SamplerConfig:
    """Tuning for adaptive curve sampling"""
    initial_step: float = 0.01
    tolerance: float = 1.0
    min_step: float = 1e-12

    def __post_init__(self):
        if not 0 < self.initial_step <= 1:
            raise ValueError(f"Initial step must be in (0, 1], got {self.initial_step}")
        if self.tolerance <= 0:
            raise ValueError(f"Tolerance must be positive, got {self.tolerance}")
        if not 0 < self.min_step < self.initial_step:
            raise ValueError(f"Min step must be in (0, initial_step), got {self.min_step}")


def are_close(a: Point, b: Point, tolerance: float = 1.0) -> bool:
    """Both axis distances within tolerance (a square, not a circle)"""
    return abs(a.x - b.x) <= tolerance and abs(a.y - b.y) <= tolerance


class AdaptiveSampler:
    """Turns a curve into draw points whose density follows its curvature.

    Starting from t = 0 the sampler tries to advance by the initial step.
    A candidate further than the tolerance from the last emitted point is
    rejected and the step halved until it fits; after each accepted point
    the step goes back to its initial value, so flat parts after a sharp
    bend are again walked in large steps.
    """

    def __init__(self, evaluator: Evaluator = evaluate, config: Optional[SamplerConfig] = None):
        self.evaluator = evaluator
        self.config = config or SamplerConfig()

    def sample(self, points: BoundedPointSequence) -> List[Point]:
        return [point for _, point in self.sample_with_parameters(points)]

    def sample_with_parameters(self, points: BoundedPointSequence) -> List[Tuple[float, Point]]:
        """Draw points paired with the curve parameter each was evaluated at"""
        if len(points) < 2:
            logging.debug(f"Skipping sampling of curve with {len(points)} control points")
            return []

        initial_step = self.config.initial_step
        tolerance = self.config.tolerance

        previous = self.evaluator(points, 0.0)
        draw_points = [(0.0, previous)]

        t = 0.0
        while t <= 1.0 - initial_step + PARAMETER_EPSILON:
            step = initial_step
            while True:
                candidate = self.evaluator(points, t + step)
                if are_close(previous, candidate, tolerance):
                    break
                if step < self.config.min_step:
                    logging.warning(f"Step underflow at t={t}, accepting point {candidate}")
                    break
                step /= 2

            t += step
            draw_points.append((t, candidate))
            previous = candidate

        return draw_points
