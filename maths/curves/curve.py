import logging
from typing import TYPE_CHECKING, Callable, List, Optional, Sequence, Tuple
from ..point import Point
from ..point_sequence import BoundedPointSequence, ControlPoints, PointSequence
from .sampler import AdaptiveSampler

if TYPE_CHECKING:
    from drawing.surface import Surface

Color = Tuple[int, int, int]
Transformation = Callable[[BoundedPointSequence], Sequence[Point]]


class BezierCurve:
    """A curve drawn through live control points.

    The control points stay owned by the interactive layer and may change
    between calls; every operation works on a fresh snapshot.
    """

    def __init__(self, control_points: ControlPoints, sampler: Optional[AdaptiveSampler] = None,
                 color: Color = (0, 0, 0)):
        self.control_points = control_points
        self.sampler = sampler or AdaptiveSampler()
        self.color = color

    def draw_points(self) -> List[Point]:
        snapshot = self.control_points.snapshot()
        if len(snapshot) < 2:
            return []
        return self.sampler.sample(snapshot)

    def draw(self, surface: 'Surface'):
        if len(self.control_points) < 2:
            logging.debug(f"Not drawing curve with {len(self.control_points)} control points")
            return
        surface.draw_points(self.draw_points(), self.color)

    def transform(self, transformation: Transformation) -> PointSequence:
        """Apply a transformation to the current control points without installing it"""
        return PointSequence(transformation(self.control_points.snapshot()))

    def reduce_degree(self, reducer: Transformation) -> PointSequence:
        """Replace the control points with the reduced ones"""
        reduced = self.transform(reducer)
        self.control_points.replace(reduced)
        logging.info(f"Curve degree reduced to {len(reduced) - 1}")
        return reduced
