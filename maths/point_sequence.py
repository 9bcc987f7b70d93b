import logging
from typing import Iterable, Iterator, List, Protocol, Tuple
import numpy as np
from .point import Point


class BoundedPointSequence(Protocol):
    """Read-only, size-known view over ordered points.

    Index access is only valid for the duration of the call that received
    the sequence. Implementations may be live collections that change
    between calls, so consumers must not keep a reference or cache results.
    """

    def __len__(self) -> int:
        ...

    def __getitem__(self, index: int) -> Point:
        ...


def as_array(points: BoundedPointSequence) -> np.ndarray:
    """Copy a bounded sequence into a (n, 2) float64 array"""
    array = np.empty((len(points), 2), dtype=np.float64)
    for i in range(len(points)):
        array[i] = (points[i].x, points[i].y)
    return array


class PointSequence:
    """Frozen snapshot of control points"""
    __slots__ = ('_points',)

    def __init__(self, points: Iterable[Point] = ()):
        self._points: Tuple[Point, ...] = tuple(
            p if isinstance(p, Point) else Point.from_array(p) for p in points
        )

    @classmethod
    def from_array(cls, array: np.ndarray) -> 'PointSequence':
        array = np.asarray(array, dtype=np.float64)
        if array.ndim != 2 or array.shape[1] != 2:
            raise ValueError(f"Points must have shape (n, 2), got {array.shape}")
        return cls(Point(x, y) for x, y in array)

    def __len__(self) -> int:
        return len(self._points)

    def __getitem__(self, index):
        if isinstance(index, slice):
            return PointSequence(self._points[index])
        return self._points[index]

    def __iter__(self) -> Iterator[Point]:
        return iter(self._points)

    def __eq__(self, other) -> bool:
        if isinstance(other, PointSequence):
            return self._points == other._points
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._points)

    def __repr__(self) -> str:
        return f"PointSequence({list(self._points)!r})"

    def as_array(self) -> np.ndarray:
        return as_array(self)


class ControlPoints:
    """Live, mutable control points owned by the interactive layer.

    The core only reads it through the bounded sequence interface;
    use snapshot() to hand out a copy that later edits cannot touch.
    """

    def __init__(self, points: Iterable[Point] = ()):
        self._points: List[Point] = [
            p if isinstance(p, Point) else Point.from_array(p) for p in points
        ]

    def __len__(self) -> int:
        return len(self._points)

    def __getitem__(self, index: int) -> Point:
        return self._points[index]

    def __iter__(self) -> Iterator[Point]:
        return iter(list(self._points))

    def __repr__(self) -> str:
        return f"ControlPoints({self._points!r})"

    def add(self, point: Point):
        self._points.append(point)

    def insert(self, index: int, point: Point):
        self._points.insert(index, point)

    def move(self, index: int, point: Point):
        """Replace the point at index with its new position"""
        self._points[index] = point

    def remove(self, index: int) -> Point:
        return self._points.pop(index)

    def clear(self):
        self._points.clear()

    def replace(self, points: Iterable[Point]):
        """Install a new set of control points, e.g. after degree reduction"""
        new_points = list(points)
        logging.debug(f"Replacing {len(self._points)} control points with {len(new_points)}")
        self._points = new_points

    def snapshot(self) -> PointSequence:
        return PointSequence(self._points)
