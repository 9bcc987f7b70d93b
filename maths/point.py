import math
from dataclasses import dataclass
from typing import Tuple, Union
import numpy as np


@dataclass(frozen=True)
class Point:
    """Immutable 2D point with float coordinates"""
    x: float
    y: float

    def __post_init__(self):
        object.__setattr__(self, 'x', float(self.x))
        object.__setattr__(self, 'y', float(self.y))

    @classmethod
    def from_array(cls, values: Union[np.ndarray, Tuple[float, float]]) -> 'Point':
        return cls(float(values[0]), float(values[1]))

    def as_array(self) -> np.ndarray:
        return np.array([self.x, self.y], dtype=np.float64)

    def as_pixel(self) -> Tuple[int, int]:
        """Nearest integer pixel, halves rounded up"""
        return _round_half_up(self.x), _round_half_up(self.y)

    def __add__(self, other: 'Point') -> 'Point':
        if not isinstance(other, Point):
            return NotImplemented
        return add(self, other)

    def __sub__(self, other: 'Point') -> 'Point':
        if not isinstance(other, Point):
            return NotImplemented
        return Point(self.x - other.x, self.y - other.y)

    def __mul__(self, k: float) -> 'Point':
        if isinstance(k, Point):
            return NotImplemented
        return scale(self, k)

    __rmul__ = __mul__

    def __iter__(self):
        yield self.x
        yield self.y


def add(a: Point, b: Point) -> Point:
    return Point(a.x + b.x, a.y + b.y)


def scale(p: Point, k: float) -> Point:
    return Point(p.x * k, p.y * k)


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)
