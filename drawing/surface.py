import logging
from typing import Iterable, Protocol, Tuple
import cv2
import numpy as np
from maths.point import Point

Color = Tuple[int, int, int]


class Surface(Protocol):
    """Where curves end up: takes draw points with a color, can be wiped"""

    def draw_points(self, points: Iterable[Point], color: Color):
        ...

    def clear(self):
        ...


class ImageSurface:
    """In-memory BGR canvas, one pixel per draw point"""

    def __init__(self, width: int, height: int, background: Color = (255, 255, 255)):
        if width <= 0 or height <= 0:
            raise ValueError(f"Surface size must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        self.background = background
        self._canvas = np.empty((height, width, 3), dtype=np.uint8)
        self.clear()

    @property
    def pixels(self) -> np.ndarray:
        return self._canvas

    def draw_points(self, points: Iterable[Point], color: Color):
        drawn = 0
        for point in points:
            x, y = point.as_pixel()
            if 0 <= x < self.width and 0 <= y < self.height:
                self._canvas[y, x] = color
                drawn += 1
        logging.debug(f"Drew {drawn} points in color {color}")

    def draw_markers(self, points: Iterable[Point], color: Color, radius: int = 3):
        """Outline each point with a small circle, used for control points"""
        for point in points:
            cv2.circle(self._canvas, point.as_pixel(), radius, color, 1)

    def clear(self):
        self._canvas[:] = self.background

    def save(self, path: str):
        try:
            written = cv2.imwrite(path, self._canvas)
        except cv2.error as e:
            raise IOError(f"Could not write image to {path}: {e}") from e
        if not written:
            raise IOError(f"Could not write image to {path}")
        logging.info(f"Image saved to {path}")
