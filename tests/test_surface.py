"""Image surface tests."""

import os

import cv2
import numpy as np
import pytest

from drawing.config import RenderConfig
from drawing.surface import ImageSurface
from maths.curves.curve import BezierCurve
from maths.point import Point
from maths.point_sequence import ControlPoints


class TestImageSurface:
    def test_starts_with_background(self):
        surface = ImageSurface(20, 10, background=(10, 20, 30))
        assert surface.pixels.shape == (10, 20, 3)
        assert (surface.pixels == (10, 20, 30)).all()

    def test_draws_rounded_pixels(self):
        surface = ImageSurface(20, 10)
        surface.draw_points([Point(2.4, 3.6)], (0, 0, 255))
        assert tuple(surface.pixels[4, 2]) == (0, 0, 255)

    def test_ignores_points_outside(self):
        surface = ImageSurface(20, 10)
        surface.draw_points([Point(-5, 3), Point(25, 3), Point(3, 10)], (0, 0, 0))
        assert (surface.pixels == 255).all()

    def test_clear(self):
        surface = ImageSurface(20, 10)
        surface.draw_points([Point(1, 1)], (0, 0, 0))
        surface.clear()
        assert (surface.pixels == 255).all()

    def test_draw_markers(self):
        surface = ImageSurface(20, 20)
        surface.draw_markers([Point(10, 10)], (255, 0, 0), radius=3)
        assert tuple(surface.pixels[10, 13]) == (255, 0, 0)

    def test_rejects_empty_size(self):
        with pytest.raises(ValueError):
            ImageSurface(0, 10)

    def test_save(self, tmp_path):
        surface = ImageSurface(30, 30)
        curve = BezierCurve(ControlPoints([Point(0, 0), Point(29, 0), Point(29, 29)]), color=(0, 0, 0))
        curve.draw(surface)
        path = str(tmp_path / 'curve.png')
        surface.save(path)
        assert os.path.exists(path)
        np.testing.assert_array_equal(cv2.imread(path), surface.pixels)

    def test_save_failure(self, tmp_path):
        surface = ImageSurface(5, 5)
        with pytest.raises(IOError):
            surface.save(str(tmp_path / 'missing' / 'curve.png'))


class TestRenderConfig:
    def test_defaults(self):
        config = RenderConfig()
        assert config.width == 800
        assert config.curve_color == (0, 0, 0)
        assert config.draw_control_points is False

    def test_rejects_bad_size(self):
        with pytest.raises(ValueError):
            RenderConfig(width=-1)
