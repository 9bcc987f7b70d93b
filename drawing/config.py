from dataclasses import dataclass
from typing import Tuple


@dataclass
class RenderConfig:
    """Configuration for rendering a curve to an image"""
    width: int = 800
    height: int = 600

    # BGR, as OpenCV expects
    background: Tuple[int, int, int] = (255, 255, 255)
    curve_color: Tuple[int, int, int] = (0, 0, 0)
    reduced_curve_color: Tuple[int, int, int] = (255, 0, 0)
    control_point_color: Tuple[int, int, int] = (0, 0, 255)
    draw_control_points: bool = False

    output_path: str = "curve.png"

    def __post_init__(self):
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"Image size must be positive, got {self.width}x{self.height}")
