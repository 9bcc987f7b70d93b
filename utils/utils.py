from typing import List, Tuple
from maths.point import Point


def parse_point(token: str) -> Point:
    """Parse an "x,y" token"""
    parts = token.strip().split(',')
    if len(parts) != 2:
        raise ValueError(f"Invalid point, expected x,y: {token}")
    try:
        return Point(float(parts[0]), float(parts[1]))
    except ValueError:
        raise ValueError(f"Invalid point coordinates: {token}") from None


def parse_points(tokens: List[str]) -> List[Point]:
    return [parse_point(token) for token in tokens]


def parse_color(token: str) -> Tuple[int, int, int]:
    """Parse a "b,g,r" token with channels in 0-255"""
    parts = token.strip().split(',')
    if len(parts) != 3:
        raise ValueError(f"Invalid color, expected b,g,r: {token}")
    try:
        channels = tuple(int(part) for part in parts)
    except ValueError:
        raise ValueError(f"Invalid color channels: {token}") from None
    if any(not 0 <= c <= 255 for c in channels):
        raise ValueError(f"Color channels must be between 0 and 255, got {token}")
    return channels
