from __future__ import annotations

import math
from typing import Tuple

from .types import ColorBGR, Landmark, Point2


def to_pixel(lm: Landmark, width: int, height: int) -> Point2:
    return (lm.x * width, lm.y * height)


def midpoint(p0: Point2, p1: Point2) -> Point2:
    return ((p0[0] + p1[0]) / 2, (p0[1] + p1[1]) / 2)


def distance(p0: Point2, p1: Point2) -> float:
    return math.hypot(p0[0] - p1[0], p0[1] - p1[1])


def round_point(p: Point2) -> Tuple[int, int]:
    return (int(round(p[0])), int(round(p[1])))


def hex_to_bgr(color: str) -> ColorBGR:
    """Convert a CSS-style `#RRGGBB` color to an OpenCV BGR tuple."""
    value = color.lstrip("#")
    if len(value) != 6:
        raise ValueError(f"Expected a #RRGGBB color, got {color!r}")
    r, g, b = (int(value[i : i + 2], 16) for i in (0, 2, 4))
    return (b, g, r)
