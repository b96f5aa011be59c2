from __future__ import annotations

from typing import Iterable, Tuple

import numpy as np
import pytest

from mirrorhands.types import Landmark


class RecordingSurface:
    """Stand-in drawing surface that records every call."""

    def __init__(self, width: int = 1280, height: int = 720) -> None:
        self.width = width
        self.height = height
        self.calls = []
        self.depth = 0

    def _record(self, name, *args):
        self.calls.append((name,) + args)

    def save(self):
        self.depth += 1
        self._record("save")

    def restore(self):
        self.depth -= 1
        self._record("restore")

    def scale(self, sx, sy):
        self._record("scale", sx, sy)

    def translate(self, tx, ty):
        self._record("translate", tx, ty)

    def clear_rect(self, x, y, w, h):
        self._record("clear_rect", x, y, w, h)

    def draw_image(self, image, x, y, w, h):
        self._record("draw_image", image, x, y, w, h)

    def stroke_line(self, p0, p1, color, width):
        self._record("stroke_line", p0, p1, color, width)

    def fill_circle(self, center, radius, color):
        self._record("fill_circle", center, radius, color)

    def stroke_circle(self, center, radius, color, width):
        self._record("stroke_circle", center, radius, color, width)

    def names(self):
        return [c[0] for c in self.calls]

    def of(self, name):
        return [c for c in self.calls if c[0] == name]


def make_hand(tip: Tuple[float, float] = (0.5, 0.5), n: int = 21, base: Tuple[float, float] = (0.5, 0.8)):
    """A landmark set of `n` points, all at `base` except the index fingertip at `tip`."""
    points = [Landmark(x=base[0], y=base[1]) for _ in range(n)]
    if n > 8:
        points[8] = Landmark(x=tip[0], y=tip[1])
    return tuple(points)


def make_hands(tips: Iterable[Tuple[float, float]], n: int = 21):
    return tuple(make_hand(t, n=n) for t in tips)


@pytest.fixture
def recording_surface():
    return RecordingSurface()


@pytest.fixture
def frame():
    f = np.zeros((720, 1280, 3), dtype=np.uint8)
    f[:, :640] = (10, 20, 30)
    return f
