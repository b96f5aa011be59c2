"""
Raster drawing surface backed by an OpenCV/numpy BGR buffer.

The surface follows the 2D canvas model: drawing calls take coordinates in
user space, which the current affine transform maps to pixel space.
`save()` / `restore()` push and pop that transform.
"""

from __future__ import annotations

import math
from typing import List, Optional

import cv2
import numpy as np

from .errors import SurfaceUnavailableError
from .types import ColorBGR, Point2
from .utils import round_point


def _translation(tx: float, ty: float) -> np.ndarray:
    m = np.eye(3)
    m[0, 2] = tx
    m[1, 2] = ty
    return m


class CanvasSurface:
    def __init__(self, width: int, height: int, background: ColorBGR = (255, 255, 255)) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"Surface size must be positive, got {width}x{height}")
        self._width = int(width)
        self._height = int(height)
        self._background = tuple(int(c) for c in background)
        self._buffer: Optional[np.ndarray] = np.empty((self._height, self._width, 3), dtype=np.uint8)
        self._buffer[:] = self._background
        self._matrix = np.eye(3)
        self._saved: List[np.ndarray] = []

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def pixels(self) -> np.ndarray:
        """The BGR pixel buffer, shape (height, width, 3)."""
        return self._require_buffer()

    @property
    def matrix(self) -> np.ndarray:
        return self._matrix.copy()

    @property
    def released(self) -> bool:
        return self._buffer is None

    def is_identity(self) -> bool:
        return bool(np.array_equal(self._matrix, np.eye(3)))

    def release(self) -> None:
        self._buffer = None
        self._saved.clear()

    def _require_buffer(self) -> np.ndarray:
        if self._buffer is None:
            raise SurfaceUnavailableError("Drawing surface has been released")
        return self._buffer

    # Transform stack

    def save(self) -> None:
        self._require_buffer()
        self._saved.append(self._matrix.copy())

    def restore(self) -> None:
        # Unbalanced restore is ignored, like a canvas context.
        if self._saved:
            self._matrix = self._saved.pop()

    def scale(self, sx: float, sy: float) -> None:
        self._require_buffer()
        self._matrix = self._matrix @ np.diag([float(sx), float(sy), 1.0])

    def translate(self, tx: float, ty: float) -> None:
        self._require_buffer()
        self._matrix = self._matrix @ _translation(tx, ty)

    def transform_point(self, x: float, y: float) -> Point2:
        m = self._matrix
        return (
            float(m[0, 0] * x + m[0, 1] * y + m[0, 2]),
            float(m[1, 0] * x + m[1, 1] * y + m[1, 2]),
        )

    def _length_scale(self) -> float:
        return math.sqrt(abs(float(np.linalg.det(self._matrix[:2, :2]))))

    # Drawing

    def clear_rect(self, x: float, y: float, w: float, h: float) -> None:
        buf = self._require_buffer()
        corners = [self.transform_point(cx, cy) for cx, cy in ((x, y), (x + w, y), (x, y + h), (x + w, y + h))]
        xs = [c[0] for c in corners]
        ys = [c[1] for c in corners]
        x0 = max(0, int(math.floor(min(xs))))
        y0 = max(0, int(math.floor(min(ys))))
        x1 = min(self._width, int(math.ceil(max(xs))))
        y1 = min(self._height, int(math.ceil(max(ys))))
        if x0 < x1 and y0 < y1:
            buf[y0:y1, x0:x1] = self._background

    def draw_image(self, image: np.ndarray, x: float, y: float, w: float, h: float) -> None:
        """Blit `image` into the rectangle (x, y, w, h), resizing it to fit."""
        buf = self._require_buffer()
        if image is None:
            raise ValueError("Cannot draw a missing image")
        src = np.asarray(image)
        if src.ndim == 2:
            src = cv2.cvtColor(src, cv2.COLOR_GRAY2BGR)
        elif src.shape[2] == 4:
            src = cv2.cvtColor(src, cv2.COLOR_BGRA2BGR)
        if src.dtype != np.uint8:
            src = np.clip(src, 0, 255).astype(np.uint8)
        # Only scale/translate exist, so the target is an axis-aligned rectangle,
        # flipped along each axis whose scale is negative.
        ax, ay = self.transform_point(x, y)
        bx, by = self.transform_point(x + w, y + h)
        dx0, dx1 = int(round(min(ax, bx))), int(round(max(ax, bx)))
        dy0, dy1 = int(round(min(ay, by))), int(round(max(ay, by)))
        if dx1 <= dx0 or dy1 <= dy0:
            return

        if src.shape[1] != dx1 - dx0 or src.shape[0] != dy1 - dy0:
            src = cv2.resize(src, (dx1 - dx0, dy1 - dy0), interpolation=cv2.INTER_LINEAR)
        if bx < ax:
            src = src[:, ::-1]
        if by < ay:
            src = src[::-1, :]

        cx0, cy0 = max(dx0, 0), max(dy0, 0)
        cx1, cy1 = min(dx1, self._width), min(dy1, self._height)
        if cx1 <= cx0 or cy1 <= cy0:
            return
        buf[cy0:cy1, cx0:cx1] = src[cy0 - dy0 : cy1 - dy0, cx0 - dx0 : cx1 - dx0]

    def stroke_line(self, p0: Point2, p1: Point2, color: ColorBGR, width: float) -> None:
        buf = self._require_buffer()
        a = round_point(self.transform_point(*p0))
        b = round_point(self.transform_point(*p1))
        thickness = max(1, int(round(width * self._length_scale())))
        cv2.line(buf, a, b, color, thickness, cv2.LINE_AA)

    def fill_circle(self, center: Point2, radius: float, color: ColorBGR) -> None:
        buf = self._require_buffer()
        c = round_point(self.transform_point(*center))
        r = int(round(radius * self._length_scale()))
        cv2.circle(buf, c, r, color, -1, cv2.LINE_AA)

    def stroke_circle(self, center: Point2, radius: float, color: ColorBGR, width: float) -> None:
        buf = self._require_buffer()
        c = round_point(self.transform_point(*center))
        r = int(round(radius * self._length_scale()))
        thickness = max(1, int(round(width * self._length_scale())))
        cv2.circle(buf, c, r, color, thickness, cv2.LINE_AA)
