from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Sequence, Tuple

import cv2

from .landmarks import HAND_CONNECTIONS
from .types import ColorBGR, LandmarkSet
from .utils import hex_to_bgr, to_pixel


@dataclass(frozen=True)
class DrawingSpec:
    color: ColorBGR
    thickness: float = 1
    circle_radius: float = 0


@dataclass(frozen=True)
class RenderStyle:
    connections: DrawingSpec = DrawingSpec(color=hex_to_bgr("#00FF00"), thickness=5)
    landmarks: DrawingSpec = DrawingSpec(color=hex_to_bgr("#FF0000"), thickness=1, circle_radius=5)
    bridge_circle: DrawingSpec = DrawingSpec(color=hex_to_bgr("#0082cf"), thickness=5)


DEFAULT_STYLE = RenderStyle()


def draw_connectors(
    surface,
    landmarks: LandmarkSet,
    spec: DrawingSpec,
    connections: Iterable[Tuple[int, int]] = HAND_CONNECTIONS,
) -> None:
    """Stroke one line per connection whose endpoints both exist in `landmarks`."""
    w, h = surface.width, surface.height
    n = len(landmarks)
    for a, b in connections:
        if a < n and b < n:
            surface.stroke_line(to_pixel(landmarks[a], w, h), to_pixel(landmarks[b], w, h), spec.color, spec.thickness)


def draw_landmarks(surface, landmarks: LandmarkSet, spec: DrawingSpec) -> None:
    """Filled dot per landmark, outlined with `spec.thickness` (0 skips the outline)."""
    w, h = surface.width, surface.height
    for lm in landmarks:
        center = to_pixel(lm, w, h)
        surface.fill_circle(center, spec.circle_radius, spec.color)
        if spec.thickness > 0:
            surface.stroke_circle(center, spec.circle_radius, spec.color, spec.thickness)


def draw_text(frame, text: str, org: Tuple[int, int], color=(255, 255, 255), scale=0.6, thickness=2):
    """Outlined HUD text, drawn straight onto a BGR frame."""
    cv2.putText(frame, text, org, cv2.FONT_HERSHEY_SIMPLEX, scale, (0, 0, 0), thickness + 2, cv2.LINE_AA)
    cv2.putText(frame, text, org, cv2.FONT_HERSHEY_SIMPLEX, scale, color, thickness, cv2.LINE_AA)
    return frame


def draw_text_lines(frame, lines: Sequence[str], origin: Tuple[int, int] = (12, 28), line_height: int = 24):
    x, y = origin
    for i, line in enumerate(lines):
        draw_text(frame, line, (x, y + i * line_height))
    return frame
