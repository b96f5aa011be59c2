"""
Per-frame render pipeline.

`render()` turns one `DetectionResult` into pixels: the frame mirrored
left-right (selfie view), a skeleton per detected hand, and a circle bridging
both index fingertips when exactly two hands are visible. Nothing is kept
between calls; the surface is the only thing that changes.
"""

from __future__ import annotations

from typing import Optional, Sequence

from .drawing import DEFAULT_STYLE, DrawingSpec, RenderStyle, draw_connectors, draw_landmarks
from .errors import MissingFrameError
from .landmarks import HandJoint
from .types import Circle, DetectionResult, LandmarkSet
from .utils import distance, midpoint, to_pixel


def bridge_circle(hand_sets: Optional[Sequence[LandmarkSet]], width: int, height: int) -> Optional[Circle]:
    """
    Circle whose diameter spans the index fingertips of two hands, in pixels.

    Returns None unless there are exactly two hands that both reach the
    index fingertip landmark. Extra hands are not bridged.
    """
    if not hand_sets or len(hand_sets) != 2:
        return None
    tip = HandJoint.INDEX_FINGER_TIP
    first, second = hand_sets
    if len(first) <= tip or len(second) <= tip:
        return None

    p1 = to_pixel(first[tip], width, height)
    p2 = to_pixel(second[tip], width, height)
    return Circle(center=midpoint(p1, p2), radius=distance(p1, p2) / 2)


def draw_bridge_circle(surface, hand_sets: Optional[Sequence[LandmarkSet]], spec: DrawingSpec = DEFAULT_STYLE.bridge_circle) -> None:
    circle = bridge_circle(hand_sets, surface.width, surface.height)
    if circle is None:
        return
    surface.stroke_circle(circle.center, circle.radius, spec.color, spec.thickness)


def render(surface, result: DetectionResult, style: RenderStyle = DEFAULT_STYLE) -> None:
    """
    Draw one detection result onto `surface`.

    Raises MissingFrameError when the result has no image. The surface is
    cleared first and its transform is always restored on the way out.
    """
    width, height = surface.width, surface.height

    surface.clear_rect(0, 0, width, height)
    surface.save()
    try:
        # Mirror horizontally.
        surface.scale(-1, 1)
        surface.translate(-width, 0)

        if result.image is None:
            raise MissingFrameError("Detection result has no frame image")
        surface.draw_image(result.image, 0, 0, width, height)

        hands = result.hand_landmarks
        if hands:
            for landmarks in hands:
                draw_connectors(surface, landmarks, style.connections)
                draw_landmarks(surface, landmarks, style.landmarks)
            draw_bridge_circle(surface, hands, style.bridge_circle)
    finally:
        surface.restore()
