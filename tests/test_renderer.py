from __future__ import annotations

import numpy as np
import pytest

from conftest import make_hand, make_hands
from mirrorhands.drawing import DEFAULT_STYLE, DrawingSpec, draw_landmarks
from mirrorhands.errors import MissingFrameError, SurfaceUnavailableError
from mirrorhands.landmarks import HAND_CONNECTIONS
from mirrorhands.renderer import bridge_circle, draw_bridge_circle, render
from mirrorhands.surface import CanvasSurface
from mirrorhands.types import DetectionResult, Landmark


def _bridge_strokes(surface):
    return [c for c in surface.of("stroke_circle") if c[3] == DEFAULT_STYLE.bridge_circle.color]


@pytest.mark.parametrize("hands", [None, ()])
def test_without_hands_only_mirrored_frame_is_drawn(recording_surface, frame, hands):
    render(recording_surface, DetectionResult(image=frame, hand_landmarks=hands))

    assert recording_surface.names() == ["clear_rect", "save", "scale", "translate", "draw_image", "restore"]
    assert recording_surface.calls[0] == ("clear_rect", 0, 0, 1280, 720)
    assert recording_surface.calls[2] == ("scale", -1, 1)
    assert recording_surface.calls[3] == ("translate", -1280, 0)
    _, image, x, y, w, h = recording_surface.calls[4]
    assert image is frame
    assert (x, y, w, h) == (0, 0, 1280, 720)


def test_each_hand_gets_skeleton_then_markers(recording_surface, frame):
    hands = make_hands([(0.3, 0.5), (0.7, 0.5)])
    render(recording_surface, DetectionResult(image=frame, hand_landmarks=hands))

    names = recording_surface.names()
    per_hand = ["stroke_line"] * len(HAND_CONNECTIONS) + ["fill_circle", "stroke_circle"] * 21
    assert names == ["clear_rect", "save", "scale", "translate", "draw_image"] + per_hand * 2 + [
        "stroke_circle",
        "restore",
    ]
    line = recording_surface.of("stroke_line")[0]
    assert line[3:] == (DEFAULT_STYLE.connections.color, 5)
    marker = recording_surface.of("fill_circle")[0]
    assert marker[2:] == (5, DEFAULT_STYLE.landmarks.color)
    outline = recording_surface.of("stroke_circle")[0]
    assert outline[2:] == (5, DEFAULT_STYLE.landmarks.color, 1)
    assert DEFAULT_STYLE.connections.color != DEFAULT_STYLE.landmarks.color


def test_skeleton_skips_connections_to_missing_landmarks(recording_surface, frame):
    hand = make_hand(n=5)  # wrist + thumb only
    render(recording_surface, DetectionResult(image=frame, hand_landmarks=(hand,)))
    assert len(recording_surface.of("stroke_line")) == 4
    assert len(recording_surface.of("fill_circle")) == 5
    assert _bridge_strokes(recording_surface) == []


def test_bridge_circle_from_index_fingertips():
    hands = make_hands([(0.3, 0.5), (0.7, 0.5)])
    circle = bridge_circle(hands, 1280, 720)
    assert circle is not None
    assert circle.center == pytest.approx((640, 360))
    assert circle.radius == pytest.approx(256)


def test_bridge_circle_diagonal():
    hands = make_hands([(0.0, 0.0), (0.5, 1.0)])
    circle = bridge_circle(hands, 200, 100)
    assert circle.center == pytest.approx((50, 50))
    assert circle.radius == pytest.approx((100 ** 2 + 100 ** 2) ** 0.5 / 2)


def test_draw_bridge_circle_strokes_once(recording_surface):
    draw_bridge_circle(recording_surface, make_hands([(0.3, 0.5), (0.7, 0.5)]))
    (call,) = recording_surface.calls
    name, center, radius, color, width = call
    assert name == "stroke_circle"
    assert center == pytest.approx((640, 360))
    assert radius == pytest.approx(256)
    assert color == (207, 130, 0)
    assert width == 5


@pytest.mark.parametrize("count", [0, 1, 3])
def test_no_bridge_circle_unless_exactly_two_hands(recording_surface, frame, count):
    hands = make_hands([(0.1 * (i + 1), 0.5) for i in range(count)])
    assert bridge_circle(hands, 1280, 720) is None
    render(recording_surface, DetectionResult(image=frame, hand_landmarks=hands))
    assert _bridge_strokes(recording_surface) == []


def test_no_bridge_circle_when_a_hand_lacks_index_tip(recording_surface):
    hands = (make_hand((0.3, 0.5)), make_hand(n=8))
    assert bridge_circle(hands, 1280, 720) is None
    draw_bridge_circle(recording_surface, hands)
    assert recording_surface.calls == []


def test_nine_landmarks_are_enough_for_bridge_circle():
    hands = make_hands([(0.3, 0.5), (0.7, 0.5)], n=9)
    assert bridge_circle(hands, 1280, 720) is not None


def test_missing_image_fails_after_clear_and_restores(recording_surface):
    with pytest.raises(MissingFrameError):
        render(recording_surface, DetectionResult(image=None, hand_landmarks=make_hands([(0.3, 0.5), (0.7, 0.5)])))
    names = recording_surface.names()
    assert names[0] == "clear_rect"
    assert names[-1] == "restore"
    assert "draw_image" not in names
    assert "stroke_line" not in names
    assert recording_surface.depth == 0


def test_render_does_not_touch_result(frame):
    hands = make_hands([(0.3, 0.5), (0.7, 0.5)])
    original = frame.copy()
    result = DetectionResult(image=frame, hand_landmarks=hands)
    render(CanvasSurface(1280, 720), result)
    assert np.array_equal(frame, original)
    assert result.hand_landmarks == hands


def test_rendered_landmark_appears_mirrored():
    surface = CanvasSurface(200, 100)
    image = np.full((100, 200, 3), 255, dtype=np.uint8)
    hand = tuple(Landmark(0.25, 0.5) for _ in range(21))
    render(surface, DetectionResult(image=image, hand_landmarks=(hand,)))

    assert tuple(surface.pixels[50, 150]) == DEFAULT_STYLE.landmarks.color
    assert tuple(surface.pixels[50, 50]) == (255, 255, 255)


def test_rendered_frame_is_mirrored(frame):
    surface = CanvasSurface(1280, 720)
    render(surface, DetectionResult(image=frame))
    # left half of the frame is dark, so the right half of the output is.
    assert (surface.pixels[:, 640:] == (10, 20, 30)).all()
    assert (surface.pixels[:, :640] == 0).all()


def test_frame_is_stretched_to_surface():
    surface = CanvasSurface(64, 36)
    image = np.full((720, 1280, 3), (1, 2, 3), dtype=np.uint8)
    render(surface, DetectionResult(image=image))
    assert (surface.pixels == (1, 2, 3)).all()


def test_render_is_idempotent(frame):
    result = DetectionResult(image=frame, hand_landmarks=make_hands([(0.3, 0.5), (0.7, 0.4)]))
    surface = CanvasSurface(1280, 720)
    render(surface, result)
    first = surface.pixels.copy()
    render(surface, result)
    assert np.array_equal(surface.pixels, first)


def test_transform_does_not_leak_between_calls(frame):
    surface = CanvasSurface(1280, 720)
    render(surface, DetectionResult(image=frame, hand_landmarks=make_hands([(0.3, 0.5), (0.7, 0.5)])))
    assert surface.is_identity()

    with pytest.raises(MissingFrameError):
        render(surface, DetectionResult(image=None))
    assert surface.is_identity()
    # cleared before failing
    assert (surface.pixels == 255).all()


def test_released_surface_propagates(frame):
    surface = CanvasSurface(32, 18)
    surface.release()
    with pytest.raises(SurfaceUnavailableError):
        render(surface, DetectionResult(image=frame))


def test_landmark_outline_can_be_disabled(recording_surface):
    spec = DrawingSpec(color=(0, 0, 255), thickness=0, circle_radius=3)
    draw_landmarks(recording_surface, make_hand(n=3), spec)
    assert recording_surface.names() == ["fill_circle"] * 3
