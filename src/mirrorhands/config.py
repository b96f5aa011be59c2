"""
Defaults and command-line options shared by the demo scripts.

Capture size doubles as the drawing surface size; the detector options map
one-to-one onto `DetectorOptions`.
"""

from __future__ import annotations

import argparse
from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

from .types import DetectorOptions


@dataclass
class Defaults:
    # Camera / surface
    camera_index: int = 0
    width: int = 1280
    height: int = 720

    # Detector
    max_num_hands: int = 2
    model_complexity: int = 1  # 0 fast, 1 accurate
    min_detection_confidence: float = 0.5
    min_tracking_confidence: float = 0.5
    tasks_model_path: str = "models/hand_landmarker.task"


def add_args(parser: argparse.ArgumentParser, d: Defaults) -> None:
    parser.add_argument("--camera", type=int, default=d.camera_index, help="Camera index (default: 0)")
    parser.add_argument("--width", type=int, default=d.width, help="Capture and canvas width")
    parser.add_argument("--height", type=int, default=d.height, help="Capture and canvas height")
    parser.add_argument("--max-hands", type=int, default=d.max_num_hands, help="Maximum number of hands to track")
    parser.add_argument(
        "--model-complexity",
        type=int,
        choices=[0, 1],
        default=d.model_complexity,
        help="MediaPipe model complexity: 0 fast, 1 accurate",
    )
    parser.add_argument(
        "--min-detection-confidence",
        type=float,
        default=d.min_detection_confidence,
        help="Minimum confidence to accept a detected hand (0.0-1.0)",
    )
    parser.add_argument(
        "--min-tracking-confidence",
        type=float,
        default=d.min_tracking_confidence,
        help="Minimum confidence to keep tracking a hand (0.0-1.0)",
    )
    parser.add_argument(
        "--tasks-model",
        default=d.tasks_model_path,
        help="HandLandmarker .task path, used when mediapipe lacks mp.solutions",
    )


def parse_args(argv: Optional[Sequence[str]] = None, description: str = "Mirrored hand landmark demo") -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=description)
    add_args(parser, Defaults())
    return parser.parse_args(argv)


def detector_options_from_args(args: argparse.Namespace, static_image_mode: bool = False) -> DetectorOptions:
    return DetectorOptions(
        max_num_hands=args.max_hands,
        model_complexity=args.model_complexity,
        min_detection_confidence=args.min_detection_confidence,
        min_tracking_confidence=args.min_tracking_confidence,
        static_image_mode=static_image_mode,
    )


def surface_size(args: argparse.Namespace, frame_shape: Sequence[int]) -> Tuple[int, int]:
    """Surface (width, height): explicit --width/--height, else the frame's own size."""
    h, w = frame_shape[:2]
    return (args.width or w, args.height or h)
