from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional, Tuple


Point2 = Tuple[float, float]
ColorBGR = Tuple[int, int, int]


@dataclass(frozen=True)
class Landmark:
    """A normalized hand landmark. `x`/`y` are fractions of frame width/height."""

    x: float
    y: float
    z: float = 0.0


# Ordered landmarks of one hand; the position in the tuple is the joint index.
LandmarkSet = Tuple[Landmark, ...]


@dataclass(frozen=True)
class DetectionResult:
    """One frame's output from the hand detector."""

    image: Any  # BGR frame (numpy array), None when the frame is missing
    hand_landmarks: Optional[Tuple[LandmarkSet, ...]] = None
    handedness: Tuple[Optional[str], ...] = ()  # "Left" / "Right" per hand


@dataclass(frozen=True)
class Circle:
    center: Point2
    radius: float


@dataclass(frozen=True)
class DetectorOptions:
    max_num_hands: int = 2
    model_complexity: int = 1  # 0 fast, 1 accurate
    min_detection_confidence: float = 0.5
    min_tracking_confidence: float = 0.5
    static_image_mode: bool = False

    def __post_init__(self) -> None:
        if isinstance(self.max_num_hands, bool) or not isinstance(self.max_num_hands, int) or self.max_num_hands <= 0:
            raise ValueError(f"max_num_hands must be a positive integer, got {self.max_num_hands!r}")
        if self.model_complexity not in (0, 1):
            raise ValueError(f"model_complexity must be 0 or 1, got {self.model_complexity!r}")
        for name in ("min_detection_confidence", "min_tracking_confidence"):
            value = getattr(self, name)
            if not (0.0 <= value <= 1.0):
                raise ValueError(f"{name} must be within [0, 1], got {value!r}")
