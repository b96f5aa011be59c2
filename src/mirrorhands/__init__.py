from .detector import HandLandmarkDetector
from .renderer import bridge_circle, draw_bridge_circle, render
from .results import LatestResult
from .surface import CanvasSurface
from .types import DetectionResult, DetectorOptions, Landmark

__all__ = [
    "CanvasSurface",
    "DetectionResult",
    "DetectorOptions",
    "HandLandmarkDetector",
    "Landmark",
    "LatestResult",
    "bridge_circle",
    "draw_bridge_circle",
    "render",
]
