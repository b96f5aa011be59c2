from __future__ import annotations

from typing import Optional

from .renderer import render
from .results import LatestResult
from .surface import CanvasSurface
from .types import DetectionResult


class MirrorHandsApp:
    """
    Wires a detector to the renderer.

    Each frame passed to `process_frame()` goes to the detector; its result
    callback stores the result for export and renders it onto `surface`.
    """

    def __init__(self, detector, surface: CanvasSurface, latest: Optional[LatestResult] = None) -> None:
        self.detector = detector
        self.surface = surface
        self.latest = latest or LatestResult()
        detector.on_results(self._on_results)

    def _on_results(self, result: DetectionResult) -> None:
        self.latest.update(result)
        render(self.surface, result)

    def process_frame(self, frame_bgr) -> DetectionResult:
        return self.detector.send(frame_bgr)

    def export(self):
        return self.latest.export()

    def export_json(self, indent: Optional[int] = None) -> str:
        return self.latest.export_json(indent=indent)
