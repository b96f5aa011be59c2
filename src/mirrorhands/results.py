from __future__ import annotations

import json
from typing import Dict, List, Optional

from .types import DetectionResult


class LatestResult:
    """
    Holds the most recent detection result for the export action.

    Written by the detector callback, read by the export action. Both run on
    the UI thread, so no locking is done.
    """

    def __init__(self) -> None:
        self._result: Optional[DetectionResult] = None

    @property
    def current(self) -> Optional[DetectionResult]:
        return self._result

    def update(self, result: DetectionResult) -> None:
        self._result = result

    def clear(self) -> None:
        self._result = None

    def export(self) -> Optional[List[List[Dict[str, float]]]]:
        """Landmark sets of the latest result as plain data, or None when there are none."""
        if self._result is None or not self._result.hand_landmarks:
            return None
        return [
            [{"x": lm.x, "y": lm.y, "z": lm.z} for lm in landmarks]
            for landmarks in self._result.hand_landmarks
        ]

    def export_json(self, indent: Optional[int] = None) -> str:
        return json.dumps(self.export(), indent=indent)
