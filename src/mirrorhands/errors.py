from __future__ import annotations


class RenderError(RuntimeError):
    """Base class for failures of a single render call."""


class MissingFrameError(RenderError):
    """The detection result carries no video frame to draw."""


class SurfaceUnavailableError(RenderError):
    """The drawing surface was released or its buffer can no longer be used."""
