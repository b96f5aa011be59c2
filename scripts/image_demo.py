from __future__ import annotations

import argparse
import os
import sys

import cv2

# Allow running without installing the package (repo-local usage).
REPO_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
SRC_ROOT = os.path.join(REPO_ROOT, "src")
if SRC_ROOT not in sys.path:
    sys.path.insert(0, SRC_ROOT)

from mirrorhands.config import Defaults, add_args, detector_options_from_args, surface_size  # noqa: E402
from mirrorhands.detector import HandLandmarkDetector  # noqa: E402
from mirrorhands.renderer import bridge_circle, render  # noqa: E402
from mirrorhands.results import LatestResult  # noqa: E402
from mirrorhands.surface import CanvasSurface  # noqa: E402


def main() -> int:
    ap = argparse.ArgumentParser(description="Render the mirrored hand overlay for a single image.")
    ap.add_argument("--image", required=True, help="Path to input image")
    ap.add_argument("--out", required=True, help="Path to output image (annotated)")
    add_args(ap, Defaults())
    # Output keeps the input size unless --width/--height are given.
    ap.set_defaults(width=None, height=None)
    args = ap.parse_args()

    frame = cv2.imread(args.image)
    if frame is None:
        raise RuntimeError(f"Could not read image: {args.image}")

    options = detector_options_from_args(args, static_image_mode=True)
    latest = LatestResult()
    with HandLandmarkDetector(options, tasks_model_path=args.tasks_model) as detector:
        detector.on_results(latest.update)
        result = detector.send(frame)

    surface = CanvasSurface(*surface_size(args, frame.shape))
    render(surface, result)

    ok = cv2.imwrite(args.out, surface.pixels)
    if not ok:
        raise RuntimeError(f"Could not write output image: {args.out}")

    hands = result.hand_landmarks or ()
    print(f"hands: {len(hands)}")
    for i, label in enumerate(result.handedness):
        print(f"[{i}] {label}")
    circle = bridge_circle(hands, surface.width, surface.height)
    if circle is not None:
        print(f"bridge circle: center={circle.center} radius={circle.radius:.1f}")
    print(latest.export_json(indent=2))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
