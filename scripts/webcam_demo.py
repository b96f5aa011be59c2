from __future__ import annotations

import os
import sys

import cv2

# Allow running without installing the package (repo-local usage).
REPO_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
SRC_ROOT = os.path.join(REPO_ROOT, "src")
if SRC_ROOT not in sys.path:
    sys.path.insert(0, SRC_ROOT)

from mirrorhands.app import MirrorHandsApp  # noqa: E402
from mirrorhands.camera import open_camera  # noqa: E402
from mirrorhands.config import detector_options_from_args, parse_args  # noqa: E402
from mirrorhands.detector import HandLandmarkDetector  # noqa: E402
from mirrorhands.drawing import draw_text_lines  # noqa: E402
from mirrorhands.errors import MissingFrameError  # noqa: E402
from mirrorhands.surface import CanvasSurface  # noqa: E402


def main() -> int:
    args = parse_args(description="Mirrored webcam hand landmarks with a fingertip bridge circle.")
    options = detector_options_from_args(args)

    cap = open_camera(args.camera, args.width, args.height)
    surface = CanvasSurface(args.width, args.height)

    try:
        with HandLandmarkDetector(options, tasks_model_path=args.tasks_model) as detector:
            app = MirrorHandsApp(detector, surface)
            while True:
                ok, frame = cap.read()
                if not ok:
                    break

                try:
                    result = app.process_frame(frame)
                except MissingFrameError as e:
                    print(f"skipped frame: {e}", file=sys.stderr)
                    continue

                hands = len(result.hand_landmarks or ())
                view = surface.pixels.copy()
                draw_text_lines(view, [f"hands: {hands} | o: output data | q: quit"])
                cv2.imshow("mirrorhands", view)

                key = cv2.waitKey(1) & 0xFF
                if key == ord("o"):
                    print(app.export_json(indent=2))
                elif key in (ord("q"), 27):
                    break
    finally:
        surface.release()
        cap.release()
        cv2.destroyAllWindows()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
