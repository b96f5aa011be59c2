from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, List, Optional, Tuple

import cv2

from .model_assets import ensure_hand_landmarker_task
from .types import DetectionResult, DetectorOptions, Landmark, LandmarkSet


ResultCallback = Callable[[DetectionResult], None]


@dataclass(frozen=True)
class _SolutionsBackend:
    mp: object
    hands: object


@dataclass(frozen=True)
class _TasksBackend:
    mp: object
    landmarker: object


def _try_create_solutions_backend(options: DetectorOptions) -> Optional[_SolutionsBackend]:
    import mediapipe as mp  # type: ignore

    if not hasattr(mp, "solutions"):
        return None
    hands = mp.solutions.hands.Hands(
        static_image_mode=options.static_image_mode,
        max_num_hands=options.max_num_hands,
        model_complexity=options.model_complexity,
        min_detection_confidence=options.min_detection_confidence,
        min_tracking_confidence=options.min_tracking_confidence,
    )
    return _SolutionsBackend(mp=mp, hands=hands)


def _try_create_tasks_backend(options: DetectorOptions, model_path: str) -> _TasksBackend:
    """
    Fallback for MediaPipe builds without `mp.solutions`.

    The Tasks HandLandmarker needs a `.task` model asset on disk; it has no
    model complexity setting.
    """

    import mediapipe as mp  # type: ignore

    # Import locations can differ slightly across builds.
    try:
        from mediapipe.tasks.python import BaseOptions  # type: ignore
        from mediapipe.tasks.python.vision import HandLandmarker, HandLandmarkerOptions, RunningMode  # type: ignore
    except ImportError:  # pragma: no cover
        from mediapipe.tasks import python as mp_python  # type: ignore

        BaseOptions = mp_python.BaseOptions
        HandLandmarker = mp_python.vision.HandLandmarker
        HandLandmarkerOptions = mp_python.vision.HandLandmarkerOptions
        RunningMode = mp_python.vision.RunningMode

    model_path = ensure_hand_landmarker_task(model_path)

    running_mode = RunningMode.IMAGE if options.static_image_mode else RunningMode.VIDEO
    landmarker = HandLandmarker.create_from_options(
        HandLandmarkerOptions(
            base_options=BaseOptions(model_asset_path=model_path),
            running_mode=running_mode,
            num_hands=options.max_num_hands,
            min_hand_detection_confidence=options.min_detection_confidence,
            min_tracking_confidence=options.min_tracking_confidence,
        )
    )
    return _TasksBackend(mp=mp, landmarker=landmarker)


def _to_landmark_set(points) -> LandmarkSet:
    return tuple(Landmark(x=float(p.x), y=float(p.y), z=float(getattr(p, "z", 0.0))) for p in points)


class HandLandmarkDetector:
    """
    MediaPipe Hands behind a results-callback interface.

    `send()` takes a **BGR** frame (OpenCV default), runs detection and hands
    a `DetectionResult` to every registered callback. The result's image is
    the frame as given.
    """

    def __init__(
        self,
        options: Optional[DetectorOptions] = None,
        tasks_model_path: str = "models/hand_landmarker.task",
    ) -> None:
        self.options = options or DetectorOptions()
        self._callbacks: List[ResultCallback] = []
        self._tasks: Optional[_TasksBackend] = None
        self._tasks_timestamp_ms = 0

        self._solutions = _try_create_solutions_backend(self.options)
        if self._solutions is None:
            try:
                self._tasks = _try_create_tasks_backend(self.options, tasks_model_path)
            except FileNotFoundError as e:
                raise RuntimeError(
                    "MediaPipe does not provide `mp.solutions` in your environment, so the Tasks\n"
                    "HandLandmarker is used instead, which needs a model file on disk:\n"
                    f"  {tasks_model_path}\n"
                ) from e
            except (AttributeError, ImportError) as e:  # pragma: no cover
                raise RuntimeError(
                    "Could not initialize MediaPipe Hands: the installed `mediapipe` package exposes\n"
                    "neither `mp.solutions` nor a usable Tasks API."
                ) from e

    def on_results(self, callback: ResultCallback) -> None:
        self._callbacks.append(callback)

    def close(self) -> None:
        if self._solutions is not None:
            self._solutions.hands.close()
            self._solutions = None
        if self._tasks is not None:
            self._tasks.landmarker.close()
            self._tasks = None

    def __enter__(self) -> "HandLandmarkDetector":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def send(self, frame_bgr) -> DetectionResult:
        if frame_bgr is None:
            result = DetectionResult(image=None)
        else:
            hands, handedness = self._detect(frame_bgr)
            result = DetectionResult(image=frame_bgr, hand_landmarks=hands, handedness=handedness)

        for callback in self._callbacks:
            callback(result)
        return result

    def _detect(self, frame_bgr) -> Tuple[Optional[Tuple[LandmarkSet, ...]], Tuple[Optional[str], ...]]:
        frame_rgb = cv2.cvtColor(frame_bgr, cv2.COLOR_BGR2RGB)

        if self._solutions is not None:
            results = self._solutions.hands.process(frame_rgb)
            if not results.multi_hand_landmarks:
                return None, ()

            handedness_list = results.multi_handedness or []
            hands: List[LandmarkSet] = []
            labels: List[Optional[str]] = []
            for i, hand_landmarks in enumerate(results.multi_hand_landmarks):
                label = None
                if i < len(handedness_list) and handedness_list[i].classification:
                    label = getattr(handedness_list[i].classification[0], "label", None)
                hands.append(_to_landmark_set(hand_landmarks.landmark))
                labels.append(label)
            return tuple(hands), tuple(labels)

        if self._tasks is None:
            raise RuntimeError("HandLandmarkDetector has been closed")

        mp = self._tasks.mp
        mp_image = mp.Image(image_format=mp.ImageFormat.SRGB, data=frame_rgb)
        if self.options.static_image_mode:
            result = self._tasks.landmarker.detect(mp_image)
        else:
            # VIDEO mode requires monotonically increasing timestamps.
            self._tasks_timestamp_ms += 33
            result = self._tasks.landmarker.detect_for_video(mp_image, self._tasks_timestamp_ms)

        hand_landmarks_list = getattr(result, "hand_landmarks", None) or []
        handedness_list = getattr(result, "handedness", None) or []
        if not hand_landmarks_list:
            return None, ()

        hands = []
        labels = []
        for i, landmarks in enumerate(hand_landmarks_list):
            label = None
            if i < len(handedness_list) and handedness_list[i]:
                cat0 = handedness_list[i][0]
                label = getattr(cat0, "category_name", None) or getattr(cat0, "display_name", None)
            hands.append(_to_landmark_set(landmarks))
            labels.append(label)
        return tuple(hands), tuple(labels)
