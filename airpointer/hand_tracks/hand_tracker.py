"""MediaPipe landmark source for the gesture engine."""

from dataclasses import dataclass

import cv2
import mediapipe as mp
import numpy as np
from numpy.typing import NDArray

from ..hand_gestures.math_utils import Point3


@dataclass(frozen=True)
class HandDetection:
    """One detected hand: normalized landmarks plus MediaPipe's classification."""
    landmarks: list[Point3]
    handedness: str
    score: float


class HandTracker:
    """
    Single-hand landmark detector.

    Feeds the engine one landmark list per frame, or None when no hand
    clears the confidence thresholds.
    """

    def __init__(
        self,
        min_detection_confidence: float = 0.7,
        min_tracking_confidence: float = 0.7,
        model_complexity: int = 1,
    ):
        self._mp_hands = mp.solutions.hands
        self._mp_draw = mp.solutions.drawing_utils
        self._hands = self._mp_hands.Hands(
            static_image_mode=False,
            max_num_hands=1,
            model_complexity=model_complexity,
            min_detection_confidence=min_detection_confidence,
            min_tracking_confidence=min_tracking_confidence,
        )
        self._results = None

    def detect(self, frame: NDArray[np.uint8]) -> HandDetection | None:
        """
        Run the model on a BGR frame.

        Returns:
            The detected hand, or None if no hand was found
        """
        rgb = cv2.cvtColor(frame, cv2.COLOR_BGR2RGB)
        rgb.flags.writeable = False
        self._results = self._hands.process(rgb)

        if not self._results or not self._results.multi_hand_landmarks:
            return None

        landmarks = [(lm.x, lm.y, lm.z) for lm in self._results.multi_hand_landmarks[0].landmark]

        handedness, score = "Unknown", 1.0
        if getattr(self._results, "multi_handedness", None):
            label = self._results.multi_handedness[0].classification[0]
            handedness, score = label.label, label.score

        return HandDetection(landmarks, handedness, score)

    def get_landmarks(self, frame: NDArray[np.uint8]) -> list[Point3] | None:
        detection = self.detect(frame)
        return detection.landmarks if detection else None

    def draw_landmarks(self, frame: NDArray[np.uint8]) -> None:
        """Draw the skeleton from the last detect() call."""
        if not self._results or not self._results.multi_hand_landmarks:
            return
        self._mp_draw.draw_landmarks(
            frame, self._results.multi_hand_landmarks[0], self._mp_hands.HAND_CONNECTIONS
        )

    def close(self) -> None:
        self._hands.close()

    def __enter__(self):
        return self

    def __exit__(self, *args):
        self.close()
