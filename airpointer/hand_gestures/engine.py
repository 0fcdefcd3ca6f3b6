"""Per-frame gesture recognition engine."""

import logging
import time
from collections.abc import Sequence
from typing import Callable

from .config import EngineConfig
from .coordinates import Viewport, landmark_to_screen
from .emitter import GestureState, StateEmitter
from .features import LM, get_hand_scale, is_full_hand
from .gestures import PinchDetector, detect_fist
from .math_utils import Point3
from .smoothing import AdaptiveSmoother

logger = logging.getLogger(__name__)


class GestureEngine:
    """
    Turns one hand's landmarks per frame into a published GestureState.

    All smoothing, hysteresis and publication memory belongs to this
    instance. Use one engine per tracked hand.
    """

    def __init__(
        self,
        consumer: Callable[[GestureState], None] | None = None,
        config: EngineConfig | None = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.consumer = consumer
        self.config = config or EngineConfig()
        self.smoother = AdaptiveSmoother()
        self.pinch = PinchDetector()
        self.emitter = StateEmitter(clock=clock)
        self._viewport: Viewport | None = None
        self._last_frame_time: float | None = None
        self._state: GestureState | None = None

    @property
    def state(self) -> GestureState | None:
        """Last published state."""
        return self._state

    def update_config(self, config: EngineConfig) -> None:
        """Replace settings; takes effect from the next processed frame."""
        self.config = config

    def reset(self) -> None:
        self.smoother.reset()
        self.pinch.reset()
        self.emitter.reset()
        self._viewport = None
        self._last_frame_time = None
        self._state = None

    def _sync_viewport(self, viewport: Viewport) -> None:
        if viewport != self._viewport:
            if self._viewport is not None:
                logger.debug("Viewport resized %s -> %s", self._viewport, viewport)
            self.smoother.fit_to_viewport(viewport)
            self._viewport = viewport

    def _classify(self, landmarks: Sequence[Point3], viewport: Viewport, config: EngineConfig) -> GestureState:
        raw = landmark_to_screen(landmarks[LM.INDEX_TIP], viewport.width, viewport.height)
        x, y = self.smoother.update(raw, config.cursor_responsiveness, viewport)

        hand_scale = get_hand_scale(landmarks)
        pinching = self.pinch.update(landmarks, hand_scale, config.pinch_sensitivity)
        fist = detect_fist(landmarks)
        return GestureState(x, y, is_pinching=pinching, is_fist=fist, hand_detected=True)

    def process_frame(
        self,
        landmarks: Sequence[Point3] | None,
        viewport: Viewport,
        config: EngineConfig | None = None,
        frame_time: float | None = None,
    ) -> GestureState:
        """
        Process one video frame.

        Args:
            landmarks: 21 normalized landmarks, or None when no hand is visible
            viewport: Current rendering surface size
            config: Settings for this frame (defaults to self.config)
            frame_time: Presentation time of the source frame; a repeated
                value means the frame did not advance and is skipped

        Returns:
            The most recently published state
        """
        if (frame_time is not None and frame_time == self._last_frame_time
                and self._state is not None):
            return self._state
        self._last_frame_time = frame_time

        cfg = config or self.config
        self._sync_viewport(viewport)

        if is_full_hand(landmarks):
            candidate = self._classify(landmarks, viewport, cfg)
        else:
            candidate = GestureState.hand_lost(*self.smoother.position(viewport))

        if self.emitter.offer(candidate):
            prev = self._state
            if prev is not None and prev.hand_detected != candidate.hand_detected:
                logger.info("Hand %s", "FOUND" if candidate.hand_detected else "LOST")
            self._state = candidate
            if self.consumer is not None:
                self.consumer(candidate)

        return self._state
