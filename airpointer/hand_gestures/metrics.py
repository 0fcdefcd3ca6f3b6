"""Session-level interaction statistics."""

import time
from dataclasses import dataclass
from typing import Callable, Literal

from .emitter import GestureState

TrackingStatus = Literal["off", "paused", "active"]


def tracking_status(state: GestureState | None, tracking_enabled: bool = True) -> TrackingStatus:
    """A fist pauses interaction while tracking stays on."""
    if not tracking_enabled:
        return "off"
    if state is not None and state.is_fist:
        return "paused"
    return "active"


@dataclass
class MetricsSnapshot:
    elapsed_seconds: float
    pinch_count: int
    fist_count: int
    hand_presence: float  # percent of observed frames with a hand
    interaction_rate: float  # pinches + fists per second


class SessionMetrics:
    """Counts gesture onsets and hand presence across observed frames."""

    def __init__(self, clock: Callable[[], float] = time.monotonic):
        self._clock = clock
        self.started_at = clock()
        self.pinch_count = 0
        self.fist_count = 0
        self.hand_frames = 0
        self.total_frames = 0
        self._prev_pinch = False
        self._prev_fist = False

    def observe(self, state: GestureState) -> None:
        """Record one frame's state (call once per processed frame)."""
        self.total_frames += 1
        if state.hand_detected:
            self.hand_frames += 1

        if state.is_pinching and not self._prev_pinch:
            self.pinch_count += 1
        if state.is_fist and not self._prev_fist:
            self.fist_count += 1

        self._prev_pinch = state.is_pinching
        self._prev_fist = state.is_fist

    def snapshot(self) -> MetricsSnapshot:
        elapsed = max(self._clock() - self.started_at, 0.0)
        presence = (self.hand_frames / self.total_frames) * 100 if self.total_frames else 0.0
        interactions = self.pinch_count + self.fist_count
        rate = interactions / elapsed if elapsed > 0 else 0.0
        return MetricsSnapshot(
            elapsed_seconds=elapsed,
            pinch_count=self.pinch_count,
            fist_count=self.fist_count,
            hand_presence=presence,
            interaction_rate=rate,
        )
