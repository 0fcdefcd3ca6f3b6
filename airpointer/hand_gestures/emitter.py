"""Published gesture state and its rate-limited emitter."""

import math
import time
from dataclasses import dataclass
from typing import Callable

from .config import PUBLISH_INTERVAL_S, PUBLISH_MIN_MOVE_PX


@dataclass(frozen=True)
class GestureState:
    """Externally observable engine output for one frame."""
    cursor_x: float
    cursor_y: float
    is_pinching: bool = False
    is_fist: bool = False
    hand_detected: bool = False

    @classmethod
    def hand_lost(cls, cursor_x: float, cursor_y: float) -> "GestureState":
        """No hand: gestures cleared, cursor held in place."""
        return cls(cursor_x, cursor_y, False, False, False)

    @property
    def cursor(self) -> tuple[float, float]:
        return self.cursor_x, self.cursor_y

    def flags(self) -> tuple[bool, bool, bool]:
        return self.is_pinching, self.is_fist, self.hand_detected

    def to_dict(self) -> dict:
        return {
            "cursorX": self.cursor_x,
            "cursorY": self.cursor_y,
            "isPinching": self.is_pinching,
            "isFist": self.is_fist,
            "handDetected": self.hand_detected,
        }


class StateEmitter:
    """
    Decides which candidate states reach downstream consumers.

    Flag changes publish immediately. Pure cursor motion publishes only
    when it exceeds min_move_px and min_interval_s has passed since the
    previous publication.
    """

    def __init__(
        self,
        clock: Callable[[], float] = time.monotonic,
        min_move_px: float = PUBLISH_MIN_MOVE_PX,
        min_interval_s: float = PUBLISH_INTERVAL_S,
    ):
        self._clock = clock
        self.min_move_px = min_move_px
        self.min_interval_s = min_interval_s
        self.last_state: GestureState | None = None
        self.last_emit_at: float | None = None

    def reset(self) -> None:
        self.last_state = None
        self.last_emit_at = None

    def should_publish(self, candidate: GestureState, now: float) -> bool:
        last = self.last_state
        if last is None or self.last_emit_at is None:
            return True
        if candidate.flags() != last.flags():
            return True

        moved = math.hypot(candidate.cursor_x - last.cursor_x, candidate.cursor_y - last.cursor_y)
        elapsed = now - self.last_emit_at
        return moved > self.min_move_px and elapsed >= self.min_interval_s

    def offer(self, candidate: GestureState) -> bool:
        """Record and report whether `candidate` should be published."""
        now = self._clock()
        if not self.should_publish(candidate, now):
            return False
        self.last_state = candidate
        self.last_emit_at = now
        return True
