"""
Backend Service for GestureState-to-UDP Translation.

Tracks transitions between published states and sends the matching
gesture commands to a remote controller via UDP.
"""

import logging
from dataclasses import dataclass

from .controller.udp import UDPGestureController
from .hand_gestures.coordinates import Viewport
from .hand_gestures.emitter import GestureState
from .hand_gestures.math_utils import clamp

logger = logging.getLogger(__name__)


@dataclass
class BackendState:
    """Tracks previous published state for detecting transitions."""
    prev_pinch: bool = False
    prev_hand: bool = False
    last_pos: tuple[float, float] = (0.5, 0.5)


class GestureBackendService:
    """
    Engine consumer that translates published states to UDP commands.

    Handles:
    - A full "state" message for every publication
    - Pinch start/end as mouse down/up at normalized coordinates
    - A single "none" message when the hand is lost
    """

    def __init__(
        self,
        viewport: Viewport,
        gesture_port: int = UDPGestureController.GESTURE_PORT,
        target_ip: str = "127.0.0.1",
        broadcast: bool = False,
        enabled: bool = True,
    ):
        self.enabled = enabled
        self.viewport = viewport
        self._controller: UDPGestureController | None = None
        self._state = BackendState()

        if enabled:
            self._controller = UDPGestureController(
                gesture_port=gesture_port,
                target_ip=target_ip,
                broadcast=broadcast,
            )
            logger.info("UDP backend sending to %s:%d", self._controller.target_ip, gesture_port)

    def _normalize(self, state: GestureState) -> tuple[float, float]:
        """Viewport pixels to [0, 1] ratios."""
        w, h = self.viewport.width, self.viewport.height
        x = clamp(state.cursor_x / w, 0.0, 1.0) if w > 0 else 0.0
        y = clamp(state.cursor_y / h, 0.0, 1.0) if h > 0 else 0.0
        return x, y

    def __call__(self, state: GestureState) -> None:
        self.process_state(state)

    def process_state(self, state: GestureState) -> None:
        """Send the UDP commands implied by one published state."""
        if not self.enabled or not self._controller:
            return

        self._controller.state(state.to_dict(), self.viewport.width, self.viewport.height)

        if not state.hand_detected:
            self._handle_hand_lost()
            return

        pos_x, pos_y = self._normalize(state)
        self._state.last_pos = (pos_x, pos_y)

        if state.is_pinching and not self._state.prev_pinch:
            self._controller.pinch(pos_x, pos_y, active=True)
        elif not state.is_pinching and self._state.prev_pinch:
            self._controller.pinch(pos_x, pos_y, active=False)
        elif not state.is_pinching and not state.is_fist:
            self._controller.pointer(pos_x, pos_y)

        self._state.prev_pinch = state.is_pinching
        self._state.prev_hand = True

    def _handle_hand_lost(self) -> None:
        """Release any held pinch at the last known position, then signal 'none' once."""
        if self._state.prev_pinch:
            pos_x, pos_y = self._state.last_pos
            self._controller.pinch(pos_x, pos_y, active=False)
            self._state.prev_pinch = False

        if self._state.prev_hand:
            self._controller.no_gesture()
            self._state.prev_hand = False

    def close(self) -> None:
        """Close the UDP controller."""
        if self._controller:
            self._controller.close()
            self._controller = None

    def __enter__(self):
        return self

    def __exit__(self, *args):
        self.close()
