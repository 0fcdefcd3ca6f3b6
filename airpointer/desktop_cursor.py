"""Drive the operating-system pointer from published gesture states."""

import logging

import pyautogui

from .hand_gestures.coordinates import Viewport
from .hand_gestures.emitter import GestureState
from .hand_gestures.math_utils import clamp

logger = logging.getLogger(__name__)

pyautogui.FAILSAFE = False
pyautogui.PAUSE = 0


class DesktopCursor:
    """
    Engine consumer that moves the desktop pointer.

    Pinch holds the left button (drag), releasing the pinch lets go. A fist
    or losing the hand also releases a held button and freezes the pointer.
    """

    def __init__(self, viewport: Viewport):
        self.viewport = viewport
        self.screen_width, self.screen_height = pyautogui.size()
        self.button_down = False

    def _to_screen(self, state: GestureState) -> tuple[int, int]:
        rx = state.cursor_x / self.viewport.width if self.viewport.width > 0 else 0.0
        ry = state.cursor_y / self.viewport.height if self.viewport.height > 0 else 0.0
        x = int(clamp(rx, 0.0, 1.0) * (self.screen_width - 1))
        y = int(clamp(ry, 0.0, 1.0) * (self.screen_height - 1))
        return x, y

    def _release(self) -> None:
        if self.button_down:
            pyautogui.mouseUp(_pause=False)
            self.button_down = False
            logger.debug("Desktop button released")

    def __call__(self, state: GestureState) -> None:
        if not state.hand_detected or state.is_fist:
            self._release()
            return

        x, y = self._to_screen(state)
        pyautogui.moveTo(x, y, _pause=False)

        if state.is_pinching and not self.button_down:
            pyautogui.mouseDown(x, y, _pause=False)
            self.button_down = True
            logger.debug("Desktop button pressed at (%d, %d)", x, y)
        elif not state.is_pinching:
            self._release()

    def close(self) -> None:
        self._release()
