"""OpenCV preview of the published gesture state."""

import cv2
import numpy as np
from numpy.typing import NDArray

from ..hand_gestures.coordinates import Viewport
from ..hand_gestures.emitter import GestureState

COLOR_GREEN = (0, 255, 0)
COLOR_RED = (0, 0, 255)
COLOR_YELLOW = (0, 255, 255)
COLOR_GRAY = (128, 128, 128)
COLOR_WHITE = (255, 255, 255)
FONT = cv2.FONT_HERSHEY_SIMPLEX


def _to_frame(state: GestureState, frame: NDArray[np.uint8], viewport: Viewport) -> tuple[int, int]:
    """Scale viewport pixels onto the preview frame."""
    h, w = frame.shape[:2]
    sx = w / viewport.width if viewport.width > 0 else 0.0
    sy = h / viewport.height if viewport.height > 0 else 0.0
    return int(state.cursor_x * sx), int(state.cursor_y * sy)


def draw_cursor(frame: NDArray[np.uint8], state: GestureState | None, viewport: Viewport) -> None:
    """Draw the smoothed cursor: filled yellow while pinching, red in a fist, gray without a hand."""
    if state is None:
        return

    pos = _to_frame(state, frame, viewport)
    if not state.hand_detected:
        cv2.circle(frame, pos, 12, COLOR_GRAY, 2)
        return

    if state.is_fist:
        color = COLOR_RED
    elif state.is_pinching:
        color = COLOR_YELLOW
    else:
        color = COLOR_GREEN
    thickness = -1 if state.is_pinching else 2
    cv2.circle(frame, pos, 12, color, thickness)
    cv2.circle(frame, pos, 14, (0, 0, 0), 2)


def draw_overlay(frame: NDArray[np.uint8], overlay: list[str]) -> None:
    """Draw text overlay on frame."""
    if not overlay:
        return
    x0, y0, line_h = 12, 22, 22
    max_chars = max(len(s) for s in overlay)
    box_w = min(16 + max_chars * 9, frame.shape[1] - 24)
    box_h = 12 + line_h * len(overlay)

    cv2.rectangle(frame, (8, 8), (8 + box_w, 8 + box_h), (0, 0, 0), -1)
    for i, s in enumerate(overlay):
        cv2.putText(frame, s, (x0, y0 + i * line_h), FONT, 0.6, COLOR_WHITE, 2, cv2.LINE_AA)


class TrackerDisplay:
    """Manages OpenCV window and visualization."""

    def __init__(self, window_name: str = "Air Pointer"):
        self.window_name = window_name
        cv2.namedWindow(window_name, cv2.WINDOW_NORMAL)

    def render(
        self,
        frame: NDArray[np.uint8],
        state: GestureState | None,
        viewport: Viewport,
        overlay: list[str],
    ) -> None:
        draw_cursor(frame, state, viewport)
        draw_overlay(frame, overlay)

    def show(self, frame: NDArray[np.uint8]) -> int:
        """Display frame and return key press."""
        cv2.imshow(self.window_name, frame)
        return self.poll_key()

    def poll_key(self) -> int:
        """Pump window events without drawing; returns the key press (255 = none)."""
        return cv2.waitKey(1) & 0xFF

    def close(self) -> None:
        """Close display window."""
        cv2.destroyWindow(self.window_name)

    def __enter__(self):
        return self

    def __exit__(self, *args):
        self.close()
