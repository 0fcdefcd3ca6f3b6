"""Hand feature extraction from MediaPipe landmarks."""

from collections.abc import Sequence

from .config import NUM_LANDMARKS
from .math_utils import Point3, dist2


# MediaPipe landmark indices
class LM:
    WRIST = 0
    THUMB_MCP, THUMB_IP, THUMB_TIP = 2, 3, 4
    INDEX_MCP, INDEX_PIP, INDEX_DIP, INDEX_TIP = 5, 6, 7, 8
    MIDDLE_MCP, MIDDLE_PIP, MIDDLE_DIP, MIDDLE_TIP = 9, 10, 11, 12
    RING_MCP, RING_PIP, RING_DIP, RING_TIP = 13, 14, 15, 16
    PINKY_MCP, PINKY_PIP, PINKY_DIP, PINKY_TIP = 17, 18, 19, 20


# (tip, base) for the four non-thumb fingers
FINGER_TIP_BASE_PAIRS = (
    (LM.INDEX_TIP, LM.INDEX_MCP),
    (LM.MIDDLE_TIP, LM.MIDDLE_MCP),
    (LM.RING_TIP, LM.RING_MCP),
    (LM.PINKY_TIP, LM.PINKY_MCP),
)


def is_full_hand(landmarks: Sequence[Point3] | None) -> bool:
    """True if landmarks hold a complete hand skeleton."""
    return landmarks is not None and len(landmarks) >= NUM_LANDMARKS


def get_hand_scale(landmarks: Sequence[Point3] | None) -> float:
    """
    Apparent hand size in normalized units.

    The larger of palm width (index base to pinky base) and palm length
    (wrist to middle base). Returns 0.0 when the skeleton is incomplete,
    which callers treat as "scale unavailable".
    """
    if not is_full_hand(landmarks):
        return 0.0

    palm_width = dist2(landmarks[LM.INDEX_MCP], landmarks[LM.PINKY_MCP])
    palm_length = dist2(landmarks[LM.WRIST], landmarks[LM.MIDDLE_MCP])
    return max(palm_width, palm_length)
