"""Pinch and fist classification from raw hand landmarks."""

import logging
from collections.abc import Sequence
from enum import Enum

from .config import (
    START_RATIO, STOP_RATIO, MIN_PINCH_ABS, MAX_PINCH_ABS,
    START_PINCH_ABS, STOP_PINCH_ABS,
)
from .features import LM, FINGER_TIP_BASE_PAIRS, is_full_hand
from .math_utils import Point3, clamp, dist2, update_hysteresis

logger = logging.getLogger(__name__)


class PinchPhase(Enum):
    IDLE = "idle"
    PINCHING = "pinching"


# =============================================================================
# PINCH DETECTION
# =============================================================================

def pinch_threshold(phase: PinchPhase, hand_scale: float, sensitivity: float = 1.0) -> float:
    """
    Thumb-index distance below which the hand counts as pinching.

    The threshold scales with the hand so it holds as the hand moves toward
    or away from the camera. While pinching the looser stop ratio applies.

    Args:
        phase: Pinch phase of the previous classified frame
        hand_scale: Output of get_hand_scale (0.0 = unavailable)
        sensitivity: Pinch sensitivity setting; higher triggers more easily

    Returns:
        Threshold in normalized units, within [MIN_PINCH_ABS, MAX_PINCH_ABS]
    """
    pinching = phase is PinchPhase.PINCHING
    if hand_scale > 0:
        ratio = STOP_RATIO if pinching else START_RATIO
        threshold = clamp(ratio * hand_scale, MIN_PINCH_ABS, MAX_PINCH_ABS)
    else:
        threshold = STOP_PINCH_ABS if pinching else START_PINCH_ABS
    return clamp(threshold * sensitivity, MIN_PINCH_ABS, MAX_PINCH_ABS)


def pinch_distance(landmarks: Sequence[Point3]) -> float:
    return dist2(landmarks[LM.THUMB_TIP], landmarks[LM.INDEX_TIP])


def detect_pinch(landmarks: Sequence[Point3] | None, threshold: float = START_PINCH_ABS) -> bool:
    """Stateless check: thumb tip and index tip closer than `threshold`."""
    if not is_full_hand(landmarks):
        return False
    return pinch_distance(landmarks) < threshold


class PinchDetector:
    """Two-phase pinch state machine with hysteresis."""

    def __init__(self):
        self.phase = PinchPhase.IDLE

    @property
    def active(self) -> bool:
        return self.phase is PinchPhase.PINCHING

    def reset(self) -> None:
        self.phase = PinchPhase.IDLE

    def update(self, landmarks: Sequence[Point3] | None, hand_scale: float, sensitivity: float = 1.0) -> bool:
        """
        Classify one frame and advance the phase.

        Incomplete skeletons return False and leave the phase untouched.
        """
        if not is_full_hand(landmarks):
            return False

        start_thr = pinch_threshold(PinchPhase.IDLE, hand_scale, sensitivity)
        stop_thr = pinch_threshold(PinchPhase.PINCHING, hand_scale, sensitivity)
        distance = pinch_distance(landmarks)
        pinching = update_hysteresis(self.active, distance, start_thr, stop_thr)

        if pinching and not self.active:
            logger.info("Pinch START (d=%.3f < %.3f)", distance, start_thr)
        elif self.active and not pinching:
            logger.info("Pinch RELEASED (d=%.3f >= %.3f)", distance, stop_thr)

        self.phase = PinchPhase.PINCHING if pinching else PinchPhase.IDLE
        return pinching


# =============================================================================
# FIST DETECTION
# =============================================================================

def detect_fist(landmarks: Sequence[Point3] | None) -> bool:
    """
    All four non-thumb fingertips lie below their base joints.

    Screen-space y grows downward, so a curled finger has tip.y > base.y.
    Assumes a roughly upright hand.
    """
    if not is_full_hand(landmarks):
        return False
    return all(landmarks[tip][1] > landmarks[base][1] for tip, base in FINGER_TIP_BASE_PAIRS)
