"""Hand gesture recognition module."""

from .config import (
    ViewMode, VIEW_MODE, NUM_LANDMARKS, EngineConfig, load_engine_config, needs_process_flip,
)
from .coordinates import Viewport, landmark_to_screen, clamp_to_viewport
from .emitter import GestureState, StateEmitter
from .engine import GestureEngine
from .features import LM, get_hand_scale, is_full_hand
from .gestures import PinchPhase, PinchDetector, pinch_threshold, detect_pinch, detect_fist
from .math_utils import clamp, lerp
from .metrics import MetricsSnapshot, SessionMetrics, tracking_status
from .smoothing import AdaptiveSmoother, smooth_factor

__all__ = [
    "ViewMode",
    "VIEW_MODE",
    "NUM_LANDMARKS",
    "EngineConfig",
    "load_engine_config",
    "needs_process_flip",
    "Viewport",
    "landmark_to_screen",
    "clamp_to_viewport",
    "GestureState",
    "StateEmitter",
    "GestureEngine",
    "LM",
    "get_hand_scale",
    "is_full_hand",
    "PinchPhase",
    "PinchDetector",
    "pinch_threshold",
    "detect_pinch",
    "detect_fist",
    "clamp",
    "lerp",
    "MetricsSnapshot",
    "SessionMetrics",
    "tracking_status",
    "AdaptiveSmoother",
    "smooth_factor",
]
