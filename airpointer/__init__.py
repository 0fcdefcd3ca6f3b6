"""Touchless pointer: hand landmarks to a stable cursor plus pinch/fist gestures."""

from .hand_gestures import (
    EngineConfig,
    GestureEngine,
    GestureState,
    Viewport,
    SessionMetrics,
    load_engine_config,
    get_hand_scale,
    detect_pinch,
    detect_fist,
    landmark_to_screen,
)

__version__ = "0.1.0"

__all__ = [
    "EngineConfig",
    "GestureEngine",
    "GestureState",
    "Viewport",
    "SessionMetrics",
    "load_engine_config",
    "get_hand_scale",
    "detect_pinch",
    "detect_fist",
    "landmark_to_screen",
]
