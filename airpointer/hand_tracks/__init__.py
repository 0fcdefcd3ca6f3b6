"""Hand tracking and gesture-state consumers."""

from .hand_tracker import HandDetection, HandTracker
from .visualization import TrackerDisplay, draw_cursor, draw_overlay

__all__ = [
    "HandDetection",
    "HandTracker",
    "TrackerDisplay",
    "draw_cursor",
    "draw_overlay",
]
