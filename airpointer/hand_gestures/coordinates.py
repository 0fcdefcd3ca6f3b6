"""Landmark-to-viewport coordinate mapping."""

from dataclasses import dataclass

from .math_utils import ScreenPoint, clamp


@dataclass(frozen=True)
class Viewport:
    """Rendering surface size in pixels."""
    width: float
    height: float

    @property
    def center(self) -> ScreenPoint:
        return self.width / 2, self.height / 2


def landmark_to_screen(landmark, width: float, height: float) -> ScreenPoint:
    """
    Map a normalized landmark to viewport pixels.

    x is mirrored to compensate for a front-facing camera feed. The result
    is not clamped.

    Args:
        landmark: (x, y[, z]) with x, y in [0, 1]
        width: Viewport width in pixels
        height: Viewport height in pixels

    Returns:
        (screen_x, screen_y)
    """
    return (1 - landmark[0]) * width, landmark[1] * height


def clamp_to_viewport(point: ScreenPoint, viewport: Viewport) -> ScreenPoint:
    """Clamp a point into [0, width] x [0, height]."""
    x = clamp(point[0], 0.0, max(viewport.width, 0.0))
    y = clamp(point[1], 0.0, max(viewport.height, 0.0))
    return x, y
