"""Velocity-adaptive cursor smoothing."""

from .config import MAX_SMOOTH, MIN_SMOOTH, SPEED_NORMALIZER
from .coordinates import Viewport, clamp_to_viewport
from .math_utils import ScreenPoint, clamp, dist2, lerp


def smooth_factor(speed: float, responsiveness: float) -> float:
    """Interpolation weight for a cursor moving `speed` px since the last frame."""
    return clamp((speed / SPEED_NORMALIZER) * responsiveness, MIN_SMOOTH, MAX_SMOOTH)


class AdaptiveSmoother:
    """
    Low-pass filter on the cursor whose strength follows hand speed.

    Slow movement (tremor) gets heavy smoothing, deliberate movement gets a
    larger factor and therefore less lag. The stored point is always inside
    the last viewport it was clamped to.
    """

    def __init__(self):
        self.prev: ScreenPoint | None = None

    def reset(self, point: ScreenPoint | None = None) -> None:
        self.prev = point

    def fit_to_viewport(self, viewport: Viewport) -> None:
        """Re-clamp the stored point after a viewport resize."""
        if self.prev is not None:
            self.prev = clamp_to_viewport(self.prev, viewport)

    def position(self, viewport: Viewport) -> ScreenPoint:
        """Current smoothed point, seeded at the viewport center."""
        if self.prev is None:
            self.prev = clamp_to_viewport(viewport.center, viewport)
        return self.prev

    def update(self, raw: ScreenPoint, responsiveness: float, viewport: Viewport) -> ScreenPoint:
        """
        Blend a raw point into the smoothed cursor.

        Args:
            raw: Unclamped mapped point for this frame
            responsiveness: Cursor responsiveness setting
            viewport: Current viewport used for clamping

        Returns:
            The new smoothed, clamped point
        """
        px, py = self.position(viewport)
        factor = smooth_factor(dist2(raw, (px, py)), responsiveness)

        smoothed = (lerp(px, raw[0], factor), lerp(py, raw[1], factor))
        self.prev = clamp_to_viewport(smoothed, viewport)
        return self.prev
