"""Vector and geometry utility functions."""

import math

Point3 = tuple[float, float, float]
ScreenPoint = tuple[float, float]


def dist2(a, b) -> float:
    """Euclidean distance between the (x, y) parts of two points."""
    return math.hypot(a[0] - b[0], a[1] - b[1])


def clamp(v: float, lo: float, hi: float) -> float:
    """Clamp value to range [lo, hi]."""
    return max(lo, min(hi, v))


def lerp(a: float, b: float, t: float) -> float:
    """Linear interpolation from a (t=0) to b (t=1)."""
    return a * (1 - t) + b * t


def update_hysteresis(active: bool, value: float, on_thr: float, off_thr: float) -> bool:
    """Hysteresis-based state update to prevent flickering."""
    if not active:
        return value < on_thr
    return not (value >= off_thr)
