"""Configuration constants and runtime settings for gesture recognition."""

import json
import logging
from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from .math_utils import clamp

logger = logging.getLogger(__name__)


class ViewMode(Enum):
    FPV_BEHIND_HANDS = "FPV_BEHIND_HANDS"
    SELFIE_WEBCAM = "SELFIE_WEBCAM"


# =============================================================================
# CAMERA / VIEW SETTINGS
# =============================================================================
VIEW_MODE = ViewMode.SELFIE_WEBCAM
FORCE_MIRROR_INPUT = False
NUM_LANDMARKS = 21


def needs_process_flip(view_mode: ViewMode, force_mirror: bool = False) -> bool:
    """
    Whether frames are flipped before detection.

    The coordinate mapper already mirrors x, which is right for a selfie
    webcam. A camera behind the hands sees them unmirrored, so its frames are
    flipped first and the two mirrors cancel. The preview always shows the
    processed frame flipped back.
    """
    return (view_mode == ViewMode.FPV_BEHIND_HANDS) != force_mirror


# Derived flip setting
PROCESS_FLIP = needs_process_flip(VIEW_MODE, FORCE_MIRROR_INPUT)


# =============================================================================
# CURSOR SMOOTHING
# =============================================================================
SPEED_NORMALIZER = 120.0
MIN_SMOOTH = 0.08
MAX_SMOOTH = 0.32


# =============================================================================
# PINCH DETECTION
# =============================================================================
START_RATIO = 0.3
STOP_RATIO = 0.4
MIN_PINCH_ABS = 0.025
MAX_PINCH_ABS = 0.12

# Used when the hand scale is unavailable
START_PINCH_ABS = 0.05
STOP_PINCH_ABS = 0.085


# =============================================================================
# STATE PUBLICATION
# =============================================================================
PUBLISH_MIN_MOVE_PX = 0.2
PUBLISH_INTERVAL_S = 1.0 / 60.0


# =============================================================================
# USER PREFERENCES
# =============================================================================
SETTING_MIN = 0.6
SETTING_MAX = 1.7
SETTING_DEFAULT = 1.0


def _coerce_setting(value) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return SETTING_DEFAULT
    if value != value:  # NaN
        return SETTING_DEFAULT
    return clamp(float(value), SETTING_MIN, SETTING_MAX)


@dataclass(frozen=True)
class EngineConfig:
    """
    User-tunable engine settings.

    Both values are clamped into [SETTING_MIN, SETTING_MAX]. Instances are
    immutable, so swapping the engine's reference is an atomic update.
    """
    pinch_sensitivity: float = SETTING_DEFAULT
    cursor_responsiveness: float = SETTING_DEFAULT

    def __post_init__(self):
        object.__setattr__(self, "pinch_sensitivity", _coerce_setting(self.pinch_sensitivity))
        object.__setattr__(self, "cursor_responsiveness", _coerce_setting(self.cursor_responsiveness))

    @classmethod
    def from_settings(cls, settings: Mapping) -> "EngineConfig":
        """Build from a preferences mapping using its camelCase keys."""
        return cls(
            pinch_sensitivity=settings.get("pinchSensitivity", SETTING_DEFAULT),
            cursor_responsiveness=settings.get("cursorResponsiveness", SETTING_DEFAULT),
        )

    def to_settings(self) -> dict:
        return {
            "pinchSensitivity": self.pinch_sensitivity,
            "cursorResponsiveness": self.cursor_responsiveness,
        }


def load_engine_config(path: str | Path) -> EngineConfig:
    """
    Load engine settings from a JSON preferences file.

    Accepts either a bare settings object or a workspace document holding
    one under "settings". A missing file yields the defaults.
    """
    config_path = Path(path)
    if not config_path.exists():
        logger.warning("Preferences not found at %s, using defaults", config_path)
        return EngineConfig()

    with open(config_path, "r", encoding="utf-8") as f:
        data = json.load(f)

    if not isinstance(data, Mapping):
        raise ValueError(f"Preferences must be a JSON object: {config_path}")

    settings = data.get("settings", data)
    if not isinstance(settings, Mapping):
        raise ValueError(f"'settings' must be a JSON object: {config_path}")

    config = EngineConfig.from_settings(settings)
    logger.info(
        "Loaded preferences from %s (pinch=%.2f, responsiveness=%.2f)",
        config_path, config.pinch_sensitivity, config.cursor_responsiveness,
    )
    return config
