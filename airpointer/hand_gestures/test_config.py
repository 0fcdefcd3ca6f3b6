"""Tests for engine settings and preference loading."""

import json
import os
import tempfile
import unittest

from airpointer.hand_gestures.config import EngineConfig, ViewMode, load_engine_config, needs_process_flip


class TestViewMode(unittest.TestCase):

    def test_selfie_frames_reach_detector_unflipped(self):
        self.assertFalse(needs_process_flip(ViewMode.SELFIE_WEBCAM))

    def test_behind_hands_frames_flipped_once(self):
        self.assertTrue(needs_process_flip(ViewMode.FPV_BEHIND_HANDS))

    def test_force_mirror_inverts(self):
        self.assertTrue(needs_process_flip(ViewMode.SELFIE_WEBCAM, force_mirror=True))
        self.assertFalse(needs_process_flip(ViewMode.FPV_BEHIND_HANDS, force_mirror=True))


class TestEngineConfig(unittest.TestCase):

    def test_defaults(self):
        config = EngineConfig()
        self.assertEqual(config.pinch_sensitivity, 1.0)
        self.assertEqual(config.cursor_responsiveness, 1.0)

    def test_values_clamped(self):
        config = EngineConfig(pinch_sensitivity=5.0, cursor_responsiveness=0.0)
        self.assertEqual(config.pinch_sensitivity, 1.7)
        self.assertEqual(config.cursor_responsiveness, 0.6)

    def test_invalid_values_fall_back_to_default(self):
        for bad in ("fast", None, True, float("nan")):
            self.assertEqual(EngineConfig(pinch_sensitivity=bad).pinch_sensitivity, 1.0)

    def test_immutable(self):
        with self.assertRaises(AttributeError):
            EngineConfig().pinch_sensitivity = 1.5

    def test_from_settings(self):
        config = EngineConfig.from_settings({"pinchSensitivity": 1.2, "theme": "dark"})
        self.assertEqual(config.pinch_sensitivity, 1.2)
        self.assertEqual(config.cursor_responsiveness, 1.0)
        self.assertEqual(EngineConfig.from_settings(config.to_settings()), config)


class TestLoadEngineConfig(unittest.TestCase):

    def setUp(self):
        self.tmpdir = tempfile.TemporaryDirectory()
        self.path = os.path.join(self.tmpdir.name, "prefs.json")

    def tearDown(self):
        self.tmpdir.cleanup()

    def _write(self, data) -> None:
        with open(self.path, "w", encoding="utf-8") as f:
            json.dump(data, f)

    def test_missing_file_uses_defaults(self):
        with self.assertLogs("airpointer.hand_gestures.config", level="WARNING"):
            config = load_engine_config(self.path)
        self.assertEqual(config, EngineConfig())

    def test_bare_settings_object(self):
        self._write({"pinchSensitivity": 0.8, "cursorResponsiveness": 1.4})
        config = load_engine_config(self.path)
        self.assertAlmostEqual(config.pinch_sensitivity, 0.8)
        self.assertAlmostEqual(config.cursor_responsiveness, 1.4)

    def test_workspace_document(self):
        self._write({"version": 1, "settings": {"cursorResponsiveness": 9}})
        config = load_engine_config(self.path)
        self.assertEqual(config.cursor_responsiveness, 1.7)

    def test_non_object_rejected(self):
        self._write([1.0, 1.2])
        with self.assertRaises(ValueError):
            load_engine_config(self.path)


if __name__ == '__main__':
    unittest.main(verbosity=2)
