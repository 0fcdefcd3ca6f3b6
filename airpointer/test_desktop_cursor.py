"""Tests for the desktop pointer consumer (pyautogui mocked, no display needed)."""

import importlib
import sys
import unittest
from unittest.mock import MagicMock, patch

from airpointer.hand_gestures.coordinates import Viewport
from airpointer.hand_gestures.emitter import GestureState


class TestDesktopCursor(unittest.TestCase):

    def setUp(self):
        self.pyautogui = MagicMock()
        self.pyautogui.size.return_value = (1921, 1081)
        self.modules_patcher = patch.dict(sys.modules, {"pyautogui": self.pyautogui})
        self.modules_patcher.start()
        sys.modules.pop("airpointer.desktop_cursor", None)
        module = importlib.import_module("airpointer.desktop_cursor")
        self.cursor = module.DesktopCursor(Viewport(1000, 500))

    def tearDown(self):
        self.modules_patcher.stop()
        sys.modules.pop("airpointer.desktop_cursor", None)

    def test_failsafe_disabled(self):
        self.assertFalse(self.pyautogui.FAILSAFE)

    def test_moves_pointer_to_scaled_position(self):
        self.cursor(GestureState(500.0, 250.0, hand_detected=True))
        self.pyautogui.moveTo.assert_called_once_with(960, 540, _pause=False)

    def test_pinch_drags(self):
        self.cursor(GestureState(0.0, 0.0, is_pinching=True, hand_detected=True))
        self.cursor(GestureState(10.0, 0.0, is_pinching=True, hand_detected=True))
        self.pyautogui.mouseDown.assert_called_once()
        self.assertTrue(self.cursor.button_down)

        self.cursor(GestureState(20.0, 0.0, hand_detected=True))
        self.pyautogui.mouseUp.assert_called_once()
        self.assertFalse(self.cursor.button_down)

    def test_hand_loss_releases_and_freezes(self):
        self.cursor(GestureState(0.0, 0.0, is_pinching=True, hand_detected=True))
        self.pyautogui.moveTo.reset_mock()

        self.cursor(GestureState.hand_lost(0.0, 0.0))
        self.pyautogui.mouseUp.assert_called_once()
        self.pyautogui.moveTo.assert_not_called()

    def test_fist_freezes_pointer(self):
        self.cursor(GestureState(100.0, 100.0, is_fist=True, hand_detected=True))
        self.pyautogui.moveTo.assert_not_called()
        self.pyautogui.mouseUp.assert_not_called()


if __name__ == '__main__':
    unittest.main(verbosity=2)
