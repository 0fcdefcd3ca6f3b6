"""Tests for session metrics and tracking status."""

import unittest

from airpointer.hand_gestures.emitter import GestureState
from airpointer.hand_gestures.metrics import SessionMetrics, tracking_status


class TestTrackingStatus(unittest.TestCase):

    def test_statuses(self):
        self.assertEqual(tracking_status(None), "active")
        self.assertEqual(tracking_status(GestureState(0, 0, hand_detected=True)), "active")
        self.assertEqual(tracking_status(GestureState(0, 0, is_fist=True, hand_detected=True)), "paused")
        self.assertEqual(tracking_status(GestureState(0, 0, is_fist=True), tracking_enabled=False), "off")


class TestSessionMetrics(unittest.TestCase):

    def setUp(self):
        self.now = 10.0
        self.metrics = SessionMetrics(clock=lambda: self.now)

    def test_empty_snapshot(self):
        snap = self.metrics.snapshot()
        self.assertEqual(snap.pinch_count, 0)
        self.assertEqual(snap.hand_presence, 0.0)
        self.assertEqual(snap.interaction_rate, 0.0)

    def test_counts_gesture_onsets_only(self):
        pinch = GestureState(0, 0, is_pinching=True, hand_detected=True)
        fist = GestureState(0, 0, is_fist=True, hand_detected=True)
        open_hand = GestureState(0, 0, hand_detected=True)

        for state in (pinch, pinch, pinch, open_hand, pinch, fist, fist):
            self.metrics.observe(state)

        self.assertEqual(self.metrics.pinch_count, 2)
        self.assertEqual(self.metrics.fist_count, 1)

    def test_presence_and_rate(self):
        self.metrics.observe(GestureState(0, 0, is_pinching=True, hand_detected=True))
        self.metrics.observe(GestureState.hand_lost(0, 0))
        self.metrics.observe(GestureState(0, 0, is_fist=True, hand_detected=True))
        self.metrics.observe(GestureState.hand_lost(0, 0))
        self.now += 4.0

        snap = self.metrics.snapshot()
        self.assertAlmostEqual(snap.hand_presence, 50.0)
        self.assertAlmostEqual(snap.elapsed_seconds, 4.0)
        self.assertAlmostEqual(snap.interaction_rate, 0.5)


if __name__ == '__main__':
    unittest.main(verbosity=2)
