"""
Test suite for gesture state publication

Run with: python -m pytest airpointer/hand_gestures/test_emitter.py -v
"""

import unittest

from airpointer.hand_gestures.emitter import GestureState, StateEmitter


class FakeClock:
    """Manually advanced monotonic clock."""

    def __init__(self, now: float = 100.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class TestGestureState(unittest.TestCase):

    def test_hand_lost_clears_gestures(self):
        state = GestureState.hand_lost(12.0, 34.0)
        self.assertEqual(state.cursor, (12.0, 34.0))
        self.assertEqual(state.flags(), (False, False, False))

    def test_to_dict(self):
        state = GestureState(1.5, 2.5, is_pinching=True, hand_detected=True)
        self.assertEqual(state.to_dict(), {
            "cursorX": 1.5,
            "cursorY": 2.5,
            "isPinching": True,
            "isFist": False,
            "handDetected": True,
        })


class TestStateEmitter(unittest.TestCase):
    """Publication policy: flags immediately, motion rate-limited."""

    def setUp(self):
        self.clock = FakeClock()
        self.emitter = StateEmitter(clock=self.clock)
        self.base = GestureState(100.0, 100.0, hand_detected=True)
        self.assertTrue(self.emitter.offer(self.base))

    # ============================================================
    # Flag changes
    # ============================================================

    def test_first_candidate_is_published(self):
        emitter = StateEmitter(clock=self.clock)
        self.assertTrue(emitter.offer(GestureState(0.0, 0.0)))

    def test_pinch_change_publishes_without_delay(self):
        self.assertTrue(self.emitter.offer(GestureState(100.0, 100.0, True, False, True)))

    def test_fist_change_publishes_without_delay(self):
        self.assertTrue(self.emitter.offer(GestureState(100.0, 100.0, False, True, True)))

    def test_hand_loss_publishes_without_delay(self):
        self.assertTrue(self.emitter.offer(GestureState.hand_lost(100.0, 100.0)))

    # ============================================================
    # Cursor motion
    # ============================================================

    def test_identical_state_not_republished(self):
        self.clock.advance(1.0)
        self.assertFalse(self.emitter.offer(self.base))

    def test_sub_threshold_motion_suppressed(self):
        self.clock.advance(1.0)
        self.assertFalse(self.emitter.offer(GestureState(100.1, 100.0, hand_detected=True)))

    def test_motion_rate_limited(self):
        moved = GestureState(105.0, 100.0, hand_detected=True)
        self.clock.advance(0.005)
        self.assertFalse(self.emitter.offer(moved))
        self.clock.advance(0.015)
        self.assertTrue(self.emitter.offer(moved))

    def test_suppressed_candidate_not_recorded(self):
        self.clock.advance(0.005)
        self.emitter.offer(GestureState(105.0, 100.0, hand_detected=True))
        self.assertEqual(self.emitter.last_state, self.base)

    def test_reset(self):
        self.emitter.reset()
        self.assertIsNone(self.emitter.last_state)
        self.assertTrue(self.emitter.offer(self.base))


if __name__ == '__main__':
    unittest.main(verbosity=2)
