import pathlib
import sys
import unittest

# Ensure src/ is on path for direct test execution
ROOT = pathlib.Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from wavescope.core.clock_gate import ClockGate  # noqa: E402
from wavescope.core.errors import ConstructionError  # noqa: E402


class ClockGateTest(unittest.TestCase):
    def test_ten_millisecond_cadence(self):
        gate = ClockGate(0.010)
        self.assertTrue(gate.is_due(0.0))
        gate.mark_sampled(0.0)
        self.assertFalse(gate.is_due(0.005))
        self.assertTrue(gate.is_due(0.011))

    def test_never_sampled_is_always_due(self):
        gate = ClockGate(3600.0)
        self.assertIsNone(gate.last_sample_at)
        self.assertTrue(gate.is_due(-1e9))
        self.assertTrue(gate.is_due(0.0))

    def test_elapsed_must_strictly_exceed_interval(self):
        gate = ClockGate(2.0)
        gate.mark_sampled(10.0)
        self.assertFalse(gate.is_due(12.0))
        self.assertTrue(gate.is_due(12.5))

    def test_is_due_does_not_change_state(self):
        gate = ClockGate(1.0)
        gate.mark_sampled(5.0)
        answers = {gate.is_due(5.5) for _ in range(10)}
        self.assertEqual(answers, {False})
        answers = {gate.is_due(7.0) for _ in range(10)}
        self.assertEqual(answers, {True})
        self.assertEqual(gate.last_sample_at, 5.0)

    def test_reset_returns_to_never_sampled(self):
        gate = ClockGate(1.0)
        gate.mark_sampled(5.0)
        gate.reset()
        self.assertIsNone(gate.last_sample_at)
        self.assertTrue(gate.is_due(5.1))

    def test_zero_interval_samples_on_any_later_tick(self):
        gate = ClockGate(0.0)
        gate.mark_sampled(1.0)
        self.assertFalse(gate.is_due(1.0))
        self.assertTrue(gate.is_due(1.000001))

    def test_invalid_interval_rejected(self):
        for bad in (-0.001, float("nan"), float("inf"), "soon"):
            with self.assertRaises(ConstructionError):
                ClockGate(bad)


if __name__ == "__main__":
    unittest.main()
