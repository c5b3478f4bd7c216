"""
Unit Tests for Entity Insight Computer
Tests single pass statistics plus crossing history for one entity
"""

import sys
import threading
import unittest
from pathlib import Path

import numpy as np

# Add src to path
project_root = Path(__file__).parent.parent
sys.path.append(str(project_root / "src"))

from insights.entity_insights import EntityInsightComputer
from insights.errors import EmptyGroupError, InsightsCancelled, InvalidConfigurationError, InvalidSampleError
from insights.models import Run, Sample, Zone


def make_samples(distances, entity_id=1, player_id=1):
    return [Sample(player_id=player_id, entity_id=entity_id, distance=d) for d in distances]


class CountdownEvent:
    """Cancellation signal that becomes set after a number of polls."""

    def __init__(self, polls_before_set: int):
        self.remaining = polls_before_set

    def is_set(self):
        self.remaining -= 1
        return self.remaining < 0


class TestEntityInsightComputer(unittest.TestCase):
    """Test EntityInsightComputer functionality."""

    def setUp(self):
        """Set up test fixtures."""
        self.computer = EntityInsightComputer({'cancellation_check_interval': 10})

    def test_two_identical_samples(self):
        """Test the reference case of two 10cm samples."""
        insight = self.computer.compute(make_samples([10, 10]))

        self.assertEqual(insight.min, 10)
        self.assertEqual(insight.max, 10)
        self.assertEqual(insight.mean, 10)
        self.assertEqual(insight.count, 2)
        self.assertEqual(insight.variance, 0)
        self.assertTrue(insight.has_variance)
        self.assertEqual(insight.crossings, (Run(Zone.INTIMATE, 2),))

    def test_single_sample(self):
        insight = self.computer.compute(make_samples([400]))
        self.assertIsNone(insight.variance)
        self.assertFalse(insight.has_variance)
        self.assertEqual(insight.crossings, (Run(Zone.PUBLIC, 1),))

    def test_run_lengths_sum_to_count(self):
        """Run lengths always add up to the sample count."""
        rng = np.random.default_rng(3)
        distances = rng.integers(0, 800, size=777).tolist()

        insight = self.computer.compute(make_samples(distances))

        self.assertEqual(insight.count, len(distances))
        self.assertEqual(sum(run.length for run in insight.crossings), insight.count)
        self.assertAlmostEqual(insight.mean, np.mean(distances), places=6)
        self.assertAlmostEqual(insight.variance, np.var(distances, ddof=1), places=4)

    def test_order_changes_crossings_only(self):
        """Reordering leaves statistics alone but changes the zone history."""
        forward = self.computer.compute(make_samples([10, 500, 10, 500]))
        grouped = self.computer.compute(make_samples([10, 10, 500, 500]))

        self.assertEqual((forward.min, forward.max, forward.count), (grouped.min, grouped.max, grouped.count))
        self.assertAlmostEqual(forward.mean, grouped.mean)
        self.assertAlmostEqual(forward.variance, grouped.variance)
        self.assertEqual(len(forward.crossings), 4)
        self.assertEqual(len(grouped.crossings), 2)

    def test_accepts_generators(self):
        """Samples may arrive as a one-shot stream."""
        stream = (Sample(1, 5, d) for d in range(0, 100, 5))
        insight = self.computer.compute(stream)
        self.assertEqual(insight.count, 20)
        self.assertEqual(insight.max, 95)

    def test_deterministic(self):
        samples = make_samples([12, 90, 300, 1000, 5, 44, 45])
        self.assertEqual(self.computer.compute(samples), self.computer.compute(samples))

    def test_empty_group_rejected(self):
        with self.assertRaises(EmptyGroupError) as ctx:
            self.computer.compute([], entity_id=9)
        self.assertEqual(ctx.exception.entity_id, 9)

    def test_negative_distance_rejected(self):
        with self.assertRaises(InvalidSampleError) as ctx:
            self.computer.compute(make_samples([10, -1, 20], entity_id=4))
        self.assertEqual(ctx.exception.distance, -1)
        self.assertEqual(ctx.exception.entity_id, 4)

    def test_mixed_entities_rejected(self):
        samples = make_samples([10, 20], entity_id=1) + make_samples([30], entity_id=2)
        with self.assertRaises(InvalidSampleError):
            self.computer.compute(samples)

    def test_expected_entity_enforced(self):
        with self.assertRaises(InvalidSampleError):
            self.computer.compute(make_samples([10], entity_id=1), entity_id=2)

    def test_cancelled_before_start(self):
        event = threading.Event()
        event.set()
        with self.assertRaises(InsightsCancelled):
            self.computer.compute(make_samples([10] * 5), cancel_event=event)

    def test_cancelled_mid_pass(self):
        """Cancellation is noticed at the next check interval."""
        event = CountdownEvent(polls_before_set=2)
        with self.assertRaises(InsightsCancelled):
            self.computer.compute(make_samples([10] * 100), cancel_event=event)

    def test_invalid_check_interval_rejected(self):
        for bad in (0, -1, 2.5):
            with self.assertRaises(InvalidConfigurationError):
                EntityInsightComputer({'cancellation_check_interval': bad})

    def test_unset_event_completes(self):
        insight = self.computer.compute(make_samples([10] * 100), cancel_event=threading.Event())
        self.assertEqual(insight.count, 100)


def run_entity_insight_tests():
    """Run all entity insight tests."""
    suite = unittest.TestLoader().loadTestsFromTestCase(TestEntityInsightComputer)
    result = unittest.TextTestRunner(verbosity=2).run(suite)
    return result.wasSuccessful()


if __name__ == "__main__":
    run_entity_insight_tests()
