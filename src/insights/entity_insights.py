"""
Entity Insight Computer
Drives statistics and zone crossing tracking over one entity's samples
"""

import logging
from typing import Iterable, Optional

from .crossings import CrossingTracker
from .errors import EmptyGroupError, InsightsCancelled, InvalidConfigurationError, InvalidSampleError
from .models import EntityInsight, Sample
from .running_stats import OnlineStatsAccumulator
from .zones import ZoneClassifier


class EntityInsightComputer:
    """Builds an EntityInsight from an ordered stream of samples."""

    def __init__(self, config: Optional[dict] = None, classifier: Optional[ZoneClassifier] = None):
        """Initialize computer with configuration."""
        config = config or {}
        self.logger = logging.getLogger(__name__)
        self.classifier = classifier or ZoneClassifier(config)
        self.check_interval = config.get('cancellation_check_interval', 1024)
        if isinstance(self.check_interval, bool) or not isinstance(self.check_interval, int) or self.check_interval < 1:
            raise InvalidConfigurationError(
                f"cancellation_check_interval must be a positive integer, got {self.check_interval!r}")

    def compute(self, samples: Iterable[Sample], entity_id: Optional[int] = None,
                cancel_event=None) -> EntityInsight:
        """
        Compute insight for one entity in a single pass.

        Samples are consumed in the order given. When entity_id is omitted
        the first sample's entity is expected throughout. cancel_event is
        any object with is_set(); it is polled every check_interval samples.
        """
        stats = OnlineStatsAccumulator()
        tracker = CrossingTracker(self.classifier)

        for index, sample in enumerate(samples):
            if entity_id is None:
                entity_id = sample.entity_id
            self._validate(sample, entity_id)

            stats.add(sample.distance)
            tracker.add(sample.distance)

            if cancel_event is not None and index % self.check_interval == 0 and cancel_event.is_set():
                raise InsightsCancelled(f"Cancelled while analyzing entity {entity_id}")

        if stats.count == 0:
            raise EmptyGroupError(entity_id)

        summary = stats.summary()
        crossings = tracker.history()
        self.logger.debug(f"Entity {entity_id}: {summary.count} samples, "
                          f"{len(crossings)} runs")

        return EntityInsight(
            min=summary.min,
            max=summary.max,
            mean=summary.mean,
            count=summary.count,
            variance=summary.variance,
            crossings=crossings,
        )

    def _validate(self, sample: Sample, entity_id: int):
        if sample.entity_id != entity_id:
            raise InvalidSampleError(
                f"Sample for entity {sample.entity_id} found in group for entity {entity_id}",
                player_id=sample.player_id, entity_id=sample.entity_id, distance=sample.distance)
        if sample.distance < 0:
            raise InvalidSampleError(
                f"Negative distance {sample.distance} for entity {entity_id}",
                player_id=sample.player_id, entity_id=sample.entity_id, distance=sample.distance)
