"""
Insights Orchestrator
Fans a player's samples out per entity and merges in the neighbor ranking
"""

import logging
from typing import Dict, Iterable, Mapping, Optional, Sequence, Set

from .entity_insights import EntityInsightComputer
from .errors import InsightsCancelled, InsightsError
from .models import EntityInsight, InsightsResult, PlayerAggregate, Sample, Zone
from .neighbors import NeighborRanker
from .zones import ZoneClassifier


class InsightsOrchestrator:
    """Computes the full insight response for one player."""

    def __init__(self, config: Optional[dict] = None, store=None):
        """Initialize orchestrator and its collaborators from configuration."""
        self.config = config or {}
        self.logger = logging.getLogger(__name__)
        self.store = store

        self.classifier = ZoneClassifier(self.config)
        self.entity_computer = EntityInsightComputer(self.config, classifier=self.classifier)
        self.ranker = NeighborRanker(self.config)

    def build_insights(self, player_id: int,
                       samples_by_entity: Mapping[int, Sequence[Sample]],
                       target: PlayerAggregate,
                       others: Iterable[PlayerAggregate],
                       cancel_event=None) -> InsightsResult:
        """Combine per-entity insights with the neighbor ranking."""
        stats: Dict[int, EntityInsight] = {}
        zone_members: Dict[Zone, Set[int]] = {zone: set() for zone in Zone}

        for entity_id, samples in samples_by_entity.items():
            if cancel_event is not None and cancel_event.is_set():
                raise InsightsCancelled(f"Cancelled insights for player {player_id}")

            # Entities this player never observed are left out entirely
            if not samples:
                continue

            try:
                insight = self.entity_computer.compute(samples, entity_id=entity_id,
                                                       cancel_event=cancel_event)
            except InsightsCancelled:
                raise
            except InsightsError as e:
                self.logger.warning(f"Insights for player {player_id} failed at entity {entity_id}: {e}")
                raise

            stats[entity_id] = insight
            for run in insight.crossings:
                zone_members[run.zone].add(entity_id)

        neighbors = self.ranker.rank(target, others)

        self.logger.info(f"Player {player_id}: insights for {len(stats)} entities, "
                         f"{len(neighbors)} neighbors")

        return InsightsResult(
            stats=stats,
            neighbors=tuple(neighbors),
            zones={zone: tuple(sorted(members)) for zone, members in zone_members.items()},
        )

    def compute_insights(self, player_id: int, cancel_event=None) -> InsightsResult:
        """Fetch a player's data from the store and build their insights."""
        if self.store is None:
            raise InsightsError("compute_insights requires a sample store")

        samples_by_entity = self.store.fetch_samples_grouped_by_entity(player_id)
        target = PlayerAggregate(player_id=player_id,
                                 average_distance=self.store.fetch_average_distance(player_id))
        others = self.store.fetch_all_player_averages(excluding=player_id)

        return self.build_insights(player_id, samples_by_entity, target, others,
                                   cancel_event=cancel_event)
