"""
Sample Store
Storage contract consumed by the insights engine and an in-memory implementation
"""

import logging
from abc import ABC, abstractmethod
from collections import defaultdict
from typing import Dict, List, Set, Tuple

from insights.errors import InvalidSampleError, SampleConflictError, UnknownPlayerError
from insights.models import PlayerAggregate, Sample


class SampleStore(ABC):
    """Source of distance samples and per-player averages."""

    @abstractmethod
    def fetch_samples_grouped_by_entity(self, player_id: int) -> Dict[int, List[Sample]]:
        """Get a player's samples grouped by entity, each group in insertion order."""

    @abstractmethod
    def fetch_average_distance(self, player_id: int) -> float:
        """Get the average distance over all of a player's samples."""

    @abstractmethod
    def fetch_all_player_averages(self, excluding: int) -> List[PlayerAggregate]:
        """Get the average distance of every player except one."""

    @abstractmethod
    def insert_sample(self, player_id: int, entity_id: int, distance: int) -> Sample:
        """Record a new sample."""


class InMemorySampleStore(SampleStore):
    """Keeps samples in process memory, in arrival order."""

    def __init__(self, unique_pairs: bool = False):
        """Initialize empty store; unique_pairs rejects repeated (player, entity) samples."""
        self.logger = logging.getLogger(__name__)
        self.unique_pairs = unique_pairs

        self._samples: Dict[int, Dict[int, List[Sample]]] = defaultdict(lambda: defaultdict(list))
        self._totals: Dict[int, int] = defaultdict(int)
        self._counts: Dict[int, int] = defaultdict(int)
        self._pairs: Set[Tuple[int, int]] = set()

    def insert_sample(self, player_id: int, entity_id: int, distance: int) -> Sample:
        """Validate and append a sample."""
        if not self._valid_natural(player_id, 1):
            raise InvalidSampleError(f"'playerID' must be a non-zero natural number, got {player_id!r}",
                                     player_id=player_id, entity_id=entity_id, distance=distance)
        if not self._valid_natural(entity_id, 1):
            raise InvalidSampleError(f"'id' must be a non-zero natural number, got {entity_id!r}",
                                     player_id=player_id, entity_id=entity_id, distance=distance)
        if not self._valid_natural(distance, 0):
            raise InvalidSampleError(f"'d' must be a natural number, got {distance!r}",
                                     player_id=player_id, entity_id=entity_id, distance=distance)

        pair = (player_id, entity_id)
        if self.unique_pairs and pair in self._pairs:
            raise SampleConflictError(player_id, entity_id)

        sample = Sample(player_id=player_id, entity_id=entity_id, distance=distance)
        self._samples[player_id][entity_id].append(sample)
        self._totals[player_id] += distance
        self._counts[player_id] += 1
        self._pairs.add(pair)
        return sample

    def insert_many(self, rows) -> int:
        """Insert (player_id, entity_id, distance) rows; returns number inserted."""
        inserted = 0
        for player_id, entity_id, distance in rows:
            self.insert_sample(player_id, entity_id, distance)
            inserted += 1
        self.logger.info(f"Inserted {inserted} samples")
        return inserted

    @staticmethod
    def _valid_natural(value, minimum: int) -> bool:
        return isinstance(value, int) and not isinstance(value, bool) and value >= minimum

    def fetch_samples_grouped_by_entity(self, player_id: int) -> Dict[int, List[Sample]]:
        groups = self._samples.get(player_id, {})
        return {entity_id: list(groups[entity_id]) for entity_id in sorted(groups)}

    def fetch_average_distance(self, player_id: int) -> float:
        count = self._counts.get(player_id, 0)
        if count == 0:
            raise UnknownPlayerError(player_id)
        return self._totals[player_id] / count

    def fetch_all_player_averages(self, excluding: int) -> List[PlayerAggregate]:
        return [PlayerAggregate(player_id=player_id,
                                average_distance=self._totals[player_id] / self._counts[player_id])
                for player_id in sorted(self._counts)
                if player_id != excluding and self._counts[player_id] > 0]

    def player_ids(self) -> List[int]:
        return sorted(player_id for player_id, count in self._counts.items() if count > 0)

    def __len__(self) -> int:
        return sum(self._counts.values())
