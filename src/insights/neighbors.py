"""
Neighbor Ranker
Ranks other players by the signed difference of their average distance
"""

import numpy as np
import logging
from typing import Iterable, List, Optional

from .errors import InvalidConfigurationError
from .models import NeighborEntry, PlayerAggregate


class NeighborRanker:
    """Finds the players whose average distance sits closest above or below a target."""

    def __init__(self, config: Optional[dict] = None):
        """Initialize ranker with neighbor limit from configuration."""
        config = config or {}
        self.logger = logging.getLogger(__name__)
        self.limit = self._validate_limit(config.get('neighbor_limit', 10))

    @staticmethod
    def _validate_limit(limit) -> int:
        if isinstance(limit, bool) or not isinstance(limit, (int, np.integer)) or limit < 1:
            raise InvalidConfigurationError(f"neighbor_limit must be a positive integer, got {limit!r}")
        return int(limit)

    def rank(self, target: PlayerAggregate, others: Iterable[PlayerAggregate],
             limit: Optional[int] = None) -> List[NeighborEntry]:
        """
        Rank others ascending by other.average_distance - target.average_distance.

        The delta is signed: a player who keeps closer to everything than
        the target ranks ahead of one who keeps slightly farther. Equal
        deltas are ordered by ascending player ID.
        """
        limit = self.limit if limit is None else self._validate_limit(limit)

        candidates = [other for other in others if other.player_id != target.player_id]
        if not candidates:
            return []

        player_ids = np.array([other.player_id for other in candidates], dtype=np.int64)
        deltas = np.array([other.average_distance for other in candidates], dtype=np.float64)
        deltas -= target.average_distance

        # lexsort sorts by the last key first
        order = np.lexsort((player_ids, deltas))[:limit]

        neighbors = [NeighborEntry(player_id=int(player_ids[i]), delta=float(deltas[i]))
                     for i in order]

        self.logger.debug(f"Ranked {len(candidates)} players against player {target.player_id}, "
                          f"kept {len(neighbors)}")
        return neighbors
