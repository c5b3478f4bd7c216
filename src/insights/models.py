"""
Record types shared by the insights engine
Samples in, per-entity insights and neighbor rankings out
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple


class Zone(str, Enum):
    """Proxemic zone, ordered by increasing distance."""
    INTIMATE = "intimate"
    PERSONAL = "personal"
    SOCIAL = "social"
    PUBLIC = "public"

    @property
    def order(self) -> int:
        return list(Zone).index(self)

    # str comparison would order zones alphabetically
    def __lt__(self, other):
        if not isinstance(other, Zone):
            return NotImplemented
        return self.order < other.order

    def __le__(self, other):
        if not isinstance(other, Zone):
            return NotImplemented
        return self.order <= other.order

    def __gt__(self, other):
        if not isinstance(other, Zone):
            return NotImplemented
        return self.order > other.order

    def __ge__(self, other):
        if not isinstance(other, Zone):
            return NotImplemented
        return self.order >= other.order


@dataclass(frozen=True)
class Sample:
    """One recorded distance between a player and an observed entity."""
    player_id: int
    entity_id: int
    distance: int  # centimeters


@dataclass(frozen=True)
class Run:
    """Maximal stretch of consecutive samples classified into the same zone."""
    zone: Zone
    length: int

    def to_dict(self) -> Dict[str, Any]:
        return {'zone': self.zone.value, 'length': self.length}


@dataclass(frozen=True)
class EntityInsight:
    """Descriptive statistics and zone history for one entity."""
    min: int
    max: int
    mean: float
    count: int
    variance: Optional[float]  # None when count == 1
    crossings: Tuple[Run, ...]

    @property
    def has_variance(self) -> bool:
        return self.variance is not None

    def to_dict(self) -> Dict[str, Any]:
        return {
            'min': self.min,
            'max': self.max,
            'mean': self.mean,
            'count': self.count,
            'variance': self.variance,
            'crossings': [run.to_dict() for run in self.crossings],
        }


@dataclass(frozen=True)
class PlayerAggregate:
    """Average recorded distance over all of a player's samples."""
    player_id: int
    average_distance: float


@dataclass(frozen=True)
class NeighborEntry:
    """Another player and the signed difference of their average distance."""
    player_id: int
    delta: float

    def to_dict(self) -> Dict[str, Any]:
        return {'id': self.player_id, 'neighbor_dist': self.delta}


@dataclass(frozen=True)
class InsightsResult:
    """Complete insight response for one player."""
    stats: Dict[int, EntityInsight]
    neighbors: Tuple[NeighborEntry, ...]
    zones: Dict[Zone, Tuple[int, ...]] = field(
        default_factory=lambda: {zone: () for zone in Zone})

    def to_dict(self) -> Dict[str, Any]:
        """Wire representation: stats keyed by stringified entity ID."""
        body: Dict[str, Any] = {
            'stats': {str(entity_id): insight.to_dict()
                      for entity_id, insight in self.stats.items()},
            'neighbors': [entry.to_dict() for entry in self.neighbors],
        }
        for zone in Zone:
            body[f'{zone.value}_space'] = list(self.zones.get(zone, ()))
        return body

    def entities_in(self, zone: Zone) -> List[int]:
        return list(self.zones.get(zone, ()))
