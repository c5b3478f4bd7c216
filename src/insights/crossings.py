"""
Crossing Tracker
Run-length history of zone occupancy over an ordered distance stream
"""

from typing import Iterable, List, Optional, Tuple

from .models import Run, Zone
from .zones import ZoneClassifier


class CrossingTracker:
    """
    Tracks consecutive zone occupancy for one entity.

    Each observed distance either extends the open run or closes it and
    opens a new one. The open run is included in history().
    """

    def __init__(self, classifier: ZoneClassifier):
        self.classifier = classifier
        self._closed: List[Run] = []
        self._zone: Optional[Zone] = None
        self._length = 0

    def add(self, distance: int) -> Zone:
        """Classify a distance and update the open run; returns its zone."""
        zone = self.classifier.classify(distance)
        if zone == self._zone:
            self._length += 1
        else:
            if self._zone is not None:
                self._closed.append(Run(zone=self._zone, length=self._length))
            self._zone = zone
            self._length = 1
        return zone

    def extend(self, distances: Iterable[int]) -> 'CrossingTracker':
        for distance in distances:
            self.add(distance)
        return self

    @property
    def crossing_count(self) -> int:
        """Number of zone changes observed so far."""
        return len(self._closed)

    @property
    def current_zone(self) -> Optional[Zone]:
        return self._zone

    def history(self) -> Tuple[Run, ...]:
        """Get all runs in order, including the one still open."""
        if self._zone is None:
            return ()
        return tuple(self._closed) + (Run(zone=self._zone, length=self._length),)
