"""
Zone Classifier
Maps a distance in centimeters onto Hall's proxemic zones
"""

import logging
from typing import Dict, List, Optional, Tuple

from .errors import InvalidConfigurationError
from .models import Zone

DEFAULT_PROXEMIC_ZONES = {
    'intimate': (0, 45),
    'personal': (45, 120),
    'social': (120, 360),
    'public': (360, float('inf')),
}


class ZoneClassifier:
    """Classifies distances into contiguous proxemic zones."""

    def __init__(self, config: Optional[dict] = None):
        """Initialize classifier with the zone table from configuration."""
        config = config or {}
        self.logger = logging.getLogger(__name__)

        zone_table = config.get('proxemic_zones', DEFAULT_PROXEMIC_ZONES)
        self.boundaries: List[Tuple[float, float, Zone]] = self._validate_zones(zone_table)

        # Lower bounds of personal, social, public
        self._thresholds = [lower for lower, _, _ in self.boundaries[1:]]

    def _validate_zones(self, zone_table: Dict[str, Tuple[float, float]]) -> List[Tuple[float, float, Zone]]:
        """Check the table covers [0, inf) with the four zones in order."""
        names = {zone.value for zone in Zone}
        if set(zone_table.keys()) != names:
            raise InvalidConfigurationError(
                f"proxemic_zones must define exactly {sorted(names)}, got {sorted(zone_table)}")

        boundaries = []
        expected_lower = 0
        for zone in Zone:
            lower, upper = zone_table[zone.value]
            if lower != expected_lower:
                raise InvalidConfigurationError(
                    f"Zone '{zone.value}' starts at {lower}, expected {expected_lower}")
            if upper <= lower:
                raise InvalidConfigurationError(
                    f"Zone '{zone.value}' is empty: [{lower}, {upper})")
            boundaries.append((lower, upper, zone))
            expected_lower = upper

        if expected_lower != float('inf'):
            raise InvalidConfigurationError(
                f"Public zone must be unbounded, ends at {expected_lower}")

        self.logger.debug(f"Zone thresholds: {[(z.value, lo) for lo, _, z in boundaries]}")
        return boundaries

    def classify(self, distance: int) -> Zone:
        """Classify a non-negative distance; lower bounds are inclusive."""
        if distance < self._thresholds[0]:
            return Zone.INTIMATE
        if distance < self._thresholds[1]:
            return Zone.PERSONAL
        if distance < self._thresholds[2]:
            return Zone.SOCIAL
        return Zone.PUBLIC

    def zone_range(self, zone: Zone) -> Tuple[float, float]:
        """Get the [lower, upper) range of a zone."""
        for lower, upper, candidate in self.boundaries:
            if candidate == zone:
                return lower, upper
        raise KeyError(zone)
