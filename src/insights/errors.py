"""
Error types raised by the insights engine and its collaborators
"""

from typing import Optional


class InsightsError(Exception):
    """Base class for all insights engine errors."""


class InvalidConfigurationError(InsightsError, ValueError):
    """Configuration values that cannot drive a computation."""


class InvalidSampleError(InsightsError, ValueError):
    """A sample with a negative distance, a bad identifier, or the wrong entity."""

    def __init__(self, message: str, player_id: Optional[int] = None,
                 entity_id: Optional[int] = None, distance: Optional[int] = None):
        super().__init__(message)
        self.player_id = player_id
        self.entity_id = entity_id
        self.distance = distance


class EmptyGroupError(InsightsError):
    """An entity group reached the insight computer with no samples."""

    def __init__(self, entity_id: Optional[int] = None):
        super().__init__(f"Entity {entity_id} has no samples to analyze")
        self.entity_id = entity_id


class InsightsCancelled(InsightsError):
    """The caller signalled cancellation while insights were being computed."""


class SampleConflictError(InsightsError):
    """The store refused a sample that duplicates an existing one."""

    def __init__(self, player_id: int, entity_id: int):
        super().__init__(f"Cannot add the same distance pair twice "
                         f"(player {player_id}, entity {entity_id})")
        self.player_id = player_id
        self.entity_id = entity_id


class UnknownPlayerError(InsightsError, LookupError):
    """The store holds no samples for the requested player."""

    def __init__(self, player_id: int):
        super().__init__(f"No distance samples recorded for player {player_id}")
        self.player_id = player_id
