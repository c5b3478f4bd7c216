# src/insights/__init__.py
"""
Insights module for inter-personal distance analytics
Zone classification, running statistics, crossing history and neighbor ranking
"""

__version__ = "0.1.0"

from .models import Zone, Sample, Run, EntityInsight, PlayerAggregate, NeighborEntry, InsightsResult
from .errors import (InsightsError, InvalidSampleError, EmptyGroupError, InvalidConfigurationError,
                     InsightsCancelled, SampleConflictError, UnknownPlayerError)
from .zones import ZoneClassifier
from .running_stats import OnlineStatsAccumulator, StatsSummary
from .crossings import CrossingTracker
from .entity_insights import EntityInsightComputer
from .neighbors import NeighborRanker
from .orchestrator import InsightsOrchestrator

__all__ = [
    'Zone',
    'Sample',
    'Run',
    'EntityInsight',
    'PlayerAggregate',
    'NeighborEntry',
    'InsightsResult',
    'InsightsError',
    'InvalidSampleError',
    'EmptyGroupError',
    'InvalidConfigurationError',
    'InsightsCancelled',
    'SampleConflictError',
    'UnknownPlayerError',
    'ZoneClassifier',
    'OnlineStatsAccumulator',
    'StatsSummary',
    'CrossingTracker',
    'EntityInsightComputer',
    'NeighborRanker',
    'InsightsOrchestrator',
]
