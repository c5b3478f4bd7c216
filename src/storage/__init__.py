# src/storage/__init__.py
"""
Storage module for distance samples consumed by the insights engine
"""

from .sample_store import SampleStore, InMemorySampleStore
from .seed import seed_reference_players

__all__ = ['SampleStore', 'InMemorySampleStore', 'seed_reference_players']
