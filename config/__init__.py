# config/__init__.py
"""
Configuration module for system parameters
"""

from .insights_config import PROXEMIC_ZONES, INSIGHTS_ANALYSIS, CLASSROOM_INSIGHTS

__all__ = ['PROXEMIC_ZONES', 'INSIGHTS_ANALYSIS', 'CLASSROOM_INSIGHTS']
