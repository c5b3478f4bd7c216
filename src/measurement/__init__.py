# src/measurement/__init__.py
"""
Measurement module for turning world positions into distance samples
"""

from .distance import ipd_between, ipds_from, as_position, InvalidPositionError

__all__ = ['ipd_between', 'ipds_from', 'as_position', 'InvalidPositionError']
