"""
Online Statistics Accumulator
Single pass count/min/max/mean/variance using Welford's update
"""

from dataclasses import dataclass
from typing import Iterable, Optional


@dataclass(frozen=True)
class StatsSummary:
    """Snapshot of accumulated statistics."""
    count: int
    min: int
    max: int
    mean: float
    variance: Optional[float]  # sample variance, None below two observations


class OnlineStatsAccumulator:
    """Accumulates descriptive statistics without retaining the samples."""

    def __init__(self):
        self.count = 0
        self.min: Optional[int] = None
        self.max: Optional[int] = None
        self.mean = 0.0
        self._sq_diff = 0.0  # sum of squared deviations from the running mean

    def add(self, value: int):
        """Fold one observation into the running statistics."""
        self.count += 1
        if self.count == 1:
            self.min = value
            self.max = value
        else:
            if value < self.min:
                self.min = value
            if value > self.max:
                self.max = value

        delta = value - self.mean
        self.mean += delta / self.count
        delta2 = value - self.mean
        self._sq_diff += delta * delta2

    def extend(self, values: Iterable[int]) -> 'OnlineStatsAccumulator':
        for value in values:
            self.add(value)
        return self

    @property
    def variance(self) -> Optional[float]:
        if self.count < 2:
            return None
        return self._sq_diff / (self.count - 1)

    def summary(self) -> StatsSummary:
        """Get the statistics accumulated so far."""
        if self.count == 0:
            raise ValueError("No observations accumulated")
        return StatsSummary(
            count=self.count,
            min=self.min,
            max=self.max,
            mean=self.mean,
            variance=self.variance,
        )
