from __future__ import annotations

from dataclasses import dataclass, field
from math import sqrt
from typing import Dict, List, Optional

from chatstats.common.buckets import Band, Classification, SEASON_BY_MONTH, Season


@dataclass
class RunningStats:
    n: int = 0
    mean: float = 0.0
    M2: float = 0.0

    def add(self, x: float) -> None:
        n = self.n + 1
        mean = self.mean
        M2 = self.M2

        # Inline welford
        delta = x - mean
        mean += delta / n
        delta2 = x - mean
        M2 += delta * delta2

        self.n = n
        self.mean = mean
        self.M2 = M2

    def std(self) -> float:
        return sqrt(self.M2 / (self.n - 1)) if self.n > 1 else 0.0


@dataclass
class MessageTally:
    """
    Accumulates the scalar totals and calendar bucket counts of accepted messages.

    Created zeroed for a number of years; record() is the only mutator and
    every counter it touches only ever grows.
    """
    num_years: int
    sent_count: int = 0
    received_count: int = 0
    total_length: int = 0
    year_counts: List[int] = field(default_factory=list)
    month_counts: List[int] = field(default_factory=lambda: [0] * 12)
    band_counts: Dict[Band, int] = field(default_factory=lambda: {band: 0 for band in Band})
    length_stats: RunningStats = field(default_factory=RunningStats)

    def __post_init__(self):
        if not self.year_counts:
            self.year_counts = [0] * self.num_years

    @classmethod
    def zeroed(cls, num_years: int) -> MessageTally:
        return cls(num_years=num_years)

    def record(self, is_from_me: bool, length: int, classification: Classification) -> None:
        if is_from_me:
            self.sent_count += 1
        else:
            self.received_count += 1

        self.total_length += length
        self.length_stats.add(float(length))

        self.year_counts[classification.year_index] += 1
        self.month_counts[classification.month - 1] += 1
        self.band_counts[classification.band] += 1

    @property
    def total_count(self) -> int:
        return self.sent_count + self.received_count

    def season_counts(self) -> Dict[Season, int]:
        seasons = {season: 0 for season in Season}
        for month, count in enumerate(self.month_counts, start=1):
            seasons[SEASON_BY_MONTH[month]] += count
        return seasons

    def average_length(self) -> Optional[float]:
        # None marks "no data"; zero messages has no meaningful average
        if self.total_count == 0:
            return None
        return self.total_length / self.total_count
