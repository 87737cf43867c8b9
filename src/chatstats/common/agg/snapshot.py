from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from chatstats.common.agg.gaps import GapRecord, GapTracker
from chatstats.common.agg.tally import MessageTally
from chatstats.common.buckets import Band, Season
from chatstats.common.defaults import DAY_SECONDS, HOUR_SECONDS


@dataclass(frozen=True)
class AggregateSnapshot:
    first_year: int
    sent_count: int
    received_count: int
    total_length: int
    average_length: Optional[float]
    length_std: float
    year_counts: Tuple[int, ...]
    month_counts: Tuple[int, ...]
    season_counts: Dict[Season, int]
    band_counts: Dict[Band, int]
    gap_records: Tuple[GapRecord, ...]

    @property
    def total_count(self) -> int:
        return self.sent_count + self.received_count

    def years(self) -> List[Tuple[int, int]]:
        return [(self.first_year + i, count) for i, count in enumerate(self.year_counts)]

    def droughts(self) -> List[GapRecord]:
        """
        Held gaps, longest first; equal durations keep the earlier gap first.
        """
        return sorted(self.gap_records, key=lambda g: (-g.duration, g.start))


def build_snapshot(first_year: int, tally: MessageTally, gaps: GapTracker) -> AggregateSnapshot:
    return AggregateSnapshot(
        first_year=first_year,
        sent_count=tally.sent_count,
        received_count=tally.received_count,
        total_length=tally.total_length,
        average_length=tally.average_length(),
        length_std=tally.length_stats.std(),
        year_counts=tuple(tally.year_counts),
        month_counts=tuple(tally.month_counts),
        season_counts=tally.season_counts(),
        band_counts=dict(tally.band_counts),
        gap_records=tuple(gaps.snapshot()),
    )


def split_duration(seconds: int) -> Tuple[int, int, int, int]:
    days = seconds // DAY_SECONDS
    hours = (seconds // HOUR_SECONDS) % 24
    minutes = (seconds // 60) % 60
    return days, hours, minutes, seconds % 60


def format_duration(seconds: int) -> str:
    days, hours, minutes, secs = split_duration(seconds)
    return f"{days} days, {hours} hours, {minutes} minutes, {secs} seconds"
