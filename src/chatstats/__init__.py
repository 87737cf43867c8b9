from chatstats.common.agg.gaps import EvictionPolicy, GapRecord, GapTracker
from chatstats.common.agg.snapshot import AggregateSnapshot
from chatstats.common.agg.tally import MessageTally
from chatstats.common.buckets import Band, CalendarClassifier, Classification, Season
from chatstats.common.errors import NonMonotonicInputError
from chatstats.processing.stream_driver import DriverState, StreamDriver

__version__ = "1.0.0"

__all__ = [
    'AggregateSnapshot',
    'Band',
    'CalendarClassifier',
    'Classification',
    'DriverState',
    'EvictionPolicy',
    'GapRecord',
    'GapTracker',
    'MessageTally',
    'NonMonotonicInputError',
    'Season',
    'StreamDriver'
]
