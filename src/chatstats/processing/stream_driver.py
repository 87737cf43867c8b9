from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Iterable, Iterator, Optional, Tuple

from chatstats.common.agg.gaps import EvictionPolicy, GapRecord, GapTracker
from chatstats.common.agg.snapshot import AggregateSnapshot, build_snapshot, format_duration
from chatstats.common.agg.tally import MessageTally
from chatstats.common.buckets import Band, CalendarClassifier, MONTH_NAMES, Season
from chatstats.common.errors import NonMonotonicInputError
from chatstats.data.message_data import MessageData
from chatstats.interfaces.processor import Processor
from chatstats.interfaces.reportable import Reportable


class DriverState(Enum):
    EMPTY = "empty"
    SEEDED = "seeded"
    RUNNING = "running"


class StreamDriver(Processor[MessageData], Reportable):
    """
    Feeds accepted messages through the classifier, the tally and the gap tracker.

    The driver owns the cursor (timestamp of the last accepted message). The
    first in-range message only seeds it; every later one closes a gap from the
    cursor to itself. Messages outside the year range are skipped without
    touching the cursor, so gaps only ever span accepted messages.
    """

    def __init__(
            self,
            first_year: int,
            last_year: int,
            capacity: int,
            policy: EvictionPolicy = EvictionPolicy.LEAF,
    ):
        super().__init__()
        self.__classifier = CalendarClassifier(first_year, last_year)
        self.__tally = MessageTally.zeroed(self.__classifier.num_years)
        self.__gaps = GapTracker(capacity, policy)
        self.__cursor: Optional[datetime] = None
        self.__state = DriverState.EMPTY
        self.__out_of_range = 0

    @property
    def state(self) -> DriverState:
        return self.__state

    @property
    def cursor(self) -> Optional[datetime]:
        return self.__cursor

    @property
    def out_of_range_count(self) -> int:
        return self.__out_of_range

    def execute(self, data: MessageData) -> None:
        self.feed(data.date, data.is_from_me, data.length)

    def feed(self, timestamp: datetime, is_from_me: bool, length: int) -> bool:
        """
        Processes one message. Returns False when it was outside the year range.

        :raises NonMonotonicInputError: timestamp is earlier than the cursor;
            nothing is recorded for the offending message.
        """
        classification = self.__classifier.classify(timestamp)
        if classification is None:
            self.__out_of_range += 1
            return False

        gap = None
        if self.__state is not DriverState.EMPTY:
            if timestamp < self.__cursor:
                raise NonMonotonicInputError(timestamp, self.__cursor)
            gap = GapRecord.between(self.__cursor, timestamp)

        self.__tally.record(is_from_me, length, classification)

        if gap is None:
            self.__state = DriverState.SEEDED
        else:
            self.__gaps.observe(gap)
            self.__state = DriverState.RUNNING
        self.__cursor = timestamp
        return True

    def feed_all(self, events: Iterable[Tuple[datetime, bool, int]]) -> AggregateSnapshot:
        for timestamp, is_from_me, length in events:
            self.feed(timestamp, is_from_me, length)
        return self.snapshot()

    def snapshot(self) -> AggregateSnapshot:
        return build_snapshot(self.__classifier.first_year, self.__tally, self.__gaps)

    def report(self, context: Optional = None) -> Iterator[Tuple[str, Iterator[list]]]:
        snapshot = self.snapshot()

        def get_summary_data():
            average = snapshot.average_length
            yield ["Statistic", "Value"]
            yield ["Total", snapshot.total_count]
            yield ["Sent", snapshot.sent_count]
            yield ["Received", snapshot.received_count]
            yield ["Total Length", snapshot.total_length]
            yield ["Avg Msg Length", "No data" if average is None else average]
            yield ["Msg Length Std Dev", snapshot.length_std]
            yield ["Out of Range", self.__out_of_range]

        def get_year_data():
            yield ["Year", "Messages"]
            for year, count in snapshot.years():
                yield [year, count]

        def get_month_data():
            yield ["Month", "Messages"]
            for name, count in zip(MONTH_NAMES, snapshot.month_counts):
                yield [name, count]

        def get_season_data():
            yield ["Season", "Messages"]
            for season in Season:
                yield [season.value, snapshot.season_counts[season]]

        def get_band_data():
            yield ["Time of Day", "Messages"]
            for band in Band:
                yield [band.value, snapshot.band_counts[band]]

        def get_drought_data():
            yield ["Duration", "Seconds", "Start", "End"]
            for gap in snapshot.droughts():
                yield [
                    format_duration(gap.duration),
                    gap.duration,
                    gap.start.strftime("%Y-%m-%d %H:%M:%S"),
                    gap.end.strftime("%Y-%m-%d %H:%M:%S"),
                ]

        yield "Summary", get_summary_data()
        yield "Years", get_year_data()
        yield "Months", get_month_data()
        yield "Seasons", get_season_data()
        yield "Time of Day", get_band_data()
        yield "Droughts", get_drought_data()

    @property
    def create_data_table(self) -> bool:
        return True
