from typing import Dict, Optional, TextIO

from chatstats.common.agg.snapshot import AggregateSnapshot, format_duration
from chatstats.common.buckets import Band, MONTH_NAMES, Season
from chatstats.common.utils import format_average
from chatstats.data.message_data import MessageData


class TranscriptReport:
    """
    Plain text transcript of a conversation followed by its statistics.

    Message lines are written while the pipeline runs; write_summary() appends
    the statistics block once the source is exhausted.
    """

    def __init__(self, transcript_file: str, your_name: str, their_name: str,
                 stream: Optional[TextIO] = None):
        self.__transcript_file = transcript_file
        self.__your_name = your_name
        self.__their_name = their_name
        self.__file = stream if stream is not None else open(transcript_file, 'w', encoding='utf-8')
        self.__owns_file = stream is None

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()

    def write_message(self, data: MessageData) -> None:
        name = self.__your_name if data.is_from_me else self.__their_name
        self.__file.write(f"{data.get_field('date_text') or data.date} {name}: {data.text}\n")

    def write_summary(
            self,
            snapshot: AggregateSnapshot,
            *,
            reactions: int = 0,
            drawn: int = 0,
            expressive: int = 0,
            exact_counts: Optional[Dict[str, int]] = None,
            substr_counts: Optional[Dict[str, int]] = None,
    ) -> None:
        f = self.__file
        f.write("\nMsg Counts:\n")
        f.write(f"Total: {snapshot.total_count}\n")
        f.write(f"Sent: {snapshot.sent_count}\n")
        f.write(f"Received: {snapshot.received_count}\n")
        f.write(f"Reactions: {reactions}\n")
        f.write(f"Drawn: {drawn}\n")
        f.write(f"Expressive: {expressive}\n")

        f.write("Exact Counts:\n")
        for phrase, count in (exact_counts or {}).items():
            f.write(f"{phrase}: {count}\n")

        f.write("\nSubstr Counts:\n")
        for phrase, count in (substr_counts or {}).items():
            f.write(f"{phrase} (substr): {count}\n")

        f.write(f"Avg Msg Length: {format_average(snapshot.average_length)}\n\n")

        f.write("Msg times:\n")
        width = max(len(band.value) for band in Band) + 1
        for band in Band:
            f.write(f"{band.value + ':':<{width}} {snapshot.band_counts[band]}\n")

        f.write("\nYears:\n")
        for year, count in snapshot.years():
            f.write(f"{year}: {count}\n")

        f.write("\nMonths:\n")
        for name, count in zip(MONTH_NAMES, snapshot.month_counts):
            f.write(f"{name}: {count}\n")

        f.write("\nSeasons:\n")
        width = max(len(season.value) for season in Season) + 1
        for season in Season:
            f.write(f"{season.value + ':':<{width}} {snapshot.season_counts[season]}\n")
        f.write("\n")

        for gap in snapshot.droughts():
            f.write(f"{format_duration(gap.duration)}\n")
            f.write(f"{gap.start.strftime('%c')}\n")
            f.write(f"{gap.end.strftime('%c')}\n\n")

    def close(self):
        if self.__owns_file and not self.__file.closed:
            self.__file.close()
