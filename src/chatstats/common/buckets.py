from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Optional


class Season(Enum):
    SPRING = "Spring"
    SUMMER = "Summer"
    FALL = "Fall"
    WINTER = "Winter"


class Band(Enum):
    MORNING = "Morning"
    AFTERNOON = "Afternoon"
    EVENING = "Evening"
    NIGHT = "Night"


MONTH_NAMES = [
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
]

# Month number -> season; December wraps into winter with January and February
SEASON_BY_MONTH = {
    1: Season.WINTER, 2: Season.WINTER, 3: Season.SPRING,
    4: Season.SPRING, 5: Season.SPRING, 6: Season.SUMMER,
    7: Season.SUMMER, 8: Season.SUMMER, 9: Season.FALL,
    10: Season.FALL, 11: Season.FALL, 12: Season.WINTER,
}


def band_for_hour(hour: int) -> Band:
    if 6 <= hour < 12:
        return Band.MORNING
    elif 12 <= hour < 18:
        return Band.AFTERNOON
    elif 18 <= hour < 22:
        return Band.EVENING
    return Band.NIGHT


@dataclass(frozen=True)
class Classification:
    year_index: int
    month: int
    season: Season
    band: Band


class CalendarClassifier:
    """
    Maps a local timestamp onto the year, month, season and time-of-day buckets.

    Years outside [first_year, last_year] are not an error: classify() returns
    None and the caller leaves the event out of every count.
    """

    def __init__(self, first_year: int, last_year: int):
        if first_year > last_year:
            raise ValueError(f"first year {first_year} is after last year {last_year}")
        self.__first_year = first_year
        self.__last_year = last_year

    @property
    def first_year(self) -> int:
        return self.__first_year

    @property
    def last_year(self) -> int:
        return self.__last_year

    @property
    def num_years(self) -> int:
        return self.__last_year - self.__first_year + 1

    def in_range(self, ts: datetime) -> bool:
        return self.__first_year <= ts.year <= self.__last_year

    def classify(self, ts: datetime) -> Optional[Classification]:
        if not self.in_range(ts):
            return None
        return Classification(
            year_index=ts.year - self.__first_year,
            month=ts.month,
            season=SEASON_BY_MONTH[ts.month],
            band=band_for_hour(ts.hour),
        )
