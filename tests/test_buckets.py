from datetime import datetime

import pytest

from chatstats.common.buckets import Band, CalendarClassifier, Season, band_for_hour


@pytest.fixture
def classifier() -> CalendarClassifier:
    return CalendarClassifier(2000, 2022)


@pytest.mark.parametrize("month, season", [
    (1, Season.WINTER), (2, Season.WINTER), (3, Season.SPRING),
    (4, Season.SPRING), (5, Season.SPRING), (6, Season.SUMMER),
    (7, Season.SUMMER), (8, Season.SUMMER), (9, Season.FALL),
    (10, Season.FALL), (11, Season.FALL), (12, Season.WINTER),
])
def test_month_to_season(classifier, month, season):
    c = classifier.classify(datetime(2010, month, 15, 12, 0, 0))
    assert c.month == month
    assert c.season is season


@pytest.mark.parametrize("hour, band", [
    (0, Band.NIGHT), (5, Band.NIGHT), (6, Band.MORNING), (11, Band.MORNING),
    (12, Band.AFTERNOON), (17, Band.AFTERNOON), (18, Band.EVENING),
    (21, Band.EVENING), (22, Band.NIGHT), (23, Band.NIGHT),
])
def test_hour_to_band(hour, band):
    assert band_for_hour(hour) is band


def test_band_ignores_minutes(classifier):
    assert classifier.classify(datetime(2010, 1, 1, 17, 59, 59)).band is Band.AFTERNOON
    assert classifier.classify(datetime(2010, 1, 1, 5, 59, 59)).band is Band.NIGHT


def test_year_index_is_offset_from_first_year(classifier):
    assert classifier.classify(datetime(2000, 1, 1)).year_index == 0
    assert classifier.classify(datetime(2022, 12, 31, 23, 59, 59)).year_index == 22
    assert classifier.num_years == 23


def test_out_of_range_years_are_signalled(classifier):
    assert classifier.classify(datetime(1999, 6, 1)) is None
    assert classifier.classify(datetime(2023, 1, 1)) is None
    assert not classifier.in_range(datetime(1999, 12, 31, 23, 59, 59))


def test_single_year_range():
    classifier = CalendarClassifier(2015, 2015)
    assert classifier.num_years == 1
    assert classifier.classify(datetime(2015, 7, 1)).year_index == 0


def test_inverted_range_rejected():
    with pytest.raises(ValueError):
        CalendarClassifier(2022, 2000)
