import re
from datetime import datetime

import pytest

from termtoys.timeago import iso_ago, iso_time, time_ago

UNITS = ["s", "minutes", "hours", "day", "weeks", "months", "years",
         "decades", "hundred years"]
PATTERN = re.compile(r"^(\d+) (s|minutes|hours|day|weeks|months|years|decades|hundred years) ago$")
NOW = 2_000_000_000


def test_zero_difference():
    assert time_ago(1000, now=1000) == "0 s"


def test_seconds_in_past():
    assert time_ago(NOW - 90, now=NOW) == "90 s ago"


@pytest.mark.parametrize("delta", [5, 200, 10_000, 500_000, 5_000_000, 40_000_000,
                                   900_000_000, 9_000_000_000, 90_000_000_000])
def test_future_mirrors_past(delta):
    past = time_ago(NOW - delta, now=NOW)
    future = time_ago(NOW + delta, now=NOW)
    assert past.endswith(" ago")
    assert future == "in " + past[: -len(" ago")]


def test_units_never_shrink_as_delta_grows():
    deltas = [1, 60, 100, 3600, 6000, 86_400, 300_000, 3_000_000, 10_000_000,
              50_000_000, 300_000_000, 3_000_000_000, 30_000_000_000]
    indexes = []
    for delta in deltas:
        match = PATTERN.match(time_ago(NOW - delta, now=NOW))
        assert match is not None
        indexes.append(UNITS.index(match.group(2)))
    assert indexes == sorted(indexes)
    assert indexes[-1] == UNITS.index("hundred years")


def _local(*args):
    return datetime(*args).timestamp()


def test_iso_ago_hours_minutes_today():
    now = _local(2021, 8, 15, 12, 0, 30)
    assert iso_ago("10:00", now) == time_ago(now - 7200, now)


def test_iso_ago_full_datetime_both_separators():
    now = _local(2021, 8, 15, 12, 0, 30)
    expected = time_ago(_local(2021, 8, 15, 11, 0, 0), now)
    assert iso_ago("2021-08-15T11:00:00", now) == expected
    assert iso_ago("2021-08-15 11:00:00", now) == expected


def test_iso_ago_date_only_keeps_partial_fields():
    now = _local(2021, 8, 15, 12, 0, 30)
    expected = time_ago(_local(2020, 2, 19, 20, 0, 30), now)
    assert iso_ago("2020-02-19", now) == expected


def test_iso_ago_year_only():
    now = _local(2021, 8, 15, 12, 0, 30)
    expected = time_ago(_local(2019, 8, 15, 20, 0, 30), now)
    assert iso_ago("2019", now) == expected


def test_iso_ago_unparsable_returns_input():
    assert iso_ago("hello", NOW) == "hello"


def test_iso_time_shape_and_round_trip():
    stamp = iso_time(1_600_000_000)
    assert re.fullmatch(r"\d{4}-\d\d-\d\dT\d\d:\d\d:\d\d[+-]\d{4}", stamp)
    parsed = datetime.strptime(stamp, "%Y-%m-%dT%H:%M:%S%z")
    assert parsed.timestamp() == 1_600_000_000


def test_iso_time_datetime_matches_epoch():
    moment = datetime.fromtimestamp(1_500_000_000)
    assert iso_time(moment) == iso_time(1_500_000_000)