from __future__ import annotations

import pytest

from jcard.temporal import (
    validate_date,
    validate_date_and_or_time,
    validate_date_time,
    validate_time,
    validate_timestamp,
    validate_utc_offset,
)


@pytest.mark.parametrize("value", [
    "1985-04-12", "1985-04", "1985", "--04-12", "--04", "---12", "2000-02-29", "--02-29",
])
def test_valid_dates(value):
    assert validate_date(value)


@pytest.mark.parametrize("value", [
    "1985-02-29", "1985-13", "1985-04-31", "85-04-12", "--13", "---32", "19850412", "",
])
def test_invalid_dates(value):
    assert not validate_date(value)


@pytest.mark.parametrize("value", [
    "23", "23:20", "23:20:50", "-20:50", "-20", "--50", "10:22:00Z", "10:22:00+0200", "14:30:00-05:00",
])
def test_valid_times(value):
    assert validate_time(value)


@pytest.mark.parametrize("value", ["24", "23:60", "23:20:61", "23:20:50.5", "--60", "noon"])
def test_invalid_times(value):
    assert not validate_time(value)


def test_date_time():
    assert validate_date_time("1996-10-22T14:00:00")
    assert validate_date_time("---22T14")
    assert validate_date_time("2009-08-08T14:30:00-05:00")
    assert not validate_date_time("1996-10-22")
    assert not validate_date_time("1996-10-22T-00:00")
    assert not validate_date_time("1996-10-22T14T00")


def test_date_and_or_time():
    assert validate_date_and_or_time("--02-03")
    assert validate_date_and_or_time("--50")
    assert validate_date_and_or_time("2009-08-08T14:30:00-05:00")
    assert not validate_date_and_or_time("circa 1800")


def test_utc_offset():
    for ok in ("Z", "-0500", "+1200", "+0000"):
        assert validate_utc_offset(ok)
    for bad in ("-05:00", "+0560", "0500", "+2500", ""):
        assert not validate_utc_offset(bad)


def test_timestamp():
    assert validate_timestamp("19961022T140000")
    assert validate_timestamp("19961022T140000Z")
    assert validate_timestamp("19961022T140000-05")
    assert not validate_timestamp("19961022T140000-05:00")
    assert not validate_timestamp("19961322T140000")
    assert not validate_timestamp("19961022T250000")
    assert not validate_timestamp("1996-10-22T14:00:00")
