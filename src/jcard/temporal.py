"""Date and time value syntaxes of jCard (RFC 7095 section 3.5).

jCard uses the extended ISO 8601 forms with reduced precision and truncation:
``1985``, ``1985-04``, ``--04-12``, ``---12`` for dates and ``23``, ``23:20``,
``-20:50``, ``--50`` for times. Fractional seconds are not accepted.
"""
from __future__ import annotations

import calendar
import re

_DAYS_IN_MONTH = (31, 29, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)

_FULL_DATE = re.compile(r"(\d{4})-(\d{2})-(\d{2})")
_YEAR_MONTH = re.compile(r"(\d{4})-(\d{2})")
_YEAR = re.compile(r"\d{4}")
_MONTH_DAY = re.compile(r"--(\d{2})-(\d{2})")
_MONTH = re.compile(r"--(\d{2})")
_DAY = re.compile(r"---(\d{2})")

_ZONE = r"(?:Z|[+-](\d{2})(?::?(\d{2}))?)"
_HOUR_FORMS = re.compile(rf"(\d{{2}})(?::(\d{{2}})(?::(\d{{2}}))?)?{_ZONE}?")
_MINUTE_FORMS = re.compile(r"-(\d{2})(?::(\d{2}))?")
_SECOND = re.compile(r"--(\d{2})")

_UTC_OFFSET = re.compile(r"Z|[+-][01]\d[0-5]\d")
_TIMESTAMP = re.compile(r"(\d{4})(\d{2})(\d{2})T(\d{2})(\d{2})(\d{2})(?:Z|[+-](\d{2}))?")


def _valid_month_day(month: int, day: int, year: int | None = None) -> bool:
    if not 1 <= month <= 12 or day < 1:
        return False
    if month == 2 and year is not None and not calendar.isleap(year):
        return day <= 28
    return day <= _DAYS_IN_MONTH[month - 1]


def _valid_clock(hour: str | None, minute: str | None, second: str | None) -> bool:
    if hour is not None and int(hour) > 23:
        return False
    if minute is not None and int(minute) > 59:
        return False
    return second is None or int(second) <= 59


def validate_date(value: str) -> bool:
    m = _FULL_DATE.fullmatch(value)
    if m:
        return _valid_month_day(int(m[2]), int(m[3]), int(m[1]))
    m = _YEAR_MONTH.fullmatch(value)
    if m:
        return 1 <= int(m[2]) <= 12
    if _YEAR.fullmatch(value):
        return True
    m = _MONTH_DAY.fullmatch(value)
    if m:
        return _valid_month_day(int(m[1]), int(m[2]))
    m = _MONTH.fullmatch(value)
    if m:
        return 1 <= int(m[1]) <= 12
    m = _DAY.fullmatch(value)
    if m:
        return 1 <= int(m[1]) <= 31
    return False


def _validate_hour_led_time(value: str) -> bool:
    m = _HOUR_FORMS.fullmatch(value)
    if not m:
        return False
    hour, minute, second, zone_hour, zone_minute = m.groups()
    return _valid_clock(hour, minute, second) and _valid_clock(zone_hour, zone_minute, None)


def validate_time(value: str) -> bool:
    if _validate_hour_led_time(value):
        return True
    m = _MINUTE_FORMS.fullmatch(value)
    if m:
        return _valid_clock(None, m[1], m[2])
    m = _SECOND.fullmatch(value)
    if m:
        return _valid_clock(None, None, m[1])
    return False


def validate_date_time(value: str) -> bool:
    """A date, a literal ``T`` and a time that starts with the hour."""
    parts = value.split("T")
    if len(parts) != 2:
        return False
    date, time = parts
    return validate_date(date) and _validate_hour_led_time(time)


def validate_date_and_or_time(value: str) -> bool:
    return validate_date(value) or validate_time(value) or validate_date_time(value)


def validate_utc_offset(value: str) -> bool:
    return _UTC_OFFSET.fullmatch(value) is not None


def validate_timestamp(value: str) -> bool:
    # only an hour offset is accepted after the seconds, e.g. 19961022T140000-05
    m = _TIMESTAMP.fullmatch(value)
    if not m:
        return False
    year, month, day, hour, minute, second, zone_hour = m.groups()
    if not _valid_month_day(int(month), int(day), int(year)):
        return False
    return _valid_clock(hour, minute, second) and _valid_clock(zone_hour, None, None)
