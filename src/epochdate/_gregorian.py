"""Proleptic Gregorian calendar arithmetic anchored at the Unix epoch."""

from __future__ import annotations

from epochdate._constants import EPOCH_DAY_OF_WEEK, EPOCH_YEAR

DAYS_IN_MONTH: tuple[int, ...] = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)
"""Month lengths of a common year."""

DAYS_IN_MONTH_LEAP: tuple[int, ...] = (DAYS_IN_MONTH[0], DAYS_IN_MONTH[1] + 1) + DAYS_IN_MONTH[2:]

DAY_OF_WEEK_ABBREVIATIONS: tuple[str, ...] = ("Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat")

MONTH_ABBREVIATIONS: tuple[str, ...] = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)


def is_leap_year(year: int) -> bool:
    """Return True if ``year`` has a February 29th."""
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


def days_in_year(year: int) -> int:
    return 366 if is_leap_year(year) else 365


def month_table(year: int) -> tuple[int, ...]:
    """Return the twelve month lengths for ``year``."""
    return DAYS_IN_MONTH_LEAP if is_leap_year(year) else DAYS_IN_MONTH


def days_in_month(year: int, month: int) -> int:
    return month_table(year)[month - 1]


def leap_days_before(year: int) -> int:
    """Count the leap days in the years from 1970 up to, not including, ``year``.

    The offsets anchor each correction term at the first year after the epoch
    it applies to: 1972 for the four-year rule, 2000 for the century
    exception and 2000 again for the 400-year rule.
    """
    return (year - 1969) // 4 - (year - 1901) // 100 + (year - 1601) // 400


def days_from_date(year: int, month: int, day: int) -> int:
    """Convert a calendar date to the number of days since 1970-01-01."""
    days = (year - EPOCH_YEAR) * 365 + leap_days_before(year)
    days += sum(DAYS_IN_MONTH[: month - 1])
    if month > 2 and is_leap_year(year):
        days += 1
    return days + day - 1


def date_from_days(days: int) -> tuple[int, int, int]:
    """Convert days since 1970-01-01 to ``(year, month, day)``.

    Years and months are resolved by linear scan, subtracting whole years and
    then whole months while the remainder still covers them.
    """
    year = EPOCH_YEAR
    while days >= days_in_year(year):
        days -= days_in_year(year)
        year += 1

    table = month_table(year)
    month = 0
    while days >= table[month]:
        days -= table[month]
        month += 1

    return year, month + 1, days + 1


def day_of_week(days: int) -> int:
    """Weekday of the given epoch day, Sunday = 0."""
    return (days + EPOCH_DAY_OF_WEEK) % 7
