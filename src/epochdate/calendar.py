"""Conversion between Unix-epoch instants and calendar fields."""

from __future__ import annotations

import time

from epochdate import _gregorian
from epochdate._constants import (
    MS_PER_DAY,
    MS_PER_HOUR,
    MS_PER_MINUTE,
    MS_PER_SECOND,
)
from epochdate._errors import ERR_MSG_DOMAIN_UNDERFLOW, DomainUnderflowError
from epochdate.fields import CalendarFields
from epochdate.timezone import UTC, TimezoneOffset


def to_calendar(instant: int, timezone: TimezoneOffset | None = None) -> CalendarFields:
    """Decompose an instant into calendar fields under a timezone offset.

    Args:
        instant: Milliseconds since 1970-01-01T00:00:00Z.
        timezone: Offset to apply. Defaults to UTC.

    Returns:
        CalendarFields carrying ``timezone`` unchanged.

    Raises:
        DomainUnderflowError: If ``instant`` is negative, or applying a
            negative offset moves it before the epoch.
    """
    if timezone is None:
        timezone = UTC

    if instant < 0:
        raise DomainUnderflowError(
            ERR_MSG_DOMAIN_UNDERFLOW,
            f"instant {instant} is negative",
        )

    shifted = instant + timezone.offset_milliseconds
    if shifted < 0:
        raise DomainUnderflowError(
            ERR_MSG_DOMAIN_UNDERFLOW,
            f"instant {instant} shifted by {timezone.format()} is {shifted}",
        )

    days, ms_of_day = divmod(shifted, MS_PER_DAY)
    year, month, day = _gregorian.date_from_days(days)

    return CalendarFields(
        year=year,
        month=month,
        day=day,
        hour=ms_of_day // MS_PER_HOUR,
        minute=(ms_of_day % MS_PER_HOUR) // MS_PER_MINUTE,
        second=(ms_of_day % MS_PER_MINUTE) // MS_PER_SECOND,
        millisecond=ms_of_day % MS_PER_SECOND,
        timezone=timezone,
    )


def to_instant(fields: CalendarFields) -> int:
    """Convert calendar fields back to milliseconds since the epoch.

    This is the exact inverse of :func:`to_calendar`. Field values are not
    range checked; the result is only meaningful for valid dates.

    Raises:
        DomainUnderflowError: If the fields describe a moment before the epoch
            once the timezone offset is removed.
    """
    days = _gregorian.days_from_date(fields.year, fields.month, fields.day)
    local = (
        days * MS_PER_DAY
        + fields.hour * MS_PER_HOUR
        + fields.minute * MS_PER_MINUTE
        + fields.second * MS_PER_SECOND
        + fields.millisecond
    )

    instant = local - fields.timezone.offset_milliseconds
    if instant < 0:
        raise DomainUnderflowError(
            ERR_MSG_DOMAIN_UNDERFLOW,
            f"{fields.year:04d}-{fields.month:02d}-{fields.day:02d} at "
            f"{fields.timezone.format()} resolves to instant {instant}",
        )
    return instant


def now(timezone: TimezoneOffset | None = None) -> CalendarFields:
    """Return the current wall-clock time as calendar fields."""
    return to_calendar(time.time_ns() // 1_000_000, timezone)
