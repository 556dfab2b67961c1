"""Calendar field types."""

from __future__ import annotations

from dataclasses import dataclass

from epochdate import _gregorian
from epochdate.timezone import UTC, TimezoneOffset


@dataclass(frozen=True)
class CalendarFields:
    """The decomposition of an instant under one timezone offset.

    Fields are trusted as given: no range validation happens on
    construction. ``day_of_week`` is derived from the date rather than stored.
    """

    year: int
    month: int
    day: int
    hour: int = 0
    minute: int = 0
    second: int = 0
    millisecond: int = 0
    timezone: TimezoneOffset = UTC

    @property
    def day_of_week(self) -> int:
        """Day of the week, Sunday = 0."""
        return _gregorian.day_of_week(
            _gregorian.days_from_date(self.year, self.month, self.day)
        )

    @property
    def day_of_week_abbreviation(self) -> str:
        return _gregorian.DAY_OF_WEEK_ABBREVIATIONS[self.day_of_week]

    @property
    def month_abbreviation(self) -> str:
        return _gregorian.MONTH_ABBREVIATIONS[self.month - 1]

    @property
    def is_leap_year(self) -> bool:
        return _gregorian.is_leap_year(self.year)
