"""Java ``Date.toString`` style renderer."""

from __future__ import annotations

from io import StringIO

from epochdate._utils import to_12_hour
from epochdate.fields import CalendarFields
from epochdate.render._base import Renderer


class JavaRenderer(Renderer):
    """Renders e.g. ``Thu Jul 18 12:43:25 AM EST 2024``."""

    def write(self, w: StringIO, fields: CalendarFields) -> None:
        hour, meridiem = to_12_hour(fields.hour)
        w.write(
            f"{fields.day_of_week_abbreviation} {fields.month_abbreviation} "
            f"{fields.day} {hour:02d}:{fields.minute:02d}:{fields.second:02d} "
            f"{meridiem} {fields.timezone.name} {fields.year}"
        )
