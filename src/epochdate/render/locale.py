"""JavaScript ``toLocaleString`` (en-US) style renderer."""

from __future__ import annotations

from io import StringIO

from epochdate._utils import to_12_hour
from epochdate.fields import CalendarFields
from epochdate.render._base import Renderer


class LocaleRenderer(Renderer):
    """Renders e.g. ``7/18/2024, 12:45:52 AM``."""

    def write(self, w: StringIO, fields: CalendarFields) -> None:
        hour, meridiem = to_12_hour(fields.hour)
        w.write(
            f"{fields.month}/{fields.day}/{fields.year}, "
            f"{hour}:{fields.minute:02d}:{fields.second:02d} {meridiem}"
        )
