"""ISO-8601 renderers."""

from __future__ import annotations

from io import StringIO

from epochdate.fields import CalendarFields
from epochdate.render._base import Renderer


def _write_date(w: StringIO, fields: CalendarFields) -> None:
    w.write(f"{fields.year:04d}-{fields.month:02d}-{fields.day:02d}")


class ISO8601Renderer(Renderer):
    """Renders e.g. ``2023-10-05T15:30:00.000-05:00``.

    A zero offset is written as ``Z`` regardless of the timezone name.
    """

    def write(self, w: StringIO, fields: CalendarFields) -> None:
        _write_date(w, fields)
        w.write(
            f"T{fields.hour:02d}:{fields.minute:02d}:{fields.second:02d}"
            f".{fields.millisecond:03d}"
        )
        if fields.timezone.offset_minutes == 0:
            w.write("Z")
        else:
            w.write(fields.timezone.format())


class ISO8601DateRenderer(Renderer):
    """Renders the date only, e.g. ``2023-10-05``."""

    def write(self, w: StringIO, fields: CalendarFields) -> None:
        _write_date(w, fields)
