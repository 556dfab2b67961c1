"""epochdate - Convert Unix-epoch millisecond instants to calendar fields and text."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("epochdate")
except PackageNotFoundError:  # running from a source checkout
    __version__ = "0.0.0.dev0"

from epochdate._errors import (
    DateError,
    DomainUnderflowError,
    InvalidFormatError,
    InvalidTimeError,
    TimezoneLookupError,
)
from epochdate.calendar import now, to_calendar, to_instant
from epochdate.fields import CalendarFields
from epochdate.render import (
    ISO8601DateRenderer,
    ISO8601Renderer,
    JavaRenderer,
    LocaleRenderer,
    Renderer,
    get_renderer,
)
from epochdate.system import fetch_system_timezone
from epochdate.timezone import GMT, UTC, TimezoneOffset

__all__ = [
    "now",
    "to_string",
    "to_calendar",
    "to_instant",
    "fetch_system_timezone",
    "get_renderer",
    "CalendarFields",
    "TimezoneOffset",
    "GMT",
    "UTC",
    "DateError",
    "DomainUnderflowError",
    "InvalidFormatError",
    "InvalidTimeError",
    "TimezoneLookupError",
    "Renderer",
    "ISO8601DateRenderer",
    "ISO8601Renderer",
    "JavaRenderer",
    "LocaleRenderer",
]


def to_string(
    fields: CalendarFields,
    *,
    renderer: Renderer | None = None,
) -> str:
    """Render calendar fields as text.

    Args:
        fields: The fields to render.
        renderer: Output style. Defaults to ISO-8601 date-time.

    Returns:
        The rendered string.
    """
    if renderer is None:
        renderer = ISO8601Renderer()
    return renderer.render(fields)
