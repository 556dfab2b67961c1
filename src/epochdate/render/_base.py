"""Abstract base class for renderers."""

from __future__ import annotations

import enum
from abc import ABC, abstractmethod
from io import StringIO

from epochdate.fields import CalendarFields


class RendererName(enum.StrEnum):
    JAVA = "java"
    ISO8601 = "iso8601"
    ISO8601_DATE = "iso8601-date"
    LOCALE = "locale"


class Renderer(ABC):
    """Abstract base class defining the renderer interface.

    Renderers only interpolate fields into a fixed template; no calendar
    arithmetic happens here.
    """

    @abstractmethod
    def write(self, w: StringIO, fields: CalendarFields) -> None: ...

    def render(self, fields: CalendarFields) -> str:
        w = StringIO()
        self.write(w, fields)
        return w.getvalue()
