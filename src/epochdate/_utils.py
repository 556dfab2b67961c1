"""Clock helpers shared by the renderers."""

from __future__ import annotations


def to_12_hour(hour: int) -> tuple[int, str]:
    """Convert a 24-hour clock hour to ``(hour, "AM" | "PM")``.

    Midnight and noon both read as 12.
    """
    meridiem = "AM" if hour < 12 else "PM"
    if hour == 0:
        return 12, meridiem
    if hour > 12:
        return hour - 12, meridiem
    return hour, meridiem
