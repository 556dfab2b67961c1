"""Calendar constants and configurable limits."""

MS_PER_SECOND = 1000
MS_PER_MINUTE = 60 * MS_PER_SECOND
MS_PER_HOUR = 60 * MS_PER_MINUTE
MS_PER_DAY = 24 * MS_PER_HOUR

EPOCH_YEAR = 1970
"""First year representable; instants are unsigned milliseconds since its start."""

EPOCH_DAY_OF_WEEK = 4
"""1970-01-01 was a Thursday (Sunday = 0)."""

MIN_OFFSET_LENGTH = 3
"""Shortest accepted offset string, e.g. ``855``."""

MAX_OFFSET_LENGTH = 6
"""Longest accepted offset string, e.g. ``+08:55``."""

MAX_OFFSET_HOURS = 23
MAX_OFFSET_MINUTES = 59

DATE_COMMAND = ("date", "+%z %Z")
"""Command printing the host offset and zone abbreviation, e.g. ``+0800 SGT``."""

DATE_COMMAND_TIMEOUT = 5.0
"""Seconds to wait for the date command before giving up."""

SYSTEM_OFFSET_LENGTH = 5
"""Length of the ``%z`` field printed by the date command (``±HHMM``)."""
