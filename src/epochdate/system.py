"""Host timezone discovery.

The host's current UTC offset is read from the ``date`` command and parsed
through :meth:`TimezoneOffset.from_string`.
"""

from __future__ import annotations

import subprocess
from collections.abc import Sequence

from epochdate._constants import (
    DATE_COMMAND,
    DATE_COMMAND_TIMEOUT,
    SYSTEM_OFFSET_LENGTH,
)
from epochdate._errors import (
    ERR_MSG_DATE_COMMAND_FAILED,
    ERR_MSG_INVALID_OFFSET_FORMAT,
    ERR_MSG_INVALID_OUTPUT,
    InvalidFormatError,
    InvalidTimeError,
    TimezoneLookupError,
)
from epochdate.timezone import TimezoneOffset

__all__ = ["fetch_system_timezone"]


def fetch_system_timezone(
    *,
    command: Sequence[str] | None = None,
    timeout: float | None = None,
) -> TimezoneOffset:
    """Fetch the host's current timezone offset.

    Args:
        command: Command printing ``<offset> <name>``, e.g. ``+0800 SGT``.
            Defaults to ``date "+%z %Z"``.
        timeout: Seconds to wait for the command. Defaults to 5.

    Returns:
        The host offset, named by the zone abbreviation.

    Raises:
        TimezoneLookupError: If the command cannot be run, fails, or prints
            something that is not an offset and a name.
    """
    if command is None:
        command = DATE_COMMAND
    if timeout is None:
        timeout = DATE_COMMAND_TIMEOUT

    try:
        result = subprocess.run(
            list(command), capture_output=True, text=True, timeout=timeout,
        )
    except (OSError, subprocess.TimeoutExpired) as e:
        raise TimezoneLookupError(
            ERR_MSG_DATE_COMMAND_FAILED,
            internal_details=f"could not run {list(command)!r}: {e}",
            wrapped=e,
        ) from e

    if result.returncode != 0:
        raise TimezoneLookupError(
            ERR_MSG_DATE_COMMAND_FAILED,
            internal_details=(
                f"{list(command)!r} exited with status {result.returncode}: "
                f"{result.stderr.strip()}"
            ),
        )

    parts = result.stdout.rstrip("\n").split(" ")
    if len(parts) < 2:
        raise TimezoneLookupError(
            ERR_MSG_INVALID_OUTPUT,
            internal_details=f"expected '<offset> <name>', got {result.stdout!r}",
        )
    offset_str, zone_name = parts[0], parts[1]

    if len(offset_str) != SYSTEM_OFFSET_LENGTH:
        raise TimezoneLookupError(
            ERR_MSG_INVALID_OFFSET_FORMAT,
            internal_details=(
                f"offset {offset_str!r} is not {SYSTEM_OFFSET_LENGTH} characters"
            ),
        )

    try:
        return TimezoneOffset.from_string(offset_str, name=zone_name)
    except (InvalidFormatError, InvalidTimeError) as e:
        raise TimezoneLookupError(
            ERR_MSG_INVALID_OFFSET_FORMAT,
            internal_details=e.internal(),
            wrapped=e,
        ) from e
