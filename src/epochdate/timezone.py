"""Fixed UTC offsets and their compact string forms."""

from __future__ import annotations

from dataclasses import dataclass

from lark import Lark, Token, Transformer
from lark.exceptions import UnexpectedInput

from epochdate._constants import (
    MAX_OFFSET_HOURS,
    MAX_OFFSET_LENGTH,
    MAX_OFFSET_MINUTES,
    MIN_OFFSET_LENGTH,
    MS_PER_MINUTE,
)
from epochdate._errors import (
    ERR_MSG_INVALID_FORMAT,
    ERR_MSG_INVALID_TIME,
    InvalidFormatError,
    InvalidTimeError,
)

_OFFSET_GRAMMAR = r"""
offset: [SIGN] NUMBER ":" NUMBER  -> split
      | [SIGN] NUMBER             -> compact

SIGN: "+" | "-"
NUMBER: /[0-9]+/
"""


def _sign(token: Token | None) -> int:
    return -1 if token == "-" else 1


class _OffsetTransformer(Transformer):
    """Reduce a parsed offset to ``(sign, hours, minutes)``."""

    def split(self, items: list[Token | None]) -> tuple[int, int, int]:
        sign, hours, minutes = items
        return _sign(sign), int(hours), int(minutes)

    def compact(self, items: list[Token | None]) -> tuple[int, int, int]:
        sign, digits = items
        value = int(digits)
        return _sign(sign), value // 100, value % 100


_parser = Lark(
    _OFFSET_GRAMMAR,
    start="offset",
    parser="lalr",
    transformer=_OffsetTransformer(),
)


@dataclass(frozen=True)
class TimezoneOffset:
    """A fixed offset from UTC with a display name.

    The offset never varies with the instant it is applied to; there is no
    daylight saving or historical transition data.
    """

    offset_minutes: int
    name: str

    @classmethod
    def from_string(cls, text: str, name: str | None = None) -> TimezoneOffset:
        """Parse a compact signed offset.

        Accepted shapes are ``[+|-]H[H][:]MM``: ``+0800``, ``-08:00``,
        ``8:00``, ``800`` and so on. A missing sign means a positive offset.
        Without a colon the digits are read as one number whose last two
        digits are the minutes.

        Args:
            text: The offset string.
            name: Display name. Defaults to ``text`` itself.

        Returns:
            The parsed offset.

        Raises:
            InvalidFormatError: If the string is shorter than 3 or longer than
                6 characters, or its components are not decimal numbers.
            InvalidTimeError: If the hour exceeds 23 or the minute exceeds 59.
        """
        if len(text) < MIN_OFFSET_LENGTH or len(text) > MAX_OFFSET_LENGTH:
            raise InvalidFormatError(
                ERR_MSG_INVALID_FORMAT,
                f"offset {text!r} must be {MIN_OFFSET_LENGTH} to "
                f"{MAX_OFFSET_LENGTH} characters long",
            )

        try:
            sign, hours, minutes = _parser.parse(text)
        except UnexpectedInput as e:
            raise InvalidFormatError(
                ERR_MSG_INVALID_FORMAT,
                f"offset {text!r} is not of the form [+|-]H[H][:]MM",
                wrapped=e,
            ) from e

        if hours > MAX_OFFSET_HOURS or minutes > MAX_OFFSET_MINUTES:
            raise InvalidTimeError(
                ERR_MSG_INVALID_TIME,
                f"offset {text!r} has hour {hours} and minute {minutes}",
            )

        return cls(
            offset_minutes=sign * (hours * 60 + minutes),
            name=text if name is None else name,
        )

    @property
    def offset_milliseconds(self) -> int:
        return self.offset_minutes * MS_PER_MINUTE

    def format(self) -> str:
        """Render the offset in ISO-8601 form, e.g. ``+04:00``."""
        sign = "-" if self.offset_minutes < 0 else "+"
        hours, minutes = divmod(abs(self.offset_minutes), 60)
        return f"{sign}{hours:02d}:{minutes:02d}"

    def __str__(self) -> str:
        return self.format()


UTC = TimezoneOffset(offset_minutes=0, name="UTC")
GMT = TimezoneOffset(offset_minutes=0, name="GMT")
