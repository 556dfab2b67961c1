"""Exception hierarchy for calendar conversion and offset parsing."""


class DateError(Exception):
    """Base exception for epochdate errors.

    Provides dual messaging: a short user-facing message and internal
    details suitable for the caller's own logging.
    """

    def __init__(
        self,
        user_message: str,
        internal_details: str = "",
        wrapped: Exception | None = None,
    ) -> None:
        super().__init__(user_message)
        self.user_message = user_message
        self.internal_details = internal_details or user_message
        self.wrapped = wrapped

    def internal(self) -> str:
        return self.internal_details


class InvalidFormatError(DateError):
    """Raised when an offset string has an invalid length or shape."""


class InvalidTimeError(DateError):
    """Raised when a parsed offset has hour > 23 or minute > 59."""


class DomainUnderflowError(DateError):
    """Raised when an instant would fall before the Unix epoch."""


class TimezoneLookupError(DateError):
    """Raised when the host timezone cannot be determined."""


# Sanitized user-facing error message constants
ERR_MSG_INVALID_FORMAT = "invalid timezone offset format"
ERR_MSG_INVALID_TIME = "invalid timezone offset time"
ERR_MSG_DOMAIN_UNDERFLOW = "instant precedes the unix epoch"
ERR_MSG_DATE_COMMAND_FAILED = "date command failed"
ERR_MSG_INVALID_OUTPUT = "invalid output from date command"
ERR_MSG_INVALID_OFFSET_FORMAT = "invalid offset format from date command"
