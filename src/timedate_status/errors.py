"""Errors raised while collecting time/date status."""


class TimedateStatusError(Exception):
    """Base class for all timedate-status errors."""


class ExecutionError(TimedateStatusError):
    """timedatectl could not be run or exited with a failure status."""


class InvalidTimezoneError(TimedateStatusError):
    """The reported timezone is not a known IANA identifier."""

    def __init__(self, timezone: str, reason: str = "") -> None:
        self.timezone = timezone
        message = f"invalid timezone {timezone!r}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class TimestampParseError(TimedateStatusError):
    """A timestamp does not match the timedatectl layout."""

    def __init__(self, value: str, reason: str = "") -> None:
        self.value = value
        message = f"cannot parse timestamp {value!r}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class SerializationError(TimedateStatusError):
    """The status record could not be converted to JSON."""
