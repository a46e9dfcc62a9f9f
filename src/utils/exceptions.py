"""Custom exceptions for date utility errors."""


class DateUtilError(Exception):
    """Base exception for date utility errors."""


class MissingArgumentError(DateUtilError):
    """Raised when one or more required arguments are missing.

    Attributes:
        name: Stable error code for the host environment.
        missing: Names of the missing arguments, in the order they were required.
        notify_off: Hint that the host should not send external notifications.
    """

    name = "MISSING_REQD_ARGUMENT"

    def __init__(self, missing: list[str] | tuple[str, ...], notify_off: bool = True) -> None:
        self.missing = tuple(missing)
        self.notify_off = notify_off
        super().__init__(f"A required argument is missing: {', '.join(self.missing)}.")
