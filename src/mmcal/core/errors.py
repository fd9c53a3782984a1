class MmcalError(Exception):
    """Base error."""

class InvalidDateError(MmcalError, ValueError):
    """Raised when a date or Julian day handed to the public API is unusable."""

class UnknownCalendarError(MmcalError, KeyError):
    """Raised when a calendar name is not present in the registry."""
