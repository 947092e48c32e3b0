"""Exceptions raised by tspack."""


class PackError(ValueError):
    """Base class for packing failures."""


class InvalidWindowError(PackError):
    """Raised when the configured time window is not a positive duration."""

    def __init__(self, microseconds_time_window=0):
        self.microseconds_time_window = microseconds_time_window
        super().__init__(
            f"microseconds_time_window must be > 0 (got {microseconds_time_window})"
        )
