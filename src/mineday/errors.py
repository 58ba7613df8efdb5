"""Error types raised by the Mine Day core."""

from __future__ import annotations


class MineDayError(ValueError):
    """Base error for the Mine Day core; callers catch it and keep previous state."""


class UnknownTimezone(MineDayError):
    """Raised when a timezone id is not in the supported catalogue."""

    def __init__(self, timezone_id: str | None) -> None:
        super().__init__(f"Unknown timezone: {timezone_id!r}")
        self.timezone_id = timezone_id


class MalformedCivilInput(MineDayError):
    """Raised when simulated-time input is missing a component or is not numeric."""

    def __init__(self, value: object, reason: str = "expected 'dd-mm-yyyy HH:MM'") -> None:
        super().__init__(f"Malformed civil date/time {value!r}: {reason}")
        self.value = value
        self.reason = reason
