"""Wall-clock value types: civil date/time fields and anchor times."""

from __future__ import annotations

import calendar
from datetime import date, datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel


class _Base(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


# ---------------------------------------------------------------------------
# CivilDateTime
# ---------------------------------------------------------------------------


class CivilDateTime(_Base):
    """Calendar date and time-of-day fields with no timezone attached.

    Only meaningful when paired with a timezone id.
    """

    year: int = Field(ge=1, le=9999)
    month: int = Field(ge=1, le=12)
    day: int = Field(ge=1, le=31)
    hour: int = Field(0, ge=0, le=23)
    minute: int = Field(0, ge=0, le=59)
    second: int = Field(0, ge=0, le=59)

    @model_validator(mode="after")
    def _check_calendar_day(self) -> CivilDateTime:
        # Rejects 31-04, 29-02 outside leap years, ...
        date(self.year, self.month, self.day)
        return self

    @classmethod
    def from_datetime(cls, value: datetime) -> CivilDateTime:
        return cls(
            year=value.year,
            month=value.month,
            day=value.day,
            hour=value.hour,
            minute=value.minute,
            second=value.second,
        )

    @classmethod
    def at(cls, day: date, hour: int = 0, minute: int = 0) -> CivilDateTime:
        return cls(year=day.year, month=day.month, day=day.day, hour=hour, minute=minute)

    def calendar_date(self) -> date:
        return date(self.year, self.month, self.day)

    def to_naive(self) -> datetime:
        return datetime(self.year, self.month, self.day, self.hour, self.minute, self.second)

    def epoch_ms_as_utc(self) -> int:
        """Epoch milliseconds obtained by reading these fields as if they were UTC."""
        return calendar.timegm(self.to_naive().timetuple()) * 1000

    @property
    def minutes_since_midnight(self) -> int:
        return self.hour * 60 + self.minute

    def isoformat(self) -> str:
        """``YYYY-MM-DDTHH:MM`` (minute resolution, as boundaries are shown)."""
        return f"{self.year:04d}-{self.month:02d}-{self.day:02d}T{self.hour:02d}:{self.minute:02d}"


# ---------------------------------------------------------------------------
# AnchorTime
# ---------------------------------------------------------------------------


class AnchorTime(_Base):
    """Time of day (in the selected timezone) at which a Mine Day turns over."""

    hour: int = Field(ge=0, le=23)
    minute: Literal[0, 30] = 0

    @classmethod
    def parse(cls, value: str | AnchorTime) -> AnchorTime:
        """Accept ``"HH:MM"`` (30-minute granularity) or an existing AnchorTime."""
        if isinstance(value, AnchorTime):
            return value
        try:
            h, m = str(value).strip().split(":")
            return cls(hour=int(h), minute=int(m))  # type: ignore[arg-type]
        except ValueError as exc:
            raise ValueError(f"Invalid anchor time {value!r}; expected HH:00 or HH:30") from exc

    @property
    def minutes(self) -> int:
        return self.hour * 60 + self.minute

    def __str__(self) -> str:
        return f"{self.hour:02d}:{self.minute:02d}"


MIDNIGHT = AnchorTime(hour=0, minute=0)
