"""Display formats shared by results, timelines and the simulated-time editor."""

from __future__ import annotations

import re
from collections.abc import Iterable
from datetime import date

from pydantic import ValidationError

from .catalogue import TIMEZONES, filter_timezones
from .errors import MalformedCivilInput
from .schema.civil import CivilDateTime
from .schema.results import MineDayResult
from .time_utils import civil_in_utc, instant_from_civil, utc_offset_label

# dd-mm-yyyy HH:MM, as produced by the external date/time picker.
_EDITOR_RE = re.compile(r"^(\d{1,2})-(\d{1,2})-(\d{4}) (\d{1,2}):(\d{1,2})$")


def format_date(value: date | CivilDateTime) -> str:
    """``dd-mm-yyyy``."""
    return f"{value.day:02d}-{value.month:02d}-{value.year:04d}"


def format_clock(civil: CivilDateTime) -> str:
    """``HH:MM:SS``."""
    return f"{civil.hour:02d}:{civil.minute:02d}:{civil.second:02d}"


def format_hhmm(hour: int, minute: int) -> str:
    return f"{hour:02d}:{minute:02d}"


def format_civil_minute(civil: CivilDateTime) -> str:
    """``dd-mm-yyyy HH:MM``, used for boundary chips and the editor value."""
    return f"{format_date(civil)} {format_hhmm(civil.hour, civil.minute)}"


def parse_civil_input(value: str | None) -> CivilDateTime:
    """Parse ``dd-mm-yyyy HH:MM`` into civil fields.

    Raises MalformedCivilInput when the date or time part is missing, a field
    is not numeric, or the fields do not form a real calendar date/time.
    """
    if not value or not value.strip():
        raise MalformedCivilInput(value, "empty input")
    m = _EDITOR_RE.match(value.strip())
    if m is None:
        raise MalformedCivilInput(value)
    day, month, year, hour, minute = (int(g) for g in m.groups())
    try:
        return CivilDateTime(year=year, month=month, day=day, hour=hour, minute=minute)
    except ValidationError as exc:
        raise MalformedCivilInput(value, "out-of-range field") from exc


def range_labels(result: MineDayResult) -> tuple[str, str]:
    """Start and end (last included minute) in the selected timezone."""
    return (
        format_civil_minute(result.start_civil_date_time),
        format_civil_minute(result.end_civil_date_time),
    )


def utc_range_labels(result: MineDayResult) -> tuple[str, str]:
    """Start and end boundaries converted to UTC wall-clock."""
    start = instant_from_civil(result.start_civil_date_time, result.timezone)
    end = instant_from_civil(result.end_civil_date_time, result.timezone)
    return (
        format_civil_minute(civil_in_utc(start)),
        format_civil_minute(civil_in_utc(end)),
    )


def timezone_options(
    at_instant: int, query: str | None = None, catalogue: Iterable[str] = TIMEZONES
) -> list[tuple[str, str]]:
    """``(id, "id (UTC+H[:MM])")`` pairs for a timezone picker.

    Offsets are taken at ``at_instant`` so DST zones show their current offset.
    """
    return [
        (tz_id, f"{tz_id} ({utc_offset_label(tz_id, at_instant)})")
        for tz_id in filter_timezones(query, catalogue)
    ]
