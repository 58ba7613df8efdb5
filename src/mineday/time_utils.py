"""Instant <-> civil time conversion and UTC offset labels.

Instants are epoch milliseconds. Civil values are ``CivilDateTime`` fields that
only mean something next to a timezone id from the catalogue.
"""

from __future__ import annotations

import time
from datetime import datetime, timedelta, timezone, tzinfo

from .catalogue import resolve_timezone
from .schema.civil import CivilDateTime

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

# Offsets are piecewise constant and bounded, so a handful of corrections
# reaches the fixed point when one exists.
MAX_CIVIL_ITERATIONS = 4


def now_ms() -> int:
    """Return the real current instant in epoch milliseconds."""
    return int(time.time() * 1000)


def _civil_in(instant: int, tz: tzinfo) -> CivilDateTime:
    # Floor to whole seconds; timedelta arithmetic avoids platform
    # fromtimestamp() range limits.
    aware = _EPOCH + timedelta(seconds=instant // 1000)
    return CivilDateTime.from_datetime(aware.astimezone(tz))


def civil_from_instant(instant: int, timezone_id: str) -> CivilDateTime:
    """Resolve ``instant`` to its wall-clock fields in ``timezone_id``.

    Raises UnknownTimezone if the id is not in the catalogue.
    """
    return _civil_in(instant, resolve_timezone(timezone_id))


def instant_from_civil(civil: CivilDateTime, timezone_id: str) -> int:
    """Find the instant whose wall-clock reading in ``timezone_id`` is ``civil``.

    Fixed-point iteration: start from the fields read as UTC, then repeatedly
    resolve the guess in the target zone and shift it by the difference
    between the wanted and the resolved fields.

    Known limitation: for a repeated wall-clock time (fall-back fold) this
    returns whichever of the two instants the iteration lands on; for a
    skipped wall-clock time (spring-forward gap) no fixed point exists and the
    last guess is returned after ``MAX_CIVIL_ITERATIONS`` rounds.
    """
    tz = resolve_timezone(timezone_id)
    desired = civil.epoch_ms_as_utc()
    guess = desired
    for _ in range(MAX_CIVIL_ITERATIONS):
        resolved = _civil_in(guess, tz)
        diff = desired - resolved.epoch_ms_as_utc()
        if diff == 0:
            break
        guess += diff
    return guess


def utc_offset_minutes(timezone_id: str, at_instant: int) -> int:
    """Offset of ``timezone_id`` from UTC at ``at_instant``, in whole minutes."""
    tz = resolve_timezone(timezone_id)
    local = _civil_in(at_instant, tz).epoch_ms_as_utc()
    utc = _civil_in(at_instant, timezone.utc).epoch_ms_as_utc()
    return (local - utc) // 60_000


def format_utc_offset(minutes: int) -> str:
    """Format an offset as ``UTC+H``, ``UTC-H`` or ``UTC+H:MM``."""
    sign = "+" if minutes >= 0 else "-"
    hours, mins = divmod(abs(minutes), 60)
    if mins == 0:
        return f"UTC{sign}{hours}"
    return f"UTC{sign}{hours}:{mins:02d}"


def utc_offset_label(timezone_id: str, at_instant: int) -> str:
    return format_utc_offset(utc_offset_minutes(timezone_id, at_instant))


def civil_in_utc(instant: int) -> CivilDateTime:
    """Wall-clock fields of ``instant`` in UTC (no catalogue lookup)."""
    return _civil_in(instant, timezone.utc)
