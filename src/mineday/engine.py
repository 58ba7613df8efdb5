"""Mine Day engine: applies the anchor-time rule to an instant.

Three rules, exactly one of which applies to any anchor:

- anchor 00:00: the Mine Day is the calendar day (00:00 to 23:59).
- anchor before 12:00 (forward shift): the Mine Day starts at the anchor on
  its own date, so times before the anchor still belong to yesterday.
- anchor at or after 12:00 (backward shift): the Mine Day is labelled by the
  date it ends on, so times after the anchor already belong to tomorrow.

The end boundary is always the last included minute (anchor minus one
minute); the period itself is ``[start, end + 1 minute)``.
"""

from __future__ import annotations

from datetime import date, timedelta

from .catalogue import normalize_timezone_id
from .formatting import format_clock, format_date
from .schema.civil import AnchorTime, CivilDateTime
from .schema.results import MineDayResult
from .time_utils import civil_from_instant, utc_offset_label

ONE_DAY = timedelta(days=1)
NOON_MINUTES = 12 * 60


def anchor_choices() -> list[AnchorTime]:
    """All selectable anchors, 00:00 to 23:30 in 30-minute steps."""
    return [AnchorTime(hour=h, minute=m) for h in range(24) for m in (0, 30)]


def anchor_end_time(hour: int, minute: int) -> tuple[int, int]:
    """Return (hour, minute) one minute before the anchor, e.g. 01:00 -> 00:59."""
    end_h, end_m = hour, minute - 1
    if end_m < 0:
        end_m = 59
        end_h -= 1
        if end_h < 0:
            # Unreachable from compute_mine_day (00:00 has its own rule).
            end_h = 23
    return end_h, end_m


def _boundaries(
    anchor: AnchorTime, today: date, current_minutes: int
) -> tuple[date, CivilDateTime, CivilDateTime]:
    if anchor.minutes == 0:
        return today, CivilDateTime.at(today, 0, 0), CivilDateTime.at(today, 23, 59)

    end_h, end_m = anchor_end_time(anchor.hour, anchor.minute)
    after_anchor = current_minutes >= anchor.minutes

    if anchor.minutes < NOON_MINUTES:
        mine_day = today if after_anchor else today - ONE_DAY
        start = CivilDateTime.at(mine_day, anchor.hour, anchor.minute)
        end = CivilDateTime.at(mine_day + ONE_DAY, end_h, end_m)
    else:
        mine_day = today + ONE_DAY if after_anchor else today
        start = CivilDateTime.at(mine_day - ONE_DAY, anchor.hour, anchor.minute)
        end = CivilDateTime.at(mine_day, end_h, end_m)
    return mine_day, start, end


def compute_mine_day(
    anchor: AnchorTime | str,
    timezone_id: str,
    now_instant: int,
) -> MineDayResult:
    """Compute the Mine Day containing ``now_instant`` in ``timezone_id``.

    Pure: the result depends only on the three arguments. ``now_instant`` is
    the real or simulated current instant in epoch milliseconds; the UTC
    offset label is evaluated at that same instant.

    Raises UnknownTimezone for ids outside the catalogue and ValueError for a
    malformed anchor string.
    """
    anchor = AnchorTime.parse(anchor)
    now_civil = civil_from_instant(now_instant, timezone_id)
    mine_day, start, end = _boundaries(
        anchor, now_civil.calendar_date(), now_civil.minutes_since_midnight
    )

    return MineDayResult(
        mine_day_label=format_date(mine_day),
        actual_day_label=format_date(now_civil),
        current_civil_time=format_clock(now_civil),
        utc_offset_label=utc_offset_label(timezone_id, now_instant),
        start_civil_date_time=start,
        end_civil_date_time=end,
        timezone=normalize_timezone_id(timezone_id),
        anchor=anchor,
        now_civil=now_civil,
        instant=now_instant,
    )
