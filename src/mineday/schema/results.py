"""Computation results and simulated-time state."""

from __future__ import annotations

from .civil import AnchorTime, CivilDateTime, _Base


class MineDayResult(_Base):
    """Full output of one Mine Day computation.

    Recomputed from scratch on every tick or user action; never diffed.
    ``end_civil_date_time`` is the last included minute, so the period covers
    ``[start, end + 1 minute)``.
    """

    mine_day_label: str
    actual_day_label: str
    current_civil_time: str
    utc_offset_label: str
    start_civil_date_time: CivilDateTime
    end_civil_date_time: CivilDateTime

    timezone: str
    anchor: AnchorTime
    now_civil: CivilDateTime
    instant: int


class SimulatedTime(_Base):
    """A frozen "now" chosen by the user.

    ``wall_clock`` is kept so a timezone change can re-derive ``instant`` for
    the same clock reading.
    """

    instant: int
    wall_clock: CivilDateTime
    timezone: str
