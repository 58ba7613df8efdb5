"""Simulated "now": a frozen instant entered as wall-clock fields."""

from __future__ import annotations

import logging

from .catalogue import normalize_timezone_id
from .formatting import parse_civil_input
from .schema.civil import CivilDateTime
from .schema.results import SimulatedTime
from .time_utils import instant_from_civil

logger = logging.getLogger("mineday")


class SimulatedTimeState:
    """Holds at most one simulated instant.

    While active, ``now()`` returns the frozen instant instead of the real
    clock, so repeated recomputation yields the same result. The wall-clock
    fields are kept so that a timezone change preserves the clock reading
    rather than the absolute moment.
    """

    def __init__(self) -> None:
        self._current: SimulatedTime | None = None

    @property
    def is_active(self) -> bool:
        return self._current is not None

    @property
    def current(self) -> SimulatedTime | None:
        return self._current

    def activate(self, wall_clock: CivilDateTime, timezone_id: str) -> SimulatedTime:
        """Interpret ``wall_clock`` in ``timezone_id`` and freeze "now" there."""
        tz_id = normalize_timezone_id(timezone_id)
        self._current = SimulatedTime(
            instant=instant_from_civil(wall_clock, tz_id),
            wall_clock=wall_clock,
            timezone=tz_id,
        )
        logger.debug(
            "[MineDay] Simulated time set to %s in %s", wall_clock.isoformat(), tz_id
        )
        return self._current

    def activate_from_input(self, text: str | None, timezone_id: str) -> SimulatedTime:
        """Parse ``dd-mm-yyyy HH:MM`` and activate.

        Raises MalformedCivilInput without touching the current state.
        """
        return self.activate(parse_civil_input(text), timezone_id)

    def rederive(self, timezone_id: str) -> SimulatedTime | None:
        """Re-run the stored wall-clock fields through the new timezone."""
        if self._current is None:
            return None
        return self.activate(self._current.wall_clock, timezone_id)

    def now(self, real_now_ms: int) -> int:
        if self._current is not None:
            return self._current.instant
        return real_now_ms

    def clear(self) -> None:
        self._current = None
