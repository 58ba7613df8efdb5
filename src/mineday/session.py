"""MineDaySession: selection state, simulated time and the live clock in one place."""

from __future__ import annotations

import logging
import os

from .catalogue import default_timezone, is_supported, normalize_timezone_id
from .clock import LiveClock
from .engine import compute_mine_day
from .errors import MalformedCivilInput, UnknownTimezone
from .formatting import format_civil_minute
from .schema.civil import MIDNIGHT, AnchorTime, CivilDateTime
from .schema.results import MineDayResult, SimulatedTime
from .simulated import SimulatedTimeState
from .sinks.bus import SinkBus
from .sinks.console import create_console_sink
from .sinks.types import MineDayUpdate, Sink
from .time_utils import civil_from_instant, now_ms
from .types import (
    SELECTED_ANCHOR_KEY,
    SELECTED_TIMEZONE_KEY,
    MineDaySessionConfig,
    SinkConfig,
)

logger = logging.getLogger("mineday")


class MineDaySession:
    """Everything a presentation layer needs to drive the Mine Day core.

    Ticks and user actions share one pipeline (``recompute``): each call reads
    the current selection and "now" afresh, so whichever runs last wins and
    neither can publish stale state.
    """

    def __init__(self, config: MineDaySessionConfig | None = None) -> None:
        config = config or MineDaySessionConfig()
        self._config = config
        self._timezone = self._initial_timezone(config.timezone)
        self._anchor = self._initial_anchor(config.anchor)
        self._simulated = SimulatedTimeState()
        self._time_ms = config.time_ms or now_ms
        self._clock = LiveClock(self.recompute, time_ms=self._time_ms, loop=config.loop)
        self._last_result: MineDayResult | None = None

        self._bus = SinkBus()
        self._add_sinks(config.sinks)

    # ------------------------------------------------------------------
    # Factory
    # ------------------------------------------------------------------

    @classmethod
    async def init(cls, config: MineDaySessionConfig | None = None) -> MineDaySession:
        """Build a session and initialise its sinks."""
        session = cls(config)
        await session._bus.init()
        return session

    # ------------------------------------------------------------------
    # Read-only accessors
    # ------------------------------------------------------------------

    @property
    def timezone(self) -> str:
        return self._timezone

    @property
    def anchor(self) -> AnchorTime:
        return self._anchor

    @property
    def simulated(self) -> SimulatedTime | None:
        return self._simulated.current

    @property
    def is_simulated(self) -> bool:
        return self._simulated.is_active

    @property
    def last_result(self) -> MineDayResult | None:
        return self._last_result

    @property
    def clock(self) -> LiveClock:
        return self._clock

    def now_ms(self) -> int:
        """The simulated instant when active, otherwise the real clock."""
        return self._simulated.now(self._time_ms())

    # ------------------------------------------------------------------
    # Selection
    # ------------------------------------------------------------------

    def select_timezone(self, timezone_id: str) -> MineDayResult:
        """Switch timezone.

        Raises UnknownTimezone (selection unchanged) for ids outside the
        catalogue. An active simulation keeps its wall-clock reading and gets
        a new instant under the new zone.
        """
        tz_id = normalize_timezone_id(timezone_id)
        if not is_supported(tz_id):
            raise UnknownTimezone(timezone_id)
        self._timezone = tz_id
        self._simulated.rederive(tz_id)
        self._notify(SELECTED_TIMEZONE_KEY, tz_id)
        return self.recompute(user_initiated=True)

    def select_anchor(self, anchor: AnchorTime | str) -> MineDayResult:
        """Switch anchor time and make sure the live clock is running.

        Raises ValueError for anchors off the 30-minute grid.
        """
        self._anchor = AnchorTime.parse(anchor)
        self._notify(SELECTED_ANCHOR_KEY, str(self._anchor))
        result = self.recompute(user_initiated=True)
        self._ensure_clock()
        return result

    # ------------------------------------------------------------------
    # Simulated time
    # ------------------------------------------------------------------

    def set_simulated_time(self, text: str | None) -> MineDayResult | None:
        """Freeze "now" at ``dd-mm-yyyy HH:MM`` in the selected timezone.

        Malformed input is logged and ignored: no recomputation happens and
        the previous result stays current.
        """
        try:
            self._simulated.activate_from_input(text, self._timezone)
        except MalformedCivilInput as exc:
            logger.warning("[MineDay] Ignoring simulated time input: %s", exc)
            return None
        return self.recompute(user_initiated=True)

    def set_simulated_civil(self, wall_clock: CivilDateTime) -> MineDayResult:
        self._simulated.activate(wall_clock, self._timezone)
        return self.recompute(user_initiated=True)

    def reset_simulated_time(self, recompute: bool = True) -> MineDayResult | None:
        """Drop the simulation and recompute once against the real clock."""
        self._simulated.clear()
        if not recompute:
            return None
        return self.recompute(user_initiated=True)

    def editor_default_value(self) -> str:
        """Prefill for the simulated-time editor: current (or simulated) now."""
        return format_civil_minute(civil_from_instant(self.now_ms(), self._timezone))

    # ------------------------------------------------------------------
    # Pipeline
    # ------------------------------------------------------------------

    def recompute(self, user_initiated: bool = False) -> MineDayResult:
        result = compute_mine_day(self._anchor, self._timezone, self.now_ms())
        self._last_result = result
        self._bus.emit(
            MineDayUpdate(
                result,
                user_initiated=user_initiated,
                simulated=self._simulated.is_active,
            )
        )
        logger.debug(
            "[MineDay] Recomputed %s (%s, anchor %s)",
            result.mine_day_label,
            self._timezone,
            self._anchor,
        )
        return result

    # ------------------------------------------------------------------
    # Live clock
    # ------------------------------------------------------------------

    def start(self) -> MineDayResult:
        """Compute once now, then keep recomputing on every real second."""
        result = self.recompute()
        self._clock.start()
        return result

    def stop(self) -> None:
        self._clock.stop()

    async def close(self) -> None:
        self.stop()
        await self._bus.close()

    # ------------------------------------------------------------------
    # Private
    # ------------------------------------------------------------------

    def _ensure_clock(self) -> None:
        try:
            self._clock.start()
        except RuntimeError:
            # No running loop (plain synchronous use); nothing to tick on.
            logger.debug("[MineDay] No event loop; live clock not started")

    def _notify(self, key: str, value: str) -> None:
        hook = self._config.on_selection
        if hook is None:
            return
        try:
            hook(key, value)
        except Exception as exc:
            logger.error("[MineDay] Selection hook failed for %s: %s", key, exc)

    def _add_sinks(self, sinks: list[SinkConfig | Sink] | None) -> None:
        for sink in sinks or []:
            if isinstance(sink, Sink):
                self._bus.add(sink)
            elif sink.type == "console":
                self._bus.add(create_console_sink(sink.format))

    @staticmethod
    def _initial_timezone(persisted: str | None) -> str:
        tz_id = default_timezone(persisted)
        if persisted and tz_id != normalize_timezone_id(persisted):
            logger.warning("[MineDay] Unknown timezone %r; using %s", persisted, tz_id)
        return tz_id

    @staticmethod
    def _initial_anchor(persisted: AnchorTime | str | None) -> AnchorTime:
        for candidate in (persisted, os.environ.get("MINEDAY_ANCHOR")):
            if not candidate:
                continue
            try:
                return AnchorTime.parse(candidate)
            except ValueError:
                logger.warning("[MineDay] Invalid anchor time %r; ignoring", candidate)
        return MIDNIGHT
