"""Self-correcting live clock aligned to real second boundaries."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable

from .time_utils import now_ms

logger = logging.getLogger("mineday")


class LiveClock:
    """Calls ``on_tick`` once per real second.

    Every delay is recomputed as ``1000 - (now mod 1000)`` at schedule time,
    so scheduling jitter never accumulates. ``on_tick`` is expected to read
    "now" itself; the clock never counts elapsed ticks.

    At most one callback chain is alive: ``start()`` while running is a no-op,
    and ``stop()`` only clears the liveness flag, turning the already queued
    callback into a no-op when it fires. Each chain carries its generation so
    a quick stop/start cannot leave two chains interleaving.
    """

    def __init__(
        self,
        on_tick: Callable[[], object],
        *,
        time_ms: Callable[[], int] | None = None,
        loop: asyncio.AbstractEventLoop | None = None,
    ) -> None:
        self._on_tick = on_tick
        self._time_ms = time_ms or now_ms
        self._loop = loop
        self._running = False
        self._generation = 0

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def start(self) -> None:
        """Start ticking. Requires a running event loop unless one was given."""
        if self._running:
            return
        if self._loop is None:
            self._loop = asyncio.get_running_loop()
        self._running = True
        self._generation += 1
        self._schedule(self._generation)

    def stop(self) -> None:
        self._running = False

    @property
    def is_running(self) -> bool:
        return self._running

    def next_delay_ms(self) -> int:
        """Milliseconds until the next real second boundary (1..1000)."""
        return 1000 - int(self._time_ms()) % 1000

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------

    def _schedule(self, generation: int) -> None:
        if self._loop is None:
            raise RuntimeError("LiveClock has no event loop")
        delay_ms = self.next_delay_ms()
        self._loop.call_later(delay_ms / 1000, self._tick, generation)

    def _tick(self, generation: int) -> None:
        if not self._running or generation != self._generation:
            return
        try:
            self._on_tick()
        except Exception as exc:
            logger.error("[MineDay] Live tick failed: %s", exc)
        self._schedule(generation)
