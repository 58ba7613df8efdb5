"""SinkBus: fans each Mine Day update out to every registered sink."""

from __future__ import annotations

import asyncio
import logging

from .types import MineDayUpdate, Sink

logger = logging.getLogger("mineday")


class SinkBus:
    """Fans out updates to multiple sinks.

    ``emit`` is synchronous; errors in individual sinks are caught and logged
    but do not propagate.
    """

    def __init__(self) -> None:
        self._sinks: list[Sink] = []
        self._closed = False

    def add(self, *sinks: Sink) -> None:
        self._sinks.extend(sinks)

    @property
    def sinks(self) -> list[Sink]:
        return list(self._sinks)

    async def init(self) -> None:
        results = await asyncio.gather(*(s.init() for s in self._sinks), return_exceptions=True)
        for r in results:
            if isinstance(r, Exception):
                logger.error("[MineDay] Sink init error: %s", r)

    def emit(self, update: MineDayUpdate) -> None:
        if self._closed:
            return
        for sink in self._sinks:
            try:
                sink.write(update)
            except Exception as exc:
                logger.error("[MineDay] Sink error: %s", exc)

    async def close(self) -> None:
        self._closed = True
        results = await asyncio.gather(*(s.close() for s in self._sinks), return_exceptions=True)
        for r in results:
            if isinstance(r, Exception):
                logger.error("[MineDay] Sink close error: %s", r)
