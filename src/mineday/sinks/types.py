"""Sink protocol: consumers of Mine Day results (renderers, loggers, ...)."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..schema.results import MineDayResult


class MineDayUpdate:
    """One recomputation handed to every sink."""

    def __init__(
        self,
        result: MineDayResult,
        user_initiated: bool = False,
        simulated: bool = False,
    ) -> None:
        self.result = result
        # Renderers flash on user actions only, never on live ticks.
        self.user_initiated = user_initiated
        self.simulated = simulated

    def __repr__(self) -> str:
        return (
            f"MineDayUpdate(mine_day={self.result.mine_day_label!r}, "
            f"user_initiated={self.user_initiated!r}, simulated={self.simulated!r})"
        )


class Sink(ABC):
    """A sink receives Mine Day updates and presents them somewhere.

    Only ``write`` is mandatory; ``init`` and ``close`` are optional no-ops.
    """

    async def init(self) -> None:
        """Called once before the sink is first used."""

    @abstractmethod
    def write(self, update: MineDayUpdate) -> None:
        """Present one update. Must not block the event loop."""

    async def close(self) -> None:
        """Release resources."""
