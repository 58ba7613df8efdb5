"""Configuration objects and shared aliases for the Mine Day core."""

from __future__ import annotations

import asyncio
from collections.abc import Callable
from typing import Literal

from .schema.civil import AnchorTime
from .sinks.types import Sink

__all__ = [
    "ConsoleSinkConfig",
    "SinkConfig",
    "SelectionHook",
    "SELECTED_TIMEZONE_KEY",
    "SELECTED_ANCHOR_KEY",
    "MineDaySessionConfig",
]

# ---------------------------------------------------------------------------
# Persistence keys
# ---------------------------------------------------------------------------

# Passed to ``on_selection`` so an external store can persist the choice.
SELECTED_TIMEZONE_KEY = "mineDaySelectedTimezone"
SELECTED_ANCHOR_KEY = "mineDaySelectedAnchorTime"

SelectionHook = Callable[[str, str], None]

# ---------------------------------------------------------------------------
# Sink configuration
# ---------------------------------------------------------------------------


class ConsoleSinkConfig:
    def __init__(self, format: Literal["pretty", "json"] = "pretty") -> None:
        self.type: Literal["console"] = "console"
        self.format = format


SinkConfig = ConsoleSinkConfig

# ---------------------------------------------------------------------------
# MineDaySessionConfig
# ---------------------------------------------------------------------------


class MineDaySessionConfig:
    """Initial state and collaborators for a ``MineDaySession``.

    ``timezone`` and ``anchor`` are the values restored by the external
    persistence layer; when missing or stale the session falls back to
    ``MINEDAY_TIMEZONE`` / ``MINEDAY_ANCHOR`` and then to built-in defaults.
    """

    def __init__(
        self,
        timezone: str | None = None,
        anchor: AnchorTime | str | None = None,
        sinks: list[SinkConfig | Sink] | None = None,
        on_selection: SelectionHook | None = None,
        time_ms: Callable[[], int] | None = None,
        loop: asyncio.AbstractEventLoop | None = None,
    ) -> None:
        self.timezone = timezone
        self.anchor = anchor
        self.sinks = sinks
        self.on_selection = on_selection
        self.time_ms = time_ms
        self.loop = loop
