"""Console sink: prints each update to stdout."""

from __future__ import annotations

from typing import Literal

from ..formatting import range_labels
from .types import MineDayUpdate, Sink


class ConsoleSink(Sink):
    """Writes Mine Day updates to stdout."""

    def __init__(self, format: Literal["json", "pretty"] = "pretty") -> None:
        self._format = format

    def write(self, update: MineDayUpdate) -> None:
        result = update.result
        if self._format == "json":
            # camelCase aliases match the browser field names.
            print(result.model_dump_json(by_alias=True))
            return
        start, end = range_labels(result)
        sim = " [simulated]" if update.simulated else ""
        print(
            f"[mineday] {result.mine_day_label} {result.current_civil_time} "
            f"{result.timezone} ({result.utc_offset_label}) {start} -> {end}{sim}"
        )


def create_console_sink(format: Literal["json", "pretty"] = "pretty") -> Sink:
    return ConsoleSink(format=format)
