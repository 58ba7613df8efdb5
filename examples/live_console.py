"""
Example: live Mine Day readout in the terminal.

Usage:
    pip install -e ".[examples]"
    MINEDAY_TIMEZONE=Asia/Kolkata MINEDAY_ANCHOR=09:00 python examples/live_console.py

Environment variables (also read from a root `.env`):
    MINEDAY_TIMEZONE   IANA timezone to start in (default: TZ, then the first catalogue entry)
    MINEDAY_ANCHOR     Anchor time, HH:00 or HH:30 (default: 00:00)
    MINEDAY_SIMULATE   Optional frozen "now" as dd-mm-yyyy HH:MM
    MINEDAY_SECONDS    How long to run (default: 5)
"""
import asyncio
import logging
import os

from dotenv import load_dotenv

from mineday import (
    ConsoleSinkConfig,
    MineDaySession,
    MineDaySessionConfig,
    TimelineLayout,
    utc_range_labels,
)

load_dotenv()


async def main() -> None:
    logging.basicConfig(level=logging.INFO)

    session = await MineDaySession.init(
        MineDaySessionConfig(sinks=[ConsoleSinkConfig(format="pretty")])
    )

    simulate = os.environ.get("MINEDAY_SIMULATE")
    if simulate:
        session.set_simulated_time(simulate)

    result = session.start()

    start_utc, end_utc = utc_range_labels(result)
    print(f"UTC range: {start_utc} -> {end_utc}")

    geometry = TimelineLayout(width=800, height=140).layout(result)
    print(
        f"Highlight x={geometry.highlight.x:.1f} width={geometry.highlight.width:.1f}, "
        f"end label {geometry.end_marker.date_label} {geometry.end_marker.time_label}"
    )

    await asyncio.sleep(float(os.environ.get("MINEDAY_SECONDS", "5")))
    await session.close()


if __name__ == "__main__":
    asyncio.run(main())
