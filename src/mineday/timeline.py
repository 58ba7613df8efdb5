"""Timeline geometry: maps a Mine Day onto a horizontal pixel axis.

Only coordinates and label strings are produced here; painting them on a
canvas, SVG or terminal is left to the renderer.

Civil boundaries are placed on a plain wall-clock axis (every hour is the
same width), so a DST change inside the window does not stretch the scale.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timedelta

from .formatting import format_date, format_hhmm
from .schema.civil import CivilDateTime
from .schema.results import MineDayResult

ONE_HOUR = timedelta(hours=1)
ONE_MINUTE = timedelta(minutes=1)


@dataclass(frozen=True)
class Padding:
    left: float = 25
    right: float = 25
    top: float = 30
    bottom: float = 45


@dataclass
class HighlightBox:
    x: float
    y: float
    width: float
    height: float


@dataclass
class BoundaryMarker:
    """Dashed boundary line with its date/time label pair above the graph."""

    x: float
    date_label: str
    time_label: str
    date_y: float
    time_y: float


@dataclass
class HourTick:
    x: float
    label: str
    is_midnight: bool
    length: float
    date_label: str | None = None


@dataclass
class CurrentTimeMarker:
    x: float
    dot_y: float
    visible: bool


@dataclass
class TimelineGeometry:
    view_start: datetime
    view_end: datetime
    total_hours: float
    hour_width: float
    left: float
    axis_y: float
    highlight: HighlightBox
    start_marker: BoundaryMarker
    end_marker: BoundaryMarker
    caption: str
    caption_x: float
    caption_y: float
    current: CurrentTimeMarker
    ticks: list[HourTick] = field(default_factory=list)

    def x_for(self, when: datetime | CivilDateTime) -> float:
        """Linear position of a wall-clock time; not clamped to the graph."""
        if isinstance(when, CivilDateTime):
            when = when.to_naive()
        hours_from_start = (when - self.view_start) / ONE_HOUR
        return self.left + hours_from_start * self.hour_width


class TimelineLayout:
    """Lays out one Mine Day with ``margin_hours`` of context on each side.

    The highlight box and the end marker sit at ``end + 1 minute`` so the
    half-open period is drawn as a closed box, while the end label keeps the
    last included minute (``23:59`` rather than ``00:00``).
    """

    def __init__(
        self,
        width: float,
        height: float,
        padding: Padding | None = None,
        margin_hours: float = 4,
        highlight_height: float = 20,
    ) -> None:
        self.width = width
        self.height = height
        self.padding = padding or Padding()
        self.margin = timedelta(hours=margin_hours)
        self.highlight_height = highlight_height

        self.graph_width = width - self.padding.left - self.padding.right
        self.graph_height = height - self.padding.top - self.padding.bottom
        if self.graph_width <= 0 or self.graph_height <= 0:
            raise ValueError(f"Timeline area {width}x{height} leaves no room for the graph")

    def view_window(self, result: MineDayResult) -> tuple[datetime, datetime]:
        start = result.start_civil_date_time.to_naive()
        end_for_graph = result.end_civil_date_time.to_naive() + ONE_MINUTE
        return start - self.margin, end_for_graph + self.margin

    def layout(self, result: MineDayResult) -> TimelineGeometry:
        pad = self.padding
        view_start, view_end = self.view_window(result)
        total_hours = (view_end - view_start) / ONE_HOUR
        hour_width = self.graph_width / total_hours
        axis_y = pad.top + self.graph_height

        def x_for(when: datetime) -> float:
            return pad.left + (when - view_start) / ONE_HOUR * hour_width

        start = result.start_civil_date_time
        end = result.end_civil_date_time
        start_x = x_for(start.to_naive())
        end_x = x_for(end.to_naive() + ONE_MINUTE)

        box_y = pad.top + (self.graph_height - self.highlight_height) / 2
        highlight = HighlightBox(
            x=start_x, y=box_y, width=end_x - start_x, height=self.highlight_height
        )

        # Seconds are ignored so the marker moves once per minute.
        now_x = x_for(result.now_civil.to_naive().replace(second=0))
        current = CurrentTimeMarker(
            x=now_x,
            dot_y=box_y + self.highlight_height / 2,
            visible=pad.left <= now_x <= self.width - pad.right,
        )

        return TimelineGeometry(
            view_start=view_start,
            view_end=view_end,
            total_hours=total_hours,
            hour_width=hour_width,
            left=pad.left,
            axis_y=axis_y,
            highlight=highlight,
            start_marker=self._marker(start_x, start),
            end_marker=self._marker(end_x, end),
            caption=f"Mine Day: {result.mine_day_label}",
            caption_x=start_x + highlight.width / 2,
            caption_y=box_y - 8,
            current=current,
            ticks=self._hour_ticks(view_start, view_end, x_for),
        )

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------

    def _marker(self, x: float, civil: CivilDateTime) -> BoundaryMarker:
        return BoundaryMarker(
            x=x,
            date_label=format_date(civil),
            time_label=format_hhmm(civil.hour, civil.minute),
            date_y=self.padding.top - 5,
            time_y=self.padding.top + 10,
        )

    @staticmethod
    def _hour_ticks(view_start: datetime, view_end: datetime, x_for) -> list[HourTick]:
        ticks: list[HourTick] = []
        t = view_start.replace(minute=0, second=0, microsecond=0)
        if t < view_start:
            t += ONE_HOUR
        last_date_label = ""
        while t <= view_end:
            is_midnight = t.hour == 0
            date_label = None
            if is_midnight:
                label = format_date(t)
                if label != last_date_label:
                    date_label = last_date_label = label
            ticks.append(
                HourTick(
                    x=x_for(t),
                    label=f"{t.hour:02d}",
                    is_midnight=is_midnight,
                    length=12 if is_midnight else 5,
                    date_label=date_label,
                )
            )
            t += ONE_HOUR
        return ticks
