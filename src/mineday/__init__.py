"""mineday: custom day boundaries ("Mine Days") in any IANA timezone."""

from .catalogue import (
    FALLBACK_TIMEZONES,
    TIMEZONE_ALIASES,
    TIMEZONES,
    build_catalogue,
    default_timezone,
    filter_timezones,
    host_timezone_name,
    is_supported,
    normalize_timezone_id,
    resolve_timezone,
)
from .clock import LiveClock
from .engine import anchor_choices, anchor_end_time, compute_mine_day
from .errors import MalformedCivilInput, MineDayError, UnknownTimezone
from .formatting import (
    format_civil_minute,
    format_clock,
    format_date,
    timezone_options,
    parse_civil_input,
    range_labels,
    utc_range_labels,
)
from .schema import MIDNIGHT, AnchorTime, CivilDateTime, MineDayResult, SimulatedTime
from .session import MineDaySession
from .simulated import SimulatedTimeState
from .sinks import ConsoleSink, MineDayUpdate, Sink, SinkBus, create_console_sink
from .time_utils import (
    civil_from_instant,
    civil_in_utc,
    format_utc_offset,
    instant_from_civil,
    now_ms,
    utc_offset_label,
    utc_offset_minutes,
)
from .timeline import (
    BoundaryMarker,
    CurrentTimeMarker,
    HighlightBox,
    HourTick,
    Padding,
    TimelineGeometry,
    TimelineLayout,
)
from .types import (
    SELECTED_ANCHOR_KEY,
    SELECTED_TIMEZONE_KEY,
    ConsoleSinkConfig,
    MineDaySessionConfig,
    SelectionHook,
    SinkConfig,
)

__all__ = [
    # session
    "MineDaySession",
    "MineDaySessionConfig",
    # engine
    "anchor_choices",
    "anchor_end_time",
    "compute_mine_day",
    # conversion
    "civil_from_instant",
    "civil_in_utc",
    "format_utc_offset",
    "instant_from_civil",
    "now_ms",
    "utc_offset_label",
    "utc_offset_minutes",
    # catalogue
    "FALLBACK_TIMEZONES",
    "TIMEZONE_ALIASES",
    "TIMEZONES",
    "build_catalogue",
    "default_timezone",
    "filter_timezones",
    "host_timezone_name",
    "is_supported",
    "normalize_timezone_id",
    "resolve_timezone",
    # schema
    "AnchorTime",
    "CivilDateTime",
    "MIDNIGHT",
    "MineDayResult",
    "SimulatedTime",
    # live clock / simulation
    "LiveClock",
    "SimulatedTimeState",
    # timeline
    "BoundaryMarker",
    "CurrentTimeMarker",
    "HighlightBox",
    "HourTick",
    "Padding",
    "TimelineGeometry",
    "TimelineLayout",
    # formatting
    "format_civil_minute",
    "format_clock",
    "format_date",
    "timezone_options",
    "parse_civil_input",
    "range_labels",
    "utc_range_labels",
    # sinks
    "ConsoleSink",
    "ConsoleSinkConfig",
    "MineDayUpdate",
    "Sink",
    "SinkBus",
    "SinkConfig",
    "create_console_sink",
    # types / errors
    "SELECTED_ANCHOR_KEY",
    "SELECTED_TIMEZONE_KEY",
    "SelectionHook",
    "MalformedCivilInput",
    "MineDayError",
    "UnknownTimezone",
]
