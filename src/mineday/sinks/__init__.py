from .bus import SinkBus
from .console import ConsoleSink, create_console_sink
from .types import MineDayUpdate, Sink

__all__ = ["ConsoleSink", "MineDayUpdate", "SinkBus", "Sink", "create_console_sink"]
