"""Pydantic models shared across the Mine Day core.

Serialised with camelCase aliases (``mineDayLabel``, ``startCivilDateTime``)
so renderers written against the browser field names keep working.
"""

from .civil import MIDNIGHT, AnchorTime, CivilDateTime
from .results import MineDayResult, SimulatedTime

__all__ = [
    # civil
    "AnchorTime",
    "CivilDateTime",
    "MIDNIGHT",
    # results
    "MineDayResult",
    "SimulatedTime",
]
