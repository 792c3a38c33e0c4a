from .base import Slice, TimeSeriesSlicer
from .fully_memorized import FullyMemorizedSlicer
from .memorized import CalendarSlicer, MemorizedSlicer
from .regular import RegularSlicer

__all__ = [
    "Slice",
    "TimeSeriesSlicer",
    "MemorizedSlicer",
    "CalendarSlicer",
    "RegularSlicer",
    "FullyMemorizedSlicer",
]
