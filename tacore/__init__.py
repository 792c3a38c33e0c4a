#!filepath: tacore/__init__.py
"""
tacore (FINAL)

Evaluation substrate for bar-series indicators.

Layer responsibilities:
- series     : WHAT is stored (bars, bounded retention, read-only views)
- indicators : HOW values are evaluated (memoized, recursion-safe)
- slicers    : WHERE calendar periods cut the series
- config     : library defaults (recursion threshold, retention, logging)

Single-threaded and synchronous: one owner per indicator instance.
"""

from .utils.logger import Logging, configure_logging, logs
from .utils.errors import InvalidArgumentError, OutOfRangeError, TacoreError, UserInputError
from .utils.datetime_utils import DateTimeUtils
from .config import CacheConfig, CoreConfig, LogConfig, get_config, set_config
from .series import Bar, BarSeries, Series, SeriesView
from .indicators import (
    CachedIndicator,
    ClosePriceIndicator,
    ConstantIndicator,
    Indicator,
    RecursiveCachedIndicator,
    memoize,
)
from .slicers import (
    FullyMemorizedSlicer,
    MemorizedSlicer,
    RegularSlicer,
    Slice,
    TimeSeriesSlicer,
)

datetime_utils = DateTimeUtils

__all__ = [
    "logs", "Logging", "configure_logging",
    "TacoreError", "OutOfRangeError", "InvalidArgumentError", "UserInputError",
    "datetime_utils",
    "CoreConfig", "CacheConfig", "LogConfig", "get_config", "set_config",
    "Bar", "BarSeries", "Series", "SeriesView",
    "Indicator", "CachedIndicator", "RecursiveCachedIndicator",
    "ConstantIndicator", "ClosePriceIndicator", "memoize",
    "TimeSeriesSlicer", "Slice", "MemorizedSlicer", "RegularSlicer", "FullyMemorizedSlicer",
]
