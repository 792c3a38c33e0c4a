from .base import Indicator
from .cached import CachedIndicator
from .formula import FormulaIndicator, RecursiveFormulaIndicator, memoize
from .helpers import (
    BarFieldIndicator,
    ClosePriceIndicator,
    ConstantIndicator,
    HighPriceIndicator,
    LowPriceIndicator,
    OpenPriceIndicator,
    VolumeIndicator,
)
from .recursive import RecursiveCachedIndicator

# 别名
MemoizedIndicator = CachedIndicator
RecursiveEvaluator = RecursiveCachedIndicator

__all__ = [
    "Indicator",
    "CachedIndicator",
    "RecursiveCachedIndicator",
    "MemoizedIndicator",
    "RecursiveEvaluator",
    "FormulaIndicator",
    "RecursiveFormulaIndicator",
    "memoize",
    "ConstantIndicator",
    "BarFieldIndicator",
    "ClosePriceIndicator",
    "OpenPriceIndicator",
    "HighPriceIndicator",
    "LowPriceIndicator",
    "VolumeIndicator",
]
