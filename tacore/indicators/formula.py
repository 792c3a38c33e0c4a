# tacore/indicators/formula.py
from __future__ import annotations

from typing import Callable, Optional

from tacore.indicators.base import Indicator, T
from tacore.indicators.cached import CachedIndicator
from tacore.indicators.recursive import RecursiveCachedIndicator
from tacore.series.bar_series import Series

# formula(indicator, index) -> value ; indicator 即缓存后的自身，可读取自身历史值
Formula = Callable[[Indicator, int], T]


class FormulaIndicator(CachedIndicator[T]):
    """Cache around a pure formula."""

    def __init__(self, series: Optional[Series], formula: Formula, name: Optional[str] = None) -> None:
        super().__init__(series)
        self._formula = formula
        self._name = name or getattr(formula, "__name__", type(self).__name__)

    def calculate(self, index: int) -> T:
        return self._formula(self, index)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._name})"


class RecursiveFormulaIndicator(RecursiveCachedIndicator[T]):
    """Cache around a self-referential formula, with iterative prefill."""

    def __init__(
        self,
        series: Optional[Series],
        formula: Formula,
        recursion_threshold: Optional[int] = None,
        name: Optional[str] = None,
    ) -> None:
        super().__init__(series, recursion_threshold)
        self._formula = formula
        self._name = name or getattr(formula, "__name__", type(self).__name__)

    def calculate(self, index: int) -> T:
        return self._formula(self, index)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._name})"


def memoize(
    series: Optional[Series],
    formula: Formula,
    recursive: bool = False,
    recursion_threshold: Optional[int] = None,
    name: Optional[str] = None,
) -> CachedIndicator:
    """
    Wrap a formula in the cache.

    用法：
        close = ClosePriceIndicator(series)
        ema = memoize(
            series,
            lambda ind, i: close[i] if i <= series.begin_index
            else ind[i - 1] + k * (close[i] - ind[i - 1]),
            recursive=True,
        )
    """
    if recursive:
        return RecursiveFormulaIndicator(series, formula, recursion_threshold, name)
    return FormulaIndicator(series, formula, name)
