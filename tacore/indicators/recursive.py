# tacore/indicators/recursive.py
from __future__ import annotations

from typing import Optional

from tacore.config import get_config
from tacore.indicators.base import T
from tacore.indicators.cached import CachedIndicator
from tacore.series.bar_series import Series
from tacore.utils.errors import InvalidArgumentError
from tacore.utils.logger import logs


class RecursiveCachedIndicator(CachedIndicator[T]):
    """
    Cached indicator whose calculate(i) reads get_value(i - 1) of itself
    (EMA-style recurrences).

    Before the cached lookup, if the distance between the requested index and
    max(removed_count, begin_index, highest_result_index) exceeds `recursion_threshold`,
    every index in between is filled in ascending order first. Each step then
    recurses one level only, so stack depth stays O(1).

    Formulas must treat index <= series.begin_index as their base case.
    """

    def __init__(self, series: Optional[Series], recursion_threshold: Optional[int] = None) -> None:
        super().__init__(series)
        if recursion_threshold is None:
            recursion_threshold = get_config().cache.recursion_threshold
        if recursion_threshold <= 0:
            raise InvalidArgumentError(
                f"recursion_threshold must be strictly positive: {recursion_threshold}"
            )
        self.recursion_threshold = recursion_threshold

    def get_value(self, index: int) -> T:
        series = self._series
        if series is not None and 0 <= index <= series.end_index:
            # 视图的 begin_index 可能大于 removed_count
            start = max(series.removed_count, series.begin_index, self._highest_result_index)
            if index - start > self.recursion_threshold:
                logs.debug(f"{self}: prefill {start}..{index - 1} before index {index}")
                for i in range(start, index):
                    super().get_value(i)
        return super().get_value(index)
