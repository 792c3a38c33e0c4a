# tacore/indicators/cached.py
from __future__ import annotations

from abc import abstractmethod
from collections import deque
from typing import Any, Deque, Optional, Tuple

from tacore.indicators.base import Indicator, T
from tacore.series.bar import Bar
from tacore.series.bar_series import Series
from tacore.utils.errors import OutOfRangeError
from tacore.utils.logger import logs

# 空槽标记（None 可能是合法结果）
_ABSENT: Any = object()


class CachedIndicator(Indicator[T]):
    """
    Memoizing indicator (FINAL)

    Subclasses implement calculate(index); get_value(index) guarantees that
    calculate runs at most once per retained index.

    Cache layout:
    - dense deque of slots, slot 0 holds index `_offset`
    - slots for indices < series.removed_count are dropped as the series evicts
    - never more live slots than series.maximum_bar_count

    Contract of get_value(index):
    1. no series                 -> calculate(index), nothing cached
    2. index < removed_count     -> value of removed_count (computed once, cached there)
    3. otherwise                 -> cached slot, or calculate + store
    index < 0, index > end_index, or (after 2.) index < begin_index of a view
                                 -> OutOfRangeError

    The forming last bar is tracked by identity + revision: if it is mutated
    or replaced, its slot is recomputed on the next request.
    """

    def __init__(self, series: Optional[Series]) -> None:
        super().__init__(series)
        self._results: Deque[Any] = deque()
        self._offset = 0
        self._highest_result_index = -1
        # (index, bar, revision) of the last value computed on end_index
        self._forming: Optional[Tuple[int, Bar, int]] = None

    @abstractmethod
    def calculate(self, index: int) -> T:
        """Pure formula for one index."""

    # --------------------------------------------------
    @property
    def highest_result_index(self) -> int:
        return self._highest_result_index

    def get_value(self, index: int) -> T:
        series = self._series
        if index < 0:
            raise OutOfRangeError(f"{self}: negative index {index}")

        if series is None:
            # 无时间依赖，不缓存
            return self.calculate(index)

        if index > series.end_index:
            raise OutOfRangeError(
                f"{self}: index {index} beyond series end index {series.end_index}"
            )

        removed = series.removed_count
        if index < removed:
            logs.trace(
                f"{self}: result of bar {index} already removed, use {removed}-th instead"
            )
            index = removed

        # 视图窗口之前的 index 不在该 series 内
        if index < series.begin_index:
            raise OutOfRangeError(
                f"{self}: index {index} before series begin index {series.begin_index}"
            )

        self._drop_removed(removed)
        self._refresh_forming_bar(series)
        return self._get_or_compute(index, series)

    # --------------------------------------------------
    def _get_or_compute(self, index: int, series: Series) -> T:
        slot = index - self._offset
        if 0 <= slot < len(self._results):
            value = self._results[slot]
            if value is not _ABSENT:
                return value

        # calculate 可能递归写入缓存，之后再重新定位槽位
        value = self.calculate(index)
        self._store(index, value, series.maximum_bar_count)

        if index > self._highest_result_index:
            self._highest_result_index = index
        if index == series.end_index:
            bar = series.get_bar(index)
            self._forming = (index, bar, bar.revision)
        return value

    def _store(self, index: int, value: Any, limit: Optional[int]) -> None:
        results = self._results
        if not results:
            self._offset = index
            results.append(value)
        elif index < self._offset:
            gap = self._offset - index - 1
            results.extendleft([_ABSENT] * gap)
            results.appendleft(value)
            self._offset = index
        else:
            slot = index - self._offset
            missing = slot - len(results) + 1
            if missing > 0:
                results.extend([_ABSENT] * missing)
            results[slot] = value

        if limit is not None:
            while len(results) > limit:
                results.popleft()
                self._offset += 1

    def _drop_removed(self, removed: int) -> None:
        excess = removed - self._offset
        if excess <= 0:
            return
        results = self._results
        if excess >= len(results):
            results.clear()
        else:
            for _ in range(excess):
                results.popleft()
        self._offset = removed

    def _refresh_forming_bar(self, series: Series) -> None:
        if self._forming is None:
            return
        index, bar, revision = self._forming
        if index < series.removed_count or index > series.end_index:
            self._forming = None
            return

        current = series.get_bar(index)
        if current is not bar or current.revision != revision:
            logs.trace(f"{self}: forming bar {index} changed, recompute on demand")
            slot = index - self._offset
            if 0 <= slot < len(self._results):
                self._results[slot] = _ABSENT
            self._forming = None
        elif index < series.end_index:
            # 已被新 bar 取代，值固定
            self._forming = None
