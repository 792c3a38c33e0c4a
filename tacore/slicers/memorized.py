# tacore/slicers/memorized.py
from __future__ import annotations

from typing import Any, List, Optional, Tuple

import pandas as pd

from tacore.series.bar_series import Series, SeriesView
from tacore.slicers.base import Slice, TimeSeriesSlicer
from tacore.utils.datetime_utils import DateTimeUtils, Period, TimeLike
from tacore.utils.errors import InvalidArgumentError
from tacore.utils.logger import logs


class MemorizedSlicer(TimeSeriesSlicer):
    """
    Calendar slicer with look-back memory.

    Slice i closes on calendar period i and spans the last
    `periods_per_slice` periods that contained bars.

    Rules:
    - periods are half-open [begin, begin + period); a bar exactly on a
      boundary belongs to the period it starts
    - an anchor before the first bar snaps to the first bar end_time;
      bars before the anchor are skipped
    - periods without bars emit nothing
    - periods_per_slice = 1 -> one period per slice (RegularSlicer)
    - periods_per_slice >= number of periods -> expanding window (FullyMemorizedSlicer)

    Periods advance one at a time (begin = end; end = begin + period), so a
    month period anchored on Jan 31 runs Jan 31 -> Feb 29 -> Mar 29 -> ...
    Each slice is labelled with the start of the period it closes on.
    """

    def __init__(
        self,
        series: Series,
        period: Any,
        periods_per_slice: int,
        period_begin: Optional[TimeLike] = None,
    ) -> None:
        if period is None:
            raise InvalidArgumentError("Period cannot be None")
        if periods_per_slice is None or periods_per_slice < 1:
            raise InvalidArgumentError(
                f"Periods per slice must be at least 1: {periods_per_slice}"
            )
        if series is None or series.is_empty:
            raise InvalidArgumentError("Cannot slice an empty series")

        self._period: Period = DateTimeUtils.to_period(period)
        self._periods_per_slice = periods_per_slice

        # 1) anchor 归一化
        index = series.begin_index
        first_time = series.get_bar(index).end_time
        if period_begin is None:
            anchor = first_time
        else:
            anchor = DateTimeUtils.align_tz(DateTimeUtils.to_timestamp(period_begin), first_time)
            if anchor < first_time:
                anchor = first_time

        # 2) 跳过 anchor 之前的 bar
        while (
            index <= series.end_index
            and DateTimeUtils.align_tz(series.get_bar(index).end_time, anchor) < anchor
        ):
            index += 1

        self._period_begin: pd.Timestamp = anchor
        self._series = SeriesView(series, index, series.end_index)
        self._slices: Tuple[Slice, ...] = tuple(self._split())

    # --------------------------------------------------
    @property
    def series(self) -> SeriesView:
        return self._series

    @property
    def period(self) -> Period:
        return self._period

    @property
    def period_begin(self) -> pd.Timestamp:
        return self._period_begin

    @property
    def periods_per_slice(self) -> int:
        return self._periods_per_slice

    @property
    def slices(self) -> Tuple[Slice, ...]:
        return self._slices

    @property
    def name(self) -> str:
        return f"{type(self).__name__} Period: {DateTimeUtils.period_to_string(self._period)}"

    @property
    def period_name(self) -> str:
        if self._series.is_empty:
            return ""
        return DateTimeUtils.format_period_name(
            self._period_begin, self._series.last_bar.end_time
        )

    # --------------------------------------------------
    def apply_for_series(
        self, series: Series, period_begin: Optional[TimeLike] = None
    ) -> "MemorizedSlicer":
        if period_begin is None:
            period_begin = self._period_begin
        return self._copy_for(series, period_begin)

    def _copy_for(self, series: Series, period_begin: TimeLike) -> "MemorizedSlicer":
        return MemorizedSlicer(series, self._period, self._periods_per_slice, period_begin)

    # --------------------------------------------------
    def _time_at(self, index: int) -> pd.Timestamp:
        return DateTimeUtils.align_tz(self._series.get_bar(index).end_time, self._period_begin)

    def _split(self) -> List[Slice]:
        series = self._series
        slices: List[Slice] = []
        if series.is_empty:
            logs.debug(f"[{type(self).__name__}] no bar after anchor {self._period_begin}")
            return slices

        k = self._periods_per_slice
        period = self._period
        begin = self._period_begin
        end = begin + period
        # 当前有 bar 的周期起点（slice 标签）
        opened = begin

        index = series.begin_index
        starts = [index]
        while index <= series.end_index:
            t = self._time_at(index)
            if begin <= t < end:
                index += 1
            elif t < end + period:
                # bar 落在下一个周期：关闭当前周期
                slices.append(self._create_slice(starts[max(len(starts) - k, 0)], index - 1, opened))
                starts.append(index)
                begin, end = end, end + period
                opened = begin
                index += 1
            else:
                # 空周期，只前移
                begin, end = end, end + period

        slices.append(self._create_slice(starts[max(len(starts) - k, 0)], series.end_index, opened))

        logs.debug(
            f"[{type(self).__name__}] {series.name}: {len(slices)} slice(s), "
            f"period={DateTimeUtils.period_to_string(self._period)}, k={k}"
        )
        return slices

    def _create_slice(self, begin_index: int, end_index: int, period_start: pd.Timestamp) -> Slice:
        return Slice(
            begin_index=begin_index,
            end_index=end_index,
            period_start=period_start,
            period=self._period,
            series=SeriesView(self._series, begin_index, end_index),
        )

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(period={self._period!r}, period_begin={self._period_begin}, "
            f"periods_per_slice={self._periods_per_slice}, slices={len(self._slices)})"
        )


# 别名
CalendarSlicer = MemorizedSlicer
