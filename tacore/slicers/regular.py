# tacore/slicers/regular.py
from __future__ import annotations

from typing import Any, Optional

from tacore.series.bar_series import Series
from tacore.slicers.memorized import MemorizedSlicer
from tacore.utils.datetime_utils import TimeLike


class RegularSlicer(MemorizedSlicer):
    """Each slice is exactly one calendar period (no overlap)."""

    def __init__(self, series: Series, period: Any, period_begin: Optional[TimeLike] = None) -> None:
        super().__init__(series, period, 1, period_begin)

    def _copy_for(self, series: Series, period_begin: TimeLike) -> "RegularSlicer":
        return RegularSlicer(series, self.period, period_begin)
