# tacore/slicers/fully_memorized.py
from __future__ import annotations

import sys
from typing import Any, Optional

from tacore.series.bar_series import Series
from tacore.slicers.memorized import MemorizedSlicer
from tacore.utils.datetime_utils import TimeLike

# 无上限的回看周期数
UNBOUNDED_PERIODS = sys.maxsize


class FullyMemorizedSlicer(MemorizedSlicer):
    """Expanding window: every slice starts at the first anchored bar."""

    def __init__(self, series: Series, period: Any, period_begin: Optional[TimeLike] = None) -> None:
        super().__init__(series, period, UNBOUNDED_PERIODS, period_begin)

    def _copy_for(self, series: Series, period_begin: TimeLike) -> "FullyMemorizedSlicer":
        return FullyMemorizedSlicer(series, self.period, period_begin)
