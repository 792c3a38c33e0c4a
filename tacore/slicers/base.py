# tacore/slicers/base.py
from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Iterator, Optional, Sequence

import pandas as pd

from tacore.series.bar_series import Series, SeriesView
from tacore.utils.datetime_utils import Period, TimeLike


@dataclass(frozen=True)
class Slice:
    """
    One slice produced by a slicer (immutable).

    begin_index / end_index : inclusive range into the sliced series
    period_start            : start of the calendar period the slice closes on
    period                  : slicer period
    series                  : view over [begin_index, end_index]
    """

    begin_index: int
    end_index: int
    period_start: pd.Timestamp
    period: Period
    series: SeriesView

    @property
    def bar_count(self) -> int:
        return self.end_index - self.begin_index + 1


class TimeSeriesSlicer(ABC):
    """
    TimeSeriesSlicer contract (FINAL)

    - get_slice(position)        -> sub-series of slice `position`
    - get_number_of_slices()     -> number of slices
    - apply_for_series(series)   -> same period / anchor on another series

    Two slicers are equal iff same kind, period and period_begin,
    whatever series they were built on.
    """

    @property
    @abstractmethod
    def series(self) -> Series:
        """The (anchored) series actually sliced."""

    @property
    @abstractmethod
    def period(self) -> Period: ...

    @property
    @abstractmethod
    def period_begin(self) -> pd.Timestamp: ...

    @property
    @abstractmethod
    def slices(self) -> Sequence[Slice]:
        """Slices in period order (read-only, not copied)."""

    @property
    @abstractmethod
    def name(self) -> str: ...

    @property
    @abstractmethod
    def period_name(self) -> str: ...

    @abstractmethod
    def apply_for_series(
        self, series: Series, period_begin: Optional[TimeLike] = None
    ) -> "TimeSeriesSlicer": ...

    # --------------------------------------------------
    def get_slice(self, position: int) -> SeriesView:
        return self.slices[position].series

    def get_number_of_slices(self) -> int:
        return len(self.slices)

    def average_bars_per_slice(self) -> float:
        n = self.get_number_of_slices()
        if n == 0:
            return 0.0
        return sum(s.bar_count for s in self.slices) / n

    def __len__(self) -> int:
        return self.get_number_of_slices()

    def __iter__(self) -> Iterator[SeriesView]:
        for s in self.slices:
            yield s.series

    def __getitem__(self, position: int) -> SeriesView:
        return self.get_slice(position)

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, TimeSeriesSlicer) or type(self) is not type(other):
            return False
        return (
            type(self.period) is type(other.period)
            and self.period == other.period
            and self.period_begin == other.period_begin
        )

    def __hash__(self) -> int:
        return hash((type(self).__name__, repr(self.period), self.period_begin))
