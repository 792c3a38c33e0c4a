# tacore/indicators/base.py
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, List, Optional, TypeVar

from tacore.series.bar_series import Series
from tacore.utils.errors import InvalidArgumentError

T = TypeVar("T")


class Indicator(ABC, Generic[T]):
    """
    Indicator contract (FINAL)

    A pure function of (upstream indicators, index) -> value.

    - references a series, never owns or mutates it
    - series may be None for stateless / constant indicators
    - get_value raises OutOfRangeError for index < 0 or index > series.end_index
    """

    def __init__(self, series: Optional[Series]) -> None:
        self._series = series

    @property
    def series(self) -> Optional[Series]:
        return self._series

    @abstractmethod
    def get_value(self, index: int) -> T:
        """Value at logical index."""

    # --------------------------------------------------
    def values(self, begin: Optional[int] = None, end: Optional[int] = None) -> List[T]:
        """
        Values over [begin, end] (inclusive), defaulting to the series window.
        """
        if self._series is None:
            if begin is None or end is None:
                raise InvalidArgumentError("begin and end are required for an indicator without series")
        else:
            begin = self._series.begin_index if begin is None else begin
            end = self._series.end_index if end is None else end
        return [self.get_value(i) for i in range(begin, end + 1)]

    def __getitem__(self, index: int) -> T:
        return self.get_value(index)

    def __repr__(self) -> str:
        return type(self).__name__
