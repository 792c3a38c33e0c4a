# tacore/series/bar_series.py
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Iterator, List, Optional

from tacore.config import get_config
from tacore.series.bar import Bar
from tacore.utils.datetime_utils import DateTimeUtils
from tacore.utils.errors import InvalidArgumentError, OutOfRangeError
from tacore.utils.logger import logs

UNNAMED_SERIES_NAME = "unnamed_series"


class Series(ABC):
    """
    Read contract shared by BarSeries and SeriesView.

    Indices are logical and never reused:
    - begin_index .. end_index are retrievable
    - indices < removed_count are gone for good
    - empty  <=>  end_index == begin_index - 1
    """

    @property
    @abstractmethod
    def name(self) -> str: ...

    @property
    @abstractmethod
    def begin_index(self) -> int: ...

    @property
    @abstractmethod
    def end_index(self) -> int: ...

    @property
    @abstractmethod
    def removed_count(self) -> int: ...

    @property
    @abstractmethod
    def maximum_bar_count(self) -> Optional[int]:
        """None means unbounded."""

    @abstractmethod
    def get_bar(self, index: int) -> Bar: ...

    # --------------------------------------------------
    @property
    def bar_count(self) -> int:
        return self.end_index - self.begin_index + 1

    def size(self) -> int:
        return self.bar_count

    @property
    def is_empty(self) -> bool:
        return self.bar_count <= 0

    @property
    def first_bar(self) -> Bar:
        return self.get_bar(self.begin_index)

    @property
    def last_bar(self) -> Bar:
        return self.get_bar(self.end_index)

    def bars(self) -> List[Bar]:
        return [self.get_bar(i) for i in range(self.begin_index, self.end_index + 1)]

    def sub_series(self, begin_index: int, end_index: int) -> "SeriesView":
        """
        View over [begin_index, end_index] (both inclusive). Never copies bars.
        """
        return SeriesView(self, begin_index, end_index)

    @property
    def series_period_description(self) -> str:
        if self.is_empty:
            return ""
        return DateTimeUtils.format_period_name(self.first_bar.end_time, self.last_bar.end_time)

    def __len__(self) -> int:
        return max(self.bar_count, 0)

    def __iter__(self) -> Iterator[Bar]:
        for i in range(self.begin_index, self.end_index + 1):
            yield self.get_bar(i)

    def __getitem__(self, index: int) -> Bar:
        return self.get_bar(index)

    def _out_of_range(self, index: int) -> OutOfRangeError:
        return OutOfRangeError(
            f"Series `{self.name}`: index={index}, "
            f"begin={self.begin_index}, end={self.end_index}, removed={self.removed_count}"
        )


class BarSeries(Series):
    """
    Bounded, append-only bar storage.

    Contract:
    - add_bar(bar)               append at end_index + 1, evict oldest above the cap
    - add_bar(bar, replace=True) swap the forming last bar
    - set_maximum_bar_count(n)   cap retained bars, evicting immediately
    - get_bar(i)                 OutOfRange for i < removed_count or i > end_index

    Eviction has no callbacks: indicators notice it on their next get_value.
    """

    def __init__(
        self,
        name: Optional[str] = None,
        bars: Optional[List[Bar]] = None,
        maximum_bar_count: Optional[int] = None,
    ) -> None:
        self._name = name or UNNAMED_SERIES_NAME
        self._bars: List[Bar] = []
        self._removed_count = 0

        if maximum_bar_count is None:
            maximum_bar_count = get_config().cache.default_maximum_bar_count
        self._maximum_bar_count: Optional[int] = None
        if maximum_bar_count is not None:
            self.set_maximum_bar_count(maximum_bar_count)

        for bar in bars or []:
            self.add_bar(bar)

    # --------------------------------------------------
    @property
    def name(self) -> str:
        return self._name

    @property
    def begin_index(self) -> int:
        return self._removed_count

    @property
    def end_index(self) -> int:
        return self._removed_count + len(self._bars) - 1

    @property
    def removed_count(self) -> int:
        return self._removed_count

    @property
    def maximum_bar_count(self) -> Optional[int]:
        return self._maximum_bar_count

    # --------------------------------------------------
    def get_bar(self, index: int) -> Bar:
        inner = index - self._removed_count
        if index < 0 or inner < 0 or inner >= len(self._bars):
            raise self._out_of_range(index)
        return self._bars[inner]

    def add_bar(self, bar: Bar, replace: bool = False) -> None:
        if bar is None:
            raise InvalidArgumentError("Cannot add None bar")

        if replace and self._bars:
            self._bars[-1] = bar
            return

        if self._bars:
            last_end = self._bars[-1].end_time
            if not DateTimeUtils.align_tz(bar.end_time, last_end) > last_end:
                raise InvalidArgumentError(
                    f"Cannot add a bar with end time {bar.end_time} <= series end time {last_end}"
                )

        self._bars.append(bar)
        self._remove_exceeding_bars()

    append = add_bar

    def add_price(self, price: float) -> None:
        """Update the forming last bar with a price."""
        self.last_bar.add_price(price)

    def add_trade(self, volume: float, price: float) -> None:
        """Update the forming last bar with a trade."""
        self.last_bar.add_trade(volume, price)

    def set_maximum_bar_count(self, maximum_bar_count: int) -> None:
        if maximum_bar_count is None or maximum_bar_count <= 0:
            raise InvalidArgumentError(
                f"Maximum bar count must be strictly positive: {maximum_bar_count}"
            )
        self._maximum_bar_count = maximum_bar_count
        self._remove_exceeding_bars()

    set_max_count = set_maximum_bar_count

    # --------------------------------------------------
    def _remove_exceeding_bars(self) -> None:
        if self._maximum_bar_count is None:
            return
        excess = len(self._bars) - self._maximum_bar_count
        if excess <= 0:
            return
        del self._bars[:excess]
        self._removed_count += excess
        logs.debug(
            f"[BarSeries] {self._name}: evicted {excess} bar(s), removed_count={self._removed_count}"
        )

    def __repr__(self) -> str:
        return (
            f"BarSeries(name={self._name!r}, begin={self.begin_index}, end={self.end_index}, "
            f"removed={self._removed_count}, max={self._maximum_bar_count})"
        )


class SeriesView(Series):
    """
    Read-only window [begin_index, end_index] over a backing series.

    - shares the backing bars (backing handle + index range)
    - valid while its indices are still retained by the backing series
    - removed_count / maximum_bar_count are those of the backing series
    """

    def __init__(self, backing: Series, begin_index: int, end_index: int) -> None:
        if begin_index < 0:
            raise InvalidArgumentError(f"View begin index must be >= 0: {begin_index}")
        if end_index < begin_index - 1:
            raise InvalidArgumentError(
                f"View end index {end_index} must be >= begin index - 1 ({begin_index - 1})"
            )
        if end_index > backing.end_index:
            raise InvalidArgumentError(
                f"View end index {end_index} beyond backing end index {backing.end_index}"
            )
        if begin_index < backing.begin_index:
            raise InvalidArgumentError(
                f"View begin index {begin_index} before backing begin index {backing.begin_index}"
            )
        self._backing = backing
        self._begin = begin_index
        self._end = end_index

    # --------------------------------------------------
    @property
    def backing(self) -> Series:
        return self._backing

    @property
    def name(self) -> str:
        return self._backing.name

    @property
    def begin_index(self) -> int:
        return self._begin

    @property
    def end_index(self) -> int:
        return self._end

    @property
    def removed_count(self) -> int:
        return self._backing.removed_count

    @property
    def maximum_bar_count(self) -> Optional[int]:
        return self._backing.maximum_bar_count

    def get_bar(self, index: int) -> Bar:
        if index < self._begin or index > self._end:
            raise self._out_of_range(index)
        return self._backing.get_bar(index)

    # 视图只读
    def add_bar(self, bar: Bar, replace: bool = False) -> None:
        raise InvalidArgumentError("Cannot add a bar to a series view")

    def set_maximum_bar_count(self, maximum_bar_count: int) -> None:
        raise InvalidArgumentError("Cannot set a maximum bar count on a series view")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SeriesView):
            return NotImplemented
        return (
            self._backing is other._backing
            and self._begin == other._begin
            and self._end == other._end
        )

    def __hash__(self) -> int:
        return hash((id(self._backing), self._begin, self._end))

    def __repr__(self) -> str:
        return f"SeriesView(name={self.name!r}, begin={self._begin}, end={self._end})"
