# tacore/indicators/helpers.py
from __future__ import annotations

from typing import Optional

from tacore.indicators.base import T
from tacore.indicators.cached import CachedIndicator
from tacore.series.bar_series import Series


class ConstantIndicator(CachedIndicator[T]):
    """
    Same value at every index.
    Without a series nothing is cached and any index >= 0 is accepted.
    """

    def __init__(self, value: T, series: Optional[Series] = None) -> None:
        super().__init__(series)
        self._value = value

    def calculate(self, index: int) -> T:
        return self._value

    def __repr__(self) -> str:
        return f"ConstantIndicator({self._value!r})"


class BarFieldIndicator(CachedIndicator[float]):
    """Reads one attribute of the bar at index."""

    field: str = "close_price"

    def __init__(self, series: Series) -> None:
        super().__init__(series)

    def calculate(self, index: int) -> float:
        return getattr(self._series.get_bar(index), self.field)


class ClosePriceIndicator(BarFieldIndicator):
    field = "close_price"


class OpenPriceIndicator(BarFieldIndicator):
    field = "open_price"


class HighPriceIndicator(BarFieldIndicator):
    field = "high_price"


class LowPriceIndicator(BarFieldIndicator):
    field = "low_price"


class VolumeIndicator(BarFieldIndicator):
    field = "volume"
