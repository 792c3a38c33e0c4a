# tacore/series/bar.py
from __future__ import annotations

from datetime import timedelta
from typing import Optional

import pandas as pd

from tacore.utils.datetime_utils import DateTimeUtils, TimeLike
from tacore.utils.errors import InvalidArgumentError


class Bar:
    """
    One OHLCV observation over [begin_time, end_time).

    Invariants:
    - end_time never changes once the bar exists
    - only the forming (last) bar of a series is mutated, via add_price / add_trade
    - every mutation bumps `revision`; caches compare it to detect a changed bar
    """

    __slots__ = (
        "end_time",
        "time_period",
        "open_price",
        "high_price",
        "low_price",
        "close_price",
        "volume",
        "amount",
        "trades",
        "revision",
    )

    def __init__(
        self,
        end_time: TimeLike,
        open_price: Optional[float] = None,
        high_price: Optional[float] = None,
        low_price: Optional[float] = None,
        close_price: Optional[float] = None,
        volume: float = 0.0,
        amount: float = 0.0,
        trades: int = 0,
        time_period: timedelta = timedelta(days=1),
    ) -> None:
        period = pd.Timedelta(time_period)
        if period <= pd.Timedelta(0):
            raise InvalidArgumentError(f"time_period must be strictly positive: {time_period}")

        self.end_time: pd.Timestamp = DateTimeUtils.to_timestamp(end_time)
        self.time_period: pd.Timedelta = period
        self.open_price = open_price
        self.high_price = high_price
        self.low_price = low_price
        self.close_price = close_price
        self.volume = volume
        self.amount = amount
        self.trades = trades
        self.revision = 0

    # --------------------------------------------------
    @property
    def begin_time(self) -> pd.Timestamp:
        return self.end_time - self.time_period

    def in_period(self, ts: TimeLike) -> bool:
        ts = DateTimeUtils.align_tz(DateTimeUtils.to_timestamp(ts), self.end_time)
        return self.begin_time <= ts < self.end_time

    # --------------------------------------------------
    # forming bar 的原地更新
    # --------------------------------------------------
    def add_price(self, price: float) -> None:
        """Merge a price into OHLC."""
        if self.open_price is None:
            self.open_price = price
        if self.high_price is None or price > self.high_price:
            self.high_price = price
        if self.low_price is None or price < self.low_price:
            self.low_price = price
        self.close_price = price
        self.revision += 1

    def add_trade(self, volume: float, price: float) -> None:
        """Merge a trade: prices plus volume / amount / trade count."""
        self.add_price(price)
        self.volume += volume
        self.amount += volume * price
        self.trades += 1

    # --------------------------------------------------
    def is_bullish(self) -> bool:
        return (
            self.open_price is not None
            and self.close_price is not None
            and self.open_price < self.close_price
        )

    def is_bearish(self) -> bool:
        return (
            self.open_price is not None
            and self.close_price is not None
            and self.open_price > self.close_price
        )

    def __repr__(self) -> str:
        return (
            f"Bar(end_time={self.end_time}, open={self.open_price}, high={self.high_price}, "
            f"low={self.low_price}, close={self.close_price}, volume={self.volume})"
        )
