# tests/conftest.py
from __future__ import annotations

from datetime import timedelta
from typing import Iterable, Optional, Sequence

import pandas as pd
import pytest
from loguru import logger

from tacore.config import CoreConfig, set_config
from tacore.series import Bar, BarSeries


@pytest.fixture(autouse=True)
def disable_file_logger():
    logger.remove()
    logger.add(lambda msg: None)  # or sys.stderr
    yield


@pytest.fixture(autouse=True)
def default_core_config():
    """每个测试使用默认配置，结束后恢复"""
    previous = set_config(CoreConfig())
    yield
    set_config(previous)


def _make_bar(end_time, close: float, period: timedelta) -> Bar:
    return Bar(
        end_time=end_time,
        open_price=close,
        high_price=close,
        low_price=close,
        close_price=close,
        volume=1.0,
        time_period=period,
    )


@pytest.fixture
def series_factory():
    """
    make(times=None, closes=None, n=None, maximum_bar_count=None)

    - times  : explicit end times
    - closes : close prices (default: 1, 2, 3, ...)
    - n      : n daily bars from 2000-01-01 when times is omitted
    """

    def make(
        times: Optional[Iterable] = None,
        closes: Optional[Sequence[float]] = None,
        n: Optional[int] = None,
        maximum_bar_count: Optional[int] = None,
        name: str = "test",
        period: timedelta = timedelta(days=1),
    ) -> BarSeries:
        if times is None:
            count = n if n is not None else len(closes or [])
            times = pd.date_range("2000-01-01", periods=count, freq="D")
        times = list(times)
        if closes is None:
            closes = [float(i + 1) for i in range(len(times))]

        series = BarSeries(name=name, maximum_bar_count=maximum_bar_count)
        for t, c in zip(times, closes):
            series.add_bar(_make_bar(t, c, period))
        return series

    return make


@pytest.fixture
def bar_factory():
    def make(end_time, close: float = 1.0, period: timedelta = timedelta(days=1)) -> Bar:
        return _make_bar(end_time, close, period)

    return make


def years(*values: int) -> list:
    """
    1 月 1 日 00:00；同一年重复出现时依次 +1 分钟（bar 时间必须严格递增）
    """
    seen: dict = {}
    out = []
    for y in values:
        k = seen.get(y, 0)
        seen[y] = k + 1
        out.append(pd.Timestamp(year=y, month=1, day=1) + pd.Timedelta(minutes=k))
    return out


@pytest.fixture
def yearly():
    """yearly(2000, 2000, 2001, ...) -> 时间戳列表"""
    return years
