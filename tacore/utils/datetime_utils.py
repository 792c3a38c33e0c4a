#!filepath: tacore/utils/datetime_utils.py
from __future__ import annotations

from datetime import datetime, timedelta
from typing import Any, Mapping, Union

import pandas as pd

from tacore.utils.errors import InvalidArgumentError

Period = Union[pd.DateOffset, pd.Timedelta]
TimeLike = Union[pd.Timestamp, datetime, str, int]

_PROBE = pd.Timestamp("2000-01-01")

# DateOffset kwds 的显示顺序
_PERIOD_UNITS = (
    ("years", "year"),
    ("months", "month"),
    ("weeks", "week"),
    ("days", "day"),
    ("hours", "hour"),
    ("minutes", "minute"),
    ("seconds", "second"),
)


class DateTimeUtils:
    """
    Time helpers shared by bars and slicers.

    - to_timestamp : anything time-like -> pandas.Timestamp
    - to_period    : anything period-like -> DateOffset / Timedelta
    - align_tz     : make two timestamps comparable
    """

    # ================================================================
    # timestamp
    # ================================================================
    @classmethod
    def to_timestamp(cls, value: TimeLike) -> pd.Timestamp:
        """
        输入可能为：
            pd.Timestamp / datetime
            "2025-11-07 09:15:00"
            1762177123                 # s
            1762177123456              # ms
            1762177123456789           # us
            1762177123456789000        # ns
        """
        if value is None:
            raise InvalidArgumentError("time value cannot be None")

        if isinstance(value, pd.Timestamp):
            return value

        if isinstance(value, datetime):
            return pd.Timestamp(value)

        # bool 是 int 的子类
        if isinstance(value, int) and not isinstance(value, bool):
            digits = len(str(abs(value)))
            if digits <= 10:
                return pd.Timestamp(value, unit="s")
            if digits <= 13:
                return pd.Timestamp(value, unit="ms")
            if digits <= 16:
                return pd.Timestamp(value, unit="us")
            return pd.Timestamp(value, unit="ns")

        if isinstance(value, str):
            try:
                return pd.Timestamp(value.strip())
            except ValueError as e:
                raise InvalidArgumentError(f"cannot parse time string: {value!r}") from e

        raise InvalidArgumentError(f"unsupported time type: {type(value)}")

    @classmethod
    def align_tz(cls, ts: pd.Timestamp, reference: pd.Timestamp) -> pd.Timestamp:
        """
        Return ts expressed in the timezone convention of reference.
        naive vs aware comparisons raise in pandas, so one side is adapted.
        """
        if reference.tzinfo is None:
            if ts.tzinfo is None:
                return ts
            return ts.tz_convert(None)
        if ts.tzinfo is None:
            return ts.tz_localize(reference.tzinfo)
        return ts.tz_convert(reference.tzinfo)

    # ================================================================
    # period
    # ================================================================
    @classmethod
    def to_period(cls, value: Any) -> Period:
        """
        Accepted:
            pd.DateOffset(years=1)          calendar aware
            timedelta / pd.Timedelta        fixed duration
            {"months": 3}                   DateOffset kwargs
            "1h" / "15min"                  Timedelta string
        """
        if value is None:
            raise InvalidArgumentError("Period cannot be None")

        if isinstance(value, pd.DateOffset):
            period: Period = value
        elif isinstance(value, (timedelta, pd.Timedelta)):
            period = pd.Timedelta(value)
        elif isinstance(value, Mapping):
            try:
                period = pd.DateOffset(**value)
            except (TypeError, ValueError) as e:
                raise InvalidArgumentError(f"invalid period fields: {dict(value)}") from e
        elif isinstance(value, str):
            try:
                period = pd.Timedelta(value)
            except ValueError as e:
                raise InvalidArgumentError(f"cannot parse period string: {value!r}") from e
        else:
            raise InvalidArgumentError(f"unsupported period type: {type(value)}")

        # period 必须让时间前进，否则切片会死循环
        if not _PROBE + period > _PROBE:
            raise InvalidArgumentError(f"period must be strictly positive: {value!r}")
        return period

    @classmethod
    def period_to_string(cls, period: Period) -> str:
        if isinstance(period, pd.Timedelta):
            c = period.components
            fields = {
                "days": c.days,
                "hours": c.hours,
                "minutes": c.minutes,
                "seconds": c.seconds,
            }
        else:
            fields = dict(period.kwds)
            if period.n != 1:
                fields = {k: v * period.n for k, v in fields.items()}

        parts = [
            f"{fields[key]} {label}(s)"
            for key, label in _PERIOD_UNITS
            if fields.get(key)
        ]
        return ", ".join(parts) if parts else str(period)

    @classmethod
    def format_period_name(cls, begin: pd.Timestamp, end: pd.Timestamp) -> str:
        return f"{begin:%H:%M %d/%m/%Y} - {end:%H:%M %d/%m/%Y}"
