#!filepath: tests/base_test/test_datetime_utils.py
from datetime import datetime, timedelta

import pandas as pd
import pytest

from tacore.utils.datetime_utils import DateTimeUtils as dt
from tacore.utils.errors import InvalidArgumentError


# ================================================================
# to_timestamp()
# ================================================================
def test_to_timestamp_from_string():
    assert dt.to_timestamp(" 2025-11-07 09:15:00 ") == pd.Timestamp("2025-11-07 09:15:00")


def test_to_timestamp_from_datetime_obj():
    assert dt.to_timestamp(datetime(2025, 11, 7, 9, 15)) == pd.Timestamp("2025-11-07 09:15")


@pytest.mark.parametrize(
    "value",
    [
        1762177123,  # s
        1762177123000,  # ms
        1762177123000000,  # us
        1762177123000000000,  # ns
    ],
)
def test_to_timestamp_from_epoch(value):
    assert dt.to_timestamp(value) == pd.Timestamp(1762177123, unit="s")


@pytest.mark.parametrize("value", [None, 1.5, True, "not a date"])
def test_to_timestamp_rejects(value):
    with pytest.raises(InvalidArgumentError):
        dt.to_timestamp(value)


# ================================================================
# align_tz()
# ================================================================
def test_align_tz_naive_reference():
    aware = pd.Timestamp("2020-01-01 08:00", tz="Asia/Shanghai")
    assert dt.align_tz(aware, pd.Timestamp("2020-01-01")) == pd.Timestamp("2020-01-01 00:00")


def test_align_tz_aware_reference():
    ref = pd.Timestamp("2020-01-01", tz="UTC")
    aligned = dt.align_tz(pd.Timestamp("2020-01-02"), ref)
    assert aligned == pd.Timestamp("2020-01-02", tz="UTC")
    assert dt.align_tz(pd.Timestamp("2020-01-02 08:00", tz="Asia/Shanghai"), ref).hour == 0


# ================================================================
# to_period()
# ================================================================
def test_to_period_accepts_offsets_and_durations():
    assert dt.to_period(pd.DateOffset(years=1)) == pd.DateOffset(years=1)
    assert dt.to_period(timedelta(hours=1)) == pd.Timedelta(hours=1)
    assert dt.to_period({"months": 3}) == pd.DateOffset(months=3)
    assert dt.to_period("15min") == pd.Timedelta(minutes=15)


@pytest.mark.parametrize(
    "value",
    [None, 3, pd.Timedelta(0), timedelta(days=-1), pd.DateOffset(years=-1), {"bogus": 1}, "abc"],
)
def test_to_period_rejects(value):
    with pytest.raises(InvalidArgumentError):
        dt.to_period(value)


# ================================================================
# 名称
# ================================================================
def test_period_to_string():
    assert dt.period_to_string(pd.DateOffset(years=1)) == "1 year(s)"
    assert dt.period_to_string(pd.DateOffset(months=1, days=2)) == "1 month(s), 2 day(s)"
    assert dt.period_to_string(pd.Timedelta(hours=1, minutes=30)) == "1 hour(s), 30 minute(s)"


def test_format_period_name():
    name = dt.format_period_name(pd.Timestamp("2000-01-01"), pd.Timestamp("2003-06-15 14:30"))
    assert name == "00:00 01/01/2000 - 14:30 15/06/2003"
