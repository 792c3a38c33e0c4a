# tests/slicers/test_fully_memorized_slicer.py
from __future__ import annotations

import pandas as pd

from tacore.slicers import FullyMemorizedSlicer, MemorizedSlicer

YEAR = pd.DateOffset(years=1)


def bounds(slicer):
    return [(s.begin_index, s.end_index) for s in slicer.slices]


def test_every_slice_starts_at_first_bar(series_factory, yearly):
    series = series_factory(times=yearly(2000, 2001, 2002, 2003, 2004))
    slicer = FullyMemorizedSlicer(series, YEAR)

    assert bounds(slicer) == [(0, 0), (0, 1), (0, 2), (0, 3), (0, 4)]


def test_same_as_memorized_with_enough_periods(series_factory, yearly):
    series = series_factory(
        times=yearly(2000, 2000, 2000, 2001, 2001, 2001, 2002, 2002, 2002, 2002, 2005, 2005)
    )

    fully = FullyMemorizedSlicer(series, YEAR)
    memorized = MemorizedSlicer(series, YEAR, series.bar_count)

    assert bounds(fully) == bounds(memorized) == [(0, 2), (0, 5), (0, 9), (0, 11)]


def test_forced_anchor(series_factory, yearly):
    series = series_factory(times=yearly(2000, 2001, 2002, 2003))
    slicer = FullyMemorizedSlicer(series, YEAR, period_begin="2001-01-01")

    assert bounds(slicer) == [(1, 1), (1, 2), (1, 3)]


def test_apply_for_series_keeps_kind(series_factory, yearly):
    series = series_factory(times=yearly(2000, 2001, 2002))
    slicer = FullyMemorizedSlicer(series, YEAR)

    applied = slicer.apply_for_series(series_factory(times=yearly(2000, 2000, 2001, 2002)))

    assert isinstance(applied, FullyMemorizedSlicer)
    assert applied == slicer
    assert bounds(applied) == [(0, 1), (0, 2), (0, 3)]
    assert applied.name == "FullyMemorizedSlicer Period: 1 year(s)"
