# tests/indicators/test_formula_indicator.py
from __future__ import annotations

import pytest

from tacore import memoize
from tacore.indicators import (
    ClosePriceIndicator,
    ConstantIndicator,
    FormulaIndicator,
    HighPriceIndicator,
    LowPriceIndicator,
    OpenPriceIndicator,
    RecursiveFormulaIndicator,
    VolumeIndicator,
)
from tacore.utils.errors import InvalidArgumentError


def test_memoize_plain_formula(series_factory):
    series = series_factory(closes=[1.0, 2.0, 3.0, 4.0])
    close = ClosePriceIndicator(series)
    calls = []

    def doubled(ind, i):
        calls.append(i)
        return close[i] * 2

    ind = memoize(series, doubled)

    assert isinstance(ind, FormulaIndicator)
    assert ind.values() == [2.0, 4.0, 6.0, 8.0]
    assert ind.values() == [2.0, 4.0, 6.0, 8.0]
    assert calls == [0, 1, 2, 3]
    assert repr(ind) == "FormulaIndicator(doubled)"


def test_memoize_ema(series_factory):
    closes = [10.0, 12.0, 11.0, 15.0, 14.0]
    series = series_factory(closes=closes)
    close = ClosePriceIndicator(series)
    k = 2 / (3 + 1)

    ema = memoize(
        series,
        lambda ind, i: close[i] if i <= series.begin_index
        else ind[i - 1] + k * (close[i] - ind[i - 1]),
        recursive=True,
        recursion_threshold=2,
        name="ema3",
    )

    expected = [closes[0]]
    for c in closes[1:]:
        expected.append(expected[-1] + k * (c - expected[-1]))

    assert isinstance(ema, RecursiveFormulaIndicator)
    assert ema.recursion_threshold == 2
    assert ema.get_value(4) == pytest.approx(expected[4])
    assert ema.values() == pytest.approx(expected)
    assert repr(ema) == "RecursiveFormulaIndicator(ema3)"


def test_bar_field_indicators(series_factory):
    series = series_factory(closes=[5.0])
    series.add_trade(3.0, 7.0)

    assert OpenPriceIndicator(series)[0] == 5.0
    assert HighPriceIndicator(series)[0] == 7.0
    assert LowPriceIndicator(series)[0] == 5.0
    assert ClosePriceIndicator(series)[0] == 7.0
    assert VolumeIndicator(series)[0] == 4.0


def test_values_without_series_needs_bounds():
    constant = ConstantIndicator(1.5)

    assert constant.values(0, 2) == [1.5, 1.5, 1.5]
    with pytest.raises(InvalidArgumentError):
        constant.values()


def test_constant_indicator_with_series(series_factory):
    series = series_factory(n=3)
    constant = ConstantIndicator(0, series)

    assert constant.values() == [0, 0, 0]
    assert repr(constant) == "ConstantIndicator(0)"
