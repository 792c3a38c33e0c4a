from .bar import Bar
from .bar_series import BarSeries, Series, SeriesView

__all__ = ["Bar", "BarSeries", "Series", "SeriesView"]
