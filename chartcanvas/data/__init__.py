"""
Data Package - Tabular Parsing and Series Stores
"""

from .dates import fill_missing_dates, format_date_label, normalize_date_token, parse_date_key
from .series import BarSeries, HistogramSeries, LineSeries, TimePoint, TimeSeries
from .tabular import TabularRecords, parse_number, parse_tabular

__all__ = [
    'BarSeries',
    'HistogramSeries',
    'LineSeries',
    'TabularRecords',
    'TimePoint',
    'TimeSeries',
    'fill_missing_dates',
    'format_date_label',
    'normalize_date_token',
    'parse_date_key',
    'parse_number',
    'parse_tabular',
]
