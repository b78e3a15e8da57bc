"""
Loaders Package - Tabular Resources into Series
"""

from .base import LoaderState, TabularLoader, fetch_text
from .date_series import NO_GROUP, DateSeriesLoader, LoaderBinding
from .histogram import HistogramSeriesLoader

__all__ = [
    'NO_GROUP',
    'DateSeriesLoader',
    'HistogramSeriesLoader',
    'LoaderBinding',
    'LoaderState',
    'TabularLoader',
    'fetch_text',
]
