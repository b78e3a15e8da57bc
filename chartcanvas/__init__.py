"""
chartcanvas - Tabular Data to Chart Geometry

Loads small date-keyed or raw-numeric datasets from tab-separated resources
and turns them into geometry an SVG renderer can draw: nice axis scales,
histogram bins and smoothed curve paths.

Core Components:
- DateChart / HistogramChart: series containers
- DateSeriesLoader / HistogramSeriesLoader: async tabular loaders
- chartcanvas.geometry: stateless scale, binning and curve engines

Usage:
    from chartcanvas import DateChart

    chart = DateChart()
    sales = chart.add_line(title="Sales")
    loader = chart.tsv_loader("https://example.com/sales.tsv", date_column="date")
    loader.add_series(sales, "amount")
    await loader.load()
    scale = chart.calculate_y_axis_scale()
"""

from .charts import DateChart, HistogramChart
from .data.series import BarSeries, HistogramSeries, LineSeries, TimePoint
from .exceptions import (
    ChartCanvasError,
    ConfigurationError,
    EmptyResource,
    FetchError,
    InvalidConfiguration,
    MissingColumn,
)
from .loaders import DateSeriesLoader, HistogramSeriesLoader, LoaderState

__all__ = [
    'BarSeries',
    'ChartCanvasError',
    'ConfigurationError',
    'DateChart',
    'DateSeriesLoader',
    'EmptyResource',
    'FetchError',
    'HistogramChart',
    'HistogramSeries',
    'HistogramSeriesLoader',
    'InvalidConfiguration',
    'LineSeries',
    'LoaderState',
    'MissingColumn',
    'TimePoint',
]

__version__ = '1.0.0'
