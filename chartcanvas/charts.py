"""
Chart Containers

A chart owns its series and hands out stable integer handles for them. The
containers glue series data to the stateless geometry engines; they hold
display settings but never render anything themselves.
"""

from itertools import count
from typing import List, Optional
import logging

import numpy as np

from .config import get_settings
from .data.series import BarSeries, HistogramSeries, LineSeries, TimeSeries
from .geometry.binning import assign_frequencies, compute_bins
from .geometry.curve import DEFAULT_TENSION, bin_center_points, smooth_path
from .geometry.models import AxisScale, BinningConfig, BinSet, CurvePath, Viewport
from .geometry.scale import compute_axis_scale

logger = logging.getLogger(__name__)

EMPTY_HISTOGRAM_RANGE = (0.0, 100.0)


class DateChart:
    """Time-series chart with line and bar series on one or two y axes."""

    def __init__(self, title: str = ""):
        number_format = get_settings().default_number_format
        self.title = title
        self.x_axis_title = ""
        self.y_axis_title = ""
        self.y_axis_format = number_format
        self.second_axis = False
        self.second_axis_title = ""
        self.second_axis_format = number_format
        self.lines: List[LineSeries] = []
        self.bars: List[BarSeries] = []
        self._ids = count()

    def add_line(self, title: str = "", color: str = "black", line_width: float = 2,
                 line_type: str = "solid", secondary_axis: bool = False) -> LineSeries:
        line = LineSeries(
            id=next(self._ids),
            title=title,
            color=color,
            line_width=line_width,
            line_type=line_type,
            secondary_axis=secondary_axis,
        )
        self.lines.append(line)
        return line

    def add_bar(self, title: str = "", color: str = "blue", secondary_axis: bool = False) -> BarSeries:
        bar = BarSeries(id=next(self._ids), title=title, color=color, secondary_axis=secondary_axis)
        self.bars.append(bar)
        return bar

    @property
    def series(self) -> List[TimeSeries]:
        return [*self.lines, *self.bars]

    def get_series(self, series_id: int) -> Optional[TimeSeries]:
        for series in self.series:
            if series.id == series_id:
                return series
        return None

    def owns(self, series: TimeSeries) -> bool:
        return self.get_series(series.id) is series

    def tsv_loader(self, url: str, **options):
        """Create a DateSeriesLoader bound to this chart."""
        from .loaders.date_series import DateSeriesLoader
        return DateSeriesLoader(self, url, **options)

    def axis_format(self, secondary: bool = False) -> str:
        return self.second_axis_format if secondary else self.y_axis_format

    def calculate_y_axis_scale(self, secondary: bool = False) -> AxisScale:
        """
        Compute the tick scale of the primary or secondary y axis.

        Args:
            secondary: Use series assigned to the secondary axis

        Returns:
            AxisScale over every non-empty series on that axis
        """
        values = [
            series.values for series in self.series
            if series.secondary_axis == secondary and series.points
        ]
        return compute_axis_scale(values, self.axis_format(secondary))


class HistogramChart:
    """Distribution chart; every series shares one bin layout."""

    def __init__(self, title: str = "", bin_count: Optional[int] = None, bin_width: Optional[float] = None):
        number_format = get_settings().default_number_format
        self.title = title
        self.subtitle = ""
        self.x_axis_title = ""
        self.x_axis_format = number_format
        self.y_axis_title = "Frequency"
        self.y_axis_format = number_format
        self.bin_count = bin_count
        self.bin_width = bin_width
        self.series: List[HistogramSeries] = []
        self._ids = count()

    def add_series(self, title: str = "", color: str = "blue", opacity: float = 0.7) -> HistogramSeries:
        series = HistogramSeries(id=next(self._ids), title=title, color=color, opacity=opacity)
        self.series.append(series)
        return series

    def tsv_loader(self, url: str, **options):
        """Create a HistogramSeriesLoader bound to this chart."""
        from .loaders.histogram import HistogramSeriesLoader
        return HistogramSeriesLoader(self, url, **options)

    @property
    def binning(self) -> BinningConfig:
        return BinningConfig(bin_width=self.bin_width, bin_count=self.bin_count)

    @property
    def total_samples(self) -> int:
        return sum(len(series) for series in self.series)

    def get_data_range(self) -> tuple:
        """Return (min, max) over every sample, or (0, 100) for an empty chart."""
        values = np.fromiter((value for series in self.series for value in series.points), dtype=float)
        if values.size == 0:
            return EMPTY_HISTOGRAM_RANGE
        return float(values.min()), float(values.max())

    def calculate_bins(self) -> BinSet:
        data_min, data_max = self.get_data_range()
        bins = compute_bins(data_min, data_max, self.binning, self.total_samples)
        logger.debug(f"Histogram '{self.title}' uses {bins.count} bins of width {bins.width}")
        return bins

    def frequencies_for(self, series: HistogramSeries, bins: Optional[BinSet] = None) -> List[int]:
        bins = bins or self.calculate_bins()
        return assign_frequencies(series.points, bins.boundaries)

    def max_frequency(self, bins: Optional[BinSet] = None) -> int:
        bins = bins or self.calculate_bins()
        return max(
            (max(self.frequencies_for(series, bins), default=0) for series in self.series),
            default=0,
        )

    def curve_path(self, series: HistogramSeries, plot_width: float, plot_height: float,
                   left: float = 0.0, top: float = 0.0, tension: float = DEFAULT_TENSION,
                   bins: Optional[BinSet] = None) -> CurvePath:
        """
        Smooth the series' histogram into a Bezier path.

        The y scale is shared across series (highest frequency of any series)
        so overlaid curves stay comparable.
        """
        bins = bins or self.calculate_bins()
        viewport = Viewport(
            domain_min=bins.boundaries[0],
            domain_max=bins.boundaries[-1],
            max_frequency=self.max_frequency(bins),
            plot_width=plot_width,
            plot_height=plot_height,
            left=left,
            top=top,
        )
        points = bin_center_points(self.frequencies_for(series, bins), bins.boundaries)
        return smooth_path(points, viewport, tension)
