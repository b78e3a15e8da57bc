"""
Histogram Series Loader

Reads one value column of a tab-separated resource into distribution series.
Without a group column every value lands in a single series; with one, each
distinct group value becomes its own series.
"""

from typing import TYPE_CHECKING, Dict, List, Optional
import logging

import httpx

from ..config import SERIES_PALETTE, get_settings
from ..data.series import HistogramSeries
from ..data.tabular import TabularRecords, cell, parse_number
from ..exceptions import InvalidConfiguration
from .base import TabularLoader

if TYPE_CHECKING:
    from ..charts import HistogramChart

logger = logging.getLogger(__name__)

DEFAULT_OPACITY = 0.7


class HistogramSeriesLoader(TabularLoader):
    """Creates and fills the series of one HistogramChart."""

    def __init__(self, chart: "HistogramChart", url: str, value_column: str = "",
                 group_column: str = "", palette: Optional[List[str]] = None,
                 client: Optional[httpx.AsyncClient] = None):
        super().__init__(url, client)
        self.chart = chart
        self.value_column = value_column
        self.group_column = group_column
        self.palette = list(palette or SERIES_PALETTE)

    @property
    def is_configured(self) -> bool:
        return bool(self.value_column)

    def _validate_configuration(self) -> None:
        if not self.value_column:
            raise InvalidConfiguration("value column must be set before calling load()")
        if not self.palette:
            raise InvalidConfiguration("series palette must not be empty")

    def _color(self, position: int) -> str:
        return self.palette[position % len(self.palette)]

    def _populate(self, records: TabularRecords) -> List[HistogramSeries]:
        value_index = records.column_index(self.value_column)
        group_index = records.optional_column_index(self.group_column)

        if group_index is None:
            return [self._load_single(records, value_index)]
        return self._load_grouped(records, value_index, group_index)

    def _load_single(self, records: TabularRecords, value_index: int) -> HistogramSeries:
        series = self.chart.add_series(
            title=self.chart.title or get_settings().default_histogram_title,
            color=self._color(0),
            opacity=DEFAULT_OPACITY,
        )
        for row in records.rows:
            value = parse_number(cell(row, value_index))
            if value is not None:
                series.add_data(value)

        logger.info(f"Loaded {len(series)} values into '{series.title}' from {self.url}")
        return series

    def _load_grouped(self, records: TabularRecords, value_index: int, group_index: int) -> List[HistogramSeries]:
        values_by_group: Dict[str, List[float]] = {}
        for row in records.rows:
            value = parse_number(cell(row, value_index))
            if value is None:
                continue
            group = cell(row, group_index)
            if not group:
                continue
            values_by_group.setdefault(group, []).append(value)

        created = []
        for position, group in enumerate(sorted(values_by_group)):
            series = self.chart.add_series(title=group, color=self._color(position), opacity=DEFAULT_OPACITY)
            series.add_data_array(values_by_group[group])
            created.append(series)

        logger.info(f"Loaded {len(created)} grouped series from {self.url}")
        return created
