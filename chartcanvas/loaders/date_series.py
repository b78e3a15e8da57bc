"""
Date Series Loader

Binds named columns of a tab-separated resource to the line and bar series
of a DateChart. Bindings live in one table keyed by series handle; a binding
may carry a group key so that one column fans out into several series, one
per value of the group column.
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Dict, List, NamedTuple, Optional
import logging

import httpx

from ..data.dates import fill_missing_dates, normalize_date_token
from ..data.series import TimePoint, TimeSeries
from ..data.tabular import TabularRecords, cell, parse_number
from ..exceptions import InvalidConfiguration
from .base import TabularLoader

if TYPE_CHECKING:
    from ..charts import DateChart

logger = logging.getLogger(__name__)

# Group key of a binding that ignores the group column
NO_GROUP = None


class LoaderBinding(NamedTuple):
    """One series <- column assignment, optionally restricted to a group."""
    series_id: int
    column: str
    group: Optional[str] = NO_GROUP


@dataclass
class _ResolvedBinding:
    series: TimeSeries
    column_index: int
    group: Optional[str]


class DateSeriesLoader(TabularLoader):
    """Loads date-keyed values into the series of one DateChart."""

    def __init__(self, chart: "DateChart", url: str, date_column: str = "",
                 group_column: str = "", comment_column: str = "",
                 fill_missing_dates: bool = False, client: Optional[httpx.AsyncClient] = None):
        super().__init__(url, client)
        self.chart = chart
        self.date_column = date_column
        self.group_column = group_column
        self.comment_column = comment_column
        self.fill_missing_dates = fill_missing_dates
        self.bindings: List[LoaderBinding] = []

    def add_series(self, series: TimeSeries, column: str, group: Optional[str] = NO_GROUP) -> "DateSeriesLoader":
        """
        Bind a series to a column.

        Args:
            series: Series created by this loader's chart
            column: Header name of the value column
            group: Group value the binding is restricted to

        Returns:
            The loader, for chaining

        Raises:
            InvalidConfiguration: If the series belongs to another chart
                or the group key is empty
        """
        if not self.chart.owns(series):
            raise InvalidConfiguration(f"series '{series.title}' does not belong to this chart")
        if group is not NO_GROUP and not group:
            raise InvalidConfiguration("group key must not be empty")
        self.bindings.append(LoaderBinding(series.id, column, group))
        return self

    @property
    def is_configured(self) -> bool:
        return bool(self.date_column) and bool(self.bindings)

    def _validate_configuration(self) -> None:
        if not self.date_column:
            raise InvalidConfiguration("date column must be set")
        if not self.bindings:
            raise InvalidConfiguration("at least one series must be added with add_series()")
        if not self.group_column and any(binding.group is not NO_GROUP for binding in self.bindings):
            raise InvalidConfiguration("group-bound series require a group column")

    def _resolve(self, records: TabularRecords) -> List[_ResolvedBinding]:
        return [
            _ResolvedBinding(
                series=self.chart.get_series(binding.series_id),
                column_index=records.column_index(binding.column),
                group=binding.group,
            )
            for binding in self.bindings
        ]

    def _populate(self, records: TabularRecords) -> Dict[int, List[TimePoint]]:
        date_index = records.column_index(self.date_column)
        group_index = records.optional_column_index(self.group_column)
        comment_index = records.optional_column_index(self.comment_column)
        resolved = self._resolve(records)

        collected: Dict[int, List[TimePoint]] = {}
        for row in records.rows:
            date_token = cell(row, date_index)
            if not date_token:
                continue
            date_key = normalize_date_token(date_token)

            row_group = None
            if group_index is not None:
                row_group = cell(row, group_index)
                if not row_group:
                    continue
            comment = (cell(row, comment_index) or "") if comment_index is not None else ""

            for binding in resolved:
                if group_index is not None and binding.group != row_group:
                    continue
                value = parse_number(cell(row, binding.column_index))
                if value is None:
                    continue
                collected.setdefault(binding.series.id, []).append(TimePoint(date_key, value, comment))

        series_by_id = {binding.series.id: binding.series for binding in resolved}
        loaded: Dict[int, List[TimePoint]] = {}
        for series_id, points in collected.items():
            # sorted() is stable, rows sharing a date keep file order
            points = sorted(points, key=lambda point: point.date)
            if self.fill_missing_dates:
                points = fill_missing_dates(points)
            series = series_by_id[series_id]
            for point in points:
                series.add_data(point.date, point.value, point.tooltip)
            loaded[series_id] = points

        logger.info(
            f"Loaded {sum(len(points) for points in loaded.values())} points "
            f"into {len(loaded)} series from {self.url}"
        )
        return loaded
