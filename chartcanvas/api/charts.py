"""
Chart API Endpoints

Runs a loader against a tab-separated source URL and returns the computed
geometry as JSON. Painting the geometry is left to the caller.
"""

from typing import Any, Dict, List, Literal, Optional
import logging

import httpx
from fastapi import APIRouter
from pydantic import BaseModel, Field

from ..charts import DateChart, HistogramChart
from ..config import get_settings
from ..exceptions import InvalidConfiguration
from ..utils.error_handling import handle_error, handle_load_error

logger = logging.getLogger(__name__)

# Create router for chart endpoints
router = APIRouter(prefix="/charts", tags=["charts"])


class SeriesBindingRequest(BaseModel):
    """One series to create and the column that feeds it."""
    kind: Literal["line", "bar"] = Field(default="line", description="Series kind")
    column: str = Field(description="Header name of the value column")
    group: Optional[str] = Field(default=None, description="Group value this series is restricted to")
    title: str = Field(default="", description="Series title")
    color: Optional[str] = Field(default=None, description="Series color")
    secondary_axis: bool = Field(default=False, description="Plot against the secondary y axis")


class DateSeriesRequest(BaseModel):
    """Request model for date-series geometry."""
    url: str = Field(description="Location of the tab-separated resource")
    date_column: str = Field(description="Header name of the date column")
    group_column: Optional[str] = Field(default=None, description="Header name of the group column")
    comment_column: Optional[str] = Field(default=None, description="Header name of the tooltip column")
    fill_missing_dates: bool = Field(default=False, description="Forward-fill days without data")
    y_axis_format: Optional[str] = Field(default=None, description="Primary axis number format")
    second_axis_format: Optional[str] = Field(default=None, description="Secondary axis number format")
    series: List[SeriesBindingRequest] = Field(description="Series bindings")


class AxisScaleResponse(BaseModel):
    max_tick: float
    min_tick: float
    interval: float
    tick_count: int
    labels: List[float]
    formatted_labels: List[str]


class DateSeriesResponse(BaseModel):
    """Response model for date-series geometry."""
    series: List[Dict[str, Any]]
    primary_axis: AxisScaleResponse
    secondary_axis: AxisScaleResponse


class HistogramRequest(BaseModel):
    """Request model for histogram geometry."""
    url: str = Field(description="Location of the tab-separated resource")
    value_column: str = Field(description="Header name of the value column")
    group_column: Optional[str] = Field(default=None, description="Header name of the group column")
    title: str = Field(default="", description="Chart title, also the single series' title")
    bin_width: Optional[float] = Field(default=None, description="Explicit bin width")
    bin_count: Optional[int] = Field(default=None, description="Explicit bin count")
    plot_width: Optional[float] = Field(default=None, description="Plot width for curve paths")
    plot_height: Optional[float] = Field(default=None, description="Plot height for curve paths")


class HistogramResponse(BaseModel):
    """Response model for histogram geometry."""
    series: List[Dict[str, Any]]
    bins: Dict[str, Any]
    frequencies: Dict[str, List[int]]
    curves: Dict[str, Dict[str, Any]] = Field(default_factory=dict)


def _axis_response(scale, number_format: str) -> AxisScaleResponse:
    return AxisScaleResponse(**scale.to_dict(), formatted_labels=scale.format_labels(number_format))


def check_source_url(url: str) -> None:
    """
    Reject source URLs the service must not fetch.

    Only http(s) URLs whose host is listed in ``ALLOWED_SOURCE_HOSTS`` pass.

    Raises:
        InvalidConfiguration: If the scheme or host is not allowed
    """
    try:
        parsed = httpx.URL(url)
    except httpx.InvalidURL as e:
        raise InvalidConfiguration(f"source URL is malformed: {e}") from e

    if parsed.scheme not in ("http", "https"):
        raise InvalidConfiguration(f"source URL scheme must be http or https, got '{parsed.scheme}'")
    if parsed.host.lower() not in get_settings().source_hosts:
        logger.warning(f"Rejected source URL with host '{parsed.host}'")
        raise InvalidConfiguration(f"source host '{parsed.host}' is not allowed")


@router.post("/date-series", response_model=DateSeriesResponse)
async def date_series_geometry(request: DateSeriesRequest):
    """
    Load date-keyed series and compute both y axis scales.
    """
    try:
        check_source_url(request.url)
    except InvalidConfiguration as e:
        raise handle_error(e) from e

    chart = DateChart()
    if request.y_axis_format is not None:
        chart.y_axis_format = request.y_axis_format
    if request.second_axis_format is not None:
        chart.second_axis_format = request.second_axis_format

    loader = chart.tsv_loader(
        request.url,
        date_column=request.date_column,
        group_column=request.group_column or "",
        comment_column=request.comment_column or "",
        fill_missing_dates=request.fill_missing_dates,
    )
    try:
        for binding in request.series:
            options = {"title": binding.title, "secondary_axis": binding.secondary_axis}
            if binding.color:
                options["color"] = binding.color
            series = chart.add_line(**options) if binding.kind == "line" else chart.add_bar(**options)
            loader.add_series(series, binding.column, binding.group)
    except Exception as e:
        raise handle_error(e) from e

    await handle_load_error(loader.load())
    logger.info(f"Computed date-series geometry for {request.url}")

    return DateSeriesResponse(
        series=[series.to_dict() for series in chart.series],
        primary_axis=_axis_response(chart.calculate_y_axis_scale(), chart.y_axis_format),
        secondary_axis=_axis_response(chart.calculate_y_axis_scale(secondary=True), chart.second_axis_format),
    )


@router.post("/histogram", response_model=HistogramResponse)
async def histogram_geometry(request: HistogramRequest):
    """
    Load distribution series, bin them and optionally smooth each into a curve.
    """
    try:
        check_source_url(request.url)
    except InvalidConfiguration as e:
        raise handle_error(e) from e

    chart = HistogramChart(title=request.title, bin_count=request.bin_count, bin_width=request.bin_width)
    loader = chart.tsv_loader(request.url, value_column=request.value_column,
                              group_column=request.group_column or "")
    await handle_load_error(loader.load())

    try:
        bins = chart.calculate_bins()
    except Exception as e:
        raise handle_error(e) from e

    frequencies = {series.title: chart.frequencies_for(series, bins) for series in chart.series}

    curves = {}
    if request.plot_width and request.plot_height:
        tension = get_settings().curve_tension
        for series in chart.series:
            path = chart.curve_path(series, request.plot_width, request.plot_height, tension=tension, bins=bins)
            curves[series.title] = path.to_dict()

    return HistogramResponse(
        series=[series.to_dict() for series in chart.series],
        bins=bins.to_dict(),
        frequencies=frequencies,
        curves=curves,
    )
