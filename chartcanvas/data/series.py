"""
Series Data Stores

Ordered point collections owned by a chart. Identity fields (title, color,
style, axis) are frozen once the series exists; only the point list grows.
"""

from dataclasses import dataclass, field
from typing import List, NamedTuple
import math


class TimePoint(NamedTuple):
    """One date-keyed value; ``date`` is a ``YYYYMMDD`` key."""
    date: str
    value: float
    tooltip: str = ""


@dataclass(frozen=True, eq=False)
class TimeSeries:
    """Common base for date-keyed series."""
    id: int
    title: str = ""
    color: str = "black"
    secondary_axis: bool = False
    points: List[TimePoint] = field(default_factory=list)

    kind = "time"

    def add_data(self, date: str, value: float, tooltip: str = "") -> None:
        """Append a point; duplicates are kept as-is."""
        self.points.append(TimePoint(date, value, tooltip))

    @property
    def values(self) -> List[float]:
        return [point.value for point in self.points]

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            'id': self.id,
            'kind': self.kind,
            'title': self.title,
            'color': self.color,
            'secondary_axis': self.secondary_axis,
            'points': [point._asdict() for point in self.points],
        }


@dataclass(frozen=True, eq=False)
class LineSeries(TimeSeries):
    line_width: float = 2
    line_type: str = "solid"

    kind = "line"

    def to_dict(self) -> dict:
        data = super().to_dict()
        data.update({'line_width': self.line_width, 'line_type': self.line_type})
        return data


@dataclass(frozen=True, eq=False)
class BarSeries(TimeSeries):
    color: str = "blue"

    kind = "bar"

    def add_ratio_data(self, date: str, numerator: float, denominator: float, tooltip: str = "") -> None:
        """Append ``numerator / denominator``; a zero denominator records 0."""
        value = numerator / denominator if denominator != 0 else 0
        self.add_data(date, value, tooltip)


@dataclass(frozen=True, eq=False)
class HistogramSeries:
    """Raw sample values of one distribution."""
    id: int
    title: str = ""
    color: str = "blue"
    opacity: float = 0.7
    points: List[float] = field(default_factory=list)

    def add_data(self, value: float) -> None:
        """Append a sample; non-numeric and NaN values are ignored."""
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            return
        if math.isnan(value):
            return
        self.points.append(float(value))

    def add_data_array(self, values) -> None:
        for value in values:
            self.add_data(value)

    def __len__(self) -> int:
        return len(self.points)

    def to_dict(self) -> dict:
        return {
            'id': self.id,
            'title': self.title,
            'color': self.color,
            'opacity': self.opacity,
            'points': list(self.points),
        }
