"""
Geometry Data Models

Plain result structures produced by the scale, binning and curve engines.
They carry no reference back to a chart so they can be computed and tested
in isolation.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

Point = Tuple[float, float]


@dataclass
class AxisScale:
    """Nice tick scale for one numeric axis."""
    max_tick: float
    tick_count: int
    labels: List[float] = field(default_factory=list)
    min_tick: float = 0.0
    interval: float = 0.0

    @classmethod
    def empty(cls) -> "AxisScale":
        """Sentinel returned when the axis has no data."""
        return cls(max_tick=0, tick_count=0, labels=[])

    @property
    def is_empty(self) -> bool:
        return self.tick_count == 0

    def format_labels(self, number_format: str) -> List[str]:
        from .scale import format_number
        return [format_number(label, number_format) for label in self.labels]

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            'max_tick': self.max_tick,
            'min_tick': self.min_tick,
            'interval': self.interval,
            'tick_count': self.tick_count,
            'labels': list(self.labels),
        }


@dataclass(frozen=True)
class BinningConfig:
    """Histogram binning choice; width wins over count, neither means automatic."""
    bin_width: Optional[float] = None
    bin_count: Optional[int] = None

    @property
    def is_automatic(self) -> bool:
        return self.bin_width is None and self.bin_count is None


@dataclass
class BinSet:
    """Histogram bin layout; ``boundaries`` has ``count + 1`` entries."""
    count: int
    width: float
    boundaries: List[float]
    axis_scale: AxisScale

    @property
    def domain(self) -> Point:
        return self.boundaries[0], self.boundaries[-1]

    def to_dict(self) -> Dict[str, Any]:
        return {
            'count': self.count,
            'width': self.width,
            'boundaries': list(self.boundaries),
            'axis_scale': self.axis_scale.to_dict(),
        }


@dataclass(frozen=True)
class Viewport:
    """
    Domain to plot-space transform.

    x maps linearly from [domain_min, domain_max] onto
    [left, left + plot_width]; y maps from [0, max_frequency] onto
    [top + plot_height, top], growing downwards.
    """
    domain_min: float
    domain_max: float
    max_frequency: float
    plot_width: float
    plot_height: float
    left: float = 0.0
    top: float = 0.0

    def transform(self, x: float, y: float) -> Point:
        domain_range = self.domain_max - self.domain_min
        x_ratio = (x - self.domain_min) / domain_range if domain_range > 0 else 0
        y_ratio = y / self.max_frequency if self.max_frequency > 0 else 0
        return (
            self.left + x_ratio * self.plot_width,
            self.top + self.plot_height - y_ratio * self.plot_height,
        )


@dataclass(frozen=True)
class PathSegment:
    """A move (one point) or cubic curve (two control points and an endpoint)."""
    command: str
    points: Tuple[Point, ...]

    MOVE = "M"
    CURVE = "C"

    def to_path_data(self) -> str:
        coords = [f"{_num(x)} {_num(y)}" for x, y in self.points]
        return f"{self.command} {', '.join(coords)}"


@dataclass
class CurvePath:
    segments: List[PathSegment] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.segments)

    @property
    def curves(self) -> List[PathSegment]:
        return [segment for segment in self.segments if segment.command == PathSegment.CURVE]

    def to_path_data(self) -> str:
        """Serialize as SVG path data, e.g. ``M 0 10 C 1 2, 3 4, 5 6``."""
        return " ".join(segment.to_path_data() for segment in self.segments)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'segments': [
                {'command': segment.command, 'points': [list(point) for point in segment.points]}
                for segment in self.segments
            ],
            'path_data': self.to_path_data(),
        }


def _num(value: float) -> str:
    # 12.0 -> "12", keep fractions as repr
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))
