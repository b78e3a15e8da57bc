"""
Axis Scale Engine

Computes "nice" tick scales for numeric axes. Ticks land on 1/2/5 multiples
of a power of ten so that an axis shows about ten labels.
"""

from decimal import ROUND_HALF_DOWN, ROUND_HALF_UP, Decimal
from typing import Iterable, List, Tuple
import math

from .models import AxisScale

PERCENT_INTERVAL = 10
PERCENT_MIN_CEILING = 100
UNIT_STEP_MAX_RANGE = 30
IDEAL_TICK_COUNT = 10


def is_percentage_format(number_format: str) -> bool:
    return "%" in (number_format or "")


def nice_interval(value_range: float) -> float:
    """
    Pick a tick interval for ``value_range``.

    Ranges up to 30 step by 1. Wider ranges aim for ten ticks, rounded up to
    1, 2 or 5 times a power of ten.

    Args:
        value_range: Span the axis has to cover

    Returns:
        Interval between consecutive ticks
    """
    if value_range <= UNIT_STEP_MAX_RANGE:
        return 1
    ideal_interval = value_range / IDEAL_TICK_COUNT
    magnitude = 10 ** math.floor(math.log10(ideal_interval))
    if ideal_interval / magnitude > 5:
        return magnitude * 5
    if ideal_interval / magnitude > 2:
        return magnitude * 2
    return magnitude


def _step_labels(start: float, stop: float, interval: float) -> List[float]:
    # Multiply rather than accumulate so long axes do not drift
    labels = []
    index = 0
    current = start
    while current <= stop:
        labels.append(current)
        index += 1
        current = start + index * interval
    return labels


def value_range(value_groups: Iterable[Iterable[float]]) -> Tuple[float, float]:
    """Return (min, max) over every value, or (inf, -inf) when there are none."""
    data_min = math.inf
    data_max = -math.inf
    for values in value_groups:
        for value in values:
            if value < data_min:
                data_min = value
            if value > data_max:
                data_max = value
    return data_min, data_max


def compute_axis_scale(value_groups: Iterable[Iterable[float]], number_format: str = "#,##0") -> AxisScale:
    """
    Compute the tick scale for one axis.

    Args:
        value_groups: Values of every series assigned to the axis
        number_format: Label format; a ``%`` selects the percentage scale

    Returns:
        AxisScale, or the empty sentinel when no value exists
    """
    data_min, data_max = value_range(value_groups)
    if data_min == math.inf:
        return AxisScale.empty()

    percentage = is_percentage_format(number_format)
    range_min = 0 if data_min >= 0 or percentage else data_min
    span = data_max - range_min

    if percentage:
        interval = PERCENT_INTERVAL
        ceiling = max(math.ceil(data_max / PERCENT_INTERVAL) * PERCENT_INTERVAL, PERCENT_MIN_CEILING)
    else:
        interval = nice_interval(span)
        ceiling = math.ceil(data_max / interval) * interval

    labels = _step_labels(range_min, ceiling, interval)
    if not labels or labels[-1] < data_max:
        labels.append(ceiling)

    return AxisScale(
        max_tick=ceiling,
        tick_count=len(labels),
        labels=labels,
        min_tick=range_min,
        interval=interval,
    )


def nice_domain(data_min: float, data_max: float) -> AxisScale:
    """
    Expand [data_min, data_max] outward to tick multiples.

    Used as the histogram x domain. Unlike ``compute_axis_scale`` the lower end
    is rounded down to a tick instead of being pinned to zero.
    """
    interval = nice_interval(data_max - data_min)
    min_tick = math.floor(data_min / interval) * interval
    max_tick = math.ceil(data_max / interval) * interval
    if max_tick <= min_tick:
        max_tick = min_tick + interval

    labels = _step_labels(min_tick, max_tick, interval)
    return AxisScale(
        max_tick=max_tick,
        tick_count=len(labels),
        labels=labels,
        min_tick=min_tick,
        interval=interval,
    )


def format_number(value: float, number_format: str) -> str:
    """
    Format a tick label.

    ``#,##0`` rounds to an integer with thousands separators, ``0`` rounds
    without separators and a trailing ``%`` renders the value times 100 as a
    percentage. An empty format returns the bare number.
    """
    if not number_format:
        return _plain(value)

    if "%" in number_format:
        return format_number(value * 100, number_format.replace("%", "")) + "%"

    # Ties round towards +infinity: 2.5 -> 3, -2.5 -> -2
    rounding = ROUND_HALF_UP if value >= 0 else ROUND_HALF_DOWN
    rounded = int(Decimal(str(value)).quantize(Decimal("1"), rounding=rounding))
    if "," in number_format:
        return f"{rounded:,}"
    return str(rounded)


def _plain(value: float) -> str:
    if float(value).is_integer():
        return str(int(value))
    return str(value)
