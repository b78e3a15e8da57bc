"""
Histogram Binning Engine

Partitions a value range into bins and counts how many samples fall into each
one. Bins are closed-open, except the last which also includes its upper
boundary.
"""

from typing import Iterable, List, Optional
import math

import numpy as np

from ..exceptions import InvalidConfiguration
from .models import BinningConfig, BinSet
from .scale import nice_domain

MIN_DEFAULT_BINS = 10
MAX_DEFAULT_BINS = 20


def sturges_bin_count(sample_count: int) -> int:
    """Sturges' rule: ceil(log2(n) + 1)."""
    return math.ceil(math.log2(sample_count) + 1)


def _even_boundaries(start: float, width: float, count: int, end: Optional[float] = None) -> List[float]:
    boundaries = [start + index * width for index in range(count + 1)]
    if end is not None:
        # Pin the last edge so the maximum is not lost to rounding
        boundaries[-1] = end
    return boundaries


def _validate(config: BinningConfig) -> None:
    if config.bin_width is not None and not config.bin_width > 0:
        raise InvalidConfiguration(f"bin width must be positive, got {config.bin_width}")
    if config.bin_count is not None:
        if isinstance(config.bin_count, bool) or int(config.bin_count) != config.bin_count:
            raise InvalidConfiguration(f"bin count must be an integer, got {config.bin_count}")
        if config.bin_count <= 0:
            raise InvalidConfiguration(f"bin count must be positive, got {config.bin_count}")


def compute_bins(data_min: float, data_max: float, config: BinningConfig = BinningConfig(),
                 total_samples: int = 0) -> BinSet:
    """
    Lay out histogram bins over [data_min, data_max].

    An explicit width takes priority over an explicit count. Without either,
    bins are spread across the nice domain of the data: Sturges' rule picks
    the count, or the domain's tick count clamped to 10..20 when there are no
    samples at all.

    Args:
        data_min: Smallest sample value
        data_max: Largest sample value
        config: Explicit width and/or count
        total_samples: Sample count across every series on the chart

    Returns:
        BinSet with ``count + 1`` boundaries

    Raises:
        InvalidConfiguration: If the width or count is zero or negative
    """
    _validate(config)

    if config.bin_width is not None:
        width = config.bin_width
        count = max(1, math.ceil((data_max - data_min) / width))
        return BinSet(
            count=count,
            width=width,
            boundaries=_even_boundaries(data_min, width, count),
            axis_scale=nice_domain(data_min, data_max),
        )

    if config.bin_count is not None:
        count = int(config.bin_count)
        width = (data_max - data_min) / count
        return BinSet(
            count=count,
            width=width,
            boundaries=_even_boundaries(data_min, width, count, end=data_max),
            axis_scale=nice_domain(data_min, data_max),
        )

    domain = nice_domain(data_min, data_max)
    domain_range = domain.max_tick - domain.min_tick
    if total_samples == 0:
        count = min(MAX_DEFAULT_BINS, max(MIN_DEFAULT_BINS, math.floor(domain_range / domain.interval)))
    else:
        count = sturges_bin_count(total_samples)
    width = domain_range / count

    return BinSet(
        count=count,
        width=width,
        boundaries=_even_boundaries(domain.min_tick, width, count, end=domain.max_tick),
        axis_scale=domain,
    )


def bin_index(value: float, boundaries: List[float]) -> int:
    """
    Locate the bin holding ``value``.

    Returns:
        Index into the bins, or -1 when the value lies outside the boundaries
    """
    if len(boundaries) < 2:
        return -1
    if value < boundaries[0] or value > boundaries[-1]:
        return -1
    last = len(boundaries) - 2
    if value == boundaries[-1]:
        return last
    return min(int(np.searchsorted(boundaries, value, side="right")) - 1, last)


def assign_frequencies(values: Iterable[float], boundaries: List[float]) -> List[int]:
    """Count samples per bin; samples outside the boundary range are dropped."""
    if len(boundaries) < 2:
        return []
    # np.histogram closes only the last bin and drops values outside the edges
    counts, _ = np.histogram(np.asarray(list(values), dtype=float), bins=boundaries)
    return counts.tolist()
