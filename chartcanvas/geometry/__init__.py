"""
Geometry Package - Data to Chart Geometry

Stateless engines that turn series values into renderable geometry.

Core Components:
- compute_axis_scale / nice_domain: nice tick scales for numeric axes
- compute_bins / assign_frequencies: histogram bin layout and counting
- smooth_path: Catmull-Rom style Bezier path through bin centers

Usage:
    from chartcanvas.geometry import compute_axis_scale

    scale = compute_axis_scale([[3, 18, 42]], "#,##0")
"""

from .binning import assign_frequencies, bin_index, compute_bins, sturges_bin_count
from .curve import bin_center_points, smooth_path
from .models import AxisScale, BinningConfig, BinSet, CurvePath, PathSegment, Viewport
from .scale import compute_axis_scale, format_number, nice_domain, nice_interval

__all__ = [
    'AxisScale',
    'BinningConfig',
    'BinSet',
    'CurvePath',
    'PathSegment',
    'Viewport',
    'assign_frequencies',
    'bin_center_points',
    'bin_index',
    'compute_axis_scale',
    'compute_bins',
    'format_number',
    'nice_domain',
    'nice_interval',
    'smooth_path',
    'sturges_bin_count',
]
