"""
Curve Smoother

Draws a histogram as a smooth line through its bin centers. Each pair of
neighbouring points is joined by a cubic Bezier whose control points follow
the Catmull-Rom tangent scaled by a tension factor.
"""

from typing import List, Sequence

from .models import CurvePath, PathSegment, Point, Viewport

DEFAULT_TENSION = 0.3


def bin_center_points(frequencies: Sequence[int], boundaries: Sequence[float]) -> List[Point]:
    """Pair every bin's center with its frequency."""
    return [
        ((boundaries[index] + boundaries[index + 1]) / 2, frequency)
        for index, frequency in enumerate(frequencies)
    ]


def smooth_path(points: Sequence[Point], viewport: Viewport, tension: float = DEFAULT_TENSION) -> CurvePath:
    """
    Build a smoothed path through ``points``.

    Control points are derived in data space from the neighbours p0 and p3
    (clamped at both ends of the sequence) and then mapped through the
    viewport along with the endpoints.

    Args:
        points: Ordered (x, y) pairs, typically bin center and frequency
        viewport: Domain to plot-space transform
        tension: Tangent scale; 0 gives straight segments

    Returns:
        CurvePath starting with a move, then one cubic segment per pair
    """
    path = CurvePath()
    if not points:
        return path

    path.segments.append(PathSegment(PathSegment.MOVE, (viewport.transform(*points[0]),)))

    last = len(points) - 1
    for index in range(last):
        p0 = points[max(0, index - 1)]
        p1 = points[index]
        p2 = points[index + 1]
        p3 = points[min(last, index + 2)]

        control1 = (p1[0] + tension * (p2[0] - p0[0]), p1[1] + tension * (p2[1] - p0[1]))
        control2 = (p2[0] - tension * (p3[0] - p1[0]), p2[1] - tension * (p3[1] - p1[1]))

        path.segments.append(PathSegment(PathSegment.CURVE, (
            viewport.transform(*control1),
            viewport.transform(*control2),
            viewport.transform(*p2),
        )))

    return path
