"""
Path Simplifier

Ramer-Douglas-Peucker polyline simplification over planar points.

Implemented with an explicit stack of (start, end) index ranges instead
of recursion, so very long tracks cannot exhaust the interpreter stack.
The output is identical to the classic recursive formulation.
"""

import math
from typing import List, Sequence

from trackpath.shared.errors import InvalidOptionError
from .schemas import PlanarPoint


def point_to_segment_distance(
    point: PlanarPoint,
    start: PlanarPoint,
    end: PlanarPoint
) -> float:
    """
    Distance from point to the segment start-end (not the infinite line).

    The projection parameter t is clamped to [0, 1], so points beyond
    either end are measured against that endpoint.
    """
    dx = end.x - start.x
    dy = end.y - start.y
    length_sq = dx * dx + dy * dy

    if length_sq == 0:
        return math.hypot(point.x - start.x, point.y - start.y)

    t = ((point.x - start.x) * dx + (point.y - start.y) * dy) / length_sq

    if t < 0:
        nearest_x, nearest_y = start.x, start.y
    elif t > 1:
        nearest_x, nearest_y = end.x, end.y
    else:
        nearest_x = start.x + t * dx
        nearest_y = start.y + t * dy

    return math.hypot(point.x - nearest_x, point.y - nearest_y)


def simplify(points: Sequence[PlanarPoint], tolerance: float) -> List[PlanarPoint]:
    """
    Simplify a polyline within a maximum perpendicular error.

    Args:
        points: Ordered planar points
        tolerance: Max allowed distance (canvas units) of a dropped point
            from the simplified polyline

    Returns:
        New list that is a subsequence of points, first and last kept

    Raises:
        InvalidOptionError: If tolerance is negative
    """
    if tolerance < 0:
        raise InvalidOptionError(f"tolerance must be >= 0, got {tolerance}")

    n = len(points)
    if n <= 2:
        return list(points)

    keep = [False] * n
    keep[0] = keep[n - 1] = True

    stack = [(0, n - 1)]
    while stack:
        start, end = stack.pop()
        if end - start < 2:
            continue

        max_distance = 0.0
        max_index = start
        for i in range(start + 1, end):
            distance = point_to_segment_distance(points[i], points[start], points[end])
            if distance > max_distance:
                max_distance = distance
                max_index = i

        if max_distance > tolerance:
            keep[max_index] = True
            stack.append((max_index, end))
            stack.append((start, max_index))

    return [p for p, kept in zip(points, keep) if kept]
