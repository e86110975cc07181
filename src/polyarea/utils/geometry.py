"""Geometry utility functions.

Pure math on (x, y) pairs. Any sequence of two numbers works as a point,
including :class:`polyarea.models.Point`.
"""

import math
from typing import Optional, Sequence, Tuple

import numpy as np

PointLike = Tuple[float, float]


def distance(p1: PointLike, p2: PointLike) -> float:
    """Calculate Euclidean distance between two points."""
    return math.hypot(p2[0] - p1[0], p2[1] - p1[1])


def snap_to_point(current: PointLike,
                  target: PointLike,
                  snap_distance: float) -> Optional[PointLike]:
    """
    Snap to target point if within snap distance.

    Returns:
        Target point if within snap distance (inclusive), None otherwise.
    """
    if distance(current, target) <= snap_distance:
        return target
    return None


def signed_area(polygon: Sequence[PointLike]) -> float:
    """
    Calculate the signed area of a polygon using the shoelace formula.

    The vertex sequence is treated as cyclic, so the last vertex connects
    back to the first. Counter-clockwise polygons (in a y-up frame) are
    positive, clockwise ones negative.

    Args:
        polygon: Sequence of (x, y) vertices

    Returns:
        Signed area, exactly 0.0 for fewer than 3 vertices
    """
    if len(polygon) < 3:
        return 0.0

    pts = np.asarray(polygon, dtype=np.float64)
    xs = pts[:, 0]
    ys = pts[:, 1]
    xs_next = np.roll(xs, -1)
    ys_next = np.roll(ys, -1)

    return float(np.sum(xs * ys_next - xs_next * ys) / 2.0)


def polygon_area(polygon: Sequence[PointLike]) -> float:
    """
    Calculate the area of a polygon using the shoelace formula.

    Args:
        polygon: Sequence of (x, y) vertices

    Returns:
        Area (always positive, independent of winding order)
    """
    return abs(signed_area(polygon))


def bounding_box(points: Sequence[PointLike]) -> Tuple[float, float, float, float]:
    """
    Get bounding box of a set of points.

    Returns:
        (x_min, y_min, x_max, y_max)
    """
    if not points:
        return (0, 0, 0, 0)

    xs = [p[0] for p in points]
    ys = [p[1] for p in points]

    return (min(xs), min(ys), max(xs), max(ys))
