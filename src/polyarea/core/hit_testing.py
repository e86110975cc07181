"""Vertex handle hit testing."""

from typing import Iterable, Optional, Sequence

from polyarea.models import HandleTarget, Point, Polygon
from polyarea.utils.geometry import distance

DEFAULT_HIT_RADIUS = 10.0


def find_handle_at(cursor: Point,
                   chain: Sequence[Point],
                   polygons: Iterable[Polygon],
                   radius: float = DEFAULT_HIT_RADIUS) -> Optional[HandleTarget]:
    """
    Find the vertex handle under the cursor.

    The chain being drawn is scanned first, then the stored polygons in
    creation order, each in vertex order. The first vertex within
    ``radius`` (inclusive) wins, so overlapping handles always resolve to
    the chain, then to the oldest polygon.

    Args:
        cursor: Pointer position in surface coordinates
        chain: Vertices of the polygon being drawn
        polygons: Completed polygons (a PolygonStore or any iterable)
        radius: Hit radius in surface units

    Returns:
        The matching handle, or None if nothing is in range
    """
    for i, vertex in enumerate(chain):
        if distance(cursor, vertex) <= radius:
            return HandleTarget.in_chain(i)

    for poly_idx, polygon in enumerate(polygons):
        for i, vertex in enumerate(polygon.points):
            if distance(cursor, vertex) <= radius:
                return HandleTarget.in_polygon(poly_idx, i)

    return None
