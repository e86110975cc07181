"""Ordered collection of completed polygons."""

from typing import Iterator, List, Sequence, Tuple

from polyarea.models.point import Point
from polyarea.models.polygon import Polygon


class PolygonStore:
    """
    Append-only store of finished polygons.

    Insertion order is creation order. Polygons are never removed; the only
    mutation besides :meth:`add` is moving a single vertex, which refreshes
    that polygon's area before returning.

    ``revision`` increases on every mutation so readers (the renderer cache)
    can tell when the contents changed.
    """

    def __init__(self):
        self._polygons: List[Polygon] = []
        self.revision = 0

    def __len__(self) -> int:
        return len(self._polygons)

    def __iter__(self) -> Iterator[Polygon]:
        return iter(self._polygons)

    def __getitem__(self, index: int) -> Polygon:
        return self._polygons[index]

    def add(self, points: Sequence[Point]) -> Polygon:
        """
        Append a polygon built from a copy of ``points``.

        Raises:
            ValueError: If fewer than 3 points are given
        """
        if len(points) < 3:
            raise ValueError(f"A polygon needs at least 3 points, got {len(points)}")

        polygon = Polygon.from_points(points)
        self._polygons.append(polygon)
        self.revision += 1
        return polygon

    def move_vertex(self, polygon_index: int, vertex_index: int, point: Point) -> Polygon:
        """
        Move one vertex of a stored polygon and recompute its area.

        Raises:
            IndexError: If either index is out of range
        """
        if not 0 <= polygon_index < len(self._polygons):
            raise IndexError(f"No polygon at index {polygon_index}")
        polygon = self._polygons[polygon_index]
        if not 0 <= vertex_index < polygon.vertex_count:
            raise IndexError(
                f"Polygon {polygon_index} has no vertex {vertex_index}"
            )

        polygon.move_vertex(vertex_index, point)
        self.revision += 1
        return polygon

    def snapshot(self) -> Tuple[Polygon, ...]:
        """Copies of all polygons, safe to hand to readers."""
        return tuple(p.copy() for p in self._polygons)

    @property
    def total_area(self) -> float:
        return sum(p.area for p in self._polygons)
