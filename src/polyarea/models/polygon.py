"""Completed polygon model."""

from dataclasses import dataclass, field
from typing import List
import uuid

from polyarea.models.point import Point
from polyarea.utils.geometry import bounding_box, polygon_area


@dataclass
class Polygon:
    """
    A closed polygon with its cached area.

    The area is derived from the vertices and must always match them.
    Use :meth:`move_vertex` (or call :meth:`recompute_area` after touching
    ``points`` directly) so the cached value never goes stale.

    Attributes:
        points: Ordered vertices, at least 3
        area: Unsigned shoelace area of ``points``
        polygon_id: Unique identifier
    """
    points: List[Point] = field(default_factory=list)
    area: float = 0.0
    polygon_id: str = ""

    def __post_init__(self):
        if not self.polygon_id:
            self.polygon_id = str(uuid.uuid4())[:8]
        self.points = [Point.of(p) for p in self.points]
        self.recompute_area()

    @classmethod
    def from_points(cls, points) -> "Polygon":
        """Create a polygon from a copy of ``points``."""
        return cls(points=list(points))

    @property
    def vertex_count(self) -> int:
        return len(self.points)

    def recompute_area(self) -> float:
        self.area = polygon_area(self.points)
        return self.area

    def move_vertex(self, index: int, point: Point):
        """Replace a vertex in place and refresh the area."""
        self.points[index] = Point.of(point)
        self.recompute_area()

    def copy(self) -> "Polygon":
        return Polygon(points=list(self.points), polygon_id=self.polygon_id)

    def to_dict(self) -> dict:
        """Plain representation for display and debugging."""
        return {
            "polygon_id": self.polygon_id,
            "points": [(p.x, p.y) for p in self.points],
            "area": self.area,
            "bounds": bounding_box(self.points),
        }
