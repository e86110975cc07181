"""Polygon construction: placing vertices and closing the loop."""

import logging
from typing import Callable, List, Optional

from polyarea.models import EditingMode, Point, Polygon, PolygonStore
from polyarea.utils.geometry import snap_to_point
from polyarea.core.hit_testing import DEFAULT_HIT_RADIUS

logger = logging.getLogger("polyarea.construction")

MIN_POLYGON_VERTICES = 3


class PolygonBuilder:
    """
    Owns the vertex chain of the polygon being drawn.

    Vertices are appended one at a time. Clicking back on the first vertex
    closes the loop and moves the finished polygon into the store. While
    ``locked`` is set (a vertex drag is in progress) placing, previewing
    and closing are ignored.
    """

    def __init__(self,
                 store: PolygonStore,
                 snap_distance: float = DEFAULT_HIT_RADIUS):
        """
        Initialize the builder.

        Args:
            store: Store that receives finished polygons
            snap_distance: How close a close gesture must land to vertex 0
        """
        self.store = store
        self.snap_distance = snap_distance

        self.points: List[Point] = []
        self.preview: Optional[Point] = None
        self.mode = EditingMode.IDLE
        self.locked = False

        # Callback for when points change (for preview)
        self.on_points_changed: Optional[Callable] = None

    @property
    def is_drawing(self) -> bool:
        return self.mode is EditingMode.DRAWING

    def _notify_points_changed(self):
        if self.on_points_changed:
            self.on_points_changed(self.points.copy())

    def place_vertex(self, cursor: Point) -> bool:
        """
        Append a vertex at the cursor.

        Returns:
            True if the vertex was placed
        """
        if self.locked:
            return False

        self.points.append(Point.of(cursor))
        if self.mode is EditingMode.IDLE:
            self.mode = EditingMode.DRAWING
            logger.debug("Started polygon at %s", self.points[0])
        self._notify_points_changed()
        return True

    def update_preview(self, cursor: Point) -> bool:
        """Move the rubber-band end point. Never touches the chain."""
        if not self.is_drawing or self.locked:
            return False
        self.preview = Point.of(cursor)
        return True

    def get_snap_target(self) -> Optional[Point]:
        """Get the vertex a close gesture would snap to, if closing is possible."""
        if self.is_drawing and len(self.points) >= MIN_POLYGON_VERTICES:
            return self.points[0]
        return None

    def try_close(self, cursor: Point) -> Optional[Polygon]:
        """
        Close the chain if the cursor is on the first vertex.

        Too-short chains and clicks away from vertex 0 are ignored and leave
        the chain as it was.

        Returns:
            The finished polygon, or None if nothing happened
        """
        if not self.is_drawing or self.locked or not self.points:
            return None
        if snap_to_point(Point.of(cursor), self.points[0], self.snap_distance) is None:
            return None
        if len(self.points) < MIN_POLYGON_VERTICES:
            logger.debug("Ignoring close on a %d-vertex chain", len(self.points))
            return None

        return self._finish()

    def _finish(self) -> Polygon:
        polygon = self.store.add(self.points)
        self.points.clear()
        self.preview = None
        self.mode = EditingMode.IDLE
        self._notify_points_changed()

        logger.debug(
            "Closed polygon %s with %d vertices, area %.2f",
            polygon.polygon_id, polygon.vertex_count, polygon.area
        )
        return polygon

    def replace_vertex(self, index: int, point: Point):
        """Overwrite a chain vertex in place (used while dragging)."""
        self.points[index] = Point.of(point)
        self._notify_points_changed()

    def cancel(self) -> bool:
        """
        Abandon the chain being drawn.

        Returns:
            True if there was anything to abandon
        """
        if self.locked or (not self.points and self.mode is EditingMode.IDLE):
            return False

        logger.debug("Cancelled chain with %d vertices", len(self.points))
        self.points.clear()
        self.preview = None
        self.mode = EditingMode.IDLE
        self._notify_points_changed()
        return True
