"""
Editor session: the single entry point for pointer events.

The session owns the vertex chain, the polygon store and the drag/hover
state. Every event is applied completely before it returns, then
``on_change`` fires so the presentation layer can redraw. Renderers only
read from the session.

Gesture mapping used by the desktop shell:

    secondary click          -> place_vertex
    primary press            -> remember the press point
    motion while pressed     -> begin_drag once past DRAG_THRESHOLD, then
                                continue_drag
    motion otherwise         -> update_preview + update_hover
    primary release          -> end_drag, or try_close if nothing was grabbed
"""

import logging
from typing import Callable, List, Optional, Tuple

from polyarea.models import (
    CursorHint, EditingMode, HandleTarget, Point, Polygon, PolygonStore,
)
from polyarea.core.construction import PolygonBuilder
from polyarea.core.editing import EditController
from polyarea.core.hit_testing import DEFAULT_HIT_RADIUS
from polyarea.utils.geometry import distance

logger = logging.getLogger("polyarea.session")

# Pointer travel (pixels) before a press becomes a drag
DRAG_THRESHOLD = 3.0


class EditorSession:
    """Polygon drawing and editing state machine."""

    def __init__(self,
                 radius: float = DEFAULT_HIT_RADIUS,
                 drag_enabled: bool = True,
                 store: Optional[PolygonStore] = None):
        """
        Initialize a session.

        Args:
            radius: Hit radius for handles and for closing on vertex 0
            drag_enabled: Allow dragging vertices. With False the session
                          only places vertices and closes polygons.
            store: Existing store to draw into (a new one by default)
        """
        self.store = store if store is not None else PolygonStore()
        self.builder = PolygonBuilder(self.store, snap_distance=radius)
        self.editor = EditController(self.builder, self.store,
                                     radius=radius, drag_enabled=drag_enabled)

        self.on_change: Optional[Callable[["EditorSession"], None]] = None

        # Primary button state for the gesture helpers
        self._press: Optional[Point] = None
        self._press_missed = False

    # ------------------------------------------------------------------
    # Read accessors
    # ------------------------------------------------------------------
    @property
    def radius(self) -> float:
        return self.editor.radius

    @property
    def drag_enabled(self) -> bool:
        return self.editor.drag_enabled

    @property
    def mode(self) -> EditingMode:
        return self.builder.mode

    @property
    def chain(self) -> List[Point]:
        return self.builder.points.copy()

    @property
    def preview(self) -> Optional[Point]:
        return self.builder.preview

    @property
    def polygons(self) -> Tuple[Polygon, ...]:
        return self.store.snapshot()

    @property
    def drag_target(self) -> Optional[HandleTarget]:
        return self.editor.drag_target

    @property
    def hover_target(self) -> Optional[HandleTarget]:
        return self.editor.hover_target

    @property
    def is_dragging(self) -> bool:
        return self.editor.is_dragging

    @property
    def cursor_hint(self) -> CursorHint:
        if self.is_dragging:
            return CursorHint.GRABBING
        hover = self.hover_target
        if hover is None:
            return CursorHint.CROSSHAIR
        if self.drag_enabled:
            return CursorHint.POINTER
        # Without dragging, only the closing vertex is interactive
        closable = self.builder.get_snap_target() is not None
        if closable and hover.on_chain and hover.vertex_index == 0:
            return CursorHint.POINTER
        return CursorHint.CROSSHAIR

    def _changed(self, accepted):
        if accepted and self.on_change:
            self.on_change(self)
        return accepted

    # ------------------------------------------------------------------
    # Event intake
    # ------------------------------------------------------------------
    def place_vertex(self, cursor) -> bool:
        """Add a vertex to the chain. Ignored while dragging."""
        if self.is_dragging:
            return False
        self.editor.reset_gesture()
        return self._changed(self.builder.place_vertex(Point.of(cursor)))

    def update_preview(self, cursor) -> bool:
        """Move the rubber-band end point. Ignored while idle or dragging."""
        if self.is_dragging:
            return False
        return self._changed(self.builder.update_preview(Point.of(cursor)))

    def try_close(self, cursor) -> Optional[Polygon]:
        """
        Close the chain on vertex 0.

        Ignored while dragging, and for the gesture that just finished a
        drag.
        """
        if self.is_dragging:
            return None
        if self.editor.consume_drag_gesture():
            return None
        polygon = self.builder.try_close(Point.of(cursor))
        if polygon is not None:
            logger.info("Polygon %d closed, area %.2f", len(self.store), polygon.area)
            # The handle under the cursor belonged to the chain that just closed
            self.editor.update_hover(Point.of(cursor))
        self._changed(polygon is not None)
        return polygon

    def cancel(self) -> bool:
        """Abandon the chain being drawn."""
        cancelled = self.builder.cancel()
        if cancelled:
            hover = self.editor.hover_target
            # Chain handles are gone with the chain
            if hover is not None and hover.on_chain:
                self.editor.hover_target = None
        return self._changed(cancelled)

    def begin_drag(self, cursor) -> Optional[HandleTarget]:
        target = self.editor.begin_drag(Point.of(cursor))
        self._changed(target is not None)
        return target

    def continue_drag(self, cursor) -> bool:
        return self._changed(self.editor.continue_drag(Point.of(cursor)))

    def end_drag(self) -> bool:
        return self._changed(self.editor.end_drag())

    def update_hover(self, cursor) -> Optional[HandleTarget]:
        previous = self.editor.hover_target
        target = self.editor.update_hover(Point.of(cursor))
        self._changed(target != previous)
        return target

    # ------------------------------------------------------------------
    # Gesture helpers
    # ------------------------------------------------------------------
    def secondary_click(self, cursor) -> bool:
        return self.place_vertex(cursor)

    def pointer_down(self, cursor):
        """
        Primary button pressed.

        The drag is only started once the pointer moves past
        DRAG_THRESHOLD, so a stationary click on vertex 0 still closes.
        """
        self._press = Point.of(cursor)
        self._press_missed = False
        self.editor.reset_gesture()

    def pointer_move(self, cursor) -> bool:
        cursor = Point.of(cursor)
        if self._press is not None and not self.is_dragging and not self._press_missed:
            if distance(self._press, cursor) > DRAG_THRESHOLD:
                if self.editor.begin_drag(self._press) is None:
                    self._press_missed = True

        if self.is_dragging:
            return self._changed(self.editor.continue_drag(cursor))

        previous = self.editor.hover_target
        hovered = self.editor.update_hover(cursor) != previous
        previewed = self.builder.update_preview(cursor)
        return self._changed(hovered or previewed)

    def pointer_up(self, cursor) -> Optional[Polygon]:
        self._press = None
        if self.is_dragging:
            self.end_drag()
            self.editor.consume_drag_gesture()
            return None
        return self.try_close(cursor)
