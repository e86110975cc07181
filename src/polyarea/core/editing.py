"""Dragging vertex handles and tracking the hovered handle."""

import logging
from typing import Optional

from polyarea.models import HandleTarget, Point, PolygonStore
from polyarea.core.construction import PolygonBuilder
from polyarea.core.hit_testing import DEFAULT_HIT_RADIUS, find_handle_at

logger = logging.getLogger("polyarea.editing")


class EditController:
    """
    Moves single vertices of the chain or of stored polygons.

    At most one handle is grabbed at a time. While a drag is active the
    builder is locked so the same gesture cannot also place or close.
    Dragging a stored polygon's vertex refreshes that polygon's area on
    every step.
    """

    def __init__(self,
                 builder: PolygonBuilder,
                 store: PolygonStore,
                 radius: float = DEFAULT_HIT_RADIUS,
                 drag_enabled: bool = True):
        self.builder = builder
        self.store = store
        self.radius = radius
        self.drag_enabled = drag_enabled

        self.drag_target: Optional[HandleTarget] = None
        self.hover_target: Optional[HandleTarget] = None

        # Set when the current gesture started by grabbing a handle
        self._gesture_was_drag = False

    @property
    def is_dragging(self) -> bool:
        return self.drag_target is not None

    def hit_test(self, cursor: Point) -> Optional[HandleTarget]:
        return find_handle_at(cursor, self.builder.points, self.store, self.radius)

    def begin_drag(self, cursor: Point) -> Optional[HandleTarget]:
        """
        Grab the handle under the cursor, if any.

        Starts a new gesture. A miss leaves the gesture free for the
        builder to interpret as a close.
        """
        if self.is_dragging:
            return None

        self._gesture_was_drag = False
        if not self.drag_enabled:
            return None

        target = self.hit_test(Point.of(cursor))
        if target is None:
            return None

        self.drag_target = target
        self.builder.locked = True
        self._gesture_was_drag = True
        logger.debug("Grabbed %s", target)
        return target

    def continue_drag(self, cursor: Point) -> bool:
        """Move the grabbed vertex to the cursor."""
        target = self.drag_target
        if target is None:
            return False

        if target.on_chain:
            self.builder.replace_vertex(target.vertex_index, cursor)
        else:
            self.store.move_vertex(target.polygon_index, target.vertex_index, cursor)
        return True

    def end_drag(self) -> bool:
        """Release the grabbed handle."""
        if self.drag_target is None:
            return False

        logger.debug("Released %s", self.drag_target)
        self.drag_target = None
        self.builder.locked = False
        return True

    def consume_drag_gesture(self) -> bool:
        """
        Report whether the current gesture was a drag, and forget it.

        The close interpretation of a gesture is skipped when this is True.
        """
        was_drag = self._gesture_was_drag
        self._gesture_was_drag = False
        return was_drag

    def reset_gesture(self):
        self._gesture_was_drag = False

    def update_hover(self, cursor: Point) -> Optional[HandleTarget]:
        self.hover_target = self.hit_test(Point.of(cursor))
        return self.hover_target
