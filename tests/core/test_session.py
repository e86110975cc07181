"""Tests for EditorSession."""

import pytest

from polyarea.core.session import EditorSession, DRAG_THRESHOLD
from polyarea.models import CursorHint, EditingMode, HandleTarget, Point
from polyarea.utils.geometry import polygon_area


@pytest.fixture
def wide_session(session):
    """Session with an open chain whose vertices are far apart."""
    for p in [(0, 0), (100, 0), (100, 100)]:
        session.place_vertex(p)
    return session


class TestReadAccessors:
    """Tests for the read-only view of the session."""

    def test_initial_state(self, session):
        """Test a new session."""
        assert session.mode is EditingMode.IDLE
        assert session.chain == []
        assert session.preview is None
        assert session.polygons == ()
        assert session.drag_target is None
        assert session.hover_target is None
        assert not session.is_dragging
        assert session.cursor_hint is CursorHint.CROSSHAIR

    def test_chain_is_copy(self, drawing_session):
        """Test the chain accessor cannot mutate state."""
        chain = drawing_session.chain
        chain.clear()
        assert len(drawing_session.chain) == 3

    def test_polygons_snapshot(self, closed_square_session):
        """Test polygons are returned as detached copies."""
        polygons = closed_square_session.polygons
        assert len(polygons) == 1
        assert polygons[0].area == 10000.0
        polygons[0].move_vertex(0, (0, 0))
        assert closed_square_session.store[0].area == 10000.0


class TestConstruction:
    """Tests for placing and closing through the session."""

    def test_end_to_end(self, session):
        """Test drawing and closing a 10x10 square."""
        for p in [(0, 0), (10, 0), (10, 10), (0, 10)]:
            assert session.place_vertex(p)
        assert session.mode is EditingMode.DRAWING

        polygon = session.try_close((1, 1))

        assert polygon is not None
        assert len(session.store) == 1
        assert session.store[0].vertex_count == 4
        assert session.store[0].area == 100.0
        assert session.chain == []
        assert session.mode is EditingMode.IDLE

    def test_close_within_threshold(self, drawing_session):
        """Test close at (2, 2) is within 10 of (0, 0)."""
        assert drawing_session.try_close((2, 2)) is not None
        assert len(drawing_session.store) == 1

    def test_close_outside_threshold(self, drawing_session):
        """Test close at (20, 20) is ignored."""
        assert drawing_session.try_close((20, 20)) is None
        assert drawing_session.chain == [Point(0, 0), Point(10, 0), Point(10, 10)]
        assert drawing_session.mode is EditingMode.DRAWING
        assert len(drawing_session.store) == 0

    def test_close_too_short(self, session):
        """Test a 2-vertex chain is not closed even exactly on vertex 0."""
        session.place_vertex((0, 0))
        session.place_vertex((1, 1))
        assert session.try_close((0, 0)) is None
        assert session.chain == [Point(0, 0), Point(1, 1)]
        assert len(session.store) == 0

    def test_preview(self, session):
        """Test the rubber band only exists while drawing."""
        assert not session.update_preview((5, 5))
        session.place_vertex((0, 0))
        assert session.update_preview((5, 5))
        assert session.preview == Point(5, 5)
        assert session.chain == [Point(0, 0)]

    def test_cancel(self, drawing_session):
        """Test cancel drops the chain and keeps the store."""
        assert drawing_session.cancel()
        assert drawing_session.chain == []
        assert drawing_session.mode is EditingMode.IDLE
        assert len(drawing_session.store) == 0

    def test_polygons_accumulate(self, session):
        """Test several polygons are kept in creation order."""
        for offset in (0, 100):
            for p in [(offset, 0), (offset + 20, 0), (offset + 20, 20)]:
                session.place_vertex(p)
            session.try_close((offset, 0))
        assert len(session.store) == 2
        assert session.store[0].points[0] == Point(0, 0)
        assert session.store[1].points[0] == Point(100, 0)
        assert session.store.total_area == 400.0


class TestMutualExclusion:
    """Tests that dragging excludes placing and closing."""

    def test_place_rejected_while_dragging(self, wide_session):
        """Test a vertex cannot be placed mid-drag."""
        assert wide_session.begin_drag((100, 0)) is not None
        assert not wide_session.place_vertex((300, 300))
        assert len(wide_session.chain) == 3

    def test_close_rejected_while_dragging(self, wide_session):
        """Test closing is rejected mid-drag."""
        wide_session.begin_drag((100, 0))
        assert wide_session.try_close((0, 0)) is None
        assert len(wide_session.store) == 0
        assert wide_session.mode is EditingMode.DRAWING

    def test_preview_frozen_while_dragging(self, wide_session):
        """Test the preview does not move mid-drag."""
        wide_session.update_preview((50, 50))
        wide_session.begin_drag((100, 0))
        assert not wide_session.update_preview((70, 70))
        assert wide_session.preview == Point(50, 50)

    def test_close_suppressed_after_drag_in_same_gesture(self, wide_session):
        """Test the release click of a drag gesture does not close."""
        wide_session.begin_drag((0, 0))
        wide_session.continue_drag((1, 1))
        wide_session.end_drag()

        assert wide_session.try_close((1, 1)) is None
        assert len(wide_session.store) == 0

        # The next gesture is a plain click and may close
        assert wide_session.try_close((1, 1)) is not None

    def test_close_allowed_after_missed_drag(self, wide_session):
        """Test a press that grabs nothing falls through to closing."""
        assert wide_session.begin_drag((3, 3)) == HandleTarget.in_chain(0)
        wide_session.end_drag()
        wide_session.try_close((3, 3))
        assert wide_session.begin_drag((500, 500)) is None
        assert wide_session.try_close((2, 2)) is not None

    def test_second_begin_drag_rejected(self, wide_session):
        """Test only one handle is grabbed at a time."""
        wide_session.begin_drag((0, 0))
        assert wide_session.begin_drag((100, 100)) is None
        assert wide_session.drag_target == HandleTarget.in_chain(0)

    def test_drag_and_release_without_target(self, session):
        """Test stray drag events never raise."""
        assert not session.continue_drag((1, 1))
        assert not session.end_drag()


class TestDragEditing:
    """Tests for dragging vertices through the session."""

    def test_drag_chain_vertex(self, wide_session):
        """Test moving a vertex of the chain being drawn."""
        wide_session.begin_drag((100, 100))
        wide_session.continue_drag((150, 120))
        wide_session.end_drag()
        assert wide_session.chain[2] == Point(150, 120)
        assert wide_session.mode is EditingMode.DRAWING

    def test_drag_polygon_vertex_keeps_area_exact(self, closed_square_session):
        """Test the stored area matches the points after each step."""
        session = closed_square_session
        assert session.begin_drag((200, 200)) == HandleTarget.in_polygon(0, 2)
        for cursor in [(210, 210), (260, 230), (201.5, 333.25)]:
            session.continue_drag(cursor)
            polygon = session.store[0]
            assert polygon.area == polygon_area(polygon.points)
        session.end_drag()
        assert session.store[0].points[2] == Point(201.5, 333.25)

    def test_chain_vertex_wins_over_polygon(self, closed_square_session):
        """Test a chain vertex on top of a polygon vertex is the one grabbed."""
        session = closed_square_session
        session.place_vertex((200, 200))
        target = session.begin_drag((200, 200))
        assert target == HandleTarget.in_chain(0)
        session.continue_drag((250, 250))
        assert session.store[0].points[2] == Point(200, 200)
        assert session.chain == [Point(250, 250)]

    def test_drag_disabled(self):
        """Test a session without dragging only places and closes."""
        session = EditorSession(drag_enabled=False)
        for p in [(0, 0), (100, 0), (100, 100)]:
            session.place_vertex(p)
        assert session.begin_drag((100, 0)) is None
        assert not session.is_dragging
        assert session.try_close((0, 0)) is not None


class TestHoverAndCursor:
    """Tests for hover tracking and cursor hints."""

    def test_hover_pointer(self, closed_square_session):
        """Test hovering a handle gives the pointer cursor."""
        assert closed_square_session.update_hover((101, 99)) == HandleTarget.in_polygon(0, 0)
        assert closed_square_session.cursor_hint is CursorHint.POINTER

    def test_grabbing(self, closed_square_session):
        """Test dragging gives the grabbing cursor."""
        closed_square_session.begin_drag((100, 100))
        assert closed_square_session.cursor_hint is CursorHint.GRABBING

    def test_crosshair_off_handles(self, closed_square_session):
        """Test empty space gives the crosshair."""
        closed_square_session.update_hover((150, 150))
        assert closed_square_session.cursor_hint is CursorHint.CROSSHAIR

    def test_no_drag_only_closing_vertex_is_interactive(self):
        """Test without dragging only vertex 0 of a closable chain gets the pointer."""
        session = EditorSession(drag_enabled=False)
        for p in [(0, 0), (100, 0), (100, 100)]:
            session.place_vertex(p)
        session.update_hover((100, 0))
        assert session.cursor_hint is CursorHint.CROSSHAIR
        session.update_hover((0, 0))
        assert session.cursor_hint is CursorHint.POINTER

    def test_cancel_clears_chain_hover(self, wide_session):
        """Test abandoning the chain drops a hover on one of its handles."""
        wide_session.update_hover((100, 0))
        assert wide_session.cursor_hint is CursorHint.POINTER
        wide_session.cancel()
        assert wide_session.hover_target is None
        assert wide_session.cursor_hint is CursorHint.CROSSHAIR

    def test_cancel_keeps_polygon_hover(self, closed_square_session):
        """Test a hovered polygon handle survives cancelling a new chain."""
        session = closed_square_session
        session.place_vertex((400, 400))
        session.update_hover((200, 200))
        session.cancel()
        assert session.hover_target == HandleTarget.in_polygon(0, 2)


class TestGestures:
    """Tests for the pointer gesture helpers used by the window."""

    def test_click_on_first_vertex_closes(self, wide_session):
        """Test a stationary click on vertex 0 closes instead of dragging."""
        wide_session.pointer_down((1, 1))
        polygon = wide_session.pointer_up((1, 1))
        assert polygon is not None
        assert polygon.area == 5000.0
        assert wide_session.mode is EditingMode.IDLE

    def test_small_jitter_still_closes(self, wide_session):
        """Test movement within the drag threshold is still a click."""
        wide_session.pointer_down((0, 0))
        wide_session.pointer_move((DRAG_THRESHOLD / 2, 0))
        assert not wide_session.is_dragging
        assert wide_session.pointer_up((DRAG_THRESHOLD / 2, 0)) is not None

    def test_press_and_move_drags(self, wide_session):
        """Test moving past the threshold drags and the release does not close."""
        wide_session.pointer_down((0, 0))
        wide_session.pointer_move((5, 5))
        assert wide_session.is_dragging
        assert wide_session.chain[0] == Point(5, 5)

        wide_session.pointer_move((2, 1))
        assert wide_session.pointer_up((2, 1)) is None
        assert not wide_session.is_dragging
        assert wide_session.chain[0] == Point(2, 1)
        assert len(wide_session.store) == 0

    def test_press_on_empty_space_then_move(self, wide_session):
        """Test a press that misses every handle keeps previewing."""
        wide_session.pointer_down((50, 50))
        wide_session.pointer_move((60, 60))
        assert not wide_session.is_dragging
        assert wide_session.preview == Point(60, 60)
        assert wide_session.pointer_up((60, 60)) is None
        assert wide_session.mode is EditingMode.DRAWING

    def test_secondary_click_places(self, session):
        """Test the secondary button places vertices."""
        assert session.secondary_click((7, 8))
        assert session.chain == [Point(7, 8)]

    def test_motion_updates_preview_and_hover(self, wide_session):
        """Test plain motion moves the rubber band and the hover target."""
        assert wide_session.pointer_move((99, 1))
        assert wide_session.preview == Point(99, 1)
        assert wide_session.hover_target == HandleTarget.in_chain(1)


class TestOnChange:
    """Tests for change notifications."""

    def test_called_for_accepted_events(self, session):
        """Test the callback fires once per accepted event."""
        calls = []
        session.on_change = lambda s: calls.append(s)
        session.place_vertex((0, 0))
        assert calls == [session]

    def test_not_called_for_rejected_events(self, drawing_session):
        """Test ignored events do not trigger a redraw."""
        calls = []
        drawing_session.on_change = lambda s: calls.append(s)
        drawing_session.try_close((500, 500))
        drawing_session.end_drag()
        drawing_session.continue_drag((1, 1))
        assert calls == []

    def test_single_call_per_motion(self, wide_session):
        """Test one pointer motion redraws once even when hover and preview both change."""
        calls = []
        wide_session.on_change = lambda s: calls.append(s)
        wide_session.pointer_move((99, 1))
        assert wide_session.hover_target == HandleTarget.in_chain(1)
        assert wide_session.preview == Point(99, 1)
        assert len(calls) == 1

    def test_single_call_when_drag_starts(self, wide_session):
        """Test the motion that starts a drag redraws once."""
        calls = []
        wide_session.on_change = lambda s: calls.append(s)
        wide_session.pointer_down((0, 0))
        wide_session.pointer_move((5, 5))
        assert wide_session.is_dragging
        assert len(calls) == 1

    def test_no_call_for_idle_motion(self, session):
        """Test motion over empty space with no chain does not redraw."""
        calls = []
        session.on_change = lambda s: calls.append(s)
        assert not session.pointer_move((50, 50))
        assert calls == []
