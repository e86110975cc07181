"""Pytest fixtures for PolyArea tests."""

import pytest

from polyarea.core import EditorSession, PolygonBuilder, EditController
from polyarea.models import Point, PolygonStore
from polyarea.utils.profiling import PerformanceProfiler


# ============================================================================
# Geometry Fixtures
# ============================================================================

@pytest.fixture
def square():
    """4x4 axis-aligned square, counter-clockwise in a y-up frame."""
    return [Point(0, 0), Point(4, 0), Point(4, 4), Point(0, 4)]


@pytest.fixture
def big_square():
    """100x100 square whose corners are far apart relative to the hit radius."""
    return [Point(0, 0), Point(100, 0), Point(100, 100), Point(0, 100)]


@pytest.fixture
def triangle():
    """Right triangle with legs 4 and 3."""
    return [Point(0, 0), Point(4, 0), Point(0, 3)]


# ============================================================================
# Store Fixtures
# ============================================================================

@pytest.fixture
def store():
    """Create an empty PolygonStore."""
    return PolygonStore()


@pytest.fixture
def store_with_square(store, square):
    """Store holding a single 4x4 square."""
    store.add(square)
    return store


# ============================================================================
# Core Fixtures
# ============================================================================

@pytest.fixture
def builder(store):
    """PolygonBuilder writing into the store fixture."""
    return PolygonBuilder(store, snap_distance=10)


@pytest.fixture
def controller(builder, store):
    """EditController sharing the builder and store fixtures."""
    return EditController(builder, store, radius=10)


@pytest.fixture
def session():
    """Fresh EditorSession with dragging enabled."""
    return EditorSession(radius=10)


@pytest.fixture
def drawing_session(session):
    """Session with an open 3-vertex chain [(0,0), (10,0), (10,10)]."""
    for p in [(0, 0), (10, 0), (10, 10)]:
        session.place_vertex(p)
    return session


@pytest.fixture
def closed_square_session(session):
    """Session holding one closed 100x100 square at (100, 100)."""
    for p in [(100, 100), (200, 100), (200, 200), (100, 200)]:
        session.place_vertex(p)
    session.try_close((101, 101))
    return session


@pytest.fixture(autouse=True)
def clean_profiler():
    """Keep profiler state from leaking between tests."""
    yield
    PerformanceProfiler.get_instance().clear()
