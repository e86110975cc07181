"""Core logic for drawing and editing polygons."""

from polyarea.core.hit_testing import find_handle_at, DEFAULT_HIT_RADIUS
from polyarea.core.construction import PolygonBuilder, MIN_POLYGON_VERTICES
from polyarea.core.editing import EditController
from polyarea.core.session import EditorSession
from polyarea.core.rendering import Renderer, RenderCache

__all__ = [
    "find_handle_at",
    "DEFAULT_HIT_RADIUS",
    "PolygonBuilder",
    "MIN_POLYGON_VERTICES",
    "EditController",
    "EditorSession",
    "Renderer",
    "RenderCache",
]
