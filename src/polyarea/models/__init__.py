"""Data models for the polygon editor."""

from polyarea.models.point import Point, EditingMode, CursorHint, HandleTarget
from polyarea.models.polygon import Polygon
from polyarea.models.store import PolygonStore

__all__ = [
    "Point",
    "EditingMode",
    "CursorHint",
    "HandleTarget",
    "Polygon",
    "PolygonStore",
]
