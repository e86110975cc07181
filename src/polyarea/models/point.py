"""Plane coordinates and handle identifiers."""

from dataclasses import dataclass
from enum import Enum
from typing import NamedTuple, Optional


class Point(NamedTuple):
    """Immutable position on the drawing surface."""
    x: float
    y: float

    @classmethod
    def of(cls, value) -> "Point":
        """Coerce an (x, y) pair into a Point of floats."""
        if isinstance(value, cls):
            return value
        x, y = value
        return cls(float(x), float(y))

    def as_int(self):
        """Rounded pixel position for raster drawing."""
        return (int(round(self.x)), int(round(self.y)))


class EditingMode(Enum):
    """Whether a polygon is currently being drawn."""
    IDLE = "idle"
    DRAWING = "drawing"


class CursorHint(Enum):
    """Cursor affordance derived from drag and hover state."""
    CROSSHAIR = "crosshair"
    POINTER = "pointer"
    GRABBING = "grabbing"


@dataclass(frozen=True)
class HandleTarget:
    """
    Identifies a single vertex handle.

    Attributes:
        polygon_index: Index into the polygon store, or None for the
                       chain currently being drawn
        vertex_index: Index of the vertex within its owner
    """
    polygon_index: Optional[int]
    vertex_index: int

    @classmethod
    def in_chain(cls, vertex_index: int) -> "HandleTarget":
        return cls(None, vertex_index)

    @classmethod
    def in_polygon(cls, polygon_index: int, vertex_index: int) -> "HandleTarget":
        return cls(polygon_index, vertex_index)

    @property
    def on_chain(self) -> bool:
        return self.polygon_index is None
