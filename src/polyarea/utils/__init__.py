"""Utility functions for PolyArea."""

from polyarea.utils.geometry import (
    distance,
    snap_to_point,
    signed_area,
    polygon_area,
    bounding_box,
)
from polyarea.utils.profiling import (
    PerformanceProfiler,
    timed,
    profile_block,
    profiler,
)

__all__ = [
    # Geometry
    "distance",
    "snap_to_point",
    "signed_area",
    "polygon_area",
    "bounding_box",
    # Profiling
    "PerformanceProfiler",
    "timed",
    "profile_block",
    "profiler",
]
