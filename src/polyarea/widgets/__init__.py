"""Reusable UI widgets for the polygon editor."""

from polyarea.widgets.status_bar import StatusBar

__all__ = [
    "StatusBar",
]
