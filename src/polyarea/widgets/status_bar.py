"""Status bar shown under the drawing canvas."""

import tkinter as tk
from typing import Dict


class StatusBar(tk.Frame):
    """Single-line bar of labelled items."""

    def __init__(self, parent, theme: dict):
        super().__init__(parent, bg=theme["status_bg"], height=22)
        self.theme = theme
        self.pack_propagate(False)

        self.items: Dict[str, tk.Label] = {}

    def add_item(self, item_id: str, text: str = "", side: str = "left"):
        """Add a status bar item."""
        item = tk.Label(
            self,
            text=text,
            font=("Segoe UI", 9),
            fg=self.theme["status_fg"],
            bg=self.theme["status_bg"],
            padx=10
        )
        item.pack(side=tk.LEFT if side == "left" else tk.RIGHT)
        self.items[item_id] = item

    def set_item_text(self, item_id: str, text: str):
        """Update a status bar item's text."""
        if item_id in self.items:
            self.items[item_id].configure(text=text)

    def add_separator(self):
        """Add a visual separator."""
        sep = tk.Frame(self, bg=self.theme["status_fg"], width=1)
        sep.pack(side=tk.LEFT, fill=tk.Y, padx=5, pady=4)
