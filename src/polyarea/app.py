"""
PolyArea Application - Tk front end.

Right-click places vertices, left-click on the first vertex closes the
polygon, and left-drag on any handle moves it. The window only forwards
canvas coordinates to the EditorSession and paints whatever the Renderer
produces.
"""

import logging
import tkinter as tk

import cv2
from PIL import Image, ImageTk

from polyarea.config import AppSettings, load_settings, save_settings, get_theme
from polyarea.core import EditorSession, Renderer
from polyarea.models import CursorHint, EditingMode
from polyarea.widgets import StatusBar

logger = logging.getLogger("polyarea.app")

# Tk cursor names for each affordance
CURSORS = {
    CursorHint.CROSSHAIR: "crosshair",
    CursorHint.POINTER: "hand2",
    CursorHint.GRABBING: "fleur",
}


class PolyAreaApp:
    """Main window: canvas plus status bar."""

    def __init__(self, settings: AppSettings = None):
        self.settings = settings or load_settings()
        self.theme = get_theme(self.settings.theme)

        self.root = tk.Tk()
        self.root.title("PolyArea")
        self.root.geometry(
            f"{self.settings.window_width}x{self.settings.window_height}"
            f"+{self.settings.window_x}+{self.settings.window_y}"
        )

        self.session = EditorSession(
            radius=self.settings.hit_radius,
            drag_enabled=self.settings.drag_editing,
        )
        self.session.on_change = lambda _: self._update_display()

        self.renderer = Renderer(
            theme=self.theme,
            handle_radius=self.settings.handle_radius,
            fill_opacity=self.settings.fill_opacity,
            show_area_labels=self.settings.show_area_labels,
            label_decimals=self.settings.label_decimals,
        )
        self.tk_image = None

        self._setup_ui()
        self._bind_events()
        self.root.protocol("WM_DELETE_WINDOW", self._on_close)
        logger.debug("Window ready (theme=%s, drag editing=%s)",
                     self.settings.theme, self.settings.drag_editing)

    def _setup_ui(self):
        self.status_bar = StatusBar(self.root, self.theme)
        self.status_bar.pack(side=tk.BOTTOM, fill=tk.X)
        self.status_bar.add_item("mode", "Idle")
        self.status_bar.add_separator()
        self.status_bar.add_item("polygons", "0 polygons")
        self.status_bar.add_item("total", "Total area: 0")
        self.status_bar.add_item("position", "", side="right")

        self.canvas = tk.Canvas(self.root, bg=self.theme["canvas_bg"],
                                cursor=CURSORS[CursorHint.CROSSHAIR],
                                highlightthickness=0)
        self.canvas.pack(fill=tk.BOTH, expand=True)

    def _bind_events(self):
        self.canvas.bind("<Button-1>", self._on_press)
        self.canvas.bind("<B1-Motion>", self._on_drag)
        self.canvas.bind("<ButtonRelease-1>", self._on_release)
        self.canvas.bind("<Button-3>", self._on_right_click)
        self.canvas.bind("<Motion>", self._on_motion)
        self.canvas.bind("<Configure>", lambda e: self._update_display())
        self.root.bind("<Escape>", lambda e: self.session.cancel())

    # Canvas events
    def _on_press(self, event):
        self.session.pointer_down((event.x, event.y))

    def _on_drag(self, event):
        self._set_position(event)
        self.session.pointer_move((event.x, event.y))
        self._update_cursor()

    def _on_release(self, event):
        self.session.pointer_up((event.x, event.y))
        self._update_cursor()

    def _on_right_click(self, event):
        self.session.secondary_click((event.x, event.y))

    def _on_motion(self, event):
        self._set_position(event)
        self.session.pointer_move((event.x, event.y))
        self._update_cursor()

    def _set_position(self, event):
        self.status_bar.set_item_text("position", f"({event.x}, {event.y})")

    # Display
    def _update_cursor(self):
        self.canvas.config(cursor=CURSORS[self.session.cursor_hint])

    def _update_display(self):
        width = self.canvas.winfo_width()
        height = self.canvas.winfo_height()
        if width <= 1 or height <= 1:
            return

        rendered = self.renderer.render(self.session, width, height)
        pil_img = Image.fromarray(cv2.cvtColor(rendered, cv2.COLOR_BGR2RGB))
        self.tk_image = ImageTk.PhotoImage(pil_img)

        self.canvas.delete("all")
        self.canvas.create_image(0, 0, anchor=tk.NW, image=self.tk_image)

        self._update_status()
        self._update_cursor()

    def _update_status(self):
        mode = self.session.mode
        if mode is EditingMode.DRAWING:
            mode_text = f"Drawing ({len(self.session.builder.points)} vertices)"
        else:
            mode_text = "Idle"
        if self.session.is_dragging:
            mode_text += " | Dragging"
        self.status_bar.set_item_text("mode", mode_text)

        count = len(self.session.store)
        self.status_bar.set_item_text(
            "polygons", f"{count} polygon{'s' if count != 1 else ''}"
        )
        decimals = self.settings.label_decimals
        self.status_bar.set_item_text(
            "total", f"Total area: {self.session.store.total_area:.{decimals}f} px^2"
        )

    def _on_close(self):
        self.settings.window_width = self.root.winfo_width()
        self.settings.window_height = self.root.winfo_height()
        self.settings.window_x = self.root.winfo_x()
        self.settings.window_y = self.root.winfo_y()
        save_settings(self.settings)
        logger.debug("Settings saved, closing")
        self.root.quit()

    def run(self):
        """Run the application."""
        self.root.mainloop()
