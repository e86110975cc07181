"""
Configuration and Theme Management for PolyArea.

Settings persist between sessions as JSON in the user's home directory.
Themes hold the canvas colours used by the renderer (hex strings).
"""

import json
import logging
from pathlib import Path
from dataclasses import dataclass, asdict
from typing import Dict, List, Optional

logger = logging.getLogger("polyarea.config")

CONFIG_FILE = Path.home() / ".polyarea.json"


@dataclass
class AppSettings:
    """
    Persistent application settings.

    Saved between sessions to preserve user preferences.
    """
    # Appearance
    theme: str = "light"
    show_area_labels: bool = True
    label_decimals: int = 2
    fill_opacity: float = 0.3

    # Interaction
    hit_radius: float = 10.0     # Grab and close distance, surface units
    handle_radius: int = 5       # Drawn handle size in pixels
    drag_editing: bool = True

    # Window state
    window_width: int = 1200
    window_height: int = 800
    window_x: int = 100
    window_y: int = 100


THEMES: Dict[str, Dict[str, str]] = {
    "light": {
        "canvas_bg": "#ffffff",
        "edge": "#3498db",
        "fill": "#3498db",
        "handle": "#3498db",
        "handle_first": "#e74c3c",
        "handle_outline": "#2c3e50",
        "handle_hover": "#f39c12",
        "label": "#2c3e50",
        "status_bg": "#007acc",
        "status_fg": "#ffffff",
    },
    "dark": {
        "canvas_bg": "#1e1e1e",
        "edge": "#75beff",
        "fill": "#0078d4",
        "handle": "#75beff",
        "handle_first": "#f14c4c",
        "handle_outline": "#cccccc",
        "handle_hover": "#dcdcaa",
        "label": "#ffffff",
        "status_bg": "#007acc",
        "status_fg": "#ffffff",
    },
}

DEFAULT_THEME = "light"


def load_settings(path: Optional[Path] = None) -> AppSettings:
    """Load settings from config file, falling back to defaults."""
    path = path or CONFIG_FILE
    try:
        if path.exists():
            with open(path, 'r', encoding='utf-8') as f:
                data = json.load(f)
                known_fields = {f.name for f in AppSettings.__dataclass_fields__.values()}
                filtered = {k: v for k, v in data.items() if k in known_fields}
                return AppSettings(**filtered)
    except (OSError, ValueError, TypeError, AttributeError) as e:
        logger.warning("Could not load settings from %s: %s", path, e)
    return AppSettings()


def save_settings(settings: AppSettings, path: Optional[Path] = None):
    """Save settings to config file."""
    path = path or CONFIG_FILE
    try:
        data = asdict(settings)
        with open(path, 'w', encoding='utf-8') as f:
            json.dump(data, f, indent=2)
    except OSError as e:
        logger.warning("Could not save settings to %s: %s", path, e)


def get_theme(name: str) -> Dict[str, str]:
    """Get theme colors by name."""
    return THEMES.get(name, THEMES[DEFAULT_THEME])


def get_theme_names() -> List[str]:
    """Get list of available theme names."""
    return list(THEMES.keys())


def hex_to_bgr(color: str):
    """Convert '#rrggbb' to an OpenCV BGR tuple."""
    color = color.lstrip("#")
    r, g, b = (int(color[i:i + 2], 16) for i in (0, 2, 4))
    return (b, g, r)
