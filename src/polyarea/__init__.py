"""
PolyArea v1.0

Draw polygons with the mouse and read off their areas.

Usage:
    python -m polyarea
    python -m polyarea --theme dark --no-drag

Or:
    from polyarea import main
    main()
"""

import argparse
import logging

__version__ = "1.0.0"


def main():
    """Launch the PolyArea window."""
    parser = argparse.ArgumentParser(
        description="PolyArea - Draw polygons and measure their area"
    )
    parser.add_argument(
        "--theme", "-t",
        type=str,
        help="Colour theme (overrides saved settings)"
    )
    parser.add_argument(
        "--radius", "-r",
        type=float,
        help="Grab and close distance in pixels"
    )
    parser.add_argument(
        "--no-drag",
        action="store_true",
        help="Disable dragging vertices; only place and close"
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging"
    )
    parser.add_argument(
        "--version", "-v",
        action="version",
        version=f"PolyArea {__version__}"
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.INFO,
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
    )

    from polyarea.app import PolyAreaApp
    from polyarea.config import load_settings

    settings = load_settings()
    if args.theme:
        settings.theme = args.theme
    if args.radius is not None:
        settings.hit_radius = args.radius
    if args.no_drag:
        settings.drag_editing = False

    app = PolyAreaApp(settings)
    app.run()


__all__ = ["main", "__version__"]
