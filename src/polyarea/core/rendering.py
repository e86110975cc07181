"""Raster rendering of polygons, the chain being drawn and handles."""

from typing import Dict, Iterable, Optional, Sequence, Tuple

import cv2
import numpy as np

from polyarea.config import get_theme, hex_to_bgr, DEFAULT_THEME
from polyarea.models import HandleTarget, Point, Polygon
from polyarea.utils.geometry import distance
from polyarea.utils.profiling import timed, profile_block

Color = Tuple[int, int, int]


def _to_pixels(points: Sequence[Point]) -> np.ndarray:
    """Points as an int32 (N, 1, 2) array for cv2 polygon calls."""
    pts = np.round(np.asarray(points, dtype=np.float64)).astype(np.int32)
    return pts.reshape((-1, 1, 2))


class RenderCache:
    """Cache of the completed-polygon layer."""

    def __init__(self):
        self.base_image: Optional[np.ndarray] = None
        self.base_key: tuple = ()

    def invalidate(self):
        """Clear the cached layer."""
        self.base_image = None
        self.base_key = ()


class Renderer:
    """
    Draws an editor session onto a BGR image.

    Completed polygons change only when the store's revision changes, so
    that layer is cached. The chain, rubber band and hover highlight are
    drawn on a copy for every frame.
    """

    def __init__(self,
                 theme: Optional[Dict[str, str]] = None,
                 handle_radius: int = 5,
                 fill_opacity: float = 0.3,
                 show_area_labels: bool = True,
                 label_decimals: int = 2):
        self.theme = theme or get_theme(DEFAULT_THEME)
        self.handle_radius = handle_radius
        self.fill_opacity = fill_opacity
        self.show_area_labels = show_area_labels
        self.label_decimals = label_decimals

        self.label_font = cv2.FONT_HERSHEY_SIMPLEX
        self.label_scale = 0.6
        self.label_thickness = 2
        self.cache = RenderCache()

    def set_theme(self, theme: Dict[str, str]):
        self.theme = theme
        self.cache.invalidate()

    def invalidate_cache(self):
        """Call when display options change to force re-render."""
        self.cache.invalidate()

    def _color(self, key: str) -> Color:
        return hex_to_bgr(self.theme[key])

    def format_area(self, area: float) -> str:
        return f"Area: {area:.{self.label_decimals}f} px^2"

    @timed("canvas_render")
    def render(self, session, width: int, height: int) -> np.ndarray:
        """
        Render the whole session.

        Args:
            session: EditorSession to draw (only read)
            width: Surface width in pixels
            height: Surface height in pixels

        Returns:
            BGR image of shape (height, width, 3)
        """
        width = max(1, int(width))
        height = max(1, int(height))

        key = (session.store.revision, len(session.store), width, height)
        if self.cache.base_image is None or self.cache.base_key != key:
            with profile_block("polygon_layer"):
                self.cache.base_image = self._render_polygons(session.store, width, height)
            self.cache.base_key = key

        image = self.cache.base_image.copy()

        chain = session.builder.points
        if chain:
            self._draw_chain(image, chain, session.preview)
            snap = session.builder.get_snap_target()
            if snap is not None and session.preview is not None:
                self._draw_snap_ring(image, snap, session.preview, session.radius)

        highlight = session.drag_target or session.hover_target
        if highlight is not None:
            position = self._handle_position(session, highlight)
            if position is not None:
                self._draw_highlight(image, position)

        return image

    def _render_polygons(self, polygons: Iterable[Polygon],
                         width: int, height: int) -> np.ndarray:
        image = np.empty((height, width, 3), dtype=np.uint8)
        image[:] = self._color("canvas_bg")

        polygons = list(polygons)
        if not polygons:
            return image

        if self.fill_opacity > 0:
            overlay = image.copy()
            for polygon in polygons:
                cv2.fillPoly(overlay, [_to_pixels(polygon.points)], self._color("fill"),
                             lineType=cv2.LINE_AA)
            image = cv2.addWeighted(overlay, self.fill_opacity, image,
                                    1 - self.fill_opacity, 0)

        for polygon in polygons:
            cv2.polylines(image, [_to_pixels(polygon.points)], True,
                          self._color("edge"), 2, cv2.LINE_AA)
            self._draw_handles(image, polygon.points)
            if self.show_area_labels:
                self._draw_area_label(image, polygon)

        return image

    def _draw_chain(self, image: np.ndarray, chain: Sequence[Point],
                    preview: Optional[Point]):
        if preview is not None:
            # Rubber band from the last vertex to the cursor
            path = list(chain) + [preview]
            closed = False
        else:
            path = list(chain)
            closed = True
        if len(path) > 1:
            cv2.polylines(image, [_to_pixels(path)], closed,
                          self._color("edge"), 2, cv2.LINE_AA)
        self._draw_handles(image, chain)

    def _draw_handles(self, image: np.ndarray, points: Sequence[Point]):
        r = self.handle_radius
        outline = self._color("handle_outline")
        for i, point in enumerate(points):
            center = Point.of(point).as_int()
            color = self._color("handle_first") if i == 0 else self._color("handle")
            cv2.circle(image, center, r, color, -1, cv2.LINE_AA)
            cv2.circle(image, center, r, outline, 2, cv2.LINE_AA)

    def _draw_area_label(self, image: np.ndarray, polygon: Polygon):
        """Area text centred above the first vertex."""
        text = self.format_area(polygon.area)
        (tw, th), _ = cv2.getTextSize(text, self.label_font,
                                      self.label_scale, self.label_thickness)
        x, y = polygon.points[0].as_int()
        origin = (x - tw // 2, y - 15)
        cv2.putText(image, text, origin, self.label_font, self.label_scale,
                    self._color("label"), self.label_thickness, cv2.LINE_AA)

    def _draw_snap_ring(self, image: np.ndarray, anchor: Point,
                        cursor: Point, radius: float):
        if distance(cursor, anchor) <= radius:
            cv2.circle(image, anchor.as_int(), int(round(radius)),
                       self._color("handle_hover"), 1, cv2.LINE_AA)

    def _draw_highlight(self, image: np.ndarray, position: Point):
        cv2.circle(image, position.as_int(), self.handle_radius + 3,
                   self._color("handle_hover"), 2, cv2.LINE_AA)

    @staticmethod
    def _handle_position(session, target: HandleTarget) -> Optional[Point]:
        try:
            if target.on_chain:
                return session.builder.points[target.vertex_index]
            return session.store[target.polygon_index].points[target.vertex_index]
        except IndexError:
            return None
