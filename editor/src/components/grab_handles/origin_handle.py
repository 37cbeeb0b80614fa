"""Origin handle - small draggable square that moves a point."""

from models.geometry import Rect, Vec2
from components.canvas_widgets.draw_surface import CursorShape
from utils.coordinate_transforms import normalize_rect
from constants import ORIGIN_HANDLE_SIZE, ORIGIN_HANDLE_COLOR


class OriginHandle:
    """Draggable marker for the preview string origin and the fallback vert
    editor origin.

    The square sits to the left of the point it moves. process() returns the
    frame's pointer delta while dragging; the owner adds it to its offset.
    """

    def __init__(self, size=ORIGIN_HANDLE_SIZE):
        self.size = size
        self.dragging = False

    def rect_at(self, position) -> Rect:
        return normalize_rect(Rect(position.x, position.y, -self.size, self.size))

    def process(self, surface, position, event) -> Vec2:
        """Draw the handle at position and react to the frame's pointer event.

        Returns:
            Vec2 offset to apply (zero unless dragging)
        """
        rect = self.rect_at(position)
        surface.fill_rect(rect, ORIGIN_HANDLE_COLOR)
        surface.add_cursor_rect(rect, CursorShape.MOVE_ARROW)

        if self.dragging:
            if event.is_drag:
                return event.delta.copy()
            if event.is_up:
                self.dragging = False
        elif event.is_down and rect.contains(event.position):
            self.dragging = True
        return Vec2()

    def release(self):
        self.dragging = False
