"""Draw surface interface used by the editor views.

The views are immediate-mode: every frame they walk the glyphs, issue draw
calls and react to the frame's pointer event. They never talk to Qt directly;
the host canvas hands them a surface:
- QPainterSurface (painter_surface.py) for paint frames
- NullSurface for input-only frames, where nothing is drawn
"""

from abc import ABC, abstractmethod
from enum import Enum


class CursorShape(Enum):
    """Cursor affordances a view can attach to a screen region."""
    RESIZE_UP_LEFT = 'resize_up_left'
    RESIZE_UP_RIGHT = 'resize_up_right'
    RESIZE_VERTICAL = 'resize_vertical'
    RESIZE_HORIZONTAL = 'resize_horizontal'
    MOVE_ARROW = 'move_arrow'


class DrawSurface(ABC):
    """Abstract drawing target for one frame.

    Rects are in screen pixels (Y-down) and may have negative width or
    height; implementations draw the region they cover.
    """

    @abstractmethod
    def fill_rect(self, rect, color):
        """Fill a rect with an RGBA (0-255) color."""
        pass

    @abstractmethod
    def draw_texture(self, rect, texture):
        """Draw the whole texture stretched over rect."""
        pass

    @abstractmethod
    def draw_texture_with_tex_coords(self, rect, texture, tex_coords, rotation=0.0, pivot=None):
        """Draw part of a texture.

        Args:
            rect: Destination rect
            texture: AtlasTexture
            tex_coords: Source region as a UV Rect (origin bottom-left, Y-up)
            rotation: Degrees to rotate the drawing by (clockwise, screen space)
            pivot: Vec2 to rotate around
        """
        pass

    @abstractmethod
    def add_cursor_rect(self, rect, cursor):
        """Show cursor while the pointer is over rect."""
        pass

    @abstractmethod
    def draw_label(self, rect, text):
        """Draw centered informational text."""
        pass


class NullSurface(DrawSurface):
    """Surface for input-only frames: every draw call is ignored."""

    def fill_rect(self, rect, color):
        pass

    def draw_texture(self, rect, texture):
        pass

    def draw_texture_with_tex_coords(self, rect, texture, tex_coords, rotation=0.0, pivot=None):
        pass

    def add_cursor_rect(self, rect, cursor):
        pass

    def draw_label(self, rect, text):
        pass
