"""Canvas drawing backends for the editor views.

- draw_surface.py: DrawSurface interface, CursorShape, NullSurface
- painter_surface.py: QPainter-backed surface used by the canvas widget
"""

from .draw_surface import DrawSurface, NullSurface, CursorShape
from .painter_surface import QPainterSurface

__all__ = ['DrawSurface', 'NullSurface', 'CursorShape', 'QPainterSurface']
