"""UI components for FontEdit

This package contains the editor widgets and the views they host:
- canvas_widgets: Draw surface abstraction and the QPainter backend
- grab_handles: Resize/move handles and the drag state machine
- glyph_views: UV editor, vert editor and test preview views

Direct imports for convenience:
"""

from .font_edit_canvas import FontEditCanvas
from .glyph_inspector import GlyphInspector

__all__ = [
    'FontEditCanvas',
    'GlyphInspector',
]
