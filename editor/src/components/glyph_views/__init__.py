"""Glyph editing views.

- uv_editor_view.py: Atlas-space editing of UV rects
- vert_editor_view.py: Placement editing around a baseline origin
- test_preview_view.py: Test string preview with in-place editing
- overlays.py: Selection highlight and empty-state drawing
"""

from .uv_editor_view import UvEditorView
from .vert_editor_view import VertEditorView
from .test_preview_view import TestPreviewView, PreviewLayout, GlyphPlacement
from .overlays import draw_selection

__all__ = [
	'UvEditorView', 'VertEditorView', 'TestPreviewView',
	'PreviewLayout', 'GlyphPlacement', 'draw_selection',
]
