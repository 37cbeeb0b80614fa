"""
FontEdit - Data Models

This module contains the data model classes for glyph editing.
This is the MODEL in MVC architecture: no Qt imports live here.
"""

from .geometry import Rect, Vec2
from .glyph import GlyphRecord, NativeGlyph
from .errors import GlyphStoreError, DuplicateGlyph, GlyphNotFound, InvalidCodePoint
from .glyph_store import GlyphRecordStore
from .selection import SelectionController
from .edit_session import FontEditSession, WindowMode, DisplayUnit, ApplyChoice

__all__ = [
    'Rect', 'Vec2',
    'GlyphRecord', 'NativeGlyph',
    'GlyphStoreError', 'DuplicateGlyph', 'GlyphNotFound', 'InvalidCodePoint',
    'GlyphRecordStore',
    'SelectionController',
    'FontEditSession', 'WindowMode', 'DisplayUnit', 'ApplyChoice',
]
