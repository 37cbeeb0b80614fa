"""Selection state for the glyph editor.

The selected code point is independent of whether the font has a record for
it: selecting an unassigned character is how the user reaches "Add".
"""
import logging
from typing import Iterable, Optional, Tuple, Union

from models.geometry import Rect
from constants import NO_SELECTION


class SelectionController:
    """Tracks the selected character and resolves clicks on glyph rects."""

    def __init__(self):
        self._logger = logging.getLogger('SelectionController')
        self._selected_code_point = NO_SELECTION
        # Screen rect the selected glyph was last drawn at (handle precedence)
        self.selected_rect: Optional[Rect] = None

    @property
    def selected_code_point(self) -> int:
        return self._selected_code_point

    def has_selection(self) -> bool:
        return self._selected_code_point > 0

    def set_selected_character(self, code: Union[int, str]):
        """Select a character by number or by text entry.

        Args:
            code: Code point, or a text entry whose first character is used.
                Empty text selects nothing (code 0).
        """
        if isinstance(code, str):
            code = ord(code[0]) if code else 0
        if code != self._selected_code_point:
            self._selected_code_point = int(code)
            self.selected_rect = None
            self._logger.debug(f"Selected character {code}")

    def clear(self):
        """Reset to no selection."""
        self._selected_code_point = NO_SELECTION
        self.selected_rect = None

    def resolve_index(self, store) -> int:
        """Index of the selected character's record in the store, or -1."""
        return store.index_of(self._selected_code_point)

    def resolve_click(self, pointer, glyph_rects: Iterable[Tuple[int, Rect]]) -> bool:
        """Apply click-to-select for a pointer-down.

        A click over the selected glyph's last drawn rect belongs to its drag
        handles and never changes the selection. Otherwise the last glyph (in
        the order given, i.e. store order) whose rect contains the pointer is
        selected; overlapping glyphs therefore resolve to the later record.

        Args:
            pointer: Vec2 pointer position in screen space
            glyph_rects: (code_point, screen_rect) pairs in store order

        Returns:
            True if the selection changed
        """
        if self.selected_rect is not None and self.selected_rect.contains(pointer, True):
            return False

        hit = None
        for code_point, rect in glyph_rects:
            if rect.contains(pointer, True):
                hit = code_point

        if hit is None or hit == self._selected_code_point:
            return False
        self.set_selected_character(hit)
        return True
