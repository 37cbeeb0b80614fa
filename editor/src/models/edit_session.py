"""
FontEdit - Edit Session

Owns everything one font-editing session works on:
- The active font (a FontAssetSource)
- The GlyphRecordStore + SelectionController pair for that font
- Undo/redo history (store snapshots)
- Editor settings the views read (window mode, display unit, preview state)

The session is INDEPENDENT of UI:
- No Qt imports
- Dialog decisions (apply on switch, imported asset handling) are passed in
  as callables by the host window

Views and the inspector receive the session explicitly; sessions never share
a store.
"""

import logging
from enum import Enum
from typing import Callable, Optional

from models.geometry import Vec2
from models.glyph_store import GlyphRecordStore
from models.selection import SelectionController
from utils.history_manager import HistoryManager
from constants import NOT_FOUND, DEFAULT_TEST_OFFSET, DEFAULT_VERT_OFFSET


class WindowMode(Enum):
    """Which editing surface the canvas shows."""
    TEXTURE = 'texture'   # UV editor over the atlas
    SCREEN = 'screen'     # Test string preview + vert editor


class DisplayUnit(Enum):
    """How the inspector shows the UV rect."""
    COORDS = 'coords'
    PIXELS = 'pixels'


class ApplyChoice(Enum):
    """Answer to "the font is an imported asset, create an editable copy?"."""
    CREATE_COPY = 0
    CANCEL = 1
    APPLY_IN_PLACE = 2


class FontEditSession:
    """One font being edited.

    Usage:
        session = FontEditSession(persistence=FileAssetPersistence())
        session.set_font(JsonFontAsset.load(path))

        session.selection.set_selected_character('A')
        session.add_selected()
        session.update_selected(advance=12.0)

        session.apply(choose_imported_action=ask_user)
    """

    def __init__(self, persistence=None, history=None):
        """
        Args:
            persistence: AssetPersistence used by apply (None = no imported assets)
            history: HistoryManager (a new one by default)
        """
        self._logger = logging.getLogger('FontEditSession')
        self.persistence = persistence
        self.history = history if history is not None else HistoryManager()

        self._font = None
        self.store = GlyphRecordStore()
        self.selection = SelectionController()

        self.window_mode = WindowMode.TEXTURE
        self.display_unit = DisplayUnit.COORDS
        self.show_all = True
        self.test_string = ""
        self.test_offset = Vec2(*DEFAULT_TEST_OFFSET)
        self.vert_offset = Vec2(*DEFAULT_VERT_OFFSET)

    # ========================================
    # Font
    # ========================================

    @property
    def font(self):
        return self._font

    def set_font(self, font, confirm_apply: Optional[Callable] = None):
        """Make font the edit target.

        Args:
            font: FontAssetSource, or None to stop editing
            confirm_apply: Called with the previous font when it has unapplied
                changes; apply is run if it returns True

        Raises:
            InvalidCodePoint, DuplicateGlyph: If the font's character table is
                invalid; the session keeps its current font
        """
        if font is self._font:
            return
        if font is not None:
            GlyphRecordStore().load(font.get_character_table(), font.get_ascent())
        if self._font is not None and self.has_changes() and confirm_apply is not None:
            if confirm_apply(self._font):
                self.apply()

        self._font = font
        self.history.clear()
        self.reload()
        self._logger.debug(f"Active font: {getattr(font, 'name', None)}")

    def can_edit(self) -> bool:
        return self._font is not None

    def has_texture(self) -> bool:
        return self._font is not None and self._font.get_texture() is not None

    def get_texture(self):
        return self._font.get_texture() if self._font is not None else None

    def get_ascent(self) -> float:
        """Font ascent, re-read from the font on every call (0 without a font)."""
        return self._font.get_ascent() if self._font is not None else 0.0

    def get_kerning(self) -> float:
        return self._font.get_kerning_or_tracking() if self._font is not None else 0.0

    def has_changes(self) -> bool:
        return self.store.is_dirty()

    # ========================================
    # Load / Apply / Revert
    # ========================================

    def reload(self):
        """Drop in-memory edits and read the font's character table again."""
        self.revert()
        self.ensure_loaded()

    def ensure_loaded(self):
        """Load the store from the font if it is not loaded yet."""
        if not self.store.is_loaded() and self._font is not None:
            self.store.load(self._font.get_character_table(), self._font.get_ascent())

    def apply(self, choose_imported_action: Optional[Callable] = None) -> bool:
        """Write the edited character table back to the font.

        For imported assets, choose_imported_action(font) decides between
        writing into a new editable copy (the session switches to the copy),
        cancelling, or writing in place. Without a chooser the apply is
        cancelled.

        Returns:
            True if the table was written
        """
        if self._font is None:
            return False

        target = self._font
        if self.persistence is not None and self.persistence.is_immutable_imported_asset(target):
            choice = choose_imported_action(target) if choose_imported_action else ApplyChoice.CANCEL
            if choice == ApplyChoice.CANCEL:
                self._logger.debug("Apply cancelled for imported font")
                return False
            if choice == ApplyChoice.CREATE_COPY:
                target = self.persistence.create_editable_copy(target)

        self.ensure_loaded()
        target.set_character_table(self.store.commit(target.get_ascent()))
        target.mark_dirty()
        self._logger.info(f"Applied {len(self.store)} characters to {target.name}")

        self._font = target
        self.history.clear()
        self.revert()
        return True

    def revert(self):
        """Discard unapplied edits; the next access reloads from the font."""
        self.store.revert()
        self.selection.selected_rect = None

    # ========================================
    # Selection helpers
    # ========================================

    def selection_index(self) -> int:
        """Store index of the selected character, or -1."""
        self.ensure_loaded()
        return self.selection.resolve_index(self.store)

    def selected_record(self):
        """Record of the selected character, or None."""
        index = self.selection_index()
        return None if index == NOT_FOUND else self.store.record_at(index)

    # ========================================
    # Add / Delete / Edit
    # ========================================

    def add_selected(self) -> int:
        """Add a default record for the selected character.

        Returns:
            Index of the new record

        Raises:
            DuplicateGlyph: If the selected character already exists
            InvalidCodePoint: If nothing is selected
        """
        self.ensure_loaded()
        code_point = self.selection.selected_code_point
        snapshot = self.store.get_snapshot()
        index = self.store.add(code_point)
        self.history.save_state(snapshot, f"Add character {code_point}")
        return index

    def delete_selected(self):
        """Delete the selected character's record and clear the selection.

        Raises:
            GlyphNotFound: If the selected character has no record
        """
        self.ensure_loaded()
        code_point = self.selection.selected_code_point
        snapshot = self.store.get_snapshot()
        self.store.delete(code_point)
        self.history.save_state(snapshot, f"Delete character {code_point}")
        self.selection.clear()

    def update_selected(self, **fields) -> bool:
        """Edit fields (uv, vert, rotated, advance) of the selected record.

        Returns:
            True if anything changed

        Raises:
            GlyphNotFound: If the selected character has no record
        """
        self.ensure_loaded()
        code_point = self.selection.selected_code_point
        snapshot = self.store.get_snapshot()
        changed = self.store.update(code_point, **fields)
        if changed:
            self.history.save_state(snapshot, f"Edit character {code_point}")
        return changed

    # ========================================
    # Undo / Redo
    # ========================================

    def begin_edit(self, description: str):
        """Record the current store state before an interactive edit (e.g. a drag)."""
        self.history.save_state(self.store.get_snapshot(), description)

    def undo(self) -> bool:
        state = self.history.undo(self.store.get_snapshot())
        if state is None:
            return False
        self.store.set_snapshot(state)
        self.selection.selected_rect = None
        return True

    def redo(self) -> bool:
        state = self.history.redo(self.store.get_snapshot())
        if state is None:
            return False
        self.store.set_snapshot(state)
        self.selection.selected_rect = None
        return True
