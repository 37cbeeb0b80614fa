"""
FontEdit - Glyph Record Store

THE MODEL for one edit session. Owns the in-memory copy of a font's character
table while it is being edited.

This class handles:
- Loading from the font asset's native character table (ascent offset applied)
- Lookup by code point (code points are unique)
- Add / delete / field edits, each marking the store dirty
- Committing back to the native representation (ascent offset removed)
- Revert (drop everything; the next access reloads)
- Snapshot API (for undo/redo support)

The store is INDEPENDENT of UI:
- No Qt imports
- No selection state (that's SelectionController)
- No undo stack (FontEditSession manages that with snapshots)

Usage:
    store = GlyphRecordStore()
    store.load(font.get_character_table(), font.get_ascent())

    index = store.add(ord('a'))
    store.update(ord('a'), advance=42.0)

    font.set_character_table(store.commit(font.get_ascent()))
"""

import logging
from typing import Iterable, List, Optional, Tuple

from models.errors import DuplicateGlyph, GlyphNotFound, InvalidCodePoint
from models.geometry import Rect
from models.glyph import GlyphRecord, NativeGlyph
from constants import NOT_FOUND


class GlyphRecordStore:
    """Ordered collection of glyph records keyed by code point.

    Records keep the order they were loaded or added in; deleting compacts the
    list without reordering the rest. The store starts out unloaded; ``load``
    fills it and ``revert`` returns it to the unloaded state.
    """

    def __init__(self):
        self._logger = logging.getLogger('GlyphRecordStore')
        self._records = None  # None = not loaded
        self._dirty = False

    # ========================================
    # Load / Commit / Revert
    # ========================================

    def load(self, source_glyphs: Iterable[NativeGlyph], ascent: float):
        """Replace all records with the font's native character table.

        The native table measures vert relative to a different baseline, so
        each vert y is shifted by the font ascent.

        Args:
            source_glyphs: Native character table rows
            ascent: Font ascent, re-read from the font on every call

        Raises:
            InvalidCodePoint: If a row has a code point <= 0
            DuplicateGlyph: If two rows share a code point

        A rejected table leaves the store unchanged.
        """
        records = []
        seen = set()
        for glyph in source_glyphs:
            if glyph.code_point <= 0:
                raise InvalidCodePoint(glyph.code_point)
            if glyph.code_point in seen:
                raise DuplicateGlyph(glyph.code_point)
            seen.add(glyph.code_point)
            vert = glyph.vert
            records.append(GlyphRecord(
                code_point=glyph.code_point,
                uv=glyph.uv,
                vert=Rect(vert.x, vert.y + ascent, vert.width, vert.height),
                rotated=glyph.rotated,
                advance=glyph.advance,
            ))
        self._records = records
        self._dirty = False
        self._logger.debug(f"Loaded {len(records)} glyphs (ascent {ascent})")

    def commit(self, ascent: float) -> List[NativeGlyph]:
        """Produce the native character table for the current records.

        Records are left in place; the caller decides whether to reload.

        Args:
            ascent: Font ascent, subtracted back out of each vert y

        Returns:
            List of NativeGlyph rows in store order
        """
        table = []
        for record in self._records or ():
            vert = record.vert
            table.append(NativeGlyph.from_uv_rect(
                record.code_point,
                record.uv,
                record.rotated,
                Rect(vert.x, vert.y - ascent, vert.width, vert.height),
                record.advance,
            ))
        self._logger.debug(f"Committed {len(table)} glyphs (ascent {ascent})")
        return table

    def revert(self):
        """Discard all in-memory records and the dirty flag."""
        self._records = None
        self._dirty = False
        self._logger.debug("Reverted glyph store")

    def is_loaded(self) -> bool:
        return self._records is not None

    def is_dirty(self) -> bool:
        return self._dirty

    def mark_dirty(self):
        self._dirty = True

    # ========================================
    # Query API
    # ========================================

    def index_of(self, code_point: int) -> int:
        """Find the index of a code point.

        Returns:
            Index in store order, or NOT_FOUND (-1)
        """
        if self._records is not None:
            for i, record in enumerate(self._records):
                if record.code_point == code_point:
                    return i
        return NOT_FOUND

    def get(self, code_point: int) -> GlyphRecord:
        """Get the record for a code point.

        Raises:
            GlyphNotFound: If the code point has no record
        """
        index = self.index_of(code_point)
        if index == NOT_FOUND:
            raise GlyphNotFound(code_point)
        return self._records[index]

    def find(self, code_point: int) -> Optional[GlyphRecord]:
        """Get the record for a code point, or None."""
        index = self.index_of(code_point)
        return None if index == NOT_FOUND else self._records[index]

    def record_at(self, index: int) -> GlyphRecord:
        return self._loaded_records()[index]

    @property
    def records(self) -> Tuple[GlyphRecord, ...]:
        """Records in store order (empty when not loaded)."""
        return tuple(self._records or ())

    def code_points(self) -> List[int]:
        return [record.code_point for record in self._records or ()]

    def __len__(self):
        return len(self._records or ())

    def __iter__(self):
        return iter(self.records)

    def __contains__(self, code_point):
        return self.index_of(code_point) != NOT_FOUND

    # ========================================
    # Mutations
    # ========================================

    def add(self, code_point: int) -> int:
        """Append a record with default metrics for a new character.

        Args:
            code_point: Character to add (> 0)

        Returns:
            Index of the new record

        Raises:
            InvalidCodePoint: If code_point <= 0
            DuplicateGlyph: If the code point already has a record
        """
        if code_point <= 0:
            raise InvalidCodePoint(code_point)
        if self.index_of(code_point) != NOT_FOUND:
            raise DuplicateGlyph(code_point)

        records = self._loaded_records()
        records.append(GlyphRecord.with_defaults(code_point))
        self._dirty = True
        self._logger.debug(f"Added glyph {code_point}")
        return len(records) - 1

    def delete(self, code_point: int) -> GlyphRecord:
        """Remove the record for a code point, keeping the order of the rest.

        Returns:
            The removed record

        Raises:
            GlyphNotFound: If the code point has no record
        """
        index = self.index_of(code_point)
        if index == NOT_FOUND:
            raise GlyphNotFound(code_point)

        removed = self._records.pop(index)
        self._dirty = True
        self._logger.debug(f"Deleted glyph {code_point} (was index {index})")
        return removed

    def update(self, code_point: int, uv: Rect = None, vert: Rect = None,
               rotated: bool = None, advance: float = None) -> bool:
        """Edit fields of an existing record.

        Only the fields passed are changed. The store is marked dirty if any
        value actually changed.

        Returns:
            True if the record changed

        Raises:
            GlyphNotFound: If the code point has no record
        """
        record = self.get(code_point)
        changed = False

        if uv is not None and uv != record.uv:
            record.uv = uv.copy()
            changed = True
        if vert is not None and vert != record.vert:
            record.vert = vert.copy()
            changed = True
        if rotated is not None and bool(rotated) != record.rotated:
            record.rotated = bool(rotated)
            changed = True
        if advance is not None and float(advance) != record.advance:
            record.advance = float(advance)
            changed = True

        if changed:
            self._dirty = True
        return changed

    # ========================================
    # Snapshot API
    # ========================================

    def get_snapshot(self) -> dict:
        """Capture the store contents for undo."""
        return {
            'records': None if self._records is None else [r.copy() for r in self._records],
            'dirty': self._dirty,
        }

    def set_snapshot(self, snapshot: dict):
        """Restore contents captured by get_snapshot."""
        records = snapshot['records']
        self._records = None if records is None else [r.copy() for r in records]
        self._dirty = snapshot['dirty']

    # ========================================
    # Internal
    # ========================================

    def _loaded_records(self) -> list:
        # An unloaded store behaves as an empty font
        if self._records is None:
            self._records = []
        return self._records
