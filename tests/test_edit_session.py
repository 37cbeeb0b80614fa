"""
Tests for FontEditSession - font switching, apply/revert, imported assets, undo.
"""
from dataclasses import replace

import pytest

from models.geometry import Rect
from models.edit_session import FontEditSession, ApplyChoice
from models.errors import DuplicateGlyph, GlyphNotFound, InvalidCodePoint
from services.font_source import InMemoryFontAsset, JsonFontAsset
from services.asset_persistence import FileAssetPersistence
from constants import NO_SELECTION, NOT_FOUND


# ══════════════════════════════════════════════════════════════════════════
# Font lifecycle
# ══════════════════════════════════════════════════════════════════════════

class TestFontLifecycle:

    def test_set_font_loads_store(self, session):
        assert session.can_edit()
        assert session.store.is_loaded()
        assert len(session.store) == 3

    def test_no_font(self, empty_session):
        assert not empty_session.can_edit()
        assert not empty_session.has_texture()
        assert empty_session.get_ascent() == 0.0
        assert empty_session.selected_record() is None

    def test_revert_with_no_font_stays_empty(self, empty_session):
        empty_session.revert()
        empty_session.ensure_loaded()
        assert len(empty_session.store) == 0

    def test_font_with_code_zero_is_rejected(self, sample_table):
        rows = [replace(sample_table[0], code_point=0)] + sample_table
        session = FontEditSession()
        with pytest.raises(InvalidCodePoint):
            session.set_font(InMemoryFontAsset("Broken", rows))
        assert not session.can_edit()
        session.selection.set_selected_character("")
        assert session.selected_record() is None

    def test_invalid_font_keeps_current_font(self, session, sample_font, sample_table):
        session.selection.set_selected_character(97)
        session.add_selected()
        rows = sample_table + [replace(sample_table[0], advance=1.0)]
        with pytest.raises(DuplicateGlyph):
            session.set_font(InMemoryFontAsset("Broken", rows), confirm_apply=lambda font: True)
        assert session.font is sample_font
        assert 97 in session.store
        assert 97 not in [g.code_point for g in sample_font.get_character_table()]

    def test_switching_dirty_font_asks_to_apply(self, session, sample_font):
        session.selection.set_selected_character(97)
        session.add_selected()

        asked = []
        other = InMemoryFontAsset("Other")
        session.set_font(other, confirm_apply=lambda font: asked.append(font) or True)

        assert asked == [sample_font]
        assert 97 in [g.code_point for g in sample_font.get_character_table()]
        assert sample_font.dirty
        assert session.font is other
        assert len(session.store) == 0

    def test_switching_without_apply_discards(self, session, sample_font):
        session.selection.set_selected_character(97)
        session.add_selected()
        session.set_font(InMemoryFontAsset("Other"), confirm_apply=lambda font: False)
        assert 97 not in [g.code_point for g in sample_font.get_character_table()]


# ══════════════════════════════════════════════════════════════════════════
# Add / Delete / Update
# ══════════════════════════════════════════════════════════════════════════

class TestEditing:

    def test_add_selected(self, session):
        session.selection.set_selected_character('a')
        assert session.add_selected() == 3
        assert session.selected_record().uv.as_tuple() == (0.375, 0.375, 0.25, 0.25)
        assert session.has_changes()

    def test_add_existing_raises(self, session):
        session.selection.set_selected_character('A')
        with pytest.raises(DuplicateGlyph):
            session.add_selected()
        assert not session.history.can_undo()

    def test_add_without_selection_raises(self, session):
        with pytest.raises(InvalidCodePoint):
            session.add_selected()

    def test_delete_resets_selection(self, session):
        session.selection.set_selected_character('B')
        session.delete_selected()
        assert session.selection.selected_code_point == NO_SELECTION
        assert session.store.index_of(66) == NOT_FOUND

    def test_delete_missing_raises(self, session):
        session.selection.set_selected_character('z')
        with pytest.raises(GlyphNotFound):
            session.delete_selected()
        assert session.selection.selected_code_point == ord('z')

    def test_update_selected(self, session):
        session.selection.set_selected_character('A')
        assert session.update_selected(advance=44.0, rotated=True)
        record = session.selected_record()
        assert record.advance == 44.0
        assert record.rotated

    def test_update_without_change_records_no_history(self, session):
        session.selection.set_selected_character('A')
        assert not session.update_selected(advance=40.0)
        assert not session.history.can_undo()


# ══════════════════════════════════════════════════════════════════════════
# Apply / Revert
# ══════════════════════════════════════════════════════════════════════════

class TestApplyRevert:

    def test_apply_writes_table_and_clears_dirty(self, session, sample_font):
        session.selection.set_selected_character('A')
        session.update_selected(vert=Rect(1.0, -18.0, 40.0, 20.0))
        assert session.apply()

        row = sample_font.get_character_table()[0]
        assert row.vert.as_tuple() == (1.0, -18.0, 40.0, 20.0)
        assert sample_font.dirty
        assert not session.has_changes()
        assert session.selected_record().vert.x == 1.0

    def test_apply_subtracts_ascent(self, tmp_path, sample_table):
        font = InMemoryFontAsset("Tall", sample_table, ascent=12.0)
        session = FontEditSession()
        session.set_font(font)
        assert session.store.get(65).vert.y == -8.0
        session.apply()
        assert font.get_character_table()[0].vert.y == -20.0

    def test_revert_discards_changes(self, session):
        session.selection.set_selected_character('A')
        session.update_selected(advance=1.0)
        session.revert()
        assert not session.has_changes()
        assert session.selected_record().advance == 40.0

    def test_apply_without_font(self, empty_session):
        assert not empty_session.apply()


# ══════════════════════════════════════════════════════════════════════════
# Imported assets
# ══════════════════════════════════════════════════════════════════════════

class TestImportedAssets:

    @pytest.fixture
    def imported_session(self, imported_font):
        session = FontEditSession(persistence=FileAssetPersistence())
        session.set_font(imported_font)
        session.selection.set_selected_character('A')
        session.update_selected(advance=99.0)
        return session

    def test_without_chooser_apply_is_cancelled(self, imported_session, imported_font):
        assert not imported_session.apply()
        assert imported_session.has_changes()
        assert imported_font.get_character_table()[0].advance == 40.0

    def test_cancel(self, imported_session):
        assert not imported_session.apply(lambda font: ApplyChoice.CANCEL)
        assert imported_session.has_changes()

    def test_create_copy_retargets_session(self, imported_session, imported_font, tmp_path):
        assert imported_session.apply(lambda font: ApplyChoice.CREATE_COPY)

        copy = imported_session.font
        assert copy is not imported_font
        assert copy.path == tmp_path / "Pixel_copy.fontsettings.json"
        assert copy.source_font is None
        assert copy.get_character_table()[0].advance == 99.0
        assert imported_font.get_character_table()[0].advance == 40.0

        reloaded = JsonFontAsset.load(copy.path)
        assert reloaded.name == "Pixel_copy"

    def test_apply_in_place(self, imported_session, imported_font):
        assert imported_session.apply(lambda font: ApplyChoice.APPLY_IN_PLACE)
        assert imported_session.font is imported_font
        assert imported_font.get_character_table()[0].advance == 99.0


# ══════════════════════════════════════════════════════════════════════════
# Undo / Redo
# ══════════════════════════════════════════════════════════════════════════

class TestUndoRedo:

    def test_undo_add(self, session):
        session.selection.set_selected_character('a')
        session.add_selected()
        assert session.undo()
        assert 97 not in session.store
        assert not session.has_changes()

    def test_redo_add(self, session):
        session.selection.set_selected_character('a')
        session.add_selected()
        session.undo()
        assert session.redo()
        assert 97 in session.store

    def test_undo_delete_restores_order(self, session):
        session.selection.set_selected_character('B')
        session.delete_selected()
        session.undo()
        assert session.store.code_points() == [65, 66, 67]

    def test_begin_edit(self, session):
        session.selection.set_selected_character('A')
        session.begin_edit("Drag")
        session.store.update(65, advance=3.0)
        assert session.history.undo_description() == "Drag"
        session.undo()
        assert session.store.get(65).advance == 40.0

    def test_nothing_to_undo(self, session):
        assert not session.undo()
        assert not session.redo()

    def test_apply_clears_history(self, session):
        session.selection.set_selected_character('a')
        session.add_selected()
        session.apply()
        assert not session.history.can_undo()
