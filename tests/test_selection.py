"""
Tests for SelectionController - character entry and click resolution.
"""
import pytest

from models.geometry import Rect, Vec2
from models.glyph_store import GlyphRecordStore
from models.selection import SelectionController
from constants import NO_SELECTION, NOT_FOUND


@pytest.fixture
def selection():
    return SelectionController()


# ══════════════════════════════════════════════════════════════════════════
# Character entry
# ══════════════════════════════════════════════════════════════════════════

class TestSetSelectedCharacter:

    def test_default_is_no_selection(self, selection):
        assert selection.selected_code_point == NO_SELECTION
        assert not selection.has_selection()

    def test_numeric_entry(self, selection):
        selection.set_selected_character(65)
        assert selection.selected_code_point == 65
        assert selection.has_selection()

    def test_text_entry_uses_first_character(self, selection):
        selection.set_selected_character("Ab")
        assert selection.selected_code_point == 65

    def test_empty_text_is_zero(self, selection):
        selection.set_selected_character("A")
        selection.set_selected_character("")
        assert selection.selected_code_point == 0
        assert not selection.has_selection()

    def test_changing_selection_forgets_drawn_rect(self, selection):
        selection.set_selected_character(65)
        selection.selected_rect = Rect(0, 0, 10, 10)
        selection.set_selected_character(66)
        assert selection.selected_rect is None

    def test_clear(self, selection):
        selection.set_selected_character(65)
        selection.clear()
        assert selection.selected_code_point == NO_SELECTION


# ══════════════════════════════════════════════════════════════════════════
# Index resolution
# ══════════════════════════════════════════════════════════════════════════

class TestResolveIndex:

    def test_resolves_through_store(self, selection, sample_table):
        store = GlyphRecordStore()
        store.load(sample_table, 0.0)
        selection.set_selected_character(66)
        assert selection.resolve_index(store) == 1

    def test_unassigned_character(self, selection, sample_table):
        store = GlyphRecordStore()
        store.load(sample_table, 0.0)
        selection.set_selected_character(97)
        assert selection.resolve_index(store) == NOT_FOUND
        assert len(store) == 3


# ══════════════════════════════════════════════════════════════════════════
# Click resolution
# ══════════════════════════════════════════════════════════════════════════

class TestResolveClick:

    RECTS = [
        (65, Rect(0.0, 0.0, 50.0, 50.0)),
        (66, Rect(40.0, 0.0, 50.0, 50.0)),    # overlaps A on x 40..50
        (67, Rect(200.0, 60.0, 20.0, -40.0)),  # inverted
    ]

    def test_selects_glyph_under_pointer(self, selection):
        assert selection.resolve_click(Vec2(10.0, 10.0), self.RECTS)
        assert selection.selected_code_point == 65

    def test_overlap_resolves_to_later_record(self, selection):
        selection.resolve_click(Vec2(45.0, 10.0), self.RECTS)
        assert selection.selected_code_point == 66

    def test_inverted_rects_are_hit(self, selection):
        selection.resolve_click(Vec2(210.0, 30.0), self.RECTS)
        assert selection.selected_code_point == 67

    def test_miss_keeps_selection(self, selection):
        selection.set_selected_character(65)
        assert not selection.resolve_click(Vec2(500.0, 500.0), self.RECTS)
        assert selection.selected_code_point == 65

    def test_handle_precedence(self, selection):
        selection.set_selected_character(65)
        selection.selected_rect = Rect(0.0, 0.0, 50.0, 50.0)
        # Over both A (selected) and B: the click belongs to A's handles
        assert not selection.resolve_click(Vec2(45.0, 10.0), self.RECTS)
        assert selection.selected_code_point == 65
