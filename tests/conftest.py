"""
Shared fixtures for FontEdit tests.

Provides sample character tables, fonts, sessions and a recording draw
surface for the editor views.
"""
import sys
import os
import pytest

# Ensure editor/src is on the path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'editor', 'src'))

# Widgets are created without a display
os.environ.setdefault('QT_QPA_PLATFORM', 'offscreen')

from models.geometry import Rect, Vec2
from models.glyph import NativeGlyph
from components.canvas_widgets.draw_surface import DrawSurface


# ── Recording draw surface ──────────────────────────────────────────────

class RecordingSurface(DrawSurface):
    """Draw surface that records every call for assertions."""

    def __init__(self):
        self.fills = []            # [(Rect, color)]
        self.textures = []         # [Rect]
        self.glyph_draws = []      # [(rect, tex_coords, rotation, pivot)]
        self.cursor_rects = []     # [(Rect, CursorShape)]
        self.labels = []           # [(Rect, text)]

    def fill_rect(self, rect, color):
        self.fills.append((rect.copy(), color))

    def draw_texture(self, rect, texture):
        self.textures.append(rect.copy())

    def draw_texture_with_tex_coords(self, rect, texture, tex_coords, rotation=0.0, pivot=None):
        self.glyph_draws.append((rect.copy(), tex_coords.copy(), rotation, pivot))

    def add_cursor_rect(self, rect, cursor):
        self.cursor_rects.append((rect.copy(), cursor))

    def draw_label(self, rect, text):
        self.labels.append((rect.copy(), text))

    def fills_with(self, color):
        return [rect for rect, c in self.fills if c == color]


@pytest.fixture
def surface():
    """Fresh recording surface"""
    return RecordingSurface()


# ── Sample fonts ────────────────────────────────────────────────────────

def native(code_point, uv, vert, advance, rotated=False):
    """NativeGlyph from a UV rect tuple and a vert rect tuple"""
    return NativeGlyph.from_uv_rect(code_point, Rect(*uv), rotated, Rect(*vert), advance)


@pytest.fixture
def sample_table():
    """Character table with A, B and a rotated C (ascent 0 conventions)"""
    return [
        native(65, (0.0, 0.0, 0.5, 0.5), (0.0, -20.0, 40.0, 20.0), 40.0),
        native(66, (0.5, 0.0, 0.5, 0.5), (0.0, -20.0, 30.0, 20.0), 30.0),
        native(67, (0.0, 0.5, 0.25, 0.5), (0.0, -10.0, 10.0, 20.0), 12.0, rotated=True),
    ]


@pytest.fixture
def atlas_texture():
    """Size-only 256x256 atlas (no QImage needed by the views)"""
    from services.texture_loader import AtlasTexture
    return AtlasTexture(256, 256)


@pytest.fixture
def sample_font(sample_table, atlas_texture):
    """In-memory font with the sample table, ascent 0 and kerning 1"""
    from services.font_source import InMemoryFontAsset
    return InMemoryFontAsset("Sample", sample_table, ascent=0.0, kerning=1.0,
                             texture=atlas_texture)


@pytest.fixture
def session(sample_font):
    """Edit session on the sample font"""
    from models.edit_session import FontEditSession
    session = FontEditSession()
    session.set_font(sample_font)
    return session


@pytest.fixture
def empty_session():
    """Edit session without a font"""
    from models.edit_session import FontEditSession
    return FontEditSession()


@pytest.fixture
def json_font_file(tmp_path, sample_table):
    """Font settings file on disk with the sample table"""
    from services.font_source import JsonFontAsset
    path = tmp_path / "sample.fontsettings.json"
    font = JsonFontAsset(path, name="sample", characters=sample_table, ascent=10.0, kerning=1.0)
    font.save()
    return path


@pytest.fixture
def imported_font(tmp_path, sample_table):
    """Font generated from a .ttf import"""
    from services.font_source import JsonFontAsset
    path = tmp_path / "Pixel.fontsettings.json"
    font = JsonFontAsset(path, name="Pixel", characters=sample_table, ascent=10.0,
                         kerning=1.0, source_font="Pixel.ttf")
    font.save()
    return font
