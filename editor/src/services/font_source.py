"""Font asset sources - the editor's view of a bitmap font asset.

FontAssetSource is the interface the editing session talks to. The editor
never touches the asset's storage directly: it reads the native character
table and font-wide metrics, and writes a whole new table back on Apply.

Implementations:
- InMemoryFontAsset: plain in-memory asset (tests, generated fonts)
- JsonFontAsset: a ``*.fontsettings.json`` file next to its atlas image
"""

import json
import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import List, Optional

from models.glyph import NativeGlyph
from services.texture_loader import TextureLoader, AtlasTexture


logger = logging.getLogger(__name__)


class FontAssetSource(ABC):
    """Abstract bitmap font asset."""

    name = "Font"

    @abstractmethod
    def get_character_table(self) -> List[NativeGlyph]:
        """Native character table rows, in asset order."""
        pass

    @abstractmethod
    def get_ascent(self) -> float:
        """Distance from the baseline to the top of the font."""
        pass

    @abstractmethod
    def get_kerning_or_tracking(self) -> float:
        """Font-wide scalar applied to advances when laying out text."""
        pass

    @abstractmethod
    def set_character_table(self, table: List[NativeGlyph]):
        """Replace the native character table."""
        pass

    @abstractmethod
    def mark_dirty(self):
        """Flag the asset as modified so the host persists it."""
        pass

    def get_texture(self) -> Optional[AtlasTexture]:
        """The atlas texture, or None if the font has none."""
        return None


class InMemoryFontAsset(FontAssetSource):
    """Font asset held entirely in memory."""

    def __init__(self, name="Font", characters=None, ascent=0.0, kerning=1.0,
                 texture=None, source_font=None):
        """
        Args:
            name: Display name
            characters: Initial NativeGlyph rows
            ascent: Font ascent
            kerning: Kerning/tracking scalar for previews
            texture: AtlasTexture or None
            source_font: Path of the font file this asset was imported from, if any
        """
        self.name = name
        self.characters = list(characters or [])
        self.ascent = float(ascent)
        self.kerning = float(kerning)
        self.texture = texture
        self.source_font = source_font
        self.dirty = False

    def get_character_table(self):
        return list(self.characters)

    def get_ascent(self):
        return self.ascent

    def get_kerning_or_tracking(self):
        return self.kerning

    def set_character_table(self, table):
        self.characters = list(table)

    def mark_dirty(self):
        self.dirty = True

    def get_texture(self):
        return self.texture


class JsonFontAsset(InMemoryFontAsset):
    """Font asset stored as a JSON font settings file.

    File layout::

        {
          "name": "Pixel",
          "ascent": 12.0,
          "kerning": 1.0,
          "texture": "pixel_atlas.png",      # relative to the JSON file
          "source_font": "Pixel.ttf",        # set when generated by an importer
          "characters": [ {"index": 65, "uv_min": [..], "uv_max": [..],
                           "flipped": false, "vert": [x, y, w, h], "advance": 8.0}, ... ]
        }
    """

    def __init__(self, path, name="Font", characters=None, ascent=0.0, kerning=1.0,
                 texture_path=None, source_font=None):
        super().__init__(name, characters, ascent, kerning, None, source_font)
        self.path = Path(path)
        self.texture_path = texture_path
        self._texture_loaded = False

    @classmethod
    def load(cls, path) -> 'JsonFontAsset':
        """Read a font settings file.

        Raises:
            OSError: If the file cannot be read
            ValueError: If the file is not valid font settings JSON
        """
        path = Path(path)
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)
        if not isinstance(data, dict):
            raise ValueError(f"{path} is not a font settings file")

        try:
            characters = [NativeGlyph.from_dict(c) for c in data.get('characters', [])]
        except (KeyError, TypeError, ValueError) as e:
            raise ValueError(f"Invalid character table in {path}: {e}") from e

        codes = [c.code_point for c in characters]
        if any(code <= 0 for code in codes) or len(set(codes)) != len(codes):
            raise ValueError(f"Invalid character table in {path}: character codes must be positive and unique")

        font = cls(
            path,
            name=data.get('name', path.name.split('.')[0]),
            characters=characters,
            ascent=float(data.get('ascent', 0.0)),
            kerning=float(data.get('kerning', 1.0)),
            texture_path=data.get('texture'),
            source_font=data.get('source_font'),
        )
        logger.debug(f"Loaded font {font.name} ({len(characters)} characters) from {path}")
        return font

    def to_dict(self) -> dict:
        return {
            'name': self.name,
            'ascent': self.ascent,
            'kerning': self.kerning,
            'texture': self.texture_path,
            'source_font': self.source_font,
            'characters': [c.to_dict() for c in self.characters],
        }

    def save(self, path=None):
        """Write the font settings file and clear the dirty flag."""
        if path is not None:
            self.path = Path(path)
        with open(self.path, 'w', encoding='utf-8') as f:
            json.dump(self.to_dict(), f, indent=2)
        self.dirty = False
        logger.debug(f"Saved font {self.name} to {self.path}")

    def get_texture(self):
        if not self._texture_loaded:
            self._texture_loaded = True
            texture_file = TextureLoader.resolve_texture_path(self.path, self.texture_path)
            if texture_file is not None:
                self.texture = TextureLoader.load_atlas(texture_file)
        return self.texture
