"""Glyph record value types.

GlyphRecord is the editor's own representation of one character. NativeGlyph
mirrors a row of the font asset's character table, which stores the UV rect as
two corners and measures vert relative to a different baseline (see
GlyphRecordStore.load / commit for the ascent offset).
"""
from dataclasses import dataclass, field

from models.geometry import Rect, Vec2
from constants import (
    DEFAULT_GLYPH_UV, DEFAULT_GLYPH_VERT,
    DEFAULT_GLYPH_ADVANCE, DEFAULT_GLYPH_ROTATED
)


@dataclass
class GlyphRecord:
    """One rendered character.

    Attributes:
        code_point: Character identity, unique within a store (> 0)
        uv: Atlas rect in unit-square coordinates (origin bottom-left, Y-up).
            May be inverted (mirrored glyph); never normalized in storage.
        vert: Placement rect relative to the baseline origin (Y-up)
        rotated: True if the atlas region is stored rotated by 90 degrees
        advance: Horizontal cursor advance after this glyph, in vert units
    """
    code_point: int
    uv: Rect = field(default_factory=Rect)
    vert: Rect = field(default_factory=Rect)
    rotated: bool = False
    advance: float = 0.0

    @classmethod
    def with_defaults(cls, code_point: int) -> 'GlyphRecord':
        """Create the record given to a newly added character."""
        return cls(
            code_point=code_point,
            uv=Rect.from_tuple(DEFAULT_GLYPH_UV),
            vert=Rect.from_tuple(DEFAULT_GLYPH_VERT),
            rotated=DEFAULT_GLYPH_ROTATED,
            advance=DEFAULT_GLYPH_ADVANCE,
        )

    def copy(self) -> 'GlyphRecord':
        return GlyphRecord(self.code_point, self.uv.copy(), self.vert.copy(),
                           self.rotated, self.advance)

    @property
    def character(self) -> str:
        """The character this record renders."""
        return chr(self.code_point)


@dataclass
class NativeGlyph:
    """A row of the font asset's native character table."""
    code_point: int
    uv_min: Vec2
    uv_max: Vec2
    rotated: bool
    vert: Rect
    advance: float

    @property
    def uv(self) -> Rect:
        return Rect(self.uv_min.x, self.uv_min.y,
                    self.uv_max.x - self.uv_min.x,
                    self.uv_max.y - self.uv_min.y)

    @classmethod
    def from_uv_rect(cls, code_point, uv, rotated, vert, advance) -> 'NativeGlyph':
        return cls(code_point, Vec2(uv.x_min, uv.y_min), Vec2(uv.x_max, uv.y_max),
                   rotated, vert, advance)

    def to_dict(self) -> dict:
        """Serialize for the JSON font settings file."""
        return {
            'index': self.code_point,
            'uv_min': [self.uv_min.x, self.uv_min.y],
            'uv_max': [self.uv_max.x, self.uv_max.y],
            'flipped': self.rotated,
            'vert': list(self.vert.as_tuple()),
            'advance': self.advance,
        }

    @classmethod
    def from_dict(cls, data: dict) -> 'NativeGlyph':
        return cls(
            code_point=int(data['index']),
            uv_min=Vec2(*map(float, data.get('uv_min', (0.0, 0.0)))),
            uv_max=Vec2(*map(float, data.get('uv_max', (0.0, 0.0)))),
            rotated=bool(data.get('flipped', False)),
            vert=Rect.from_tuple(data.get('vert', (0.0, 0.0, 0.0, 0.0))),
            advance=float(data.get('advance', 0.0)),
        )
