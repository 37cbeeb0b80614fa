"""Asset persistence - imported-asset detection and editable copies.

A font generated by an importer from a .ttf/.otf file is rebuilt whenever the
source font is re-imported, so edits applied to it do not last. Before applying
to such an asset the session offers to write the edits into an editable copy.
"""

import logging
from abc import ABC, abstractmethod
from pathlib import Path

from services.font_source import JsonFontAsset
from constants import IMPORTED_FONT_EXTENSIONS, EDITABLE_FONT_SUFFIX, EDITABLE_COPY_TAG


logger = logging.getLogger(__name__)


class AssetPersistence(ABC):
    """Abstract asset persistence collaborator."""

    @abstractmethod
    def is_immutable_imported_asset(self, font) -> bool:
        pass

    @abstractmethod
    def create_editable_copy(self, font):
        """Create an editable copy of an imported font and return it."""
        pass


def is_imported_font_path(path) -> bool:
    """True if path is a font file handled by an importer (.ttf/.otf)."""
    if not path:
        return False
    return Path(path).suffix.lower() in IMPORTED_FONT_EXTENSIONS


def editable_copy_path(font_path) -> Path:
    """First free ``<stem>_copy.fontsettings.json`` path next to font_path.

    Falls back to ``_copy1``, ``_copy2``... when the name is taken.
    """
    font_path = Path(font_path)
    name = font_path.name
    stem = name[:-len(EDITABLE_FONT_SUFFIX)] if name.endswith(EDITABLE_FONT_SUFFIX) else font_path.stem
    base = font_path.parent / f"{stem}{EDITABLE_COPY_TAG}"

    path = Path(f"{base}{EDITABLE_FONT_SUFFIX}")
    i = 1
    while path.exists():
        path = Path(f"{base}{i}{EDITABLE_FONT_SUFFIX}")
        i += 1
    return path


class FileAssetPersistence(AssetPersistence):
    """Persistence for JsonFontAsset files."""

    def is_immutable_imported_asset(self, font) -> bool:
        return is_imported_font_path(getattr(font, 'source_font', None))

    def create_editable_copy(self, font):
        """Write an editable copy of font next to it.

        The copy keeps the original character table, metrics and atlas, but
        no longer points at the imported source font.

        Returns:
            The new JsonFontAsset (already saved)
        """
        path = editable_copy_path(font.path)
        copy = JsonFontAsset(
            path,
            name=f"{font.name}{EDITABLE_COPY_TAG}",
            characters=font.get_character_table(),
            ascent=font.get_ascent(),
            kerning=font.get_kerning_or_tracking(),
            texture_path=font.texture_path,
            source_font=None,
        )
        copy.save()
        logger.info(f"Created editable copy of {font.name} at {path}")
        return copy
