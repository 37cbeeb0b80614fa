"""Texture loading utilities for the atlas preview.

Provides methods to load a font atlas image from file into a QImage the
editor views can draw. Views only need the atlas size; the image itself is
passed through to the draw surface untouched.
"""

import logging
from dataclasses import dataclass
from pathlib import Path

import numpy as np
from PIL import Image
from PyQt5.QtGui import QImage


logger = logging.getLogger(__name__)


@dataclass
class AtlasTexture:
    """A font atlas as the editor sees it.

    Attributes:
        width, height: Atlas size in pixels
        image: QImage to draw (None for size-only textures, e.g. in tests)
        path: File the atlas was loaded from, if any
    """
    width: int
    height: int
    image: object = None
    path: str = None


class TextureLoader:
    """Utility for loading atlas textures from files."""

    @staticmethod
    def load_atlas(image_path, resize=None):
        """Load an atlas texture from file.

        Args:
            image_path: Path to image file
            resize: Optional (width, height) to resize texture

        Returns:
            AtlasTexture, or None if loading failed
        """
        try:
            img = Image.open(image_path).convert('RGBA')

            if resize:
                img = img.resize(resize, Image.Resampling.LANCZOS)

            return TextureLoader.texture_from_array(np.array(img), str(image_path))

        except (OSError, ValueError) as e:
            logger.warning(f"Error loading texture from {image_path}: {e}")
            return None

    @staticmethod
    def texture_from_array(img_data, path=None):
        """Build an AtlasTexture from an (height, width, 4) RGBA uint8 array."""
        img_data = np.ascontiguousarray(img_data, dtype=np.uint8)
        height, width = img_data.shape[:2]
        # copy() detaches the QImage from the temporary byte buffer
        image = QImage(img_data.tobytes(), width, height, width * 4, QImage.Format_RGBA8888).copy()
        return AtlasTexture(width, height, image, path)

    @staticmethod
    def create_solid_texture(color_rgba, width=64, height=64):
        """Create a solid color atlas.

        Args:
            color_rgba: Tuple (r, g, b, a) with values 0-255
            width, height: Texture size in pixels (default 64)

        Returns:
            AtlasTexture
        """
        texture_data = np.full((height, width, 4), color_rgba, dtype=np.uint8)
        return TextureLoader.texture_from_array(texture_data)

    @staticmethod
    def resolve_texture_path(font_path, texture_path):
        """Resolve an atlas path stored relative to its font settings file."""
        if texture_path is None:
            return None
        path = Path(texture_path)
        if not path.is_absolute():
            path = Path(font_path).parent / path
        return path
