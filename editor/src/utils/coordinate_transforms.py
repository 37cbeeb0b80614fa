"""Coordinate transformation utilities for the glyph editor.

Provides conversion between the coordinate systems a glyph lives in:
- UV space (unit square, origin bottom-left, Y-up)
- Vert space (font units relative to a baseline origin, Y-up)
- Screen/UI pixels (Y-down)
- Atlas pixels (inspector display unit)

Each forward transform has an exact algebraic inverse. Rects are never
normalized by these conversions: an inverted rect stays inverted.
"""

from models.geometry import Rect


def uv_to_screen(uv, target):
	"""Convert a UV rect to screen space inside the texture preview rect.

	UV is Y-up and the screen is Y-down, so the screen rect comes out with a
	negative height for a glyph with positive UV height.

	Args:
		uv: Rect in unit-square coordinates
		target: Rect the full texture is drawn at, in screen pixels

	Returns:
		Rect in screen pixels
	"""
	return Rect(
		target.x + uv.x * target.width,
		target.y + (1.0 - uv.y) * target.height,
		uv.width * target.width,
		-uv.height * target.height,
	)


def screen_to_uv(screen, target):
	"""Convert a screen rect back to UV space (inverse of uv_to_screen).

	Args:
		screen: Rect in screen pixels
		target: Rect the full texture is drawn at (non-zero size)

	Returns:
		Rect in unit-square coordinates
	"""
	return Rect(
		(screen.x - target.x) / target.width,
		1.0 - ((screen.y - target.y) / target.height),
		screen.width / target.width,
		screen.height / -target.height,
	)


def vert_to_screen(vert, origin):
	"""Convert a vert rect to screen space around a baseline origin.

	Args:
		vert: Rect in font units relative to the origin (Y-up)
		origin: Vec2 screen position of the baseline origin

	Returns:
		Rect in screen pixels
	"""
	return Rect(vert.x + origin.x, origin.y - vert.y, vert.width, -vert.height)


def screen_to_vert(screen, origin):
	"""Convert a screen rect back to vert space (inverse of vert_to_screen)."""
	return Rect(screen.x - origin.x, -(screen.y - origin.y), screen.width, -screen.height)


def normalize_rect(rect):
	"""Return the same region with non-negative width and height.

	Only used to lay out handle hit areas; stored rects are never normalized.
	"""
	return Rect(
		rect.x_min if rect.width >= 0.0 else rect.x_max,
		rect.y_min if rect.height >= 0.0 else rect.y_max,
		abs(rect.width),
		abs(rect.height),
	)


def rotate_for_display(rect):
	"""Rect to draw a rotated glyph into before rotating it by -90 degrees.

	The glyph texture is drawn into the returned rect, rotated -90 degrees
	around the returned rect's (x, y) corner, which lands it on ``rect``.

	Args:
		rect: Screen rect of the glyph (from vert_to_screen)
	"""
	return Rect(rect.x + rect.width, rect.y + rect.height, rect.height, -rect.width)


def center_rect(bounds, width, height):
	"""Rect of the given size centered inside bounds."""
	return Rect(
		(bounds.x_min + bounds.x_max - width) / 2.0,
		(bounds.y_min + bounds.y_max - height) / 2.0,
		width,
		height,
	)


def fit_texture_rect(bounds, tex_width, tex_height):
	"""Screen rect the atlas is drawn at: uniformly scaled to fit, centered.

	Args:
		bounds: Available area in screen pixels
		tex_width, tex_height: Atlas size in pixels

	Returns:
		Rect in screen pixels
	"""
	scale = min(bounds.width, bounds.height) / max(tex_width, tex_height)
	return center_rect(bounds, tex_width * scale, tex_height * scale)


def uv_to_pixels(uv, tex_width, tex_height):
	"""Convert a UV rect to atlas pixels (Y-up, like UV)."""
	return Rect(uv.x * tex_width, uv.y * tex_height, uv.width * tex_width, uv.height * tex_height)


def pixels_to_uv(pixels, tex_width, tex_height):
	"""Convert an atlas pixel rect back to UV (inverse of uv_to_pixels)."""
	return Rect(pixels.x / tex_width, pixels.y / tex_height,
	            pixels.width / tex_width, pixels.height / tex_height)
