"""Overlay drawing shared by the glyph views."""

import math

from models.geometry import Rect
from constants import (
	SELECTION_COLOR, AXIS_X_COLOR, AXIS_Y_COLOR, AXIS_WIDTH, AXIS_LENGTH,
	NO_FONT_MESSAGE, NO_TEXTURE_MESSAGE
)


def _signed_min(value, limit):
	return math.copysign(min(abs(value), limit), value)


def draw_selection(surface, rect, rotated):
	"""Highlight a glyph rect and mark its local axes at the rect position.

	The axis marks start at (rect.x, rect.y) and follow the rect's signs, so a
	mirrored glyph shows mirrored axes. For rotated glyphs the marks swap, the
	atlas X axis being the glyph's Y axis.
	"""
	surface.fill_rect(rect, SELECTION_COLOR)

	width = _signed_min(rect.width, AXIS_LENGTH)
	height = _signed_min(rect.height, AXIS_LENGTH)
	if rotated:
		y_axis = Rect(rect.x, rect.y, width, AXIS_WIDTH)
		x_axis = Rect(rect.x, rect.y, AXIS_WIDTH, height)
	else:
		y_axis = Rect(rect.x, rect.y, AXIS_WIDTH, height)
		x_axis = Rect(rect.x, rect.y, width, AXIS_WIDTH)
	surface.fill_rect(y_axis, AXIS_Y_COLOR)
	surface.fill_rect(x_axis, AXIS_X_COLOR)


def draw_empty_state(surface, bounds, session):
	"""Draw the no-font / no-texture message.

	Returns:
		True if the session cannot be edited and the view should stop here
	"""
	if not session.can_edit():
		surface.draw_label(bounds, NO_FONT_MESSAGE)
		return True
	if not session.has_texture():
		surface.draw_label(bounds, NO_TEXTURE_MESSAGE)
		return True
	return False
