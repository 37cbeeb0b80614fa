"""Vert editor - edits the selected glyph's placement around a baseline origin."""

import logging

from models.geometry import Rect
from components.grab_handles import DragHandleController
from utils.coordinate_transforms import vert_to_screen, screen_to_vert, rotate_for_display
from constants import AXIS_WIDTH, AXIS_X_COLOR, AXIS_Y_COLOR


class VertEditorView:
	"""Draws glyphs at baseline origins and edits the selected glyph's vert."""

	def __init__(self, session, drag=None):
		self._logger = logging.getLogger('VertEditorView')
		self.session = session
		self.drag = drag if drag is not None else DragHandleController(
			on_drag_started=lambda: session.begin_edit("Move glyph placement"))

	def draw_glyph(self, surface, record, origin) -> Rect:
		"""Draw a record's atlas region at its placement.

		Rotated glyphs are drawn into rotate_for_display(rect) and rotated
		-90 degrees about that rect's position, which lands them on rect.

		Returns:
			Screen rect of the glyph (unrotated, as stored)
		"""
		vert = vert_to_screen(record.vert, origin)
		texture = self.session.get_texture()
		if record.rotated:
			display = rotate_for_display(vert)
			surface.draw_texture_with_tex_coords(
				display, texture, record.uv, rotation=-90.0, pivot=display.position)
		else:
			surface.draw_texture_with_tex_coords(vert, texture, record.uv)
		return vert

	def frame(self, surface, event, origin) -> bool:
		"""Draw the selected glyph with axes and handles at origin.

		The ascent axis runs up from the origin, the advance axis to the
		right. Nothing is drawn when the selection has no record.

		Returns:
			True if the record changed
		"""
		session = self.session
		record = session.selected_record()
		if record is None:
			return False

		surface.fill_rect(Rect(origin.x, origin.y, AXIS_WIDTH, -session.get_ascent()), AXIS_Y_COLOR)
		surface.fill_rect(Rect(origin.x, origin.y, record.advance, AXIS_WIDTH), AXIS_X_COLOR)

		vert = self.draw_glyph(surface, record, origin)
		session.selection.selected_rect = vert.copy()

		new_rect = self.drag.process(surface, vert, event)
		if self.drag.is_dragging() and new_rect != vert:
			return session.store.update(record.code_point, vert=screen_to_vert(new_rect, origin))
		return False

	def release(self):
		self.drag.end_drag()
