"""UV editor - edits glyph atlas rects over the font texture."""

import logging

from components.glyph_views.overlays import draw_selection, draw_empty_state
from components.grab_handles import DragHandleController
from utils.coordinate_transforms import uv_to_screen, screen_to_uv, fit_texture_rect


class UvEditorView:
	"""Immediate-mode view of every glyph's UV rect on the atlas.

	Each frame:
	1. Draws the atlas scaled to fit the bounds
	2. Converts every record's uv to a screen rect
	3. Gives the selected glyph the drag handles and writes the dragged rect
	   back to the store
	4. Highlights the selected and hovered glyphs (all glyphs with show_all)
	5. Resolves click-to-select on pointer-down
	"""

	def __init__(self, session, drag=None):
		"""
		Args:
			session: FontEditSession the view edits
			drag: DragHandleController (one is created if not given)
		"""
		self._logger = logging.getLogger('UvEditorView')
		self.session = session
		self.drag = drag if drag is not None else DragHandleController(
			on_drag_started=lambda: session.begin_edit("Move UV rect"))
		self.texture_rect = None

	def frame(self, surface, event, bounds) -> bool:
		"""Draw and edit for one frame.

		Args:
			surface: DrawSurface for this frame
			event: PointerEvent of this frame
			bounds: Screen rect available to the view

		Returns:
			True if a record or the selection changed
		"""
		session = self.session
		if draw_empty_state(surface, bounds, session):
			self.texture_rect = None
			return False

		session.ensure_loaded()
		texture = session.get_texture()
		target = fit_texture_rect(bounds, texture.width, texture.height)
		self.texture_rect = target
		surface.draw_texture(target, texture)

		store = session.store
		selection = session.selection
		selection.selected_rect = None
		pointer = event.position
		changed = False
		glyph_rects = []

		for record in store.records:
			ui_rect = uv_to_screen(record.uv, target)

			if record.code_point == selection.selected_code_point:
				selection.selected_rect = ui_rect.copy()
				new_rect = self.drag.process(surface, ui_rect, event)
				if self.drag.is_dragging():
					draw_selection(surface, new_rect, record.rotated)
					if new_rect != ui_rect:
						changed |= store.update(record.code_point, uv=screen_to_uv(new_rect, target))
					ui_rect = new_rect

			if not self.drag.is_dragging():
				is_selected = record.code_point == selection.selected_code_point
				if is_selected or session.show_all or ui_rect.contains(pointer, True):
					draw_selection(surface, ui_rect, record.rotated)

			glyph_rects.append((record.code_point, ui_rect))

		if event.is_down and not self.drag.is_dragging():
			if selection.resolve_click(pointer, glyph_rects):
				self._logger.debug(f"Selected {selection.selected_code_point} from atlas")
				changed = True
		return changed

	def release(self):
		"""End any drag (pointer released outside the view's frames)."""
		self.drag.end_drag()
