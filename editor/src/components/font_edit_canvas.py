"""Canvas widget hosting the glyph editing views.

Every Qt mouse event becomes one input frame (drawn to a NullSurface) and
every paint becomes one repaint frame (drawn with a QPainter) of the view
selected by the session's window mode.
"""

import logging

from PyQt5.QtWidgets import QWidget
from PyQt5.QtCore import Qt, pyqtSignal
from PyQt5.QtGui import QPainter, QColor

from models.geometry import Rect, Vec2
from models.edit_session import WindowMode
from components.pointer_event import PointerEvent, PointerEventType
from components.canvas_widgets import NullSurface, QPainterSurface
from components.glyph_views import UvEditorView, VertEditorView, TestPreviewView
from constants import WINDOW_MARGIN, CANVAS_BACKGROUND_COLOR


class FontEditCanvas(QWidget):
	"""Draws the active view and feeds it pointer input.

	Signals:
		glyphsChanged: A record or the selection was changed by the canvas
	"""

	glyphsChanged = pyqtSignal()

	def __init__(self, session, parent=None):
		super().__init__(parent)
		self._logger = logging.getLogger('FontEditCanvas')
		self.session = session

		self.uv_view = UvEditorView(session)
		self.vert_view = VertEditorView(session)
		self.preview_view = TestPreviewView(session, self.vert_view)

		self.last_pointer = Vec2()
		self._button_down = False

		self.setMouseTracking(True)
		self.setMinimumSize(400, 300)

	def view_bounds(self) -> Rect:
		"""Area the views draw in: the widget minus the margin."""
		return Rect(WINDOW_MARGIN, WINDOW_MARGIN,
		            max(0.0, self.width() - WINDOW_MARGIN * 2.0),
		            max(0.0, self.height() - WINDOW_MARGIN * 2.0))

	def run_frame(self, surface, event) -> bool:
		"""Run the active view for one frame.

		Returns:
			True if the view changed a record or the selection
		"""
		if self.session.window_mode == WindowMode.TEXTURE:
			return self.uv_view.frame(surface, event, self.view_bounds())
		return self.preview_view.frame(surface, event, self.view_bounds())

	def handle_pointer(self, event):
		"""Process one pointer event as an input frame."""
		changed = self.run_frame(NullSurface(), event)
		if event.is_up:
			# Release drags of views that did not see this frame
			self.uv_view.release()
			self.preview_view.release()
		if changed:
			self.glyphsChanged.emit()
		self.update()

	def release_all(self):
		"""Drop any drag in progress (e.g. after undo or a font switch)."""
		self._button_down = False
		self.uv_view.release()
		self.preview_view.release()

	# ========================================
	# Qt events
	# ========================================

	def mousePressEvent(self, event):
		if event.button() != Qt.LeftButton:
			super().mousePressEvent(event)
			return
		position = Vec2(event.localPos().x(), event.localPos().y())
		self.last_pointer = position
		self._button_down = True
		self.handle_pointer(PointerEvent(PointerEventType.DOWN, position))
		event.accept()

	def mouseMoveEvent(self, event):
		position = Vec2(event.localPos().x(), event.localPos().y())
		delta = position - self.last_pointer
		self.last_pointer = position
		event_type = PointerEventType.DRAG if self._button_down else PointerEventType.MOVE
		self.handle_pointer(PointerEvent(event_type, position, delta))
		event.accept()

	def mouseReleaseEvent(self, event):
		if event.button() != Qt.LeftButton:
			super().mouseReleaseEvent(event)
			return
		position = Vec2(event.localPos().x(), event.localPos().y())
		self.last_pointer = position
		self._button_down = False
		self.handle_pointer(PointerEvent(PointerEventType.UP, position))
		event.accept()

	def paintEvent(self, event):
		painter = QPainter(self)
		try:
			painter.setRenderHint(QPainter.SmoothPixmapTransform)
			painter.fillRect(self.rect(), QColor(*CANVAS_BACKGROUND_COLOR))
			surface = QPainterSurface(painter)
			self.run_frame(surface, PointerEvent.repaint(self.last_pointer))
		finally:
			painter.end()

		cursor = surface.cursor_at(self.last_pointer)
		if cursor is None:
			self.unsetCursor()
		else:
			self.setCursor(cursor)
