"""QPainter implementation of the editor draw surface."""

from PyQt5.QtCore import Qt, QRectF
from PyQt5.QtGui import QColor, QTransform

from components.canvas_widgets.draw_surface import DrawSurface, CursorShape
from utils.coordinate_transforms import normalize_rect
from constants import LABEL_COLOR


# Qt cursor for each view cursor affordance
QT_CURSORS = {
	CursorShape.RESIZE_UP_LEFT: Qt.SizeFDiagCursor,
	CursorShape.RESIZE_UP_RIGHT: Qt.SizeBDiagCursor,
	CursorShape.RESIZE_VERTICAL: Qt.SizeVerCursor,
	CursorShape.RESIZE_HORIZONTAL: Qt.SizeHorCursor,
	CursorShape.MOVE_ARROW: Qt.SizeAllCursor,
}


def to_qrectf(rect):
	"""Normalized QRectF covering the same region as rect."""
	r = normalize_rect(rect)
	return QRectF(r.x, r.y, r.width, r.height)


def tex_coords_transform(rect, tex_coords, tex_width, tex_height):
	"""Affine map from atlas image pixels onto the destination rect.

	The UV bottom edge (tex_coords.y) lands on rect.y and the UV top edge on
	rect.y + rect.height, matching uv_to_screen. Mirrored tex coords or
	inverted rects therefore draw mirrored.

	Returns:
		QTransform, or None if the tex coords have zero size
	"""
	if tex_coords.width == 0 or tex_coords.height == 0:
		return None
	sx = rect.width / (tex_width * tex_coords.width)
	dx = rect.x - tex_coords.x * rect.width / tex_coords.width
	sy = -rect.height / (tex_height * tex_coords.height)
	dy = rect.y + (1.0 - tex_coords.y) * rect.height / tex_coords.height
	return QTransform(sx, 0.0, 0.0, sy, dx, dy)


class QPainterSurface(DrawSurface):
	"""Draws a view frame with an active QPainter.

	Cursor rects are collected in draw order; the canvas picks the cursor of
	the last rect under the pointer after painting.
	"""

	def __init__(self, painter):
		self.painter = painter
		self.cursor_rects = []  # [(Rect, CursorShape)]

	def fill_rect(self, rect, color):
		self.painter.fillRect(to_qrectf(rect), QColor(*color))

	def draw_texture(self, rect, texture):
		if texture is None or texture.image is None:
			return
		image = texture.image
		self.painter.drawImage(to_qrectf(rect), image, QRectF(image.rect()))

	def draw_texture_with_tex_coords(self, rect, texture, tex_coords, rotation=0.0, pivot=None):
		if texture is None or texture.image is None:
			return
		mapping = tex_coords_transform(rect, tex_coords, texture.width, texture.height)
		if mapping is None:
			return

		# Source region in image pixels (Y-down)
		source = normalize_rect(tex_coords)
		source_rect = QRectF(
			source.x * texture.width,
			(1.0 - source.y - source.height) * texture.height,
			source.width * texture.width,
			source.height * texture.height,
		)

		self.painter.save()
		if rotation and pivot is not None:
			self.painter.translate(pivot.x, pivot.y)
			self.painter.rotate(rotation)
			self.painter.translate(-pivot.x, -pivot.y)
		self.painter.setTransform(mapping, True)
		self.painter.drawImage(source_rect, texture.image, source_rect)
		self.painter.restore()

	def add_cursor_rect(self, rect, cursor):
		self.cursor_rects.append((rect.copy(), cursor))

	def draw_label(self, rect, text):
		self.painter.save()
		self.painter.setPen(QColor(*LABEL_COLOR))
		font = self.painter.font()
		font.setBold(True)
		self.painter.setFont(font)
		self.painter.drawText(to_qrectf(rect), Qt.AlignCenter, text)
		self.painter.restore()

	def cursor_at(self, point):
		"""Qt cursor shape for point, or None for the default cursor."""
		for rect, cursor in reversed(self.cursor_rects):
			if rect.contains(point):
				return QT_CURSORS[cursor]
		return None
