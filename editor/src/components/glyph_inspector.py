"""Glyph inspector - form view of the selected character.

Shows and edits the selected character's record:
- Character as number and as text, plus its Unicode name
- Add (no record yet) / Delete
- UV rect in atlas coordinates or pixels
- Rotated flag, vert rect, advance
- Test string for the preview
- Apply / Revert (enabled only with unapplied changes)
"""

import logging

from PyQt5.QtWidgets import (
	QWidget, QVBoxLayout, QHBoxLayout, QFormLayout, QGroupBox, QLabel,
	QSpinBox, QDoubleSpinBox, QLineEdit, QPushButton, QCheckBox, QComboBox
)
from PyQt5.QtCore import pyqtSignal

from models.geometry import Rect
from models.edit_session import DisplayUnit
from utils.coordinate_transforms import uv_to_pixels, pixels_to_uv
from constants import NO_FONT_MESSAGE, NO_CHARACTER_MESSAGE


MAX_CODE_POINT = 0x10FFFF


class RectEditor(QWidget):
	"""Four spin boxes (x, y, width, height) editing a Rect.

	The spin boxes round to their display decimals, so the editor keeps the
	last Rect it was given and only replaces the component that was edited.
	"""

	rectChanged = pyqtSignal(object)

	def __init__(self, decimals=4, parent=None):
		super().__init__(parent)
		layout = QHBoxLayout(self)
		layout.setContentsMargins(0, 0, 0, 0)
		self._rect = Rect()
		self.spins = []
		for index, label in enumerate(("X", "Y", "W", "H")):
			spin = QDoubleSpinBox()
			spin.setRange(-1e6, 1e6)
			spin.setDecimals(decimals)
			spin.setPrefix(f"{label} ")
			spin.valueChanged.connect(lambda value, i=index: self._on_value_changed(i, value))
			layout.addWidget(spin)
			self.spins.append(spin)

	def rect(self) -> Rect:
		return self._rect.copy()

	def set_rect(self, rect):
		self._rect = rect.copy()
		for spin, value in zip(self.spins, rect.as_tuple()):
			spin.blockSignals(True)
			spin.setValue(value)
			spin.blockSignals(False)

	def set_decimals(self, decimals):
		for spin in self.spins:
			spin.blockSignals(True)
			spin.setDecimals(decimals)
			spin.blockSignals(False)

	def _on_value_changed(self, index, value):
		values = list(self._rect.as_tuple())
		values[index] = value
		self._rect = Rect(*values)
		self.rectChanged.emit(self.rect())


class GlyphInspector(QWidget):
	"""Inspector panel bound to a FontEditSession.

	Signals:
		glyphsChanged: The inspector changed a record or the selection
		applyRequested: Apply was clicked (the window runs the dialogs)
		revertRequested: Revert was clicked
	"""

	glyphsChanged = pyqtSignal()
	applyRequested = pyqtSignal()
	revertRequested = pyqtSignal()

	def __init__(self, session, names=None, parent=None):
		"""
		Args:
			session: FontEditSession to show
			names: UnicodeNameService for the name line (optional)
		"""
		super().__init__(parent)
		self._logger = logging.getLogger('GlyphInspector')
		self.session = session
		self.names = names
		self._setup_ui()
		self.refresh()

	def _setup_ui(self):
		layout = QVBoxLayout(self)

		self.font_label = QLabel()
		layout.addWidget(self.font_label)

		# Character selection
		char_group = QGroupBox("Character")
		char_form = QFormLayout(char_group)

		self.code_spin = QSpinBox()
		self.code_spin.setRange(0, MAX_CODE_POINT)
		self.code_spin.valueChanged.connect(self._on_code_changed)
		char_form.addRow("Code", self.code_spin)

		self.char_edit = QLineEdit()
		# Two UTF-16 units so characters outside the BMP fit
		self.char_edit.setMaxLength(2)
		self.char_edit.textEdited.connect(self._on_char_edited)
		char_form.addRow("Character", self.char_edit)

		self.name_label = QLabel()
		self.name_label.setWordWrap(True)
		char_form.addRow("Name", self.name_label)

		buttons = QHBoxLayout()
		self.add_button = QPushButton("Add")
		self.add_button.clicked.connect(self._on_add)
		self.delete_button = QPushButton("Delete")
		self.delete_button.clicked.connect(self._on_delete)
		buttons.addWidget(self.add_button)
		buttons.addWidget(self.delete_button)
		char_form.addRow(buttons)
		layout.addWidget(char_group)

		# Glyph metrics
		self.glyph_group = QGroupBox("Glyph")
		glyph_form = QFormLayout(self.glyph_group)

		self.unit_combo = QComboBox()
		self.unit_combo.addItem("Coords", DisplayUnit.COORDS.value)
		self.unit_combo.addItem("Pixels", DisplayUnit.PIXELS.value)
		self.unit_combo.currentIndexChanged.connect(self._on_unit_changed)
		glyph_form.addRow("UV unit", self.unit_combo)

		self.uv_editor = RectEditor()
		self.uv_editor.rectChanged.connect(self._on_uv_changed)
		glyph_form.addRow("UV", self.uv_editor)

		self.rotated_check = QCheckBox("Rotated")
		self.rotated_check.toggled.connect(self._on_rotated_changed)
		glyph_form.addRow(self.rotated_check)

		self.vert_editor = RectEditor(decimals=2)
		self.vert_editor.rectChanged.connect(self._on_vert_changed)
		glyph_form.addRow("Vert", self.vert_editor)

		self.advance_spin = QDoubleSpinBox()
		self.advance_spin.setRange(-1e6, 1e6)
		self.advance_spin.setDecimals(2)
		self.advance_spin.valueChanged.connect(self._on_advance_changed)
		glyph_form.addRow("Advance", self.advance_spin)
		layout.addWidget(self.glyph_group)

		# Preview
		test_form = QFormLayout()
		self.test_edit = QLineEdit()
		self.test_edit.setPlaceholderText("Test string")
		self.test_edit.textChanged.connect(self._on_test_string_changed)
		test_form.addRow("Test", self.test_edit)
		layout.addLayout(test_form)

		layout.addStretch()

		apply_row = QHBoxLayout()
		self.apply_button = QPushButton("Apply")
		self.apply_button.clicked.connect(self.applyRequested.emit)
		self.revert_button = QPushButton("Revert")
		self.revert_button.clicked.connect(self.revertRequested.emit)
		apply_row.addWidget(self.revert_button)
		apply_row.addWidget(self.apply_button)
		layout.addLayout(apply_row)

	# ========================================
	# Refresh from session
	# ========================================

	def refresh(self):
		"""Update every field from the session."""
		session = self.session
		can_edit = session.can_edit()
		self.font_label.setText(session.font.name if can_edit else NO_FONT_MESSAGE)

		code_point = session.selection.selected_code_point
		self.code_spin.blockSignals(True)
		self.code_spin.setValue(max(0, code_point))
		self.code_spin.blockSignals(False)
		if self.char_edit.text() != self._char_text(code_point):
			self.char_edit.setText(self._char_text(code_point))
		self.update_name()

		record = session.selected_record() if can_edit else None
		has_selection = session.selection.has_selection()
		self.add_button.setVisible(can_edit and has_selection and record is None)
		self.delete_button.setVisible(record is not None)

		self.glyph_group.setEnabled(record is not None)
		self.unit_combo.blockSignals(True)
		self.unit_combo.setCurrentIndex(self.unit_combo.findData(session.display_unit.value))
		self.unit_combo.blockSignals(False)
		if record is not None:
			self.uv_editor.set_decimals(1 if self._uses_pixels() else 4)
			self.uv_editor.set_rect(self._uv_for_display(record.uv))
			self.rotated_check.blockSignals(True)
			self.rotated_check.setChecked(record.rotated)
			self.rotated_check.blockSignals(False)
			self.vert_editor.set_rect(record.vert)
			self.advance_spin.blockSignals(True)
			self.advance_spin.setValue(record.advance)
			self.advance_spin.blockSignals(False)

		if self.test_edit.text() != session.test_string:
			self.test_edit.blockSignals(True)
			self.test_edit.setText(session.test_string)
			self.test_edit.blockSignals(False)

		self.apply_button.setEnabled(session.has_changes())
		self.revert_button.setEnabled(session.has_changes())

	def update_name(self):
		"""Refresh the Unicode name line (called as the name service loads)."""
		code_point = self.session.selection.selected_code_point
		if code_point <= 0:
			self.name_label.setText(NO_CHARACTER_MESSAGE)
		elif self.names is None:
			self.name_label.setText("")
		else:
			self.name_label.setText(self.names.display_name(code_point))

	@staticmethod
	def _char_text(code_point):
		return chr(code_point) if 0 < code_point <= MAX_CODE_POINT else ""

	# ========================================
	# Display unit
	# ========================================

	def _uses_pixels(self):
		return self.session.display_unit == DisplayUnit.PIXELS and self.session.has_texture()

	def _uv_for_display(self, uv):
		if self._uses_pixels():
			texture = self.session.get_texture()
			return uv_to_pixels(uv, texture.width, texture.height)
		return uv

	def _uv_from_display(self, rect):
		if self._uses_pixels():
			texture = self.session.get_texture()
			return pixels_to_uv(rect, texture.width, texture.height)
		return rect

	# ========================================
	# Handlers
	# ========================================

	def _on_code_changed(self, value):
		self.session.selection.set_selected_character(value)
		self.refresh()
		self.glyphsChanged.emit()

	def _on_char_edited(self, text):
		if len(text) > 1:
			# One character at a time; keep the last one
			text = text[-1]
			self.char_edit.setText(text)
		self.session.selection.set_selected_character(text)
		self.refresh()
		self.glyphsChanged.emit()

	def _on_add(self):
		self.session.add_selected()
		self.refresh()
		self.glyphsChanged.emit()

	def _on_delete(self):
		self.session.delete_selected()
		self.refresh()
		self.glyphsChanged.emit()

	def _on_unit_changed(self, index):
		self.session.display_unit = DisplayUnit(self.unit_combo.itemData(index))
		self.refresh()

	def _on_uv_changed(self, rect):
		if self.session.update_selected(uv=self._uv_from_display(rect)):
			self._after_edit()

	def _on_vert_changed(self, rect):
		if self.session.update_selected(vert=rect):
			self._after_edit()

	def _on_rotated_changed(self, checked):
		if self.session.update_selected(rotated=checked):
			self._after_edit()

	def _on_advance_changed(self, value):
		if self.session.update_selected(advance=value):
			self._after_edit()

	def _on_test_string_changed(self, text):
		self.session.test_string = text
		self.glyphsChanged.emit()

	def _after_edit(self):
		self.apply_button.setEnabled(True)
		self.revert_button.setEnabled(True)
		self.glyphsChanged.emit()
