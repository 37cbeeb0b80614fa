"""Font file operations for FontEdit: open, apply, revert, save"""

import os
import logging

from PyQt5.QtWidgets import QFileDialog, QMessageBox

from models.edit_session import ApplyChoice
from services.font_source import JsonFontAsset
from utils.logger import loggerRaise
from constants import EDITABLE_FONT_SUFFIX

logger = logging.getLogger(__name__)


class FontMixin:
	"""Opening fonts and committing edits, with the confirmation dialogs"""

	def _open_font_dialog(self):
		"""Ask for a font settings file and open it"""
		start_dir = os.path.dirname(self.recent_files[0]) if self.recent_files else ""
		filepath, _ = QFileDialog.getOpenFileName(
			self, "Open Font", start_dir,
			f"Font Settings (*{EDITABLE_FONT_SUFFIX});;All Files (*)"
		)
		if filepath:
			self.open_font(filepath)

	def open_font(self, filepath):
		"""Make the font at filepath the edit target"""
		try:
			font = JsonFontAsset.load(filepath)
		except (OSError, ValueError) as e:
			loggerRaise(e, f"Could not open font:\n{filepath}")
			return
		self.canvas.release_all()
		self.session.set_font(font, confirm_apply=self._confirm_apply)
		self._add_to_recent_files(filepath)
		self._refresh_all()
		logger.info(f"Opened font {font.name}")

	def _confirm_apply(self, font):
		"""Ask whether to apply unapplied changes before switching fonts.

		Applying goes through apply_changes so the file is saved and imported
		fonts get their dialog; the session is told not to apply again.
		"""
		result = QMessageBox.question(
			self, "Unapplied changes",
			f"Unapplied changes for '{font.name}'. Apply them?",
			QMessageBox.Yes | QMessageBox.No, QMessageBox.Yes
		)
		if result == QMessageBox.Yes:
			self.apply_changes()
		return False

	def _choose_imported_action(self, font):
		"""Ask how to apply edits to an imported (generated) font"""
		box = QMessageBox(self)
		box.setWindowTitle("Imported font")
		box.setText(
			f"'{font.name}' is generated from {font.source_font}; re-importing it "
			"will discard your changes. Create an editable copy?"
		)
		copy_button = box.addButton("Create copy", QMessageBox.YesRole)
		box.addButton(QMessageBox.Cancel)
		in_place_button = box.addButton("Apply anyway", QMessageBox.NoRole)
		box.exec_()
		clicked = box.clickedButton()
		if clicked is copy_button:
			return ApplyChoice.CREATE_COPY
		if clicked is in_place_button:
			return ApplyChoice.APPLY_IN_PLACE
		return ApplyChoice.CANCEL

	def apply_changes(self):
		"""Write the edited character table to the font (and its file)"""
		self.canvas.release_all()
		try:
			applied = self.session.apply(choose_imported_action=self._choose_imported_action)
			if applied:
				self.save_font()
		except OSError as e:
			loggerRaise(e, "Error applying changes")
		self._refresh_all()

	def revert_changes(self):
		"""Drop unapplied edits"""
		self.canvas.release_all()
		self.session.revert()
		self.session.history.clear()
		self._refresh_all()

	def save_font(self):
		"""Save the font settings file"""
		font = self.session.font
		if font is None or not hasattr(font, 'save'):
			return
		try:
			font.save()
		except OSError as e:
			loggerRaise(e, f"Error saving font:\n{font.path}")
		self._add_to_recent_files(str(font.path))
		self.statusBar().showMessage(f"Saved {font.path}", 3000)
