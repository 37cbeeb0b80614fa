"""Configuration management for FontEdit"""

import os
import json
from PyQt5.QtWidgets import QMessageBox

from models.geometry import Vec2
from models.edit_session import WindowMode, DisplayUnit
from utils.logger import loggerRaise


class ConfigMixin:
	"""Configuration file operations and recent files"""

	def _load_config(self):
		"""Load recent files and editor settings from the config file"""
		try:
			if os.path.exists(self.config_file):
				with open(self.config_file, 'r', encoding='utf-8') as f:
					config = json.load(f)
				self.recent_files = config.get('recent_files', [])
				# Filter out files that no longer exist
				self.recent_files = [f for f in self.recent_files if os.path.exists(f)]
				self._apply_settings(config)
		except Exception as e:
			loggerRaise(e, "Error loading config")

	def _apply_settings(self, config):
		"""Copy persisted editor settings onto the session"""
		session = self.session
		session.test_string = config.get('test_string', session.test_string)
		if 'test_offset' in config:
			session.test_offset = Vec2(*config['test_offset'])
		if 'vert_offset' in config:
			session.vert_offset = Vec2(*config['vert_offset'])
		if 'window_mode' in config:
			session.window_mode = WindowMode(config['window_mode'])
		if 'display_unit' in config:
			session.display_unit = DisplayUnit(config['display_unit'])

	def _save_config(self):
		"""Save recent files and editor settings to the config file"""
		try:
			# Create config directory if it doesn't exist
			os.makedirs(self.config_dir, exist_ok=True)

			session = self.session
			config = {
				'recent_files': self.recent_files[:self.max_recent_files],
				'test_string': session.test_string,
				'test_offset': list(session.test_offset),
				'vert_offset': list(session.vert_offset),
				'window_mode': session.window_mode.value,
				'display_unit': session.display_unit.value,
			}

			with open(self.config_file, 'w', encoding='utf-8') as f:
				json.dump(config, f, indent=2)
		except Exception as e:
			loggerRaise(e, "Error saving config")

	def _add_to_recent_files(self, filepath):
		"""Add a file to the front of the recent files list"""
		filepath = str(filepath)
		if filepath in self.recent_files:
			self.recent_files.remove(filepath)
		self.recent_files.insert(0, filepath)
		self.recent_files = self.recent_files[:self.max_recent_files]

		if hasattr(self, 'recent_menu'):
			self._update_recent_files_menu()
		self._save_config()

	def _update_recent_files_menu(self):
		"""Update the Recent Files submenu"""
		self.recent_menu.clear()

		if not self.recent_files:
			no_recent = self.recent_menu.addAction("No recent files")
			no_recent.setEnabled(False)
		else:
			for filepath in self.recent_files:
				action = self.recent_menu.addAction(os.path.basename(filepath))
				action.setToolTip(filepath)
				action.triggered.connect(lambda checked, f=filepath: self._open_recent_file(f))

			self.recent_menu.addSeparator()
			clear_action = self.recent_menu.addAction("Clear Recent Files")
			clear_action.triggered.connect(self._clear_recent_files)

	def _clear_recent_files(self):
		"""Clear the recent files list"""
		self.recent_files = []
		self._update_recent_files_menu()
		self._save_config()

	def _open_recent_file(self, filepath):
		"""Open a font from the recent files list"""
		if not os.path.exists(filepath):
			QMessageBox.warning(self, "File Not Found", f"The file no longer exists:\n{filepath}")
			self.recent_files.remove(filepath)
			self._update_recent_files_menu()
			self._save_config()
			return
		self.open_font(filepath)
