"""Menu bar creation and menu action handlers for FontEdit"""

from PyQt5.QtWidgets import QActionGroup

from models.edit_session import WindowMode


class MenuMixin:
    """Menu bar and menu action handlers"""

    def _create_menu_bar(self):
        """Create the menu bar with File, Edit, View menus"""
        menubar = self.menuBar()

        # File Menu
        file_menu = menubar.addMenu("&File")

        open_action = file_menu.addAction("&Open...")
        open_action.setShortcut("Ctrl+O")
        open_action.triggered.connect(self._open_font_dialog)

        # Recent Files submenu
        self.recent_menu = file_menu.addMenu("Recent Files")
        self._update_recent_files_menu()

        file_menu.addSeparator()

        self.apply_action = file_menu.addAction("&Apply")
        self.apply_action.setShortcut("Ctrl+Return")
        self.apply_action.triggered.connect(self.apply_changes)

        self.revert_action = file_menu.addAction("&Revert")
        self.revert_action.triggered.connect(self.revert_changes)

        self.save_action = file_menu.addAction("&Save")
        self.save_action.setShortcut("Ctrl+S")
        self.save_action.triggered.connect(self.save_font)

        file_menu.addSeparator()

        exit_action = file_menu.addAction("E&xit")
        exit_action.setShortcut("Alt+F4")
        exit_action.triggered.connect(self.close)

        # Edit Menu
        edit_menu = menubar.addMenu("&Edit")

        self.undo_action = edit_menu.addAction("&Undo")
        self.undo_action.setShortcut("Ctrl+Z")
        self.undo_action.triggered.connect(self.undo)
        self.undo_action.setEnabled(False)

        self.redo_action = edit_menu.addAction("&Redo")
        self.redo_action.setShortcut("Ctrl+Y")
        self.redo_action.triggered.connect(self.redo)
        self.redo_action.setEnabled(False)

        # View Menu
        view_menu = menubar.addMenu("&View")

        mode_group = QActionGroup(self)
        mode_group.setExclusive(True)

        self.texture_mode_action = view_menu.addAction("&Texture")
        self.texture_mode_action.setShortcut("Ctrl+1")
        self.texture_mode_action.setCheckable(True)
        self.texture_mode_action.triggered.connect(lambda: self._set_window_mode(WindowMode.TEXTURE))
        mode_group.addAction(self.texture_mode_action)

        self.screen_mode_action = view_menu.addAction("&Screen")
        self.screen_mode_action.setShortcut("Ctrl+2")
        self.screen_mode_action.setCheckable(True)
        self.screen_mode_action.triggered.connect(lambda: self._set_window_mode(WindowMode.SCREEN))
        mode_group.addAction(self.screen_mode_action)

        self._sync_window_mode_actions()

        view_menu.addSeparator()

        self.show_all_action = view_menu.addAction("Show &All Glyphs")
        self.show_all_action.setCheckable(True)
        self.show_all_action.setChecked(self.session.show_all)
        self.show_all_action.toggled.connect(self._on_show_all_toggled)

    def _set_window_mode(self, mode):
        """Switch the canvas between the atlas and the preview"""
        self.canvas.release_all()
        self.session.window_mode = mode
        self._sync_window_mode_actions()
        self.canvas.update()
        self._save_config()

    def _sync_window_mode_actions(self):
        self.texture_mode_action.setChecked(self.session.window_mode == WindowMode.TEXTURE)
        self.screen_mode_action.setChecked(self.session.window_mode == WindowMode.SCREEN)

    def _on_show_all_toggled(self, checked):
        self.session.show_all = checked
        self.canvas.update()
