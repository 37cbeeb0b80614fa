"""Undo/redo and change notifications for FontEdit"""


class HistoryMixin:
    """Undo/redo through the session and keeping the UI in sync with edits"""

    def undo(self):
        """Undo the last glyph edit"""
        self.canvas.release_all()
        if self.session.undo():
            self._refresh_all()

    def redo(self):
        """Redo the last undone glyph edit"""
        self.canvas.release_all()
        if self.session.redo():
            self._refresh_all()

    def _on_canvas_changed(self):
        """A view changed a record or the selection"""
        self.inspector.refresh()
        self._update_menu_actions()

    def _on_inspector_changed(self):
        """The inspector changed a record, the selection or the test string"""
        self.canvas.update()
        self._update_menu_actions()

    def _refresh_all(self):
        self.inspector.refresh()
        self.canvas.update()
        self._update_menu_actions()

    def _update_menu_actions(self):
        """Enable actions for the current session state and update the title"""
        history = self.session.history
        self.undo_action.setEnabled(history.can_undo())
        self.redo_action.setEnabled(history.can_redo())
        undo_text = history.undo_description()
        redo_text = history.redo_description()
        self.undo_action.setText(f"&Undo {undo_text}" if undo_text else "&Undo")
        self.redo_action.setText(f"&Redo {redo_text}" if redo_text else "&Redo")

        has_changes = self.session.has_changes()
        self.apply_action.setEnabled(has_changes)
        self.revert_action.setEnabled(has_changes)
        self.save_action.setEnabled(self.session.can_edit())
        self._update_window_title()

    def _update_window_title(self):
        font = self.session.font
        title = "FontEdit"
        if font is not None:
            title = f"FontEdit - {font.name}"
            if self.session.has_changes():
                title += " *"
        self.setWindowTitle(title)
