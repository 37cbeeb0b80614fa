"""Snapshot-based undo/redo stack."""
import logging

from constants import MAX_HISTORY_ENTRIES


class HistoryManager:
    """Keeps (description, state) pairs for undo and redo.

    States are opaque to the manager; the owner captures them before a
    mutation and restores them on undo.
    """

    def __init__(self, max_entries=MAX_HISTORY_ENTRIES):
        self._logger = logging.getLogger('HistoryManager')
        self.max_entries = max_entries
        self._undo_stack = []
        self._redo_stack = []

    def save_state(self, state, description):
        """Record the state as it was before a change.

        Saving a new state invalidates the redo stack.
        """
        self._undo_stack.append((description, state))
        if len(self._undo_stack) > self.max_entries:
            self._undo_stack.pop(0)
        self._redo_stack.clear()
        self._logger.debug(f"Saved state: {description}")

    def undo(self, current_state):
        """Step back one change.

        Args:
            current_state: State to move onto the redo stack

        Returns:
            The state to restore, or None if there is nothing to undo
        """
        if not self._undo_stack:
            return None
        description, state = self._undo_stack.pop()
        self._redo_stack.append((description, current_state))
        self._logger.debug(f"Undo: {description}")
        return state

    def redo(self, current_state):
        """Re-apply the last undone change (see undo)."""
        if not self._redo_stack:
            return None
        description, state = self._redo_stack.pop()
        self._undo_stack.append((description, current_state))
        self._logger.debug(f"Redo: {description}")
        return state

    def can_undo(self) -> bool:
        return bool(self._undo_stack)

    def can_redo(self) -> bool:
        return bool(self._redo_stack)

    def undo_description(self):
        return self._undo_stack[-1][0] if self._undo_stack else None

    def redo_description(self):
        return self._redo_stack[-1][0] if self._redo_stack else None

    def clear(self):
        self._undo_stack.clear()
        self._redo_stack.clear()
