"""FontEditWindow mixins.

- config_mixin.py: Settings file and recent files
- font_mixin.py: Open / apply / revert / save with their dialogs
- history_mixin.py: Undo/redo and UI refresh after edits
- menu_mixin.py: Menu bar
"""

from .config_mixin import ConfigMixin
from .font_mixin import FontMixin
from .history_mixin import HistoryMixin
from .menu_mixin import MenuMixin

__all__ = ['ConfigMixin', 'FontMixin', 'HistoryMixin', 'MenuMixin']
