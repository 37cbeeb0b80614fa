import sys
import os
import argparse
import logging

# Configure logging
logging.basicConfig(
    level=logging.WARNING,  # Only show warnings and errors
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    handlers=[
        logging.StreamHandler(sys.stdout)  # Output to console
    ]
)

# Add editor/src to path so imports work when running directly
if __name__ == "__main__":
    current_dir = os.path.dirname(os.path.abspath(__file__))
    if current_dir not in sys.path:
        sys.path.insert(0, current_dir)

# PyQt5 import/s
from PyQt5 import QtWidgets
from PyQt5.QtWidgets import QMainWindow, QWidget, QHBoxLayout, QSplitter, QMessageBox
from PyQt5.QtCore import Qt, QTimer
from PyQt5.QtGui import QPalette, QColor

# Component imports
from components.font_edit_canvas import FontEditCanvas
from components.glyph_inspector import GlyphInspector

from models.edit_session import FontEditSession

# Utility imports
from utils.history_manager import HistoryManager
from utils.logger import set_main_window

# Service imports
from services.asset_persistence import FileAssetPersistence
from services.unicode_names import UnicodeNameService, NameLookupStatus

# Mixin imports
from window import ConfigMixin, FontMixin, HistoryMixin, MenuMixin

from constants import (
    CONFIG_DIR_NAME, CONFIG_FILE_NAME, UNICODE_CACHE_FILE_NAME,
    MAX_RECENT_FILES, MAX_HISTORY_ENTRIES
)

# How often the Unicode name download is polled (ms)
NAME_POLL_INTERVAL = 200


class FontEditWindow(MenuMixin, ConfigMixin, HistoryMixin, FontMixin, QMainWindow):
    def __init__(self, config_dir=None):
        """
        Args:
            config_dir: Settings directory (default ~/.fontedit)
        """
        super().__init__()
        self.setWindowTitle("FontEdit")
        self.resize(1200, 760)

        # One edit session per window
        self.session = FontEditSession(
            persistence=FileAssetPersistence(),
            history=HistoryManager(max_entries=MAX_HISTORY_ENTRIES),
        )

        # Recent files and settings
        self.recent_files = []
        self.max_recent_files = MAX_RECENT_FILES
        self.config_dir = config_dir or os.path.join(os.path.expanduser("~"), CONFIG_DIR_NAME)
        self.config_file = os.path.join(self.config_dir, CONFIG_FILE_NAME)
        self._load_config()

        # Unicode names download in the background; polled until finished
        self.names = UnicodeNameService(os.path.join(self.config_dir, UNICODE_CACHE_FILE_NAME))
        self.name_timer = QTimer()
        self.name_timer.timeout.connect(self._poll_names)

        # Initialize global logger with main window reference
        set_main_window(self)

        self.setup_ui()
        self._update_menu_actions()
        self.name_timer.start(NAME_POLL_INTERVAL)

    def setup_ui(self):
        self.canvas = FontEditCanvas(self.session)
        self.inspector = GlyphInspector(self.session, self.names)

        self._create_menu_bar()

        central_widget = QWidget()
        self.setCentralWidget(central_widget)
        main_layout = QHBoxLayout(central_widget)
        main_layout.setContentsMargins(0, 0, 0, 0)

        splitter = QSplitter(Qt.Horizontal)
        splitter.addWidget(self.canvas)
        splitter.addWidget(self.inspector)
        splitter.setSizes([860, 340])
        splitter.setCollapsible(0, False)
        main_layout.addWidget(splitter)

        self.canvas.glyphsChanged.connect(self._on_canvas_changed)
        self.inspector.glyphsChanged.connect(self._on_inspector_changed)
        self.inspector.applyRequested.connect(self.apply_changes)
        self.inspector.revertRequested.connect(self.revert_changes)

        self.statusBar().showMessage("Ready")

    def _poll_names(self):
        """Advance the Unicode name download and show its status"""
        self.names.poll()
        self.inspector.update_name()
        if self.names.status() in (NameLookupStatus.READY, NameLookupStatus.ERROR):
            self.name_timer.stop()

    def closeEvent(self, event):
        """Offer to apply unapplied changes, then save settings"""
        if self.session.has_changes():
            result = QMessageBox.question(
                self, "Unapplied changes",
                f"Unapplied changes for '{self.session.font.name}'. Apply them?",
                QMessageBox.Yes | QMessageBox.No | QMessageBox.Cancel, QMessageBox.Yes
            )
            if result == QMessageBox.Cancel:
                event.ignore()
                return
            if result == QMessageBox.Yes:
                self.apply_changes()
        self._save_config()
        event.accept()


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Edit the glyph metrics of a bitmap font atlas")
    parser.add_argument('font', nargs='?', help="Font settings file to open")
    parser.add_argument('-v', '--verbose', action='store_true', help="Enable debug logging")
    return parser.parse_args(argv)


def main(argv=None):
    """Main entry point for FontEdit"""
    args = parse_args(argv)
    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    app = QtWidgets.QApplication(sys.argv[:1])

    # Use Fusion style with dark palette
    app.setStyle("Fusion")

    dark_palette = QPalette()
    dark_palette.setColor(QPalette.Window, QColor(53, 53, 53))
    dark_palette.setColor(QPalette.WindowText, Qt.white)
    dark_palette.setColor(QPalette.Base, QColor(25, 25, 25))
    dark_palette.setColor(QPalette.AlternateBase, QColor(53, 53, 53))
    dark_palette.setColor(QPalette.Text, Qt.white)
    dark_palette.setColor(QPalette.Button, QColor(53, 53, 53))
    dark_palette.setColor(QPalette.ButtonText, Qt.white)
    dark_palette.setColor(QPalette.Highlight, QColor(42, 130, 218))
    dark_palette.setColor(QPalette.HighlightedText, Qt.black)
    app.setPalette(dark_palette)

    window = FontEditWindow()
    if args.font:
        window.open_font(args.font)
    window.show()
    return app.exec_()


if __name__ == "__main__":
    sys.exit(main())
