"""
FontEdit - Constants and Configuration

This module contains all constant values used throughout the application:
- Default glyph record values (used by Add)
- Grab handle and overlay sizes
- Overlay colors (RGBA, 0-255)
- Window layout and preview defaults
- File naming and persistence settings
"""

# ======================================================================
# DEFAULT GLYPH VALUES
# ======================================================================
# Values given to a newly added character, before the user drags it into place

DEFAULT_GLYPH_UV = (0.375, 0.375, 0.25, 0.25)   # x, y, width, height (unit square)
DEFAULT_GLYPH_VERT = (0.0, 0.0, 50.0, 100.0)    # x, y, width, height (font units)
DEFAULT_GLYPH_ADVANCE = 50.0
DEFAULT_GLYPH_ROTATED = False

# Selection sentinel (no character selected)
NO_SELECTION = -1

# Index returned by lookups when a code point has no record
NOT_FOUND = -1

# ======================================================================
# GRAB HANDLES & OVERLAYS
# ======================================================================

GRAB_BORDER = 4.0           # Thickness of the edge/corner hit strips in pixels
ORIGIN_HANDLE_SIZE = 8.0    # Size of the draggable origin squares in the preview
AXIS_WIDTH = 2.0            # Thickness of axis indicator lines
AXIS_LENGTH = 20.0          # Max length of the axis marks drawn on a selection

# ======================================================================
# OVERLAY COLORS (RGBA)
# ======================================================================

SELECTION_COLOR = (45, 146, 250, 80)
HANDLE_COLOR = (45, 146, 250, 160)     # Selection color at double alpha
AXIS_X_COLOR = (255, 0, 0, 255)
AXIS_Y_COLOR = (0, 255, 0, 255)
ORIGIN_HANDLE_COLOR = (0, 0, 255, 255)
LABEL_COLOR = (220, 220, 220, 255)
CANVAS_BACKGROUND_COLOR = (40, 40, 40, 255)

# ======================================================================
# WINDOW LAYOUT
# ======================================================================

WINDOW_MARGIN = 10.0
DEFAULT_TEST_OFFSET = (30.0, 30.0)    # Preview string origin, relative to the window rect
DEFAULT_VERT_OFFSET = (100.0, 200.0)  # Fallback vert editor origin when not in the preview

# Empty-state messages
NO_FONT_MESSAGE = "No font selected"
NO_TEXTURE_MESSAGE = "The selected font has no main texture"
NO_CHARACTER_MESSAGE = "No character selected"
UNKNOWN_CHARACTER_NAME = "Unknown character"

# ======================================================================
# FILES & PERSISTENCE
# ======================================================================

IMPORTED_FONT_EXTENSIONS = ('.ttf', '.otf')
EDITABLE_FONT_SUFFIX = '.fontsettings.json'
EDITABLE_COPY_TAG = '_copy'

CONFIG_DIR_NAME = '.fontedit'
CONFIG_FILE_NAME = 'config.json'
UNICODE_CACHE_FILE_NAME = 'unicode_names.json'
MAX_RECENT_FILES = 10

# ======================================================================
# UNICODE NAMES
# ======================================================================

UNICODE_DATA_URL = "https://www.unicode.org/Public/UNIDATA/UnicodeData.txt"

# ======================================================================
# HISTORY
# ======================================================================

MAX_HISTORY_ENTRIES = 50
