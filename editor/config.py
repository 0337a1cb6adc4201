"""Editor-wide constants."""
from __future__ import annotations

# Hex geometry (pointy-top, HEX_SIZE is the circumradius in world pixels)
HEX_SIZE = 70

# Grid extent
DEFAULT_WIDTH = 20
DEFAULT_HEIGHT = 20
GROW_INCREMENT = 5
GROW_MARGIN = 1  # auto-grow when painting within this many hexes of the edge
EXPAND_DEFAULT = 5  # per side, used by the GUI expand shortcut

# Rendering
RENDER_PADDING = 5  # hexes drawn beyond the declared extent on the live canvas
EXPORT_PADDING = 2  # extra hex rows/cols of margin in the exported image
GRID_TOOLS = frozenset({"tile", "feature", "road", "river"})
TOOLS = ("tile", "feature", "road", "river", "hand")

# Viewport
MIN_SCALE = 0.3
MAX_SCALE = 3.0
ZOOM_STEP = 0.1
WHEEL_ZOOM_IN = 1.1
WHEEL_ZOOM_OUT = 0.9
WHEEL_PAN_STEP = 40  # pixels per wheel notch

# Persistence
DOCUMENT_VERSION = "1.0"
DEFAULT_MAP_NAME = "Hex Map"
AUTOSAVE_SLOT = "hexmap-autosave"
AUTOSAVE_DELAY_MS = 1000

# Colours
CANVAS_BG = (249, 250, 251)
EXPORT_BG = (255, 255, 255)
TILE_OUTLINE = (0x55, 0x55, 0x55)
EMPTY_OUTLINE = (0xBB, 0xBB, 0xBB)
EXPORT_TILE_OUTLINE = (0x33, 0x33, 0x33)
EXPORT_EMPTY_OUTLINE = (0xCC, 0xCC, 0xCC)
HIGHLIGHT_PAINT = (0x3B, 0x82, 0xF6)
HIGHLIGHT_ERASE = (0xEF, 0x44, 0x44)
